from .result import RunResult, Termination
from .space_loop import RunHandle, Scheduler, space_loop

__all__ = ["RunResult", "Termination", "RunHandle", "Scheduler", "space_loop"]
