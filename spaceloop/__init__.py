#!filepath: spaceloop/__init__.py

__version__ = "0.1.0"

from .utils.logger import Logging, logs, init_logging
from .config.app_config import AppConfig

from .core import (
    Fact,
    Trivalent,
    WorkChunk,
    ExecutionUnit,
    SharedFactPool,
    in_sync,
    find_last,
)
from .scheduler import RunResult, Termination, Scheduler, space_loop

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig",
    "Fact", "Trivalent", "WorkChunk", "ExecutionUnit", "SharedFactPool",
    "in_sync", "find_last",
    "RunResult", "Termination", "Scheduler", "space_loop",
]
