from .fact import Fact, Trivalent, facts_named, find_first, find_last, normalize_name
from .chunk import WorkChunk
from .unit import ExecutionUnit
from .pool import SharedFactPool
from .sync import in_sync

__all__ = [
    "Fact", "Trivalent",
    "facts_named", "find_first", "find_last", "normalize_name",
    "WorkChunk",
    "ExecutionUnit",
    "SharedFactPool",
    "in_sync",
]
