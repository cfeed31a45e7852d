#!filepath: spaceloop/utils/errors.py
class SpaceLoopError(RuntimeError):
    """Base class for engine errors."""


class InvalidTrivalentError(SpaceLoopError, ValueError):
    """
    Raised when a fact is built with a truth flag outside
    True / False / Undecided.
    """


class ChunkContractError(SpaceLoopError, TypeError):
    """
    Raised when a chunk action returns something other than
    a sequence of Fact records (or None).
    Fatal to the run, like any other chunk failure.
    """


class UserInputError(SpaceLoopError):
    """
    Raised for invalid user-provided config (budgets, ranges, etc).
    Should NOT print traceback.
    """
