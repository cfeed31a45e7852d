from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, List

from spaceloop.core.fact import Fact


class SharedFactPool:
    """
    Run-scoped, append-only fact pool.

    The lock is held for a whole unit sweep (see `sweep()`), not per
    append; `snapshot()` takes the same lock so outside readers only
    ever observe between-sweep states.
    """

    def __init__(self, facts: Iterable[Fact] = ()):
        self._facts: List[Fact] = list(facts)
        self._lock = threading.Lock()

    @contextmanager
    def sweep(self) -> Iterator["_SweepHandle"]:
        with self._lock:
            yield _SweepHandle(self._facts)

    def snapshot(self) -> tuple[Fact, ...]:
        with self._lock:
            return tuple(self._facts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._facts)


class _SweepHandle:
    """Access to the pool while its lock is held."""

    def __init__(self, facts: List[Fact]):
        self._facts = facts

    @property
    def facts(self) -> tuple[Fact, ...]:
        return tuple(self._facts)

    def append(self, facts: Iterable[Fact]) -> None:
        self._facts.extend(facts)
