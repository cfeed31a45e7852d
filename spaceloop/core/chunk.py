"""
WorkChunk (FINAL / FROZEN)

A named (precondition, action) pair.

Contract:
- precondition(view) -> bool
    pure, safe to call every pass
- action(view) -> Sequence[Fact] | None
    only called right after its own precondition held

With `state` set, both callables receive (view, state); the same
object every call. The engine never looks inside it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from spaceloop.core.fact import Fact
from spaceloop.utils.errors import ChunkContractError

View = Sequence[Fact]
Precondition = Callable[..., bool]
Action = Callable[..., Optional[Sequence[Fact]]]


@dataclass(frozen=True)
class WorkChunk:
    name: str
    precondition: Precondition
    action: Action
    state: Any = None

    def holds(self, view: View) -> bool:
        if self.state is None:
            return bool(self.precondition(view))
        return bool(self.precondition(view, self.state))

    def fire(self, view: View) -> list[Fact]:
        if self.state is None:
            produced = self.action(view)
        else:
            produced = self.action(view, self.state)
        return _validate_output(self.name, produced)


def _validate_output(chunk: str, produced) -> list[Fact]:
    if produced is None:
        return []
    if isinstance(produced, (Fact, str, bytes)) or not hasattr(produced, "__iter__"):
        raise ChunkContractError(
            f"chunk {chunk!r} must return a sequence of Fact, got {type(produced).__name__}"
        )

    facts = list(produced)
    for item in facts:
        if not isinstance(item, Fact):
            raise ChunkContractError(
                f"chunk {chunk!r} returned non-Fact item {item!r}"
            )
    return facts
