#!filepath: spaceloop/units/fibonacci.py
"""
FibonacciGenerator unit.

Fact schema (produced):
- FibRange    : value = (low, high)
- FibSequence : value = tuple[int, ...], the full sequence so far
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from spaceloop import logs
from spaceloop.core import ExecutionUnit, Fact, Trivalent, WorkChunk

FIB_RANGE = "FibRange"
FIB_SEQUENCE = "FibSequence"


@dataclass
class FibonacciState:
    # GetRange 的目标值（构造时给定，action 生效）
    target_range: tuple[int, int] = (1, 100)
    target_delay: float = 0.0

    fib_range: Optional[tuple[int, int]] = None
    delay: float = 0.0
    sequence: List[int] = field(default_factory=list)

    def next_value(self) -> int:
        if len(self.sequence) < 2:
            return 1
        return self.sequence[-1] + self.sequence[-2]


# -------------------------
# GetRange
# -------------------------
def _range_unset(view: Sequence[Fact], state: FibonacciState) -> bool:
    return state.fib_range is None


def _set_range(view: Sequence[Fact], state: FibonacciState) -> list[Fact]:
    state.fib_range = state.target_range
    state.delay = state.target_delay
    logs.info(f"[FibonacciGenerator] range set to {list(state.fib_range)}")
    return [Fact(FIB_RANGE, tuple(state.fib_range), Trivalent.TRUE)]


# -------------------------
# GenerateFib
# -------------------------
def _has_room(view: Sequence[Fact], state: FibonacciState) -> bool:
    if state.fib_range is None:
        return False
    if len(state.sequence) < 2:
        return True
    return state.next_value() <= state.fib_range[1]


def _generate(view: Sequence[Fact], state: FibonacciState) -> list[Fact]:
    if state.delay:
        time.sleep(state.delay)

    state.sequence.append(state.next_value())
    logs.info(
        f"[FibonacciGenerator] generated {state.sequence[-1]} sequence={state.sequence}"
    )
    return [Fact(FIB_SEQUENCE, tuple(state.sequence), Trivalent.TRUE)]


def create_fibonacci_unit(
    range_: tuple[int, int] = (1, 100),
    delay: float = 0.0,
) -> ExecutionUnit:
    """
    GetRange 先于 GenerateFib：同一 pass 内 range 生效后才开始生成。
    生成在下一项超过 range 上限时停止。
    """
    state = FibonacciState(target_range=tuple(range_), target_delay=delay)
    return ExecutionUnit(
        name="FibonacciGenerator",
        chunks=[
            WorkChunk("GetRange", _range_unset, _set_range, state),
            WorkChunk("GenerateFib", _has_room, _generate, state),
        ],
    )
