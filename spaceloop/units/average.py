#!filepath: spaceloop/units/average.py
"""
AverageCalculator unit.

Consumes FibSequence (latest in view), produces:
- Average             : value = float
- LastCalculatedCount : value = int
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from spaceloop import logs
from spaceloop.core import ExecutionUnit, Fact, Trivalent, WorkChunk, find_last
from spaceloop.units.fibonacci import FIB_SEQUENCE

AVERAGE = "Average"
LAST_CALCULATED_COUNT = "LastCalculatedCount"


@dataclass
class AverageState:
    last_calculated_count: int = 0
    average: Optional[float] = None


def latest_sequence(view: Sequence[Fact]) -> tuple[int, ...]:
    """最新的 FibSequence；payload 形状不对时视为空。"""
    fact = find_last(view, FIB_SEQUENCE)
    if fact is None or not isinstance(fact.value, (list, tuple)):
        return ()
    if not all(isinstance(v, int) for v in fact.value):
        return ()
    return tuple(fact.value)


def _sequence_grew(view: Sequence[Fact], state: AverageState) -> bool:
    return len(latest_sequence(view)) > state.last_calculated_count


def _calculate(view: Sequence[Fact], state: AverageState) -> Optional[list[Fact]]:
    seq = latest_sequence(view)
    if not seq:
        return None

    state.average = sum(seq) / len(seq)
    state.last_calculated_count = len(seq)
    logs.info(
        f"[AverageCalculator] count={len(seq)} average={state.average:.2f}"
    )
    return [
        Fact(AVERAGE, state.average, Trivalent.TRUE),
        Fact(LAST_CALCULATED_COUNT, state.last_calculated_count, Trivalent.TRUE),
    ]


def create_average_unit() -> ExecutionUnit:
    state = AverageState()
    return ExecutionUnit(
        name="AverageCalculator",
        chunks=[WorkChunk("CalculateAverage", _sequence_grew, _calculate, state)],
    )
