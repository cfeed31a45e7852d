# tests/conftest.py
from __future__ import annotations

from typing import Callable

import pytest
from loguru import logger

from spaceloop.core import ExecutionUnit, Fact, WorkChunk


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture
def capture_logs():
    captured: list[str] = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="DEBUG")
    yield captured
    logger.remove(sink_id)


class FakeClock:
    """手动推进的单调时钟"""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


# ============================================================
# chunk helpers
# ============================================================
def _once(name: str, *facts: Fact) -> WorkChunk:
    """只 fire 一次的 chunk，产出给定 facts"""
    fired = {"n": 0}

    def pre(view):
        return fired["n"] == 0

    def act(view):
        fired["n"] += 1
        return list(facts)

    return WorkChunk(name, pre, act)


def _when_seen(name: str, needed: str, *facts: Fact) -> WorkChunk:
    """view 中出现 `needed` 后 fire 一次"""
    fired = {"n": 0}

    def pre(view):
        return fired["n"] == 0 and any(f.matches(needed) for f in view)

    def act(view):
        fired["n"] += 1
        return list(facts)

    return WorkChunk(name, pre, act)


@pytest.fixture
def once():
    return _once


@pytest.fixture
def when_seen():
    return _when_seen


@pytest.fixture
def make_unit() -> Callable[..., ExecutionUnit]:
    def _make(name: str, *chunks: WorkChunk) -> ExecutionUnit:
        return ExecutionUnit(name=name, chunks=list(chunks))

    return _make
