#!filepath: spaceloop/workflows/space_loop_demo.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from spaceloop import logs
from spaceloop.config import AppConfig
from spaceloop.core import ExecutionUnit
from spaceloop.scheduler import RunResult, Scheduler
from spaceloop.units import create_average_unit, create_fibonacci_unit


@dataclass(frozen=True)
class DemoOutcome:
    result: RunResult
    sequence: tuple[int, ...]
    average: Optional[float]


def build_demo_units(cfg: AppConfig) -> list[ExecutionUnit]:
    """
    Fibonacci → Average，注册顺序即执行顺序
    """
    return [
        create_fibonacci_unit(range_=cfg.demo.fib_range, delay=cfg.demo.delay_seconds),
        create_average_unit(),
    ]


def run_demo(cfg: AppConfig | None = None) -> DemoOutcome:
    cfg = cfg or AppConfig.load()

    fib, avg = build_demo_units(cfg)
    scheduler = Scheduler.from_config(cfg.scheduler)

    logs.info("[Demo] starting space loop")
    result = scheduler.start([fib, avg], cfg.scheduler.budget).join()
    logs.info(f"[Demo] space loop finished reason={result.reason.value}")

    fib_state = fib.chunks[0].state
    avg_state = avg.chunks[0].state
    return DemoOutcome(
        result=result,
        sequence=tuple(fib_state.sequence),
        average=avg_state.average,
    )
