#!filepath: spaceloop/scheduler/space_loop.py
from __future__ import annotations

import math
import threading
import time
from datetime import timedelta
from typing import Callable, Optional, Sequence, Union

from spaceloop import logs
from spaceloop.config.scheduler_config import SchedulerConfig
from spaceloop.core.pool import SharedFactPool
from spaceloop.core.unit import ExecutionUnit
from spaceloop.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from spaceloop.observability.timer import Timer
from spaceloop.scheduler.result import RunResult, Termination
from spaceloop.utils.errors import UserInputError

Budget = Union[timedelta, float, int]


class Scheduler:
    """
    Scheduler = poll-to-fixpoint 驱动器（单 worker）

    一次 pass：
      - unit 按注册顺序；每个 unit 整个 sweep 期间持有 pool 锁
      - chunk 按注册顺序；view = shared pool ++ unit.private_log
      - precondition 成立即算 activation（无论 action 是否产出 fact）
      - 产出的 fact 按顺序同时追加到 pool 和 private_log

    终止：
      - 一次 pass 无 activation → FIXPOINT
      - 否则 elapsed >= budget → TIMEOUT
      两者都是正常返回；chunk 抛出的异常原样向上传播，run 结束。
    """

    def __init__(
        self,
        *,
        pool: SharedFactPool | None = None,
        clock: Callable[[], float] = time.monotonic,
        trace: bool = True,
        inst: Instrumentation | None = None,
    ):
        self.pool = pool
        self.clock = clock
        self.trace = trace
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @classmethod
    def from_config(cls, cfg: SchedulerConfig, **kwargs) -> "Scheduler":
        kwargs.setdefault("trace", cfg.trace)
        if cfg.instrument:
            kwargs.setdefault("inst", Instrumentation(enabled=True))
        return cls(**kwargs)

    # --------------------------------------------------
    # run（同步）
    # --------------------------------------------------
    def run(self, units: Sequence[ExecutionUnit], budget: Budget) -> RunResult:
        limit = _budget_seconds(budget)
        units = list(units)
        pool = self.pool if self.pool is not None else SharedFactPool()

        watch = Timer(clock=self.clock)
        watch.start("run")

        passes = 0
        total = 0
        self._log(f"[SpaceLoop] start units={[u.name for u in units]} budget={limit:.3f}s")

        while True:
            passes += 1
            activated = 0
            for unit in units:
                activated += self._sweep(unit, pool)
            total += activated

            if not activated:
                reason = Termination.FIXPOINT
                break
            if watch.elapsed("run") >= limit:
                reason = Termination.TIMEOUT
                break

        elapsed = watch.end("run")
        result = RunResult(
            reason=reason,
            passes=passes,
            activations=total,
            elapsed=elapsed,
            facts=pool.snapshot(),
        )

        self.inst.metrics.record("passes", passes)
        self.inst.metrics.record("activations", total)
        self.inst.generate_timeline_report(reason.value)

        if reason is Termination.FIXPOINT:
            self._log(f"[SpaceLoop] fixpoint reached passes={passes} elapsed={elapsed:.3f}s")
        else:
            self._log(f"[SpaceLoop] budget exhausted passes={passes} elapsed={elapsed:.3f}s")
        return result

    # --------------------------------------------------
    # start（后台 worker + join）
    # --------------------------------------------------
    def start(self, units: Sequence[ExecutionUnit], budget: Budget) -> "RunHandle":
        # validate on the caller's thread
        _budget_seconds(budget)
        handle = RunHandle(self, list(units), budget)
        handle._thread.start()
        return handle

    # --------------------------------------------------
    # one unit sweep, lock held throughout
    # --------------------------------------------------
    def _sweep(self, unit: ExecutionUnit, pool: SharedFactPool) -> int:
        activated = 0
        with pool.sweep() as shared:
            for chunk in unit.chunks:
                try:
                    if not chunk.holds(unit.view(shared.facts)):
                        continue
                    activated += 1
                    with self.inst.timer(f"{unit.name}/{chunk.name}"):
                        produced = chunk.fire(unit.view(shared.facts))
                except Exception:
                    logs.exception(f"[SpaceLoop] chunk failed unit={unit.name} chunk={chunk.name}")
                    raise

                if produced:
                    shared.append(produced)
                    unit.record(produced)

                self.inst.metrics.incr(f"{unit.name}/{chunk.name}")
                self._log(
                    f"[SpaceLoop] activate unit={unit.name} chunk={chunk.name} "
                    f"produced={[f.name for f in produced]}"
                )
        return activated

    def _log(self, msg: str) -> None:
        if self.trace:
            logs.info(msg)


class RunHandle:
    """后台 run 的句柄：join() 阻塞直到 run 结束，并重新抛出 run 中的异常。"""

    def __init__(self, scheduler: Scheduler, units: list[ExecutionUnit], budget: Budget):
        self._result: Optional[RunResult] = None
        self._error: Optional[BaseException] = None
        self._thread = threading.Thread(
            target=self._target,
            args=(scheduler, units, budget),
            name="space-loop",
            daemon=True,
        )

    def _target(self, scheduler: Scheduler, units: list[ExecutionUnit], budget: Budget) -> None:
        try:
            self._result = scheduler.run(units, budget)
        except BaseException as exc:
            self._error = exc

    def done(self) -> bool:
        return not self._thread.is_alive()

    def join(self, timeout: float | None = None) -> RunResult:
        self._thread.join(timeout)
        if self._thread.is_alive():
            raise TimeoutError("space loop still running")
        if self._error is not None:
            raise self._error
        return self._result


def space_loop(units: Sequence[ExecutionUnit], budget: Budget, **kwargs) -> RunResult:
    """Run `units` on a fresh Scheduler."""
    return Scheduler(**kwargs).run(units, budget)


def _budget_seconds(budget: Budget) -> float:
    if isinstance(budget, timedelta):
        seconds = budget.total_seconds()
    elif isinstance(budget, (int, float)) and not isinstance(budget, bool):
        seconds = float(budget)
    else:
        raise UserInputError(f"budget must be timedelta or seconds, got {budget!r}")

    if math.isnan(seconds) or seconds < 0:
        raise UserInputError(f"budget must be >= 0, got {seconds}")
    return seconds
