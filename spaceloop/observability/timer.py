#!filepath: spaceloop/observability/timer.py
import time
from typing import Callable, Dict


class Timer:
    """
    命名计时器（时钟可注入）
    - start(name)
    - elapsed(name) → 已耗时秒数，不停止
    - end(name)     → 停止并返回耗时秒数

    Scheduler 用它衡量 wall-clock budget；测试可注入假时钟。
    """

    def __init__(
        self,
        enabled: bool = True,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.enabled = enabled
        self.clock = clock
        self._start: Dict[str, float] = {}

    def start(self, name: str):
        if not self.enabled:
            return
        self._start[name] = self.clock()

    def elapsed(self, name: str) -> float:
        if not self.enabled or name not in self._start:
            return 0.0
        return self.clock() - self._start[name]

    def end(self, name: str) -> float:
        if not self.enabled or name not in self._start:
            return 0.0
        return self.clock() - self._start.pop(name)
