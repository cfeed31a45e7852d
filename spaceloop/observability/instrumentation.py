#!filepath: spaceloop/observability/instrumentation.py
from __future__ import annotations

from dataclasses import dataclass
from contextlib import contextmanager
from collections import OrderedDict
from typing import Dict

from spaceloop.observability.timer import Timer
from spaceloop.observability.metrics import MetricRecorder
from spaceloop.observability.timeline_reporter import TimelineReporter


@dataclass
class Instrumentation:
    """
    Run 级 Instrumentation。

    设计铁律：
    1. Timeline 按名称累计（同一 chunk 每次 fire 叠加耗时）
    2. record=False 的 timer 只定义时间边界，不产生任何副作用
    3. Instrumentation 本身不在热路径打日志
    4. 是否启用不改变引擎行为
    """

    enabled: bool = True

    def __post_init__(self):
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[name, accumulated_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    # ---------------------------------------------------------
    # Context Manager Timer（唯一入口）
    # ---------------------------------------------------------
    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        Parameters
        ----------
        name : str
            计时名称
        record : bool
            - True  : 累计到 timeline
            - False : 父级 scope，仅定义 wall-time
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline[name] = inst.timeline.get(name, 0.0) + elapsed

        return _ctx()

    # ---------------------------------------------------------
    # Timeline 输出（冷路径）
    # ---------------------------------------------------------
    def generate_timeline_report(self, label: str):
        if not self.enabled:
            return
        TimelineReporter(self.timeline, label).print()


# -------------------------------------------------------------
# No-op Instrumentation（禁用 observability）
# -------------------------------------------------------------
class NoOpInstrumentation:
    """Instrumentation disabled 时使用。"""

    def __init__(self):
        self.metrics = MetricRecorder(enabled=False)
        self.timeline: Dict[str, float] = {}

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def generate_timeline_report(self, label: str):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
