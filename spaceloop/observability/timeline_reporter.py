#!filepath: spaceloop/observability/timeline_reporter.py
from typing import Dict
from spaceloop import logs


class TimelineReporter:
    """
    Run Timeline 报告：
    - unit/chunk → 累计 action 耗时秒数
    """

    def __init__(self, timeline: Dict[str, float], label: str):
        self.timeline = timeline
        self.label = label

    def print(self):
        logs.info(f"[Timeline] ===== Run timeline for {self.label} =====")

        total = 0.0
        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {str(name):<40} {sec:>8.3f}s")
            total += sec

        logs.info(f"[Timeline] Total{'':<37} {total:>8.3f}s")
        logs.info("[Timeline] ===========================================")
