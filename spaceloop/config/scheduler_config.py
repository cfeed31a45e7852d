#!filepath: spaceloop/config/scheduler_config.py
from datetime import timedelta

from pydantic import BaseModel, Field


class SchedulerConfig(BaseModel):
    budget_seconds: float = Field(default=12.0, ge=0, allow_inf_nan=False)
    # 每次 activation / 终止原因各一行日志
    trace: bool = True
    # 按 chunk 累计 action 耗时
    instrument: bool = False

    @property
    def budget(self) -> timedelta:
        return timedelta(seconds=self.budget_seconds)
