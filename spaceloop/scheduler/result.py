#!filepath: spaceloop/scheduler/result.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from spaceloop.core.fact import Fact


class Termination(str, Enum):
    FIXPOINT = "fixpoint"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class RunResult:
    """
    一次 run 的结果。

    - reason       : FIXPOINT（收敛）/ TIMEOUT（预算耗尽），两者都不是错误
    - passes       : 完整 pass 次数（含最后一次）
    - activations  : precondition 成立的总次数
    - elapsed      : wall-clock 秒数
    - facts        : 退出时 shared pool 的快照
    """

    reason: Termination
    passes: int
    activations: int
    elapsed: float
    facts: tuple[Fact, ...] = ()

    @property
    def converged(self) -> bool:
        return self.reason is Termination.FIXPOINT
