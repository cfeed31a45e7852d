from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from spaceloop.core.chunk import WorkChunk
from spaceloop.core.fact import Fact


@dataclass
class ExecutionUnit:
    """
    ExecutionUnit = 有序 chunk 列表 + 私有 intention loop

    设计原则：
    - chunk 顺序由调用方决定，运行期不变
    - private_log 只由 Scheduler 追加（持锁期间）
    - private_log 只出现在本 unit 自己的 view 中
    """

    name: str
    chunks: Sequence[WorkChunk] = field(default_factory=tuple)
    private_log: List[Fact] = field(default_factory=list)

    def __post_init__(self):
        self.chunks = tuple(self.chunks)

    def view(self, shared: Iterable[Fact]) -> tuple[Fact, ...]:
        """shared pool ++ private log, in that order."""
        return tuple(shared) + tuple(self.private_log)

    def record(self, facts: Iterable[Fact]) -> None:
        self.private_log.extend(facts)
