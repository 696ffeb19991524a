#!filepath: seqlaws/observability/ledger.py
from dataclasses import dataclass
from typing import Dict

from seqlaws import logs


@dataclass
class OperationCounts:
    """
    单步操作计数（共享存储）

    - 是可变对象：包装器的所有副本引用同一个实例
    - index_after  : index_after() 调用次数
    - index_before : index_before() 调用次数
    """

    index_after: int = 0
    index_before: int = 0

    def reset(self) -> None:
        self.index_after = 0
        self.index_before = 0
        logs.debug("[Ledger] reset")

    @property
    def total(self) -> int:
        return self.index_after + self.index_before

    def snapshot(self) -> Dict[str, int]:
        return {"index_after": self.index_after, "index_before": self.index_before}
