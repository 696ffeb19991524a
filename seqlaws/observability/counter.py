#!filepath: seqlaws/observability/counter.py
from __future__ import annotations

import copy
from typing import Iterator, Optional, TypeVar

from seqlaws.core.interfaces import RandomAccessCollection
from seqlaws.observability.ledger import OperationCounts

P = TypeVar("P")
E = TypeVar("E")


class RandomAccessOperationCounter(RandomAccessCollection[P, E]):
    """
    包装任意 RandomAccessCollection，统计单步操作次数。

    用途：
      验证“条件满足 random access 的泛型适配器”确实提供 O(1) 导航，
      而不是把 offset / distance 分解为 index_after / index_before。

    铁律：
      - 只有 index_after / index_before 计数，其余操作原样委托
      - copy.copy / copy.deepcopy 得到的副本共享同一个 OperationCounts
    """

    def __init__(
        self,
        base: RandomAccessCollection[P, E],
        operation_counts: Optional[OperationCounts] = None,
    ):
        self.base = base
        self.operation_counts = (
            operation_counts if operation_counts is not None else OperationCounts()
        )

    # --------------------------------------------------
    # Bounds / access（委托）
    # --------------------------------------------------
    @property
    def start_index(self) -> P:
        return self.base.start_index

    @property
    def end_index(self) -> P:
        return self.base.end_index

    def __getitem__(self, i: P) -> E:
        return self.base[i]

    def __len__(self) -> int:
        return len(self.base)

    def __iter__(self) -> Iterator[E]:
        return iter(self.base)

    # --------------------------------------------------
    # Single steps（计数）
    # --------------------------------------------------
    def index_after(self, i: P) -> P:
        self.operation_counts.index_after += 1
        return self.base.index_after(i)

    def index_before(self, i: P) -> P:
        self.operation_counts.index_before += 1
        return self.base.index_before(i)

    # --------------------------------------------------
    # Bulk navigation（委托，不计数）
    # --------------------------------------------------
    def index_offset(self, i: P, n: int) -> P:
        return self.base.index_offset(i, n)

    def index_offset_limited(self, i: P, n: int, limit: P) -> Optional[P]:
        return self.base.index_offset_limited(i, n, limit)

    def distance(self, i: P, j: P) -> int:
        return self.base.distance(i, j)

    # --------------------------------------------------
    # Copy semantics: ledger is shared, never cloned
    # --------------------------------------------------
    def __copy__(self) -> "RandomAccessOperationCounter[P, E]":
        return type(self)(self.base, self.operation_counts)

    def __deepcopy__(self, memo) -> "RandomAccessOperationCounter[P, E]":
        return type(self)(copy.deepcopy(self.base, memo), self.operation_counts)

    def __repr__(self) -> str:
        return (
            f"RandomAccessOperationCounter({self.base!r}, "
            f"counts={self.operation_counts.snapshot()})"
        )
