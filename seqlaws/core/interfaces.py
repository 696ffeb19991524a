from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

from seqlaws.utils.errors import NavigationError

P = TypeVar("P")  # position
E = TypeVar("E")  # element


class OnePassSequence(ABC, Generic[E]):
    """
    能力 0：一次性迭代

    - 只承诺 __iter__
    - 迭代器耗尽后必须一直耗尽（StopIteration in perpetuity）
    """

    @abstractmethod
    def __iter__(self) -> Iterator[E]:
        raise NotImplementedError


class ForwardCollection(OnePassSequence[E], Generic[P, E]):
    """
    能力 1：前向位置集合

    必须实现：
      - start_index / end_index
      - __getitem__(position)
      - index_after(position)

    默认实现（线性，可被覆写）：
      - index_offset / index_offset_limited / distance
      - indices / __iter__ / __len__
    """

    # --------------------------------------------------
    # Required
    # --------------------------------------------------
    @property
    @abstractmethod
    def start_index(self) -> P:
        raise NotImplementedError

    @property
    @abstractmethod
    def end_index(self) -> P:
        raise NotImplementedError

    @abstractmethod
    def __getitem__(self, i: P) -> E:
        raise NotImplementedError

    @abstractmethod
    def index_after(self, i: P) -> P:
        raise NotImplementedError

    # --------------------------------------------------
    # Navigation defaults (O(n))
    # --------------------------------------------------
    def index_offset(self, i: P, n: int) -> P:
        if n < 0:
            raise NavigationError(
                f"{type(self).__name__} is forward-only; cannot offset by {n}"
            )
        for _ in range(n):
            i = self.index_after(i)
        return i

    def index_offset_limited(self, i: P, n: int, limit: P) -> Optional[P]:
        """
        返回 i 前进 n 步的位置；途中越过 limit 则返回 None。

        limit 只在前进方向上生效；恰好落在 limit 上不算越过。
        """
        if n < 0:
            raise NavigationError(
                f"{type(self).__name__} is forward-only; cannot offset by {n}"
            )
        for _ in range(n):
            if i == limit:
                return None
            i = self.index_after(i)
        return i

    def distance(self, i: P, j: P) -> int:
        if j < i:
            raise NavigationError(
                f"{type(self).__name__} is forward-only; cannot measure backwards"
            )
        n = 0
        while i != j:
            i = self.index_after(i)
            n += 1
        return n

    # --------------------------------------------------
    # Derived views
    # --------------------------------------------------
    @property
    def indices(self) -> Iterator[P]:
        i = self.start_index
        end = self.end_index
        while i != end:
            yield i
            i = self.index_after(i)

    def __iter__(self) -> Iterator[E]:
        for i in self.indices:
            yield self[i]

    def __len__(self) -> int:
        return self.distance(self.start_index, self.end_index)

    @property
    def is_empty(self) -> bool:
        return self.start_index == self.end_index


class BidirectionalCollection(ForwardCollection[P, E]):
    """
    能力 2：双向集合

    - 新增 index_before，必须是 index_after 的精确逆
    - 负 offset / 反向 distance 通过 index_before 实现
    """

    @abstractmethod
    def index_before(self, i: P) -> P:
        raise NotImplementedError

    def index_offset(self, i: P, n: int) -> P:
        if n >= 0:
            return super().index_offset(i, n)
        for _ in range(-n):
            i = self.index_before(i)
        return i

    def index_offset_limited(self, i: P, n: int, limit: P) -> Optional[P]:
        if n >= 0:
            return super().index_offset_limited(i, n, limit)
        for _ in range(-n):
            if i == limit:
                return None
            i = self.index_before(i)
        return i

    def distance(self, i: P, j: P) -> int:
        if i <= j:
            return super().distance(i, j)
        n = 0
        while i != j:
            i = self.index_before(i)
            n -= 1
        return n


class RandomAccessCollection(BidirectionalCollection[P, E]):
    """
    能力 3：随机访问集合

    index_offset / distance 必须是 O(1)（不得分解为单步）。
    index_offset_limited 只借助这两个操作实现。
    """

    @abstractmethod
    def index_offset(self, i: P, n: int) -> P:
        raise NotImplementedError

    @abstractmethod
    def distance(self, i: P, j: P) -> int:
        raise NotImplementedError

    def index_offset_limited(self, i: P, n: int, limit: P) -> Optional[P]:
        d = self.distance(i, limit)
        if n > 0 and 0 <= d < n:
            return None
        if n < 0 and n < d <= 0:
            return None
        return self.index_offset(i, n)


class MutableCollection(ForwardCollection[P, E]):
    """
    能力 4：可变集合

    - __setitem__ 替换某位置的值
    - 不改变位置集合（indices 不变）
    """

    @abstractmethod
    def __setitem__(self, i: P, value: E) -> None:
        raise NotImplementedError
