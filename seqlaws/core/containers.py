#!filepath: seqlaws/core/containers.py
"""
Reference containers used by the CLI demo and by the test-suite.

- ArrayCollection      : random access + mutable, int positions
- LinkedCollection     : forward only, LinkedPosition tokens
- OneShotSequence      : one-pass only
- ReversedCollection   : reversed view; random access iff the base is
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Iterable, Iterator, List, Optional, TypeVar

from seqlaws.core.interfaces import (
    BidirectionalCollection,
    ForwardCollection,
    MutableCollection,
    OnePassSequence,
    RandomAccessCollection,
)
from seqlaws.utils.errors import NavigationError

E = TypeVar("E")


# ======================================================================
# Array
# ======================================================================
class ArrayCollection(RandomAccessCollection[int, E], MutableCollection[int, E]):
    def __init__(self, values: Iterable[E] = ()):
        self._storage: List[E] = list(values)

    @property
    def start_index(self) -> int:
        return 0

    @property
    def end_index(self) -> int:
        return len(self._storage)

    def _check_position(self, i: int, *, allow_end: bool) -> None:
        upper = len(self._storage) if allow_end else len(self._storage) - 1
        if not 0 <= i <= upper:
            raise NavigationError(f"position {i} out of range [0, {upper}]")

    def __getitem__(self, i: int) -> E:
        self._check_position(i, allow_end=False)
        return self._storage[i]

    def __setitem__(self, i: int, value: E) -> None:
        self._check_position(i, allow_end=False)
        self._storage[i] = value

    def index_after(self, i: int) -> int:
        if i >= len(self._storage):
            raise NavigationError("cannot step past end_index")
        return i + 1

    def index_before(self, i: int) -> int:
        if i <= 0:
            raise NavigationError("cannot step before start_index")
        return i - 1

    def index_offset(self, i: int, n: int) -> int:
        j = i + n
        self._check_position(j, allow_end=True)
        return j

    def distance(self, i: int, j: int) -> int:
        return j - i

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[E]:
        return iter(self._storage)

    def to_list(self) -> List[E]:
        return list(self._storage)

    def __repr__(self) -> str:
        return f"ArrayCollection({self._storage!r})"


# ======================================================================
# Singly linked list
# ======================================================================
@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


@dataclass(frozen=True, order=True)
class LinkedPosition:
    """offset 决定顺序与相等；node 只用于 O(1) 解引用。"""

    offset: int
    node: Optional[_Node] = field(default=None, compare=False, repr=False)


class LinkedCollection(ForwardCollection[LinkedPosition, E]):
    def __init__(self, values: Iterable[E] = ()):
        self._head: Optional[_Node] = None
        self._count = 0
        tail: Optional[_Node] = None
        for v in values:
            node = _Node(v)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._count += 1

    @property
    def start_index(self) -> LinkedPosition:
        return LinkedPosition(0, self._head)

    @property
    def end_index(self) -> LinkedPosition:
        return LinkedPosition(self._count, None)

    def __getitem__(self, i: LinkedPosition) -> E:
        if i.node is None:
            raise NavigationError("end_index is not dereferenceable")
        return i.node.value

    def index_after(self, i: LinkedPosition) -> LinkedPosition:
        if i.node is None:
            raise NavigationError("cannot step past end_index")
        return LinkedPosition(i.offset + 1, i.node.next)

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"LinkedCollection({list(self)!r})"


# ======================================================================
# One-pass
# ======================================================================
class OneShotSequence(OnePassSequence[E]):
    """所有 __iter__ 调用共享同一个底层迭代器。"""

    def __init__(self, values: Iterable[E]):
        self._iterator = iter(values)

    def __iter__(self) -> Iterator[E]:
        return self._iterator


# ======================================================================
# Reversed view
# ======================================================================
@total_ordering
@dataclass(frozen=True, eq=True)
class ReversedPosition:
    """
    反向位置：base 为底层位置，顺序与底层相反。
    元素位于 base 的前一个位置。
    """

    base: Any

    def __lt__(self, other: "ReversedPosition") -> bool:
        if not isinstance(other, ReversedPosition):
            return NotImplemented
        return other.base < self.base


class ReversedCollection(BidirectionalCollection[ReversedPosition, E]):
    def __init__(self, base: BidirectionalCollection):
        self.base = base

    @property
    def start_index(self) -> ReversedPosition:
        return ReversedPosition(self.base.end_index)

    @property
    def end_index(self) -> ReversedPosition:
        return ReversedPosition(self.base.start_index)

    def __getitem__(self, i: ReversedPosition) -> E:
        return self.base[self.base.index_before(i.base)]

    def index_after(self, i: ReversedPosition) -> ReversedPosition:
        return ReversedPosition(self.base.index_before(i.base))

    def index_before(self, i: ReversedPosition) -> ReversedPosition:
        return ReversedPosition(self.base.index_after(i.base))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base!r})"


class ReversedRandomAccessCollection(ReversedCollection[E], RandomAccessCollection[ReversedPosition, E]):
    def __getitem__(self, i: ReversedPosition) -> E:
        return self.base[self.base.index_offset(i.base, -1)]

    def index_offset(self, i: ReversedPosition, n: int) -> ReversedPosition:
        return ReversedPosition(self.base.index_offset(i.base, -n))

    def distance(self, i: ReversedPosition, j: ReversedPosition) -> int:
        return self.base.distance(j.base, i.base)

    def __len__(self) -> int:
        return len(self.base)


def reversed_collection(base: BidirectionalCollection) -> ReversedCollection:
    """
    返回 base 的反向视图，能力取 base 支持的最强一级。
    """
    if isinstance(base, RandomAccessCollection):
        return ReversedRandomAccessCollection(base)
    if isinstance(base, BidirectionalCollection):
        return ReversedCollection(base)
    raise TypeError(
        f"reversed_collection requires a bidirectional base, got {type(base).__name__}"
    )
