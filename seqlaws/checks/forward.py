#!filepath: seqlaws/checks/forward.py
"""
Forward collection semantics.

The generic_* accessors invoke the navigation operation declared by the
collection's type, so an attribute that shadows it on the instance cannot
intercept the call. Shadows have to be tested separately.
"""
from __future__ import annotations

from itertools import islice
from typing import Any, Optional, Sequence

from seqlaws import logs
from seqlaws.checks.sequence import END, check_sequence
from seqlaws.checks.sink import AssertionSink, default_sink
from seqlaws.core.interfaces import ForwardCollection


# ----------------------------------------------------------------------
# Generic accessors
# ----------------------------------------------------------------------
def generic_index(collection: ForwardCollection, i: Any, n: int) -> Any:
    """Returns ``index_offset(i, n)`` as implemented by ``type(collection)``."""
    return type(collection).index_offset(collection, i, n)


def generic_index_limited(
    collection: ForwardCollection, i: Any, n: int, limit: Any
) -> Optional[Any]:
    """Returns ``index_offset_limited(i, n, limit)`` as implemented by ``type(collection)``."""
    return type(collection).index_offset_limited(collection, i, n, limit)


def generic_distance(collection: ForwardCollection, i: Any, j: Any) -> int:
    """Returns ``distance(i, j)`` as implemented by ``type(collection)``."""
    return type(collection).distance(collection, i, j)


# ----------------------------------------------------------------------
# Checker
# ----------------------------------------------------------------------
def _bounded_steps(container: ForwardCollection, limit: int) -> Optional[int]:
    """index_after 从 start_index 走到 end_index 的步数；超过 limit 步仍未到达返回 None。"""
    i = container.start_index
    end = container.end_index
    n = 0
    while i != end:
        if n == limit:
            return None
        i = container.index_after(i)
        n += 1
    return n


def check_forward_collection(
    container: ForwardCollection,
    expected: Sequence[Any],
    sink: Optional[AssertionSink] = None,
) -> AssertionSink:
    """
    检查 ForwardCollection 语义（O(N²)）。

    Contract:
      - 先满足 check_sequence
      - 手动 index_after 遍历与 indices 一致，位置严格递增
      - 每个位置的元素等于 expected
      - index_offset / index_offset_limited / distance 与遍历结果一致
      - 第二次遍历 indices 仍复现 expected（位置可重复使用）
    """
    sink = default_sink(sink)
    check_sequence(container, expected, sink)
    logs.debug(f"[Check] forward_collection {type(container).__name__} n={len(expected)}")

    count = len(expected)
    start = container.start_index
    end = container.end_index

    # 数量不一致时逐位置的 offset 断言没有意义，只做整体对比
    steps = _bounded_steps(container, count)
    if steps is None:
        sink.assert_true(
            False,
            "Collection is longer than expected: index_after did not reach end_index",
        )
    else:
        sink.assert_equal(
            steps,
            count,
            "Collection is shorter than expected: index_after reached end_index early",
        )
    if steps != count:
        sink.assert_equal(
            [container[p] for p in islice(container.indices, count + 1)],
            list(expected),
            "elements don't match expectations",
        )
        return sink

    sink.assert_equal(
        generic_distance(container, start, end),
        count,
        "distance(start_index, end_index) must equal the expected count",
    )

    i = start
    first_pass = []
    remaining = count
    offset = 0
    expected_indices = islice(container.indices, count + 1)

    while i != end and remaining > 0:
        sink.assert_equal(
            i,
            next(expected_indices, None),
            "elements of indices don't match index_after results",
        )
        sink.assert_less(i, end, "position must precede end_index")
        j = container.index_after(i)
        sink.assert_less(i, j, "index_after must yield a strictly greater position")
        first_pass.append(container[i])

        sink.assert_equal(
            generic_index(container, i, remaining),
            end,
            "offset by the remaining count must land on end_index",
        )
        if offset != 0:
            sink.assert_equal(
                generic_index_limited(container, start, offset - 1, i),
                generic_index(container, start, offset - 1),
                "limited offset must not stop before the limit is reached",
            )
        sink.assert_equal(
            generic_index_limited(container, start, offset, i),
            i,
            "limited offset landing exactly on the limit must succeed",
        )
        sink.assert_equal(
            generic_index_limited(container, start, offset + 1, i),
            None,
            "limited offset passing the limit must return None",
        )
        sink.assert_equal(
            generic_index_limited(container, i, 0, i),
            i,
            "zero-step limited offset must return its starting position",
        )
        sink.assert_equal(
            generic_distance(container, i, end),
            remaining,
            "distance to end_index must equal the remaining count",
        )

        i = j
        remaining -= 1
        offset += 1

    leftover = next(expected_indices, END)
    sink.assert_true(
        leftover is END, "indices yields positions past end_index", actual=leftover
    )
    sink.assert_equal(
        first_pass, list(expected), "first pass elements don't match expectations"
    )

    sink.assert_equal(
        generic_index_limited(container, end, 0, end),
        end,
        "zero-step limited offset at end_index must return end_index",
    )
    if remaining == 0:
        sink.assert_equal(
            generic_index_limited(container, start, count, end),
            end,
            "limited offset by count bounded by end_index must return end_index",
        )

    # 第二遍：位置必须可重复解引用
    second_pass = [container[p] for p in islice(container.indices, count + 1)]
    sink.assert_equal(
        second_pass, list(expected), "second pass over indices doesn't match expectations"
    )
    return sink
