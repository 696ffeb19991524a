#!filepath: seqlaws/checks/random_access.py
from __future__ import annotations

from typing import Any, Optional, Sequence

from seqlaws import logs
from seqlaws.checks.bidirectional import check_bidirectional_collection
from seqlaws.checks.forward import (
    generic_distance,
    generic_index,
    generic_index_limited,
)
from seqlaws.checks.sink import AssertionSink, default_sink
from seqlaws.core.interfaces import RandomAccessCollection
from seqlaws.observability.counter import RandomAccessOperationCounter
from seqlaws.observability.ledger import OperationCounts


def _assert_no_steps(sink: AssertionSink, counts: OperationCounts, operation: str) -> None:
    sink.assert_equal(
        counts.index_after, 0, f"{operation} must not call index_after"
    )
    sink.assert_equal(
        counts.index_before, 0, f"{operation} must not call index_before"
    )


def check_random_access_collection(
    container: RandomAccessCollection,
    expected: Sequence[Any],
    operation_counts: Optional[OperationCounts] = None,
    sink: Optional[AssertionSink] = None,
) -> AssertionSink:
    """
    检查 RandomAccessCollection 语义。

    Parameters
    ----------
    operation_counts : OperationCounts | None
        跟踪 container（及其副本）单步操作的 ledger。
        缺省时：container 若是 RandomAccessOperationCounter 则用其自带 ledger，
        否则新建一个（此时计数恒为 0，只验证结果）。

    Contract:
      - 先满足 check_bidirectional_collection
      - distance / index_offset / index_offset_limited 在 start 与 end 之间
        结果正确，且不触发任何 index_after / index_before
    """
    sink = default_sink(sink)
    check_bidirectional_collection(container, expected, sink)

    if operation_counts is None:
        if isinstance(container, RandomAccessOperationCounter):
            operation_counts = container.operation_counts
        else:
            operation_counts = OperationCounts()

    logs.debug(f"[Check] random_access_collection {type(container).__name__}")

    count = len(container)
    start = container.start_index
    end = container.end_index
    operation_counts.reset()

    sink.assert_equal(
        generic_distance(container, start, end), count, "distance(start, end) must equal count"
    )
    _assert_no_steps(sink, operation_counts, "distance(start, end)")

    sink.assert_equal(
        generic_distance(container, end, start), -count, "distance(end, start) must equal -count"
    )
    _assert_no_steps(sink, operation_counts, "distance(end, start)")

    sink.assert_equal(
        generic_index(container, start, count), end, "index_offset(start, count) must equal end"
    )
    _assert_no_steps(sink, operation_counts, "index_offset(start, count)")

    sink.assert_equal(
        generic_index(container, end, -count), start, "index_offset(end, -count) must equal start"
    )
    _assert_no_steps(sink, operation_counts, "index_offset(end, -count)")

    sink.assert_equal(
        generic_index_limited(container, start, count, end),
        end,
        "index_offset_limited(start, count, end) must equal end",
    )
    _assert_no_steps(sink, operation_counts, "index_offset_limited(start, count, end)")

    sink.assert_equal(
        generic_index_limited(container, end, -count, start),
        start,
        "index_offset_limited(end, -count, start) must equal start",
    )
    _assert_no_steps(sink, operation_counts, "index_offset_limited(end, -count, start)")

    return sink
