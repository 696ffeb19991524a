#!filepath: seqlaws/checks/bidirectional.py
from __future__ import annotations

from typing import Any, Optional, Sequence

from seqlaws import logs
from seqlaws.checks.forward import (
    check_forward_collection,
    generic_distance,
    generic_index,
)
from seqlaws.checks.sink import AssertionSink, default_sink
from seqlaws.core.interfaces import BidirectionalCollection


def check_bidirectional_collection(
    container: BidirectionalCollection,
    expected: Sequence[Any],
    sink: Optional[AssertionSink] = None,
) -> AssertionSink:
    """
    检查 BidirectionalCollection 语义（O(N²)）。

    Contract:
      - 先满足 check_forward_collection
      - index_before(index_after(i)) == i
      - distance(i, start_index) <= 0，且 index_offset(i, 该距离) == start_index
    """
    sink = default_sink(sink)
    check_forward_collection(container, expected, sink)
    logs.debug(f"[Check] bidirectional_collection {type(container).__name__}")

    start = container.start_index
    end = container.end_index
    i = start
    steps = 0

    while i != end and steps < len(expected):
        j = container.index_after(i)
        sink.assert_equal(
            container.index_before(j), i, "index_before must invert index_after"
        )
        offset = generic_distance(container, i, start)
        sink.assert_less_equal(
            offset, 0, "distance back to start_index must be non-positive"
        )
        sink.assert_equal(
            generic_index(container, i, offset),
            start,
            "offset by the backward distance must land on start_index",
        )
        i = j
        steps += 1
    return sink
