#!filepath: seqlaws/checks/mutable.py
from __future__ import annotations

from typing import Any, Optional, Sequence

from seqlaws import logs
from seqlaws.checks.sink import AssertionSink, default_sink
from seqlaws.core.interfaces import MutableCollection
from seqlaws.utils.errors import CheckerMisuseError


def check_mutable_collection(
    container: MutableCollection,
    source: Sequence[Any],
    sink: Optional[AssertionSink] = None,
) -> AssertionSink:
    """
    检查 MutableCollection 语义（会原地修改 container）。

    Requires:
      len(container) == len(source) 且 source 不是回文；
      否则抛 CheckerMisuseError，且不写入任何元素。
    """
    sink = default_sink(sink)

    values = list(source)
    if len(container) != len(values):
        logs.error(
            f"[Check] mutable_collection misuse: len(container)={len(container)} "
            f"len(source)={len(values)}"
        )
        raise CheckerMisuseError("source must have the same length as the collection")

    reversed_values = values[::-1]
    if values == reversed_values:
        logs.error(f"[Check] mutable_collection misuse: palindrome source {values!r}")
        raise CheckerMisuseError("source must not be a palindrome")

    logs.debug(f"[Check] mutable_collection {type(container).__name__} n={len(values)}")

    for i, e in zip(container.indices, values):
        container[i] = e
    sink.assert_equal(
        list(container), values, "collection doesn't read back the written source"
    )

    for i, e in zip(container.indices, reversed_values):
        container[i] = e
    sink.assert_equal(
        list(container),
        reversed_values,
        "collection doesn't read back the reversed source",
    )
    return sink
