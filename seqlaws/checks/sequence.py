#!filepath: seqlaws/checks/sequence.py
from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Optional, Sequence

from seqlaws import logs
from seqlaws.checks.sink import AssertionSink, default_sink
from seqlaws.config.app_config import get_config

# next(it, END) 的耗尽哨兵
END = object()


def check_sequence(
    container: Iterable[Any],
    expected: Sequence[Any],
    sink: Optional[AssertionSink] = None,
) -> AssertionSink:
    """
    检查一次性迭代语义。

    Contract:
      - 逐个取出的元素依次等于 expected
      - 不多不少
      - 迭代器耗尽后，后续每次 next() 仍报告耗尽
    """
    sink = default_sink(sink)
    draws = get_config().checks.exhausted_draws
    logs.debug(f"[Check] sequence {type(container).__name__} n={len(expected)}")

    it = iter(container)
    remainder = deque(expected)
    position = 0

    x = next(it, END)
    while x is not END:
        if remainder:
            sink.assert_equal(
                x,
                remainder.popleft(),
                f"Sequence contents don't match expectations at position {position}",
            )
        else:
            sink.assert_true(
                False,
                f"Sequence has unexpected extra element at position {position}",
                actual=x,
            )
            # 可能是无限迭代器：不再继续抽取
            return sink
        position += 1
        x = next(it, END)

    sink.assert_equal(
        list(remainder), [], "Expected tail elements not present in Sequence"
    )

    for draw in range(draws):
        y = next(it, END)
        sink.assert_true(
            y is END,
            f"Exhausted iterator expected to report exhaustion in perpetuity "
            f"(draw {draw + 1})",
            actual=y,
        )
    return sink
