#!filepath: seqlaws/checks/sink.py
from __future__ import annotations

import inspect
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional

from seqlaws import logs
from seqlaws.config.app_config import get_config
from seqlaws.utils.errors import ContractViolation

# assert_true 未传 actual 时的占位
_UNSET = object()


@dataclass(frozen=True)
class Failure:
    """
    一条被违反的契约

    - message  : 人类可读描述
    - expected : 期望值
    - actual   : 实际值
    - location : 检出该违反的 checker 语句（file:line in function）
    """

    message: str
    expected: Any
    actual: Any
    location: str

    def __str__(self) -> str:
        return (
            f"{self.message} (expected={self.expected!r}, actual={self.actual!r}) "
            f"@ {self.location}"
        )


def _caller_location() -> str:
    """第一个不属于本模块的调用帧。"""
    here = os.path.abspath(__file__)
    frame = inspect.currentframe()
    try:
        while frame is not None and os.path.abspath(frame.f_code.co_filename) == here:
            frame = frame.f_back
        if frame is None:
            return "<unknown>"
        return (
            f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno} "
            f"in {frame.f_code.co_name}"
        )
    finally:
        del frame


class AssertionSink(ABC):
    """
    断言汇（test runner 边界）

    checker 只调用 assert_* 系列；失败的处理策略由子类 report() 决定。
    每个 assert_* 返回断言是否成立，调用方可据此跳过依赖它的后续断言。
    """

    @abstractmethod
    def report(self, failure: Failure) -> None:
        raise NotImplementedError

    # --------------------------------------------------
    # Assertions
    # --------------------------------------------------
    def assert_equal(self, actual: Any, expected: Any, message: str) -> bool:
        if actual == expected:
            return True
        self.report(Failure(message, expected, actual, _caller_location()))
        return False

    def assert_true(self, condition: bool, message: str, *, actual: Any = _UNSET) -> bool:
        if condition:
            return True
        if actual is _UNSET:
            actual = condition
        self.report(Failure(message, True, actual, _caller_location()))
        return False

    def assert_less(self, lhs: Any, rhs: Any, message: str) -> bool:
        if lhs < rhs:
            return True
        self.report(Failure(message, f"< {rhs!r}", lhs, _caller_location()))
        return False

    def assert_less_equal(self, lhs: Any, rhs: Any, message: str) -> bool:
        if lhs <= rhs:
            return True
        self.report(Failure(message, f"<= {rhs!r}", lhs, _caller_location()))
        return False


@dataclass
class RecordingSink(AssertionSink):
    """记录并继续：收集所有失败，后续断言照常执行。"""

    log_failures: bool = True
    failures: List[Failure] = field(default_factory=list)

    def report(self, failure: Failure) -> None:
        self.failures.append(failure)
        if self.log_failures:
            logs.warning(f"[Contract] {failure}")

    @property
    def passed(self) -> bool:
        return not self.failures

    def raise_if_failed(self) -> None:
        if self.failures:
            raise ContractViolation(self.failures[0])


class RaisingSink(AssertionSink):
    """第一次失败即抛出 ContractViolation。"""

    def report(self, failure: Failure) -> None:
        logs.error(f"[Contract] {failure}")
        raise ContractViolation(failure)


def default_sink(sink: Optional[AssertionSink] = None) -> AssertionSink:
    """
    未显式传入 sink 时按配置 checks.sink_policy 构造。
    """
    if sink is not None:
        return sink

    cfg = get_config().checks
    if cfg.sink_policy == "raise":
        return RaisingSink()
    return RecordingSink(log_failures=cfg.log_failures)
