# seqlaws/utils/errors.py
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seqlaws.checks.sink import Failure


class CheckerMisuseError(RuntimeError):
    """
    Raised when a checker is called with ill-posed input
    (e.g. mutation source of the wrong length, or a palindrome).
    The check aborts before touching the container.
    """


class ContractViolation(AssertionError):
    """
    Raised by RaisingSink on the first violated law.
    """

    def __init__(self, failure: "Failure"):
        super().__init__(str(failure))
        self.failure = failure


class NavigationError(IndexError):
    """Illegal position navigation on a reference container."""


class UnknownCapabilityError(KeyError):
    """Capability name not present in the capability registry."""
