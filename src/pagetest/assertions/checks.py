from __future__ import annotations

from typing import Any

from pagetest.assertions.base import AssertionFailure
from pagetest.equality import equals


def assert_true(actual: Any) -> None:
    """Pass only when *actual* is the boolean ``True`` (not merely truthy)."""
    if actual is not True:
        raise AssertionFailure(actual)


def assert_equals(actual: Any, expected: Any) -> None:
    """Pass when *actual* and *expected* are structurally equal.

    A ``CyclicComparisonError`` from the comparison propagates as-is.
    """
    if not equals(actual, expected):
        raise AssertionFailure(actual, expected)
