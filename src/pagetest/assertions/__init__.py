"""Truth and equality assertions for test cases."""

from pagetest.assertions.base import AssertionFailure, render_value
from pagetest.assertions.checks import assert_equals, assert_true

__all__ = ["AssertionFailure", "assert_equals", "assert_true", "render_value"]
