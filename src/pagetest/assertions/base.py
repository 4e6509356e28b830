"""Base data structures for the assertion system."""

from __future__ import annotations

import math
from typing import Any

from pagetest.equality import UNDEFINED, ValueKind, classify


def render_value(value: Any) -> str:
    """Render *value* the way it appears in a results page.

    Booleans are lower-case, ``None`` is ``null`` and integral floats drop
    their fraction (``1.0`` is ``1``). Sequences are their rendered elements
    joined by commas, with ``None``/``UNDEFINED`` elements rendered empty. A
    sequence that contains itself renders the inner reference as empty too.
    """
    return _render(value, set())


def _render_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _render(value: Any, seen: set[int]) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return _render_float(value)
    if classify(value) is ValueKind.SEQUENCE:
        if id(value) in seen:
            return ""
        seen.add(id(value))
        try:
            return ",".join(
                "" if item is None or item is UNDEFINED else _render(item, seen)
                for item in value
            )
        finally:
            seen.discard(id(value))
    return str(value)


class AssertionFailure(AssertionError):
    """Raised by a failed assertion and caught by the runner.

    Attributes:
        kind: Label shown next to the message in reports.
        actual: The value the test produced.
        expected: The value the test asked for; ``True`` for truth checks.
        message: ``"Expected <expected>, but <actual> was returned."``
    """

    kind = "AssertionError"

    def __init__(self, actual: Any, expected: Any = True):
        self.actual = actual
        self.expected = expected
        self.message = (
            f"Expected {render_value(expected)}, but {render_value(actual)} was returned."
        )
        super().__init__(self.message)
