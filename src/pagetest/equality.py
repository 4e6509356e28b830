"""Structural equality used by the assertion library.

Values are classified into a closed set of kinds before comparing. Two values
of different kinds are never equal, with one exception: ``UNDEFINED`` and
``None`` are interchangeable. Containers compare recursively; everything else
compares with loose (coercive) equality, so ``1`` equals ``"1"`` and ``0``
equals ``False``.

Callables are compared by source text, which is a purely syntactic notion of
equality: two different lambdas defined on the same line compare equal, and
callables without retrievable source are only equal to themselves.
"""

from __future__ import annotations

import inspect
import re
from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from numbers import Number
from typing import Any


class _Undefined:
    """Sentinel for a value that was never set (distinct from ``None``)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Any = _Undefined()


class CyclicComparisonError(ValueError):
    """Raised when a comparison revisits a pair of containers it is still comparing."""


class ValueKind(str, Enum):
    UNDEFINED = "undefined"
    NULL = "null"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    CALLABLE = "callable"
    PRIMITIVE = "primitive"


_TEXT_TYPES = (str, bytes, bytearray)

_DECIMAL_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INTEGER_RE = re.compile(r"[+-]?\d+")
_RADIX_RE = re.compile(r"0([xXoObB])([0-9a-zA-Z]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}


def classify(value: Any) -> ValueKind:
    """Return the comparison kind of *value*."""
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if value is None:
        return ValueKind.NULL
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return ValueKind.SEQUENCE
    if callable(value):
        return ValueKind.CALLABLE
    return ValueKind.PRIMITIVE


def string_to_number(text: str) -> float:
    """Parse *text* the way loose comparison coerces a string to a number.

    Surrounding whitespace is ignored and a blank string is zero. Decimal
    literals, ``Infinity`` and ``0x``/``0o``/``0b`` integers are accepted;
    anything else is NaN.
    """
    stripped = text.strip()
    if not stripped:
        return 0.0
    if _DECIMAL_RE.fullmatch(stripped):
        return float(stripped.replace("Infinity", "inf"))
    radix_value = _parse_radix(stripped)
    if radix_value is None:
        return float("nan")
    try:
        return float(radix_value)
    except OverflowError:
        return float("inf")


def _parse_radix(stripped: str) -> int | None:
    match = _RADIX_RE.fullmatch(stripped)
    if not match:
        return None
    try:
        return int(match.group(2), _RADIX_BASES[match.group(1).lower()])
    except ValueError:
        return None


def _coerce_text(text: str, other: Number) -> Any:
    """Parse *text* for comparison with the number *other*, keeping the
    precision of *other*'s type where the literal allows it."""
    stripped = text.strip()
    if isinstance(other, int):
        if _INTEGER_RE.fullmatch(stripped):
            try:
                return int(stripped)
            except ValueError:
                # beyond the interpreter's int string conversion limit
                return string_to_number(text)
        radix_value = _parse_radix(stripped)
        if radix_value is not None:
            return radix_value
    elif isinstance(other, (Decimal, Fraction)):
        if _DECIMAL_RE.fullmatch(stripped) and "Infinity" not in stripped:
            return type(other)(stripped)
    return string_to_number(text)


def loose_equals(actual: Any, expected: Any) -> bool:
    """Coercive equality for primitives: booleans become numbers, and a string
    compared against a number is parsed as one."""
    if isinstance(actual, bool):
        actual = int(actual)
    if isinstance(expected, bool):
        expected = int(expected)

    if isinstance(actual, Number) and isinstance(expected, str):
        return bool(actual == _coerce_text(expected, actual))
    if isinstance(actual, str) and isinstance(expected, Number):
        return bool(_coerce_text(actual, expected) == expected)
    return bool(actual == expected)


def _source_text(fn: Any) -> str | None:
    try:
        return inspect.getsource(fn)
    except (OSError, TypeError):
        return None


def _callables_equal(actual: Any, expected: Any) -> bool:
    if actual is expected:
        return True
    actual_source = _source_text(actual)
    if actual_source is None:
        return False
    return actual_source == _source_text(expected)


def _equals(actual: Any, expected: Any, active: set[tuple[int, int]]) -> bool:
    actual_kind = classify(actual)
    expected_kind = classify(expected)

    if {actual_kind, expected_kind} == {ValueKind.UNDEFINED, ValueKind.NULL}:
        return True
    if actual_kind is not expected_kind:
        return False

    if actual_kind is ValueKind.CALLABLE:
        return _callables_equal(actual, expected)
    if actual_kind is ValueKind.PRIMITIVE:
        return loose_equals(actual, expected)
    if actual_kind in (ValueKind.UNDEFINED, ValueKind.NULL):
        return True

    pair = (id(actual), id(expected))
    if pair in active:
        raise CyclicComparisonError(
            f"Cycle detected while comparing {type(actual).__name__} "
            f"with {type(expected).__name__}"
        )
    active.add(pair)
    try:
        if actual_kind is ValueKind.SEQUENCE:
            if len(actual) != len(expected):
                return False
            return all(
                _equals(a, e, active) for a, e in zip(actual, expected)
            )

        if set(actual) != set(expected):
            return False
        return all(_equals(actual[key], expected[key], active) for key in actual)
    finally:
        active.discard(pair)


def equals(actual: Any, expected: Any) -> bool:
    """Return whether *actual* and *expected* are structurally equal.

    Raises:
        CyclicComparisonError: if either value contains a reference cycle
            that the comparison would otherwise follow forever.
    """
    return _equals(actual, expected, set())
