"""
Comparators for extracted JSONPath values.

Pure functions over the value produced by the extractor. The check_*
functions return nothing on success and raise a JsonPathAssertionError
subclass on failure; the factories turn those into returned errors.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from .errors import (
    AbsentValueError,
    ContainsTypeError,
    LengthMismatchError,
    NoMatchError,
    NotContainedError,
    NotEqualError,
    NullValueError,
    PatternMismatchError,
    PresentValueError,
    UnexpectedEqualError,
    UnsupportedTypeError,
)

# Value kinds, named after what a JSON document can hold
NULL = "null"
BOOL = "bool"
NUMBER = "number"
STRING = "string"
BYTES = "bytes"
SLICE = "slice"
MAP = "map"

SCALAR_KINDS = frozenset({BOOL, NUMBER, STRING})


def kind_of(value: Any) -> str:
    """Classify a value into one of the JSON value kinds."""
    if value is None:
        return NULL
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return BOOL
    if isinstance(value, (int, float)):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, (bytes, bytearray)):
        return BYTES
    if isinstance(value, Mapping):
        return MAP
    if isinstance(value, Sequence):
        return SLICE
    return type(value).__name__


def values_equal(expected: Any, actual: Any) -> bool:
    """
    Deep structural equality.

    Kinds must agree (True is not 1), numbers compare numerically and
    byte strings compare by content.
    """
    kind = kind_of(expected)
    if kind != kind_of(actual):
        return False

    if kind == MAP:
        if set(expected.keys()) != set(actual.keys()):
            return False
        return all(values_equal(expected[k], actual[k]) for k in expected)

    if kind == SLICE:
        if len(expected) != len(actual):
            return False
        return all(values_equal(e, a) for e, a in zip(expected, actual))

    if kind == BYTES:
        return bytes(expected) == bytes(actual)

    return expected == actual


def includes_element(container: Any, element: Any) -> tuple[bool, bool]:
    """
    Check whether container includes element.

    Strings use substring containment, mappings check their keys and
    sequences check their elements by deep equality.

    Returns:
        (ok, found) where ok is False if containment does not apply to
        the container's kind
    """
    kind = kind_of(container)

    if kind == STRING:
        if not isinstance(element, str):
            return True, False
        return True, element in container

    if kind == MAP:
        return True, any(values_equal(key, element) for key in container.keys())

    if kind == SLICE:
        return True, any(values_equal(item, element) for item in container)

    return False, False


def is_empty(value: Any) -> bool:
    """
    Return True for values that count as not present.

    None, empty strings and containers, False and zero are empty.
    """
    if value is None:
        return True
    kind = kind_of(value)
    if kind in (STRING, BYTES, SLICE, MAP):
        return len(value) == 0
    if kind in (BOOL, NUMBER):
        return not value
    return False


def canonical_string(value: Any) -> str:
    """Render a scalar the way it appears in JSON."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def length_of(expression: str, value: Any) -> int:
    """
    Length of a string, sequence or mapping.

    Raises:
        NullValueError: If the value is null
        UnsupportedTypeError: If the value has no length
    """
    kind = kind_of(value)
    if kind == NULL:
        raise NullValueError(
            f"value at '{expression}' is null, length is undefined",
            expression=expression,
        )
    if kind not in (STRING, BYTES, SLICE, MAP):
        raise UnsupportedTypeError(
            f"unable to measure length of type: {kind}",
            kind=kind,
            expression=expression,
            actual=value,
        )
    return len(value)


# ─────────────────────────────────────────────────────────────────────────────
# Checks
# ─────────────────────────────────────────────────────────────────────────────

def check_equal(expression: str, value: Any, expected: Any) -> None:
    if not values_equal(expected, value):
        raise NotEqualError(
            f'"{value}" not equal to "{expected}"',
            expression=expression,
            expected=expected,
            actual=value,
        )


def check_not_equal(expression: str, value: Any, expected: Any) -> None:
    if values_equal(expected, value):
        raise UnexpectedEqualError(
            f'"{expression}" value is equal to "{expected}"',
            expression=expression,
            expected=expected,
            actual=value,
        )


def check_contains(expression: str, value: Any, element: Any) -> None:
    ok, found = includes_element(value, element)
    if not ok:
        raise ContainsTypeError(
            f'"{element}" could not be looked up in a value of type {kind_of(value)}',
            expression=expression,
            expected=element,
            actual=value,
        )
    if not found:
        raise NotContainedError(
            f'"{value}" does not contain "{element}"',
            expression=expression,
            expected=element,
            actual=value,
        )


def check_length(expression: str, value: Any, expected_length: int) -> None:
    actual_length = length_of(expression, value)
    if actual_length != expected_length:
        raise LengthMismatchError(
            f'length "{actual_length}" not equal to "{expected_length}"',
            expression=expression,
            expected=expected_length,
            actual=actual_length,
        )


def check_greater_than(expression: str, value: Any, minimum_length: int) -> None:
    actual_length = length_of(expression, value)
    if actual_length < minimum_length:
        raise LengthMismatchError(
            f'length "{actual_length}" is less than "{minimum_length}"',
            expression=expression,
            expected=minimum_length,
            actual=actual_length,
        )


def check_less_than(expression: str, value: Any, maximum_length: int) -> None:
    actual_length = length_of(expression, value)
    if actual_length > maximum_length:
        raise LengthMismatchError(
            f'length "{actual_length}" is greater than "{maximum_length}"',
            expression=expression,
            expected=maximum_length,
            actual=actual_length,
        )


def check_present(expression: str, value: Any) -> None:
    if is_empty(value):
        raise AbsentValueError(
            f"value not present for expression: '{expression}'",
            expression=expression,
            actual=value,
        )


def check_not_present(expression: str, value: Any) -> None:
    if not is_empty(value):
        raise PresentValueError(
            f"value present for expression: '{expression}'",
            expression=expression,
            actual=value,
        )


def check_matches(expression: str, value: Any, pattern: re.Pattern) -> None:
    """
    Match the canonical string form of a scalar against a pattern.

    Uses search semantics, so unanchored patterns match anywhere.
    """
    kind = kind_of(value)
    if kind == NULL:
        raise NoMatchError(
            f"no match for pattern: '{expression}'",
            expression=expression,
            expected=pattern.pattern,
        )
    if kind not in SCALAR_KINDS:
        raise UnsupportedTypeError(
            f"unable to match using type: {kind}",
            kind=kind,
            expression=expression,
            actual=value,
        )

    text = canonical_string(value)
    if pattern.search(text) is None:
        raise PatternMismatchError(
            f"value '{text}' does not match pattern '{pattern.pattern}'",
            expression=expression,
            expected=pattern.pattern,
            actual=value,
        )
