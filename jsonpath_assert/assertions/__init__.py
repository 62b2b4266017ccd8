"""
JSONPath assertions for HTTP exchanges.

This package provides assertions that evaluate a JSONPath expression
against a JSON body and compare the extracted value.

Supported assertions:
    - equal / not_equal: Deep equality of the extracted value
    - contains: Substring, object key or array element containment
    - length / greater_than / less_than: Length checks
    - present / not_present: Non-empty value checks
    - matches: Regular expression match on a scalar

Usage:
    from jsonpath_assert.assertions import equal, root

    error = equal("$.a", 12345)(response, request)

    assertion = root("$.a.b.c").equal("d", 1).contains("f", 5).end()
    assertion.verify(response, request)  # raises on failure
"""

# Errors
from .errors import (
    AbsentValueError,
    ChainClosedError,
    ContainsTypeError,
    EvaluationError,
    InvalidPatternError,
    JsonPathAssertionError,
    LengthMismatchError,
    NoMatchError,
    NotContainedError,
    NotEqualError,
    NullValueError,
    ParseError,
    PatternMismatchError,
    PresentValueError,
    ReadError,
    UnexpectedEqualError,
    UnsupportedTypeError,
)

# Extraction
from .extractor import extract

# Assertions
from .base import Assertion
from .factories import (
    OPERATIONS,
    BodyAssertion,
    contains,
    equal,
    greater_than,
    length,
    less_than,
    matches,
    not_equal,
    not_present,
    present,
)
from .chain import AssertionChain, ChainAssertion, chain, root

# Models
from .models import AssertionResult, AssertionStatus

__all__ = [
    # Errors
    "JsonPathAssertionError",
    "ReadError",
    "ParseError",
    "EvaluationError",
    "NotEqualError",
    "UnexpectedEqualError",
    "ContainsTypeError",
    "NotContainedError",
    "LengthMismatchError",
    "NullValueError",
    "UnsupportedTypeError",
    "NoMatchError",
    "PatternMismatchError",
    "InvalidPatternError",
    "AbsentValueError",
    "PresentValueError",
    "ChainClosedError",
    # Extraction
    "extract",
    # Assertions
    "Assertion",
    "BodyAssertion",
    "OPERATIONS",
    "contains",
    "equal",
    "not_equal",
    "length",
    "greater_than",
    "less_than",
    "present",
    "not_present",
    "matches",
    # Chains
    "AssertionChain",
    "ChainAssertion",
    "chain",
    "root",
    # Models
    "AssertionResult",
    "AssertionStatus",
]
