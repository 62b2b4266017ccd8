"""
jsonpath-assert - JSONPath assertions for HTTP integration tests

This package provides assertions over JSON response (or request) bodies
using JSONPath expressions, and chains that combine several of them
against one HTTP exchange.

Subpackages:
    - assertions: Extraction, comparators, assertion factories and chains
    - transport: Response/request models, body duplication, live capture
    - schema_parsing: Load and validate YAML expectation files
    - mocks: Request matchers for mocking subsystems

Usage:
    from jsonpath_assert import HTTPResponse, equal, root

    response = HTTPResponse.from_json({"a": {"b": {"c": {"d": 1, "f": [3, 4, 5]}}}})

    error = equal("$.a.b.c.d", 1)(response, None)
    assert error is None

    assertion = root("$.a.b.c").equal("d", 1).contains("f", 5).end()
    assertion.verify(response, None)
"""

__version__ = "0.1.0"

# Re-export assertions for convenience; must be imported before transport
from .assertions import (
    # Errors
    JsonPathAssertionError,
    ReadError,
    ParseError,
    EvaluationError,
    NotEqualError,
    UnexpectedEqualError,
    ContainsTypeError,
    NotContainedError,
    LengthMismatchError,
    NullValueError,
    UnsupportedTypeError,
    NoMatchError,
    PatternMismatchError,
    InvalidPatternError,
    AbsentValueError,
    PresentValueError,
    ChainClosedError,
    # Extraction
    extract,
    # Assertions
    Assertion,
    BodyAssertion,
    contains,
    equal,
    not_equal,
    length,
    greater_than,
    less_than,
    present,
    not_present,
    matches,
    # Chains
    AssertionChain,
    ChainAssertion,
    chain,
    root,
    # Models
    AssertionResult,
    AssertionStatus,
)

# Re-export transport for convenience
from .transport import (
    HTTPRequest,
    HTTPResponse,
    MockRequest,
    copy_request,
    copy_response,
    HTTPClient,
    TransportError,
    fetch,
)

# Re-export schema_parsing for convenience
from .schema_parsing import (
    load_expectations,
    validate_expectations_yaml,
    Expectations,
    Check,
    CheckOp,
    RequestConfig,
    ValidationResult,
)

from . import mocks

__all__ = [
    # Package info
    "__version__",
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
    # Transport
    "HTTPRequest",
    "HTTPResponse",
    "MockRequest",
    "copy_request",
    "copy_response",
    "HTTPClient",
    "TransportError",
    "fetch",
    # Schema parsing
    "load_expectations",
    "validate_expectations_yaml",
    "Expectations",
    "Check",
    "CheckOp",
    "RequestConfig",
    "ValidationResult",
    # Mocks
    "mocks",
]
