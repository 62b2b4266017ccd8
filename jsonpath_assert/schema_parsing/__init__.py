"""
Schema Parsing for Expectation Files

This package provides tools for parsing, validating, and working with
YAML files that describe JSONPath checks.

Usage:
    from jsonpath_assert.schema_parsing import load_expectations

    expectations, result = load_expectations("checks/hello.yaml")
    if not result.is_valid:
        print(result)

    assertion = expectations.to_chain()
"""

# Public API
from .loader import load_expectations, validate_expectations_yaml

# Models (for type hints and isinstance checks)
from .models import Check, CheckOp, Expectations, RequestConfig

# Parsing and validation (for custom loading if needed)
from .parser import SchemaParser
from .validation import SchemaValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_expectations",
    "validate_expectations_yaml",
    # Models
    "Expectations",
    "Check",
    "CheckOp",
    "RequestConfig",
    # Parsing and validation
    "SchemaParser",
    "ValidationResult",
    "ValidationError",
    "SchemaValidator",
]
