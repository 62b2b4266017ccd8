"""
Expectation file loader.

This module provides the public API for loading and validating
expectation files from disk or YAML strings.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from .models import Expectations
from .parser import SchemaParser
from .validation import SchemaValidator, ValidationResult


def load_expectations(path: str | Path) -> tuple[Expectations | None, ValidationResult]:
    """
    Load and validate expectations from a YAML file.

    Args:
        path: Path to the YAML expectation file

    Returns:
        Tuple of (Expectations or None, ValidationResult)
        If validation fails, Expectations will be None.

    Example:
        expectations, result = load_expectations("checks/hello.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
    """
    path = Path(path)

    # Check file exists
    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        result = ValidationResult()
        result.add_error(str(path), f"Unable to read file: {e}")
        return None, result

    return _load(content, source=str(path))


def validate_expectations_yaml(yaml_string: str) -> tuple[Expectations | None, ValidationResult]:
    """
    Validate expectations from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string

    Returns:
        Tuple of (Expectations or None, ValidationResult)
    """
    return _load(yaml_string, source="yaml")


def _load(content: str, source: str) -> tuple[Expectations | None, ValidationResult]:
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            source,
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "Content must be a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    validator = SchemaValidator(data)
    result = validator.validate()

    if not result.is_valid:
        return None, result

    parser = SchemaParser(data)
    return parser.parse(), result
