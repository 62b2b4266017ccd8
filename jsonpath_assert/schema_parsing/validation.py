"""
Schema validation for expectation files.

This module contains the validation logic that checks raw parsed YAML
against the expectation schema and reports errors with helpful messages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from .models import CheckOp


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "checks[0].value"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Schema validation passed"
        lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Schema Validator
# ─────────────────────────────────────────────────────────────────────────────

class SchemaValidator:
    """Validates raw parsed YAML against the expectation schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "checks"}
    OPTIONAL_TOP_LEVEL = {"env", "request", "root"}
    REQUEST_FIELDS = {"method", "url", "headers", "body", "timeout_ms"}
    VALID_OPS = {op.value for op in CheckOp}
    VALID_METHODS = {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"}
    LENGTH_OPS = {CheckOp.LEN.value, CheckOp.GREATER_THAN.value, CheckOp.LESS_THAN.value}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_env()
        self._validate_request()
        self._validate_root()
        self._validate_checks()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your expectation file"
            )

        for key in sorted(unknown):
            self.result.add_error(
                key,
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for these expectations"
            )

    def _validate_env(self) -> None:
        env = self.data.get("env")
        if env is None:
            return
        if not isinstance(env, dict):
            self.result.add_error("env", "Must be an object", value=env)

    def _validate_request(self) -> None:
        request = self.data.get("request")
        if request is None:
            return
        if not isinstance(request, dict):
            self.result.add_error("request", "Must be an object", value=request)
            return

        for key in sorted(set(request) - self.REQUEST_FIELDS):
            self.result.add_error(
                f"request.{key}",
                "Unknown field",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUEST_FIELDS))}"
            )

        url = request.get("url")
        if not url:
            self.result.add_error(
                "request.url",
                "Required when a request is configured",
                suggestion="Add 'url: \"http://...\"' to the request"
            )
        elif not isinstance(url, str):
            self.result.add_error("request.url", "Must be a string", value=url)
        elif not (url.startswith(("http://", "https://")) or url.startswith("{{")):
            self.result.add_error(
                "request.url",
                "Must be a valid HTTP(S) URL",
                value=url,
                suggestion="URL should start with 'http://' or 'https://'"
            )

        method = request.get("method", "GET")
        if not isinstance(method, str) or method.upper() not in self.VALID_METHODS:
            self.result.add_error(
                "request.method",
                "Invalid HTTP method",
                value=method,
                suggestion=f"Valid methods: {', '.join(sorted(self.VALID_METHODS))}"
            )

        headers = request.get("headers")
        if headers is not None and not isinstance(headers, dict):
            self.result.add_error("request.headers", "Must be an object", value=headers)

        timeout_ms = request.get("timeout_ms")
        if timeout_ms is not None and (
            not isinstance(timeout_ms, int) or isinstance(timeout_ms, bool) or timeout_ms <= 0
        ):
            self.result.add_error(
                "request.timeout_ms",
                "Must be a positive integer",
                value=timeout_ms
            )

    def _validate_root(self) -> None:
        root = self.data.get("root")
        if root is None:
            return
        if not isinstance(root, str) or not root.strip():
            self.result.add_error(
                "root",
                "Must be a non-empty string",
                value=root,
                suggestion="Use a JSONPath such as '$.data'"
            )

    def _validate_checks(self) -> None:
        checks = self.data.get("checks")
        if not isinstance(checks, list):
            self.result.add_error("checks", "Must be a list", value=checks)
            return
        if not checks:
            self.result.add_error(
                "checks",
                "Cannot be empty",
                suggestion="Add at least one check"
            )
            return

        for i, check in enumerate(checks):
            self._validate_check(f"checks[{i}]", check)

    def _validate_check(self, path: str, check: Any) -> None:
        if not isinstance(check, dict):
            self.result.add_error(path, "Must be an object", value=check)
            return

        op = check.get("op")
        if op not in self.VALID_OPS:
            self.result.add_error(
                f"{path}.op",
                "Invalid check operator",
                value=op,
                suggestion=f"Valid operators: {', '.join(sorted(self.VALID_OPS))}"
            )
            return

        expression = check.get("path")
        if not isinstance(expression, str) or not expression.strip():
            self.result.add_error(
                f"{path}.path",
                "Must be a non-empty string",
                value=expression
            )

        takes_value = CheckOp(op).takes_value
        if takes_value and "value" not in check:
            self.result.add_error(
                f"{path}.value",
                f"Required for '{op}'"
            )
            return
        if not takes_value and "value" in check:
            self.result.add_error(
                f"{path}.value",
                f"Not allowed for '{op}'",
                value=check["value"]
            )
            return

        value = check.get("value")
        if op in self.LENGTH_OPS:
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                self.result.add_error(
                    f"{path}.value",
                    "Must be a non-negative integer",
                    value=value
                )
        elif op == CheckOp.MATCHES.value:
            if not isinstance(value, str):
                self.result.add_error(f"{path}.value", "Must be a string", value=value)
                return
            try:
                re.compile(value)
            except re.error as e:
                self.result.add_error(
                    f"{path}.value",
                    f"Invalid regular expression: {e}",
                    value=value
                )
