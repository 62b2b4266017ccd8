"""
Schema parser for expectation files.

This module converts validated YAML data into typed Expectations,
interpolating {{env.NAME}} placeholders along the way.
"""

from __future__ import annotations

import os
import re
from typing import Any, Mapping

from .models import Check, CheckOp, Expectations, RequestConfig


class SchemaParser:
    """Parses and converts validated YAML to a typed Expectations structure."""

    # Regex for template interpolation: {{env.KEY}}
    TEMPLATE_PATTERN = re.compile(r"\{\{env\.(\w+)\}\}")

    def __init__(self, data: dict[str, Any], environ: Mapping[str, str] | None = None):
        self.data = data
        self.env = dict(data.get("env") or {})
        self.environ = os.environ if environ is None else environ

    def parse(self) -> Expectations:
        """Convert validated data to typed Expectations."""
        return Expectations(
            version=self.data["version"],
            name=self.data["name"],
            checks=self._parse_checks(),
            env=self.env,
            request=self._parse_request(),
            root=self.data.get("root"),
        )

    def interpolate(self, value: Any) -> Any:
        """Interpolate template variables in a value."""
        if isinstance(value, str):
            return self.TEMPLATE_PATTERN.sub(self._replace_env, value)
        elif isinstance(value, dict):
            return {k: self.interpolate(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [self.interpolate(v) for v in value]
        return value

    def _replace_env(self, match: re.Match) -> str:
        name = match.group(1)
        if name in self.env:
            return str(self.env[name])
        # unknown placeholders are left as they are
        return self.environ.get(name, match.group(0))

    def _parse_request(self) -> RequestConfig | None:
        request = self.data.get("request")
        if request is None:
            return None

        return RequestConfig(
            url=self.interpolate(request["url"]),
            method=request.get("method", "GET").upper(),
            headers={str(k): str(v) for k, v in self.interpolate(request.get("headers") or {}).items()},
            body=self.interpolate(request.get("body")),
            timeout_ms=request.get("timeout_ms", 30000),
        )

    def _parse_checks(self) -> list[Check]:
        return [
            Check(
                op=CheckOp(check["op"]),
                path=check["path"],
                value=check.get("value"),
            )
            for check in self.data["checks"]
        ]
