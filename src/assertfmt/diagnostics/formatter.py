"""Rendering of diagnostics for logs and tooling.

The Formatter facade passes every collected error through a
DiagnosticFormatter before logging it, so the log layout is chosen by the
caller: multi-line compiler style, one line per error, or JSON records.

Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Layout of a rendered diagnostic."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders Diagnostic objects as text.

    Attributes:
        output_format: Layout (rust, simple, json)
        sanitize: Cut message and hint at max_content_length. Messages may
            quote formatter exception text, which can embed rendered values.
        max_content_length: Characters kept when sanitizing

    Example:
        >>> diagnostic = ErrorTemplate.max_depth_exceeded(2, "value['a']['b']['c']")
        >>> print(DiagnosticFormatter().format(diagnostic))
        warning[MAX_DEPTH_EXCEEDED]: Maximum recursion depth (2) exceeded at ...
          --> value['a']['b']['c']
          = help: Increase max_depth on the formatting options ...
        >>> print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic))
        MAX_DEPTH_EXCEEDED: Maximum recursion depth (2) exceeded at ...
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured layout."""
        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return json.dumps(self._fields(diagnostic), ensure_ascii=False)
            case _:
                return self._format_rust(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        if diagnostic.path:
            lines.append(f"  --> {diagnostic.path}")
        for label, text in (
            ("formatter", diagnostic.formatter_name),
            ("value type", diagnostic.value_type),
        ):
            if text:
                lines.append(f"  = {label}: {text}")
        if diagnostic.hint:
            lines.append(f"  = help: {self._clip(diagnostic.hint)}")
        return "\n".join(lines)

    def _fields(self, diagnostic: Diagnostic) -> dict[str, str | int]:
        fields: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "severity": diagnostic.severity,
            "message": self._clip(diagnostic.message),
        }
        optional = {
            "path": diagnostic.path,
            "formatter_name": diagnostic.formatter_name,
            "value_type": diagnostic.value_type,
            "hint": self._clip(diagnostic.hint) if diagnostic.hint else None,
        }
        fields.update({key: value for key, value in optional.items() if value})
        return fields

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
