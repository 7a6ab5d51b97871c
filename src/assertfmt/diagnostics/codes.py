"""Diagnostic codes and data structures.

Defines error codes, categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for FormattingError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        RESOLUTION: A formatter could not be found or misbehaved
        LIMIT: A depth, cycle, or line limit shaped the output
        SCOPE: Scope lifecycle hooks were misused
    """

    RESOLUTION = "resolution"
    LIMIT = "limit"
    SCOPE = "scope"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Resolution errors (formatter chain and formatter faults)
        2000-2999: Limit events (depth, cycles, line cap)
        3000-3999: Scope errors (lifecycle misuse)
    """

    # Resolution errors (1000-1999)
    FORMATTER_CAPABILITY_FAILED = 1001
    FORMATTER_RENDER_FAILED = 1002
    NO_FORMATTER_FOUND = 1003

    # Limit events (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001
    CYCLIC_REFERENCE = 2002
    MAX_LINES_EXCEEDED = 2003

    # Scope errors (3000-3999)
    SCOPE_NOT_ACTIVE = 3001
    SCOPE_ORDER_VIOLATION = 3002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code range."""
        if self.value < 2000:
            return ErrorCategory.RESOLUTION
        if self.value < 3000:
            return ErrorCategory.LIMIT
        return ErrorCategory.SCOPE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        value_type: Type name of the value being rendered
        formatter_name: Formatter involved in the error
        path: Member path of the value (e.g. "value['a'].x")
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    value_type: str | None = None
    formatter_name: str | None = None
    path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[FORMATTER_RENDER_FAILED]: Formatter 'Broken' failed ...
              --> value['items'][2]
              = formatter: Broken
              = value type: Point
              = help: Fix the formatter or remove it from the chain

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
