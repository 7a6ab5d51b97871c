"""Formatting exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Rendering errors are collected and returned next to the output; only
ScopeError is raised to callers.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "CyclicReferenceError",
    "FormatterFaultError",
    "FormattingError",
    "MaxLinesExceededError",
    "NoFormatterFoundError",
    "ScopeError",
]


class FormattingError(Exception):
    """Base exception for all formatting errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def category(self) -> ErrorCategory | None:
        """Category of the attached diagnostic, if any."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.code.category


class FormatterFaultError(FormattingError):
    """A formatter raised while checking or rendering a value.

    The value is replaced by a fixed placeholder and rendering continues.

    Attributes:
        original: The exception raised by the formatter
    """

    def __init__(self, message: str | Diagnostic, original: Exception) -> None:
        """Initialize FormatterFaultError.

        Args:
            message: Error message string OR Diagnostic object
            original: The exception raised by the formatter
        """
        super().__init__(message)
        self.original = original


class NoFormatterFoundError(FormattingError):
    """No formatter in the chain accepted the value.

    Only possible with a built-in chain that lacks a terminal formatter.
    Fallback: safe repr of the value.
    """


class CyclicReferenceError(FormattingError):
    """A value references one of its own ancestors.

    Example:
        items = []
        items.append(items)  ← Infinite loop!

    Fallback: cycle placeholder.
    """


class MaxLinesExceededError(FormattingError):
    """Rendered output was cut at max_lines."""


class ScopeError(FormattingError):
    """Scope lifecycle hooks were used out of order.

    Raised (not collected): this is a bug in the code managing scopes.
    """
