"""Diagnostic system for formatting errors.

Provides structured error diagnostics with codes, member paths, and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    CyclicReferenceError,
    FormatterFaultError,
    FormattingError,
    MaxLinesExceededError,
    NoFormatterFoundError,
    ScopeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CyclicReferenceError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormatterFaultError",
    "FormattingError",
    "MaxLinesExceededError",
    "NoFormatterFoundError",
    "OutputFormat",
    "ScopeError",
]
