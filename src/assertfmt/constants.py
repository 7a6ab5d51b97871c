"""Shared constants for assertfmt.

Centralized defaults and placeholder texts used across the formatting and
scope packages. Placing constants here avoids circular imports and provides
a single source of truth.

Constants are grouped by domain:
- Option defaults: initial values of FormattingOptions
- Formatter defaults: values a formatter falls back to when options defer
- Placeholders: text substituted for values that cannot be rendered
- Locale: CLDR locale used for date/time rendering

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Option defaults
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_LINES",
    "DEFAULT_MAX_ITEMS",
    "DEFAULT_STRING_PRINT_LENGTH",
    # Formatter defaults
    "COLLECTION_MAX_ITEMS",
    "INDENT",
    # Placeholders
    "PLACEHOLDER_MAX_DEPTH",
    "PLACEHOLDER_CYCLE",
    "PLACEHOLDER_FORMATTER_FAULT",
    "PLACEHOLDER_MORE_ITEMS",
    "MAX_LINES_NOTICE",
    "ROOT_PATH",
    # Locale
    "FORMATTING_LOCALE",
]

# ============================================================================
# OPTION DEFAULTS
# ============================================================================

# A depth of 1 only displays the members of the root object.
DEFAULT_MAX_DEPTH: int = 5

# Soft cap: the rendered output may end up one notice line longer.
DEFAULT_MAX_LINES: int = 100

# 0 is a sentinel meaning "use the formatter's own default".
DEFAULT_MAX_ITEMS: int = 0

# Not used by the formatter chain; read by the string diff reporting of the
# assertion layer.
DEFAULT_STRING_PRINT_LENGTH: int = 50

# ============================================================================
# FORMATTER DEFAULTS
# ============================================================================

# Items shown by the built-in collection formatters when options defer.
COLLECTION_MAX_ITEMS: int = 32

INDENT: str = "    "

# ============================================================================
# PLACEHOLDERS
# ============================================================================

# Format strings - use .format(...) with the named fields.
PLACEHOLDER_MAX_DEPTH: str = "{{Maximum recursion depth of {max_depth} was reached}}"
PLACEHOLDER_CYCLE: str = "{{Cyclic reference to type {type_name} detected}}"
PLACEHOLDER_FORMATTER_FAULT: str = "<could not format value of type {type_name}: {error_type}>"
PLACEHOLDER_MORE_ITEMS: str = "…{count} more…"
MAX_LINES_NOTICE: str = (
    "(Output has exceeded the maximum of {max_lines} lines. "
    "Increase max_lines on the formatting options to include more lines.)"
)

# Name of the root value in member paths (e.g. value['a'].x[0]).
ROOT_PATH: str = "value"

# ============================================================================
# LOCALE
# ============================================================================

# Failure messages must not depend on the machine's locale.
FORMATTING_LOCALE: str = "en_US"
