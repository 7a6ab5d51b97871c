"""assertfmt - value formatting for assertion failure messages.

Decides how values are rendered into failure messages (line breaks, depth,
item and line limits) and which formatter handles which value, with
per-scope overrides that never leak into outer scopes.

Public API:
    to_string - Render a value with the active options
    format_value - Render a value and return the collected errors
    Formatter - Renderer bound to explicit options or the active scope
    FormattingOptions - Per-scope limits and scoped formatters
    FormattingScope - Context manager entering a formatting scope
    ValueFormatter - Protocol for custom formatters
    add_custom_formatter / remove_custom_formatter - Process-wide formatters

Exceptions:
    FormattingError - Base exception class
    ScopeError - Scope lifecycle misuse

Submodules:
    assertfmt.scope - Scope lifecycle hooks (on_scope_enter, on_scope_exit)
    assertfmt.formatting.builtins - Built-in formatters
    assertfmt.diagnostics - Error types, codes and diagnostic rendering
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import FormattingError, ScopeError
from .formatting import (
    FormatChild,
    Formatter,
    FormattingContext,
    FormattingOptions,
    ValueFormatter,
    add_custom_formatter,
    format_value,
    remove_custom_formatter,
    to_string,
)
from .scope import FormattingScope, current_options, get_default_options

try:
    __version__ = _get_version("assertfmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FormatChild",
    "Formatter",
    "FormattingContext",
    "FormattingError",
    "FormattingOptions",
    "FormattingScope",
    "ScopeError",
    "ValueFormatter",
    "__version__",
    "add_custom_formatter",
    "current_options",
    "format_value",
    "get_default_options",
    "remove_custom_formatter",
    "to_string",
]
