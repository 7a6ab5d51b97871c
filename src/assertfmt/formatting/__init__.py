"""Value formatting package.

Provides the formatter chain, formatting options, and the Formatter facade.

Python 3.13+.
"""

from .builtins import create_builtin_registry, get_builtin_registry
from .context import FormattingContext
from .formatter import Formatter, format_value, to_string
from .options import FormattingOptions
from .protocols import FormatChild, ValueFormatter
from .registry import (
    FormatterRegistry,
    add_custom_formatter,
    get_custom_registry,
    remove_custom_formatter,
)
from .render_context import RenderContext
from .resolver import ValueResolver

__all__ = [
    "FormatChild",
    "Formatter",
    "FormatterRegistry",
    "FormattingContext",
    "FormattingOptions",
    "RenderContext",
    "ValueFormatter",
    "ValueResolver",
    "add_custom_formatter",
    "create_builtin_registry",
    "format_value",
    "get_builtin_registry",
    "get_custom_registry",
    "remove_custom_formatter",
    "to_string",
]
