"""Formatter facade: renders values for failure messages.

Binds a ValueResolver to formatting options, applies the line cap, and
logs the errors collected while rendering.

Python 3.13+.
"""

import logging

from assertfmt import scope
from assertfmt.constants import MAX_LINES_NOTICE
from assertfmt.diagnostics import (
    DiagnosticFormatter,
    ErrorTemplate,
    FormattingError,
    MaxLinesExceededError,
    OutputFormat,
)

from .options import FormattingOptions
from .registry import FormatterRegistry
from .resolver import ValueResolver
from .text import limit_lines

__all__ = ["Formatter", "format_value", "to_string"]

logger = logging.getLogger(__name__)

# One line per error; messages can quote formatter exception text.
_LOG_DIAGNOSTICS = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True)


class Formatter:
    """Renders values using explicit or scope-bound formatting options.

    Example:
        >>> formatter = Formatter(FormattingOptions(max_items=3))
        >>> formatter.to_string(list(range(10)))
        '[0, 1, 2, …7 more…]'

    Thread Safety:
        Holds no per-render state. With options=None the options of the
        innermost scope of the calling context are used on each call.
    """

    __slots__ = ("_builtins", "_custom", "_diagnostics", "_options")

    def __init__(
        self,
        options: FormattingOptions | None = None,
        *,
        builtins: FormatterRegistry | None = None,
        custom: FormatterRegistry | None = None,
        diagnostics: DiagnosticFormatter | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            options: Options to render with; None uses scope.current_options()
                at call time
            builtins: Built-in chain replacing the shared built-in registry
            custom: Custom chain replacing the process-wide custom registry
            diagnostics: Layout of collected errors in the debug log (default:
                one sanitized line per error)
        """
        self._options = options
        self._builtins = builtins
        self._custom = custom
        self._diagnostics = diagnostics if diagnostics is not None else _LOG_DIAGNOSTICS

    @property
    def options(self) -> FormattingOptions:
        """Options used by the next call."""
        return self._options if self._options is not None else scope.current_options()

    def format_value(self, value: object) -> tuple[str, tuple[FormattingError, ...]]:
        """Render value with error collection.

        Returns:
            Tuple of (text, errors)
            - text: Rendered value, cut at max_lines with a notice appended
            - errors: Errors collected while rendering (immutable)

        Note:
            This method NEVER raises for formatter faults or limits.
        """
        options = self.options
        resolver = ValueResolver(options, custom=self._custom, builtins=self._builtins)
        text, errors = resolver.resolve(value)

        limited, truncated = limit_lines(text, options.max_lines)
        if truncated:
            diag = ErrorTemplate.max_lines_exceeded(options.max_lines, len(text.splitlines()))
            errors = (*errors, MaxLinesExceededError(diag))
            notice = MAX_LINES_NOTICE.format(max_lines=options.max_lines)
            text = f"{limited}\n{notice}" if limited else notice

        if errors:
            logger.warning("Value formatting errors: %d error(s)", len(errors))
            for err in errors:
                detail = self._diagnostics.format(err.diagnostic) if err.diagnostic else str(err)
                logger.debug("  - %s: %s", type(err).__name__, detail)
        return text, errors

    def to_string(self, value: object) -> str:
        """Render value, discarding collected errors."""
        text, _ = self.format_value(value)
        return text


def format_value(
    value: object, *, options: FormattingOptions | None = None
) -> tuple[str, tuple[FormattingError, ...]]:
    """Render value with the given or the active options.

    Returns:
        Tuple of (text, errors); see Formatter.format_value()
    """
    return Formatter(options).format_value(value)


def to_string(
    value: object,
    *,
    options: FormattingOptions | None = None,
    use_line_breaks: bool | None = None,
) -> str:
    """Render value with the given or the active options.

    Args:
        value: Value to render
        options: Options to render with (default: active scope options)
        use_line_breaks: Override use_line_breaks for this call only

    Example:
        >>> to_string({"a": [1, 2]})
        "{'a': [1, 2]}"
    """
    if use_line_breaks is not None:
        options = (options if options is not None else scope.current_options()).clone()
        options.use_line_breaks = use_line_breaks
    return Formatter(options).to_string(value)
