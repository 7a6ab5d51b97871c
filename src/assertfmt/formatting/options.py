"""Per-scope formatting options.

FormattingOptions carries the layout limits of a formatting request and the
chain of scoped formatters. Each nested scope clones the active options on
entry, so changes made inside a scope never reach sibling or outer scopes.

Python 3.13+.
"""

import logging

from assertfmt.constants import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_ITEMS,
    DEFAULT_MAX_LINES,
    DEFAULT_STRING_PRINT_LENGTH,
)

from .protocols import ValueFormatter
from .registry import FormatterRegistry

__all__ = ["FormattingOptions"]

logger = logging.getLogger(__name__)


class FormattingOptions:
    """Options controlling how values are rendered into failure messages.

    Scalar attributes are plain mutable attributes without validation;
    misconfiguration yields degraded output rather than an exception.

    Attributes:
        use_line_breaks: Render mappings, collections and objects one member
            per line
        max_depth: Maximum depth of the object graph to render; members
            below it are replaced by a placeholder
        max_lines: Soft cap on the number of lines in the rendered output
        max_items: Maximum number of collection items to show; 0 defers to
            the formatter's own default
        string_print_length: Baseline character budget for string diff
            reporting; carried for the assertion layer, not read by the
            formatter chain

    Example:
        >>> options = FormattingOptions(max_depth=2)
        >>> options.add_formatter(my_formatter)
        >>> inner = options.clone()
        >>> inner.remove_formatter(my_formatter)
        >>> my_formatter in options.scoped_formatters
        True
    """

    __slots__ = (
        "_formatters",
        "max_depth",
        "max_items",
        "max_lines",
        "string_print_length",
        "use_line_breaks",
    )

    def __init__(
        self,
        *,
        use_line_breaks: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_lines: int = DEFAULT_MAX_LINES,
        max_items: int = DEFAULT_MAX_ITEMS,
        string_print_length: int = DEFAULT_STRING_PRINT_LENGTH,
    ) -> None:
        self.use_line_breaks = use_line_breaks
        self.max_depth = max_depth
        self.max_lines = max_lines
        self.max_items = max_items
        self.string_print_length = string_print_length
        self._formatters = FormatterRegistry()

    @property
    def scoped_formatters(self) -> tuple[ValueFormatter, ...]:
        """Scoped formatters in the order they are tried (last added first)."""
        return tuple(self._formatters)

    def add_formatter(self, formatter: ValueFormatter) -> None:
        """Add a formatter to the front of the scoped chain.

        Only affects the scope owning these options. Adding a formatter that
        is already in the chain (by identity) leaves the chain unchanged.
        """
        if self._formatters.add(formatter, first=True):
            logger.debug("Added scoped formatter: %s", type(formatter).__name__)

    def remove_formatter(self, formatter: ValueFormatter) -> None:
        """Remove a formatter from the scoped chain; silent when absent."""
        if self._formatters.remove(formatter):
            logger.debug("Removed scoped formatter: %s", type(formatter).__name__)

    def clone(self) -> "FormattingOptions":
        """Create a copy for use in a nested scope.

        Scalars are copied by value. The formatter chain is copied into a new
        registry holding the same formatter instances, so adding or removing
        formatters on either side never affects the other.
        """
        cloned = FormattingOptions(
            use_line_breaks=self.use_line_breaks,
            max_depth=self.max_depth,
            max_lines=self.max_lines,
            max_items=self.max_items,
            string_print_length=self.string_print_length,
        )
        cloned._formatters = self._formatters.copy()
        return cloned

    def _scalars(self) -> tuple[bool, int, int, int, int]:
        return (
            self.use_line_breaks,
            self.max_depth,
            self.max_lines,
            self.max_items,
            self.string_print_length,
        )

    def __eq__(self, other: object) -> bool:
        """Options are equal when scalars match and chains hold the same instances."""
        if not isinstance(other, FormattingOptions):
            return NotImplemented
        return self._scalars() == other._scalars() and self._formatters == other._formatters

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"FormattingOptions(use_line_breaks={self.use_line_breaks}, "
            f"max_depth={self.max_depth}, max_lines={self.max_lines}, "
            f"max_items={self.max_items}, "
            f"string_print_length={self.string_print_length}, "
            f"scoped_formatters={len(self._formatters)})"
        )
