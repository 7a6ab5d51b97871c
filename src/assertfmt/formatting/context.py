"""Per-request formatting context.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .options import FormattingOptions

__all__ = ["FormattingContext"]


@dataclass(frozen=True, slots=True)
class FormattingContext:
    """Information about the current formatting action.

    Built once per top-level formatting request from the active options and
    handed to every formatter taking part in that request.

    Attributes:
        use_line_breaks: Whether formatters should use line breaks when they
            support it
        max_items: Maximum number of items to display when the formatter
            supports it; 0 defers to the formatter's own default
    """

    use_line_breaks: bool = False
    max_items: int = 0

    @classmethod
    def from_options(cls, options: FormattingOptions) -> FormattingContext:
        """Copy the context fields from an options instance."""
        return cls(use_line_breaks=options.use_line_breaks, max_items=options.max_items)
