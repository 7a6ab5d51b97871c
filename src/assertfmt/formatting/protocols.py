"""Contracts between the resolver and formatter implementations.

A formatter is any object providing ``can_handle`` and ``format``; it does
not need to inherit from anything. Nested members are rendered by calling
back into the resolver through ``format_child`` so that every member goes
through the same formatter chain and limits.

Python 3.13+.
"""

from typing import Protocol, runtime_checkable

from .context import FormattingContext

__all__ = ["FormatChild", "ValueFormatter"]


class FormatChild(Protocol):
    """Callback rendering a nested member of the value being formatted.

    Args:
        name: Path segment of the member relative to its parent,
            e.g. ``".x"``, ``"[0]"`` or ``"['key']"``
        value: The member value

    Returns:
        Rendered member text (never raises for formatter faults; a
        placeholder is returned instead)
    """

    def __call__(self, name: str, value: object, /) -> str:
        ...  # pragma: no cover  # Protocol stub - not executable


@runtime_checkable
class ValueFormatter(Protocol):
    """Protocol for pluggable value formatters.

    Example:
        >>> class Upper:
        ...     def can_handle(self, value: object) -> bool:
        ...         return isinstance(value, str)
        ...     def format(self, value, context, format_child) -> str:
        ...         return value.upper()
        >>> isinstance(Upper(), ValueFormatter)
        True
    """

    def can_handle(self, value: object) -> bool:
        """Return True if this formatter renders ``value``."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def format(
        self,
        value: object,
        context: FormattingContext,
        format_child: FormatChild,
    ) -> str:
        """Render ``value`` as text."""
        ...  # pragma: no cover  # Protocol stub - not executable
