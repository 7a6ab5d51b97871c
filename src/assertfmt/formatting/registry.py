"""Ordered formatter registries.

Architecture:
    - FormatterRegistry: Ordered, identity-based chain of formatters
    - Process-wide custom registry: formatters registered for every scope,
      consulted after scoped formatters and before the built-ins

Formatters are compared by identity, never by ``==``: two separately
constructed instances of the same formatter class are different entries.

Python 3.13+.
"""

import logging
from collections.abc import Iterator

from .protocols import ValueFormatter

__all__ = [
    "FormatterRegistry",
    "add_custom_formatter",
    "get_custom_registry",
    "remove_custom_formatter",
]

logger = logging.getLogger(__name__)


class FormatterRegistry:
    """Ordered chain of formatters, tried front to back.

    Supports list-like introspection:
        - __iter__: Iterate over formatters in chain order
        - __len__: Count registered formatters
        - __contains__: Identity membership (supports 'in' operator)

    Memory Optimization:
        Uses __slots__ for memory efficiency (avoids per-instance __dict__).

    Example:
        >>> registry = FormatterRegistry()
        >>> registry.add(first)
        >>> registry.add(second, first=True)
        >>> list(registry) == [second, first]
        True
        >>> first in registry
        True
    """

    __slots__ = ("_formatters", "_frozen")

    def __init__(self) -> None:
        """Initialize empty formatter registry."""
        self._formatters: list[ValueFormatter] = []
        self._frozen = False

    def add(self, formatter: ValueFormatter, *, first: bool = False) -> bool:
        """Add formatter to the chain unless it is already present.

        Args:
            formatter: Formatter instance to add
            first: Insert at the front of the chain instead of the back

        Returns:
            True if the formatter was added, False if already present

        Raises:
            TypeError: If the registry is frozen
        """
        self._ensure_mutable()
        if formatter in self:
            return False
        if first:
            self._formatters.insert(0, formatter)
        else:
            self._formatters.append(formatter)
        return True

    def remove(self, formatter: ValueFormatter) -> bool:
        """Remove formatter from the chain.

        Removing an absent formatter is a no-op, so cleanup code can call
        this unconditionally.

        Returns:
            True if the formatter was removed, False if it was absent

        Raises:
            TypeError: If the registry is frozen
        """
        self._ensure_mutable()
        for index, registered in enumerate(self._formatters):
            if registered is formatter:
                del self._formatters[index]
                return True
        return False

    def freeze(self) -> None:
        """Make the registry read-only; add() and remove() raise afterwards."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """Whether the registry rejects mutation."""
        return self._frozen

    def copy(self) -> "FormatterRegistry":
        """Create a shallow, unfrozen copy of this registry.

        Returns:
            New FormatterRegistry with the same formatters in the same order.

        Note:
            The formatter instances are shared, but adding or removing
            formatters on the copy won't affect the original.
        """
        new_registry = FormatterRegistry()
        new_registry._formatters = self._formatters.copy()
        return new_registry

    def _ensure_mutable(self) -> None:
        if self._frozen:
            msg = "FormatterRegistry is frozen; use copy() to get a mutable registry"
            raise TypeError(msg)

    def __iter__(self) -> Iterator[ValueFormatter]:
        """Iterate over formatters in chain order."""
        return iter(self._formatters)

    def __len__(self) -> int:
        """Count of registered formatters."""
        return len(self._formatters)

    def __contains__(self, formatter: object) -> bool:
        """Check identity membership using 'in' operator."""
        return any(registered is formatter for registered in self._formatters)

    def __eq__(self, other: object) -> bool:
        """Registries are equal when they hold the same instances in the same order."""
        if not isinstance(other, FormatterRegistry):
            return NotImplemented
        return len(self) == len(other) and all(
            mine is theirs for mine, theirs in zip(self._formatters, other._formatters)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(FormatterRegistry())
            'FormatterRegistry(formatters=0)'
        """
        frozen = ", frozen=True" if self._frozen else ""
        return f"FormatterRegistry(formatters={len(self._formatters)}{frozen})"


# Process-wide custom formatters, shared by every scope.
# Not thread-safe: register during test-session setup, not while formatting.
_CUSTOM_REGISTRY = FormatterRegistry()


def get_custom_registry() -> FormatterRegistry:
    """Get the process-wide registry of custom formatters.

    Custom formatters are consulted after the scoped formatters of the
    active options and before the built-in formatters, in registration order.
    """
    return _CUSTOM_REGISTRY


def add_custom_formatter(formatter: ValueFormatter) -> None:
    """Register a formatter for every scope in the process.

    Registration is idempotent; a formatter already present keeps its place.
    """
    if _CUSTOM_REGISTRY.add(formatter):
        logger.debug("Registered custom formatter: %s", type(formatter).__name__)


def remove_custom_formatter(formatter: ValueFormatter) -> None:
    """Unregister a process-wide formatter; silent when absent."""
    if _CUSTOM_REGISTRY.remove(formatter):
        logger.debug("Removed custom formatter: %s", type(formatter).__name__)
