"""Scope lifecycle for formatting options.

Every assertion scope gets its own copy of the formatting options: entering
a scope clones the active options, exiting restores the previous ones.
Changes made inside a scope (scalar settings or scoped formatters) are
therefore invisible to outer and sibling scopes.

Architecture:
    - Process-wide default options, active when no scope is entered
    - Scope stack per execution context, held in a ContextVar

Thread Safety:
    Each thread and each asyncio task has its own scope stack. A task
    started inside a scope sees that scope, but scopes it enters never
    leak into its parent. The default options themselves are shared and
    must not be mutated concurrently.

Python 3.13+.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from dataclasses import dataclass

from assertfmt.diagnostics import ErrorTemplate, ScopeError
from assertfmt.formatting.options import FormattingOptions

__all__ = [
    "FormattingScope",
    "ScopeSnapshot",
    "current_options",
    "get_default_options",
    "on_scope_enter",
    "on_scope_exit",
    "scope_depth",
]

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = FormattingOptions()

# Immutable tuple: pushing creates a new tuple, so a context copied into a
# task or thread can never observe the other side's pushes.
_scope_stack: ContextVar[tuple[FormattingOptions, ...]] = ContextVar(
    "assertfmt_scope_stack", default=()
)

_OVERRIDABLE = frozenset(
    {"use_line_breaks", "max_depth", "max_lines", "max_items", "string_print_length"}
)


@dataclass(frozen=True, slots=True)
class ScopeSnapshot:
    """Handle returned by on_scope_enter() and consumed by on_scope_exit().

    Attributes:
        options: The options installed for the entered scope
        depth: Number of active scopes including this one
    """

    options: FormattingOptions
    depth: int


def get_default_options() -> FormattingOptions:
    """Get the process-wide default options.

    Changes to the returned instance apply to every scope entered afterwards
    and to code running outside any scope.
    """
    return _DEFAULT_OPTIONS


def current_options() -> FormattingOptions:
    """Options of the innermost active scope, or the default options."""
    stack = _scope_stack.get()
    return stack[-1] if stack else _DEFAULT_OPTIONS


def scope_depth() -> int:
    """Number of active scopes in the current execution context."""
    return len(_scope_stack.get())


def on_scope_enter() -> ScopeSnapshot:
    """Enter a scope: clone the active options and install the clone.

    Returns:
        Snapshot to pass to on_scope_exit() when the scope ends
    """
    stack = _scope_stack.get()
    options = current_options().clone()
    _scope_stack.set((*stack, options))
    logger.debug("Formatting scope entered (depth %d)", len(stack) + 1)
    return ScopeSnapshot(options=options, depth=len(stack) + 1)


def on_scope_exit(snapshot: ScopeSnapshot) -> None:
    """Exit a scope: restore the options active before it was entered.

    Raises:
        ScopeError: If no scope is active, or if snapshot does not belong to
            the innermost scope (scopes must exit in reverse order of entry)
    """
    stack = _scope_stack.get()
    if not stack:
        raise ScopeError(ErrorTemplate.scope_not_active())
    if stack[-1] is not snapshot.options:
        raise ScopeError(ErrorTemplate.scope_order_violation(len(stack)))
    _scope_stack.set(stack[:-1])
    logger.debug("Formatting scope exited (depth %d)", len(stack))


class FormattingScope:
    """Context manager entering a formatting scope.

    Keyword arguments override scalar settings of the scope's options.

    Example:
        >>> with FormattingScope(max_depth=2) as options:
        ...     options.add_formatter(MyFormatter())
        ...     text = to_string(value)
        >>> # Outside: previous options, MyFormatter gone

    Raises:
        TypeError: If an override names an unknown setting
    """

    __slots__ = ("_overrides", "_snapshot")

    def __init__(self, **overrides: object) -> None:
        unknown = sorted(set(overrides) - _OVERRIDABLE)
        if unknown:
            msg = f"FormattingScope() got an unexpected keyword argument '{unknown[0]}'"
            raise TypeError(msg)
        self._overrides = overrides
        self._snapshot: ScopeSnapshot | None = None

    def __enter__(self) -> FormattingOptions:
        """Enter the scope and return its options."""
        self._snapshot = on_scope_enter()
        options = self._snapshot.options
        for name, value in self._overrides.items():
            setattr(options, name, value)
        return options

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit the scope. Does not suppress exceptions.

        Scopes entered inside this one and still active are discarded with
        it. That misuse raises ScopeError, unless the block already raised:
        the block's exception then propagates and the misuse is logged.
        """
        snapshot, self._snapshot = self._snapshot, None
        if snapshot is None:
            raise ScopeError(ErrorTemplate.scope_not_active())
        try:
            on_scope_exit(snapshot)
        except ScopeError:
            _unwind(snapshot)
            if exc_val is None:
                raise
            logger.warning(
                "Formatting scope at depth %d exited with inner scopes still active",
                snapshot.depth,
            )


def _unwind(snapshot: ScopeSnapshot) -> None:
    """Drop snapshot's scope and every scope above it, if it is still active."""
    stack = _scope_stack.get()
    index = snapshot.depth - 1
    if index < len(stack) and stack[index] is snapshot.options:
        _scope_stack.set(stack[:index])
        logger.debug("Formatting scopes unwound to depth %d", index)
