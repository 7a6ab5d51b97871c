"""Formatter resolution and recursive value rendering.

Python 3.13+.
"""

import logging
from collections.abc import Iterator

from assertfmt.constants import (
    PLACEHOLDER_CYCLE,
    PLACEHOLDER_FORMATTER_FAULT,
    PLACEHOLDER_MAX_DEPTH,
)
from assertfmt.core.depth_guard import DepthLimitExceededError, depth_clamp
from assertfmt.diagnostics import (
    CyclicReferenceError,
    ErrorTemplate,
    FormatterFaultError,
    FormattingError,
    NoFormatterFoundError,
)

from .builtins import DefaultFormatter, get_builtin_registry
from .context import FormattingContext
from .options import FormattingOptions
from .protocols import ValueFormatter
from .registry import FormatterRegistry, get_custom_registry
from .render_context import RenderContext

__all__ = ["ValueResolver"]

logger = logging.getLogger(__name__)

# Stack frames used per nesting level: _format_child, _render, the
# formatter's format(), its format_child callback, and one spare for
# helpers a custom formatter may call in between.
FRAMES_PER_LEVEL = 5

# Frames left for the caller (test runner, assertion library) below the
# top-level render.
RESERVE_FRAMES = 200

_FALLBACK_FORMATTER = DefaultFormatter()


class ValueResolver:
    """Renders values through the formatter chain.

    The chain is walked in this order, first match wins:
        1. Scoped formatters of the options (last added first)
        2. Process-wide custom formatters (registration order)
        3. Built-in formatters (ending with a formatter accepting everything)

    Formatter misbehaviour never escapes: a formatter raising from
    can_handle() or format() is replaced by a placeholder and the error is
    collected. BaseException subclasses such as KeyboardInterrupt propagate.

    Thread Safety:
        Uses an explicit RenderContext per resolve() call; the resolver
        itself holds no per-render state.
    """

    __slots__ = ("builtins", "custom", "options")

    def __init__(
        self,
        options: FormattingOptions,
        *,
        custom: FormatterRegistry | None = None,
        builtins: FormatterRegistry | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            options: Options supplying limits and the scoped formatters
            custom: Process-wide custom formatters (default: shared registry)
            builtins: Built-in chain (default: shared frozen built-in registry)
        """
        self.options = options
        self.custom = custom if custom is not None else get_custom_registry()
        self.builtins = builtins if builtins is not None else get_builtin_registry()

    def chain(self) -> Iterator[ValueFormatter]:
        """Iterate over every formatter in resolution order."""
        yield from self.options.scoped_formatters
        yield from self.custom
        yield from self.builtins

    def resolve_formatter(self, value: object) -> ValueFormatter | None:
        """Find the first formatter whose can_handle() accepts value.

        Returns:
            The matching formatter, or None when the chain is exhausted

        Raises:
            Exception: Whatever a formatter's can_handle() raises
        """
        for formatter in self.chain():
            if formatter.can_handle(value):
                return formatter
        return None

    def resolve(self, value: object) -> tuple[str, tuple[FormattingError, ...]]:
        """Render value to text with error collection.

        Returns:
            Tuple of (text, errors)
            - text: Best-effort rendering, placeholders substituted where
              members could not be rendered
            - errors: Tuple of errors encountered (immutable)

        Note:
            Never raises for formatter faults or limits.
        """
        context = FormattingContext.from_options(self.options)
        max_depth = depth_clamp(
            self.options.max_depth,
            reserve_frames=RESERVE_FRAMES,
            frames_per_level=FRAMES_PER_LEVEL,
        )
        render = RenderContext(max_depth=max_depth)
        with render.member(value, render.path):
            text = self._render(value, context, render)
        return text, tuple(render.errors)

    def _render(self, value: object, context: FormattingContext, render: RenderContext) -> str:
        """Select a formatter for value and run it, isolating faults."""
        path = render.path
        formatter: ValueFormatter
        for formatter in self.chain():
            try:
                accepted = formatter.can_handle(value)
            except Exception as e:  # noqa: BLE001 - formatter faults are isolated
                diag = ErrorTemplate.formatter_capability_failed(
                    type(formatter).__name__, type(value).__name__, e, path
                )
                return self._fault(FormatterFaultError(diag, e), value, render)
            if accepted:
                break
        else:
            render.add_error(
                NoFormatterFoundError(ErrorTemplate.no_formatter_found(type(value).__name__, path))
            )
            formatter = _FALLBACK_FORMATTER

        def format_child(name: str, member: object, /) -> str:
            return self._format_child(name, member, context, render)

        try:
            return formatter.format(value, context, format_child)
        except Exception as e:  # noqa: BLE001 - formatter faults are isolated
            diag = ErrorTemplate.formatter_render_failed(
                type(formatter).__name__, type(value).__name__, e, path
            )
            return self._fault(FormatterFaultError(diag, e), value, render)

    def _format_child(
        self,
        name: str,
        member: object,
        context: FormattingContext,
        render: RenderContext,
    ) -> str:
        """Render a member of the value being rendered, one level deeper."""
        path = render.child_path(name)
        guard = render.depth_guard

        try:
            guard.check(path)
        except DepthLimitExceededError as e:
            render.add_error(e)
            return PLACEHOLDER_MAX_DEPTH.format(max_depth=guard.max_depth)

        if render.contains(member):
            cycle_path = render.get_cycle_path(member, path)
            render.add_error(
                CyclicReferenceError(
                    ErrorTemplate.cyclic_reference(type(member).__name__, cycle_path)
                )
            )
            return PLACEHOLDER_CYCLE.format(type_name=type(member).__name__)

        with guard, render.member(member, path):
            return self._render(member, context, render)

    @staticmethod
    def _fault(error: FormatterFaultError, value: object, render: RenderContext) -> str:
        """Record a formatter fault and return the placeholder for value."""
        diagnostic = error.diagnostic
        logger.warning("Formatter fault: %s", diagnostic.message if diagnostic else error)
        render.add_error(error)
        return PLACEHOLDER_FORMATTER_FAULT.format(
            type_name=type(value).__name__, error_type=type(error.original).__name__
        )
