"""Per-render state for value formatting.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from assertfmt.constants import DEFAULT_MAX_DEPTH, ROOT_PATH
from assertfmt.core.depth_guard import DepthGuard
from assertfmt.diagnostics import FormattingError

__all__ = ["RenderContext"]


@dataclass(slots=True)
class RenderContext:
    """Explicit state of one top-level render.

    Tracks the member path from the root to the value being rendered, the
    objects on that path (for cycle detection), the nesting depth, and the
    errors collected so far.

    Performance: Uses both a list (ordered ancestors with their paths) and a
    set of ids (O(1) lookup) for cycle detection.

    Instance Lifecycle:
        Each top-level render creates a fresh RenderContext, so concurrent
        renders never share state.

    Attributes:
        max_depth: Deepest member level rendered
        errors: Errors collected during the render
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    errors: list[FormattingError] = field(default_factory=list)
    _ancestors: list[tuple[object, str]] = field(default_factory=list)
    _ancestor_ids: set[int] = field(default_factory=set)
    _depth_guard: DepthGuard = field(init=False)

    def __post_init__(self) -> None:
        """Initialize the depth guard with the configured max depth."""
        self._depth_guard = DepthGuard(max_depth=self.max_depth)

    @property
    def depth_guard(self) -> DepthGuard:
        """Depth guard for context manager use around each member.

        Usage:
            with context.depth_guard:
                text = self._render(member, context)
        """
        return self._depth_guard

    @property
    def path(self) -> str:
        """Member path of the value being rendered, e.g. ``value['a'].x``."""
        if not self._ancestors:
            return ROOT_PATH
        return self._ancestors[-1][1]

    def child_path(self, name: str) -> str:
        """Member path of a child of the value being rendered."""
        return f"{self.path}{name}"

    def contains(self, value: object) -> bool:
        """Check whether value is on the current path (cycle detection).

        Identity based: equal but distinct objects are not cycles.
        """
        return id(value) in self._ancestor_ids

    def get_cycle_path(self, value: object, path: str) -> list[str]:
        """Paths from the first occurrence of value on the current path to path."""
        for index, (ancestor, _) in enumerate(self._ancestors):
            if ancestor is value:
                return [p for _, p in self._ancestors[index:]] + [path]
        return [path]

    @contextmanager
    def member(self, value: object, path: str) -> Iterator[None]:
        """Put value on the current path while its members are rendered."""
        self._ancestors.append((value, path))
        added = id(value) not in self._ancestor_ids
        self._ancestor_ids.add(id(value))
        try:
            yield
        finally:
            self._ancestors.pop()
            if added:
                self._ancestor_ids.discard(id(value))

    def add_error(self, error: FormattingError) -> None:
        """Record an error for the caller of the render."""
        self.errors.append(error)
