"""Depth limiting for recursive value rendering.

Rendering walks the object graph one member at a time. DepthGuard counts
how many members deep the walk currently is so that the resolver can stop
at max_depth and substitute a placeholder instead of recursing until
RecursionError.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from assertfmt.diagnostics import FormattingError
from assertfmt.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(FormattingError):
    """A member lies deeper than max_depth.

    Collected by the resolver, which renders the depth placeholder instead.
    """


@dataclass(slots=True)
class DepthGuard:
    """Member depth counter for one render.

    Entering the guard descends one member level; entering at max_depth
    raises before the level is taken, so a failed entry leaves the count
    untouched.

    Example:
        >>> guard = DepthGuard(max_depth=1)
        >>> with guard:
        ...     guard.is_exceeded()
        True

    Attributes:
        max_depth: Deepest member level that may be rendered
        current_depth: Member level of the member being rendered (root is 0)
    """

    max_depth: int
    current_depth: int = field(default=0, init=False)

    def __enter__(self) -> DepthGuard:
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1

    def is_exceeded(self) -> bool:
        """True when one more level would pass max_depth."""
        return self.current_depth >= self.max_depth

    def check(self, path: str | None = None) -> None:
        """Raise if one more level would pass max_depth.

        Args:
            path: Member path reported in the diagnostic

        Raises:
            DepthLimitExceededError: If the limit is reached
        """
        if self.is_exceeded():
            raise DepthLimitExceededError(ErrorTemplate.max_depth_exceeded(self.max_depth, path))


def depth_clamp(requested_depth: int, reserve_frames: int = 50, frames_per_level: int = 1) -> int:
    """Clamp a requested depth so rendering stays below the recursion limit.

    Logs a warning when the depth is lowered.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames kept free for the caller
        frames_per_level: Stack frames one level of nesting costs

    Returns:
        requested_depth, or the deepest level the recursion limit allows

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(5000, frames_per_level=4)  # (1000 - 50) // 4
        237
    """
    limit = sys.getrecursionlimit()
    max_safe_depth = (limit - reserve_frames) // max(frames_per_level, 1)
    if requested_depth <= max_safe_depth:
        return requested_depth
    logger.warning(
        "Requested max_depth %d needs more stack than the recursion limit (%d) allows; "
        "using %d. Raise sys.setrecursionlimit() to render deeper.",
        requested_depth,
        limit,
        max_safe_depth,
    )
    return max_safe_depth
