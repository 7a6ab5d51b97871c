"""Text helpers for rendered values.

Line capping and re-indentation of multi-line members.

Python 3.13+. Zero external dependencies.
"""

import textwrap

__all__ = ["indent", "limit_lines"]


def limit_lines(text: str, max_lines: int) -> tuple[str, bool]:
    """Keep at most max_lines lines of text.

    Args:
        text: Rendered output
        max_lines: Maximum number of lines to keep; values <= 0 keep nothing

    Returns:
        Tuple of (possibly shortened text, whether lines were dropped)
    """
    lines = text.splitlines()
    if len(lines) <= max(max_lines, 0):
        return text, False
    return "\n".join(lines[: max(max_lines, 0)]), True


def indent(text: str, prefix: str) -> str:
    """Prefix every non-blank line of text with prefix."""
    return textwrap.indent(text, prefix)
