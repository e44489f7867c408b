"""Pick the rows of a diff rendering shown around an anchor."""

from __future__ import annotations

DEFAULT_CONTEXT = 3


def window_bounds(index: int, total: int, context: int = DEFAULT_CONTEXT) -> tuple[int, int]:
    """Half-open ``[start, stop)`` of at most ``2 * context + 1`` rows, clamped to ``[0, total)``."""
    start = max(0, index - context)
    stop = min(index + context + 1, total)
    return start, max(start, stop)


def context_window(diff_lines: list[str], index: int, context: int = DEFAULT_CONTEXT) -> list[str]:
    start, stop = window_bounds(index, len(diff_lines), context)
    return diff_lines[start:stop]
