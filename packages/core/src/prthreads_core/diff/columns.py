"""Split-column detection for side-by-side diff output.

``diff -y`` does not report where the right pane starts, and the position
moves with the requested width and the tab expansion of the content. The
only reliable signal is the gutter it draws between the panes: a space
followed by one of ``' '``, ``'<'``, ``'>'`` or ``'|'`` on every row.

Everything here works on the rendered text alone, so a renderer that reports
line correspondence directly can replace this module without touching the
line mapper's callers (see ``build_line_map(detect_column=...)``).
"""

from __future__ import annotations

# Characters diff -y writes in the gutter right after the left pane.
GUTTER_MARKERS = frozenset(" <>|")

ADDITION_MARKER = ">"


def _fits(line: str, guess: int) -> bool:
    if len(line) < guess + 2:
        return True
    return line[guess] == " " and line[guess + 1] in GUTTER_MARKERS


def guess_split_column(diff_lines: list[str]) -> int:
    """Return the column of the gutter marker, or 0 if it cannot be found.

    Candidates are tried from just left of the middle of the first row to
    its end; the first one every row agrees with wins. A trailing empty row
    (from splitting text that ends with a newline) is not checked.

    0 is not an error: callers treat it as "no split known" and consider
    every row to belong to the left pane.
    """
    if not diff_lines or len(diff_lines[0]) <= 4:
        return 0

    width = len(diff_lines[0])
    last = len(diff_lines) - 1
    for guess in range(width // 2 - 2, width - 1):
        if all(_fits(line, guess) for i, line in enumerate(diff_lines) if not (i == last and line == "")):
            return guess + 1
    return 0


def is_addition(line: str, column: int) -> bool:
    """True when the row only exists in the right pane."""
    if column <= 0:
        return False
    return len(line) > column and line[column] == ADDITION_MARKER
