"""Align original-file line numbers with rows of a side-by-side diff."""

from __future__ import annotations

import logging
from typing import Callable

from prthreads_core.diff.columns import guess_split_column, is_addition
from prthreads_core.errors import RenderingError

logger = logging.getLogger(__name__)

LINE_INDEXING_SOURCE = "source"
LINE_INDEXING_CORRECTED = "corrected"
LINE_INDEXING_MODES = (LINE_INDEXING_SOURCE, LINE_INDEXING_CORRECTED)


def build_line_map(
    before_text: str,
    diff_text: str,
    detect_column: Callable[[list[str]], int] = guess_split_column,
) -> list[int]:
    """Return, for each line of ``before_text``, the diff row that renders it.

    Rows marked as right-pane-only additions are skipped without consuming a
    line of the original file. The result is strictly increasing.

    Raises RenderingError when the diff runs out of rows before every
    original line has been placed.
    """
    before_lines = before_text.split("\n")
    diff_lines = diff_text.split("\n")
    column = detect_column(diff_lines)
    logger.debug("Split column %d for %d diff rows", column, len(diff_lines))

    mapping: list[int] = []
    di = 0
    for li in range(len(before_lines)):
        while di < len(diff_lines) and is_addition(diff_lines[di], column):
            di += 1
        if di >= len(diff_lines):
            raise RenderingError(
                f"Diff output has {len(diff_lines)} row(s); ran out while placing line {li + 1} "
                f"of {len(before_lines)}."
            )
        mapping.append(di)
        di += 1
    return mapping


def anchor_index(mapping: list[int], line: int, indexing: str = LINE_INDEXING_SOURCE) -> int:
    """Look up the diff row for a 1-based comment line.

    ``source`` indexes the mapping with the line number as-is, which is how
    comments have always been placed; ``corrected`` subtracts one so the
    1-based line lands on its own 0-based entry.
    """
    if indexing not in LINE_INDEXING_MODES:
        raise ValueError(f"Unknown line indexing mode: {indexing!r}")
    index = line - 1 if indexing == LINE_INDEXING_CORRECTED else line
    if index < 0 or index >= len(mapping):
        raise RenderingError(f"Line {line} is outside the {len(mapping)} mapped line(s) of the original file.")
    return mapping[index]
