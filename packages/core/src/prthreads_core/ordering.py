"""Deterministic ordering and grouping of review comments."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable

from prthreads_core.models import Comment


def comment_sort_key(comment: Comment) -> tuple[str, int, str]:
    return (comment.path, comment.line, comment.created_at)


def sort_comments(comments: Iterable[Comment]) -> list[Comment]:
    """Return comments ordered by path, then line, then creation time.

    ``sorted`` is stable, so comments with identical keys keep the order in
    which they were fetched.
    """
    return sorted(comments, key=comment_sort_key)


def group_comments(comments: Iterable[Comment]) -> list[tuple[str, int, list[Comment]]]:
    """Split an already sorted sequence into runs sharing the same (path, line)."""
    return [
        (path, line, list(group))
        for (path, line), group in groupby(comments, key=lambda c: (c.path, c.line))
    ]
