"""In-memory snapshots of pull request data.

Built once per invocation from the GitHub API and never written back.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Comment:
    """A single review remark.

    ``line == 0`` means the comment has no anchor (conversation comments,
    or review comments whose original line is gone).
    """

    path: str
    line: int
    commit_id: str
    body: str
    author: str
    created_at: str  # YYYY-MM-DDTHH:MM:SSZ, compared as a string

    @property
    def anchored(self) -> bool:
        return self.line != 0


@dataclass(frozen=True)
class CommitRef:
    sha: str
    repo_name: str


@dataclass(frozen=True)
class PullRequest:
    number: int
    head: CommitRef
    base: CommitRef
    issue_url: str = ""
    title: str = ""
