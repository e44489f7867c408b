from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from github import Github, GithubException

from prthreads_core.errors import CollaboratorError, NotFoundError
from prthreads_core.models import Comment, CommitRef, PullRequest

logger = logging.getLogger(__name__)

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _format_timestamp(value: datetime | None) -> str:
    """GitHub's wire format, which sorts correctly as a plain string."""
    if value is None:
        return ""
    return value.strftime(_TIMESTAMP_FORMAT)


def _login(item) -> str:
    user = getattr(item, "user", None)
    return getattr(user, "login", None) or "unknown"


def get_repo(repo_name: str, token: str):
    try:
        return Github(token).get_repo(repo_name)
    except GithubException as e:
        raise CollaboratorError(f"Could not open repository {repo_name}: {e}") from e


def get_pull(repo, pr_number: int):
    try:
        return repo.get_pull(pr_number)
    except GithubException as e:
        if e.status == 404:
            raise NotFoundError(f"PR #{pr_number} not found in {repo.full_name}.") from e
        raise CollaboratorError(f"Could not fetch PR #{pr_number}: {e}") from e


def get_pull_requests(repo, state: str = "open") -> list:
    """All pull requests in ``state``; pagination happens here so API errors are wrapped."""
    try:
        return list(repo.get_pulls(state=state))
    except GithubException as e:
        raise CollaboratorError(f"Could not list {state} pull requests: {e}") from e


def _commit_ref(ref) -> CommitRef:
    # repo is None once the fork behind the PR has been deleted.
    repo = ref.repo
    return CommitRef(sha=ref.sha, repo_name=repo.name if repo is not None else "")


def to_pull_request(pr) -> PullRequest:
    return PullRequest(
        number=pr.number,
        head=_commit_ref(pr.head),
        base=_commit_ref(pr.base),
        issue_url=pr.issue_url or "",
        title=pr.title or "",
    )


def get_issue_comments(pr) -> list[Comment]:
    """Conversation comments: no path, no line, no commit."""
    return [
        Comment(
            path="",
            line=0,
            commit_id="",
            body=c.body or "",
            author=_login(c),
            created_at=_format_timestamp(c.created_at),
        )
        for c in pr.get_issue_comments()
    ]


def get_commit_comments(repo, sha: str) -> list[Comment]:
    return [
        Comment(
            path=c.path or "",
            line=c.line or 0,
            commit_id=c.commit_id or sha,
            body=c.body or "",
            author=_login(c),
            created_at=_format_timestamp(c.created_at),
        )
        for c in repo.get_commit(sha).get_comments()
    ]


def _review_line(comment) -> int:
    if getattr(comment, "side", None) == "LEFT":
        return 0
    return comment.original_line or 0


def get_review_comments(pr) -> list[Comment]:
    """Inline review comments, anchored where they were originally written.

    ``original_line`` is relative to ``original_commit_id``, which is exactly
    the before-revision the thread renderer diffs against head. Comments on
    the LEFT side count lines of the base file instead, so they are kept
    without an anchor.
    """
    return [
        Comment(
            path=c.path or "",
            line=_review_line(c),
            commit_id=c.original_commit_id or c.commit_id or "",
            body=c.body or "",
            author=_login(c),
            created_at=_format_timestamp(c.created_at),
        )
        for c in pr.get_review_comments()
    ]


def collect_comments(repo, pr, commit_shas: Iterable[str], include_review_comments: bool = True) -> list[Comment]:
    """Gather every comment on the pull request and on each of its commits."""
    try:
        comments = get_issue_comments(pr)
        for sha in commit_shas:
            comments.extend(get_commit_comments(repo, sha))
        if include_review_comments:
            comments.extend(get_review_comments(pr))
    except GithubException as e:
        raise CollaboratorError(f"Could not fetch comments for PR #{pr.number}: {e}") from e
    logger.debug("Fetched %d comment(s) for PR #%s", len(comments), pr.number)
    return comments
