"""Print review comment threads next to the diff context they refer to."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape

from prthreads_core.diff.mapping import LINE_INDEXING_SOURCE, anchor_index, build_line_map
from prthreads_core.diff.renderer import DiffRenderer, SideBySideDiffRenderer
from prthreads_core.diff.window import DEFAULT_CONTEXT, context_window
from prthreads_core.errors import RenderingError
from prthreads_core.gh.pull_request import collect_comments, to_pull_request
from prthreads_core.models import Comment, PullRequest
from prthreads_core.ordering import group_comments, sort_comments
from prthreads_core.vcs.git import ContentSource, GitRepository

logger = logging.getLogger(__name__)


@dataclass
class ThreadSession:
    """Everything the renderer needs, built once at startup and passed down explicitly."""

    content_source: ContentSource
    renderer: DiffRenderer
    console: Console = field(default_factory=Console)
    width: int = 120
    context: int = DEFAULT_CONTEXT
    line_indexing: str = LINE_INDEXING_SOURCE
    skip_render_errors: bool = False

    @classmethod
    def from_config(cls, config: dict, content_source: ContentSource, console: Console | None = None) -> ThreadSession:
        return cls(
            content_source=content_source,
            renderer=SideBySideDiffRenderer(tool=config["diff_tool"]),
            console=console or Console(),
            width=config["width"],
            context=config["context"],
            line_indexing=config["line_indexing"],
            skip_render_errors=config["on_render_error"] == "skip",
        )


@dataclass
class ThreadSummary:
    threads: int = 0
    comments: int = 0
    rendered: int = 0
    skipped: list[str] = field(default_factory=list)


def render_context(session: ThreadSession, path: str, line: int, commit_id: str, head_sha: str) -> list[str]:
    """Return the diff rows around ``line`` of ``path`` as of ``commit_id``, diffed against head."""
    before = session.content_source.show(path, commit_id)
    after = session.content_source.show(path, head_sha)
    diff_text = session.renderer.render(before, after, session.width)

    mapping = build_line_map(before, diff_text)
    index = anchor_index(mapping, line, session.line_indexing)
    return context_window(diff_text.split("\n"), index, session.context)


def _print_comment(console: Console, comment: Comment) -> None:
    console.print(f"[bold]{escape(comment.author)}[/bold]: {escape(comment.body)}", highlight=False)


def show_threads(session: ThreadSession, pull: PullRequest, comments: list[Comment]) -> ThreadSummary:
    """Print each (path, line) thread followed by one context block for anchored threads.

    A RenderingError aborts the run unless the session skips render errors.
    Collaborator failures always propagate.
    """
    console = session.console
    summary = ThreadSummary()

    for path, line, thread in group_comments(sort_comments(comments)):
        summary.threads += 1
        summary.comments += len(thread)

        console.print()
        console.rule(style="dim")
        for comment in thread:
            _print_comment(console, comment)

        if line == 0:
            continue

        location = f"{path}:{line}"
        try:
            rows = render_context(session, path, line, thread[0].commit_id, pull.head.sha)
        except RenderingError as e:
            if not session.skip_render_errors:
                raise RenderingError(f"{location}: {e}") from e
            logger.warning("Skipping context for %s: %s", location, e)
            console.print(f"[yellow]{escape(location)}: could not align diff ({escape(str(e))})[/yellow]")
            summary.skipped.append(location)
            continue

        console.print(f"[bold cyan]{escape(location)}[/bold cyan]", highlight=False)
        for row in rows:
            console.print(row, markup=False, highlight=False, emoji=False, soft_wrap=True)
        summary.rendered += 1

    return summary


def show_pull_request_threads(
    session: ThreadSession,
    repo,
    pr,
    git: GitRepository,
    include_review_comments: bool = True,
) -> ThreadSummary:
    """Fetch every comment on ``pr`` and its commits, then print the threads."""
    pull = to_pull_request(pr)
    commit_shas = git.commits_between(pull.base.sha, pull.head.sha)
    logger.debug("PR #%s spans %d commit(s)", pull.number, len(commit_shas))
    comments = collect_comments(repo, pr, commit_shas, include_review_comments=include_review_comments)
    return show_threads(session, pull, comments)

