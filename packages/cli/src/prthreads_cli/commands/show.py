"""show command — print review threads with their diff context."""

from __future__ import annotations

import click
from rich.console import Console

from prthreads_core.errors import PrThreadsError
from prthreads_core.gh.pull_request import get_pull, get_pull_requests, get_repo
from prthreads_core.threads import ThreadSession, show_pull_request_threads
from prthreads_core.vcs.git import GitRepository

console = Console()


@click.command("show")
@click.option("--repo", default=None, help="GitHub repository in owner/name format. Defaults to the git remote.")
@click.option(
    "--pr",
    "pr_number",
    type=int,
    default=None,
    help="Pull request number. Omit to list open PRs interactively.",
)
@click.option("--width", "-W", type=int, default=None, help="Max diff output width. Overrides config file.")
@click.option("--context", type=int, default=None, help="Diff rows shown around each comment. Overrides config file.")
@click.option(
    "--corrected-lines",
    "corrected_lines",
    is_flag=True,
    help="Index the line map with line-1 instead of the raw 1-based comment line.",
)
@click.option(
    "--skip-render-errors",
    "skip_render_errors",
    is_flag=True,
    help="Keep going when a diff cannot be aligned with its comment.",
)
@click.pass_context
def show_cmd(
    ctx,
    repo: str | None,
    pr_number: int | None,
    width: int | None,
    context: int | None,
    corrected_lines: bool,
    skip_render_errors: bool,
):
    """Print every comment on a pull request beside the code it was left on.

    Comments are grouped by file and line. For each anchored group the file
    is diffed between the commit the comment was made on and the PR head,
    and the rows around the commented line are printed.

    \b
    Requires git, a side-by-side diff tool (diff or colordiff) and a token:
      GITHUB_TOKEN         GitHub personal access token (or use gh / hub)
    """
    from prthreads_cli.auth import resolve_github_token
    from prthreads_core.config import load_config

    config_path = ctx.obj.get("config_path", ".prthreads.yml") if ctx.obj else ".prthreads.yml"
    overrides = {
        "width": width,
        "context": context,
        "line_indexing": "corrected" if corrected_lines else None,
        "on_render_error": "skip" if skip_render_errors else None,
    }

    try:
        config = load_config(config_path, cli_overrides=overrides)
    except PrThreadsError as e:
        raise click.UsageError(str(e))

    token = resolve_github_token()
    if not token:
        raise click.UsageError(
            "No GitHub token found. Set GITHUB_TOKEN or run `gh auth login` first.\n"
            "Create a token at https://github.com/settings/tokens"
        )
    config["github_token"] = token

    git = GitRepository()
    try:
        if repo is None:
            owner, name = git.owner_and_repo(config["remote"])
            repo = f"{owner}/{name}"

        this_repo = get_repo(repo, token=token)

        if pr_number is None:
            prs = get_pull_requests(this_repo)
            if not prs:
                console.print("[yellow]No open pull requests found.[/yellow]")
                return
            console.print("\nOpen pull requests:")
            for pr in prs:
                console.print(f"  [bold]#{pr.number}[/bold]  {pr.title}")
            pr_number = click.prompt("\nEnter the pull request number", type=int)

        pr_obj = get_pull(this_repo, pr_number)
        session = ThreadSession.from_config(config, content_source=git, console=console)
        summary = show_pull_request_threads(
            session,
            this_repo,
            pr_obj,
            git,
            include_review_comments=config["include_review_comments"],
        )
    except PrThreadsError as e:
        raise click.ClickException(str(e))

    console.print()
    console.print(
        f"[dim]{summary.comments} comment(s) in {summary.threads} thread(s), "
        f"{summary.rendered} with context.[/dim]"
    )
    if summary.skipped:
        console.print(f"[yellow]Could not align: {', '.join(summary.skipped)}[/yellow]")
