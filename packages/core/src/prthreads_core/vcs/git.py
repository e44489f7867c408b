"""Read-only access to the local git checkout."""

from __future__ import annotations

import logging
import re
import subprocess
from abc import ABC, abstractmethod

from prthreads_core.errors import CollaboratorError, NotFoundError

logger = logging.getLogger(__name__)

_GITHUB_REMOTE_RE = re.compile(r"github\.com[:/]([^/]+)/([^/]+?)(?:\.git)?/?$")

# Phrases git uses when a path is absent at a revision.
_MISSING_PATH_HINTS = ("does not exist in", "exists on disk, but not in")


class ContentSource(ABC):
    """Where file contents at a given revision come from."""

    @abstractmethod
    def show(self, path: str, revision: str) -> str:
        """Return the text of ``path`` at ``revision``.

        Raises NotFoundError if the path is absent at that revision and
        CollaboratorError for any other failure.
        """


class GitRepository(ContentSource):
    def __init__(self, cwd: str | None = None):
        self.cwd = cwd

    def _git(self, *args: str) -> str:
        cmd = ["git", *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, encoding="utf-8", errors="replace", cwd=self.cwd, check=True
            )
        except FileNotFoundError as e:
            raise CollaboratorError("'git' command not found. Ensure Git is installed and in PATH.") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            message = f"'{' '.join(cmd)}' failed: {stderr or f'exit status {e.returncode}'}"
            if any(hint in stderr for hint in _MISSING_PATH_HINTS):
                raise NotFoundError(message) from e
            raise CollaboratorError(message) from e
        return result.stdout

    def show(self, path: str, revision: str) -> str:
        return self._git("show", f"{revision}:{path}")

    def commits_between(self, base_sha: str, head_sha: str) -> list[str]:
        """SHAs reachable from head but not from base, newest first."""
        output = self._git("log", "--format=format:%H", f"{base_sha}..{head_sha}")
        return [sha.strip() for sha in output.split("\n") if sha.strip()]

    def remote_url(self, remote: str = "origin") -> str:
        return self._git("config", f"remote.{remote}.url").strip()

    def owner_and_repo(self, remote: str = "origin") -> tuple[str, str]:
        url = self.remote_url(remote)
        match = _GITHUB_REMOTE_RE.search(url)
        if not match:
            raise CollaboratorError(f"Could not understand remote {remote} url: {url}")
        return match.group(1), match.group(2)
