"""Side-by-side diff rendering through an external tool."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from prthreads_core.errors import CollaboratorError

logger = logging.getLogger(__name__)

DEFAULT_DIFF_TOOL = "diff"

# diff exits 1 when the inputs differ; only >1 means trouble.
_OK_EXIT_CODES = (0, 1)


class DiffRenderer(ABC):
    """Turns two versions of a file into two-pane diff text."""

    @abstractmethod
    def render(self, before: str, after: str, width: int) -> str:
        """Return the raw side-by-side rendering, one row per line."""


class SideBySideDiffRenderer(DiffRenderer):
    """Runs ``<tool> -y -t -W <width>`` on temporary copies of both texts.

    A fresh temporary directory is created for every call and removed when
    the call returns, whether or not the tool succeeded.
    """

    def __init__(self, tool: str = DEFAULT_DIFF_TOOL):
        self.tool = tool

    def render(self, before: str, after: str, width: int) -> str:
        with tempfile.TemporaryDirectory(prefix="prthreads-") as tmp:
            before_path = Path(tmp) / "before"
            after_path = Path(tmp) / "after"
            before_path.write_text(before, encoding="utf-8")
            after_path.write_text(after, encoding="utf-8")

            cmd = [self.tool, "-y", "-t", "-W", str(width), str(before_path), str(after_path)]
            logger.debug("Running %s", " ".join(cmd))
            try:
                result = subprocess.run(cmd, capture_output=True, encoding="utf-8", errors="replace")
            except FileNotFoundError as e:
                raise CollaboratorError(f"Diff tool {self.tool!r} not found. Is it installed and on PATH?") from e
            except OSError as e:
                raise CollaboratorError(f"Could not run {self.tool!r}: {e}") from e

        if result.returncode not in _OK_EXIT_CODES:
            raise CollaboratorError(
                f"{self.tool} exited with status {result.returncode}: {result.stderr.strip() or 'no output'}"
            )
        return result.stdout
