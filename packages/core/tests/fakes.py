"""In-memory collaborators: no git or diff process is ever spawned by the core tests."""

from __future__ import annotations

from prthreads_core.diff.renderer import DiffRenderer
from prthreads_core.errors import NotFoundError
from prthreads_core.vcs.git import ContentSource


class FakeContentSource(ContentSource):
    def __init__(self, files: dict[tuple[str, str], str]):
        self._files = files
        self.calls: list[tuple[str, str]] = []

    def show(self, path: str, revision: str) -> str:
        self.calls.append((path, revision))
        try:
            return self._files[(path, revision)]
        except KeyError:
            raise NotFoundError(f"{path} does not exist in {revision}")


class FakeDiffRenderer(DiffRenderer):
    def __init__(self, output: str):
        self.output = output
        self.calls: list[tuple[str, str, int]] = []

    def render(self, before: str, after: str, width: int) -> str:
        self.calls.append((before, after, width))
        return self.output


def side_by_side_row(left: str, marker: str, right: str, half: int = 12) -> str:
    """One row in the shape ``diff -y`` prints: left pane, gutter, right pane."""
    row = left.ljust(half) + " " + marker
    return row + " " + right if right else row
