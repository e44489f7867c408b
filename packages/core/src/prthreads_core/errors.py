"""Exception hierarchy for prthreads.

Collaborator failures (git, the diff tool, the GitHub API) and rendering
failures are kept apart so the orchestrator can apply the render-error
policy to one without ever masking the other.
"""

from __future__ import annotations


class PrThreadsError(Exception):
    """Base class for every error raised by prthreads."""


class ConfigError(PrThreadsError):
    """A configuration value is missing or out of range."""


class CollaboratorError(PrThreadsError):
    """An external collaborator (git, diff tool, GitHub API) failed."""


class NotFoundError(CollaboratorError):
    """The requested path does not exist at the requested revision."""


class RenderingError(PrThreadsError):
    """The diff output cannot be aligned with the original file."""
