"""GitHub token resolution with gh CLI and hub fallbacks.

Resolution order (stops at first success):
  1. GITHUB_TOKEN environment variable (CI / explicit override)
  2. `gh auth token` (GitHub CLI session, works after `gh auth login`)
  3. oauth_token in ~/.config/hub (credentials written by the hub CLI)
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

HUB_CONFIG_PATH = Path("~/.config/hub")


def read_hub_token(path: Path | None = None) -> str | None:
    """Return the github.com oauth_token stored by hub, or None.

    hub writes ``github.com: [{user: ..., oauth_token: ..., protocol: ...}]``.
    """
    path = (path or HUB_CONFIG_PATH).expanduser()
    if not path.exists():
        return None
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.debug("Could not read %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        return None
    for entry in data.get("github.com") or []:
        if isinstance(entry, dict) and entry.get("oauth_token"):
            return str(entry["oauth_token"])
    return None


def resolve_github_token() -> str | None:
    """Return a GitHub token or None if no valid source is available.

    Never raises; callers should check for None and emit a UsageError.
    """
    token = os.environ.get("GITHUB_TOKEN")
    if token:
        return token

    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=5,
        )
        if result.returncode == 0:
            gh_token = result.stdout.strip()
            if gh_token:
                logger.debug("Resolved GitHub token via gh CLI session.")
                return gh_token
    except (FileNotFoundError, subprocess.TimeoutExpired):
        # gh is not installed or timed out, fall through to hub.
        pass

    hub_token = read_hub_token()
    if hub_token:
        logger.debug("Resolved GitHub token via hub config.")
    return hub_token
