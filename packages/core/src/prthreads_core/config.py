import os
from pathlib import Path
from typing import Optional

import yaml

from prthreads_core.diff.mapping import LINE_INDEXING_MODES
from prthreads_core.errors import ConfigError

RENDER_ERROR_POLICIES = ("abort", "skip")

DEFAULT_CONFIG: dict = {
    "width": 120,  # total width handed to the side-by-side diff tool
    "context": 3,  # diff rows shown on each side of the anchor
    "diff_tool": "diff",  # any tool accepting diff's -y -t -W flags, e.g. colordiff
    "line_indexing": "source",  # "source" or "corrected", see prthreads_core.diff.mapping
    "on_render_error": "abort",  # "abort" or "skip" the group whose diff cannot be aligned
    "include_review_comments": True,
    "remote": "origin",
}


def load_config(config_path: str = ".prthreads.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .prthreads.yml in the current directory
      3. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        if not isinstance(file_config, dict):
            raise ConfigError(f"{config_path} must contain a mapping, got {type(file_config).__name__}.")
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    validate_config(config)

    config["github_token"] = os.environ.get("GITHUB_TOKEN")

    return config


def validate_config(config: dict) -> None:
    if config["line_indexing"] not in LINE_INDEXING_MODES:
        raise ConfigError(
            f"line_indexing must be one of {', '.join(LINE_INDEXING_MODES)}; got {config['line_indexing']!r}."
        )
    if config["on_render_error"] not in RENDER_ERROR_POLICIES:
        raise ConfigError(
            f"on_render_error must be one of {', '.join(RENDER_ERROR_POLICIES)}; got {config['on_render_error']!r}."
        )
    if not isinstance(config["width"], int) or config["width"] <= 0:
        raise ConfigError(f"width must be a positive integer; got {config['width']!r}.")
    if not isinstance(config["context"], int) or config["context"] < 0:
        raise ConfigError(f"context must be a non-negative integer; got {config['context']!r}.")
