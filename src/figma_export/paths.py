"""Output path resolution.

The output root is chosen from, in order: an explicit argument, the
config file's ``output_dir``, the environment, and finally ./output.

Environment variables:
    FIGMA_EXPORT_OUTPUT_DIR — output root (default: ./output)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from figma_export import COMPONENTS_DIRNAME, TOKENS_DIRNAME, TOKENS_FILENAME

_DEFAULT_OUTPUT_DIRNAME = "output"


def output_root(
    explicit: Path | str | None = None,
    config: dict[str, Any] | None = None,
) -> Path:
    """Return the output root directory."""
    if explicit:
        return Path(explicit).expanduser()
    if config and config.get("output_dir"):
        return Path(config["output_dir"])
    env = os.environ.get("FIGMA_EXPORT_OUTPUT_DIR")
    if env:
        return Path(env).expanduser()
    return Path.cwd() / _DEFAULT_OUTPUT_DIRNAME


def tokens_dir(root: Path) -> Path:
    """Return the directory holding the token document."""
    return root / TOKENS_DIRNAME


def components_dir(root: Path) -> Path:
    """Return the directory holding the HTML showcases."""
    return root / COMPONENTS_DIRNAME


def tokens_path(root: Path) -> Path:
    """Return the path of design-tokens.json."""
    return tokens_dir(root) / TOKENS_FILENAME


def component_path(root: Path, category: str) -> Path:
    """Return the path of one category's HTML page."""
    return components_dir(root) / f"{category}.html"
