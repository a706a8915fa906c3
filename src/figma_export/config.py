"""Optional YAML config file.

Recognized keys:
    output_dir: output root for generated artifacts
    tokens: path to a YAML token override file

Relative paths are resolved against the config file's directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from figma_export import ConfigError

DEFAULT_CONFIG_FILENAME = "figma-export.yaml"

_KNOWN_KEYS = {"output_dir", "tokens"}


def load_config(path: Path | str | None = None) -> dict[str, Any]:
    """Load the export config.

    Args:
        path: Explicit config path. When omitted, ``figma-export.yaml`` in
            the current directory is used if it exists.

    Returns:
        Config dict with path values resolved to Path objects; empty if
        no config file applies.

    Raises:
        ConfigError: If the document is not a mapping or has unknown keys.
    """
    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if not candidate.is_file():
            return {}
        config_path = candidate
    else:
        config_path = Path(path)

    with open(config_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{config_path}: invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: config must be a mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{config_path}: unknown config keys: {', '.join(unknown)}")

    config: dict[str, Any] = {}
    for key in ("output_dir", "tokens"):
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigError(f"{config_path}: '{key}' must be a path string")
        resolved = Path(value).expanduser()
        if not resolved.is_absolute():
            resolved = config_path.parent / resolved
        config[key] = resolved
    return config
