"""Design token table — the single source of every style value.

DEFAULT_TOKENS mirrors the Bootstrap/Understrap defaults the WordPress
themes are built on. The table is immutable: mapping fields are wrapped
in MappingProxyType, so renderers can share one instance freely.

Partial overrides can be layered on top from a YAML file (see
load_tokens()). Overrides may only replace existing tokens, never add
new ones.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from figma_export import TokenError


def _freeze(obj: Any, **mappings: Mapping) -> None:
    for name, value in mappings.items():
        object.__setattr__(obj, name, MappingProxyType(dict(value)))


@dataclass(frozen=True)
class Typography:
    """Font stacks and the type scale."""

    font_family: Mapping[str, str]
    font_size: Mapping[str, str]
    font_weight: Mapping[str, int]
    line_height: Mapping[str, float]

    def __post_init__(self) -> None:
        _freeze(self, **{f.name: getattr(self, f.name) for f in fields(self)})


@dataclass(frozen=True)
class DesignTokens:
    """Complete token table read by the renderers."""

    colors: Mapping[str, str]
    typography: Typography
    spacing: Mapping[int, str]
    border_radius: Mapping[str, str]
    shadows: Mapping[str, str]

    def __post_init__(self) -> None:
        _freeze(
            self,
            colors=self.colors,
            spacing=self.spacing,
            border_radius=self.border_radius,
            shadows=self.shadows,
        )


_SYSTEM_FONT_STACK = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, '
    '"Helvetica Neue", Arial, sans-serif'
)

DEFAULT_TOKENS = DesignTokens(
    colors={
        "primary": "#007bff",
        "secondary": "#6c757d",
        "success": "#28a745",
        "danger": "#dc3545",
        "warning": "#ffc107",
        "info": "#17a2b8",
        "light": "#f8f9fa",
        "dark": "#343a40",
        "white": "#ffffff",
        "black": "#000000",
    },
    typography=Typography(
        font_family={
            "base": _SYSTEM_FONT_STACK,
            "heading": _SYSTEM_FONT_STACK,
        },
        font_size={
            "h1": "2.5rem",
            "h2": "2rem",
            "h3": "1.75rem",
            "h4": "1.5rem",
            "h5": "1.25rem",
            "h6": "1rem",
            "base": "1rem",
            "small": "0.875rem",
        },
        font_weight={
            "light": 300,
            "normal": 400,
            "medium": 500,
            "bold": 700,
        },
        line_height={
            "tight": 1.25,
            "base": 1.5,
            "relaxed": 1.75,
        },
    ),
    spacing={
        0: "0",
        1: "0.25rem",
        2: "0.5rem",
        3: "1rem",
        4: "1.5rem",
        5: "3rem",
    },
    border_radius={
        "none": "0",
        "sm": "0.2rem",
        "base": "0.25rem",
        "lg": "0.5rem",
        "full": "9999px",
    },
    shadows={
        "sm": "0 0.125rem 0.25rem rgba(0, 0, 0, 0.075)",
        "base": "0 0.5rem 1rem rgba(0, 0, 0, 0.15)",
        "lg": "0 1rem 3rem rgba(0, 0, 0, 0.175)",
    },
)


# ── Overrides ────────────────────────────────────────────────────────

# Override files may use either the Python field names or the camelCase
# names used in the exported JSON.
_CATEGORY_ALIASES = {
    "colors": "colors",
    "typography": "typography",
    "spacing": "spacing",
    "border_radius": "border_radius",
    "borderRadius": "border_radius",
    "shadows": "shadows",
}

_TYPOGRAPHY_ALIASES = {
    "font_family": "font_family",
    "fontFamily": "font_family",
    "font_size": "font_size",
    "fontSize": "font_size",
    "font_weight": "font_weight",
    "fontWeight": "font_weight",
    "line_height": "line_height",
    "lineHeight": "line_height",
}


def load_tokens(
    path: Path | str,
    base: DesignTokens = DEFAULT_TOKENS,
) -> DesignTokens:
    """Load a YAML override file and apply it on top of ``base``.

    Args:
        path: Path to a YAML mapping of partial token overrides.
        base: Token table to start from.

    Returns:
        A new DesignTokens instance.

    Raises:
        TokenError: If the file is not valid YAML, is not a mapping, or
            names an unknown token.
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise TokenError(f"{path}: invalid YAML: {e}") from e
    if data is None:
        return base
    if not isinstance(data, dict):
        raise TokenError(f"{path}: token overrides must be a mapping")
    return apply_overrides(base, data)


def apply_overrides(base: DesignTokens, overrides: dict[str, Any]) -> DesignTokens:
    """Return a copy of ``base`` with ``overrides`` applied.

    Raises:
        TokenError: On unknown or repeated categories, unknown tokens,
            unsafe values, or a spacing scale that is no longer increasing.
    """
    changes: dict[str, Any] = {}
    for raw_category, values in overrides.items():
        category = _CATEGORY_ALIASES.get(raw_category)
        if category is None:
            raise TokenError(f"Unknown token category '{raw_category}'")
        if category in changes:
            raise TokenError(f"Token category '{raw_category}' is given more than once")
        if not isinstance(values, dict):
            raise TokenError(f"Overrides for '{raw_category}' must be a mapping")

        if category == "typography":
            changes[category] = _override_typography(base.typography, values)
        else:
            changes[category] = _merge(getattr(base, category), values, raw_category)

    if "spacing" in changes:
        _check_spacing(changes["spacing"])
    return replace(base, **changes)


def _override_typography(base: Typography, overrides: dict[str, Any]) -> Typography:
    changes: dict[str, Any] = {}
    for raw_group, values in overrides.items():
        group = _TYPOGRAPHY_ALIASES.get(raw_group)
        if group is None:
            raise TokenError(f"Unknown typography group '{raw_group}'")
        if group in changes:
            raise TokenError(f"Typography group '{raw_group}' is given more than once")
        if not isinstance(values, dict):
            raise TokenError(f"Overrides for 'typography.{raw_group}' must be a mapping")
        # Font stacks land in the embedded <style> block, where quoted
        # family names are valid.
        changes[group] = _merge(
            getattr(base, group), values, f"typography.{raw_group}",
            allow_quotes=group == "font_family",
        )
    return replace(base, **changes)


def _merge(current: Mapping, overrides: dict, where: str, allow_quotes: bool = False) -> dict:
    """Replace existing keys in ``current``; insertion order is kept."""
    # YAML may give "3" or 3 for spacing keys, so match on the string form.
    by_str = {str(k): k for k in current}
    merged = dict(current)
    for raw_key, value in overrides.items():
        key = by_str.get(str(raw_key))
        if key is None:
            raise TokenError(f"Unknown token '{where}.{raw_key}'")
        merged[key] = _coerce(current[key], value, f"{where}.{raw_key}", allow_quotes)
    return merged


# Values are interpolated into inline style attributes and the page's
# <style> block, so anything that can close them or pull a remote asset
# is refused.
_UNSAFE_MARKERS = ("<", ">", "://", "url(")


def _coerce(existing: Any, value: Any, where: str, allow_quotes: bool = False) -> Any:
    if isinstance(value, bool) or value is None:
        raise TokenError(f"Invalid value for '{where}': {value!r}")
    if isinstance(existing, (int, float)):
        if not isinstance(value, (int, float)):
            raise TokenError(f"'{where}' must be a number, got {value!r}")
        return value
    if isinstance(value, (int, float)):
        return str(value)
    if not isinstance(value, str):
        raise TokenError(f"'{where}' must be a string, got {value!r}")

    lowered = value.lower()
    for marker in _UNSAFE_MARKERS:
        if marker in lowered:
            raise TokenError(f"'{where}' may not contain '{marker}': {value!r}")
    if not allow_quotes and '"' in value:
        raise TokenError(f"'{where}' may not contain '\"': {value!r}")
    return value


_LENGTH_RE = re.compile(r"^\s*(\d*\.?\d+)\s*([a-z%]*)\s*$")


def _check_spacing(spacing: Mapping[int, str]) -> None:
    """Require one unit and a non-decreasing scale."""
    unit = None
    previous = None
    for key, value in spacing.items():
        m = _LENGTH_RE.match(value)
        if not m:
            raise TokenError(f"'spacing.{key}' is not a CSS length: {value!r}")
        size, value_unit = float(m.group(1)), m.group(2)
        if size != 0:
            if unit is None:
                unit = value_unit
            elif value_unit != unit:
                raise TokenError(
                    f"'spacing.{key}' uses unit '{value_unit}' but the scale uses '{unit}'"
                )
        if previous is not None and size < previous:
            raise TokenError(f"'spacing.{key}' ({value}) is smaller than the step before it")
        previous = size


def token_counts(tokens: DesignTokens) -> dict[str, int]:
    """Count entries per exported category."""
    return {
        "colors": len(tokens.colors),
        "fontSize": len(tokens.typography.font_size),
        "spacing": len(tokens.spacing),
        "borderRadius": len(tokens.border_radius),
        "shadows": len(tokens.shadows),
    }
