"""Design token document — the Figma Tokens plugin JSON layout.

Each exported category maps a generated token name to
``{"value": ..., "type": ...}``. Output order follows the token table's
insertion order, so the same table always yields the same bytes.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from figma_export.tokens import DesignTokens


def build_token_document(tokens: DesignTokens) -> dict[str, dict[str, dict[str, str]]]:
    """Re-key the token table as ``{category: {name: {value, type}}}``."""
    return {
        "colors": _section(tokens.colors, "{}", "color"),
        "typography": _section(tokens.typography.font_size, "fontSize-{}", "fontSize"),
        "spacing": _section(tokens.spacing, "space-{}", "spacing"),
        "borderRadius": _section(tokens.border_radius, "radius-{}", "borderRadius"),
        "shadows": _section(tokens.shadows, "shadow-{}", "boxShadow"),
    }


def render_token_document(tokens: DesignTokens) -> str:
    """Serialize the token document as 2-space indented JSON."""
    return json.dumps(build_token_document(tokens), indent=2, ensure_ascii=False)


def _section(values: Mapping[Any, str], name_format: str, token_type: str) -> dict[str, dict[str, str]]:
    return {
        name_format.format(key): {"value": str(value), "type": token_type}
        for key, value in values.items()
    }
