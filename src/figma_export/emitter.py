"""Artifact emitter — writes the token document and component pages.

Every run regenerates all six artifacts and overwrites whatever is on
disk. Filesystem errors are not caught: a failed mkdir or write aborts
the run, and files already written stay in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterable

from figma_export import CATEGORIES
from figma_export.components import render_page
from figma_export.document import render_token_document
from figma_export.paths import (
    component_path,
    components_dir,
    output_root as resolve_output_root,
    tokens_dir,
    tokens_path,
)
from figma_export.tokens import DEFAULT_TOKENS, DesignTokens


def ensure_directories(paths: Iterable[Path]) -> None:
    """Create each directory (and parents) if absent."""
    for path in paths:
        path.mkdir(parents=True, exist_ok=True)


def write_artifact(path: Path, content: str) -> None:
    """Overwrite ``path`` with ``content`` as UTF-8."""
    path.write_text(content, encoding="utf-8")


def run(
    output_root: Path | str | None = None,
    tokens: DesignTokens = DEFAULT_TOKENS,
    dry_run: bool = False,
    echo: Callable[[str], Any] = print,
) -> dict[str, Any]:
    """Generate the token document and all component pages.

    Args:
        output_root: Output root directory. Resolved via paths.output_root()
            when omitted.
        tokens: Token table to render from.
        dry_run: If True, render everything but write nothing.
        echo: Sink for one progress line per artifact.

    Returns:
        Summary dict with the output root, the token document path, the
        component paths by category, bytes written per path, and dry_run.
    """
    root = Path(output_root) if output_root else resolve_output_root()
    prefix = "[DRY RUN] " if dry_run else ""

    if not dry_run:
        ensure_directories([root, components_dir(root), tokens_dir(root)])

    written: dict[str, int] = {}

    token_file = tokens_path(root)
    document = render_token_document(tokens)
    if not dry_run:
        write_artifact(token_file, document)
    written[str(token_file)] = len(document.encode("utf-8"))
    echo(f"  {prefix}Design tokens: {token_file}")

    components: dict[str, str] = {}
    for category in CATEGORIES:
        page_file = component_path(root, category)
        page = render_page(category, tokens)
        if not dry_run:
            write_artifact(page_file, page)
        written[str(page_file)] = len(page.encode("utf-8"))
        components[category] = str(page_file)
        echo(f"  {prefix}Component '{category}': {page_file}")

    return {
        "output_root": str(root),
        "tokens": str(token_file),
        "components": components,
        "written": written,
        "dry_run": dry_run,
    }
