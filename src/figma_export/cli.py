"""Command-line entry point for design asset export.

Usage:
    figma-export [--output DIR] [--tokens FILE] [--config FILE] [--dry-run]

With no arguments, writes the token document and all component pages
into the resolved output root.
"""

import argparse
import sys

from figma_export import FigmaExportError
from figma_export.config import load_config
from figma_export.emitter import run
from figma_export.paths import output_root
from figma_export.tokens import DEFAULT_TOKENS, load_tokens, token_counts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="figma-export",
        description="Generate design tokens and HTML component showcases for Figma import",
    )
    parser.add_argument(
        "--output", default=None,
        help="Output root directory (default: $FIGMA_EXPORT_OUTPUT_DIR or ./output)",
    )
    parser.add_argument(
        "--tokens", default=None,
        help="YAML file with token overrides",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to figma-export.yaml",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Render without writing files",
    )
    return parser


def cmd_export(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config)
        tokens_file = args.tokens or config.get("tokens")
        tokens = load_tokens(tokens_file) if tokens_file else DEFAULT_TOKENS
    except FigmaExportError as e:
        print(f"  ERROR: {e}")
        return 1

    root = output_root(args.output, config)
    print("  Generating Figma components...\n")
    result = run(root, tokens=tokens, dry_run=args.dry_run)

    counts = token_counts(tokens)
    summary = ", ".join(f"{name}={count}" for name, count in counts.items())
    print(f"\n  Tokens: {summary}")

    if result["dry_run"]:
        total = sum(result["written"].values())
        print(f"  [DRY RUN] Would write {len(result['written'])} files ({total:,} bytes) to {result['output_root']}")
        return 0

    print(f"  Done. Files written to: {result['output_root']}")
    print("\n  Next steps:")
    print("  1. Open the HTML files in a browser")
    print("  2. Import them into Figma with the html.to.design plugin")
    print(f"  3. Load {result['tokens']} with the Figma Tokens plugin")
    return 0


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    return cmd_export(args)


if __name__ == "__main__":
    sys.exit(main())
