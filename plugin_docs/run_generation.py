"""Orchestration logic for generating plugin API pages."""

import argparse
from pathlib import Path

from plugin_docs.build_type_index import build_type_index
from plugin_docs.errors import PluginDocsError
from plugin_docs.load_config import load_config
from plugin_docs.load_declaration_tree import load_declaration_tree
from plugin_docs.write_plugin_pages import write_plugin_pages


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline.

    Returns 0 when every plugin page was written, 1 if any page failed.
    """
    try:
        config = load_config(args.config)
        input_path = Path(args.docs_json or config["input"])
        declarations = load_declaration_tree(input_path)
    except PluginDocsError as e:
        raise SystemExit(str(e)) from e

    type_index = build_type_index(declarations)

    site_dir = Path(args.site_dir or config["site_dir"])
    apis_root = (site_dir / config["apis_dir"]).resolve()

    written, failed = write_plugin_pages(
        declarations, type_index, config, apis_root, dry_run=args.dry_run
    )

    if args.dry_run:
        print("Dry run complete. No files were written.")
        return 0

    print(f"Generated {written} plugin pages into: {apis_root}")
    if failed:
        print(f"Failed to write {len(failed)} plugin pages: {', '.join(failed)}")
        return 1
    return 0
