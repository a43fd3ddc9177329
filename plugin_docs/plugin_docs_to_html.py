"""Generate HTML API documentation for each plugin in a TypeDoc JSON file.

Every top-level declaration named ``*Plugin`` gets a page listing its
methods, their parameters and return types, and the shape of each interface
those methods use.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from plugin_docs.run_generation import run_generation


def main(argv: list[str] | None = None) -> int:
    """Run the generation process."""
    ap = argparse.ArgumentParser(
        description="Render plugin API pages from TypeDoc JSON output.",
    )
    ap.add_argument(
        "docs_json",
        nargs="?",
        type=Path,
        help="TypeDoc JSON file (default: dist/docs.json)",
    )
    ap.add_argument(
        "site_dir",
        nargs="?",
        type=Path,
        help="Site root that receives www/docs-content/apis (default: ../site)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Render pages and report target paths without writing files",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
