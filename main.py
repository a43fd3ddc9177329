"""Main orchestration script for TypeDoc extraction and plugin page generation."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(step_name: str, cmd_list: Sequence[str | Path], cwd: Path) -> None:
    """Run one pipeline step from the project root, exiting if it fails."""
    print(f"--- {step_name} ---")
    print(f"$ {' '.join(str(x) for x in cmd_list)}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except FileNotFoundError:
        print(f"Failed: {step_name} ({cmd_list[0]} not found)")
        sys.exit(127)
    except subprocess.CalledProcessError as e:
        print(f"Failed: {step_name} (exit status {e.returncode})")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Extract TypeDoc JSON and generate plugin API pages."
    )
    parser.add_argument(
        "--skip-extract",
        action="store_true",
        help="Reuse the existing dist/docs.json instead of running TypeDoc",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render pages without writing files",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if not args.skip_extract:
        run_command(
            "Step 1: Generating TypeDoc JSON", ["npm", "run", "docs-json"], root_dir
        )

    cmd = [sys.executable, "-m", "plugin_docs.plugin_docs_to_html"]
    if args.dry_run:
        cmd.append("--dry-run")
    if args.config:
        cmd.extend(["--config", args.config])

    run_command("Step 2: Rendering plugin API pages", cmd, root_dir)

    print("\nSUCCESS: Plugin documentation generated")


if __name__ == "__main__":
    main()
