"""Utility for determining the output file of a plugin page."""

from pathlib import Path


def output_file_for_plugin(
    apis_root: Path, key: str, page_name: str = "api.html"
) -> Path:
    """Determine the output file for an output key."""
    # local-notifications -> apis_root/local-notifications/api.html
    return apis_root / key / page_name
