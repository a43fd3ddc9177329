"""Logic for rendering and writing plugin pages to disk."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from plugin_docs.declaration_node import DeclarationNode
from plugin_docs.errors import PluginNameError
from plugin_docs.is_plugin import is_plugin
from plugin_docs.output_file_for_plugin import output_file_for_plugin
from plugin_docs.plugin_output_key import plugin_output_key
from plugin_docs.render_plugin_page import render_plugin_page

logger = logging.getLogger(__name__)


def write_plugin_pages(
    declarations: list[DeclarationNode],
    type_index: Mapping[int, DeclarationNode],
    config: dict[str, Any],
    apis_root: Path,
    *,
    dry_run: bool = False,
) -> tuple[int, list[str]]:
    """Write one page per plugin; return the count written and failed names.

    A failing plugin is logged and skipped so the others are still written.
    """
    written = 0
    failed: list[str] = []
    plugins = [d for d in declarations if is_plugin(d.name, config["plugin_suffix"])]
    logger.info("Found %d plugins", len(plugins))
    for plugin in plugins:
        html = render_plugin_page(
            plugin,
            type_index,
            listener_names=config["listener_methods"],
            async_wrapper=config["async_wrapper"],
        )
        logger.debug("Rendered %s (%d characters)", plugin.name, len(html))
        try:
            key = plugin_output_key(plugin.name)
        except PluginNameError:
            logger.exception("Unable to write docs for plugin %s", plugin.name)
            failed.append(plugin.name)
            continue

        out_file = output_file_for_plugin(apis_root, key, config["page_name"])
        if dry_run:
            logger.info("Would write %s", out_file)
            continue

        logger.info("Writing %s", out_file)
        try:
            out_file.parent.mkdir(parents=True, exist_ok=True)
            out_file.write_text(html, encoding="utf-8")
        except OSError:
            logger.exception("Unable to write docs for plugin %s", key)
            failed.append(plugin.name)
            continue
        written += 1
    return written, failed
