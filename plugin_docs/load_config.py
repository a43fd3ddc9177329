"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

from plugin_docs.deep_merge import deep_merge
from plugin_docs.errors import PluginDocsError

DEFAULT_CONFIG: dict[str, Any] = {
    "input": "dist/docs.json",
    "site_dir": "../site",
    "apis_dir": "www/docs-content/apis",
    "page_name": "api.html",
    "plugin_suffix": "Plugin",
    "listener_methods": ["addListener", "removeListener"],
    "async_wrapper": "Promise",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = f"Invalid configuration file {p}: {e}"
                raise PluginDocsError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"Configuration file {p} must contain a mapping"
                raise PluginDocsError(msg)
            config = deep_merge(config, user_config)
    return config
