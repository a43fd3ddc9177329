"""Logic for loading the top-level declarations of a TypeDoc JSON file."""

import json
from pathlib import Path
from typing import Any

from plugin_docs.declaration_node import DeclarationNode, parse_declaration
from plugin_docs.errors import DeclarationTreeError


def load_declaration_tree(path: Path) -> list[DeclarationNode]:
    """Return the children of the first module in the declaration tree."""
    try:
        doc: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        msg = f"Unable to read declaration tree {path}: {e}"
        raise DeclarationTreeError(msg) from e
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in declaration tree {path}: {e}"
        raise DeclarationTreeError(msg) from e

    modules = doc.get("children") if isinstance(doc, dict) else None
    if not modules:
        msg = f"Declaration tree {path} has no module"
        raise DeclarationTreeError(msg)
    return [parse_declaration(c) for c in modules[0].get("children") or []]
