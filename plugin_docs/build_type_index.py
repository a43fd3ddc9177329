"""Logic for building an id lookup over top-level declarations."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from plugin_docs.declaration_node import DeclarationNode


def build_type_index(
    nodes: Iterable[DeclarationNode],
) -> Mapping[int, DeclarationNode]:
    """Map each node's id to the node itself, without descending into children."""
    index: dict[int, DeclarationNode] = {}
    for n in nodes:
        index[n.id] = n
    return MappingProxyType(index)
