"""Logic for rendering the documentation fragment of a single plugin."""

from collections.abc import Collection, Mapping

from plugin_docs.code_span import code_div, code_span, type_tag
from plugin_docs.declaration_node import DeclarationNode
from plugin_docs.is_listener_method import LISTENER_METHOD_NAMES, is_listener_method
from plugin_docs.referenced_types import referenced_types
from plugin_docs.render_method import render_method
from plugin_docs.type_ref import ReferenceType

ASYNC_WRAPPER_NAME = "Promise"
CLOSING_BRACE = '<span class="avc-code-line">' + code_span("brace", "}") + "</span>"


def render_plugin_page(
    plugin: DeclarationNode,
    type_index: Mapping[int, DeclarationNode],
    *,
    listener_names: Collection[str] = LISTENER_METHOD_NAMES,
    async_wrapper: str = ASYNC_WRAPPER_NAME,
) -> str:
    """Render a plugin's methods followed by the interfaces they use."""
    parts = [
        '<div class="avc-code-plugin">',
        code_div("plugin-name", plugin.name),
    ]

    children = plugin.children or ()
    methods = [m for m in children if not is_listener_method(m.name, listener_names)]
    listeners = [m for m in children if is_listener_method(m.name, listener_names)]

    # first reference seen per type; external types without an id key by name
    used: dict[int | tuple[str, str], ReferenceType] = {}
    for member in methods + listeners:
        if not member.signatures:
            continue
        parts.append(render_method(member))
        for ref in referenced_types(member.signatures[0]):
            key = ref.id if ref.id is not None else ("name", ref.name)
            used.setdefault(key, ref)

    for ref in used.values():
        if ref.name == async_wrapper:
            continue
        parts.extend(_render_interface(ref, type_index))

    parts.append("</div>")
    return "\n".join(parts)


def _render_interface(
    ref: ReferenceType,
    type_index: Mapping[int, DeclarationNode],
) -> list[str]:
    """Render an `interface Name { ... }` block for a referenced type."""
    header = " ".join(
        [
            code_span("keyword", "interface"),
            code_span("type-name", ref.name),
            code_span("brace", "{"),
        ]
    )
    parts = ['<div class="avc-code-interface">', code_div("line", header)]

    decl = type_index.get(ref.id) if ref.id is not None else None
    if decl is not None:
        parts.extend(_render_interface_member(c) for c in decl.children or ())

    parts.append(CLOSING_BRACE)
    parts.append("</div>")
    return parts


def _render_interface_member(child: DeclarationNode) -> str:
    line = code_span("param-name", child.name)
    if child.is_optional:
        line += code_span("param-optional", "?")
    line += ": "
    if child.type is not None:
        child_id = child.type.id if isinstance(child.type, ReferenceType) else None
        line += type_tag(child.type.name, child_id)
    return code_div("line", line)
