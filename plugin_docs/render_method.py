"""Logic for rendering a callable member's signature and parameter docs."""

from plugin_docs.code_span import code_div, code_span
from plugin_docs.declaration_node import DeclarationNode, Parameter, Signature
from plugin_docs.render_type import render_param_type, render_return_type

OPTIONAL_MARKER = code_span("param-optional", "?")


def render_method(member: DeclarationNode) -> str:
    """Render a method block followed by its parameter detail block.

    Only the first call signature is documented; further overloads are
    ignored.
    """
    if not member.signatures:
        msg = f"Member {member.name!r} has no call signature"
        raise ValueError(msg)
    signature = member.signatures[0]
    html = _render_method_signature(member.name, signature)
    return html + _render_param_docs(signature)


def _render_param(param: Parameter) -> str:
    parts = [code_span("param-name", param.name)]
    if param.is_optional:
        parts.append(OPTIONAL_MARKER)
    parts.append(code_span("param-colon", ":") + " ")
    parts.append(render_param_type(param.type))
    return "".join(parts)


def _render_method_signature(name: str, signature: Signature) -> str:
    """Render `name(a: T, b?: U): R` plus the short comment."""
    params = signature.parameters or ()
    parts = [
        '<div class="avc-code-method">',
        code_span("method-name", name),
        code_span("paren", "("),
        ", ".join(_render_param(p) for p in params),
        code_span("paren", ")"),
        code_span("return-type-colon", ":") + " ",
        render_return_type(signature.type),
    ]
    if signature.comment is not None:
        parts.append(code_div("method-comment", signature.comment.short_text))
    parts.append("</div>")
    return "".join(parts)


def _render_param_docs(signature: Signature) -> str:
    """Render one info row per parameter with its full comment."""
    lines = ['<div class="avc-code-method-params">']
    for p in signature.parameters or ():
        name = code_span("method-param-info-name", p.name)
        if p.is_optional:
            name += OPTIONAL_MARKER
        name += code_span("param-colon", ":")
        row = [name, render_param_type(p.type)]
        if p.comment is not None:
            row.append(code_div("method-param-comment", p.comment.text))
        lines.append(code_div("method-param-info", "\n".join(row)))
    lines.append("</div>")
    return "\n".join(lines)
