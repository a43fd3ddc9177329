"""Rendering of type references in parameter and return positions.

Both positions share the generic-argument suffix but differ in their
fallback: parameters of an unhandled kind render as ``any`` while return
types always fall back to their bare name.
"""

import logging

from plugin_docs.code_span import code_span, type_tag
from plugin_docs.type_ref import IntrinsicType, ReferenceType, TypeRef, UnknownType

logger = logging.getLogger(__name__)

FALLBACK_TYPE_NAME = "any"


def render_type_arguments(t: TypeRef) -> str:
    """Render `<A B>` for generic arguments, one level deep, without commas."""
    if not t.type_arguments:
        return ""
    parts = [code_span("typearg-bracket", "&lt;")]
    for a in t.type_arguments:
        a_id = a.id if isinstance(a, ReferenceType) else None
        parts.append(type_tag(a.name, a_id) if a_id else a.name)
    parts.append(code_span("typearg-bracket", "&gt;"))
    return "".join(parts)


def render_param_type(t: TypeRef) -> str:
    """Render a parameter type."""
    if isinstance(t, ReferenceType):
        base = type_tag(t.name, t.id)
    elif isinstance(t, IntrinsicType):
        base = t.name
    else:
        kind = t.kind if isinstance(t, UnknownType) else ""
        logger.debug("Rendering %r type %r as %s", kind, t.name, FALLBACK_TYPE_NAME)
        base = FALLBACK_TYPE_NAME
    return base + render_type_arguments(t)


def render_return_type(t: TypeRef) -> str:
    """Render a return type; never falls back to ``any``."""
    if isinstance(t, ReferenceType) and t.id:
        base = type_tag(t.name, t.id)
    else:
        base = t.name
    return base + render_type_arguments(t)
