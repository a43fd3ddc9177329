"""Data models for the declaration tree and its parsing from JSON."""

from dataclasses import dataclass
from typing import Any

from plugin_docs.type_ref import TypeRef, parse_type_ref


@dataclass(frozen=True)
class Comment:
    """Doc comment attached to a declaration, signature or parameter."""

    short_text: str = ""
    text: str = ""


@dataclass(frozen=True)
class Parameter:
    """One parameter of a call signature."""

    name: str
    type: TypeRef
    is_optional: bool = False
    comment: Comment | None = None


@dataclass(frozen=True)
class Signature:
    """One call signature; `parameters` is None when the source omits it."""

    type: TypeRef
    parameters: tuple[Parameter, ...] | None = None
    comment: Comment | None = None


@dataclass(frozen=True)
class DeclarationNode:
    """A module, interface, method or property in the declaration tree."""

    id: int
    name: str
    children: tuple["DeclarationNode", ...] | None = None
    signatures: tuple[Signature, ...] | None = None
    is_optional: bool = False
    type: TypeRef | None = None
    comment: Comment | None = None


def _is_optional(raw: dict[str, Any]) -> bool:
    flags = raw.get("flags") or {}
    return bool(flags.get("isOptional"))


def parse_comment(raw: dict[str, Any] | None) -> Comment | None:
    """Parse a comment object, keeping absence distinct from empty text."""
    if raw is None:
        return None
    return Comment(
        short_text=str(raw.get("shortText") or ""),
        text=str(raw.get("text") or ""),
    )


def parse_parameter(raw: dict[str, Any]) -> Parameter:
    """Parse a signature parameter."""
    return Parameter(
        name=str(raw.get("name") or ""),
        type=parse_type_ref(raw.get("type") or {}),
        is_optional=_is_optional(raw),
        comment=parse_comment(raw.get("comment")),
    )


def parse_signature(raw: dict[str, Any]) -> Signature:
    """Parse a call signature."""
    params = raw.get("parameters")
    return Signature(
        type=parse_type_ref(raw.get("type") or {}),
        parameters=(
            tuple(parse_parameter(p) for p in params) if params is not None else None
        ),
        comment=parse_comment(raw.get("comment")),
    )


def parse_declaration(raw: dict[str, Any]) -> DeclarationNode:
    """Recursively parse a declaration node and its children."""
    children = raw.get("children")
    signatures = raw.get("signatures")
    type_raw = raw.get("type")
    return DeclarationNode(
        id=raw.get("id"),
        name=str(raw.get("name") or ""),
        children=(
            tuple(parse_declaration(c) for c in children)
            if children is not None
            else None
        ),
        signatures=(
            tuple(parse_signature(s) for s in signatures) if signatures else None
        ),
        is_optional=_is_optional(raw),
        type=parse_type_ref(type_raw) if type_raw else None,
        comment=parse_comment(raw.get("comment")),
    )
