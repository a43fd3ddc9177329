"""Data models for type references found at declaration use sites."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TypeRef:
    """A type used by a parameter, return value or property."""

    name: str
    type_arguments: tuple["TypeRef", ...] = ()


@dataclass(frozen=True)
class ReferenceType(TypeRef):
    """Points at another declaration; `id` is None for external types."""

    id: int | None = None


@dataclass(frozen=True)
class IntrinsicType(TypeRef):
    """A primitive such as string, number or boolean."""


@dataclass(frozen=True)
class UnknownType(TypeRef):
    """Arrays, unions, literals and other shapes we do not expand."""

    kind: str = ""


def parse_type_ref(raw: dict[str, Any]) -> TypeRef:
    """Build a TypeRef from its serialized form, dispatching on `type`."""
    kind = str(raw.get("type") or "")
    name = str(raw.get("name") or "")
    args = tuple(parse_type_ref(a) for a in raw.get("typeArguments") or [])
    if kind == "reference":
        return ReferenceType(name=name, type_arguments=args, id=raw.get("id"))
    if kind == "intrinsic":
        return IntrinsicType(name=name, type_arguments=args)
    return UnknownType(name=name, type_arguments=args, kind=kind)
