"""Collect the reference-kind types a call signature depends on."""

from plugin_docs.declaration_node import Signature
from plugin_docs.type_ref import ReferenceType, TypeRef


def _references(types: list[TypeRef]) -> list[ReferenceType]:
    return [t for t in types if isinstance(t, ReferenceType)]


def referenced_types(signature: Signature) -> list[ReferenceType]:
    """Return parameter references followed by return-type references.

    The return type contributes itself and its generic arguments. A signature
    whose parameter list is absent yields nothing at all, not even its return
    type. Duplicates are kept; callers dedupe per plugin.
    """
    if signature.parameters is None:
        return []

    param_refs = _references([p.type for p in signature.parameters])
    return_types = [signature.type, *signature.type.type_arguments]
    return param_refs + _references(return_types)
