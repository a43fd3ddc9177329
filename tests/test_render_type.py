"""Tests for parameter and return type rendering."""

import logging

import pytest

from plugin_docs.render_type import (
    render_param_type,
    render_return_type,
    render_type_arguments,
)
from plugin_docs.type_ref import IntrinsicType, ReferenceType, UnknownType

LT = '<span class="avc-code-typearg-bracket">&lt;</span>'
GT = '<span class="avc-code-typearg-bracket">&gt;</span>'


def test_param_reference_with_id() -> None:
    """Verify that resolvable references carry their type id."""
    t = ReferenceType(name="Options", id=4)
    assert render_param_type(t) == '<avc-code-type type-id="4">Options</avc-code-type>'


def test_param_reference_without_id() -> None:
    """Verify that external references render as a label only."""
    t = ReferenceType(name="HTMLElement")
    assert render_param_type(t) == "<avc-code-type>HTMLElement</avc-code-type>"


def test_param_intrinsic() -> None:
    """Verify that primitives render as their bare name."""
    assert render_param_type(IntrinsicType(name="string")) == "string"


def test_unknown_kind_asymmetry() -> None:
    """Verify that parameters fall back to any while return types keep the name."""
    t = UnknownType(name="Foo", kind="union")
    assert render_param_type(t) == "any"
    assert render_return_type(t) == "Foo"


def test_return_reference_without_id_is_bare_name() -> None:
    """Verify that unresolved return references are not wrapped."""
    assert render_return_type(ReferenceType(name="Promise")) == "Promise"
    assert render_return_type(IntrinsicType(name="void")) == "void"


def test_return_reference_with_id() -> None:
    """Verify that resolvable return references carry their type id."""
    t = ReferenceType(name="EchoResult", id=7)
    assert (
        render_return_type(t) == '<avc-code-type type-id="7">EchoResult</avc-code-type>'
    )


def test_type_arguments() -> None:
    """Verify generic arguments render between brackets without separators."""
    nested = ReferenceType(name="Inner", id=9)
    t = ReferenceType(
        name="Promise",
        type_arguments=(
            ReferenceType(name="Result", id=3, type_arguments=(nested,)),
            IntrinsicType(name="void"),
        ),
    )
    expected_args = (
        LT + '<avc-code-type type-id="3">Result</avc-code-type>' + "void" + GT
    )
    assert render_type_arguments(t) == expected_args
    assert render_return_type(t) == "Promise" + expected_args
    assert "Inner" not in render_return_type(t)


def test_no_type_arguments() -> None:
    """Verify that non-generic types get no bracket markup."""
    assert render_type_arguments(IntrinsicType(name="string")) == ""


def test_param_type_arguments() -> None:
    """Verify that parameter types also show their generic arguments."""
    t = ReferenceType(
        name="Array", type_arguments=(ReferenceType(name="Item", id=2),)
    )
    assert render_param_type(t) == (
        "<avc-code-type>Array</avc-code-type>"
        + LT
        + '<avc-code-type type-id="2">Item</avc-code-type>'
        + GT
    )


def test_fallback_logs_unknown_kind(caplog: pytest.LogCaptureFixture) -> None:
    """Verify the kind of an unhandled parameter type is logged on fallback."""
    with caplog.at_level(logging.DEBUG, logger="plugin_docs.render_type"):
        assert render_param_type(UnknownType(name="", kind="array")) == "any"
    assert "'array'" in caplog.text
