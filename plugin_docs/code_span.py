"""Utilities for emitting the avc-code markup fragments."""


def code_span(css_class: str, content: str) -> str:
    """Wrap content in a span carrying an avc-code CSS class."""
    return f'<span class="avc-code-{css_class}">{content}</span>'


def code_div(css_class: str, content: str) -> str:
    """Wrap content in a div carrying an avc-code CSS class."""
    return f'<div class="avc-code-{css_class}">{content}</div>'


def type_tag(name: str, type_id: int | None = None) -> str:
    """Generate an avc-code-type element, linkable when an id is known."""
    if type_id:
        return f'<avc-code-type type-id="{type_id}">{name}</avc-code-type>'
    return f"<avc-code-type>{name}</avc-code-type>"
