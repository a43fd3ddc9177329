"""Predicate for top-level declarations that get a documentation page."""

PLUGIN_SUFFIX = "Plugin"


def is_plugin(name: str, suffix: str = PLUGIN_SUFFIX) -> bool:
    """Check if a declaration name follows the `FooPlugin` convention."""
    return name.endswith(suffix)
