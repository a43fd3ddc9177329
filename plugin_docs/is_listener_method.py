"""Predicate for subscribe/unsubscribe style plugin members."""

from collections.abc import Collection

LISTENER_METHOD_NAMES = ("addListener", "removeListener")


def is_listener_method(
    name: str, listener_names: Collection[str] = LISTENER_METHOD_NAMES
) -> bool:
    """Check if a member name is one of the exact listener method names."""
    return name in listener_names
