"""Utility for deriving a plugin's output directory name."""

import re

from plugin_docs.errors import PluginNameError

CAPITALIZED_WORD_RE = re.compile(r"[A-Z][a-z]+")


def plugin_output_key(name: str) -> str:
    """Split on capitalized words, drop the last one, and hyphenate the rest.

    LocalNotificationsPlugin -> local-notifications. Acronyms and digits are
    not words, so HTTPPlugin only yields ["Plugin"] and an empty key.
    """
    words = CAPITALIZED_WORD_RE.findall(name)
    if not words:
        msg = f"Cannot derive an output key from plugin name {name!r}"
        raise PluginNameError(msg)
    return "-".join(words[:-1]).lower()
