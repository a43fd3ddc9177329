"""Exception types raised while generating plugin documentation."""


class PluginDocsError(Exception):
    """Base class for documentation generation errors."""


class DeclarationTreeError(PluginDocsError):
    """The declaration tree could not be read or has no module root."""


class PluginNameError(PluginDocsError):
    """A plugin name does not split into capitalized words."""
