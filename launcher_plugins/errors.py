"""
Exceptions shared by the plugin runtime and the data-source adapters.
"""


class PluginError(Exception):
    """Base class for every error raised by this package."""


class ProtocolError(PluginError, ValueError):
    """Raised when a request line cannot be decoded."""


class CollaboratorError(PluginError):
    """Raised when an external data source or side-effect target fails."""


class MediaError(CollaboratorError):
    """Raised when a media player cannot be enumerated or controlled."""


class SetupError(PluginError):
    """Raised when a plugin cannot reach its data source at start."""
