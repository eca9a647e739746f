"""
Exceptions raised by status_table.
"""


class StatusTableError(Exception):
    """Base class for all status_table errors."""


class RenderError(StatusTableError):
    """Raised when the registry cannot be serialized for output."""
