"""
HTTP status code reference table
"""

from .errors import RenderError, StatusTableError
from .registry import STATUS_CODES, StatusEntry, StatusRegistry, build_registry
from .renderers import JsonRenderer, TableRenderer
from .status_class import StatusClass

__all__ = [
    "STATUS_CODES",
    "StatusEntry",
    "StatusRegistry",
    "StatusClass",
    "build_registry",
    "TableRenderer",
    "JsonRenderer",
    "StatusTableError",
    "RenderError",
]
