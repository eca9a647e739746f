"""Renderers exposed by status_table.renderers

Re-export renderer classes used for printing the status registry.
"""
from .json_renderer import JsonRenderer
from .table_renderer import TableRenderer

__all__ = ["JsonRenderer", "TableRenderer"]
