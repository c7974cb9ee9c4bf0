"""Utility modules for file I/O."""

from .touchstone import TouchstoneExporter, port_count_from_extension

__all__ = [
    "TouchstoneExporter",
    "port_count_from_extension",
]
