"""
Test fixtures for snpconv tests.

This module provides synthetic N-port matrices and Touchstone text
generators for testing without vendor files.
"""

from .sample_data import (
    TWO_PORT_RI_TEXT,
    flatten_matrix,
    format_record_lines,
    generate_indexed_matrix,
    generate_reciprocal_matrix,
    generate_touchstone_text,
)

__all__ = [
    "TWO_PORT_RI_TEXT",
    "flatten_matrix",
    "format_record_lines",
    "generate_indexed_matrix",
    "generate_reciprocal_matrix",
    "generate_touchstone_text",
]
