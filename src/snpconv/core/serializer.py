"""
2-port Touchstone text output.

Layout: comments (or a default one), synthesized option line, a column
description comment, then one line per frequency point using the original
frequency token verbatim.
"""

from collections.abc import Iterable

import numpy as np

from ..config.constants import TWO_PORT_PARAMS
from .errors import PortSelectionError
from .formats import format_pair
from .header import DataFormat, OptionsHeader


def extract_port_pair(matrix: np.ndarray, port_a: int, port_b: int) -> np.ndarray:
    """
    Extract the 2-port sub-network between two ports.

    S11 = S[a, a], S21 = S[b, a], S12 = S[a, b], S22 = S[b, b], with
    a = port_a - 1 and b = port_b - 1.

    Args:
        matrix: Full N x N matrix
        port_a: 1-indexed port mapped to port 1
        port_b: 1-indexed port mapped to port 2

    Returns:
        2 x 2 complex matrix
    """
    n_ports = matrix.shape[0]
    for port in (port_a, port_b):
        if not 1 <= port <= n_ports:
            raise PortSelectionError(f"Port {port} out of range 1..{n_ports}")
    a = port_a - 1
    b = port_b - 1
    return np.array(
        [[matrix[a, a], matrix[a, b]], [matrix[b, a], matrix[b, b]]], dtype=complex
    )


def column_description(parameter_type: str, data_format: DataFormat) -> str:
    """Build the '! Columns:' comment for a 2-port file."""
    columns = ["freq"]
    for ij in TWO_PORT_PARAMS:
        name = f"{parameter_type}{ij}"
        if data_format is DataFormat.RI:
            columns.extend([f"Re({name})", f"Im({name})"])
        elif data_format is DataFormat.MA:
            columns.extend([f"|{name}|", f"{name}deg"])
        else:
            columns.extend([f"{name}(dB)", f"{name}deg"])
    return "! Columns: " + " ".join(columns)


def format_data_line(
    frequency_token: str, matrix: np.ndarray, data_format: DataFormat
) -> str:
    """Format one 2-port data line in S11 S21 S12 S22 order."""
    fields = [frequency_token]
    # Column-major traversal for N=2
    for col in range(2):
        for row in range(2):
            fields.extend(format_pair(complex(matrix[row, col]), data_format))
    return " ".join(fields)


def serialize_two_port(
    comments: list[str],
    options: OptionsHeader,
    points: Iterable[tuple[str, np.ndarray]],
    data_format: DataFormat,
    default_comment: str,
) -> str:
    """
    Serialize 2-port data to Touchstone text.

    Args:
        comments: Comment lines to echo
        options: Input option line (unit, type and impedance are kept)
        points: (frequency token, 2 x 2 matrix) pairs
        data_format: Output representation
        default_comment: Written when there are no comments to echo

    Returns:
        Output text, lines joined with '\\n'
    """
    lines = list(comments) if comments else [default_comment]
    lines.append(options.option_line(data_format))
    lines.append(column_description(options.parameter_type.value, data_format))
    for frequency_token, matrix in points:
        lines.append(format_data_line(frequency_token, matrix, data_format))
    return "\n".join(lines)
