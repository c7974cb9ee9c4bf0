"""
Conversion entry points.

Both paths share the record assembler, matrix builder and format converter;
they differ only in port count, ordering and output representation.
"""

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from ..config.constants import (
    DEFAULT_FORMAT_HINT,
    DEFAULT_NPORT_COMMENT,
    DEFAULT_ORDERING,
    DEFAULT_TWO_PORT_COMMENT,
)
from .errors import ConversionError, PortSelectionError
from .header import DataFormat, OptionsHeader, parse_data_format
from .matrix import Ordering, build_record_matrix, resolve_ordering
from .records import require_complete, scan_touchstone
from .serializer import extract_port_pair, serialize_two_port

LogCallback = Callable[[str, str], None]


@dataclass
class DiagnosticMatrices:
    """Both candidate matrices of the first complete record."""

    frequency_token: str
    column_major: np.ndarray
    row_major: np.ndarray


@dataclass
class ConversionResult:
    """Output of a conversion."""

    output_text: str
    point_count: int
    detected_format: DataFormat
    chosen_ordering: Ordering | None = None
    preview_summary: str = ""
    header_options: OptionsHeader | None = None
    diagnostic_matrices: DiagnosticMatrices | None = None
    ordering_scores: dict[str, float] | None = None


def _log(log_callback: LogCallback | None, message: str, level: str = "info"):
    if log_callback:
        log_callback(message, level)


def _parse_option(parser, value, what: str):
    try:
        return parser(value)
    except ValueError as e:
        raise ConversionError(f"Invalid {what}: {e}") from e


def convert_nport_to_two_port(
    text: str,
    n_ports: int,
    port_a: int,
    port_b: int,
    ordering: Ordering | str = DEFAULT_ORDERING,
    format_override: DataFormat | str | None = None,
    return_diagnostics: bool = False,
    log_callback: LogCallback | None = None,
) -> ConversionResult:
    """
    Extract a 2-port sub-network from N-port Touchstone text.

    Output is always RI with 6 fractional digits, S21 being transmission
    from port_a to port_b.

    Args:
        text: N-port Touchstone file contents
        n_ports: Port count N
        port_a: 1-indexed port mapped to port 1
        port_b: 1-indexed port mapped to port 2
        ordering: "col" (default), "row" or "auto"
        format_override: RI, MA or DB to ignore the option line format
        return_diagnostics: Include both candidate matrices of the first record
        log_callback: Optional callback(message, level)

    Returns:
        ConversionResult

    Raises:
        ConversionError: Or one of its subclasses, on any failure
    """
    if isinstance(n_ports, bool) or not isinstance(n_ports, int) or n_ports < 1:
        raise PortSelectionError(f"Port count must be a positive integer: {n_ports}")
    for port in (port_a, port_b):
        if not isinstance(port, int) or not 1 <= port <= n_ports:
            raise PortSelectionError(f"Port {port} out of range 1..{n_ports}")

    requested = _parse_option(Ordering.parse, ordering, "ordering")
    override = None
    if format_override:
        override = _parse_option(parse_data_format, format_override, "format")

    scan = scan_touchstone(text, n_ports, log_callback)
    data_format = override or scan.options.data_format
    _log(log_callback, f"Input format: {data_format.value}")

    scores = None
    chosen = requested
    if requested is Ordering.AUTO:
        chosen, scores = resolve_ordering(scan.records, n_ports, data_format)
        _log(
            log_callback,
            f"Asymmetry scores: col={scores['col']:.6g} row={scores['row']:.6g}",
            "debug",
        )

    records = require_complete(scan.records, n_ports)

    diagnostics = None
    if return_diagnostics:
        first = records[0]
        diagnostics = DiagnosticMatrices(
            frequency_token=first.frequency_token,
            column_major=build_record_matrix(
                first, n_ports, data_format, Ordering.COLUMN_MAJOR
            ),
            row_major=build_record_matrix(
                first, n_ports, data_format, Ordering.ROW_MAJOR
            ),
        )

    points = [
        (
            record.frequency_token,
            extract_port_pair(
                build_record_matrix(record, n_ports, data_format, chosen),
                port_a,
                port_b,
            ),
        )
        for record in records
    ]

    output_text = serialize_two_port(
        scan.comments,
        scan.options,
        points,
        DataFormat.RI,
        DEFAULT_NPORT_COMMENT,
    )

    summary = (
        f"Ordering chosen: {chosen.value} (requested: {requested.value}) - "
        f"format: {data_format.value} - points: {len(points)}"
    )
    _log(log_callback, summary)

    return ConversionResult(
        output_text=output_text,
        point_count=len(points),
        detected_format=data_format,
        chosen_ordering=chosen,
        preview_summary=summary,
        header_options=scan.options if scan.header_found else None,
        diagnostic_matrices=diagnostics,
        ordering_scores=scores,
    )


def convert_two_port_representation(
    text: str,
    format_hint: DataFormat | str = DEFAULT_FORMAT_HINT,
    target_format: DataFormat | str = DataFormat.DB,
    log_callback: LogCallback | None = None,
) -> ConversionResult:
    """
    Retarget a 2-port Touchstone file to another representation.

    A 2-port file has a single canonical traversal (S11, S21, S12, S22),
    so no ordering detection takes place.

    Args:
        text: 2-port Touchstone file contents
        format_hint: "auto" to use the option line, or RI/MA/DB
        target_format: Output representation (DB by default)
        log_callback: Optional callback(message, level)

    Returns:
        ConversionResult

    Raises:
        ConversionError: Or one of its subclasses, on any failure
    """
    hint = None
    if format_hint and str(format_hint).strip().lower() != "auto":
        hint = _parse_option(parse_data_format, format_hint, "format hint")
    target = _parse_option(parse_data_format, target_format, "target format")

    scan = scan_touchstone(text, 2, log_callback)
    data_format = hint or scan.options.data_format
    _log(log_callback, f"Input format: {data_format.value}")

    records = require_complete(scan.records, 2)
    points = [
        (
            record.frequency_token,
            build_record_matrix(record, 2, data_format, Ordering.COLUMN_MAJOR),
        )
        for record in records
    ]

    output_text = serialize_two_port(
        scan.comments, scan.options, points, target, DEFAULT_TWO_PORT_COMMENT
    )

    summary = (
        f"Format: {data_format.value} -> {target.value} - points: {len(points)}"
    )
    _log(log_callback, summary)

    return ConversionResult(
        output_text=output_text,
        point_count=len(points),
        detected_format=data_format,
        preview_summary=summary,
        header_options=scan.options if scan.header_found else None,
    )
