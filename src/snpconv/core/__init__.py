"""Touchstone parsing, matrix building and representation conversion."""

from .converter import (
    ConversionResult,
    DiagnosticMatrices,
    convert_nport_to_two_port,
    convert_two_port_representation,
)
from .errors import (
    ConversionError,
    IncompleteForDetectionError,
    IncompleteRecordError,
    InputMissingError,
    NoDataFoundError,
    PortSelectionError,
)
from .header import (
    DataFormat,
    FrequencyUnit,
    OptionsHeader,
    ParameterType,
    parse_options_line,
)
from .matrix import Ordering, asymmetry_score, build_matrix, resolve_ordering
from .records import Record, TouchstoneScan, iter_records, scan_touchstone

__all__ = [
    "ConversionResult",
    "DiagnosticMatrices",
    "convert_nport_to_two_port",
    "convert_two_port_representation",
    "ConversionError",
    "IncompleteForDetectionError",
    "IncompleteRecordError",
    "InputMissingError",
    "NoDataFoundError",
    "PortSelectionError",
    "DataFormat",
    "FrequencyUnit",
    "OptionsHeader",
    "ParameterType",
    "parse_options_line",
    "Ordering",
    "asymmetry_score",
    "build_matrix",
    "resolve_ordering",
    "Record",
    "TouchstoneScan",
    "iter_records",
    "scan_touchstone",
]
