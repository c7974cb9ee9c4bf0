"""
Touchstone file reading and writing for converted data.
"""

import os
import re
from datetime import datetime

import numpy as np

from ..config.constants import (
    DEFAULT_FILENAME_PREFIX,
    OUTPUT_TIMESTAMP_FORMAT,
    TWO_PORT_PARAMS,
)
from ..core.formats import db_from_magnitude
from ..core.matrix import Ordering, build_record_matrix
from ..core.records import require_complete, scan_touchstone


def port_count_from_extension(file_path: str) -> int | None:
    """
    Infer the port count from a .sNp extension.

    Returns:
        N for '.s4p', '.S12P', ... or None when the extension does not match
    """
    match = re.search(r"\.s(\d+)p$", file_path, re.IGNORECASE)
    if not match:
        return None
    n_ports = int(match.group(1))
    return n_ports if n_ports > 0 else None


class TouchstoneExporter:
    """Read input Touchstone files and write converted 2-port files."""

    def __init__(self, prefix: str = DEFAULT_FILENAME_PREFIX):
        """
        Initialize exporter.

        Args:
            prefix: Prefix for auto-generated filenames
        """
        self.prefix = prefix

    def export(
        self,
        text: str,
        output_path: str,
        filename: str = None,
        prefix: str = None,
    ) -> str:
        """
        Write converted Touchstone text to a .s2p file.

        Args:
            text: Converted 2-port Touchstone text
            output_path: Output directory
            filename: Custom filename (auto-generated if None)
            prefix: Prefix for auto-generated filename (exporter default if None)

        Returns:
            Full path to created file
        """
        if not text:
            raise ValueError("No converted data to export")

        os.makedirs(output_path, exist_ok=True)

        if filename is None:
            timestamp = datetime.now().strftime(OUTPUT_TIMESTAMP_FORMAT)
            filename = f"{prefix or self.prefix}_{timestamp}"

        if not filename.lower().endswith(".s2p"):
            filename += ".s2p"

        full_path = os.path.join(output_path, filename)

        with open(full_path, "w", encoding="utf-8") as f:
            f.write(text)
            if not text.endswith("\n"):
                f.write("\n")

        return full_path

    @staticmethod
    def read_text(file_path: str) -> str:
        """
        Read a Touchstone file as text.

        Older vendor files are not always UTF-8; latin-1 is tried next.

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            with open(file_path, encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError:
            with open(file_path, encoding="latin-1") as f:
                return f.read()

    @staticmethod
    def import_two_port(
        text: str,
    ) -> tuple[np.ndarray, dict[str, tuple[np.ndarray, np.ndarray]]]:
        """
        Parse 2-port Touchstone text into magnitude/phase arrays.

        Args:
            text: 2-port Touchstone text in any representation

        Returns:
            Tuple of (frequencies_hz, s_parameters)
            where s_parameters is Dict[str, Tuple[mag_db, phase_deg]]

        Raises:
            ConversionError: If the text cannot be parsed
            ValueError: If a frequency token cannot be scaled
        """
        scan = scan_touchstone(text, 2)
        records = require_complete(scan.records, 2)
        data_format = scan.options.data_format
        name = scan.options.parameter_type.value

        frequencies = []
        values = {f"{name}{ij}": [] for ij in TWO_PORT_PARAMS}
        for record in records:
            frequencies.append(float(record.frequency_token))
            matrix = build_record_matrix(record, 2, data_format, Ordering.COLUMN_MAJOR)
            values[f"{name}11"].append(matrix[0, 0])
            values[f"{name}21"].append(matrix[1, 0])
            values[f"{name}12"].append(matrix[0, 1])
            values[f"{name}22"].append(matrix[1, 1])

        freq_hz = np.array(frequencies) * scan.options.frequency_unit.multiplier

        s_params = {}
        for param, series in values.items():
            data = np.array(series, dtype=complex)
            mag_db = np.array([db_from_magnitude(m) for m in np.abs(data)])
            phase_deg = np.degrees(np.angle(data))
            s_params[param] = (mag_db, phase_deg)

        return freq_hz, s_params
