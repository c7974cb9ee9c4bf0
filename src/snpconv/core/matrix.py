"""
N x N matrix construction and ordering resolution.

Multi-port Touchstone files have no flag stating whether the flattened
matrix is serialized column by column or row by row. The ordering is an
explicit parameter; in auto mode it is picked by reciprocity asymmetry,
since passive reciprocal networks have Sij close to Sji.
"""

from collections.abc import Iterable, Sequence
from enum import Enum
from itertools import islice

import numpy as np

from ..config.constants import DETECTION_SAMPLE_SIZE
from .errors import IncompleteForDetectionError, IncompleteRecordError
from .formats import pair_to_complex
from .header import DataFormat
from .records import Record, expected_value_count


class Ordering(Enum):
    """Serialization order of the flattened matrix."""

    COLUMN_MAJOR = "col"
    ROW_MAJOR = "row"
    AUTO = "auto"

    @classmethod
    def parse(cls, name) -> "Ordering":
        """
        Resolve an ordering name (or Ordering) to an Ordering.

        Raises:
            ValueError: If the name is unknown
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        aliases = {
            "col": cls.COLUMN_MAJOR,
            "column": cls.COLUMN_MAJOR,
            "column-major": cls.COLUMN_MAJOR,
            "row": cls.ROW_MAJOR,
            "row-major": cls.ROW_MAJOR,
            "auto": cls.AUTO,
        }
        if key not in aliases:
            raise ValueError(f"Unknown ordering: {name} (expected col, row or auto)")
        return aliases[key]


def build_matrix(
    values: Sequence[str],
    n_ports: int,
    data_format: DataFormat,
    ordering: Ordering = Ordering.COLUMN_MAJOR,
    frequency_token: str = "?",
) -> np.ndarray:
    """
    Build an N x N complex matrix from a flat token sequence.

    Column-major: for each column, for each row. Row-major: for each row,
    for each column. Each consumed pair fills matrix[row, col]. Tokens past
    2*N^2 are ignored.

    Args:
        values: Numeric tokens after the frequency token
        n_ports: Port count N
        data_format: Representation of each pair
        ordering: COLUMN_MAJOR or ROW_MAJOR
        frequency_token: Used in the error message only

    Returns:
        Complex array of shape (N, N)

    Raises:
        IncompleteRecordError: If fewer than 2*N^2 tokens are given
    """
    expected = expected_value_count(n_ports)
    if len(values) < expected:
        raise IncompleteRecordError(frequency_token, expected, len(values))
    if ordering is Ordering.AUTO:
        raise ValueError("Ordering must be resolved before building a matrix")

    matrix = np.zeros((n_ports, n_ports), dtype=complex)
    p = 0
    for outer in range(n_ports):
        for inner in range(n_ports):
            if ordering is Ordering.COLUMN_MAJOR:
                row, col = inner, outer
            else:
                row, col = outer, inner
            matrix[row, col] = pair_to_complex(values[p], values[p + 1], data_format)
            p += 2
    return matrix


def build_record_matrix(
    record: Record, n_ports: int, data_format: DataFormat, ordering: Ordering
) -> np.ndarray:
    """Build the matrix of a single record."""
    return build_matrix(
        record.values, n_ports, data_format, ordering, record.frequency_token
    )


def asymmetry_score(matrix: np.ndarray) -> float:
    """Sum over i<j of the distance between S[i, j] and S[j, i]."""
    upper = np.triu_indices(matrix.shape[0], k=1)
    return float(np.abs(matrix - matrix.T)[upper].sum())


def resolve_ordering(
    records: Iterable[Record],
    n_ports: int,
    data_format: DataFormat,
    sample_size: int = DETECTION_SAMPLE_SIZE,
) -> tuple[Ordering, dict[str, float]]:
    """
    Pick column-major or row-major by lowest reciprocity asymmetry.

    Samples up to `sample_size` complete records. Ties go to column-major.

    Returns:
        (chosen ordering, {"col": score, "row": score})

    Raises:
        IncompleteForDetectionError: If no record is complete
    """
    expected = expected_value_count(n_ports)
    complete = (r for r in records if r.is_complete(expected))
    sample = list(islice(complete, sample_size))
    if not sample:
        raise IncompleteForDetectionError()

    scores = {Ordering.COLUMN_MAJOR.value: 0.0, Ordering.ROW_MAJOR.value: 0.0}
    for record in sample:
        for ordering in (Ordering.COLUMN_MAJOR, Ordering.ROW_MAJOR):
            matrix = build_record_matrix(record, n_ports, data_format, ordering)
            scores[ordering.value] += asymmetry_score(matrix)

    # NaN scores compare false and fall through to column-major
    if scores[Ordering.ROW_MAJOR.value] < scores[Ordering.COLUMN_MAJOR.value]:
        return Ordering.ROW_MAJOR, scores
    return Ordering.COLUMN_MAJOR, scores
