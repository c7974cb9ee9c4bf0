"""Tests for matrix building and ordering resolution."""

import numpy as np
import pytest

from snpconv.core.errors import IncompleteForDetectionError, IncompleteRecordError
from snpconv.core.header import DataFormat
from snpconv.core.matrix import (
    Ordering,
    asymmetry_score,
    build_matrix,
    resolve_ordering,
)
from snpconv.core.records import Record, iter_records
from tests.fixtures.sample_data import (
    format_record_lines,
    generate_indexed_matrix,
    generate_reciprocal_matrix,
)

# S11=(1,2) S21=(3,4) S12=(5,6) S22=(7,8) when read column-major
TWO_PORT_TOKENS = ["1", "2", "3", "4", "5", "6", "7", "8"]


@pytest.mark.unit
class TestBuildMatrix:
    """Test building matrices from flat tokens."""

    def test_column_major_two_port(self):
        """Test column-major assignment for N=2."""
        matrix = build_matrix(TWO_PORT_TOKENS, 2, DataFormat.RI, Ordering.COLUMN_MAJOR)
        assert matrix[0, 0] == complex(1, 2)
        assert matrix[1, 0] == complex(3, 4)
        assert matrix[0, 1] == complex(5, 6)
        assert matrix[1, 1] == complex(7, 8)

    def test_row_major_two_port(self):
        """Test row-major assignment for N=2."""
        matrix = build_matrix(TWO_PORT_TOKENS, 2, DataFormat.RI, Ordering.ROW_MAJOR)
        assert matrix[0, 0] == complex(1, 2)
        assert matrix[0, 1] == complex(3, 4)
        assert matrix[1, 0] == complex(5, 6)
        assert matrix[1, 1] == complex(7, 8)

    def test_orderings_transpose_off_diagonal(self):
        """Test that the two orderings swap S21 and S12."""
        col = build_matrix(TWO_PORT_TOKENS, 2, DataFormat.RI, Ordering.COLUMN_MAJOR)
        row = build_matrix(TWO_PORT_TOKENS, 2, DataFormat.RI, Ordering.ROW_MAJOR)
        assert col[1, 0] != row[1, 0]
        assert col[0, 1] != row[0, 1]
        assert col[1, 0] == row[0, 1]
        np.testing.assert_array_equal(col, row.T)

    def test_default_is_column_major(self):
        """Test that column-major is the default ordering."""
        default = build_matrix(TWO_PORT_TOKENS, 2, DataFormat.RI)
        col = build_matrix(TWO_PORT_TOKENS, 2, DataFormat.RI, Ordering.COLUMN_MAJOR)
        np.testing.assert_array_equal(default, col)

    def test_three_port_round_trip(self):
        """Test rebuilding a 3-port matrix serialized in both orders."""
        expected = generate_indexed_matrix(3)
        for ordering in (Ordering.COLUMN_MAJOR, Ordering.ROW_MAJOR):
            lines = format_record_lines("1.0", expected, "RI", ordering.value)
            record = next(iter_records(lines, 3))
            matrix = build_matrix(record.values, 3, DataFormat.RI, ordering)
            np.testing.assert_allclose(matrix, expected, atol=1e-9)

    def test_ma_pairs(self):
        """Test magnitude/angle pairs."""
        tokens = ["1.0", "90", "2.0", "180", "0.5", "0", "1.0", "-90"]
        matrix = build_matrix(tokens, 2, DataFormat.MA)
        np.testing.assert_allclose(matrix[0, 0], 1j, atol=1e-12)
        np.testing.assert_allclose(matrix[1, 0], -2.0, atol=1e-12)
        np.testing.assert_allclose(matrix[0, 1], 0.5, atol=1e-12)
        np.testing.assert_allclose(matrix[1, 1], -1j, atol=1e-12)

    def test_db_pairs(self):
        """Test dB/angle pairs."""
        tokens = ["0", "0", "-20", "0", "20", "180", "-6.0205999", "45"]
        matrix = build_matrix(tokens, 2, DataFormat.DB)
        np.testing.assert_allclose(matrix[0, 0], 1.0, atol=1e-12)
        np.testing.assert_allclose(matrix[1, 0], 0.1, atol=1e-12)
        np.testing.assert_allclose(matrix[0, 1], -10.0, atol=1e-9)
        assert abs(matrix[1, 1]) == pytest.approx(0.5, rel=1e-6)

    def test_extra_tokens_ignored(self):
        """Test that values past 2*N^2 are ignored."""
        matrix = build_matrix(TWO_PORT_TOKENS + ["99", "99"], 2, DataFormat.RI)
        assert matrix.shape == (2, 2)
        assert matrix[1, 1] == complex(7, 8)

    def test_too_few_tokens(self):
        """Test that short input raises IncompleteRecordError."""
        with pytest.raises(IncompleteRecordError) as exc_info:
            build_matrix(TWO_PORT_TOKENS[:6], 2, DataFormat.RI, frequency_token="3.0")
        assert exc_info.value.expected == 8
        assert exc_info.value.found == 6
        assert exc_info.value.frequency_token == "3.0"

    def test_auto_ordering_rejected(self):
        """Test that an unresolved ordering cannot build a matrix."""
        with pytest.raises(ValueError, match="resolved"):
            build_matrix(TWO_PORT_TOKENS, 2, DataFormat.RI, Ordering.AUTO)


@pytest.mark.unit
class TestOrderingParse:
    """Test ordering name resolution."""

    def test_names(self):
        """Test accepted names."""
        assert Ordering.parse("col") is Ordering.COLUMN_MAJOR
        assert Ordering.parse("Column-Major") is Ordering.COLUMN_MAJOR
        assert Ordering.parse("row") is Ordering.ROW_MAJOR
        assert Ordering.parse("AUTO") is Ordering.AUTO
        assert Ordering.parse(Ordering.ROW_MAJOR) is Ordering.ROW_MAJOR

    def test_unknown(self):
        """Test that an unknown name raises ValueError."""
        with pytest.raises(ValueError, match="Unknown ordering"):
            Ordering.parse("diagonal")


@pytest.mark.unit
class TestAsymmetry:
    """Test the reciprocity asymmetry score."""

    def test_symmetric_matrix_scores_zero(self):
        """Test that a reciprocal matrix has zero asymmetry."""
        assert asymmetry_score(generate_reciprocal_matrix(4)) == 0.0

    def test_known_value(self):
        """Test the Euclidean distance between S12 and S21."""
        matrix = np.array([[0, 3 + 4j], [0, 0]], dtype=complex)
        assert asymmetry_score(matrix) == pytest.approx(5.0)

    def test_one_port(self):
        """Test that a 1-port has no off-diagonal pairs."""
        assert asymmetry_score(np.array([[0.5 + 0.5j]])) == 0.0


def _records_for(matrices, ordering="col"):
    lines = []
    for k, matrix in enumerate(matrices):
        lines.extend(format_record_lines(f"{k + 1}.0", matrix, "RI", ordering))
    return list(iter_records(lines, matrices[0].shape[0]))


@pytest.mark.unit
class TestResolveOrdering:
    """Test automatic ordering detection."""

    def test_reciprocal_selects_column_major(self):
        """Test that reciprocal column-major data resolves to column-major."""
        matrices = [generate_reciprocal_matrix(4, seed=s) for s in range(3)]
        ordering, scores = resolve_ordering(_records_for(matrices), 4, DataFormat.RI)
        assert ordering is Ordering.COLUMN_MAJOR
        assert scores["col"] <= scores["row"]

    def test_tie_goes_to_column_major(self):
        """Test the column-major tie-break."""
        matrices = [generate_indexed_matrix(3)]
        ordering, scores = resolve_ordering(_records_for(matrices), 3, DataFormat.RI)
        assert scores["col"] == scores["row"]
        assert ordering is Ordering.COLUMN_MAJOR

    def test_skips_short_records(self):
        """Test that incomplete records are not sampled."""
        short = Record("0.5", ("1", "2"))
        records = [short] + _records_for([generate_reciprocal_matrix(2)])
        ordering, _ = resolve_ordering(records, 2, DataFormat.RI)
        assert ordering is Ordering.COLUMN_MAJOR

    def test_sample_size_limits_records(self):
        """Test that only the first records are sampled."""
        matrices = [generate_indexed_matrix(2) for _ in range(10)]
        _, all_scores = resolve_ordering(
            _records_for(matrices), 2, DataFormat.RI, sample_size=10
        )
        _, sampled = resolve_ordering(_records_for(matrices), 2, DataFormat.RI)
        assert sampled["col"] == pytest.approx(all_scores["col"] * 6 / 10)

    def test_nan_scores_go_to_column_major(self):
        """Test that out-of-range values do not flip the choice to row-major."""
        records = [Record("1.0", ("1", "0", "0.5", "1e400", "0.5", "0", "1", "0"))]
        ordering, scores = resolve_ordering(records, 2, DataFormat.MA)
        assert np.isnan(scores["col"])
        assert ordering is Ordering.COLUMN_MAJOR

    def test_no_complete_record(self):
        """Test IncompleteForDetectionError when nothing can be sampled."""
        records = [Record("1.0", ("1", "2", "3", "4"))]
        with pytest.raises(IncompleteForDetectionError):
            resolve_ordering(records, 2, DataFormat.RI)

    def test_detection_error_distinct(self):
        """Test that detection failure is not an IncompleteRecordError."""
        assert not issubclass(IncompleteForDetectionError, IncompleteRecordError)
