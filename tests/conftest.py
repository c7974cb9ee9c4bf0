"""
Pytest configuration and shared fixtures.

Provides synthetic Touchstone texts and an isolated settings directory.
"""

from unittest.mock import patch

import pytest

from tests.fixtures.sample_data import (
    TWO_PORT_RI_TEXT,
    generate_indexed_matrix,
    generate_reciprocal_matrix,
    generate_touchstone_text,
)

# ===== Matrix Fixtures =====


@pytest.fixture
def reciprocal_matrices():
    """Three reciprocal 4-port matrices."""
    return [generate_reciprocal_matrix(4, seed=s) for s in range(3)]


@pytest.fixture
def indexed_3port():
    """3-port matrix whose entries encode their row and column."""
    return generate_indexed_matrix(3)


# ===== Touchstone Text Fixtures =====


@pytest.fixture
def four_port_text(reciprocal_matrices):
    """Column-major RI 4-port text with continuation lines."""
    return generate_touchstone_text(
        reciprocal_matrices, comments=["! Synthetic 4-port"]
    )


@pytest.fixture
def three_port_text(indexed_3port):
    """Column-major RI 3-port text, two identical points."""
    return generate_touchstone_text(
        [indexed_3port, indexed_3port],
        frequencies=["1.5e9", "2.5e9"],
        option_line="# Hz S RI R 50",
    )


@pytest.fixture
def two_port_text():
    """Hand-written 2-port RI text."""
    return TWO_PORT_RI_TEXT


# ===== Settings Fixtures =====


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def isolated_settings(temp_config_dir):
    """Point SettingsManager at a temporary config directory."""
    with patch(
        "snpconv.config.settings.user_config_dir", return_value=str(temp_config_dir)
    ):
        yield temp_config_dir
