"""
Configuration constants for the Touchstone converter.

This module centralizes all hardcoded values to make the converter
easier to maintain and configure.
"""

# Touchstone option line defaults
DEFAULT_FREQ_UNIT = "Hz"
DEFAULT_PARAMETER_TYPE = "S"
DEFAULT_DATA_FORMAT = "RI"
DEFAULT_REFERENCE_IMPEDANCE = "50"
DEFAULT_FORMAT_HINT = "auto"  # Take the input format from the option line

# Frequency unit conversion factors
FREQ_UNIT_CONVERSIONS = {
    "Hz": 1.0,
    "kHz": 1e3,
    "MHz": 1e6,
    "GHz": 1e9,
}

# Matrix ordering
DEFAULT_ORDERING = "col"  # Column-major, the dominant vendor export
DETECTION_SAMPLE_SIZE = 6  # Records sampled by the ordering resolver

# Output formatting
OUTPUT_DECIMALS = 6
ZERO_TOKEN = "0.0"  # Emitted for non-finite values on the RI/MA path
DB_FLOOR = -300.0  # dB emitted for zero magnitude

# Default comments when the input carries none
DEFAULT_NPORT_COMMENT = "! Converted by snpconv (column-major ordering default)"
DEFAULT_TWO_PORT_COMMENT = "! Converted by snpconv 2-port representation converter"

# 2-port column order (column-major traversal for N=2)
TWO_PORT_PARAMS = ["11", "21", "12", "22"]

# Output file naming
DEFAULT_OUTPUT_FOLDER = "converted"
DEFAULT_FILENAME_PREFIX = "converted"
OUTPUT_TIMESTAMP_FORMAT = "%Y%m%d_%H%M"

# Default port selection
DEFAULT_PORT_COUNT = 2
DEFAULT_PORT_A = 1
DEFAULT_PORT_B = 2

# History limits
MAX_INPUT_HISTORY = 10

# Plot settings
DEFAULT_PLOT_DPI = 150
SPARAM_PLOT_COLORS = {
    "11": "#ff6b6b",
    "21": "#4ecdc4",
    "12": "#ffe66d",
    "22": "#c77dff",
}
DEFAULT_FOREGROUND_COLOR = "#e6e1dc"
DEFAULT_BACKGROUND_COLOR = "#0e1419"
DEFAULT_GRID_COLOR = "#2d3640"
