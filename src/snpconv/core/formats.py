"""
Complex value representation conversions (RI / MA / DB).

Two degenerate-value policies live here and are kept separate:
- zero policy: non-finite values are written as "0.0" (RI/MA output)
- dB floor policy: zero magnitude maps to DB_FLOOR instead of -inf (DB output)
"""

import math

from ..config.constants import DB_FLOOR, OUTPUT_DECIMALS, ZERO_TOKEN
from .header import DataFormat


def polar_to_rect(magnitude: float, angle_deg: float) -> complex:
    """
    Convert magnitude and angle in degrees to a complex value.

    Non-finite input gives NaN parts, written out as "0.0" later.
    """
    if not (math.isfinite(magnitude) and math.isfinite(angle_deg)):
        return complex(math.nan, math.nan)
    rad = math.radians(angle_deg)
    return complex(magnitude * math.cos(rad), magnitude * math.sin(rad))


def db_to_magnitude(db: float) -> float:
    """Convert dB to linear magnitude, inf when out of float range."""
    try:
        return 10.0 ** (db / 20.0)
    except OverflowError:
        return math.inf


def pair_to_complex(first: str, second: str, data_format: DataFormat) -> complex:
    """
    Convert a pair of numeric tokens to a complex value.

    Args:
        first: Real part, magnitude or dB
        second: Imaginary part or angle in degrees
        data_format: Representation of the pair

    Returns:
        Complex value
    """
    a = float(first)
    b = float(second)
    if data_format is DataFormat.MA:
        return polar_to_rect(a, b)
    if data_format is DataFormat.DB:
        return polar_to_rect(db_to_magnitude(a), b)
    return complex(a, b)


def magnitude_angle(value: complex) -> tuple[float, float]:
    """Return (magnitude, angle in degrees) of a complex value."""
    magnitude = math.hypot(value.real, value.imag)
    angle_deg = math.degrees(math.atan2(value.imag, value.real))
    return magnitude, angle_deg


def db_from_magnitude(magnitude: float) -> float:
    """20*log10(magnitude), with DB_FLOOR for magnitude <= 0."""
    if magnitude <= 0:
        return DB_FLOOR
    return 20.0 * math.log10(magnitude)


def format_fixed_or_zero(value: float) -> str:
    """Fixed-point text, "0.0" for non-finite values."""
    if not math.isfinite(value):
        return ZERO_TOKEN
    return f"{value:.{OUTPUT_DECIMALS}f}"


def format_fixed_db(value: float) -> str:
    """Fixed-point dB text; -inf clamps to the floor, NaN and +inf give "0.0"."""
    if value == -math.inf:
        value = DB_FLOOR
    elif not math.isfinite(value):
        return ZERO_TOKEN
    return f"{value:.{OUTPUT_DECIMALS}f}"


def complex_to_pair(value: complex, data_format: DataFormat) -> tuple[float, float]:
    """
    Convert a complex value to a numeric pair in the given representation.

    Returns:
        (re, im) for RI, (magnitude, deg) for MA, (dB, deg) for DB
    """
    if data_format is DataFormat.RI:
        return value.real, value.imag
    magnitude, angle_deg = magnitude_angle(value)
    if data_format is DataFormat.MA:
        return magnitude, angle_deg
    return db_from_magnitude(magnitude), angle_deg


def format_pair(value: complex, data_format: DataFormat) -> tuple[str, str]:
    """Format a complex value as two text fields in the given representation."""
    first, second = complex_to_pair(value, data_format)
    if data_format is DataFormat.DB:
        return format_fixed_db(first), format_fixed_or_zero(second)
    return format_fixed_or_zero(first), format_fixed_or_zero(second)
