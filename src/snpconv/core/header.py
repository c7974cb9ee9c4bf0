"""
Touchstone option line parsing.

Option line grammar: # <freq_unit> <param_type> <format> R <impedance>
Tokens are case-insensitive, flags after the unit may come in any order and
unknown tokens are ignored.
"""

from dataclasses import dataclass
from enum import Enum

from ..config.constants import (
    DEFAULT_DATA_FORMAT,
    DEFAULT_FREQ_UNIT,
    DEFAULT_PARAMETER_TYPE,
    DEFAULT_REFERENCE_IMPEDANCE,
    FREQ_UNIT_CONVERSIONS,
)


class FrequencyUnit(Enum):
    """Frequency units allowed on the option line."""

    HZ = "Hz"
    KHZ = "kHz"
    MHZ = "MHz"
    GHZ = "GHz"

    @property
    def multiplier(self) -> float:
        """Scale factor to Hz."""
        return FREQ_UNIT_CONVERSIONS[self.value]


class ParameterType(Enum):
    """Network parameter types."""

    S = "S"
    Y = "Y"
    Z = "Z"
    G = "G"
    H = "H"


class DataFormat(Enum):
    """Complex value representations."""

    RI = "RI"  # real, imaginary
    MA = "MA"  # magnitude, angle (deg)
    DB = "DB"  # magnitude (dB), angle (deg)


def _lookup(enum_cls, token: str):
    """Case-insensitive enum lookup by value, None when unknown."""
    upper = token.upper()
    for member in enum_cls:
        if member.value.upper() == upper:
            return member
    return None


def parse_data_format(name) -> DataFormat:
    """
    Resolve a format name (or DataFormat) to a DataFormat.

    Raises:
        ValueError: If the name is not RI, MA or DB
    """
    if isinstance(name, DataFormat):
        return name
    fmt = _lookup(DataFormat, str(name).strip())
    if fmt is None:
        raise ValueError(f"Unknown data format: {name} (expected RI, MA or DB)")
    return fmt


@dataclass(frozen=True)
class OptionsHeader:
    """Parsed option line. Defaults apply when the file has none."""

    frequency_unit: FrequencyUnit = FrequencyUnit(DEFAULT_FREQ_UNIT)
    parameter_type: ParameterType = ParameterType(DEFAULT_PARAMETER_TYPE)
    data_format: DataFormat = DataFormat(DEFAULT_DATA_FORMAT)
    reference_impedance: str = DEFAULT_REFERENCE_IMPEDANCE

    def option_line(self, data_format: DataFormat | None = None) -> str:
        """Render the option line, optionally with another data format."""
        fmt = data_format or self.data_format
        return (
            f"# {self.frequency_unit.value} {self.parameter_type.value} "
            f"{fmt.value} R {self.reference_impedance}"
        )


def parse_options_line(line: str) -> OptionsHeader:
    """
    Parse a Touchstone option line.

    Args:
        line: Line starting with '#'

    Returns:
        OptionsHeader with defaults for anything not given
    """
    tokens = line.strip().lstrip("#").split()

    defaults = OptionsHeader()
    frequency_unit = defaults.frequency_unit
    parameter_type = defaults.parameter_type
    data_format = defaults.data_format
    reference_impedance = defaults.reference_impedance

    if tokens:
        frequency_unit = _lookup(FrequencyUnit, tokens[0]) or frequency_unit

    i = 1
    while i < len(tokens):
        token = tokens[i]
        param = _lookup(ParameterType, token)
        fmt = _lookup(DataFormat, token)
        if param is not None:
            parameter_type = param
        elif fmt is not None:
            data_format = fmt
        elif token.upper() == "R" and i + 1 < len(tokens):
            reference_impedance = tokens[i + 1]
            i += 1
        i += 1

    return OptionsHeader(
        frequency_unit=frequency_unit,
        parameter_type=parameter_type,
        data_format=data_format,
        reference_impedance=reference_impedance,
    )
