"""snpconv - Touchstone multi-port converter"""

__version__ = "0.1.0"

from .config.settings import AppSettings, SettingsManager
from .core import (
    ConversionError,
    ConversionResult,
    DataFormat,
    Ordering,
    convert_nport_to_two_port,
    convert_two_port_representation,
)
from .utils import TouchstoneExporter

__all__ = [
    "convert_nport_to_two_port",
    "convert_two_port_representation",
    "ConversionResult",
    "ConversionError",
    "DataFormat",
    "Ordering",
    "TouchstoneExporter",
    "SettingsManager",
    "AppSettings",
]
