"""Command-line interface for snpconv."""

from .parser import apply_cli_settings, create_cli_parser
from .runner import run_cli_conversion

__all__ = ["create_cli_parser", "apply_cli_settings", "run_cli_conversion"]
