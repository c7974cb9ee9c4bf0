"""Command-line argument parser for snpconv."""

import argparse

from ..config.constants import DEFAULT_FORMAT_HINT, DEFAULT_ORDERING
from ..config.settings import AppSettings


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Output options shared by both commands."""
    output_group = parser.add_argument_group("output settings")
    output_group.add_argument(
        "--output-folder", help="Output folder path (default: converted)"
    )
    output_group.add_argument(
        "--filename-prefix", help="Filename prefix (default: converted)"
    )
    output_group.add_argument(
        "--custom-filename", help="Use custom filename instead of auto-generated"
    )
    output_group.add_argument(
        "--stdout",
        action="store_true",
        help="Print converted text instead of writing a file",
    )
    output_group.add_argument(
        "--plot",
        action="store_true",
        help="Save magnitude and phase plots next to the output file",
    )
    output_group.add_argument(
        "--verbose", "-v", action="store_true", help="Print conversion log"
    )
    output_group.add_argument(
        "--no-save-settings",
        action="store_true",
        help="Do not remember these options for the next run",
    )


def create_cli_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="snpconv",
        description="snpconv - Touchstone multi-port converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Extract ports 1 and 3 of a 4-port file (N taken from the extension)
  snpconv extract device.s4p --pair 1 3

  # Let the converter detect column-major vs row-major ordering
  snpconv extract device.s4p --pair 1 3 --ordering auto --diagnostics

  # Convert a 2-port file to dB/angle
  snpconv retarget device.s2p

  # Convert a MA file without option line to RI, print to terminal
  snpconv retarget device.s2p --hint MA --to RI --stdout
        """,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser(
        "extract", help="Extract a 2-port sub-network from an N-port file"
    )
    extract.add_argument("input", help="Input Touchstone file (.sNp)")
    port_group = extract.add_argument_group("port settings")
    port_group.add_argument(
        "--ports",
        "-N",
        type=int,
        help="Port count N (default: from file extension)",
    )
    port_group.add_argument(
        "--pair",
        type=int,
        nargs=2,
        metavar=("A", "B"),
        help="Port pair to extract, 1-indexed (S21 is A to B)",
    )
    parse_group = extract.add_argument_group("parse settings")
    parse_group.add_argument(
        "--ordering",
        choices=["col", "row", "auto"],
        help="Matrix ordering (default: col)",
    )
    parse_group.add_argument(
        "--format",
        choices=["RI", "MA", "DB"],
        type=str.upper,
        help="Override the input format from the option line",
    )
    parse_group.add_argument(
        "--diagnostics",
        action="store_true",
        help="Print both candidate matrices of the first point",
    )
    _add_output_arguments(extract)

    retarget = subparsers.add_parser(
        "retarget", help="Convert a 2-port file to another representation"
    )
    retarget.add_argument("input", help="Input Touchstone file (.s2p)")
    format_group = retarget.add_argument_group("format settings")
    format_group.add_argument(
        "--hint",
        choices=["auto", "RI", "MA", "DB"],
        type=lambda s: "auto" if s.lower() == "auto" else s.upper(),
        help="Input format (default: auto, from the option line)",
    )
    format_group.add_argument(
        "--to",
        dest="target",
        choices=["DB", "RI", "MA"],
        type=str.upper,
        help="Output format (default: DB)",
    )
    _add_output_arguments(retarget)

    return parser


def apply_cli_settings(args: argparse.Namespace, settings: AppSettings) -> AppSettings:
    """Apply CLI arguments to settings object."""
    # Extraction settings
    if getattr(args, "ports", None) is not None:
        settings.n_ports = args.ports
    if getattr(args, "pair", None):
        settings.port_a, settings.port_b = args.pair
    # Overrides apply to one file only
    if hasattr(args, "ordering"):
        settings.ordering = args.ordering or DEFAULT_ORDERING
    if hasattr(args, "format"):
        settings.format_override = args.format or ""

    # Retarget settings
    if hasattr(args, "hint"):
        settings.format_hint = args.hint or DEFAULT_FORMAT_HINT
    if getattr(args, "target", None):
        settings.target_format = args.target

    # Output settings
    if args.output_folder:
        settings.output_folder = args.output_folder
    if args.filename_prefix:
        settings.filename_prefix = args.filename_prefix
    if args.custom_filename:
        settings.custom_filename = args.custom_filename
        settings.use_custom_filename = True
    else:
        settings.use_custom_filename = False
    settings.export_plot = args.plot

    return settings
