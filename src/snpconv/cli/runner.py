"""CLI conversion runner for snpconv."""

import argparse
import os

import numpy as np

from ..config.settings import AppSettings, SettingsManager
from ..core import (
    ConversionResult,
    convert_nport_to_two_port,
    convert_two_port_representation,
)
from ..utils import TouchstoneExporter, port_count_from_extension
from .parser import apply_cli_settings
from .plotting import export_plots_cli


def make_log_callback(verbose: bool):
    """Create a log callback printing '[level] message' lines when verbose."""

    def log_callback(message: str, level: str):
        if verbose:
            print(f"[{level}] {message}")

    return log_callback


def resolve_port_count(args: argparse.Namespace, settings: AppSettings) -> int:
    """Port count from --ports, then the file extension, then settings."""
    if getattr(args, "ports", None) is not None:
        return args.ports
    from_extension = port_count_from_extension(args.input)
    if from_extension is not None:
        return from_extension
    return settings.n_ports


def run_extract(
    text: str, args: argparse.Namespace, settings: AppSettings
) -> ConversionResult:
    """Run the N-port to 2-port extraction."""
    settings.n_ports = resolve_port_count(args, settings)
    return convert_nport_to_two_port(
        text,
        settings.n_ports,
        settings.port_a,
        settings.port_b,
        ordering=settings.ordering,
        format_override=settings.format_override or None,
        return_diagnostics=args.diagnostics,
        log_callback=make_log_callback(args.verbose),
    )


def run_retarget(
    text: str, args: argparse.Namespace, settings: AppSettings
) -> ConversionResult:
    """Run the 2-port representation conversion."""
    return convert_two_port_representation(
        text,
        format_hint=settings.format_hint,
        target_format=settings.target_format,
        log_callback=make_log_callback(args.verbose),
    )


def print_diagnostics(result: ConversionResult) -> None:
    """Print both candidate matrices of the first point."""
    diagnostics = result.diagnostic_matrices
    if diagnostics is None:
        return
    with np.printoptions(precision=4, suppress=True):
        print(f"Diagnostics for frequency {diagnostics.frequency_token}:")
        print("  column-major:")
        print(diagnostics.column_major)
        print("  row-major:")
        print(diagnostics.row_major)
    if result.ordering_scores:
        scores = result.ordering_scores
        print(f"  asymmetry: col={scores['col']:.6g} row={scores['row']:.6g}")


def run_cli_conversion(args: argparse.Namespace) -> int:
    """Run a conversion in CLI mode."""
    try:
        settings_manager = SettingsManager()
        settings = settings_manager.load()
        settings = apply_cli_settings(args, settings)

        text = TouchstoneExporter.read_text(args.input)

        if args.command == "extract":
            result = run_extract(text, args, settings)
        else:
            result = run_retarget(text, args, settings)

        print(result.preview_summary)
        if args.command == "extract" and args.diagnostics:
            print_diagnostics(result)

        if args.stdout:
            print(result.output_text)
        else:
            exporter = TouchstoneExporter(prefix=settings.filename_prefix)
            filename = None
            if settings.use_custom_filename and settings.custom_filename:
                filename = settings.custom_filename

            s2p_path = exporter.export(
                result.output_text, settings.output_folder, filename=filename
            )
            print(f"S2P file saved: {s2p_path}")

            if settings.export_plot:
                base_filename = os.path.splitext(os.path.basename(s2p_path))[0]
                export_plots_cli(
                    result.output_text, settings.output_folder, base_filename
                )

        if not args.no_save_settings:
            settings_manager.add_input_to_history(os.path.abspath(args.input))
            settings_manager.save(settings)

        return 0

    except Exception as e:
        print(f"Error: {e}")
        return 1
