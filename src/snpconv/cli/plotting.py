"""CLI plotting utilities for snpconv."""

import os
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from ..config.constants import (  # noqa: E402
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_FOREGROUND_COLOR,
    DEFAULT_GRID_COLOR,
    DEFAULT_PLOT_DPI,
    SPARAM_PLOT_COLORS,
)
from ..utils.touchstone import TouchstoneExporter  # noqa: E402


def _create_matplotlib_plot(
    freqs: np.ndarray,
    sparams: dict,
    plot_type: str,
    output_path: Path,
    dpi: int = DEFAULT_PLOT_DPI,
) -> None:
    """
    Create a dark themed plot of 2-port parameters.

    Args:
        freqs: Frequency array in Hz
        sparams: Dictionary {param_name: (magnitude_db, phase_deg)}
        plot_type: 'magnitude' or 'phase'
        output_path: Path to save the plot
        dpi: DPI for the output image
    """
    fg_color = DEFAULT_FOREGROUND_COLOR
    grid_color = DEFAULT_GRID_COLOR

    fig, ax = plt.subplots(figsize=(10, 5))
    fig.patch.set_facecolor(DEFAULT_BACKGROUND_COLOR)
    ax.set_facecolor(DEFAULT_BACKGROUND_COLOR)

    freq_mhz = freqs / 1e6

    if plot_type == "magnitude":
        ylabel = "Magnitude (dB)"
        title = "Magnitude"
    else:
        ylabel = "Phase (degrees)"
        title = "Phase (Unwrapped)"

    for param, (mag_db, phase_deg) in sparams.items():
        if plot_type == "magnitude":
            data = mag_db
        else:
            data = np.degrees(np.unwrap(np.radians(phase_deg)))
        ax.plot(
            freq_mhz,
            data,
            label=param,
            color=SPARAM_PLOT_COLORS.get(param[-2:], fg_color),
            linewidth=1.5,
        )

    ax.set_xlabel("Frequency (MHz)", color=fg_color)
    ax.set_ylabel(ylabel, color=fg_color)
    ax.set_title(title, color=fg_color, pad=15)
    ax.tick_params(colors=fg_color)
    ax.grid(True, alpha=0.2, color=grid_color, linestyle="-", linewidth=0.5)
    legend = ax.legend(edgecolor=grid_color, labelcolor=fg_color)
    legend.get_frame().set_facecolor(DEFAULT_BACKGROUND_COLOR)

    for spine in ax.spines.values():
        spine.set_edgecolor(grid_color)
        spine.set_linewidth(1)

    plt.tight_layout()
    plt.savefig(
        output_path,
        dpi=dpi,
        facecolor=fig.get_facecolor(),
        edgecolor="none",
        bbox_inches="tight",
    )
    plt.close(fig)


def export_plots_cli(text: str, output_path: str, base_filename: str) -> list[str]:
    """
    Save magnitude and phase plots of converted 2-port text.

    Args:
        text: Converted 2-port Touchstone text
        output_path: Output directory
        base_filename: Filename without extension

    Returns:
        Paths of the saved plots
    """
    frequencies, s_parameters = TouchstoneExporter.import_two_port(text)
    os.makedirs(output_path, exist_ok=True)

    saved = []
    for plot_type in ("magnitude", "phase"):
        plot_path = os.path.join(output_path, f"{base_filename}_{plot_type}.png")
        _create_matplotlib_plot(frequencies, s_parameters, plot_type, Path(plot_path))
        print(f"{plot_type.capitalize()} plot saved: {plot_path}")
        saved.append(plot_path)
    return saved
