"""
Plotting helpers for sample summaries.

Draws the distribution of one sample with the quantities reported by
:func:`labcalc.stats.describe` marked on it, so a reader can check a
summary table against the raw observations.
"""

from __future__ import annotations

import os
import re
from typing import Iterable

import matplotlib.pyplot as plt
import numpy as np

from .errors import EmptySample
from .stats.descriptive import describe, extract_sample

FIGURE_DPI = 300
FIGSIZE = (7.0, 4.2)
DEFAULT_OUTPUT_DIR = "output"
STRIP_Y = -0.08


def setup_plot_style():
    """High-legibility style for black-and-white report figures."""
    plt.style.use("default")
    plt.rcParams.update(
        {
            "font.family": "serif",
            "font.serif": ["Times New Roman", "Times", "Nimbus Roman", "DejaVu Serif"],
            "mathtext.fontset": "stix",
            "font.size": 12,
            "axes.labelsize": 12,
            "legend.fontsize": 10,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": 0.25,
            "grid.linestyle": "--",
            "legend.frameon": False,
        }
    )


def sanitize_filename(name: str) -> str:
    cleaned = re.sub(r"[^A-Za-z0-9._-]+", "_", str(name)).strip("._")
    return cleaned or "sample"


def plot_sample_distribution(
    values: Iterable[object],
    output_dir: str = DEFAULT_OUTPUT_DIR,
    name: str = "sample",
    unit: str = "",
) -> str:
    """Save a histogram of a sample with its mean and quartiles marked.

    Args:
        values (Iterable): Raw observations; non-finite and non-numeric
            entries are dropped exactly as in the statistics calculator.
        output_dir (str): Directory for the PNG; created if missing.
        name (str): Sample label used in the title and file name.
        unit (str): Optional unit for the x-axis label.

    Returns:
        str: Path of the saved ``<name>_distribution.png``.

    Raises:
        EmptySample: If no usable values remain.
    """
    data = extract_sample(values)
    if len(data) == 0:
        raise EmptySample()
    stats = describe(data)

    setup_plot_style()
    fig, ax = plt.subplots(figsize=FIGSIZE)
    try:
        bins = "auto" if stats.n > 1 and stats.range > 0 else 1
        ax.hist(data, bins=bins, color="0.75", edgecolor="black", linewidth=0.8)
        strip_y = STRIP_Y * ax.get_ylim()[1]
        ax.scatter(
            data,
            np.full(len(data), strip_y),
            marker="|",
            color="black",
            s=60,
            label="Observations",
        )
        ax.set_ylim(bottom=2 * strip_y)

        ax.axvline(stats.mean, color="black", linewidth=2.0, label=f"Mean = {stats.mean:.4g}")
        ax.axvline(stats.p50, color="black", linestyle="--", linewidth=1.4, label=f"Median = {stats.p50:.4g}")
        ax.axvspan(stats.p25, stats.p75, color="0.5", alpha=0.15, label=f"IQR = {stats.iqr:.4g}")

        xlabel = f"{name} ({unit})" if unit else name
        ax.set_xlabel(xlabel)
        ax.set_ylabel("Count")
        ax.set_title(f"{name}: n = {stats.n}")
        ax.grid(True, axis="y")
        ax.legend(loc="best")

        os.makedirs(output_dir, exist_ok=True)
        path = os.path.join(output_dir, f"{sanitize_filename(name)}_distribution.png")
        fig.savefig(path, dpi=FIGURE_DPI)
    finally:
        plt.close(fig)
    return path
