"""Translate theme.py constants into matplotlib rcParams."""

import matplotlib.pyplot as plt

from .theme import FONTS, LAYOUT, STYLE_COLORS

# matplotlib rcParams dict — applied before every figure
STYLE: dict = {
    # Figure
    "figure.figsize": LAYOUT["figsize"],
    "figure.dpi": LAYOUT["dpi"],
    "figure.facecolor": STYLE_COLORS["bg"],
    "savefig.dpi": LAYOUT["dpi"],
    "savefig.facecolor": STYLE_COLORS["bg"],
    "savefig.bbox": "tight",
    "savefig.pad_inches": 0.3,

    # Axes
    "axes.facecolor": STYLE_COLORS["bg"],
    "axes.edgecolor": STYLE_COLORS["border"],
    "axes.linewidth": LAYOUT["spine_width"],
    "axes.titlesize": LAYOUT["title_size"],
    "axes.titleweight": "bold",
    "axes.titlecolor": STYLE_COLORS["text"],
    "axes.labelsize": LAYOUT["label_size"],
    "axes.labelcolor": STYLE_COLORS["text"],
    "axes.spines.top": False,
    "axes.spines.right": False,
    # No grid: it would draw over the plane colors
    "axes.grid": False,

    # Ticks
    "xtick.labelsize": LAYOUT["tick_size"],
    "ytick.labelsize": LAYOUT["tick_size"],
    "xtick.color": STYLE_COLORS["muted"],
    "ytick.color": STYLE_COLORS["muted"],
    "xtick.labelcolor": STYLE_COLORS["text"],
    "ytick.labelcolor": STYLE_COLORS["text"],

    # Markers
    "scatter.edgecolors": "none",
    "lines.markersize": 6,

    # Font
    "font.family": "sans-serif",
    "font.sans-serif": FONTS["sans"],
    "font.size": LAYOUT["tick_size"],
}


def apply() -> None:
    """Apply the colorplane style to matplotlib globally."""
    plt.rcParams.update(STYLE)
