"""Convenience chart functions: scatter(), tile(), legend(), figure(), save()."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from numpy.typing import ArrayLike

from .projections import ProjectionLike
from .scale import ColorPlaneScale
from .style import apply
from .theme import COLORS, LAYOUT

# Default output directory (relative to the working directory)
_CHARTS_DIR = Path("charts")

_LEGEND_LOCS = ("right", "upper right", "lower right", "upper left", "lower left")
_LEGEND_PAD = 0.02


def _ensure_style() -> None:
    """Apply the colorplane style if not already applied."""
    apply()


def figure(
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Create a styled (fig, ax) pair. Escape hatch for custom charts."""
    _ensure_style()
    fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Save a figure to ./charts/ (or a custom directory).

    Returns the path to the saved file.
    """
    dest = Path(output_dir) if output_dir else _CHARTS_DIR
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    fig.savefig(path)
    plt.close(fig)
    return path


def _scale(
    projection: ProjectionLike | ColorPlaneScale,
    limits: ArrayLike | None,
    limits2: ArrayLike | None,
    na_color: str,
    projection_args: dict[str, Any] | None,
) -> ColorPlaneScale:
    if isinstance(projection, ColorPlaneScale):
        return projection
    return ColorPlaneScale(
        projection,
        limits=limits,
        limits2=limits2,
        na_color=na_color,
        **(projection_args or {}),
    )


def _extent(limits: tuple[float, float] | None) -> tuple[float, float]:
    if limits is None:
        return 0.0, 1.0
    low, high = limits
    if low == high:
        return low - 0.5, high + 0.5
    return low, high


def _legend_bounds(loc: str, size: float) -> list[float]:
    """Inset rectangle ``[x0, y0, width, height]`` in axes coordinates."""
    if loc not in _LEGEND_LOCS:
        raise ValueError(
            "loc must be one of {}, got {!r}".format(", ".join(_LEGEND_LOCS), loc)
        )
    if loc == "right":
        # outside the axes, vertically centered
        return [1.0 + 3 * _LEGEND_PAD, 0.5 - size / 2, size, size]
    vertical, horizontal = loc.split()
    x0 = _LEGEND_PAD if horizontal == "left" else 1.0 - _LEGEND_PAD - size
    y0 = _LEGEND_PAD if vertical == "lower" else 1.0 - _LEGEND_PAD - size
    return [x0, y0, size, size]


def legend(
    ax: plt.Axes,
    scale: ColorPlaneScale,
    *,
    xlabel: str | None = None,
    ylabel: str | None = None,
    loc: str = "right",
    size: float = LAYOUT["legend_size"],
    resolution: int = LAYOUT["legend_resolution"],
) -> plt.Axes:
    """Draw the color plane of ``scale`` as an inset guide next to ``ax``.

    The guide spans the ranges the scale used on its last ``map`` call, so
    draw the data first. Returns the inset axes.
    """
    guide = ax.inset_axes(_legend_bounds(loc, size))
    _, _, rgb = scale.grid(resolution)
    x_low, x_high = _extent(scale.range)
    y_low, y_high = _extent(scale.range2)
    guide.imshow(
        rgb,
        origin="lower",
        extent=(x_low, x_high, y_low, y_high),
        aspect="auto",
        interpolation="nearest",
    )
    guide.tick_params(labelsize=LAYOUT["tick_size"] - 2, length=2)
    if xlabel:
        guide.set_xlabel(xlabel, fontsize=LAYOUT["tick_size"])
    if ylabel:
        guide.set_ylabel(ylabel, fontsize=LAYOUT["tick_size"])
    return guide


def _finish(
    fig: plt.Figure,
    ax: plt.Axes,
    scale: ColorPlaneScale,
    *,
    title: str | None,
    xlabel: str | None,
    ylabel: str | None,
    show_legend: bool,
    color_label: str | None,
    color2_label: str | None,
    filename: str | None,
    output_dir: str | Path | None,
) -> None:
    if title:
        ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    if show_legend:
        legend(ax, scale, xlabel=color_label, ylabel=color2_label)
    if filename:
        save(fig, filename, output_dir)


def scatter(
    x: ArrayLike,
    y: ArrayLike,
    color: ArrayLike,
    color2: ArrayLike,
    *,
    projection: ProjectionLike | ColorPlaneScale = "YUV",
    limits: ArrayLike | None = None,
    limits2: ArrayLike | None = None,
    na_color: str = COLORS["na"],
    projection_args: dict[str, Any] | None = None,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    color_label: str | None = None,
    color2_label: str | None = None,
    show_legend: bool = True,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes, ColorPlaneScale]:
    """Scatter plot with each point colored by the pair ``(color, color2)``.

    ``projection`` is a registry name, a projection callable, or a ready
    ColorPlaneScale; ``projection_args`` are forwarded to the projection.
    """
    fig, ax = figure(figsize=figsize)
    scale = _scale(projection, limits, limits2, na_color, projection_args)

    kwargs.setdefault("s", LAYOUT["marker_size"])
    ax.scatter(x, y, color=scale.map(color, color2), **kwargs)

    _finish(
        fig, ax, scale,
        title=title, xlabel=xlabel, ylabel=ylabel,
        show_legend=show_legend,
        color_label=color_label, color2_label=color2_label,
        filename=filename, output_dir=output_dir,
    )
    return fig, ax, scale


def _step(values: np.ndarray) -> float:
    """Smallest gap between distinct finite positions, 1.0 for a single one."""
    distinct = np.unique(values[np.isfinite(values)])
    if distinct.size < 2:
        return 1.0
    return float(np.diff(distinct).min())


def tile(
    x: ArrayLike,
    y: ArrayLike,
    color: ArrayLike,
    color2: ArrayLike,
    *,
    projection: ProjectionLike | ColorPlaneScale = "YUV",
    limits: ArrayLike | None = None,
    limits2: ArrayLike | None = None,
    na_color: str = COLORS["na"],
    projection_args: dict[str, Any] | None = None,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    color_label: str | None = None,
    color2_label: str | None = None,
    show_legend: bool = True,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes, ColorPlaneScale]:
    """Heatmap of gridded ``(x, y)`` cells filled by ``(color, color2)``.

    Cells are centered on their positions and sized to the grid step.
    """
    fig, ax = figure(figsize=figsize)
    scale = _scale(projection, limits, limits2, na_color, projection_args)

    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    width = _step(x_arr)
    height = _step(y_arr)
    kwargs.setdefault("linewidth", 0)
    ax.bar(
        x_arr,
        height,
        width=width,
        bottom=y_arr - height / 2,
        color=scale.map(color, color2),
        align="center",
        **kwargs,
    )

    _finish(
        fig, ax, scale,
        title=title, xlabel=xlabel, ylabel=ylabel,
        show_legend=show_legend,
        color_label=color_label, color2_label=color2_label,
        filename=filename, output_dir=output_dir,
    )
    return fig, ax, scale
