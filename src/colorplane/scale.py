"""The color plane scale: normalize two variables and color each row."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from .colors import to_channels, to_hex, to_rgb_array
from .projections import LengthMismatchError, ProjectionLike, resolve_projection
from .theme import COLORS, LAYOUT

logger = logging.getLogger(__name__)

Limits = tuple[float, float]


def _check_limits(limits: ArrayLike | None) -> Limits | None:
    if limits is None:
        return None
    low, high = (float(v) for v in limits)
    if not (np.isfinite(low) and np.isfinite(high)) or low > high:
        raise ValueError("limits must be a finite (low, high) pair, got {!r}".format(limits))
    return low, high


def train_limits(values: ArrayLike) -> Limits | None:
    """Range of the finite entries of ``values``, or None if there are none."""
    values = np.asarray(values, dtype=float)
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return None
    return float(finite.min()), float(finite.max())


def rescale(values: ArrayLike, limits: Limits | None) -> np.ndarray:
    """Map ``values`` from ``limits`` onto [0, 1].

    Missing values and values outside the limits come back as NaN. A
    zero-width range puts every remaining value at 0.5.
    """
    values = np.atleast_1d(np.asarray(values, dtype=float)).ravel()
    if limits is None:
        return np.full(values.shape, np.nan)

    low, high = limits
    with np.errstate(invalid="ignore"):
        inside = (values >= low) & (values <= high)
    if high == low:
        unit = np.full(values.shape, 0.5)
    else:
        unit = (values - low) / (high - low)
    # guard against 1.0000000002 from the division
    unit = np.clip(unit, 0.0, 1.0)
    return np.where(inside, unit, np.nan)


class ColorPlaneScale:
    """Maps pairs of raw values onto one color each.

    Args:
        color_projection: a registry name (``"YUV"``, ``"red_blue"``,
            ``"interpolate"``) or a callable with the projection shape.
        limits: ``(low, high)`` of the horizontal variable; trained from the
            data on each call to :meth:`map` when omitted.
        limits2: same for the vertical variable.
        na_color: color for rows that are missing or outside the limits.
        **config: forwarded verbatim to the projection on every call.
    """

    def __init__(
        self,
        color_projection: ProjectionLike = "YUV",
        limits: ArrayLike | None = None,
        limits2: ArrayLike | None = None,
        na_color: str = COLORS["na"],
        **config: Any,
    ):
        self.projection = resolve_projection(color_projection)
        self.config = dict(config)
        self.limits = _check_limits(limits)
        self.limits2 = _check_limits(limits2)
        self.na_color = to_hex(to_channels(na_color))[0]
        # ranges used by the most recent map(), for the legend
        self.range: Limits | None = self.limits
        self.range2: Limits | None = self.limits2
        logger.debug(
            "resolved %s projection %r with options %s",
            self.projection.kind,
            self.projection.name,
            sorted(self.config),
        )

    def __repr__(self) -> str:
        return "ColorPlaneScale(color_projection={!r}, limits={!r}, limits2={!r})".format(
            self.projection.name, self.limits, self.limits2
        )

    def map(self, x: ArrayLike, y: ArrayLike) -> list[str]:
        """One color per row of ``(x, y)``, in input order."""
        x = np.atleast_1d(np.asarray(x, dtype=float)).ravel()
        y = np.atleast_1d(np.asarray(y, dtype=float)).ravel()
        if len(x) != len(y):
            raise LengthMismatchError(
                "length mismatch: x has {} values, y has {}".format(len(x), len(y))
            )

        self.range = self.limits or train_limits(x)
        self.range2 = self.limits2 or train_limits(y)
        ux = rescale(x, self.range)
        uy = rescale(y, self.range2)
        ok = np.isfinite(ux) & np.isfinite(uy)

        colors = [self.na_color] * len(x)
        if ok.any():
            projected = self.projection(ux[ok], uy[ok], **self.config)
            for i, color in zip(np.flatnonzero(ok), projected):
                colors[i] = color
        logger.debug(
            "mapped %d rows with %r, %d missing or out of limits",
            int(ok.sum()),
            self.projection.name,
            int((~ok).sum()),
        )
        return colors

    def __call__(self, x: ArrayLike, y: ArrayLike) -> list[str]:
        return self.map(x, y)

    def grid(
        self, resolution: int = LAYOUT["legend_resolution"]
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Sample the projection over the unit square.

        Returns ``(xs, ys, rgb)`` where ``rgb[i, j]`` is the 0-1 color at
        ``(xs[j], ys[i])``, ready for ``imshow(origin="lower")``.
        """
        if resolution < 2:
            raise ValueError("resolution must be at least 2, got {}".format(resolution))
        xs = np.linspace(0.0, 1.0, resolution)
        ys = np.linspace(0.0, 1.0, resolution)
        xx, yy = np.meshgrid(xs, ys)
        colors = self.projection(xx.ravel(), yy.ravel(), **self.config)
        rgb = to_rgb_array(colors).reshape(resolution, resolution, 3)
        return xs, ys, rgb
