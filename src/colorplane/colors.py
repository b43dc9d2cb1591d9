"""Channel arithmetic shared by the projections.

Colors travel between functions as ``(n, 3)`` float arrays of 0-255 channels
and leave the package as uppercase ``#RRGGBB`` strings.
"""

from __future__ import annotations

import matplotlib.colors as mcolors
import numpy as np
from numpy.typing import ArrayLike


def as_unit(values: ArrayLike) -> np.ndarray:
    """Coerce a sequence of positions on one axis to a 1D float array."""
    return np.atleast_1d(np.asarray(values, dtype=float)).ravel()


def to_channels(color: str) -> np.ndarray:
    """Parse a color (``#RRGGBB`` in any case, or a matplotlib name) to 0-255 floats."""
    return np.asarray(mcolors.to_rgb(color), dtype=float) * 255.0


def lerp(start: str, end: str, t: ArrayLike) -> np.ndarray:
    """Interpolate each channel from ``start`` to ``end`` at positions ``t``.

    Returns an array of shape ``(len(t), 3)``.
    """
    c0 = to_channels(start)
    c1 = to_channels(end)
    t = as_unit(t)[:, None]
    return c0 + t * (c1 - c0)


def blend(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Channel-wise arithmetic mean of two color arrays."""
    return (np.asarray(a, dtype=float) + np.asarray(b, dtype=float)) / 2.0


def quantize(channels: ArrayLike) -> np.ndarray:
    """Round channels half-up to integers and clamp them to [0, 255].

    Raises ValueError on NaN or infinite channels: a projection must resolve
    degenerate math before it gets here.
    """
    channels = np.asarray(channels, dtype=float)
    if not np.isfinite(channels).all():
        raise ValueError("color channels must be finite, got NaN or inf")
    return np.clip(np.floor(channels + 0.5), 0, 255).astype(int)


def to_hex(channels: ArrayLike) -> list[str]:
    """Format an ``(n, 3)`` array of 0-255 channels as ``#RRGGBB`` strings."""
    rgb = quantize(np.atleast_2d(channels))
    return ["#{:02X}{:02X}{:02X}".format(*row) for row in rgb]


def to_rgb_array(colors: list[str]) -> np.ndarray:
    """Inverse of :func:`to_hex`, as 0-1 floats for ``imshow``."""
    if not colors:
        return np.empty((0, 3))
    return np.asarray([mcolors.to_rgb(c) for c in colors], dtype=float)
