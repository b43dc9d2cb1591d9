"""Color projections: pure maps from two [0, 1] vectors to ``#RRGGBB`` strings.

Every projection has the shape ``projection(x, y, **config) -> list[str]``.
The output is index-aligned with the inputs and has the same length. Inputs
are already rescaled and free of missing values; see ``scale.py``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

import numpy as np
from numpy.typing import ArrayLike

from .colors import as_unit, blend, lerp, to_hex
from .theme import COLORS, YUV


class ColorPlaneError(ValueError):
    """Base class for errors raised by colorplane."""


class UnknownProjectionError(ColorPlaneError):
    """A projection name that is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            "unrecognized projection {!r}; expected one of {} or a callable".format(
                name, ", ".join(repr(n) for n in PROJECTIONS)
            )
        )


class MissingParameterError(ColorPlaneError):
    """A projection was invoked without a configuration value it requires."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("missing required parameter: {}".format(name))


class LengthMismatchError(ColorPlaneError):
    """Input vectors, or input and output, differ in length."""


def _pair(x: ArrayLike, y: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    x = as_unit(x)
    y = as_unit(y)
    if len(x) != len(y):
        raise LengthMismatchError(
            "length mismatch: x has {} values, y has {}".format(len(x), len(y))
        )
    return x, y


def yuv_projection(x: ArrayLike, y: ArrayLike, Y: float = YUV["Y"]) -> list[str]:
    """Default projection: x and y are the U and V chroma axes at constant luma.

    Args:
        x: horizontal positions in [0, 1], mapped to U in [-0.436, 0.436].
        y: vertical positions in [0, 1], mapped to V in [-0.615, 0.615].
        Y: luma of the whole plane, in [0, 1].
    """
    x, y = _pair(x, y)
    u = x * 2 * YUV["u_max"] - YUV["u_max"]
    v = y * 2 * YUV["v_max"] - YUV["v_max"]

    # BT.601 YUV -> RGB; corners of the plane fall outside sRGB and are clipped
    r = Y + 1.13983 * v
    g = Y - 0.39465 * u - 0.58060 * v
    b = Y + 2.03211 * u
    rgb = np.clip(np.column_stack([r, g, b]), 0.0, 1.0)
    return to_hex(rgb * 255.0)


def interpolate_projection(
    x: ArrayLike,
    y: ArrayLike,
    zero_color: str | None = None,
    horizontal_color: str | None = None,
    vertical_color: str | None = None,
) -> list[str]:
    """Blend a horizontal and a vertical gradient that share a zero color.

    ``x`` moves from ``zero_color`` toward ``horizontal_color``, ``y`` from
    ``zero_color`` toward ``vertical_color``; the two are averaged per channel.
    All three colors are required.
    """
    required = {
        "zero_color": zero_color,
        "horizontal_color": horizontal_color,
        "vertical_color": vertical_color,
    }
    for name, value in required.items():
        if value is None:
            raise MissingParameterError(name)

    x, y = _pair(x, y)
    h = lerp(zero_color, horizontal_color, x)
    v = lerp(zero_color, vertical_color, y)
    return to_hex(blend(h, v))


def red_blue_projection(x: ArrayLike, y: ArrayLike) -> list[str]:
    """White at the origin, x toward red, y toward blue."""
    return interpolate_projection(
        x,
        y,
        zero_color=COLORS["white"],
        horizontal_color=COLORS["red"],
        vertical_color=COLORS["blue"],
    )


def guarded_hue_angle(x: ArrayLike, y: ArrayLike) -> np.ndarray:
    """``atan(y / x)`` in radians, defined as 0 wherever ``x == 0``.

    Custom projections that derive a hue from the angle of a point use this
    so that the left edge of the plane does not produce NaN.
    """
    x, y = _pair(x, y)
    ratio = np.divide(y, x, out=np.zeros_like(y), where=x != 0)
    return np.arctan(ratio)


# Built-in registry, resolvable by name
PROJECTIONS: dict[str, Callable[..., list[str]]] = {
    "YUV": yuv_projection,
    "red_blue": red_blue_projection,
    "interpolate": interpolate_projection,
}


@dataclass(frozen=True)
class Projection:
    """A projection bound to a concrete function.

    ``kind`` is ``"named"`` for registry entries and ``"custom"`` for
    callables supplied directly.
    """

    kind: str
    name: str
    func: Callable[..., Any]

    def __call__(self, x: ArrayLike, y: ArrayLike, **config: Any) -> list[str]:
        x, y = _pair(x, y)
        colors = list(self.func(x, y, **config))
        if len(colors) != len(x):
            raise LengthMismatchError(
                "length mismatch: projection {!r} returned {} colors for {} values".format(
                    self.name, len(colors), len(x)
                )
            )
        return colors


ProjectionLike = Union[str, Callable[..., Any], Projection]


def resolve_projection(projection: ProjectionLike) -> Projection:
    """Bind a registry name or a callable to a :class:`Projection`.

    Unknown names fail here rather than on first use. Callables are bound
    as-is; a bad signature only shows up when the projection is invoked.
    """
    if isinstance(projection, Projection):
        return projection
    if isinstance(projection, str):
        try:
            func = PROJECTIONS[projection]
        except KeyError:
            raise UnknownProjectionError(projection) from None
        return Projection(kind="named", name=projection, func=func)
    if callable(projection):
        name = getattr(projection, "__name__", repr(projection))
        return Projection(kind="custom", name=name, func=projection)
    raise TypeError(
        "color_projection must be a projection name or a callable, got {}".format(
            type(projection).__name__
        )
    )
