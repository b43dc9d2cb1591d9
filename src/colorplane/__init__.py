"""colorplane — map two continuous variables onto one 2D color scale."""

from .charts import figure, legend, save, scatter, tile
from .projections import (
    PROJECTIONS,
    ColorPlaneError,
    LengthMismatchError,
    MissingParameterError,
    Projection,
    UnknownProjectionError,
    guarded_hue_angle,
    interpolate_projection,
    red_blue_projection,
    resolve_projection,
    yuv_projection,
)
from .scale import ColorPlaneScale, rescale
from .theme import COLORS, LAYOUT, YUV

__all__ = [
    "figure",
    "legend",
    "save",
    "scatter",
    "tile",
    "PROJECTIONS",
    "ColorPlaneError",
    "LengthMismatchError",
    "MissingParameterError",
    "Projection",
    "UnknownProjectionError",
    "guarded_hue_angle",
    "interpolate_projection",
    "red_blue_projection",
    "resolve_projection",
    "yuv_projection",
    "ColorPlaneScale",
    "rescale",
    "COLORS",
    "LAYOUT",
    "YUV",
]

__version__ = "0.1.0"
