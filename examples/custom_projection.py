"""Example: a hue/saturation plane from a user-supplied projection."""

import matplotlib.colors as mcolors
import numpy as np

import colorplane as cp
from colorplane.colors import to_hex


def hue_projection(x, y, v=0.9):
    # hue follows the angle from the origin, saturation the distance to it
    hue = cp.guarded_hue_angle(x, y) / (np.pi / 2) * (2 / 3)
    sat = np.clip(np.hypot(x, y) / np.sqrt(2), 0, 1)
    hsv = np.column_stack([hue, sat, np.full(len(hue), v)])
    return to_hex(mcolors.hsv_to_rgb(hsv) * 255)


rng = np.random.default_rng(7)
a = rng.uniform(0, 10, 400)
b = rng.uniform(0, 10, 400)

fig, ax, scale = cp.scatter(
    a,
    b,
    color=a,
    color2=b,
    projection=hue_projection,
    projection_args={"v": 0.85},
    show_legend=False,
    title="Custom Hue Plane",
)
cp.legend(ax, scale, xlabel="a", ylabel="b", loc="right")
cp.save(fig, "custom-projection.svg")
