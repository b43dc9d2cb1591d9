"""Example: a gridded surface where two fields share one fill."""

import numpy as np

import colorplane as cp

xs, ys = np.meshgrid(np.linspace(-3, 3, 25), np.linspace(-3, 3, 25))
xs = xs.ravel()
ys = ys.ravel()
temperature = np.exp(-(xs**2 + ys**2) / 4)
humidity = (np.sin(xs) + 1) / 2

cp.tile(
    xs,
    ys,
    color=temperature,
    color2=humidity,
    projection="interpolate",
    projection_args={
        "zero_color": "#1B1B1B",
        "horizontal_color": "#E8A33D",
        "vertical_color": "#3DA5E8",
    },
    title="Temperature and Humidity",
    color_label="Temperature",
    color2_label="Humidity",
    filename="interpolate-tiles.svg",
)
