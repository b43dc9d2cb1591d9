"""Example: two correlated measurements on the red/blue plane."""

import numpy as np

import colorplane as cp

rng = np.random.default_rng(42)
height = rng.normal(170, 10, 300)
weight = 0.9 * (height - 170) + rng.normal(70, 8, 300)

cp.scatter(
    height,
    weight,
    color=height,
    color2=weight,
    projection="red_blue",
    title="Height and Weight",
    xlabel="Height (cm)",
    ylabel="Weight (kg)",
    color_label="Height",
    color2_label="Weight",
    filename="red-blue-scatter.svg",
)
