"""Example: the default YUV plane at two luma levels."""

import numpy as np

import colorplane as cp

rng = np.random.default_rng(0)
x = rng.normal(size=500)
y = rng.normal(size=500)

for luma in (0.35, 0.6):
    cp.scatter(
        x,
        y,
        color=x,
        color2=y,
        projection_args={"Y": luma},
        title="YUV plane, Y = {}".format(luma),
        color_label="x",
        color2_label="y",
        filename="yuv-{}.svg".format(int(luma * 100)),
    )
