from __future__ import annotations

import logging

import numpy as np
import pytest

from colorplane.projections import (
    LengthMismatchError,
    MissingParameterError,
    UnknownProjectionError,
)
from colorplane.scale import ColorPlaneScale, rescale, train_limits

NA = "#7F7F7F"


def test_rescale_basic() -> None:
    out = rescale([0, 5, 10], (0, 10))
    assert np.allclose(out, [0, 0.5, 1])


def test_rescale_censors_missing_and_out_of_limits() -> None:
    out = rescale([np.nan, -1, 0.5, 2], (0, 1))
    assert np.isnan(out[[0, 1, 3]]).all()
    assert out[2] == 0.5


def test_rescale_zero_width_range() -> None:
    out = rescale([3, 3, np.nan], (3, 3))
    assert out[:2].tolist() == [0.5, 0.5]
    assert np.isnan(out[2])


def test_train_limits() -> None:
    assert train_limits([3, np.nan, -1, 7]) == (-1.0, 7.0)
    assert train_limits([np.nan]) is None


def test_unknown_projection_fails_at_construction() -> None:
    with pytest.raises(UnknownProjectionError):
        ColorPlaneScale("rainbow")


def test_bad_limits() -> None:
    with pytest.raises(ValueError, match="limits"):
        ColorPlaneScale(limits=(1, 0))


def test_map_trains_limits_and_fills_missing() -> None:
    scale = ColorPlaneScale("red_blue")
    out = scale.map([0, 5, 10, np.nan], [0, 5, 10, 1])
    assert out == ["#FFFFFF", "#BF80BF", "#800080", NA]
    assert scale.range == (0.0, 10.0)
    assert scale.range2 == (0.0, 10.0)


def test_map_with_fixed_limits_censors() -> None:
    scale = ColorPlaneScale("red_blue", limits=(0, 1), limits2=(0, 1))
    assert scale.map([0.5, 2.0], [0.5, 0.5]) == ["#BF80BF", NA]


def test_map_constant_data() -> None:
    scale = ColorPlaneScale("red_blue")
    assert scale.map([3, 3], [7, 7]) == ["#BF80BF", "#BF80BF"]


def test_map_all_missing() -> None:
    scale = ColorPlaneScale("red_blue", na_color="#abcdef")
    assert scale.map([np.nan, np.nan], [1, 2]) == ["#ABCDEF", "#ABCDEF"]


def test_map_empty() -> None:
    assert ColorPlaneScale().map([], []) == []


def test_map_length_mismatch() -> None:
    with pytest.raises(LengthMismatchError):
        ColorPlaneScale().map([1, 2, 3], [1, 2])


def test_config_is_forwarded_to_projection() -> None:
    scale = ColorPlaneScale(
        "interpolate",
        zero_color="#000000",
        horizontal_color="#FF0000",
        vertical_color="#0000FF",
    )
    assert scale([0, 1], [0, 1]) == ["#000000", "#800080"]


def test_missing_config_fails_on_map_not_construction() -> None:
    scale = ColorPlaneScale("interpolate", zero_color="#000000")
    with pytest.raises(MissingParameterError, match="horizontal_color"):
        scale.map([0, 1], [0, 1])


def test_custom_projection_gets_unit_values_and_options() -> None:
    seen = {}

    def spy(x, y, tint):
        seen["x"] = np.asarray(x)
        seen["y"] = np.asarray(y)
        seen["tint"] = tint
        return [tint] * len(x)

    scale = ColorPlaneScale(spy, tint="#123456")
    out = scale.map([10, 20, np.nan, 30], [1, 2, 3, 4])
    assert out == ["#123456", "#123456", NA, "#123456"]
    assert np.allclose(seen["x"], [0, 0.5, 1])
    assert np.allclose(seen["y"], [0, 1 / 3, 1])
    assert seen["tint"] == "#123456"


def test_custom_projection_wrong_length() -> None:
    scale = ColorPlaneScale(lambda x, y: ["#000000"])
    with pytest.raises(LengthMismatchError):
        scale.map([1, 2], [1, 2])


def test_grid() -> None:
    xs, ys, rgb = ColorPlaneScale("red_blue").grid(5)
    assert xs.shape == ys.shape == (5,)
    assert rgb.shape == (5, 5, 3)
    assert ((rgb >= 0) & (rgb <= 1)).all()
    assert np.allclose(rgb[0, 0], [1, 1, 1])
    # row is y, column is x
    assert np.allclose(rgb[-1, 0], [128 / 255, 128 / 255, 1])
    assert np.allclose(rgb[0, -1], [1, 128 / 255, 128 / 255])


def test_grid_resolution() -> None:
    with pytest.raises(ValueError):
        ColorPlaneScale().grid(1)


def test_map_logs(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="colorplane.scale"):
        ColorPlaneScale("red_blue").map([0, np.nan], [0, 1])
    assert "resolved named projection 'red_blue'" in caplog.text
    assert "mapped 1 rows" in caplog.text
