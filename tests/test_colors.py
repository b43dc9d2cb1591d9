from __future__ import annotations

import numpy as np
import pytest

from colorplane.colors import blend, lerp, quantize, to_channels, to_hex, to_rgb_array


def test_to_channels_is_case_insensitive() -> None:
    assert np.allclose(to_channels("#ff8000"), to_channels("#FF8000"))
    assert np.allclose(to_channels("#FF8000"), [255, 128, 0])


def test_lerp_endpoints_and_midpoint() -> None:
    out = lerp("#FFFFFF", "#FF0000", [0.0, 0.5, 1.0])
    assert out.shape == (3, 3)
    assert np.allclose(out[0], [255, 255, 255])
    assert np.allclose(out[1], [255, 127.5, 127.5])
    assert np.allclose(out[2], [255, 0, 0])


def test_blend_is_channel_mean() -> None:
    out = blend(np.array([[255.0, 0, 0]]), np.array([[0.0, 0, 255]]))
    assert np.allclose(out, [[127.5, 0, 127.5]])


def test_quantize_rounds_half_up_and_clamps() -> None:
    out = quantize([[127.5, 0.49, 254.5], [-3.0, 300.0, 12.5]])
    assert out.tolist() == [[128, 0, 255], [0, 255, 13]]
    assert out.dtype.kind == "i"


def test_quantize_rejects_nan() -> None:
    with pytest.raises(ValueError, match="finite"):
        quantize([[np.nan, 0, 0]])


def test_to_hex_format() -> None:
    assert to_hex([[255, 128, 0], [0, 0, 0]]) == ["#FF8000", "#000000"]
    assert to_hex(np.empty((0, 3))) == []


def test_to_rgb_array_inverts_to_hex() -> None:
    rgb = to_rgb_array(["#FFFFFF", "#000000"])
    assert np.allclose(rgb, [[1, 1, 1], [0, 0, 0]])
    assert to_rgb_array([]).shape == (0, 3)
