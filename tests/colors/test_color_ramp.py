"""Tests for value-to-color quantization."""

from __future__ import annotations

import numpy as np
import pytest

from latencyviz.colors.color_ramp import color_map, color_matrix, quantize
from latencyviz.colors.colorscales import ColorRampScheme
from latencyviz.errors import InvalidInputError

PALETTE = ["a", "b"]


def test_quantize_equal_width_bins():
    """Range 0..4 over 2 colors -> bin size 2; the max goes to the last color."""
    assert quantize([0, 1, 2, 3, 4], PALETTE, "bg") == ["bg", "a", "b", "b", "b"]


def test_quantize_zero_always_background():
    palette = ["c1", "c2", "c3", "c4"]
    assert quantize([-2, 0, 2], palette, "bg") == ["c1", "bg", "c4"]
    for k in range(1, 5):
        colors = quantize([0, 3, 0, 10, 7], palette[:k], "bg")
        assert colors[0] == "bg"
        assert colors[2] == "bg"


def test_quantize_constant_values_use_last_color():
    assert quantize([5, 5, 5], PALETTE, "bg") == ["b", "b", "b"]


def test_quantize_all_zero_is_background():
    assert quantize([0, 0], PALETTE, "bg") == ["bg", "bg"]


def test_quantize_single_color_palette():
    assert quantize([1, 2, 3], ["only"], "bg") == ["only", "only", "only"]


def test_quantize_many_values_stay_in_palette():
    palette = [f"c{i}" for i in range(8)]
    colors = quantize(np.linspace(0.1, 1000.0, 997).tolist(), palette, "bg")
    assert set(colors) <= set(palette)
    assert colors[0] == "c0"
    assert colors[-1] == "c7"


def test_quantize_empty_values():
    assert quantize([], PALETTE, "bg") == []


def test_quantize_rejects_empty_palette():
    with pytest.raises(InvalidInputError):
        quantize([1, 2], [], "bg")


def test_color_map_uses_scheme():
    scheme = ColorRampScheme.BLUE
    colors = color_map([0, 0.5, 8], scheme)
    assert colors[0] == scheme.background_color
    assert colors[1] == scheme.foreground_colors[0]
    assert colors[2] == scheme.foreground_colors[-1]


def test_color_matrix_keeps_shape():
    colors = color_matrix([[0, 1], [2, 4]])
    assert colors.shape == (2, 2)
    assert colors[0, 0] == ColorRampScheme.DEFAULT.background_color
    assert colors[1, 1] == ColorRampScheme.DEFAULT.foreground_colors[-1]


def test_color_matrix_rejects_1d():
    with pytest.raises(InvalidInputError):
        color_matrix([1, 2, 3])
