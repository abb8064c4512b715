"""Quantize numeric values onto a discrete color palette.

Values are split into K equal-width bins over [min, max] of the input, one
per palette color. The maximum lands in the last bin. A value of exactly 0
always gets the background color, wherever 0 falls in the range, so that
empty heat-map cells render as background.
"""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np

from latencyviz.colors.colorscales import ColorRampScheme
from latencyviz.errors import InternalInvariantError, InvalidInputError


def quantize(
    values: Sequence[float],
    palette: Sequence[str],
    background_color: str,
) -> list[str]:
    """One color per value.

    Args:
        values: Numeric values.
        palette: K >= 1 colors ordered from low to high.
        background_color: Color used for values equal to 0.

    Returns:
        Colors aligned with values. Empty input gives an empty list.
    """
    k = len(palette)
    if k == 0:
        raise InvalidInputError("palette must contain at least one color")
    vals = [float(v) for v in values]
    if not vals:
        return []

    min_val = min(vals)
    max_val = max(vals)
    bin_size = (max_val - min_val) / k

    colors: list[str] = []
    for v in vals:
        if v == 0:
            colors.append(background_color)
            continue
        if v == max_val:
            bucket = k - 1
        else:
            # v < max, so the quotient is < k up to float rounding
            bucket = min(math.floor((v - min_val) / bin_size), k - 1)
        if not 0 <= bucket < k:
            raise InternalInvariantError(f"color bucket {bucket} outside [0, {k})")
        colors.append(palette[bucket])
    return colors


def color_map(values: Sequence[float], scheme: ColorRampScheme = ColorRampScheme.DEFAULT) -> list[str]:
    """quantize() with a named scheme's palette and background."""
    return quantize(values, scheme.foreground_colors, scheme.background_color)


def color_matrix(matrix: Any, scheme: ColorRampScheme = ColorRampScheme.DEFAULT) -> np.ndarray:
    """Color every cell of a 2-D matrix, binning over the whole matrix range.

    Returns:
        Object array of color strings with the matrix's shape.
    """
    arr = np.asarray(matrix, dtype=float)
    if arr.ndim != 2:
        raise InvalidInputError(f"expected a 2-D matrix, got shape {arr.shape}")
    flat = color_map(arr.ravel().tolist(), scheme)
    if len(flat) != arr.size:
        raise InternalInvariantError(f"{len(flat)} colors for a matrix of {arr.size} cells")
    out = np.empty(arr.size, dtype=object)
    out[:] = flat
    return out.reshape(arr.shape)
