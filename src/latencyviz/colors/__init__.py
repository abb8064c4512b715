"""Color ramps and value-to-color quantization."""

from latencyviz.colors.color_ramp import color_map, color_matrix, quantize
from latencyviz.colors.colorscales import ColorRamp, ColorRampScheme

__all__ = [
    "ColorRamp",
    "ColorRampScheme",
    "color_map",
    "color_matrix",
    "quantize",
]
