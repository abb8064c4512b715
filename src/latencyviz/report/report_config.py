"""Report configuration.

ReportConfig holds the scalar settings for building a latency report:
histogram boundaries, percentile keys, outlier threshold, heat-map sizing,
color scheme and units. It serializes to and from a plain dict.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Optional

from latencyviz.colors.colorscales import ColorRampScheme
from latencyviz.errors import InvalidInputError

# Max heat-map height (px) / default height of a single heat-map area (px).
MAX_HEAT_MAP_HEIGHT = 400
DEFAULT_HEAT_MAP_SINGLE_AREA_HEIGHT = 10
DEFAULT_MAX_INTERVAL_POINTS_FOR_LATENCY_DENSITY = MAX_HEAT_MAP_HEIGHT // DEFAULT_HEAT_MAP_SINGLE_AREA_HEIGHT

DEFAULT_HISTOGRAM_INTERVAL_POINTS = [0.0, 10.0, 20.0, 50.0, 100.0, 200.0, 500.0, 1000.0]
DEFAULT_PERCENTILE_KEYS = [50.0, 75.0, 90.0, 95.0, 99.0, 99.9]


@dataclass
class ReportConfig:
    """Settings for one latency report."""
    histogram_interval_points: list[float] = field(
        default_factory=lambda: list(DEFAULT_HISTOGRAM_INTERVAL_POINTS)
    )
    percentile_keys: list[float] = field(default_factory=lambda: list(DEFAULT_PERCENTILE_KEYS))
    outlier_threshold: float = 3.0
    heat_map_max_interval_points: int = DEFAULT_MAX_INTERVAL_POINTS_FOR_LATENCY_DENSITY
    heat_map_min_latency: Optional[float] = None   # optional latency window for heat-map rows
    heat_map_max_latency: Optional[float] = None
    color_scheme: ColorRampScheme = ColorRampScheme.DEFAULT
    latency_unit: str = "ms"
    output_time_zone: str = "UTC"
    drop_empty_intervals: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict (scheme by name)."""
        return {
            "histogram_interval_points": list(self.histogram_interval_points),
            "percentile_keys": list(self.percentile_keys),
            "outlier_threshold": self.outlier_threshold,
            "heat_map_max_interval_points": self.heat_map_max_interval_points,
            "heat_map_min_latency": self.heat_map_min_latency,
            "heat_map_max_latency": self.heat_map_max_latency,
            "color_scheme": self.color_scheme.name,
            "latency_unit": self.latency_unit,
            "output_time_zone": self.output_time_zone,
            "drop_empty_intervals": self.drop_empty_intervals,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReportConfig":
        """Deserialize from a dict; missing keys take their defaults.

        Raises:
            InvalidInputError: On unknown keys, an unknown color scheme, or
                values that cannot be converted.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidInputError(f"Unknown ReportConfig keys: {unknown}")

        defaults = cls()
        try:
            min_latency = data.get("heat_map_min_latency")
            max_latency = data.get("heat_map_max_latency")
            return cls(
                histogram_interval_points=[
                    float(v) for v in data.get("histogram_interval_points", defaults.histogram_interval_points)
                ],
                percentile_keys=[float(v) for v in data.get("percentile_keys", defaults.percentile_keys)],
                outlier_threshold=float(data.get("outlier_threshold", defaults.outlier_threshold)),
                heat_map_max_interval_points=int(
                    data.get("heat_map_max_interval_points", defaults.heat_map_max_interval_points)
                ),
                heat_map_min_latency=None if min_latency is None else float(min_latency),
                heat_map_max_latency=None if max_latency is None else float(max_latency),
                color_scheme=ColorRampScheme.from_name(data.get("color_scheme", defaults.color_scheme.name)),
                latency_unit=str(data.get("latency_unit", defaults.latency_unit)),
                output_time_zone=str(data.get("output_time_zone", defaults.output_time_zone)),
                drop_empty_intervals=bool(data.get("drop_empty_intervals", defaults.drop_empty_intervals)),
            )
        except InvalidInputError:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Invalid ReportConfig value: {e}") from e
