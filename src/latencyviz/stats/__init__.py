"""Latency statistics (moments, percentiles, outliers) and volume counts."""

from latencyviz.stats.latency_stats import (
    LatencyStatistics,
    Outliers,
    median,
    percentile,
    percentiles,
    z_scores,
)
from latencyviz.stats.volume_stats import (
    DailyVolume,
    daily_volume,
    hourly_volume,
    hourly_volume_percentages,
)

__all__ = [
    "DailyVolume",
    "LatencyStatistics",
    "Outliers",
    "daily_volume",
    "hourly_volume",
    "hourly_volume_percentages",
    "median",
    "percentile",
    "percentiles",
    "z_scores",
]
