"""
Latency report assembly: one report per event type plus a combined one.

Steps for a single batch:
  1. Statistics snapshot of the latencies.
  2. Histogram over the configured interval points.
  3. Percentiles for the configured keys (unattainable keys dropped).
  4. Z-score outliers above the configured threshold.
  5. Time-series latency density and its heat-map colors.

Batch: a DataFrame with latency, timestamp and event-type columns is split
by event type; every group gets a report, and an "All events combined"
report covers every row. summary_table() lists the combined report first,
then the event types from slowest to fastest median.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from latencyviz.binning.histogram import Histogram
from latencyviz.errors import InvalidInputError
from latencyviz.report.latency_density import TimeSeriesLatencyDensity
from latencyviz.report.report_config import ReportConfig
from latencyviz.stats.latency_stats import LatencyStatistics, Outliers
from latencyviz.utils.logging import get_logger

logger = get_logger(__name__)

ALL_EVENTS_LABEL = "All events combined"

SUMMARY_TABLE_COLUMNS = [
    "event_type", "count", "mean", "median", "min", "max", "std_deviation",
    "variance", "skewness", "kurtosis", "excess_kurtosis",
]


@dataclass(frozen=True, eq=False)
class LatencyReport:
    """Everything the rendering side needs for one event type."""
    event_type: str
    latency_unit: str
    statistics: LatencyStatistics
    histogram: Histogram
    percentiles: list[tuple[float, float]]
    outliers: Outliers
    density: TimeSeriesLatencyDensity
    heat_map_colors: np.ndarray

    def summary_row(self) -> dict[str, object]:
        return {"event_type": self.event_type, **self.statistics.summary()}


def build_latency_report(
    latencies: Sequence[float],
    timestamps: Sequence[int],
    config: Optional[ReportConfig] = None,
    event_type: str = ALL_EVENTS_LABEL,
) -> LatencyReport:
    """Build a LatencyReport for one batch of (latency, timestamp) samples.

    Raises:
        InvalidInputError: If the batch is empty or the sequences differ
            in length.
    """
    if config is None:
        config = ReportConfig()
    if len(latencies) != len(timestamps):
        raise InvalidInputError("Number of latencies must be same as number of timestamps")

    logger.info("building latency report: event_type=%r samples=%d", event_type, len(latencies))

    statistics = LatencyStatistics.compute(latencies, timestamps)
    histogram = Histogram(
        statistics.samples.tolist(),
        config.histogram_interval_points,
        config.drop_empty_intervals,
    )
    density = TimeSeriesLatencyDensity.create(
        statistics.samples.tolist(),
        statistics.timestamps.tolist(),
        time_zone=config.output_time_zone,
        min_latency=config.heat_map_min_latency,
        max_latency=config.heat_map_max_latency,
        max_interval_points=config.heat_map_max_interval_points,
    )
    return LatencyReport(
        event_type=event_type,
        latency_unit=config.latency_unit,
        statistics=statistics,
        histogram=histogram,
        percentiles=statistics.percentiles(config.percentile_keys),
        outliers=statistics.outliers(config.outlier_threshold),
        density=density,
        heat_map_colors=density.heat_map_colors(config.color_scheme),
    )


def latency_report_batch(
    df: pd.DataFrame,
    config: Optional[ReportConfig] = None,
    *,
    latency_col: str = "latency",
    timestamp_col: str = "timestamp",
    event_type_col: str = "event_type",
    include_combined: bool = True,
) -> list[LatencyReport]:
    """One report per distinct event type, plus the combined report.

    Args:
        df: Samples, one row each. Timestamps are epoch milliseconds.
        config: Report settings; defaults when None.
        latency_col: Column holding latencies.
        timestamp_col: Column holding timestamps.
        event_type_col: Column holding the event type.
        include_combined: Append a report over all rows.

    Returns:
        Reports in sorted event-type order, combined report last.
    """
    for col in (latency_col, timestamp_col, event_type_col):
        if col not in df.columns:
            raise InvalidInputError(f"df must contain required column {col!r}")
    if df.empty:
        raise InvalidInputError("cannot build reports from an empty dataframe")

    reports = []
    for event_type, sub in df.groupby(df[event_type_col].astype(str), sort=True):
        reports.append(
            build_latency_report(
                sub[latency_col].astype(float).tolist(),
                sub[timestamp_col].astype("int64").tolist(),
                config,
                event_type=str(event_type),
            )
        )
    if include_combined:
        reports.append(
            build_latency_report(
                df[latency_col].astype(float).tolist(),
                df[timestamp_col].astype("int64").tolist(),
                config,
                event_type=ALL_EVENTS_LABEL,
            )
        )
    return reports


def summary_table(reports: Sequence[LatencyReport]) -> pd.DataFrame:
    """Statistics of each report as one row.

    The combined report comes first, then the event types by descending
    median (slowest first). Equal medians keep their input order.
    """
    combined = [r.summary_row() for r in reports if r.event_type == ALL_EVENTS_LABEL]
    per_event = [r.summary_row() for r in reports if r.event_type != ALL_EVENTS_LABEL]
    per_event.sort(key=lambda row: row["median"], reverse=True)
    return pd.DataFrame(combined + per_event, columns=SUMMARY_TABLE_COLUMNS)
