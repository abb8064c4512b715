"""Time-series latency density (latency heat map data).

Rows are latency buckets from nice interval points over the observed (or
requested) latency range; columns are time buckets every 5 or 30 minutes
from the start of the first hour. Each cell counts the samples whose
(latency, timestamp) fell into it.

See Brendan Gregg, "Latency Heat Maps".
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

import numpy as np

from latencyviz.binning.axis_intervals import generate_interval_points
from latencyviz.binning.density import DensityMatrix, increment
from latencyviz.binning.time_intervals import MILLIS_PER_HOUR, MILLIS_PER_MINUTE, timestamp_interval_points
from latencyviz.colors.color_ramp import color_matrix
from latencyviz.colors.colorscales import ColorRampScheme
from latencyviz.errors import InvalidInputError
from latencyviz.report.report_config import DEFAULT_MAX_INTERVAL_POINTS_FOR_LATENCY_DENSITY
from latencyviz.utils.logging import get_logger

logger = get_logger(__name__)

# Spans longer than this get 30-minute columns, shorter ones 5-minute columns.
LONG_SPAN_THRESHOLD_MS = 5 * MILLIS_PER_HOUR
LONG_SPAN_STEP_MS = 30 * MILLIS_PER_MINUTE
SHORT_SPAN_STEP_MS = 5 * MILLIS_PER_MINUTE


def latency_interval_points(min_latency: float, max_latency: float, max_interval_points: int) -> list[float]:
    """Row boundaries for the latency axis.

    The range is widened to whole numbers (floor / ceil). The point count is
    the integer span, capped at max_interval_points, or 1 when the widened
    range is empty (e.g. min == max == 3.0).
    """
    adjusted_min = math.floor(min_latency)
    adjusted_max = math.ceil(max_latency)
    if adjusted_min > adjusted_max:
        raise InvalidInputError(f"min = <{adjusted_min}>, max = <{adjusted_max}>")
    if adjusted_min == adjusted_max:
        n_points = 1
    else:
        n_points = min(max_interval_points, int(math.ceil(adjusted_max - adjusted_min)))
    return generate_interval_points(adjusted_min, adjusted_max, n_points)


def _latency_window(
    latencies: np.ndarray,
    min_latency: Optional[float],
    max_latency: Optional[float],
) -> tuple[float, float]:
    """Clamp a requested latency window to the data.

    A window lying entirely outside the data is used as given.
    """
    data_min = float(latencies.min())
    data_max = float(latencies.max())
    if min_latency is None and max_latency is None:
        return data_min, data_max

    lo = data_min if min_latency is None else float(min_latency)
    hi = data_max if max_latency is None else float(max_latency)
    if lo > hi:
        raise InvalidInputError(f"min = <{lo}>, max = <{hi}>")
    if hi < data_min or lo > data_max:
        logger.warning(
            "requested latency window [%s, %s] lies outside data range [%s, %s]",
            lo, hi, data_min, data_max,
        )
        return lo, hi
    return max(data_min, lo), min(data_max, hi)


class TimeSeriesLatencyDensity:
    """Latency x time occurrence counts for one batch of samples.

    Attributes:
        density: DensityMatrix of int counts (rows = latency, cols = time).
        default_time_label_skip_count: 1 for spans over 5 hours, else 2.
        time_zone: IANA zone used for the time boundaries.
    """

    def __init__(
        self,
        latencies: Sequence[float],
        timestamps: Sequence[int],
        time_zone: str,
        latency_points: Iterable[float],
        timestamp_points: Optional[Iterable[int]] = None,
    ) -> None:
        if len(latencies) != len(timestamps):
            raise InvalidInputError("Number of latencies must be same as number of timestamps")
        if len(timestamps) == 0:
            raise InvalidInputError("cannot build a latency density from no samples")

        ts = [int(t) for t in timestamps]
        duration = max(ts) - min(ts)
        long_span = duration > LONG_SPAN_THRESHOLD_MS

        if timestamp_points is None:
            step = LONG_SPAN_STEP_MS if long_span else SHORT_SPAN_STEP_MS
            timestamp_points = timestamp_interval_points(ts, time_zone, step)

        density: DensityMatrix[int] = DensityMatrix(latency_points, timestamp_points, 0)
        density.apply_all([float(v) for v in latencies], ts, increment)

        self.density = density
        self.default_time_label_skip_count = 1 if long_span else 2
        self.time_zone = time_zone

    @classmethod
    def create(
        cls,
        latencies: Sequence[float],
        timestamps: Sequence[int],
        *,
        time_zone: str = "UTC",
        min_latency: Optional[float] = None,
        max_latency: Optional[float] = None,
        max_interval_points: Optional[int] = None,
        timestamp_points: Optional[Iterable[int]] = None,
    ) -> "TimeSeriesLatencyDensity":
        """Build the density with generated latency (and time) boundaries.

        Args:
            latencies: Latency per sample, non-negative.
            timestamps: Epoch-millisecond timestamp per sample.
            time_zone: Zone for hour alignment of time boundaries.
            min_latency: Optional lower end of the latency window.
            max_latency: Optional upper end of the latency window.
            max_interval_points: Cap on latency boundaries (default 40).
            timestamp_points: Explicit time boundaries; generated if None.
        """
        arr = np.asarray(latencies, dtype=float)
        if arr.size == 0:
            raise InvalidInputError("cannot build a latency density from no samples")
        lo, hi = _latency_window(arr, min_latency, max_latency)
        if max_interval_points is None:
            max_interval_points = DEFAULT_MAX_INTERVAL_POINTS_FOR_LATENCY_DENSITY
        points = latency_interval_points(lo, hi, max_interval_points)
        logger.debug("latency density: window=[%s, %s] rows=%d", lo, hi, len(points) + 1)
        return cls(arr.tolist(), timestamps, time_zone, points, timestamp_points)

    @property
    def counts(self) -> np.ndarray:
        """Counts as an int64 matrix."""
        return self.density.matrix.astype(np.int64)

    def transaction_counts(self) -> np.ndarray:
        """Samples per time bucket (column sums)."""
        return self.counts.sum(axis=0)

    def heat_map_colors(self, scheme: ColorRampScheme = ColorRampScheme.DEFAULT) -> np.ndarray:
        """Cell colors; empty cells get the scheme background."""
        return color_matrix(self.counts, scheme)
