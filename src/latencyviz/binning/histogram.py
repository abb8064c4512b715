"""1-D frequency histogram over half-open intervals.

Boundary points plus the -inf/+inf sentinels give k + 1 intervals
[b_i, b_{i+1}). Each datum is counted in exactly one of them. Percentages
and cumulative percentages are derived lazily from the counts.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any, Callable, Iterable, Iterator, Optional

import numpy as np
import pandas as pd

from latencyviz.binning.axis_intervals import interval_points_for_data
from latencyviz.binning.data_point import Interval, intervals_from_points
from latencyviz.utils.logging import get_logger

logger = get_logger(__name__)

HISTOGRAM_COLUMNS = ["interval", "count", "percentage", "cumulative_percentage"]


class Histogram:
    """Ordered Interval -> count table.

    Bucketing uses a vectorised binary search over the sorted boundaries
    (numpy searchsorted), which gives the same [low, high) assignment as
    testing every interval in turn.

    Attributes:
        intervals: Ascending intervals kept in the table.
        counts: Count per kept interval, aligned with intervals.
    """

    def __init__(
        self,
        data: Iterable[float],
        boundary_points: Iterable[float],
        drop_empty_intervals: bool = False,
    ) -> None:
        all_intervals = intervals_from_points(boundary_points)
        finite = np.asarray([iv.high.value for iv in all_intervals[:-1]], dtype=float)
        values = np.asarray(list(data), dtype=float)

        # side="right": a datum equal to b_i belongs to [b_i, b_{i+1})
        slots = np.searchsorted(finite, values, side="right")
        counts = np.bincount(slots, minlength=len(all_intervals)).tolist()
        n = int(values.size)

        if drop_empty_intervals:
            kept = [(iv, c) for iv, c in zip(all_intervals, counts) if c > 0]
        else:
            kept = list(zip(all_intervals, counts))

        self.intervals: tuple[Interval, ...] = tuple(iv for iv, _ in kept)
        self.counts: tuple[int, ...] = tuple(c for _, c in kept)
        logger.debug(
            "histogram: %d samples into %d intervals (%d kept)",
            n, len(all_intervals), len(self.intervals),
        )

    @classmethod
    def from_point_count(
        cls,
        data: Iterable[float],
        n_points: int,
        drop_empty_intervals: bool = False,
    ) -> "Histogram":
        """Histogram over n_points nice boundaries spanning the data."""
        values = list(data)
        return cls(values, interval_points_for_data(values, n_points), drop_empty_intervals)

    @property
    def total(self) -> int:
        return sum(self.counts)

    @cached_property
    def percentages(self) -> tuple[float, ...]:
        """100 * count_i / total; all zeros when the histogram is empty."""
        total = self.total
        if total == 0:
            return tuple(0.0 for _ in self.counts)
        return tuple(c * 100.0 / total for c in self.counts)

    @cached_property
    def cumulative_percentages(self) -> tuple[float, ...]:
        """Running sum of percentages, in interval order."""
        return tuple(float(v) for v in np.cumsum(self.percentages))

    def items(self) -> Iterator[tuple[Interval, int]]:
        return iter(zip(self.intervals, self.counts))

    def __len__(self) -> int:
        return len(self.intervals)

    def to_dataframe(self, formatter: Optional[Callable[[Any], str]] = None) -> pd.DataFrame:
        """Table with columns interval, count, percentage, cumulative_percentage."""
        return pd.DataFrame(
            {
                "interval": [iv.format(formatter) for iv in self.intervals],
                "count": list(self.counts),
                "percentage": list(self.percentages),
                "cumulative_percentage": list(self.cumulative_percentages),
            },
            columns=HISTOGRAM_COLUMNS,
        )
