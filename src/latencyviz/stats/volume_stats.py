"""Transaction volume per day and hour.

Counts samples per local hour of day (0-23) for every local calendar day
present in the timestamps. Uses pandas for the time-zone conversion and
grouping.

Per day, DailyVolume adds the day's total, the share of each hour in
percent, and the peak / valley hours: every hour tied at the day's highest
(lowest) count, empty hours included.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

import pandas as pd

from latencyviz.binning.time_intervals import start_of_day

HOURS = list(range(24))


def _local_times(timestamps: Iterable[int], time_zone: str) -> pd.Series:
    ts = pd.to_datetime(pd.Series(list(timestamps), dtype="int64"), unit="ms", utc=True)
    return ts.dt.tz_convert(time_zone)


def hourly_volume(timestamps: Iterable[int], time_zone: str = "UTC") -> pd.DataFrame:
    """Transaction counts per (day, hour).

    Args:
        timestamps: Epoch millisecond timestamps.
        time_zone: IANA zone used to assign days and hours.

    Returns:
        DataFrame indexed by local day (datetime.date, ascending) with one
        integer column per hour 0..23. Empty input gives an empty frame with
        the 24 hour columns.
    """
    local = _local_times(timestamps, time_zone)
    if local.empty:
        return pd.DataFrame(columns=HOURS, dtype="int64")
    frame = pd.DataFrame({"day": local.dt.date, "hour": local.dt.hour})
    table = frame.groupby(["day", "hour"]).size().unstack(fill_value=0)
    table = table.reindex(columns=HOURS, fill_value=0).astype("int64")
    table.index.name = "day"
    table.columns.name = "hour"
    return table


def hourly_volume_percentages(table: pd.DataFrame) -> pd.DataFrame:
    """Each hour's share of its day's transactions, in percent.

    Args:
        table: Output of hourly_volume().

    Returns:
        Same shape as table, float percentages; every row sums to 100.
    """
    totals = table.sum(axis=1)
    return table.div(totals, axis=0).mul(100.0)


@dataclass(frozen=True)
class DailyVolume:
    """Hourly transaction counts of one local calendar day.

    Attributes:
        day: Local calendar day.
        start_ms: Epoch millis of local midnight of that day.
        hourly_counts: 24 counts, index = local hour.
    """
    day: date
    start_ms: int
    hourly_counts: tuple[int, ...]

    @property
    def total(self) -> int:
        return sum(self.hourly_counts)

    @property
    def percentages(self) -> tuple[float, ...]:
        total = self.total
        return tuple(c * 100.0 / total for c in self.hourly_counts)

    @property
    def highest_count(self) -> int:
        return max(self.hourly_counts)

    @property
    def lowest_count(self) -> int:
        return min(self.hourly_counts)

    def peak_hours(self) -> list[int]:
        """Hours tied at the highest count, ascending."""
        top = self.highest_count
        return [h for h, c in enumerate(self.hourly_counts) if c == top]

    def valley_hours(self) -> list[int]:
        """Hours tied at the lowest count, ascending."""
        bottom = self.lowest_count
        return [h for h, c in enumerate(self.hourly_counts) if c == bottom]

    def to_series(self) -> pd.Series:
        return pd.Series(self.hourly_counts, index=pd.Index(HOURS, name="hour"), name=self.day)


def daily_volume(timestamps: Iterable[int], time_zone: str = "UTC") -> list[DailyVolume]:
    """One DailyVolume per local day present in timestamps, ascending by day."""
    values = [int(t) for t in timestamps]
    table = hourly_volume(values, time_zone)
    if table.empty:
        return []

    local_days = _local_times(values, time_zone).dt.date
    first_ts = pd.Series(values).groupby(local_days.to_numpy()).min()

    return [
        DailyVolume(
            day=day,
            start_ms=start_of_day(int(first_ts.loc[day]), time_zone),
            hourly_counts=tuple(int(c) for c in row),
        )
        for day, row in zip(table.index, table.to_numpy())
    ]
