"""Timestamp boundaries for the time axis of latency heat maps.

Timestamps are epoch milliseconds. Boundaries start at the beginning of the
hour (in the output time zone) that contains the earliest timestamp and
advance by a fixed step until they pass the latest timestamp by one step.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from latencyviz.errors import InvalidInputError

MILLIS_PER_MINUTE = 60_000
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE


def _to_local(timestamp_ms: int, time_zone: str) -> pd.Timestamp:
    return pd.Timestamp(int(timestamp_ms), unit="ms", tz="UTC").tz_convert(time_zone)


def _to_millis(ts: pd.Timestamp) -> int:
    return int(ts.value // 1_000_000)


def start_of_hour(timestamp_ms: int, time_zone: str = "UTC") -> int:
    """Epoch millis of the start of the hour containing timestamp_ms."""
    local = _to_local(timestamp_ms, time_zone)
    return _to_millis(local.replace(minute=0, second=0, microsecond=0, nanosecond=0))


def start_of_day(timestamp_ms: int, time_zone: str = "UTC") -> int:
    """Epoch millis of local midnight for the day containing timestamp_ms."""
    local = _to_local(timestamp_ms, time_zone)
    return _to_millis(local.normalize())


def timestamp_interval_points(
    timestamps: Iterable[int],
    time_zone: str,
    step_ms: int,
) -> list[int]:
    """Evenly spaced timestamp boundaries covering all timestamps.

    Args:
        timestamps: Epoch millisecond timestamps, at least one.
        time_zone: IANA zone name used to find the start of the first hour.
        step_ms: Distance between boundaries, > 0.

    Returns:
        Ascending boundaries start, start + step, ... up to and including the
        last one <= max(timestamps) + step_ms.
    """
    if step_ms <= 0:
        raise InvalidInputError(
            f"Invalid time interval: <{step_ms}>. Time interval must be a positive value"
        )
    values = [int(t) for t in timestamps]
    if not values:
        raise InvalidInputError("cannot derive timestamp interval points from no timestamps")

    start = start_of_hour(min(values), time_zone)
    stop = max(values) + step_ms
    return list(range(start, stop + 1, step_ms))
