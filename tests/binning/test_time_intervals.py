"""Tests for timestamp boundary generation."""

from __future__ import annotations

import pytest

from latencyviz.binning.time_intervals import (
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    start_of_day,
    start_of_hour,
    timestamp_interval_points,
)
from latencyviz.errors import InvalidInputError


def test_start_of_hour_utc(base_ts):
    assert start_of_hour(base_ts + 10 * MILLIS_PER_MINUTE + 12_345) == base_ts
    assert start_of_hour(base_ts + MILLIS_PER_HOUR + 1) == base_ts + MILLIS_PER_HOUR


def test_start_of_hour_half_hour_offset_zone(base_ts):
    """00:10Z is 05:40 in Kolkata (+05:30); its hour starts at 23:30Z."""
    assert start_of_hour(base_ts + 10 * MILLIS_PER_MINUTE, "Asia/Kolkata") == base_ts - 30 * MILLIS_PER_MINUTE


def test_start_of_day(base_ts):
    assert start_of_day(base_ts + 13 * MILLIS_PER_HOUR) == base_ts
    # 2024-01-01 00:30Z is still 2023-12-31 in New York (-05:00)
    assert start_of_day(base_ts + 30 * MILLIS_PER_MINUTE, "America/New_York") == base_ts - 19 * MILLIS_PER_HOUR


def test_timestamp_interval_points_cover_range(base_ts):
    step = 5 * MILLIS_PER_MINUTE
    points = timestamp_interval_points([base_ts + 15 * MILLIS_PER_MINUTE, base_ts + 10 * MILLIS_PER_MINUTE], "UTC", step)
    assert points == [base_ts + i * step for i in range(5)]
    assert points[0] <= base_ts + 10 * MILLIS_PER_MINUTE
    assert points[-1] <= base_ts + 15 * MILLIS_PER_MINUTE + step


def test_timestamp_interval_points_single_timestamp(base_ts):
    step = 30 * MILLIS_PER_MINUTE
    points = timestamp_interval_points([base_ts + 45 * MILLIS_PER_MINUTE], "UTC", step)
    assert points == [base_ts, base_ts + step, base_ts + 2 * step]


@pytest.mark.parametrize("step", [0, -1])
def test_timestamp_interval_points_rejects_non_positive_step(base_ts, step):
    with pytest.raises(InvalidInputError):
        timestamp_interval_points([base_ts], "UTC", step)


def test_timestamp_interval_points_rejects_empty():
    with pytest.raises(InvalidInputError):
        timestamp_interval_points([], "UTC", MILLIS_PER_MINUTE)
