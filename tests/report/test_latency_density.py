"""Tests for the time-series latency density behind heat maps."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from latencyviz.colors.colorscales import ColorRampScheme
from latencyviz.errors import InvalidInputError
from latencyviz.report.latency_density import (
    LONG_SPAN_STEP_MS,
    SHORT_SPAN_STEP_MS,
    TimeSeriesLatencyDensity,
    latency_interval_points,
)

MINUTE = 60_000
HOUR = 60 * MINUTE


@pytest.fixture
def samples(base_ts):
    latencies = [1.5, 2.5, 2.5, 9.0]
    timestamps = [base_ts + MINUTE, base_ts + 2 * MINUTE, base_ts + 400_000, base_ts + 10 * MINUTE]
    return latencies, timestamps


# --- latency_interval_points ---


def test_latency_points_whole_number_span():
    """0.4..9.6 widens to 0..10: ten points, step 1."""
    assert latency_interval_points(0.4, 9.6, 40) == [float(v) for v in range(10)]


def test_latency_points_capped():
    points = latency_interval_points(0, 100, 40)
    assert len(points) == 40
    assert points[1] - points[0] == 2.5


def test_latency_points_constant_latency():
    assert latency_interval_points(3.0, 3.0, 40) == [3.0]


def test_latency_points_reject_inverted_range():
    with pytest.raises(InvalidInputError):
        latency_interval_points(10, 2, 40)


# --- TimeSeriesLatencyDensity ---


def test_create_shape_and_counts(samples, base_ts):
    latencies, timestamps = samples
    d = TimeSeriesLatencyDensity.create(latencies, timestamps)
    # latency boundaries 1..8 -> 9 rows; time boundaries every 5 min -> 5 cols
    assert d.density.shape == (9, 5)
    assert d.density.column_index.finite_values == tuple(base_ts + i * SHORT_SPAN_STEP_MS for i in range(4))
    counts = d.counts
    assert counts.dtype == np.int64
    assert counts.sum() == 4
    assert counts[1, 1] == 1  # 1.5 at +1 min
    assert counts[2, 1] == 1  # 2.5 at +2 min
    assert counts[2, 2] == 1  # 2.5 at +6:40
    assert counts[8, 2] == 1  # 9.0 at +10 min, on a time boundary
    assert d.default_time_label_skip_count == 2
    assert d.time_zone == "UTC"


def test_transaction_counts(samples):
    d = TimeSeriesLatencyDensity.create(*samples)
    assert d.transaction_counts().tolist() == [0, 2, 2, 0, 0]


def test_long_span_uses_half_hour_columns(base_ts):
    d = TimeSeriesLatencyDensity.create([1.0, 2.0], [base_ts, base_ts + 6 * HOUR])
    cols = d.density.column_index.finite_values
    assert cols[1] - cols[0] == LONG_SPAN_STEP_MS
    assert d.default_time_label_skip_count == 1


def test_latency_window_restricts_rows(samples):
    d = TimeSeriesLatencyDensity.create(*samples, min_latency=2.0, max_latency=5.0)
    assert d.density.row_index.finite_values == (2.0, 3.0, 4.0)
    assert d.counts.sum() == 4


def test_latency_window_outside_data_used_as_given(samples, caplog):
    caplog.set_level(logging.WARNING, logger="latencyviz")
    d = TimeSeriesLatencyDensity.create(*samples, min_latency=20.0, max_latency=30.0)
    assert d.density.row_index.finite_values[0] == 20.0
    assert any("outside data range" in r.getMessage() for r in caplog.records)


def test_latency_window_inverted_rejected(samples):
    with pytest.raises(InvalidInputError):
        TimeSeriesLatencyDensity.create(*samples, min_latency=5.0, max_latency=2.0)


def test_explicit_timestamp_points(samples, base_ts):
    latencies, timestamps = samples
    d = TimeSeriesLatencyDensity.create(latencies, timestamps, timestamp_points=[base_ts + 5 * MINUTE])
    assert d.density.shape[1] == 2
    assert d.transaction_counts().tolist() == [2, 2]


def test_mismatched_lengths_rejected(base_ts):
    with pytest.raises(InvalidInputError):
        TimeSeriesLatencyDensity.create([1.0, 2.0], [base_ts])


def test_empty_rejected():
    with pytest.raises(InvalidInputError):
        TimeSeriesLatencyDensity.create([], [])


def test_heat_map_colors(samples):
    d = TimeSeriesLatencyDensity.create(*samples)
    scheme = ColorRampScheme.GREEN
    colors = d.heat_map_colors(scheme)
    assert colors.shape == d.counts.shape
    assert colors[0, 0] == scheme.background_color
    assert colors[1, 1] == scheme.foreground_colors[-1]
