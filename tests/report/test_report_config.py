"""Tests for ReportConfig defaults and dict serialization."""

from __future__ import annotations

import pytest

from latencyviz.colors.colorscales import ColorRampScheme
from latencyviz.errors import InvalidInputError
from latencyviz.report.report_config import (
    DEFAULT_MAX_INTERVAL_POINTS_FOR_LATENCY_DENSITY,
    DEFAULT_PERCENTILE_KEYS,
    ReportConfig,
)


def test_defaults():
    config = ReportConfig()
    assert config.outlier_threshold == 3.0
    assert config.heat_map_max_interval_points == DEFAULT_MAX_INTERVAL_POINTS_FOR_LATENCY_DENSITY == 40
    assert config.percentile_keys == DEFAULT_PERCENTILE_KEYS
    assert config.color_scheme is ColorRampScheme.DEFAULT
    assert config.output_time_zone == "UTC"
    assert config.heat_map_min_latency is None


def test_default_lists_are_not_shared():
    a = ReportConfig()
    b = ReportConfig()
    a.percentile_keys.append(12.5)
    assert 12.5 not in b.percentile_keys
    assert 12.5 not in DEFAULT_PERCENTILE_KEYS


def test_to_dict_writes_scheme_by_name():
    d = ReportConfig(color_scheme=ColorRampScheme.RED).to_dict()
    assert d["color_scheme"] == "RED"
    assert set(d) == {
        "histogram_interval_points", "percentile_keys", "outlier_threshold",
        "heat_map_max_interval_points", "heat_map_min_latency", "heat_map_max_latency",
        "color_scheme", "latency_unit", "output_time_zone", "drop_empty_intervals",
    }


def test_from_dict_round_trip():
    config = ReportConfig(
        histogram_interval_points=[0.0, 5.0, 50.0],
        percentile_keys=[50.0, 99.0],
        outlier_threshold=2.5,
        heat_map_min_latency=1.0,
        heat_map_max_latency=30.0,
        color_scheme=ColorRampScheme.GRAY,
        latency_unit="us",
        output_time_zone="Europe/Berlin",
        drop_empty_intervals=True,
    )
    assert ReportConfig.from_dict(config.to_dict()) == config


def test_from_dict_missing_keys_take_defaults():
    config = ReportConfig.from_dict({"color_scheme": "blue", "outlier_threshold": "2.5"})
    assert config.color_scheme is ColorRampScheme.BLUE
    assert config.outlier_threshold == 2.5
    assert config.latency_unit == "ms"


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(InvalidInputError) as exc_info:
        ReportConfig.from_dict({"bogus": 1})
    assert "bogus" in str(exc_info.value)


def test_from_dict_rejects_bad_values():
    with pytest.raises(InvalidInputError):
        ReportConfig.from_dict({"outlier_threshold": "abc"})
    with pytest.raises(InvalidInputError):
        ReportConfig.from_dict({"percentile_keys": 5})
    with pytest.raises(InvalidInputError):
        ReportConfig.from_dict({"color_scheme": "purple"})
