"""Latency report assembly, configuration and Plotly figures."""

from latencyviz.report.latency_density import TimeSeriesLatencyDensity
from latencyviz.report.latency_report import (
    LatencyReport,
    build_latency_report,
    latency_report_batch,
    summary_table,
)
from latencyviz.report.report_config import ReportConfig

__all__ = [
    "LatencyReport",
    "ReportConfig",
    "TimeSeriesLatencyDensity",
    "build_latency_report",
    "latency_report_batch",
    "summary_table",
]
