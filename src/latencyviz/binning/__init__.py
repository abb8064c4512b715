"""Boundary generation and bucketing: nice axis points, ranked boundary
indexes, 2-D density matrices and 1-D histograms."""

from latencyviz.binning.axis_intervals import generate_interval_points, interval_points_for_data
from latencyviz.binning.boundary_index import IndexedDataPoint, OrderedBoundaryIndex
from latencyviz.binning.data_point import DataPoint, Interval, intervals_from_points
from latencyviz.binning.density import DensityMatrix, increment
from latencyviz.binning.histogram import Histogram
from latencyviz.binning.time_intervals import timestamp_interval_points

__all__ = [
    "DataPoint",
    "DensityMatrix",
    "Histogram",
    "IndexedDataPoint",
    "Interval",
    "OrderedBoundaryIndex",
    "generate_interval_points",
    "increment",
    "interval_points_for_data",
    "intervals_from_points",
    "timestamp_interval_points",
]
