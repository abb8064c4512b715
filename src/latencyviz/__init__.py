"""
latencyviz: binning, density and statistics for latency reports.

This package provides:
- generate_interval_points: "nice" axis boundaries from a value range
- OrderedBoundaryIndex / DensityMatrix: 2-D bucket accumulation (heat maps)
- Histogram: 1-D interval counts with percentages
- LatencyStatistics: moments, median, percentiles, z-score outliers
- ColorRampScheme / quantize: value-to-color ramps
- build_latency_report: all of the above for one batch of samples

For logging configuration in standalone scripts:
    ```python
    from latencyviz.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging is handled by the parent application's
configuration.
"""

import logging

from latencyviz.utils.logging import configure_logging, get_logger

from latencyviz.binning import (
    DensityMatrix,
    Histogram,
    OrderedBoundaryIndex,
    generate_interval_points,
)
from latencyviz.colors import ColorRampScheme, quantize
from latencyviz.errors import InternalInvariantError, InvalidInputError, UnattainablePercentileError
from latencyviz.report import ReportConfig, build_latency_report
from latencyviz.stats import LatencyStatistics

# Ensure latencyviz logger has NullHandler so logs don't propagate to root
# when no application has configured logging.
_logger = logging.getLogger("latencyviz")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "ColorRampScheme",
    "DensityMatrix",
    "Histogram",
    "InternalInvariantError",
    "InvalidInputError",
    "LatencyStatistics",
    "OrderedBoundaryIndex",
    "ReportConfig",
    "UnattainablePercentileError",
    "build_latency_report",
    "configure_logging",
    "generate_interval_points",
    "get_logger",
    "quantize",
]

__version__ = "0.1.0"
