"""
Latency statistics: moments, median, percentiles, z-scores and outliers.

Computed once from a non-empty sample array and never mutated.

Formulas (kept exactly; note the two different denominators):
  - mean = sum(x) / n
  - s1, s2, s3 = sum((x - mean)**2), sum((x - mean)**3), sum((x - mean)**4)
  - variance = s1 / n                 (population form)
  - std_deviation = sqrt(s1 / (n - 1)) (sample form)
  - skewness = (s2 / n) / variance**1.5       (Pearson moment coefficient)
  - kurtosis = (s3 / n) / variance**2; excess_kurtosis = kurtosis - 3
  - z_scores[i] = (x[i] - mean) / std_deviation

With n == 1 the sample std is 0/0 and comes out NaN, as do the z-scores;
with all-equal samples skewness and kurtosis are NaN. Only an empty sample
set is rejected.

Percentiles use a position-based rule: pos = n * p / 100 + 0.5, then the
1-based rank floor(pos) with linear interpolation on the fraction. The
median uses the usual middle-element rule, so median and percentile(50)
need not agree.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from latencyviz.errors import InvalidInputError, UnattainablePercentileError
from latencyviz.utils.logging import get_logger

logger = get_logger(__name__)

# Scalar fields reported by LatencyStatistics.summary(), in display order.
SUMMARY_FIELDS = [
    "count", "mean", "median", "min", "max", "std_deviation",
    "variance", "skewness", "kurtosis", "excess_kurtosis",
]


def _readonly(values: Any, dtype: Any = float) -> np.ndarray:
    arr = np.array(values, dtype=dtype)
    arr.setflags(write=False)
    return arr


# -----------------------------------------------------------------------------
# Order statistics
# -----------------------------------------------------------------------------


def median(sorted_data: Sequence[float]) -> float:
    """Middle element for odd n, mean of the two middle elements for even n."""
    n = len(sorted_data)
    if n == 0:
        raise InvalidInputError("median of empty data")
    k = n // 2
    if n % 2 == 0:
        return (float(sorted_data[k - 1]) + float(sorted_data[k])) / 2
    return float(sorted_data[k])


def percentile(sorted_data: Sequence[float], p: float) -> float:
    """Position-based p-th percentile of ascending data.

    Args:
        sorted_data: Samples in ascending order.
        p: Percentile key, at most 100.

    Returns:
        sorted_data[idx] when the position has no fraction or idx is the last
        element, else the linear interpolation towards sorted_data[idx + 1].

    Raises:
        UnattainablePercentileError: If the rank falls before the first
            sample (idx < 0), e.g. small p with few samples. Every
            negative key lands here.
        InvalidInputError: If p is above 100.
    """
    if p > 100:
        raise InvalidInputError(f"percentile key must not exceed 100, got {p}")
    n = len(sorted_data)
    pos = n * (p / 100) + 0.5
    integer_part = math.floor(pos)
    idx = int(integer_part) - 1
    if idx < 0:
        raise UnattainablePercentileError(n, p)

    fraction = pos - integer_part
    x = float(sorted_data[idx])
    if fraction == 0 or idx == n - 1:
        return x
    y = float(sorted_data[idx + 1])
    return x + fraction * (y - x)


def percentiles(sorted_data: Sequence[float], keys: Iterable[float]) -> list[tuple[float, float]]:
    """(key, value) pairs for every computable key, ascending by key.

    Keys whose rank falls before the first sample are left out; callers
    detect them by their absence.
    """
    result: list[tuple[float, float]] = []
    for key in sorted(float(k) for k in keys):
        try:
            result.append((key, percentile(sorted_data, key)))
        except UnattainablePercentileError as e:
            logger.warning("dropping percentile key %s: %s", key, e)
    return result


def z_scores(data: Sequence[float], mean: float, std_deviation: float) -> np.ndarray:
    """(x - mean) / std_deviation per sample."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return (np.asarray(data, dtype=float) - mean) / np.float64(std_deviation)


# -----------------------------------------------------------------------------
# Outliers
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Outliers:
    """Samples whose z-score exceeds a threshold.

    Attributes:
        indices: Positions in the original sample order.
        values: Sample values at those positions.
        zscores: Z-scores at those positions.
    """
    indices: tuple[int, ...]
    values: tuple[float, ...]
    zscores: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.indices)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            {"index": list(self.indices), "value": list(self.values), "zscore": list(self.zscores)},
            columns=["index", "value", "zscore"],
        )

    def __str__(self) -> str:
        parts = [f"({i},{v},{z})" for i, v, z in zip(self.indices, self.values, self.zscores)]
        return "[" + ",".join(parts) + "]"


# -----------------------------------------------------------------------------
# Snapshot
# -----------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class LatencyStatistics:
    """Immutable statistics snapshot over one batch of latency samples.

    Build with LatencyStatistics.compute(samples). Array fields are
    read-only numpy arrays.
    """
    samples: np.ndarray
    sorted_samples: np.ndarray
    count: int
    mean: float
    min: float
    max: float
    variance: float
    std_deviation: float
    skewness: float
    kurtosis: float
    excess_kurtosis: float
    median: float
    z_scores: np.ndarray
    timestamps: Optional[np.ndarray] = None

    @classmethod
    def compute(
        cls,
        samples: Iterable[float],
        timestamps: Optional[Iterable[int]] = None,
    ) -> "LatencyStatistics":
        """Compute the snapshot.

        Args:
            samples: Latency values, at least one.
            timestamps: Optional epoch-millisecond timestamps, one per sample;
                carried along so remove_outliers can keep them aligned.

        Raises:
            InvalidInputError: If samples is empty or timestamps do not
                match samples in length.
        """
        x = np.array(list(samples), dtype=float)
        n = len(x)
        if n == 0:
            raise InvalidInputError("cannot compute statistics of an empty sample set")

        ts = None
        if timestamps is not None:
            ts = np.array(list(timestamps), dtype=np.int64)
            if len(ts) != n:
                raise InvalidInputError("Number of latencies must be same as number of timestamps")
            ts.setflags(write=False)

        mean = float(x.sum() / n)
        diff = x - mean
        s1 = float(np.sum(diff ** 2))
        s2 = float(np.sum(diff ** 3))
        s3 = float(np.sum(diff ** 4))

        with np.errstate(divide="ignore", invalid="ignore"):
            variance = np.float64(s1) / n
            third_moment = np.float64(s2) / n
            fourth_moment = np.float64(s3) / n
            skewness = third_moment / variance ** 1.5
            kurtosis = fourth_moment / variance ** 2
            std_deviation = np.sqrt(np.float64(s1) / (n - 1))

        sorted_x = np.sort(x)

        return cls(
            samples=_readonly(x),
            sorted_samples=_readonly(sorted_x),
            count=n,
            mean=mean,
            min=float(sorted_x[0]),
            max=float(sorted_x[-1]),
            variance=float(variance),
            std_deviation=float(std_deviation),
            skewness=float(skewness),
            kurtosis=float(kurtosis),
            excess_kurtosis=float(kurtosis) - 3,
            median=median(sorted_x),
            z_scores=_readonly(z_scores(x, mean, float(std_deviation))),
            timestamps=ts,
        )

    def outliers(self, threshold: float) -> Outliers:
        """Samples with z-score strictly greater than threshold.

        Signed comparison: only the high tail is tested, so a sample far
        below the mean is never reported.
        """
        indices = np.flatnonzero(self.z_scores > threshold)
        return Outliers(
            indices=tuple(int(i) for i in indices),
            values=tuple(float(v) for v in self.samples[indices]),
            zscores=tuple(float(z) for z in self.z_scores[indices]),
        )

    def remove_outliers(self, threshold: float) -> "LatencyStatistics":
        """Statistics recomputed without the samples flagged by outliers(threshold)."""
        keep = np.ones(self.count, dtype=bool)
        keep[list(self.outliers(threshold).indices)] = False
        timestamps = None if self.timestamps is None else self.timestamps[keep]
        return LatencyStatistics.compute(self.samples[keep], timestamps)

    def percentile(self, p: float) -> float:
        return percentile(self.sorted_samples, p)

    def percentiles(self, keys: Iterable[float]) -> list[tuple[float, float]]:
        return percentiles(self.sorted_samples, keys)

    def summary(self) -> dict[str, float]:
        """Scalar statistics keyed by SUMMARY_FIELDS."""
        return {name: getattr(self, name) for name in SUMMARY_FIELDS}

    def to_series(self) -> pd.Series:
        return pd.Series(self.summary(), index=SUMMARY_FIELDS)
