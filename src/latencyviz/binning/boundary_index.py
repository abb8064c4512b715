"""Ordered boundary index: ranked boundary points with bucket lookup.

Boundary values are deduplicated, sorted and wrapped with -inf at rank 0
and +inf at the last rank. Bucket i is the span between the points of rank
i and i + 1, so there are len(points) - 1 buckets.

bucket_of(v) returns the rank of the greatest point strictly less than v.
A value equal to a boundary b therefore falls in the bucket whose upper
edge is b. Since -inf precedes every real value, every lookup resolves.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

from latencyviz.binning.data_point import DataPoint
from latencyviz.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class IndexedDataPoint:
    """A DataPoint with its rank in an OrderedBoundaryIndex."""
    point: DataPoint
    index: int

    @property
    def value(self) -> Any:
        return self.point.value

    @property
    def is_finite(self) -> bool:
        return self.point.is_finite

    def format(self, formatter: Optional[Callable[[Any], str]] = None) -> str:
        return self.point.format(formatter)

    def __str__(self) -> str:
        return self.format()


class OrderedBoundaryIndex:
    """Read-only ranked boundaries answering "which bucket holds v".

    Attributes:
        points: Ranked points, -inf first and +inf last.
        bucket_count: len(points) - 1.
    """

    def __init__(self, boundary_values: Iterable[Any]) -> None:
        finite = sorted(set(boundary_values))
        ranked = [IndexedDataPoint(DataPoint.negative_infinity(), 0)]
        ranked.extend(
            IndexedDataPoint(DataPoint.finite(v), i) for i, v in enumerate(finite, start=1)
        )
        ranked.append(IndexedDataPoint(DataPoint.positive_infinity(), len(finite) + 1))

        self._finite: tuple[Any, ...] = tuple(finite)
        self._points: tuple[IndexedDataPoint, ...] = tuple(ranked)
        logger.debug("boundary index: %d finite points, %d buckets", len(finite), self.bucket_count)

    @property
    def points(self) -> tuple[IndexedDataPoint, ...]:
        return self._points

    @property
    def finite_values(self) -> tuple[Any, ...]:
        """Sorted distinct boundary values, without sentinels."""
        return self._finite

    @property
    def bucket_count(self) -> int:
        return len(self._points) - 1

    def bucket_of(self, value: Any) -> int:
        """Rank of the greatest indexed point strictly less than value.

        The count of finite boundaries below value equals that rank, since
        finite boundary i sits at rank i + 1 behind the -inf sentinel.
        """
        return bisect_left(self._finite, value)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[IndexedDataPoint]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"OrderedBoundaryIndex([{', '.join(str(p) for p in self._points)}])"
