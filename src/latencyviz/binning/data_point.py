"""Data points with infinity sentinels, and half-open intervals over them.

A DataPoint is either a finite ordered value or one of the two sentinels
-inf / +inf. Sentinels let a finite set of boundary values partition the
whole line (-inf, +inf) with no gaps, so every datum lands somewhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Any, Callable, Iterable, Optional

from latencyviz.errors import InvalidInputError


class PointKind(IntEnum):
    """Position class of a data point; integer order is the sort order."""
    NEGATIVE_INFINITY = 0
    FINITE = 1
    POSITIVE_INFINITY = 2


@total_ordering
@dataclass(frozen=True)
class DataPoint:
    """A finite value or an infinity sentinel.

    Total order: -inf < any finite < +inf; finite values compare naturally.
    """
    kind: PointKind
    value: Any = None

    @classmethod
    def finite(cls, value: Any) -> "DataPoint":
        if value is None:
            raise InvalidInputError("finite data point requires a value")
        return cls(PointKind.FINITE, value)

    @classmethod
    def negative_infinity(cls) -> "DataPoint":
        return cls(PointKind.NEGATIVE_INFINITY)

    @classmethod
    def positive_infinity(cls) -> "DataPoint":
        return cls(PointKind.POSITIVE_INFINITY)

    @property
    def is_finite(self) -> bool:
        return self.kind is PointKind.FINITE

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DataPoint):
            return NotImplemented
        if self.kind != other.kind:
            return self.kind < other.kind
        if self.kind is PointKind.FINITE:
            return self.value < other.value
        return False

    def format(self, formatter: Optional[Callable[[Any], str]] = None) -> str:
        """Render for labels; sentinels render as -Infinity / Infinity."""
        if self.kind is PointKind.NEGATIVE_INFINITY:
            return "-Infinity"
        if self.kind is PointKind.POSITIVE_INFINITY:
            return "Infinity"
        return formatter(self.value) if formatter is not None else str(self.value)

    def __str__(self) -> str:
        return self.format()


@total_ordering
@dataclass(frozen=True)
class Interval:
    """Half-open range [low, high) with low < high."""
    low: DataPoint
    high: DataPoint

    def __post_init__(self) -> None:
        if not self.low < self.high:
            raise InvalidInputError(f"Low = <{self.low}>. High = <{self.high}>.")

    def contains(self, point: DataPoint) -> bool:
        return self.low <= point < self.high

    def __lt__(self, other: object) -> bool:
        # Intervals built from one boundary set never overlap, so ordering by
        # position is total for them.
        if not isinstance(other, Interval):
            return NotImplemented
        if self == other:
            return False
        if self.high <= other.low:
            return True
        if self.low >= other.high:
            return False
        raise InvalidInputError(f"The following intervals cannot be compared: <{self}>, <{other}>")

    def format(self, formatter: Optional[Callable[[Any], str]] = None) -> str:
        return f"[{self.low.format(formatter)},{self.high.format(formatter)})"

    def __str__(self) -> str:
        return self.format()


def intervals_from_points(points: Iterable[Any]) -> list[Interval]:
    """Build consecutive intervals from points plus the -inf/+inf sentinels.

    Duplicates are collapsed. The result is ascending and covers (-inf, +inf)
    without gaps or overlaps: n distinct points yield n + 1 intervals.
    """
    low = DataPoint.negative_infinity()
    intervals: list[Interval] = []
    for value in sorted(set(points)):
        high = DataPoint.finite(value)
        intervals.append(Interval(low, high))
        low = high
    intervals.append(Interval(low, DataPoint.positive_infinity()))
    return intervals
