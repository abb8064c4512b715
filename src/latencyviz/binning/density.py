"""Generic 2-D density accumulator over row buckets x column buckets.

Used for latency heat maps: rows are latency buckets, columns are time
buckets, each cell counts the samples that fell into it. Cells can hold
any value type; the only mutation path is apply(row, col, combine), which
replaces a cell with combine(cell).
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Optional, Sequence, TypeVar

import numpy as np
import pandas as pd

from latencyviz.binning.boundary_index import IndexedDataPoint, OrderedBoundaryIndex
from latencyviz.errors import InvalidInputError
from latencyviz.utils.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V")


def increment(count: int) -> int:
    """Combine function for occurrence counting."""
    return count + 1


class DensityMatrix(Generic[V]):
    """rows x cols grid of accumulated values.

    Row and column counts are the bucket counts of the two boundary indexes
    (finite boundaries + 1 each, since the sentinels add two points).
    The matrix is owned by this instance; readers get read-only copies.

    Attributes:
        row_index: OrderedBoundaryIndex over the row boundaries.
        column_index: OrderedBoundaryIndex over the column boundaries.
    """

    def __init__(
        self,
        row_boundaries: Iterable[Any],
        col_boundaries: Iterable[Any],
        neutral_value: V,
    ) -> None:
        self.row_index = OrderedBoundaryIndex(row_boundaries)
        self.column_index = OrderedBoundaryIndex(col_boundaries)

        shape = (self.row_index.bucket_count, self.column_index.bucket_count)
        cells = np.empty(shape, dtype=object)
        cells.fill(neutral_value)
        self._cells = cells
        self._neutral_value = neutral_value
        logger.debug("density matrix: %d rows x %d cols", shape[0], shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self._cells.shape

    @property
    def neutral_value(self) -> V:
        return self._neutral_value

    @property
    def row_points(self) -> tuple[IndexedDataPoint, ...]:
        return self.row_index.points

    @property
    def column_points(self) -> tuple[IndexedDataPoint, ...]:
        return self.column_index.points

    @property
    def matrix(self) -> np.ndarray:
        """Read-only copy of the cells (dtype=object)."""
        view = self._cells.copy()
        view.setflags(write=False)
        return view

    def cell(self, row: int, col: int) -> V:
        """Value at bucket indices (row, col)."""
        return self._cells[row, col]

    def apply(self, row: Any, col: Any, combine: Callable[[V], V]) -> None:
        """Replace the cell holding (row, col) with combine(previous)."""
        r = self.row_index.bucket_of(row)
        c = self.column_index.bucket_of(col)
        self._cells[r, c] = combine(self._cells[r, c])

    def apply_all(
        self,
        rows: Sequence[Any],
        cols: Sequence[Any],
        combine: Callable[[V], V],
    ) -> None:
        """apply() each (rows[i], cols[i]) pair in order."""
        if len(rows) != len(cols):
            raise InvalidInputError(
                f"rows and cols must have the same length: {len(rows)} != {len(cols)}"
            )
        for row, col in zip(rows, cols):
            self.apply(row, col, combine)

    def to_dataframe(
        self,
        row_formatter: Optional[Callable[[Any], str]] = None,
        col_formatter: Optional[Callable[[Any], str]] = None,
    ) -> pd.DataFrame:
        """Cells as a DataFrame labelled by bucket span "(low,high]"."""
        return pd.DataFrame(
            self.matrix,
            index=_bucket_labels(self.row_points, row_formatter),
            columns=_bucket_labels(self.column_points, col_formatter),
        )

    def __repr__(self) -> str:
        return (
            f"DensityMatrix(rows={self.row_index!r}, cols={self.column_index!r}, "
            f"shape={self.shape})"
        )


def _bucket_labels(
    points: Sequence[IndexedDataPoint],
    formatter: Optional[Callable[[Any], str]],
) -> list[str]:
    return [
        f"({low.format(formatter)},{high.format(formatter)}]"
        for low, high in zip(points[:-1], points[1:])
    ]
