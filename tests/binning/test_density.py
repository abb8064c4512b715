"""Tests for DensityMatrix accumulation."""

from __future__ import annotations

import numpy as np
import pytest

from latencyviz.binning.density import DensityMatrix, increment
from latencyviz.errors import InvalidInputError


@pytest.fixture
def counts() -> DensityMatrix:
    return DensityMatrix([1, 2], [10, 20], 0)


def test_shape_is_bucket_counts(counts):
    """Two finite boundaries per axis + two sentinels -> 3 buckets each."""
    assert counts.shape == (3, 3)
    assert len(counts.row_points) == 4
    assert len(counts.column_points) == 4


def test_cells_start_at_neutral_value(counts):
    assert counts.neutral_value == 0
    assert (counts.matrix == 0).all()


def test_apply_all_counts_occurrences(counts):
    counts.apply_all([0.5, 1.5, 1.5, 3.0], [5, 15, 15, 25], increment)
    assert counts.cell(0, 0) == 1
    assert counts.cell(1, 1) == 2
    assert counts.cell(2, 2) == 1
    assert counts.matrix.sum() == 4


def test_value_on_boundary_goes_to_lower_bucket(counts):
    counts.apply(1, 10, increment)
    counts.apply(2, 20, increment)
    assert counts.cell(0, 0) == 1
    assert counts.cell(1, 1) == 1


def test_matrix_is_read_only_copy(counts):
    counts.apply(1.5, 15, increment)
    snapshot = counts.matrix
    assert not snapshot.flags.writeable
    with pytest.raises(ValueError):
        snapshot[0, 0] = 99
    counts.apply(1.5, 15, increment)
    assert snapshot[1, 1] == 1
    assert counts.cell(1, 1) == 2


def test_apply_all_rejects_length_mismatch(counts):
    with pytest.raises(InvalidInputError):
        counts.apply_all([1.5, 1.5], [15], increment)


def test_custom_combine_accumulates_sums():
    """Cells can hold any accumulator, here a running latency sum."""
    sums: DensityMatrix[float] = DensityMatrix([100], [0], 0.0)
    for latency, ts in [(12.5, 5), (40.0, 7), (250.0, 9)]:
        sums.apply(latency, ts, lambda total, v=latency: total + v)
    assert sums.cell(0, 1) == pytest.approx(52.5)
    assert sums.cell(1, 1) == pytest.approx(250.0)
    assert sums.cell(0, 0) == 0.0


def test_to_dataframe_labels_buckets(counts):
    counts.apply(1.5, 15, increment)
    df = counts.to_dataframe(col_formatter=lambda v: f"t{v}")
    assert list(df.index) == ["(-Infinity,1]", "(1,2]", "(2,Infinity]"]
    assert list(df.columns) == ["(-Infinity,t10]", "(t10,t20]", "(t20,Infinity]"]
    assert df.loc["(1,2]", "(t10,t20]"] == 1


def test_repr_mentions_shape(counts):
    assert "shape=(3, 3)" in repr(counts)


def test_matrix_dtype_object_for_generic_cells(counts):
    assert counts.matrix.dtype == np.dtype(object)
