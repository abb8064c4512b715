"""Tests for OrderedBoundaryIndex ranks and bucket lookup."""

from __future__ import annotations

import pytest

from latencyviz.binning.boundary_index import OrderedBoundaryIndex


@pytest.fixture
def index() -> OrderedBoundaryIndex:
    return OrderedBoundaryIndex([10, 20, 20, 5])


def test_points_are_ranked_with_sentinels(index):
    assert len(index) == 5
    assert [p.index for p in index] == [0, 1, 2, 3, 4]
    assert [p.format() for p in index.points] == ["-Infinity", "5", "10", "20", "Infinity"]
    assert not index.points[0].is_finite
    assert not index.points[-1].is_finite
    assert index.points[2].value == 10


def test_finite_values_deduplicated_and_sorted(index):
    assert index.finite_values == (5, 10, 20)


def test_bucket_count(index):
    assert index.bucket_count == 4


@pytest.mark.parametrize(
    "value,bucket",
    [(-1e9, 0), (1, 0), (6, 1), (15, 2), (20.5, 3), (1e9, 3)],
)
def test_bucket_of_between_boundaries(index, value, bucket):
    assert index.bucket_of(value) == bucket


@pytest.mark.parametrize("value,bucket", [(5, 0), (10, 1), (20, 2)])
def test_bucket_of_boundary_value_uses_bucket_below(index, value, bucket):
    """A value equal to boundary b lands in the bucket whose upper edge is b."""
    assert index.bucket_of(value) == bucket


def test_bucket_of_always_in_range(index):
    for v in [-1e300, -5, 0, 5, 7.5, 10, 19.999, 20, 21, 1e300]:
        assert 0 <= index.bucket_of(v) < index.bucket_count


def test_empty_boundary_set_has_single_bucket():
    index = OrderedBoundaryIndex([])
    assert index.bucket_count == 1
    assert index.bucket_of(42) == 0


def test_repr_lists_points(index):
    text = repr(index)
    assert text.startswith("OrderedBoundaryIndex(")
    assert "-Infinity" in text
    assert "Infinity]" in text
