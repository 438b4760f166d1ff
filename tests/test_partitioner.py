# -*- coding: utf-8 -*-
"""Tests for the adaptive partitioner.

Checks the structural guarantees of a partition (coverage, no overlap, conservation of points and weights,
minimum counts, determinism) on random data, plus hand-worked grid, degenerate and boundary scenarios.
"""

import itertools

import numpy as np
import pytest
from shapely.geometry import box
from shapely.ops import unary_union

from nestedgrid import AdaptivePartitioner, InvalidArgumentError, Rectangle, partition_points


@pytest.fixture
def random_points():
    """500 uniformly distributed points with positive weights."""
    rng = np.random.default_rng(42)
    coords = rng.uniform(0, 1000, size=(500, 2))
    weights = rng.uniform(0.5, 3.0, size=500)
    return coords, weights


@pytest.fixture
def grid_points():
    """20 points on a 4 (columns) by 5 (rows) unit grid."""
    return np.array([(x, y) for y in range(5) for x in range(4)], dtype=float)


def test_cells_cover_root_without_overlap(random_points):
    """The union of all cells is the root rectangle and no two cells share interior area."""
    coords, weights = random_points
    partition = partition_points(coords, min_count=10, weights=weights)

    polygons = [cell.rectangle.to_polygon() for cell in partition]
    root = box(*partition.root.bounds)

    assert sum(p.area for p in polygons) == pytest.approx(root.area)
    assert unary_union(polygons).symmetric_difference(root).area == pytest.approx(0.0, abs=1e-6)

    for a, b in itertools.combinations(polygons, 2):
        assert a.intersection(b).area == pytest.approx(0.0, abs=1e-9)


def test_points_and_weights_are_conserved(random_points):
    """Every point lands in exactly one cell and the weights add up."""
    coords, weights = random_points
    partition = partition_points(coords, min_count=10, weights=weights)

    assert partition.total_count == len(coords)
    assert partition.total_weight == pytest.approx(weights.sum())

    all_indices = np.concatenate([cell.indices for cell in partition])
    assert np.array_equal(np.sort(all_indices), np.arange(len(coords))), "Points duplicated or lost."
    assert np.all(partition.assignments >= 0)

    for cell_id, cell in enumerate(partition):
        assert np.all(partition.assignments[cell.indices] == cell_id)
        assert cell.weight_sum == pytest.approx(weights[cell.indices].sum())


def test_points_lie_inside_their_cell(random_points):
    """Each point is inside the rectangle of the cell that owns it."""
    coords, _ = random_points
    partition = partition_points(coords, min_count=10)

    for cell in partition:
        for x, y in coords[cell.indices]:
            assert cell.rectangle.contains(x, y)


def test_minimum_count_holds(random_points):
    """No cell falls below min_count, and continuous data splits down below 2 * min_count."""
    coords, _ = random_points
    partition = partition_points(coords, min_count=10)

    counts = [cell.point_count for cell in partition]
    assert min(counts) >= 10
    assert max(counts) < 20
    assert partition.n_cells > 1


def test_partition_is_deterministic(random_points):
    """Running twice gives identical cells."""
    coords, weights = random_points
    first = partition_points(coords, min_count=15, weights=weights).to_frame()
    second = partition_points(coords, min_count=15, weights=weights).to_frame()

    assert first.equals(second)


def test_repartitioning_recovers_same_cells(random_points):
    """Re-running on the union of all cell points, in any order, gives back the same rectangles."""
    coords, _ = random_points
    partition = partition_points(coords, min_count=12)

    reordered = coords[np.concatenate([cell.indices for cell in partition])[::-1]]
    again = partition_points(reordered, min_count=12)

    assert {cell.rectangle for cell in partition} == {cell.rectangle for cell in again}


def test_grid_scenario(grid_points):
    """The 4x5 grid is first cut along y (the longer side), then the lower half along x."""
    partition = partition_points(grid_points, min_count=5)

    assert partition.root == Rectangle(0, 3, 0, 4)
    assert partition.n_cells == 3

    bounds = [cell.rectangle.bounds for cell in partition]
    counts = [cell.point_count for cell in partition]
    depths = [cell.depth for cell in partition]

    assert bounds == [(0.0, 0.0, 1.5, 2.0), (1.5, 0.0, 3.0, 2.0), (0.0, 2.0, 3.0, 4.0)]
    assert counts == [6, 6, 8]
    assert depths == [2, 2, 1]
    assert all(count >= 5 for count in counts)
    assert sum(counts) == 20


def test_identical_points_stay_in_one_cell():
    """Ten copies of one point cannot be split and give a single zero-area cell."""
    coords = np.zeros((10, 2))
    partition = partition_points(coords, min_count=3)

    assert partition.n_cells == 1
    cell = partition[0]
    assert cell.point_count == 10
    assert cell.rectangle.area == 0.0
    assert cell.depth == 0


def test_points_on_split_line_go_to_lower_cell():
    """A point exactly on the median belongs to the lower cell only."""
    coords = np.column_stack([np.arange(7, dtype=float), np.zeros(7)])
    partition = partition_points(coords, min_count=3)

    assert partition.n_cells == 2
    lower, upper = partition
    assert lower.rectangle.x_max == 3.0
    assert upper.rectangle.x_min == 3.0
    assert sorted(lower.indices.tolist()) == [0, 1, 2, 3]
    assert sorted(upper.indices.tolist()) == [4, 5, 6]
    assert partition.assignments[3] == 0


def test_small_input_is_not_split():
    """Fewer than 2 * min_count points return the root cell unsplit."""
    coords = np.array([[0, 0], [1, 5], [2, 1], [3, 3], [4, 2]], dtype=float)
    partition = partition_points(coords, min_count=3)

    assert partition.n_cells == 1
    assert partition[0].point_count == 5
    assert partition[0].rectangle == partition.root


def test_fewer_points_than_min_count():
    """Inputs smaller than min_count still come back as one cell with all points."""
    partition = partition_points([[0, 0], [1, 1]], min_count=5)

    assert partition.n_cells == 1
    assert partition[0].point_count == 2


def test_skewed_median_leaves_cell_unsplit():
    """A cut that would empty one side is refused."""
    coords = np.column_stack([[0.0, 5.0, 5.0, 5.0, 5.0, 5.0], np.zeros(6)])
    partition = partition_points(coords, min_count=2)

    assert partition.n_cells == 1


def test_weight_column_in_points():
    """A third column is read as the weight."""
    points = [(0, 0, 2.0), (1, 0, 3.0), (2, 0, 5.0)]
    partition = partition_points(points, min_count=1)

    assert partition.total_weight == pytest.approx(10.0)


def test_default_weight_is_one():
    partition = partition_points([[0, 0], [1, 1], [2, 2]], min_count=5)
    assert partition.total_weight == pytest.approx(3.0)


@pytest.mark.parametrize("tie_axis, expected", [("x", (0.0, 0.0, 0.5, 1.0)), ("y", (0.0, 0.0, 1.0, 0.5))])
def test_tie_axis_for_square_cells(tie_axis, expected):
    """Square cells are cut along the configured tie axis."""
    coords = [[0, 0], [1, 0], [0, 1], [1, 1]]
    partition = partition_points(coords, min_count=2, tie_axis=tie_axis)

    assert partition.n_cells == 2
    assert partition[0].rectangle.bounds == expected


@pytest.mark.parametrize("min_count", [0, -1, 2.5, True, "5", None])
def test_invalid_min_count(min_count):
    with pytest.raises(InvalidArgumentError):
        partition_points([[0, 0], [1, 1]], min_count=min_count)


@pytest.mark.parametrize(
    "points",
    [
        [],
        np.empty((0, 2)),
        [[0, 0, 1, 1]],
        [1, 2, 3],
        [[0, np.nan]],
        [[np.inf, 0]],
        [["a", "b"]],
    ],
)
def test_invalid_points(points):
    with pytest.raises(InvalidArgumentError):
        partition_points(points, min_count=1)


def test_invalid_weights():
    with pytest.raises(InvalidArgumentError):
        partition_points([[0, 0], [1, 1]], min_count=1, weights=[1.0])
    with pytest.raises(InvalidArgumentError):
        partition_points([[0, 0], [1, 1]], min_count=1, weights=[1.0, np.nan])
    with pytest.raises(InvalidArgumentError):
        partition_points([[0, 0], [1, 1]], min_count=1, weights=["a", "b"])
    with pytest.raises(InvalidArgumentError):
        AdaptivePartitioner(min_count=1).execute([[0, 0], [1, 1]], weights=[None, object()])


def test_invalid_argument_is_value_error():
    """Callers catching ValueError also catch validation failures."""
    with pytest.raises(ValueError):
        partition_points([], min_count=1)


def test_partitioner_rejects_bad_configuration():
    with pytest.raises(InvalidArgumentError):
        AdaptivePartitioner(min_count=0)
    with pytest.raises(InvalidArgumentError):
        AdaptivePartitioner(min_count=5, tie_axis="z")


def test_partitioner_matches_function(random_points):
    coords, weights = random_points
    partitioner = AdaptivePartitioner(min_count=20)

    assert partitioner.partition(coords, weights).to_frame().equals(
        partition_points(coords, 20, weights=weights).to_frame()
    )


def test_rectangle_validation_and_split():
    with pytest.raises(InvalidArgumentError):
        Rectangle(1, 0, 0, 1)

    lower, upper = Rectangle(0, 4, 0, 2).split("x", 1.0)
    assert lower == Rectangle(0, 1, 0, 2)
    assert upper == Rectangle(1, 4, 0, 2)

    with pytest.raises(InvalidArgumentError):
        Rectangle(0, 1, 0, 1).split("z", 0.5)
