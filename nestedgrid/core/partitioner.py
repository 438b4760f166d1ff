# -*- coding: utf-8 -*-
"""Implements the nested adaptive grid: median splits of a bounding rectangle into unequal cells.

Starting from the bounding box of a weighted point set, every cell that still holds at least twice
``min_count`` points is cut at the median coordinate along its longer side. A cut is kept only when both
halves retain ``min_count`` points, so the refinement stops at a fixed point where no cell can be split
further. Cells keep index arrays into one shared coordinate array rather than copies of the points.
"""

import logging

import numpy as np

from ..exceptions import InvalidArgumentError
from ..io.vector import points_from_geodataframe
from .geometry import Cell, Rectangle
from .layer import Layer
from .partition import Partition

logger = logging.getLogger(__name__)

SPLIT_AXES = ("x", "y")


def _check_min_count(min_count):
    if isinstance(min_count, bool) or not isinstance(min_count, (int, np.integer)):
        raise InvalidArgumentError(f"min_count must be a positive integer, got {min_count!r}")
    if min_count <= 0:
        raise InvalidArgumentError(f"min_count must be a positive integer, got {min_count}")
    return int(min_count)


def _check_tie_axis(tie_axis):
    if tie_axis not in SPLIT_AXES:
        raise InvalidArgumentError(f"tie_axis must be one of {SPLIT_AXES}, got {tie_axis!r}")
    return tie_axis


def _prepare_points(points, weights=None):
    """Validate input points and split them into coordinates and weights.

    Parameters:
    -----------
    points : array-like
        (N, 2) array of (x, y) or (N, 3) array of (x, y, weight)
    weights : array-like, optional
        Per-point weights. Overrides a third column in ``points``.

    Returns:
    --------
    coords : numpy.ndarray
        (N, 2) float array
    weights : numpy.ndarray
        (N,) float array, ones when no weights were given
    """
    try:
        data = np.asarray(points, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Points must be numeric (x, y[, weight]) records: {exc}") from exc

    if data.size == 0:
        raise InvalidArgumentError("Cannot partition an empty point set")
    if data.ndim != 2 or data.shape[1] not in (2, 3):
        raise InvalidArgumentError(f"Points must have shape (N, 2) or (N, 3), got {data.shape}")

    coords = np.ascontiguousarray(data[:, :2])

    if weights is not None:
        try:
            weights = np.asarray(weights, dtype=float).ravel()
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Weights must be numeric: {exc}") from exc
        if weights.shape[0] != coords.shape[0]:
            raise InvalidArgumentError(f"Got {weights.shape[0]} weights for {coords.shape[0]} points")
    elif data.shape[1] == 3:
        weights = data[:, 2].copy()
    else:
        weights = np.ones(coords.shape[0])

    if not np.all(np.isfinite(coords)):
        raise InvalidArgumentError("Point coordinates must be finite")
    if not np.all(np.isfinite(weights)):
        raise InvalidArgumentError("Point weights must be finite")

    return coords, weights


def _split_axis(rectangle, tie_axis):
    if rectangle.width > rectangle.height:
        return "x"
    if rectangle.height > rectangle.width:
        return "y"
    return tie_axis


def _split_cell(cell, coords, weights, min_count, tie_axis):
    """Try to cut a cell at its median. Returns (lower, upper) cells, or None if the cell is final."""
    if cell.point_count < 2 * min_count:
        return None

    axis = _split_axis(cell.rectangle, tie_axis)
    values = coords[cell.indices, SPLIT_AXES.index(axis)]
    median = float(np.median(values))

    below = values <= median
    n_lower = int(np.count_nonzero(below))
    n_upper = cell.point_count - n_lower

    if n_lower < min_count or n_upper < min_count:
        logger.debug(
            "Keeping cell at depth %d unsplit: median %s=%s leaves %d/%d points",
            cell.depth,
            axis,
            median,
            n_lower,
            n_upper,
        )
        return None

    lower_rect, upper_rect = cell.rectangle.split(axis, median)
    lower_idx = cell.indices[below]
    upper_idx = cell.indices[~below]

    return (
        Cell(lower_rect, lower_idx, weights[lower_idx].sum(), depth=cell.depth + 1),
        Cell(upper_rect, upper_idx, weights[upper_idx].sum(), depth=cell.depth + 1),
    )


def partition_points(points, min_count, weights=None, tie_axis="x"):
    """Partition a weighted point set into a nested adaptive grid.

    Parameters:
    -----------
    points : array-like
        (N, 2) array of (x, y) or (N, 3) array of (x, y, weight), in planar units
    min_count : int
        Minimum number of points allowed in any cell produced by a split
    weights : array-like, optional
        Per-point weights, overriding a weight column in ``points``
    tie_axis : str
        Axis ("x" or "y") used when a cell is exactly as wide as it is tall

    Returns:
    --------
    partition : Partition
        Final cells in depth-first order, lower/left halves first
    """
    min_count = _check_min_count(min_count)
    tie_axis = _check_tie_axis(tie_axis)
    coords, weights = _prepare_points(points, weights)

    n_points = coords.shape[0]
    root = Rectangle.from_points(coords)

    work = [Cell(root, np.arange(n_points), weights.sum(), depth=0)]
    leaves = []
    while work:
        cell = work.pop()
        children = _split_cell(cell, coords, weights, min_count, tie_axis)
        if children is None:
            leaves.append(cell)
            continue
        lower, upper = children
        work.append(upper)
        work.append(lower)

    partition = Partition(leaves, root, min_count, n_points)
    logger.info(
        "Partitioned %d points into %d cells (min_count=%d, max depth %d)",
        n_points,
        partition.n_cells,
        min_count,
        partition.max_depth,
    )
    return partition


class AdaptivePartitioner:
    """Nested adaptive grid partitioner.

    Recursively splits the bounding rectangle of a point set at median coordinates along the longer
    side until every cell holds fewer than ``2 * min_count`` points, or cannot be cut without leaving
    a half with fewer than ``min_count`` points.
    """

    def __init__(self, min_count=10, tie_axis="x"):
        """Initialize the partitioner.

        Parameters:
        -----------
        min_count : int
            Minimum number of points per cell. Smaller values give finer grids.
        tie_axis : str, "x" or "y"
            Split axis for square cells
        """
        self.min_count = _check_min_count(min_count)
        self.tie_axis = _check_tie_axis(tie_axis)

    def partition(self, points, weights=None):
        """Run the partitioner and return the raw Partition."""
        return partition_points(points, self.min_count, weights=weights, tie_axis=self.tie_axis)

    def execute(self, points, weights=None, crs=None, layer_manager=None, layer_name=None):
        """Partition points and create a layer with the resulting cells.

        Parameters:
        -----------
        points : array-like
            (N, 2) array of (x, y) or (N, 3) array of (x, y, weight)
        weights : array-like, optional
            Per-point weights
        crs : pyproj.CRS or str, optional
            Coordinate reference system of the points, carried onto the cell polygons
        layer_manager : LayerManager, optional
            Layer manager to add the result layer to
        layer_name : str, optional
            Name for the result layer

        Returns:
        --------
        layer : Layer
            Layer whose objects are the cell polygons
        """
        partition = self.partition(points, weights=weights)

        if not layer_name:
            layer_name = f"Partition_min{self.min_count}"

        layer = Layer(name=layer_name, type="partition")
        layer.partition = partition
        layer.crs = crs
        layer.objects = partition.to_geodataframe(crs=crs)
        layer.metadata = {
            "min_count": self.min_count,
            "tie_axis": self.tie_axis,
            "n_points": partition.n_points,
            "n_cells": partition.n_cells,
            "max_depth": partition.max_depth,
            "total_weight": partition.total_weight,
            "bounds": partition.root.bounds,
        }

        if layer_manager:
            layer_manager.add_layer(layer)

        return layer

    def execute_geodataframe(self, gdf, weight_column=None, layer_manager=None, layer_name=None):
        """Partition the points of a GeoDataFrame.

        Parameters:
        -----------
        gdf : geopandas.GeoDataFrame
            Point features in a projected CRS
        weight_column : str, optional
            Column holding per-point weights. Every point weighs 1 when omitted.
        layer_manager : LayerManager, optional
            Layer manager to add the result layer to
        layer_name : str, optional
            Name for the result layer

        Returns:
        --------
        layer : Layer
            Layer whose objects are the cell polygons, in the CRS of ``gdf``
        """
        coords, weights, crs = points_from_geodataframe(gdf, weight_column=weight_column)
        return self.execute(coords, weights=weights, crs=crs, layer_manager=layer_manager, layer_name=layer_name)

    def __repr__(self):
        return f"AdaptivePartitioner(min_count={self.min_count}, tie_axis={self.tie_axis!r})"
