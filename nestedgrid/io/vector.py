# -*- coding: utf-8 -*-
"""Moves points and cells between the partitioner and geopandas.

Reading and writing files is left to geopandas itself (``gpd.read_file`` / ``GeoDataFrame.to_file``);
the functions here only convert between GeoDataFrames and the arrays the partitioner works on.
"""

import logging

import numpy as np

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def points_from_geodataframe(gdf, weight_column=None):
    """Extract coordinates and weights from a point GeoDataFrame.

    Parameters:
    -----------
    gdf : geopandas.GeoDataFrame
        Point features, ideally in a projected CRS
    weight_column : str, optional
        Column holding per-point weights. Every point weighs 1 when omitted.

    Returns:
    --------
    coords : numpy.ndarray
        (N, 2) array of x, y coordinates
    weights : numpy.ndarray
        (N,) array of weights
    crs : pyproj.CRS or None
        CRS of the input frame
    """
    if gdf is None or len(gdf) == 0:
        raise InvalidArgumentError("Cannot partition an empty point set")

    n_missing = int(gdf.geometry.isna().sum())
    if n_missing:
        raise InvalidArgumentError(f"Missing geometries: {n_missing} of {len(gdf)} features have no geometry")

    geom_types = set(gdf.geometry.geom_type.unique())
    if geom_types != {"Point"}:
        raise InvalidArgumentError(f"Expected only Point geometries, got {sorted(geom_types)}")

    if gdf.crs is not None and gdf.crs.is_geographic:
        logger.warning(
            "Points are in geographic CRS %s; cell areas will be in squared degrees. "
            "Reproject with GeoDataFrame.to_crs for planar units.",
            gdf.crs.to_string(),
        )

    coords = np.column_stack([gdf.geometry.x.to_numpy(), gdf.geometry.y.to_numpy()])

    if weight_column is None:
        weights = np.ones(len(gdf))
    elif weight_column not in gdf.columns:
        raise InvalidArgumentError(f"Weight column '{weight_column}' not found")
    else:
        try:
            weights = gdf[weight_column].to_numpy(dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Weight column '{weight_column}' must be numeric: {exc}") from exc

    return coords, weights, gdf.crs


def partition_to_geodataframe(partition, crs=None):
    """Convert a Partition to a GeoDataFrame of cell polygons.

    Parameters:
    -----------
    partition : Partition
        Result of the partitioner
    crs : pyproj.CRS or str, optional
        Coordinate reference system of the input points

    Returns:
    --------
    gdf : geopandas.GeoDataFrame
        One rectangle per cell with its bounds, depth, point count, weight sum and area
    """
    return partition.to_geodataframe(crs=crs)


def assign_cells(gdf, partition, column="cell_id"):
    """Join every input point to the cell that owns it.

    Parameters:
    -----------
    gdf : geopandas.GeoDataFrame
        The points the partition was built from, in the same order
    partition : Partition
        Result of partitioning ``gdf``
    column : str
        Name of the output cell id column

    Returns:
    --------
    gdf : geopandas.GeoDataFrame
        Copy of the input with the cell id of each point
    """
    if len(gdf) != partition.n_points:
        raise InvalidArgumentError(f"Partition was built from {partition.n_points} points, got {len(gdf)}")

    result = gdf.copy()
    result[column] = partition.assignments
    return result
