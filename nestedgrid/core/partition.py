# -*- coding: utf-8 -*-
"""The Partition class, the result of one partitioner run.

A partition owns the final cells, the root rectangle they tile and a per-point assignment array,
so every input point can be traced back to exactly one cell.
"""

import geopandas as gpd
import numpy as np
import pandas as pd

CELL_COLUMNS = [
    "cell_id",
    "x_min",
    "x_max",
    "y_min",
    "y_max",
    "depth",
    "point_count",
    "weight_sum",
    "area_units",
]


class Partition:
    """Ordered collection of non-overlapping cells covering a root rectangle."""

    def __init__(self, cells, root, min_count, n_points):
        """Initialize a Partition.

        Parameters:
        -----------
        cells : list of Cell
            Final cells, in output order. The position of a cell is its id.
        root : Rectangle
            Bounding rectangle of all input points
        min_count : int
            Minimum count threshold the partition was built with
        n_points : int
            Number of input points
        """
        self.cells = list(cells)
        self.root = root
        self.min_count = min_count
        self.n_points = n_points

        self.assignments = np.full(n_points, -1, dtype=np.int64)
        for cell_id, cell in enumerate(self.cells):
            self.assignments[cell.indices] = cell_id

    @property
    def n_cells(self):
        return len(self.cells)

    @property
    def total_count(self):
        return sum(cell.point_count for cell in self.cells)

    @property
    def total_weight(self):
        return float(sum(cell.weight_sum for cell in self.cells))

    @property
    def max_depth(self):
        return max(cell.depth for cell in self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __len__(self):
        return len(self.cells)

    def __getitem__(self, cell_id):
        return self.cells[cell_id]

    def to_frame(self):
        """Tabulate the cells.

        Returns:
        --------
        df : pandas.DataFrame
            One row per cell with its bounds, depth, point count, weight sum and area
        """
        rows = []
        for cell_id, cell in enumerate(self.cells):
            r = cell.rectangle
            rows.append(
                {
                    "cell_id": cell_id,
                    "x_min": r.x_min,
                    "x_max": r.x_max,
                    "y_min": r.y_min,
                    "y_max": r.y_max,
                    "depth": cell.depth,
                    "point_count": cell.point_count,
                    "weight_sum": cell.weight_sum,
                    "area_units": r.area,
                }
            )
        return pd.DataFrame(rows, columns=CELL_COLUMNS)

    def to_geodataframe(self, crs=None):
        """Convert the cells to a GeoDataFrame of rectangular polygons.

        Parameters:
        -----------
        crs : pyproj.CRS or str, optional
            Coordinate reference system of the input points

        Returns:
        --------
        gdf : geopandas.GeoDataFrame
            Cell table from ``to_frame`` with a polygon geometry per cell
        """
        geometries = [cell.rectangle.to_polygon() for cell in self.cells]
        return gpd.GeoDataFrame(self.to_frame(), geometry=geometries, crs=crs)

    def __str__(self):
        return f"Partition (cells: {self.n_cells}, points: {self.n_points}, min_count: {self.min_count})"
