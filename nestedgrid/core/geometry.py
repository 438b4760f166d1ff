# -*- coding: utf-8 -*-
"""Axis-aligned rectangles and the cells built on top of them.

A Rectangle is a plain bounding box in planar coordinates. A Cell pairs a rectangle with the indices
of the input points it owns and the aggregates (count, weight sum) the partitioner reports.
"""

import numpy as np
from shapely.geometry import box

from ..exceptions import InvalidArgumentError


class Rectangle:
    """Axis-aligned bounding box defined by (x_min, x_max, y_min, y_max)."""

    def __init__(self, x_min, x_max, y_min, y_max):
        """Initialize a Rectangle.

        Parameters:
        -----------
        x_min, x_max : float
            Extent along the x axis, x_min <= x_max
        y_min, y_max : float
            Extent along the y axis, y_min <= y_max
        """
        if x_min > x_max or y_min > y_max:
            raise InvalidArgumentError(f"Invalid rectangle bounds: x=({x_min}, {x_max}), y=({y_min}, {y_max})")

        self._x_min = float(x_min)
        self._x_max = float(x_max)
        self._y_min = float(y_min)
        self._y_max = float(y_max)

    @classmethod
    def from_points(cls, coords):
        """Build the minimal rectangle enclosing an (N, 2) coordinate array."""
        coords = np.asarray(coords, dtype=float)
        if coords.ndim != 2 or coords.shape[0] == 0:
            raise InvalidArgumentError("Cannot build a rectangle from an empty point set")

        x_min, y_min = coords[:, :2].min(axis=0)
        x_max, y_max = coords[:, :2].max(axis=0)
        return cls(x_min, x_max, y_min, y_max)

    @property
    def x_min(self):
        return self._x_min

    @property
    def x_max(self):
        return self._x_max

    @property
    def y_min(self):
        return self._y_min

    @property
    def y_max(self):
        return self._y_max

    @property
    def width(self):
        return self._x_max - self._x_min

    @property
    def height(self):
        return self._y_max - self._y_min

    @property
    def area(self):
        return self.width * self.height

    @property
    def bounds(self):
        """Bounds in shapely order (x_min, y_min, x_max, y_max)."""
        return (self._x_min, self._y_min, self._x_max, self._y_max)

    def contains(self, x, y):
        """Check whether a point lies inside the rectangle, edges included."""
        return self._x_min <= x <= self._x_max and self._y_min <= y <= self._y_max

    def split(self, axis, value):
        """Cut the rectangle at ``value`` along ``axis`` ("x" or "y").

        Returns:
        --------
        lower, upper : Rectangle
            The left/below and right/above halves. They share the cut edge.
        """
        if axis == "x":
            return (
                Rectangle(self._x_min, value, self._y_min, self._y_max),
                Rectangle(value, self._x_max, self._y_min, self._y_max),
            )
        if axis == "y":
            return (
                Rectangle(self._x_min, self._x_max, self._y_min, value),
                Rectangle(self._x_min, self._x_max, value, self._y_max),
            )
        raise InvalidArgumentError(f"Unknown split axis: {axis!r}")

    def to_polygon(self):
        """Convert the rectangle to a shapely Polygon."""
        return box(*self.bounds)

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.bounds == other.bounds

    def __hash__(self):
        return hash(self.bounds)

    def __repr__(self):
        return f"Rectangle(x_min={self._x_min}, x_max={self._x_max}, y_min={self._y_min}, y_max={self._y_max})"


class Cell:
    """A Rectangle together with the input points that fall within it."""

    def __init__(self, rectangle, indices, weight_sum, depth=0):
        """Initialize a Cell.

        Parameters:
        -----------
        rectangle : Rectangle
            Extent of the cell
        indices : numpy.ndarray
            Indices into the input point array owned by this cell
        weight_sum : float
            Sum of the weights of the owned points
        depth : int
            Number of splits between the root rectangle and this cell
        """
        self.rectangle = rectangle
        self.indices = indices
        self.weight_sum = float(weight_sum)
        self.depth = depth

    @property
    def point_count(self):
        return int(len(self.indices))

    def __str__(self):
        r = self.rectangle
        return (
            f"Cell x=[{r.x_min}, {r.x_max}] y=[{r.y_min}, {r.y_max}] "
            f"(points: {self.point_count}, weight: {self.weight_sum}, depth: {self.depth})"
        )
