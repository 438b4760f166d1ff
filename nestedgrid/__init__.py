# -*- coding: utf-8 -*-
# nestedgrid/__init__.py

"""
NestedGrid: adaptive rectangular grids for point-intensity mapping
==================================================================

NestedGrid partitions a set of weighted points (for example fishing positions with hours of effort)
into a nested grid of unequal rectangles, each holding roughly the same number of points, so that
intensity can be mapped at a resolution that follows the density of the data.

Key features:
- Median-split adaptive partitioning with a minimum count per cell
- Cells as shapely polygons in a GeoDataFrame
- Layer management for comparing grids
- Intensity and area statistics
"""

__version__ = "0.1.0"

from .exceptions import InvalidArgumentError, LayerNotFoundError, NestedGridError

from .core.geometry import Cell, Rectangle
from .core.layer import Layer, LayerManager
from .core.partition import Partition
from .core.partitioner import AdaptivePartitioner, partition_points

from .io.vector import assign_cells, partition_to_geodataframe, points_from_geodataframe

from .stats.basic import attach_basic_stats, attach_count
from .stats.spatial import attach_area_stats, attach_intensity

from .utils.helpers import calculate_statistics_summary, create_sample_points
