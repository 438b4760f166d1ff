# -*- coding: utf-8 -*-
"""Spatial statistics for partition layers.

The main one is intensity: the weight held by a cell divided by its area, which turns summed
fishing effort into effort per unit area and makes cells of different sizes comparable.
"""

import numpy as np

from ..exceptions import InvalidArgumentError


def attach_intensity(layer, weight_column="weight_sum", area_column="area_units", output_column="intensity"):
    """Calculate weight per unit area for every cell in a layer.

    Cells with zero area (all points on a line or at one location) get NaN.

    Parameters:
    -----------
    layer : Layer
        Layer to calculate intensity for
    weight_column : str
        Column with the summed weight of each cell
    area_column : str
        Column with the area of each cell
    output_column : str
        Column to store the intensity in

    Returns:
    --------
    stats : dict
        Summary of the intensity values
    """
    if layer.objects is None:
        raise InvalidArgumentError("Layer has no cell objects")

    for column in (weight_column, area_column):
        if column not in layer.objects.columns:
            raise InvalidArgumentError(f"Column '{column}' not found in layer objects")

    area = layer.objects[area_column].astype(float)
    layer.objects[output_column] = layer.objects[weight_column] / area.where(area > 0, np.nan)

    values = layer.objects[output_column]
    stats = {
        "min": values.min(),
        "max": values.max(),
        "mean": values.mean(),
        "median": values.median(),
        "zero_area_cells": int(values.isna().sum()),
    }

    return stats


def attach_area_stats(layer, area_column="area_units"):
    """Calculate area statistics for the cells in a layer.

    Parameters:
    -----------
    layer : Layer
        Layer to calculate statistics for
    area_column : str
        Column containing area values

    Returns:
    --------
    stats : dict
        Dictionary with area statistics
    """
    if layer.objects is None or area_column not in layer.objects.columns:
        return {}

    areas = layer.objects[area_column]

    stats = {
        "total_area": areas.sum(),
        "min_area": areas.min(),
        "max_area": areas.max(),
        "mean_area": areas.mean(),
        "median_area": areas.median(),
        "std_area": areas.std(),
    }

    return stats
