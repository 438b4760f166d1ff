# -*- coding: utf-8 -*-
"""Basic statistics for partition layers."""

import numpy as np

from ..exceptions import InvalidArgumentError


def attach_basic_stats(layer, column, prefix=None):
    """Attach basic statistics for a cell column to a layer.

    Parameters:
    -----------
    layer : Layer
        Layer to attach statistics to
    column : str
        Column to calculate statistics for, e.g. "point_count" or "weight_sum"
    prefix : str, optional
        Prefix for result names

    Returns:
    --------
    stats : dict
        Dictionary with calculated statistics
    """
    if layer.objects is None or column not in layer.objects.columns:
        raise InvalidArgumentError(f"Column '{column}' not found in layer objects")

    prefix = f"{prefix}_" if prefix else ""

    values = layer.objects[column].dropna()

    percentiles = [10, 25, 50, 75, 90]

    if values.empty:
        stats = {f"{prefix}{name}": np.nan for name in ("min", "max", "mean", "median", "std", "sum")}
        stats[f"{prefix}count"] = 0
        for p in percentiles:
            stats[f"{prefix}percentile_{p}"] = np.nan
        return stats

    stats = {
        f"{prefix}min": values.min(),
        f"{prefix}max": values.max(),
        f"{prefix}mean": values.mean(),
        f"{prefix}median": values.median(),
        f"{prefix}std": values.std(),
        f"{prefix}sum": values.sum(),
        f"{prefix}count": len(values),
    }

    for p in percentiles:
        stats[f"{prefix}percentile_{p}"] = np.percentile(values, p)

    return stats


def attach_count(layer):
    """Count the cells in a layer."""
    if layer.objects is None:
        return 0

    return layer.objects.shape[0]
