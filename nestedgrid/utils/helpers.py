# -*- coding: utf-8 -*-
"""Helpers , Aren't they useful ?"""

import numpy as np

from ..exceptions import InvalidArgumentError


def create_sample_points(n_points=500, n_clusters=4, extent=(0.0, 100_000.0, 0.0, 80_000.0), seed=None):
    """Create synthetic fishing-effort points for testing.

    Points are drawn around a few fishing grounds (gaussian clusters) plus a uniform background, and each
    point carries a positive effort weight in hours.

    Parameters:
    -----------
    n_points : int
        Number of points to generate
    n_clusters : int
        Number of fishing grounds
    extent : tuple
        (x_min, x_max, y_min, y_max) of the area, in metres
    seed : int, optional
        Seed for the random generator

    Returns:
    --------
    coords : numpy.ndarray
        (n_points, 2) array of x, y coordinates inside ``extent``
    weights : numpy.ndarray
        (n_points,) array of effort hours
    """
    if n_points <= 0:
        raise InvalidArgumentError("n_points must be positive")

    rng = np.random.default_rng(seed)
    x_min, x_max, y_min, y_max = extent
    width, height = x_max - x_min, y_max - y_min

    n_background = n_points // 5 if n_clusters > 0 else n_points
    n_clustered = n_points - n_background

    background = np.column_stack(
        [rng.uniform(x_min, x_max, n_background), rng.uniform(y_min, y_max, n_background)]
    )

    parts = [background]
    if n_clustered:
        centers = np.column_stack(
            [rng.uniform(x_min, x_max, n_clusters), rng.uniform(y_min, y_max, n_clusters)]
        )
        labels = rng.integers(0, n_clusters, n_clustered)
        spread = np.array([width, height]) * 0.05
        parts.append(centers[labels] + rng.normal(0.0, 1.0, (n_clustered, 2)) * spread)

    coords = np.vstack(parts)
    # points outside the extent wrap around to the opposite edge
    coords[:, 0] = x_min + np.mod(coords[:, 0] - x_min, width)
    coords[:, 1] = y_min + np.mod(coords[:, 1] - y_min, height)

    weights = rng.gamma(shape=2.0, scale=1.5, size=n_points)

    return coords, weights


def calculate_statistics_summary(layer_manager):
    """Calculate summary statistics for all layers in a layer manager.

    Parameters:
    -----------
    layer_manager : LayerManager
        Layer manager containing layers

    Returns:
    --------
    summary : dict
        Dictionary with summary statistics, keyed by layer name. Layers sharing a name are keyed by layer ID.
    """
    summary = {}

    for layer in layer_manager.layers.values():
        key = layer.name if layer.name not in summary else layer.id

        layer_summary = {
            "type": layer.type,
            "created_at": str(layer.created_at),
            "parent": layer.parent.name if layer.parent else None,
        }

        if layer.objects is not None:
            layer_summary["cell_count"] = len(layer.objects)

            if "point_count" in layer.objects.columns:
                layer_summary["point_count"] = int(layer.objects["point_count"].sum())

            if "weight_sum" in layer.objects.columns:
                layer_summary["total_weight"] = float(layer.objects["weight_sum"].sum())

            if "area_units" in layer.objects.columns:
                layer_summary["total_area"] = float(layer.objects["area_units"].sum())
                layer_summary["mean_area"] = float(layer.objects["area_units"].mean())

        if layer.attached_functions:
            layer_summary["functions"] = list(layer.attached_functions.keys())

        layer_summary["id"] = layer.id
        summary[key] = layer_summary

    return summary
