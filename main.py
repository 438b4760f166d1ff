# -*- coding: utf-8 -*-
"""Testing Working Document!

Just a workspace document to walk through the library: synthetic fishing effort, two nested grids and
their intensity statistics.
"""

import logging

import geopandas as gpd

from nestedgrid import (
    AdaptivePartitioner,
    LayerManager,
    assign_cells,
    attach_area_stats,
    attach_basic_stats,
    attach_intensity,
    calculate_statistics_summary,
    create_sample_points,
)


def run_example(n_points=2000, seed=1):
    """Run Example."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    manager = LayerManager()

    print("Generating synthetic fishing effort...")
    coords, hours = create_sample_points(n_points=n_points, n_clusters=5, seed=seed)
    effort = gpd.GeoDataFrame(
        {"hours": hours},
        geometry=gpd.points_from_xy(coords[:, 0], coords[:, 1]),
        crs="EPSG:3035",
    )
    print(f"Points: {len(effort)}, total effort: {effort['hours'].sum():.1f} h")

    for min_count in (100, 25):
        print(f"\nPartitioning with min_count={min_count}...")
        partitioner = AdaptivePartitioner(min_count=min_count)
        layer = partitioner.execute_geodataframe(
            effort,
            weight_column="hours",
            layer_manager=manager,
            layer_name=f"Effort_min{min_count}",
        )
        print(layer)

        layer.attach_function(attach_intensity, name="intensity")
        layer.attach_function(attach_area_stats, name="area_stats")
        layer.attach_function(attach_basic_stats, name="point_stats", column="point_count")

        intensity = layer.get_function_result("intensity")
        print(f"  intensity (h/m^2): min {intensity['min']:.3e}, median {intensity['median']:.3e}, max {intensity['max']:.3e}")

        points_per_cell = layer.get_function_result("point_stats")
        print(f"  points per cell: {points_per_cell['min']} to {points_per_cell['max']}")

    fine = manager.active_layer
    joined = assign_cells(effort, fine.partition)
    busiest = joined.groupby("cell_id")["hours"].sum().idxmax()
    print(f"\nBusiest cell in {fine.name}: {busiest}")

    print("\nSummary:")
    for name, layer_summary in calculate_statistics_summary(manager).items():
        print(f"  {name}: {layer_summary['cell_count']} cells, {layer_summary['total_weight']:.1f} h")


if __name__ == "__main__":
    run_example()
