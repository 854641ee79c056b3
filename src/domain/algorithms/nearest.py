from __future__ import annotations

from src.domain.exceptions import DataItemIncomplete
from src.domain.models import GeoPoint, VertexGraph

from .geo_utils import haversine_distance_km


def nearest_node_index(graph: VertexGraph, point: GeoPoint) -> int:
    """Index of the graph node closest to ``point`` along the surface.

    Linear scan in node order; on equal distances the earliest node wins.
    """

    if not graph.nodes:
        raise DataItemIncomplete("Vertex graph contains no nodes")

    radius = graph.radius_km
    best_i = 0
    best_d = float("inf")
    for i, node in enumerate(graph.nodes):
        d = haversine_distance_km(point, node.coordinates, radius)
        if d < best_d:
            best_d = d
            best_i = i
    return best_i
