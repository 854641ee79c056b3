from .celestial import CelestialBody, radius_km
from .connection import Connection
from .geo import GeoPoint
from .route import Route
from .vertex_graph import GraphEdge, GraphNode, VertexGraph

__all__ = [
    "CelestialBody",
    "Connection",
    "GeoPoint",
    "GraphEdge",
    "GraphNode",
    "Route",
    "VertexGraph",
    "radius_km",
]
