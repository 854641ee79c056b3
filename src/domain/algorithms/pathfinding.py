from __future__ import annotations

import logging

from src.domain.models import Connection, GeoPoint, VertexGraph

from .dijkstra import dijkstra, reconstruct_connections
from .nearest import nearest_node_index

logger = logging.getLogger(__name__)


def find_shortest_path(
    start: GeoPoint, finish: GeoPoint, graph: VertexGraph
) -> list[Connection] | None:
    """Shortest chain of connections between the nodes nearest to two points.

    Returns None instead of raising when there is nothing to route: equal
    query points, an empty graph, both points snapping to the same node, or
    a finish node in a different component than the start node.
    """

    if start == finish:
        return None
    if not graph.nodes:
        return None

    start_index = nearest_node_index(graph, start)
    finish_index = nearest_node_index(graph, finish)
    if start_index == finish_index:
        logger.debug("%s and %s snap to node %d", start, finish, start_index)
        return None

    result = dijkstra(graph, start_index, finish_index)
    if not result.reached(finish_index):
        return None

    return reconstruct_connections(
        graph, result, start_index=start_index, finish_index=finish_index
    )
