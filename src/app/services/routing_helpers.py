from __future__ import annotations

import networkx as nx

from src.domain.models import VertexGraph


def to_networkx(graph: VertexGraph) -> nx.Graph:
    """Undirected networkx view of a vertex graph.

    Nodes keep their index as id and carry lon/lat in x/y; edges carry the
    geodesic cost in km as ``length``.
    """

    g = nx.Graph()
    for i, node in enumerate(graph.nodes):
        g.add_node(i, x=node.coordinates.lon, y=node.coordinates.lat)
    for i, node in enumerate(graph.nodes):
        for edge in node.adjacency:
            g.add_edge(i, edge.neighbor_index, length=edge.cost)
    return g


def component_count(graph: VertexGraph) -> int:
    if not graph.nodes:
        return 0
    return nx.number_connected_components(to_networkx(graph))
