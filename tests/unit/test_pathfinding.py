from __future__ import annotations

import pytest

from src.domain.algorithms.nearest import nearest_node_index
from src.domain.algorithms.pathfinding import find_shortest_path
from src.domain.exceptions import DataItemIncomplete
from src.domain.models import CelestialBody, Connection, GeoPoint, VertexGraph


def _p(lat: float, lon: float) -> GeoPoint:
    return GeoPoint(lat=lat, lon=lon)


def test_nearest_node_picks_closest_by_geodesic_distance(
    grid_graph: VertexGraph,
) -> None:
    i = nearest_node_index(grid_graph, _p(4.9, 5.2))
    assert grid_graph.nodes[i].coordinates == _p(5.0, 5.0)


def test_nearest_node_ties_resolve_to_first_inserted() -> None:
    graph = VertexGraph.build(
        [Connection(start=_p(0.0, -1.0), finish=_p(0.0, 1.0))], CelestialBody.EARTH
    )
    assert nearest_node_index(graph, _p(0.0, 0.0)) == 0


def test_nearest_node_requires_nodes() -> None:
    with pytest.raises(DataItemIncomplete):
        nearest_node_index(VertexGraph(body=CelestialBody.EARTH, nodes=()), _p(0, 0))


def test_find_shortest_path_snaps_query_points_to_graph(
    grid_graph: VertexGraph, diagonal_chain: list[Connection]
) -> None:
    path = find_shortest_path(_p(-0.2, 0.1), _p(10.3, 10.1), grid_graph)
    assert path == diagonal_chain


def test_segments_share_endpoints(grid_graph: VertexGraph) -> None:
    path = find_shortest_path(_p(10.0, 0.0), _p(0.0, 10.0), grid_graph)

    assert path is not None
    assert path[0].start == _p(10.0, 0.0)
    assert path[-1].finish == _p(0.0, 10.0)
    for before, after in zip(path, path[1:]):
        assert before.finish == after.start


def test_identical_query_points_have_no_path(grid_graph: VertexGraph) -> None:
    assert find_shortest_path(_p(3.0, 3.0), _p(3.0, 3.0), grid_graph) is None


def test_empty_graph_has_no_path() -> None:
    graph = VertexGraph(body=CelestialBody.EARTH, nodes=())
    assert find_shortest_path(_p(0.0, 0.0), _p(1.0, 1.0), graph) is None


def test_points_snapping_to_same_node_have_no_path() -> None:
    graph = VertexGraph.build(
        [Connection(start=_p(50.0, 10.0), finish=_p(-30.0, 150.0))],
        CelestialBody.EARTH,
    )
    assert find_shortest_path(_p(60.0, 20.0), _p(60.0, 20.000001), graph) is None


def test_disconnected_components_have_no_path() -> None:
    graph = VertexGraph.build(
        [
            Connection(start=_p(0.0, 0.0), finish=_p(0.0, 1.0)),
            Connection(start=_p(40.0, 40.0), finish=_p(40.0, 41.0)),
        ],
        CelestialBody.EARTH,
    )
    assert find_shortest_path(_p(0.0, 0.0), _p(40.0, 41.0), graph) is None
