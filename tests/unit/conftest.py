from __future__ import annotations

import pytest

from src.domain.models import CelestialBody, Connection, GeoPoint, VertexGraph


def _chain(points: list[tuple[float, float]]) -> list[Connection]:
    return [
        Connection(
            start=GeoPoint(lat=a[0], lon=a[1]), finish=GeoPoint(lat=b[0], lon=b[1])
        )
        for a, b in zip(points, points[1:])
    ]


@pytest.fixture
def diagonal_chain() -> list[Connection]:
    return _chain([(float(i), float(i)) for i in range(11)])


@pytest.fixture
def grid_connections(diagonal_chain: list[Connection]) -> list[Connection]:
    """Three unit-step chains leaving (0, 0): north, east and diagonal."""

    north = _chain([(float(i), 0.0) for i in range(11)])
    east = _chain([(0.0, float(i)) for i in range(11)])
    return north + east + diagonal_chain


@pytest.fixture
def grid_graph(grid_connections: list[Connection]) -> VertexGraph:
    return VertexGraph.build(grid_connections, CelestialBody.EARTH)
