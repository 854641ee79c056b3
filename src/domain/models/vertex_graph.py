from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from src.domain.exceptions import DataItemIncorrect

from .celestial import CelestialBody, radius_km
from .connection import Connection
from .geo import GeoPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GraphEdge:
    neighbor_index: int
    cost: float


@dataclass(frozen=True, slots=True)
class GraphNode:
    coordinates: GeoPoint
    adjacency: tuple[GraphEdge, ...] = ()


@dataclass(frozen=True, slots=True)
class VertexGraph:
    """Undirected weighted graph over the distinct points of a connection set.

    Nodes live in a single tuple and refer to each other by position, so
    ``GraphEdge.neighbor_index`` is always an index into ``nodes``. The
    adjacency relation is symmetric and node identity is exact coordinate
    equality. Instances are immutable once built.
    """

    body: CelestialBody
    nodes: tuple[GraphNode, ...]

    @classmethod
    def build(
        cls, connections: Sequence[Connection], body: CelestialBody
    ) -> VertexGraph:
        """Index ``connections`` into a graph.

        Raises DataItemIncorrect for an empty connection list or for a
        connection whose endpoints are equal. Validation runs before any
        node is created, so a failed build never yields a partial graph.
        """

        if not connections:
            raise DataItemIncorrect("Connection list is empty")
        for position, connection in enumerate(connections):
            if connection.start == connection.finish:
                raise DataItemIncorrect(
                    f"Connection #{position} starts and finishes at {connection.start}"
                )

        radius = radius_km(body)
        coordinates: list[GeoPoint] = []
        index_by_point: dict[GeoPoint, int] = {}
        adjacency: list[list[GraphEdge]] = []

        def index_for(point: GeoPoint) -> int:
            index = index_by_point.get(point)
            if index is None:
                index = len(coordinates)
                index_by_point[point] = index
                coordinates.append(point)
                adjacency.append([])
            return index

        def link(source: int, target: int, cost: float) -> None:
            if any(edge.neighbor_index == target for edge in adjacency[source]):
                return
            adjacency[source].append(GraphEdge(neighbor_index=target, cost=cost))

        for connection in connections:
            start_index = index_for(connection.start)
            finish_index = index_for(connection.finish)
            cost = connection.cost(radius)
            link(start_index, finish_index, cost)
            link(finish_index, start_index, cost)

        nodes = tuple(
            GraphNode(coordinates=point, adjacency=tuple(edges))
            for point, edges in zip(coordinates, adjacency)
        )
        graph = cls(body=body, nodes=nodes)
        logger.debug(
            "Built vertex graph on %s: %d connections, %d nodes, %d edges",
            body.value,
            len(connections),
            graph.node_count,
            graph.edge_count,
        )
        return graph

    @property
    def radius_km(self) -> float:
        return radius_km(self.body)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        # Every undirected edge is stored once at each endpoint.
        return sum(len(node.adjacency) for node in self.nodes) // 2

    def index_of(self, point: GeoPoint) -> int | None:
        for i, node in enumerate(self.nodes):
            if node.coordinates == point:
                return i
        return None

    def neighbors(self, index: int) -> tuple[GraphEdge, ...]:
        return self.nodes[index].adjacency
