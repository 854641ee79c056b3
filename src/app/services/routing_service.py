from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from src.app.ports.output import IGraphRepository
from src.domain.algorithms.geo_utils import haversine_distance_km
from src.domain.algorithms.pathfinding import find_shortest_path
from src.domain.exceptions import GraphNotFound, InvalidParameter
from src.domain.models import (
    CelestialBody,
    Connection,
    GeoPoint,
    Route,
    VertexGraph,
    radius_km,
)

from .routing_helpers import component_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GraphSummary:
    graph_id: str
    body: CelestialBody
    node_count: int
    edge_count: int
    component_count: int


@dataclass(slots=True)
class RoutingService:
    """Application service (use case) for graph building and route queries.

    This layer orchestrates ports. Domain stays pure.
    """

    graph_repository: IGraphRepository

    # Tuning knobs
    default_body: CelestialBody = CelestialBody.EARTH
    max_connections: int = 100_000

    def register_graph(
        self,
        *,
        connections: Sequence[Connection],
        body: CelestialBody | None = None,
    ) -> GraphSummary:
        if len(connections) > self.max_connections:
            raise InvalidParameter(
                f"Too many connections: {len(connections)} > {self.max_connections}"
            )

        graph = VertexGraph.build(connections, self._body(body))
        graph_id = self.graph_repository.add(graph)
        logger.info(
            "Registered graph %s on %s (%d nodes)",
            graph_id,
            graph.body.value,
            graph.node_count,
        )
        return self._summary(graph_id, graph)

    def describe_graph(self, *, graph_id: str) -> GraphSummary:
        return self._summary(graph_id, self._graph(graph_id))

    def graph_body(self, *, graph_id: str) -> CelestialBody:
        return self._graph(graph_id).body

    def calculate_route(
        self, *, graph_id: str, origin: GeoPoint, destination: GeoPoint
    ) -> Route | None:
        graph = self._graph(graph_id)
        segments = find_shortest_path(origin, destination, graph)
        if segments is None:
            return None
        return Route(
            origin=origin,
            destination=destination,
            body=graph.body,
            segments=tuple(segments),
        )

    def distance_km(
        self, *, a: GeoPoint, b: GeoPoint, body: CelestialBody | None = None
    ) -> float:
        return haversine_distance_km(a, b, radius_km(self._body(body)))

    def _body(self, body: CelestialBody | None) -> CelestialBody:
        return body if body is not None else self.default_body

    def _graph(self, graph_id: str) -> VertexGraph:
        graph = self.graph_repository.get(graph_id)
        if graph is None:
            raise GraphNotFound(f"Unknown graph: {graph_id}")
        return graph

    def _summary(self, graph_id: str, graph: VertexGraph) -> GraphSummary:
        return GraphSummary(
            graph_id=graph_id,
            body=graph.body,
            node_count=graph.node_count,
            edge_count=graph.edge_count,
            component_count=component_count(graph),
        )
