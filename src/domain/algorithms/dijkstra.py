from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass

from src.domain.models import Connection, VertexGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DijkstraResult:
    cost_by_node: dict[int, float]
    prev_by_node: dict[int, int]
    settled: frozenset[int]

    def reached(self, node_index: int) -> bool:
        return node_index in self.settled


def dijkstra(graph: VertexGraph, start_index: int, finish_index: int) -> DijkstraResult:
    """Single-source shortest path search from ``start_index``.

    The search stops as soon as ``finish_index`` is settled or when no
    unsettled node is reachable anymore. The frontier is a binary heap of
    ``(cost, node_index)`` entries; stale entries are skipped when popped.
    Among nodes with equal cost the lowest index is settled first.
    """

    cost: dict[int, float] = {start_index: 0.0}
    prev: dict[int, int] = {}
    settled: set[int] = set()
    frontier: list[tuple[float, int]] = [(0.0, start_index)]

    while frontier:
        current_cost, current = heapq.heappop(frontier)
        if current in settled:
            continue

        for edge in graph.neighbors(current):
            n = edge.neighbor_index
            if n in settled:
                continue
            candidate = current_cost + edge.cost
            if n not in cost or candidate < cost[n]:
                cost[n] = candidate
                prev[n] = current
                heapq.heappush(frontier, (candidate, n))

        settled.add(current)
        if current == finish_index:
            break

    logger.debug(
        "Dijkstra %d -> %d settled %d of %d nodes (reached=%s)",
        start_index,
        finish_index,
        len(settled),
        graph.node_count,
        finish_index in settled,
    )
    return DijkstraResult(
        cost_by_node=cost, prev_by_node=prev, settled=frozenset(settled)
    )


def reconstruct_connections(
    graph: VertexGraph,
    result: DijkstraResult,
    *,
    start_index: int,
    finish_index: int,
) -> list[Connection]:
    """Rebuild the connections leading from start_index to finish_index."""

    out: list[Connection] = []
    cur = finish_index
    while cur != start_index:
        before = result.prev_by_node.get(cur)
        if before is None:
            # Every settled node other than the start has a predecessor.
            raise RuntimeError(f"Broken predecessor chain at node {cur}")
        out.append(
            Connection(
                start=graph.nodes[before].coordinates,
                finish=graph.nodes[cur].coordinates,
            )
        )
        cur = before
    out.reverse()
    return out
