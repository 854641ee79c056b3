from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import VertexGraph


class IGraphRepository(ABC):
    """Port for keeping built vertex graphs available between queries."""

    @abstractmethod
    def add(self, graph: VertexGraph) -> str:
        """Store a graph and return the id it can be fetched with."""

    @abstractmethod
    def get(self, graph_id: str) -> VertexGraph | None:
        """Return the graph registered under graph_id, if any."""

    @abstractmethod
    def remove(self, graph_id: str) -> bool:
        """Drop a graph; return False when the id was unknown."""
