from __future__ import annotations

import threading
from dataclasses import dataclass, field
from uuid import uuid4

from src.app.ports.output import IGraphRepository
from src.domain.models import VertexGraph


@dataclass(slots=True)
class InMemoryGraphRepository(IGraphRepository):
    """Process-local graph registry.

    Graphs are immutable, so handing the same instance to concurrent
    readers is safe; only the registry dict needs the lock.
    """

    _graphs: dict[str, VertexGraph] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def add(self, graph: VertexGraph) -> str:
        graph_id = str(uuid4())
        with self._lock:
            self._graphs[graph_id] = graph
        return graph_id

    def get(self, graph_id: str) -> VertexGraph | None:
        with self._lock:
            return self._graphs.get(graph_id)

    def remove(self, graph_id: str) -> bool:
        with self._lock:
            return self._graphs.pop(graph_id, None) is not None
