from .in_memory_graph_repository import InMemoryGraphRepository

__all__ = [
    "InMemoryGraphRepository",
]
