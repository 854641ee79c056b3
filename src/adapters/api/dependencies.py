from __future__ import annotations

from functools import lru_cache

from src.adapters.persistence import InMemoryGraphRepository
from src.adapters.settings import NavigatorSettings
from src.app.services.routing_service import RoutingService


@lru_cache(maxsize=1)
def get_routing_service() -> RoutingService:
    # Graphs only live in this process, so every request shares one service.
    settings = NavigatorSettings.from_env()
    return RoutingService(
        graph_repository=InMemoryGraphRepository(),
        default_body=settings.default_body,
        max_connections=settings.max_connections,
    )
