from __future__ import annotations

from dataclasses import dataclass

from src.domain.algorithms.geo_utils import haversine_distance_km

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Connection:
    """Traversable link between two points.

    Direction has no effect on cost: travel is assumed to happen on the
    surface of the body (no altitude term), so the cost is the haversine
    distance between the endpoints.
    """

    start: GeoPoint
    finish: GeoPoint

    def cost(self, radius_km: float) -> float:
        return haversine_distance_km(self.start, self.finish, radius_km)

    def __str__(self) -> str:
        return f"Connection({self.start}, {self.finish})"
