from __future__ import annotations

from dataclasses import dataclass, field

from .celestial import CelestialBody, radius_km
from .connection import Connection
from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Route:
    """Shortest path found between two query points.

    ``segments`` run from the graph node nearest to ``origin`` to the graph
    node nearest to ``destination``; consecutive segments share an endpoint.
    """

    origin: GeoPoint
    destination: GeoPoint
    body: CelestialBody
    segments: tuple[Connection, ...] = field(default_factory=tuple)

    @property
    def total_distance_km(self) -> float:
        r = radius_km(self.body)
        return float(sum(segment.cost(r) for segment in self.segments))
