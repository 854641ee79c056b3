from __future__ import annotations

from dataclasses import dataclass

from src.domain.exceptions import InvalidParameter


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """Latitude/longitude pair in degrees.

    Equality is exact field equality; two points that differ only by
    floating point noise are different points.
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise InvalidParameter(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise InvalidParameter(f"Invalid longitude: {self.lon}")

    def __str__(self) -> str:
        return f"GeoPoint({self.lat}, {self.lon})"
