from __future__ import annotations

from enum import Enum

from src.domain.exceptions import InvalidParameter


class CelestialBody(str, Enum):
    MERCURY = "mercury"
    VENUS = "venus"
    EARTH = "earth"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    URANUS = "uranus"
    NEPTUNE = "neptune"

    @classmethod
    def parse(cls, raw: str) -> "CelestialBody":
        try:
            return cls(raw.strip().lower())
        except ValueError as exc:
            raise InvalidParameter(f"Unknown celestial body: {raw!r}") from exc


# Mean radii in kilometers.
_RADIUS_KM: dict[CelestialBody, float] = {
    CelestialBody.MERCURY: 2439.7,
    CelestialBody.VENUS: 6051.8,
    CelestialBody.EARTH: 6371.0,
    CelestialBody.MARS: 3389.5,
    CelestialBody.JUPITER: 69911.0,
    CelestialBody.SATURN: 58232.0,
    CelestialBody.URANUS: 25362.0,
    CelestialBody.NEPTUNE: 24622.0,
}


def radius_km(body: CelestialBody) -> float:
    return _RADIUS_KM[body]
