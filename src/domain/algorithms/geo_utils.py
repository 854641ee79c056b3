from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.models.geo import GeoPoint


def haversine_distance_km(a: GeoPoint, b: GeoPoint, radius_km: float) -> float:
    """Great-circle distance in kilometers on a sphere of ``radius_km``.

    hav = sin²(Δφ/2) + cos φ1 · cos φ2 · sin²(Δλ/2)
    c   = 2 · atan2(√hav, √(1 − hav))
    d   = R · c
    """

    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = math.radians(b.lat - a.lat)
    dlon = math.radians(b.lon - a.lon)

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    return radius_km * 2.0 * math.atan2(math.sqrt(s), math.sqrt(1.0 - s))
