from __future__ import annotations

import pytest

from src.domain.exceptions import InvalidParameter
from src.domain.models import CelestialBody, radius_km


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        (CelestialBody.MERCURY, 2439.7),
        (CelestialBody.VENUS, 6051.8),
        (CelestialBody.EARTH, 6371.0),
        (CelestialBody.MARS, 3389.5),
        (CelestialBody.JUPITER, 69911.0),
        (CelestialBody.SATURN, 58232.0),
        (CelestialBody.URANUS, 25362.0),
        (CelestialBody.NEPTUNE, 24622.0),
    ],
)
def test_radius_table(body: CelestialBody, expected: float) -> None:
    assert radius_km(body) == expected


def test_radius_is_defined_for_every_body() -> None:
    assert all(radius_km(body) > 0.0 for body in CelestialBody)


def test_parse_is_case_insensitive() -> None:
    assert CelestialBody.parse(" Mars ") is CelestialBody.MARS


def test_parse_rejects_unknown_body() -> None:
    with pytest.raises(InvalidParameter):
        CelestialBody.parse("pluto")
