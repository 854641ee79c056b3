from __future__ import annotations

from pydantic import BaseModel, Field

from src.domain.models import CelestialBody


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class ConnectionSchema(BaseModel):
    start: GeoPointSchema
    finish: GeoPointSchema


class BodySchema(BaseModel):
    name: CelestialBody
    radius_km: float


class GraphRequestSchema(BaseModel):
    body: CelestialBody | None = None
    connections: list[ConnectionSchema]


class GraphSummarySchema(BaseModel):
    graph_id: str
    body: CelestialBody
    node_count: int
    edge_count: int
    component_count: int


class RouteRequestSchema(BaseModel):
    origin: GeoPointSchema
    destination: GeoPointSchema


class RouteSegmentSchema(BaseModel):
    start: GeoPointSchema
    finish: GeoPointSchema
    distance_km: float


class RouteSchema(BaseModel):
    found: bool
    origin: GeoPointSchema
    destination: GeoPointSchema
    body: CelestialBody
    segments: list[RouteSegmentSchema] = []

    total_distance_km: float | None = None


class DistanceRequestSchema(BaseModel):
    a: GeoPointSchema
    b: GeoPointSchema
    body: CelestialBody | None = None


class DistanceSchema(BaseModel):
    body: CelestialBody
    distance_km: float
