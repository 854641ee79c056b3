from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_routing_service
from src.adapters.api.schemas.routes import (
    BodySchema,
    DistanceRequestSchema,
    DistanceSchema,
    GeoPointSchema,
    GraphRequestSchema,
    GraphSummarySchema,
    RouteRequestSchema,
    RouteSchema,
    RouteSegmentSchema,
)
from src.app.services.routing_service import GraphSummary, RoutingService
from src.domain.exceptions import GraphNotFound
from src.domain.models import CelestialBody, Connection, GeoPoint, radius_km

router = APIRouter(tags=["routes"])


def _point(schema: GeoPointSchema) -> GeoPoint:
    return GeoPoint(lat=schema.lat, lon=schema.lon)


def _point_schema(point: GeoPoint) -> GeoPointSchema:
    return GeoPointSchema(lat=point.lat, lon=point.lon)


def _summary_to_schema(summary: GraphSummary) -> GraphSummarySchema:
    return GraphSummarySchema(
        graph_id=summary.graph_id,
        body=summary.body,
        node_count=summary.node_count,
        edge_count=summary.edge_count,
        component_count=summary.component_count,
    )


@router.get("/bodies", response_model=list[BodySchema])
def list_bodies() -> list[BodySchema]:
    return [BodySchema(name=body, radius_km=radius_km(body)) for body in CelestialBody]


@router.post("/graphs", response_model=GraphSummarySchema)
def create_graph(
    req: GraphRequestSchema,
    service: RoutingService = Depends(get_routing_service),
) -> GraphSummarySchema:
    connections = [
        Connection(start=_point(c.start), finish=_point(c.finish))
        for c in req.connections
    ]
    summary = service.register_graph(connections=connections, body=req.body)
    return _summary_to_schema(summary)


@router.get("/graphs/{graph_id}", response_model=GraphSummarySchema)
def get_graph(
    graph_id: str,
    service: RoutingService = Depends(get_routing_service),
) -> GraphSummarySchema:
    try:
        summary = service.describe_graph(graph_id=graph_id)
    except GraphNotFound:
        raise HTTPException(status_code=404, detail="Graph not found")
    return _summary_to_schema(summary)


@router.post("/graphs/{graph_id}/routes", response_model=RouteSchema)
def calculate_route(
    graph_id: str,
    req: RouteRequestSchema,
    service: RoutingService = Depends(get_routing_service),
) -> RouteSchema:
    origin = _point(req.origin)
    destination = _point(req.destination)
    try:
        body = service.graph_body(graph_id=graph_id)
        route = service.calculate_route(
            graph_id=graph_id, origin=origin, destination=destination
        )
    except GraphNotFound:
        raise HTTPException(status_code=404, detail="Graph not found")

    if route is None:
        return RouteSchema(
            found=False,
            origin=req.origin,
            destination=req.destination,
            body=body,
        )

    r = radius_km(route.body)
    return RouteSchema(
        found=True,
        origin=req.origin,
        destination=req.destination,
        body=route.body,
        segments=[
            RouteSegmentSchema(
                start=_point_schema(segment.start),
                finish=_point_schema(segment.finish),
                distance_km=segment.cost(r),
            )
            for segment in route.segments
        ],
        total_distance_km=route.total_distance_km,
    )


@router.post("/distance", response_model=DistanceSchema)
def distance(
    req: DistanceRequestSchema,
    service: RoutingService = Depends(get_routing_service),
) -> DistanceSchema:
    body = req.body if req.body is not None else service.default_body
    distance_km = service.distance_km(a=_point(req.a), b=_point(req.b), body=body)
    return DistanceSchema(body=body, distance_km=distance_km)
