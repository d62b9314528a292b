from __future__ import annotations

from fastapi import APIRouter, Depends

from roadnav.adapters.api.dependencies import get_routing_service
from roadnav.adapters.api.schemas.routes import (
    GeoPointSchema,
    RouteRequestSchema,
    RouteSchema,
)
from roadnav.app.services.routing_service import RoutingService
from roadnav.domain.models import GeoPoint, Route

router = APIRouter(tags=["routes"])


def _route_to_schema(route: Route) -> RouteSchema:
    return RouteSchema(
        origin=GeoPointSchema(lat=route.origin.lat, lon=route.origin.lon),
        destination=GeoPointSchema(
            lat=route.destination.lat, lon=route.destination.lon
        ),
        found=route.found,
        vertex_ids=list(route.vertex_ids),
        path=[GeoPointSchema(lat=p.lat, lon=p.lon) for p in route.path],
        distance_mi=route.distance_mi,
    )


@router.post("/routes", response_model=RouteSchema)
def calculate_route(
    req: RouteRequestSchema,
    service: RoutingService = Depends(get_routing_service),
) -> RouteSchema:
    origin = GeoPoint(lat=req.origin.lat, lon=req.origin.lon)
    destination = GeoPoint(lat=req.destination.lat, lon=req.destination.lon)
    route = service.calculate_route(origin=origin, destination=destination)
    return _route_to_schema(route)
