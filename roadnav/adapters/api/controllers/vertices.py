from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from roadnav.adapters.api.dependencies import get_routing_service
from roadnav.adapters.api.schemas.routes import VertexSchema
from roadnav.app.services.routing_service import RoutingService
from roadnav.domain.models import GeoPoint, VertexInfo

router = APIRouter(tags=["vertices"])


def _vertex_to_schema(info: VertexInfo) -> VertexSchema:
    return VertexSchema(id=info.id, lat=info.lat, lon=info.lon, name=info.name)


@router.get("/vertices/nearest", response_model=VertexSchema)
def nearest_vertex(
    lon: float = Query(..., ge=-180.0, le=180.0),
    lat: float = Query(..., ge=-90.0, le=90.0),
    service: RoutingService = Depends(get_routing_service),
) -> VertexSchema:
    info = service.nearest_intersection(GeoPoint(lat=lat, lon=lon))
    return _vertex_to_schema(info)


@router.get("/vertices/{vertex_id}", response_model=VertexSchema)
def get_vertex(
    vertex_id: int,
    service: RoutingService = Depends(get_routing_service),
) -> VertexSchema:
    return _vertex_to_schema(service.vertex_info(vertex_id))
