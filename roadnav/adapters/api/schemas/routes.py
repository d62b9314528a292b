from __future__ import annotations

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class VertexSchema(BaseModel):
    id: int
    lat: float
    lon: float
    name: str | None = None


class RouteRequestSchema(BaseModel):
    origin: GeoPointSchema
    destination: GeoPointSchema


class RouteSchema(BaseModel):
    origin: GeoPointSchema
    destination: GeoPointSchema
    found: bool
    vertex_ids: list[int] = []
    path: list[GeoPointSchema] = []
    distance_mi: float = 0.0
