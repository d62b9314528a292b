from __future__ import annotations

import os
from dataclasses import dataclass

from roadnav.domain.algorithms.geo_utils import DEFAULT_BBOX, TransverseMercator


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return raw.strip() or None


def _parse_bbox(raw: str | None) -> tuple[float, float, float, float]:
    if not raw:
        return DEFAULT_BBOX
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 4:
        raise RuntimeError(
            f"Invalid MAP_BBOX (expected ul_lon,ul_lat,lr_lon,lr_lat): {raw}"
        )
    try:
        ul_lon, ul_lat, lr_lon, lr_lat = (float(p) for p in parts)
    except ValueError as exc:
        raise RuntimeError(f"Invalid MAP_BBOX: {raw}") from exc
    return ul_lon, ul_lat, lr_lon, lr_lat


@dataclass(frozen=True, slots=True)
class RoadnavConfig:
    map_data_path: str | None
    map_data_s3_uri: str | None
    osm_place: str | None
    osm_network_type: str
    osm_use_cache: bool
    route_timeout_s: float | None
    bbox: tuple[float, float, float, float]

    @staticmethod
    def from_env() -> "RoadnavConfig":
        timeout_raw = _env_str("ROUTE_TIMEOUT_S")
        try:
            route_timeout_s = float(timeout_raw) if timeout_raw else None
        except ValueError as exc:
            raise RuntimeError(f"Invalid ROUTE_TIMEOUT_S: {timeout_raw}") from exc

        return RoadnavConfig(
            map_data_path=_env_str("MAP_DATA_PATH"),
            map_data_s3_uri=_env_str("MAP_DATA_S3_URI"),
            osm_place=_env_str("OSM_PLACE"),
            osm_network_type=_env_str("OSM_NETWORK_TYPE") or "drive",
            osm_use_cache=_env_bool("OSMNX_USE_CACHE", True),
            route_timeout_s=route_timeout_s,
            bbox=_parse_bbox(_env_str("MAP_BBOX")),
        )

    def projection(self) -> TransverseMercator:
        """Projection centered on the middle of the configured coverage box."""

        return TransverseMercator.centered_on(*self.bbox)
