from __future__ import annotations

from functools import lru_cache

from roadnav.adapters.maps import LocalJsonMapDataProvider, S3MapDataProvider
from roadnav.adapters.runtime_config import RoadnavConfig
from roadnav.app.ports.output import IMapDataProvider
from roadnav.app.services.routing_service import RoutingService


def get_map_data_provider(config: RoadnavConfig) -> IMapDataProvider:
    if config.map_data_s3_uri:
        return S3MapDataProvider(uri=config.map_data_s3_uri)

    if config.osm_place:
        # Imported lazily: OSMnx pulls in the geo stack at import time.
        from roadnav.adapters.maps.osmnx_map_data_provider import (
            OSMnxMapDataProvider,
        )

        return OSMnxMapDataProvider(
            place=config.osm_place,
            network_type=config.osm_network_type,
            use_cache=config.osm_use_cache,
        )

    return LocalJsonMapDataProvider(path=config.map_data_path)


@lru_cache(maxsize=1)
def get_routing_service() -> RoutingService:
    """Build the road graph once per process and share it across requests."""

    config = RoadnavConfig.from_env()
    return RoutingService.from_provider(
        get_map_data_provider(config),
        projection=config.projection(),
        route_timeout_s=config.route_timeout_s,
    )
