from .map_data_provider import IMapDataProvider

__all__ = [
    "IMapDataProvider",
]
