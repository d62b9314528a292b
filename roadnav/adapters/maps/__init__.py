from .local_json_map_data_provider import LocalJsonMapDataProvider
from .s3_map_data_provider import S3MapDataProvider

__all__ = [
    "LocalJsonMapDataProvider",
    "S3MapDataProvider",
]
