from __future__ import annotations

import json
import os
from dataclasses import dataclass

from roadnav.adapters.aws import parse_s3_uri, s3_client
from roadnav.adapters.maps.map_data_codec import map_data_from_mapping
from roadnav.app.ports.output import IMapDataProvider
from roadnav.domain.models import MapData


@dataclass(slots=True)
class S3MapDataProvider(IMapDataProvider):
    """Loads the JSON map-data document from S3.

    Env vars:
      - MAP_DATA_S3_URI: s3://bucket/key of the document
      - ENDPOINT_URL / USE_LOCALSTACK / AWS_REGION: see roadnav.adapters.aws
    """

    uri: str | None = None

    def _uri(self) -> str:
        value = self.uri or os.getenv("MAP_DATA_S3_URI")
        if not value:
            raise RuntimeError("Missing MAP_DATA_S3_URI")
        return value

    def load_map_data(self) -> MapData:
        bucket, key = parse_s3_uri(self._uri())

        obj = s3_client().get_object(Bucket=bucket, Key=key)
        body = obj["Body"].read()
        return map_data_from_mapping(json.loads(body))
