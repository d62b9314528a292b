from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from roadnav.adapters.maps.map_data_codec import map_data_from_mapping
from roadnav.app.ports.output import IMapDataProvider
from roadnav.domain.models import MapData


@dataclass(slots=True)
class LocalJsonMapDataProvider(IMapDataProvider):
    """Loads normalized map data from a JSON file on disk.

    Env vars:
      - MAP_DATA_PATH: path to the JSON document (default: data/map.json)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("MAP_DATA_PATH") or "data/map.json"
        return Path(value)

    def load_map_data(self) -> MapData:
        with self._path().open("r", encoding="utf-8") as fp:
            raw = json.load(fp)
        return map_data_from_mapping(raw)
