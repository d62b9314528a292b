from __future__ import annotations

from abc import ABC, abstractmethod

from roadnav.domain.models import MapData


class IMapDataProvider(ABC):
    """Port for obtaining normalized road-network data (nodes and ways)."""

    @abstractmethod
    def load_map_data(self) -> MapData:
        raise NotImplementedError
