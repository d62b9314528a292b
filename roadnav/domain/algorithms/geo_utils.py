from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_MI = 3963.0

# Coverage area of the default map (Berkeley, CA).
DEFAULT_BBOX: tuple[float, float, float, float] = (
    -122.2998046875,
    37.892195547244356,
    -122.2119140625,
    37.82280243352756,
)


def great_circle_distance_mi(
    lon1: float, lat1: float, lon2: float, lat2: float
) -> float:
    """Haversine great-circle distance in miles."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = (
        math.sin(dphi / 2.0) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2.0) ** 2
    )
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS_MI * c


def initial_bearing_deg(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """Initial great-circle bearing from point 1 towards point 2, in degrees."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlambda = math.radians(lon2 - lon1)

    y = math.sin(dlambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(
        dlambda
    )
    return math.degrees(math.atan2(y, x))


@dataclass(frozen=True, slots=True)
class TransverseMercator:
    """Transverse Mercator projection centered on a fixed origin.

    The planar coordinates are only locally Euclidean; they are good for
    proximity comparisons around the origin, never for real distances.
    """

    origin_lon: float
    origin_lat: float
    k0: float = 1.0

    @classmethod
    def centered_on(
        cls, ul_lon: float, ul_lat: float, lr_lon: float, lr_lat: float
    ) -> "TransverseMercator":
        return cls(
            origin_lon=(ul_lon + lr_lon) / 2.0, origin_lat=(ul_lat + lr_lat) / 2.0
        )

    def x(self, lon: float, lat: float) -> float:
        dlon = math.radians(lon - self.origin_lon)
        phi = math.radians(lat)
        b = math.sin(dlon) * math.cos(phi)
        # Diverges 90 degrees away from the central meridian.
        if b >= 1.0:
            return math.inf
        if b <= -1.0:
            return -math.inf
        return (self.k0 / 2.0) * math.log((1.0 + b) / (1.0 - b))

    def y(self, lon: float, lat: float) -> float:
        dlon = math.radians(lon - self.origin_lon)
        phi = math.radians(lat)
        cos_dlon = math.cos(dlon)
        if cos_dlon == 0.0:
            con = math.copysign(math.pi / 2.0, math.tan(phi))
        else:
            con = math.atan(math.tan(phi) / cos_dlon)
        return self.k0 * (con - math.radians(self.origin_lat))


DEFAULT_PROJECTION = TransverseMercator.centered_on(*DEFAULT_BBOX)
