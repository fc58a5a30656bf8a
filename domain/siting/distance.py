"""Great-circle distance helpers shared by infrastructure selection and scoring."""
from __future__ import annotations

import math

from .models import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the great-circle distance in kilometres between two points."""

    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    # Rounding can push ``a`` fractionally above 1 for antipodal points.
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def distance_km(point_a: Coordinate, point_b: Coordinate) -> float:
    """Distance between two validated coordinates."""

    if point_a == point_b:
        return 0.0
    return haversine(point_a.latitude, point_a.longitude, point_b.latitude, point_b.longitude)


__all__ = ["EARTH_RADIUS_KM", "distance_km", "haversine"]
