"""
Distance calculation using the Haversine formula.

Assumption
----------
Distances are great-circle distances on a sphere of radius 6371 km, which
is what a "nearest parking" list needs at city scale.  No road network is
involved.

No validation is done here: out-of-range or NaN inputs produce a
meaningless (possibly NaN) number rather than an error.  Callers that need
a guarantee check the reference coordinate first (see ``selection``).

Complexity: O(1) per call.
"""

import math

from .entities import Coordinate

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    )
    # rounding can push a just past 1 for antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)
