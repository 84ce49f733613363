# path: ride-tracker-api/ride_api/utils/geo.py

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence
import math

if TYPE_CHECKING:
    from ride_api.models.ride_models import BoundingBox, LocationSample


EARTH_RADIUS_KM = 6371.0
# Start/end closer than this makes a ride circular.
CIRCULAR_TRIP_KM = 0.2


def coerce_coordinate(value: Any) -> float:
    """Coerce a stored coordinate (number or numeric text) to float; NaN when it cannot be."""
    if isinstance(value, bool) or value is None:
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def haversine_km(lat1: Any, lon1: Any, lat2: Any, lon2: Any) -> float:
    # Each coordinate is coerced from its own value; NaN propagates.
    lat1 = coerce_coordinate(lat1)
    lon1 = coerce_coordinate(lon1)
    lat2 = coerce_coordinate(lat2)
    lon2 = coerce_coordinate(lon2)

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    if math.isnan(a):
        return math.nan
    # Float rounding can push a just past 1 near antipodes.
    a = min(1.0, max(0.0, a))
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def total_distance_km(sorted_samples: Sequence[LocationSample]) -> float:
    total = 0.0
    for i in range(1, len(sorted_samples)):
        a = sorted_samples[i - 1]
        b = sorted_samples[i]
        total += haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)
    return total


def is_circular_trip(start: LocationSample, end: LocationSample) -> bool:
    return haversine_km(start.latitude, start.longitude, end.latitude, end.longitude) < CIRCULAR_TRIP_KM


def in_bounds(lat: float, lon: float, bounds: BoundingBox) -> bool:
    if math.isnan(lat) or math.isnan(lon):
        return False
    return bounds.south <= lat <= bounds.north and bounds.west <= lon <= bounds.east
