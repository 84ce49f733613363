# path: ride-tracker-api/ride_api/services/ride_stats.py

from __future__ import annotations

from typing import Sequence

from ride_api.models.ride_models import LocationSample, RideStatistics
from ride_api.utils.geo import is_circular_trip, total_distance_km
from ride_api.utils.timeutils import duration_minutes


def average_speed_kmh(total_distance_km: float, duration_minutes: int) -> float:
    # Zero-length rides report 0 km/h rather than dividing by zero.
    if duration_minutes == 0:
        return 0.0
    return total_distance_km / (duration_minutes / 60)


def compute_statistics(sorted_samples: Sequence[LocationSample]) -> RideStatistics:
    """Stats for a chronologically sorted ride window."""
    if not sorted_samples:
        raise ValueError("Cannot compute statistics for an empty ride window")

    first = sorted_samples[0]
    last = sorted_samples[-1]
    minutes = duration_minutes(first.time, last.time)
    distance = total_distance_km(sorted_samples)

    return RideStatistics(
        duration_minutes=minutes,
        total_distance_km=distance,
        avg_speed_kmh=average_speed_kmh(distance, minutes),
        is_circular=is_circular_trip(first, last),
        sample_count=len(sorted_samples),
    )
