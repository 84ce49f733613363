# path: ride-tracker-api/ride_api/services/ride_window.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from ride_api.models.ride_models import BoundingBox, LocationSample, RideInfo
from ride_api.utils.geo import in_bounds
from ride_api.utils.timeutils import ensure_aware


def filter_window(
    locations: List[LocationSample],
    start_time: Optional[datetime],
    end_time: Optional[datetime],
) -> List[LocationSample]:
    """
    Keep samples whose time lies in [start_time, end_time].

    A None bound is open. With both bounds None the input list itself is
    returned. Order is preserved; sorting is left to callers that need it.
    """
    if start_time is None and end_time is None:
        return locations

    start = ensure_aware(start_time) if start_time is not None else None
    end = ensure_aware(end_time) if end_time is not None else None

    out = []
    for sample in locations:
        if start is not None and sample.time < start:
            continue
        if end is not None and sample.time > end:
            continue
        out.append(sample)
    return out


def sort_chronologically(locations: Sequence[LocationSample]) -> List[LocationSample]:
    return sorted(locations, key=lambda s: s.time)


def ride_window(locations: List[LocationSample], ride: RideInfo) -> List[LocationSample]:
    # Stored order is not time order; distance needs the sorted window.
    return sort_chronologically(filter_window(locations, ride.start_time, ride.end_time))


def split_by_bounds(
    locations: Sequence[LocationSample], bounds: BoundingBox
) -> Tuple[List[LocationSample], List[LocationSample]]:
    inside: List[LocationSample] = []
    outside: List[LocationSample] = []
    for sample in locations:
        if sample.has_valid_coordinates and in_bounds(sample.latitude, sample.longitude, bounds):
            inside.append(sample)
        else:
            outside.append(sample)
    return inside, outside
