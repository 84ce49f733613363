# path: ride-tracker-api/ride_api/services/ride_store.py

from __future__ import annotations

from typing import Dict, Iterable, List
import threading
import uuid

from ride_api.models.ride_models import LocationSample, Ride, RideCreate


class RideNotFoundError(KeyError):
    pass


class LocationStore:
    """Process-local location history keyed by sample id."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._samples: Dict[str, LocationSample] = {}

    def add_many(self, samples: Iterable[LocationSample]) -> int:
        count = 0
        with self._lock:
            for sample in samples:
                self._samples[sample.id] = sample
                count += 1
        return count

    def all(self) -> List[LocationSample]:
        with self._lock:
            return list(self._samples.values())

    def delete(self, ids: Iterable[str]) -> int:
        removed = 0
        with self._lock:
            for sample_id in ids:
                if self._samples.pop(sample_id, None) is not None:
                    removed += 1
        return removed

    def clear(self) -> int:
        with self._lock:
            removed = len(self._samples)
            self._samples.clear()
        return removed


class RideStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rides: Dict[str, Ride] = {}

    def create(self, data: RideCreate) -> Ride:
        ride = Ride(id=str(uuid.uuid4()), **data.model_dump())
        with self._lock:
            self._rides[ride.id] = ride
        return ride

    def get(self, ride_id: str) -> Ride:
        with self._lock:
            ride = self._rides.get(ride_id)
        if ride is None:
            raise RideNotFoundError(ride_id)
        return ride

    def list(self) -> List[Ride]:
        with self._lock:
            rides = list(self._rides.values())
        # Newest first; ties keep the later insertion in front.
        rides = sorted(rides, key=lambda r: r.created_at)
        rides.reverse()
        return rides

    def delete(self, ride_id: str) -> bool:
        with self._lock:
            return self._rides.pop(ride_id, None) is not None