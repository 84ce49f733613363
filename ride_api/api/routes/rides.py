# path: ride-tracker-api/ride_api/api/routes/rides.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from ride_api.api.deps import get_app_settings, get_location_store, get_ride_store, get_text_generator
from ride_api.config import Settings
from ride_api.models.ride_models import LocationSample, Ride, RideCreate, RideSummaryResponse
from ride_api.services.ride_stats import compute_statistics
from ride_api.services.ride_store import LocationStore, RideNotFoundError, RideStore
from ride_api.services.ride_window import ride_window
from ride_api.services.summary_generator import generate_summary
from ride_api.services.text_generation import TextGenerator

router = APIRouter(prefix="/rides", tags=["rides"])


def _get_ride_or_404(store: RideStore, ride_id: str) -> Ride:
    try:
        return store.get(ride_id)
    except RideNotFoundError:
        raise HTTPException(status_code=404, detail=f"Ride not found: {ride_id}")


@router.post("", response_model=Ride, status_code=201)
def create_ride(data: RideCreate, store: RideStore = Depends(get_ride_store)) -> Ride:
    return store.create(data)


@router.get("", response_model=List[Ride])
def list_rides(store: RideStore = Depends(get_ride_store)) -> List[Ride]:
    return store.list()


@router.get("/{ride_id}", response_model=Ride)
def get_ride(ride_id: str, store: RideStore = Depends(get_ride_store)) -> Ride:
    return _get_ride_or_404(store, ride_id)


@router.delete("/{ride_id}", status_code=204)
def delete_ride(ride_id: str, store: RideStore = Depends(get_ride_store)) -> Response:
    if not store.delete(ride_id):
        raise HTTPException(status_code=404, detail=f"Ride not found: {ride_id}")
    return Response(status_code=204)


@router.get("/{ride_id}/locations", response_model=List[LocationSample])
def get_ride_locations(
    ride_id: str,
    rides: RideStore = Depends(get_ride_store),
    locations: LocationStore = Depends(get_location_store),
) -> List[LocationSample]:
    ride = _get_ride_or_404(rides, ride_id)
    return ride_window(locations.all(), ride)


@router.get("/{ride_id}/summary", response_model=RideSummaryResponse)
async def get_ride_summary(
    ride_id: str,
    rides: RideStore = Depends(get_ride_store),
    locations: LocationStore = Depends(get_location_store),
    client: TextGenerator = Depends(get_text_generator),
    settings: Settings = Depends(get_app_settings),
) -> RideSummaryResponse:
    ride = _get_ride_or_404(rides, ride_id)
    window = ride_window(locations.all(), ride)
    valid = [s for s in window if s.has_valid_coordinates]

    statistics = compute_statistics(valid) if valid else None
    summary = await generate_summary(
        window,
        ride,
        client,
        models=settings.summary_models,
        retry_delay_s=settings.retry_delay_s,
    )
    return RideSummaryResponse(ride_id=ride.id, statistics=statistics, summary=summary)
