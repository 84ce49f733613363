# path: ride-tracker-api/ride_api/api/routes/locations.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from ride_api.api.deps import get_location_store
from ride_api.models.ride_models import INDIA_BOUNDS, BoundingBox, LocationSample
from ride_api.services.ride_store import LocationStore
from ride_api.services.ride_window import filter_window, split_by_bounds

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/locations", tags=["locations"])


class IngestResponse(BaseModel):
    stored: int


class PruneResponse(BaseModel):
    deleted: int
    kept: int


class DeleteLocationsRequest(BaseModel):
    ids: List[str] = Field(min_length=1)


class DeleteResponse(BaseModel):
    deleted: int
    missing: List[str] = Field(default_factory=list)


@router.post("", response_model=IngestResponse)
def ingest_locations(
    samples: List[LocationSample],
    store: LocationStore = Depends(get_location_store),
) -> IngestResponse:
    invalid = sum(1 for s in samples if not s.has_valid_coordinates)
    if invalid:
        logger.warning("Ingesting %s samples with invalid coordinates", invalid)
    return IngestResponse(stored=store.add_many(samples))


@router.get("", response_model=List[LocationSample])
def list_locations(
    start_time: Optional[datetime] = None,
    end_time: Optional[datetime] = None,
    store: LocationStore = Depends(get_location_store),
) -> List[LocationSample]:
    if start_time is not None and end_time is not None and end_time < start_time:
        raise HTTPException(status_code=400, detail="end_time must not be earlier than start_time")
    window = filter_window(store.all(), start_time, end_time)
    # Newest first, matching the history list view.
    return sorted(window, key=lambda s: s.time, reverse=True)


@router.post("/prune", response_model=PruneResponse)
def prune_locations(
    bounds: Optional[BoundingBox] = None,
    store: LocationStore = Depends(get_location_store),
) -> PruneResponse:
    inside, outside = split_by_bounds(store.all(), bounds or INDIA_BOUNDS)
    deleted = store.delete(s.id for s in outside)
    logger.info("Pruned %s samples outside bounds, kept %s", deleted, len(inside))
    return PruneResponse(deleted=deleted, kept=len(inside))


@router.post("/delete", response_model=DeleteResponse)
def delete_locations(
    body: DeleteLocationsRequest,
    store: LocationStore = Depends(get_location_store),
) -> DeleteResponse:
    known = {s.id for s in store.all()}
    missing = [i for i in body.ids if i not in known]
    if len(missing) == len(body.ids):
        raise HTTPException(status_code=404, detail=f"Locations not found: {', '.join(missing)}")
    deleted = store.delete(body.ids)
    logger.info("Deleted %s of %s requested samples", deleted, len(body.ids))
    return DeleteResponse(deleted=deleted, missing=missing)


@router.delete("/{location_id}", status_code=204)
def delete_location(location_id: str, store: LocationStore = Depends(get_location_store)) -> Response:
    if not store.delete([location_id]):
        raise HTTPException(status_code=404, detail=f"Location not found: {location_id}")
    return Response(status_code=204)


@router.delete("", response_model=DeleteResponse)
def clear_locations(store: LocationStore = Depends(get_location_store)) -> DeleteResponse:
    deleted = store.clear()
    logger.warning("Cleared location history (%s samples)", deleted)
    return DeleteResponse(deleted=deleted)
