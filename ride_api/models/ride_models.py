# path: ride-tracker-api/ride_api/models/ride_models.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional
import math

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from ride_api.utils.geo import coerce_coordinate
from ride_api.utils.timeutils import ensure_aware


class LocationSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    latitude: float
    longitude: float
    time: datetime

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def parse_coordinate(cls, value: Any) -> float:
        return coerce_coordinate(value)

    @field_validator("time")
    @classmethod
    def normalize_time(cls, value: datetime) -> datetime:
        return ensure_aware(value)

    # Serialized alongside the coordinates: NaN goes out as JSON null.
    @computed_field
    @property
    def has_valid_coordinates(self) -> bool:
        if math.isnan(self.latitude) or math.isnan(self.longitude):
            return False
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0


class RideInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(max_length=80)
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")

    @field_validator("name")
    @classmethod
    def validate_name(cls, name: str) -> str:
        name = name.strip()
        if not name:
            raise ValueError("Ride name must not be blank")
        return name

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_bound(cls, value: datetime) -> datetime:
        return ensure_aware(value)

    @model_validator(mode="after")
    def validate_order(self):
        if self.end_time < self.start_time:
            raise ValueError("endTime must not be earlier than startTime")
        return self


class RideCreate(RideInfo):
    pass


class Ride(RideInfo):
    id: str
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
    )


class RideStatistics(BaseModel):
    duration_minutes: int
    total_distance_km: float = Field(ge=0)
    avg_speed_kmh: float = Field(ge=0)
    is_circular: bool
    sample_count: int = Field(ge=1)


class RideSummaryResponse(BaseModel):
    ride_id: str
    statistics: Optional[RideStatistics] = None
    summary: str


class BoundingBox(BaseModel):
    north: float = Field(ge=-90, le=90)
    south: float = Field(ge=-90, le=90)
    east: float = Field(ge=-180, le=180)
    west: float = Field(ge=-180, le=180)

    @model_validator(mode="after")
    def validate_extent(self):
        if self.north < self.south:
            raise ValueError("north must be >= south")
        if self.east < self.west:
            raise ValueError("east must be >= west")
        return self


INDIA_BOUNDS = BoundingBox(north=37.0902, south=6.7673, east=97.3954, west=68.1862)
