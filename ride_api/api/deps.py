# path: ride-tracker-api/ride_api/api/deps.py

"""
Shared dependencies for the FastAPI routers.

Stores are process-wide; tests swap any of these through
app.dependency_overrides.
"""

from __future__ import annotations

from functools import lru_cache
import logging

from ride_api.config import Settings, get_settings
from ride_api.services.ride_store import LocationStore, RideStore
from ride_api.services.text_generation import GeminiTextGenerator, TextGenerator, UnavailableTextGenerator

logger = logging.getLogger(__name__)

_location_store = LocationStore()
_ride_store = RideStore()


def get_location_store() -> LocationStore:
    return _location_store


def get_ride_store() -> RideStore:
    return _ride_store


def get_app_settings() -> Settings:
    return get_settings()


@lru_cache(maxsize=1)
def get_text_generator() -> TextGenerator:
    settings = get_settings()
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; ride summaries will be generated locally")
        return UnavailableTextGenerator()
    return GeminiTextGenerator(api_key=settings.gemini_api_key)
