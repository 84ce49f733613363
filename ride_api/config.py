# path: ride-tracker-api/ride_api/config.py

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional
import os

from pydantic import BaseModel, Field, field_validator


DEFAULT_SUMMARY_MODELS = ["gemini-2.0-flash", "gemini-1.5-flash", "gemini-1.0-pro"]
DEFAULT_RETRY_DELAY_S = 1.0


class Settings(BaseModel):
    """Environment-driven settings for the ride service."""

    gemini_api_key: Optional[str] = None
    # Ordered fallback ladder, one attempt per model.
    summary_models: List[str] = Field(default_factory=lambda: list(DEFAULT_SUMMARY_MODELS))
    retry_delay_s: float = Field(default=DEFAULT_RETRY_DELAY_S, ge=0)
    log_level: str = "INFO"

    @field_validator("summary_models")
    @classmethod
    def validate_models(cls, models: List[str]):
        cleaned = [m.strip() for m in models if m and m.strip()]
        if not cleaned:
            raise ValueError("summary_models must name at least one model")
        return cleaned

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, level: str):
        return level.strip().upper() or "INFO"


def load_settings() -> Settings:
    raw_models = os.getenv("RIDE_SUMMARY_MODELS")
    data = {
        "gemini_api_key": os.getenv("GEMINI_API_KEY") or None,
        "retry_delay_s": os.getenv("RIDE_SUMMARY_RETRY_DELAY_S", DEFAULT_RETRY_DELAY_S),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
    }
    if raw_models:
        data["summary_models"] = raw_models.split(",")
    return Settings(**data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
