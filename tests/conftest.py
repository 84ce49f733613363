"""
Shared fixtures and sample builders for ride tests.
"""

from datetime import datetime, timedelta, timezone

import pytest

from ride_api.models.ride_models import LocationSample, RideInfo


T0 = datetime(2025, 3, 14, 8, 0, 0, tzinfo=timezone.utc)


def make_sample(sample_id, lat, lon, minutes=0.0, seconds=0.0):
    return LocationSample(
        id=sample_id,
        latitude=lat,
        longitude=lon,
        time=T0 + timedelta(minutes=minutes, seconds=seconds),
    )


def make_ride_info(name="Morning Commute", start_minutes=0, end_minutes=30):
    return RideInfo(
        name=name,
        start_time=T0 + timedelta(minutes=start_minutes),
        end_time=T0 + timedelta(minutes=end_minutes),
    )


class FakeTextGenerator:
    """Records every call; replies come from a list of texts or exceptions."""

    def __init__(self, replies=None):
        self.replies = list(replies or [])
        self.calls = []

    async def generate(self, model_id, prompt):
        self.calls.append((model_id, prompt))
        reply = self.replies.pop(0) if self.replies else RuntimeError("quota exceeded")
        if isinstance(reply, BaseException):
            raise reply
        return reply


class RecordingSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


@pytest.fixture
def commute_samples():
    return [
        make_sample("a", 28.60, 77.20, minutes=0),
        make_sample("b", 28.70, 77.25, minutes=30),
    ]


@pytest.fixture
def recording_sleep():
    return RecordingSleep()
