# path: ride-tracker-api/ride_api/services/summary_generator.py

"""
Ride summaries.

A summary is requested from a remote text model, walking an ordered ladder of
model ids with one attempt each. When every attempt fails the summary is
composed locally from the ride statistics. The public entry point never
raises: every path ends in a string the caller can render.
"""

from __future__ import annotations

from enum import Enum
from typing import Awaitable, Callable, List, Optional, Sequence
import asyncio
import logging

from ride_api.config import DEFAULT_RETRY_DELAY_S, DEFAULT_SUMMARY_MODELS
from ride_api.models.ride_models import LocationSample, RideInfo, RideStatistics
from ride_api.services.ride_stats import average_speed_kmh, compute_statistics
from ride_api.services.ride_window import sort_chronologically
from ride_api.services.text_generation import TextGenerator
from ride_api.utils.geo import is_circular_trip
from ride_api.utils.timeutils import format_timestamp

logger = logging.getLogger(__name__)


NO_DATA_SUMMARY = "No location data available to summarize."
FAILED_SUMMARY = "Failed to generate summary. Please try again later."

SHORT_TRIP_MAX_KM = 5.0
MEDIUM_TRIP_MAX_KM = 20.0
SLOW_PACE_MAX_KMH = 20.0
MODERATE_PACE_MAX_KMH = 50.0
BRIEF_TRACKING_MIN_POINTS = 10
THOROUGH_TRACKING_MIN_POINTS = 100


class SummaryState(str, Enum):
    ATTEMPT = "attempt"
    SUCCESS = "success"
    RETRY = "retry"
    EXHAUSTED = "exhausted"
    LOCAL_FALLBACK = "local_fallback"
    DONE = "done"


def build_prompt(
    sorted_samples: Sequence[LocationSample],
    ride_info: RideInfo,
    stats: RideStatistics,
    window_size: Optional[int] = None,
) -> str:
    # window_size counts every sample in the ride window, unreadable ones included.
    window_size = stats.sample_count if window_size is None else window_size
    counts = f"Number of location points: {window_size}\n"
    if window_size != stats.sample_count:
        counts += f"Location points with valid coordinates: {stats.sample_count}\n"

    points = []
    for i, s in enumerate(sorted_samples, start=1):
        points.append(
            f"Point {i}:\n"
            f"- Latitude: {s.latitude}\n"
            f"- Longitude: {s.longitude}\n"
            f"- Time: {format_timestamp(s.time)}"
        )

    return (
        "Please analyze this ride data and provide a structured summary in the following format:\n"
        "\n"
        '1. First, provide a "Summary" section with 2-3 bullet points about the overall ride\n'
        '2. Then, provide a "Journey Details" section with 3-5 bullet points about the path, '
        "pattern of movement, and interesting observations\n"
        '3. Then, provide a "Likely Purpose" section with 1-2 bullet points about the potential purpose of the trip\n'
        "\n"
        "Format your response with clear section headers (without leading hash marks) and bullet points "
        "for better readability. Do not use paragraphs.\n"
        "\n"
        f"Ride name: {ride_info.name}\n"
        f"Start time: {format_timestamp(ride_info.start_time)}\n"
        f"End time: {format_timestamp(ride_info.end_time)}\n"
        f"Duration: {stats.duration_minutes} minutes\n"
        f"Total distance: {stats.total_distance_km:.2f} kilometers\n"
        f"{counts}"
        "\n"
        "Location data (oldest to newest):\n" + "\n\n".join(points)
    )


def classify_trip_length(total_distance_km: float) -> str:
    if total_distance_km > MEDIUM_TRIP_MAX_KM:
        return "long"
    if total_distance_km > SHORT_TRIP_MAX_KM:
        return "medium"
    return "short"


def classify_pace(avg_speed_kmh: float) -> str:
    if avg_speed_kmh > MODERATE_PACE_MAX_KMH:
        return "fast"
    if avg_speed_kmh > SLOW_PACE_MAX_KMH:
        return "moderate"
    return "slow"


def describe_density(sample_count: int) -> str:
    if sample_count < BRIEF_TRACKING_MIN_POINTS:
        return (
            f"With only {sample_count} location points recorded, "
            "this appears to be a brief or possibly incomplete tracking session."
        )
    if sample_count > THOROUGH_TRACKING_MIN_POINTS:
        return (
            f"With {sample_count} location points recorded, "
            "this was a thoroughly tracked journey with detailed route information."
        )
    return (
        f"The ride was tracked with {sample_count} location points, "
        "providing a good overview of the route taken."
    )


def generate_local_summary(
    sorted_samples: Sequence[LocationSample],
    ride_info: RideInfo,
    total_distance_km: float,
    duration_minutes: int,
) -> str:
    """Offline summary built from a fixed template. Raises on an empty window."""
    start = sorted_samples[0]
    end = sorted_samples[-1]
    avg_speed = average_speed_kmh(total_distance_km, duration_minutes)

    summary = (
        f"This {classify_trip_length(total_distance_km)} ride named \"{ride_info.name}\" "
        f"covered approximately {total_distance_km:.2f} kilometers over {duration_minutes} minutes. "
    )
    if is_circular_trip(start, end):
        summary += "The ride started and ended at approximately the same location, suggesting a circular route. "
    else:
        summary += "The ride started and ended at different locations, covering a point-to-point journey. "
    summary += f"The average speed was {avg_speed:.1f} km/h, indicating a {classify_pace(avg_speed)} pace. "
    summary += describe_density(len(sorted_samples))
    return summary


def _local_or_failed(sorted_samples: Sequence[LocationSample], ride_info: RideInfo, stats: RideStatistics) -> str:
    try:
        return generate_local_summary(sorted_samples, ride_info, stats.total_distance_km, stats.duration_minutes)
    except Exception:
        logger.exception("Local summary generation failed for ride %r", ride_info.name)
        return FAILED_SUMMARY


async def generate_summary(
    samples: Sequence[LocationSample],
    ride_info: RideInfo,
    client: TextGenerator,
    *,
    models: Optional[List[str]] = None,
    retry_delay_s: float = DEFAULT_RETRY_DELAY_S,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> str:
    if not samples:
        return NO_DATA_SUMMARY

    sorted_samples = sort_chronologically(samples)
    valid = [s for s in sorted_samples if s.has_valid_coordinates]
    if len(valid) < len(sorted_samples):
        logger.warning(
            "Ignoring %s of %s samples with invalid coordinates for ride %r",
            len(sorted_samples) - len(valid),
            len(sorted_samples),
            ride_info.name,
        )
    if not valid:
        return NO_DATA_SUMMARY

    try:
        stats = compute_statistics(valid)
        prompt = build_prompt(valid, ride_info, stats, window_size=len(sorted_samples))
    except Exception:
        logger.exception("Could not prepare summary for ride %r", ride_info.name)
        return FAILED_SUMMARY

    ladder = list(models or DEFAULT_SUMMARY_MODELS)
    for attempt, model_id in enumerate(ladder, start=1):
        logger.info(
            "state=%s model=%s attempt=%s/%s", SummaryState.ATTEMPT.value, model_id, attempt, len(ladder)
        )
        try:
            text = await client.generate(model_id, prompt)
        except Exception as e:
            logger.warning("Summary attempt %s/%s with %s failed: %s", attempt, len(ladder), model_id, e)
        else:
            if text and text.strip():
                logger.info("state=%s model=%s attempt=%s", SummaryState.SUCCESS.value, model_id, attempt)
                return text
            logger.warning("Summary attempt %s/%s with %s returned no text", attempt, len(ladder), model_id)

        if attempt < len(ladder):
            logger.info("state=%s next_in=%ss", SummaryState.RETRY.value, retry_delay_s)
            await sleep(retry_delay_s)

    logger.info(
        "state=%s attempts=%s, falling back to %s",
        SummaryState.EXHAUSTED.value,
        len(ladder),
        SummaryState.LOCAL_FALLBACK.value,
    )
    summary = _local_or_failed(valid, ride_info, stats)
    logger.info("state=%s ride=%r", SummaryState.DONE.value, ride_info.name)
    return summary
