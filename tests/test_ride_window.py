"""
Tests for time-window filtering and region splitting
"""

import math
from datetime import datetime, timedelta

from ride_api.models.ride_models import INDIA_BOUNDS
from ride_api.services.ride_window import filter_window, ride_window, sort_chronologically, split_by_bounds

from conftest import T0, make_ride_info, make_sample


def _history():
    # Stored order deliberately differs from time order
    return [
        make_sample("c", 28.62, 77.22, minutes=20),
        make_sample("a", 28.60, 77.20, minutes=0),
        make_sample("d", 28.63, 77.23, minutes=30),
        make_sample("b", 28.61, 77.21, minutes=10),
    ]


class TestFilterWindow:

    def test_both_bounds_none_returns_same_list(self):
        history = _history()
        assert filter_window(history, None, None) is history

    def test_bounds_are_inclusive(self):
        out = filter_window(_history(), T0 + timedelta(minutes=10), T0 + timedelta(minutes=20))
        assert [s.id for s in out] == ["c", "b"]

    def test_open_start(self):
        out = filter_window(_history(), None, T0 + timedelta(minutes=10))
        assert sorted(s.id for s in out) == ["a", "b"]

    def test_open_end(self):
        out = filter_window(_history(), T0 + timedelta(minutes=20), None)
        assert sorted(s.id for s in out) == ["c", "d"]

    def test_preserves_input_order(self):
        out = filter_window(_history(), T0, T0 + timedelta(minutes=30))
        assert [s.id for s in out] == ["c", "a", "d", "b"]

    def test_naive_bounds_are_utc(self):
        naive_start = datetime(2025, 3, 14, 8, 10)
        out = filter_window(_history(), naive_start, None)
        assert sorted(s.id for s in out) == ["b", "c", "d"]

    def test_empty_window(self):
        assert filter_window(_history(), T0 + timedelta(hours=2), T0 + timedelta(hours=3)) == []


class TestRideWindow:

    def test_sorted_ascending(self):
        history = _history()
        window = ride_window(history, make_ride_info(start_minutes=5, end_minutes=30))
        assert [s.id for s in window] == ["b", "c", "d"]
        # source list untouched
        assert [s.id for s in history] == ["c", "a", "d", "b"]

    def test_sort_chronologically_returns_new_list(self):
        history = _history()
        ordered = sort_chronologically(history)
        assert ordered is not history
        assert [s.id for s in ordered] == ["a", "b", "c", "d"]


class TestSplitByBounds:

    def test_outside_and_invalid_samples_split_out(self):
        samples = [
            make_sample("delhi", 28.6, 77.2),
            make_sample("london", 51.5, -0.12),
            make_sample("broken", math.nan, 77.2),
        ]
        inside, outside = split_by_bounds(samples, INDIA_BOUNDS)
        assert [s.id for s in inside] == ["delhi"]
        assert sorted(s.id for s in outside) == ["broken", "london"]
