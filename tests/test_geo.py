"""
Tests for haversine distance, path length and circular-trip detection
"""

import math

import pytest

from ride_api.models.ride_models import INDIA_BOUNDS
from ride_api.utils import geo
from ride_api.utils.geo import (
    coerce_coordinate,
    haversine_km,
    in_bounds,
    is_circular_trip,
    total_distance_km,
)

from conftest import make_sample


class TestHaversine:

    def test_same_point_is_zero(self):
        assert haversine_km(28.6, 77.2, 28.6, 77.2) == 0.0

    def test_symmetry(self):
        a = haversine_km(28.60, 77.20, 19.07, 72.88)
        b = haversine_km(19.07, 72.88, 28.60, 77.20)
        assert a == pytest.approx(b)

    def test_one_degree_of_latitude(self):
        expected = 6371.0 * math.radians(1.0)
        assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(expected)

    def test_antipodal_points(self):
        assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * 6371.0)

    def test_numeric_strings_are_coerced(self):
        assert haversine_km("28.6", "77.2", "28.7", "77.25") == pytest.approx(
            haversine_km(28.6, 77.2, 28.7, 77.25)
        )

    def test_second_latitude_comes_from_its_own_value(self):
        # lat2 given as text must not be read from lon2
        fixed = haversine_km(10.0, 20.0, "10.5", 20.0)
        assert fixed == pytest.approx(6371.0 * math.radians(0.5))
        assert fixed != pytest.approx(haversine_km(10.0, 20.0, 20.0, 20.0))

    def test_non_numeric_propagates_nan(self):
        assert math.isnan(haversine_km("north", 77.2, 28.7, 77.25))
        assert math.isnan(haversine_km(28.6, 77.2, 28.7, None))


class TestCoerceCoordinate:

    @pytest.mark.parametrize("value, expected", [(12, 12.0), ("12.5", 12.5), (" -3 ", -3.0)])
    def test_numeric_values(self, value, expected):
        assert coerce_coordinate(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", None, True, [1.0]])
    def test_unparseable_values_become_nan(self, value):
        assert math.isnan(coerce_coordinate(value))


class TestTotalDistance:

    def test_empty_is_zero(self):
        assert total_distance_km([]) == 0.0

    def test_single_sample_is_zero(self):
        assert total_distance_km([make_sample("a", 28.6, 77.2)]) == 0.0

    def test_sums_consecutive_legs(self):
        samples = [
            make_sample("a", 0.0, 0.0, minutes=0),
            make_sample("b", 1.0, 0.0, minutes=10),
            make_sample("c", 1.0, 1.0, minutes=20),
        ]
        expected = haversine_km(0.0, 0.0, 1.0, 0.0) + haversine_km(1.0, 0.0, 1.0, 1.0)
        assert total_distance_km(samples) == pytest.approx(expected)

    def test_out_and_back_counts_both_legs(self):
        samples = [
            make_sample("a", 0.0, 0.0, minutes=0),
            make_sample("b", 1.0, 0.0, minutes=10),
            make_sample("c", 0.0, 0.0, minutes=20),
        ]
        assert total_distance_km(samples) == pytest.approx(2 * 6371.0 * math.radians(1.0))


class TestCircularTrip:

    def test_exactly_threshold_is_not_circular(self, monkeypatch):
        monkeypatch.setattr(geo, "haversine_km", lambda *args: 0.2)
        assert is_circular_trip(make_sample("a", 0, 0), make_sample("b", 0, 0)) is False

    def test_just_below_threshold_is_circular(self, monkeypatch):
        monkeypatch.setattr(geo, "haversine_km", lambda *args: 0.1999)
        assert is_circular_trip(make_sample("a", 0, 0), make_sample("b", 0, 0)) is True

    def test_real_points(self):
        start = make_sample("a", 28.6000, 77.2000)
        near = make_sample("b", 28.6009, 77.2000)  # ~100 m north
        far = make_sample("c", 28.6027, 77.2000)  # ~300 m north
        assert is_circular_trip(start, near)
        assert not is_circular_trip(start, far)


class TestInBounds:

    def test_inside_and_edges(self):
        assert in_bounds(28.6, 77.2, INDIA_BOUNDS)
        assert in_bounds(INDIA_BOUNDS.north, INDIA_BOUNDS.east, INDIA_BOUNDS)

    def test_outside(self):
        assert not in_bounds(51.5, -0.12, INDIA_BOUNDS)

    def test_nan_is_never_inside(self):
        assert not in_bounds(math.nan, 77.2, INDIA_BOUNDS)
