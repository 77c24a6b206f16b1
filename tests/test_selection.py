"""Unit tests for nearest-parking selection."""

import math

import pytest

from parking_map.domain.distance import distance_km
from parking_map.domain.entities import Coordinate
from parking_map.domain.exceptions import InvalidReferenceCoordinate
from parking_map.domain.selection import nearest_parkings, rank_parkings

from conftest import make_parking


class TestNearestParkings:
    def test_bordeaux_scenario(self, reference, parkings):
        result = nearest_parkings(reference, parkings)
        assert [p.name for p in result] == ["A", "B", "C"]

    def test_returns_exactly_three_ordered(self, parkings):
        ref = Coordinate(44.5, -0.3)
        result = nearest_parkings(ref, parkings)
        assert len(result) == 3
        d = [distance_km(ref, p.position) for p in result]
        assert d[0] <= d[1] <= d[2]

    def test_fewer_than_three_returns_all_ordered(self, reference, parkings):
        result = nearest_parkings(reference, [parkings[2], parkings[0]])
        assert [p.name for p in result] == ["A", "C"]

    def test_empty_collection(self, reference):
        assert nearest_parkings(reference, []) == []

    def test_custom_limit(self, reference, parkings):
        assert [p.name for p in nearest_parkings(reference, parkings, limit=1)] == ["A"]

    def test_negative_limit_is_empty(self, reference, parkings):
        assert nearest_parkings(reference, parkings, limit=-2) == []

    def test_accepts_tuple(self, reference, parkings):
        result = nearest_parkings(reference, tuple(parkings))
        assert [p.name for p in result] == ["A", "B", "C"]


class TestNoMutation:
    def test_input_order_is_preserved(self, parkings):
        before = list(parkings)
        nearest_parkings(Coordinate(44.20, -0.10), parkings)
        assert parkings == before

    def test_repeated_calls_are_independent(self, reference, parkings):
        near_d = nearest_parkings(Coordinate(44.20, -0.10), parkings)
        assert near_d[0].name == "D"

        result = nearest_parkings(reference, parkings)
        assert [p.name for p in result] == ["A", "B", "C"]


class TestTieBreak:
    def test_equal_distances_ordered_by_name(self):
        east = make_parking("Zeta", 0.0, 1.0)
        west = make_parking("Alpha", 0.0, -1.0)
        result = nearest_parkings(Coordinate(0.0, 0.0), [east, west])
        assert [p.name for p in result] == ["Alpha", "Zeta"]


class TestInvalidReference:
    def test_none_reference(self, parkings):
        with pytest.raises(InvalidReferenceCoordinate):
            nearest_parkings(None, parkings)

    def test_nan_reference(self, parkings):
        with pytest.raises(InvalidReferenceCoordinate):
            nearest_parkings(Coordinate(math.nan, 0.0), parkings)

    def test_out_of_range_reference(self, parkings):
        with pytest.raises(InvalidReferenceCoordinate):
            nearest_parkings(Coordinate(91.0, 0.0), parkings)

    def test_none_reference_with_empty_collection(self):
        with pytest.raises(InvalidReferenceCoordinate):
            nearest_parkings(None, [])


class TestRankParkings:
    def test_distances_ascending(self, reference, parkings):
        ranked = rank_parkings(reference, parkings)
        assert [p.name for p, _ in ranked] == ["A", "B", "C", "D"]
        distances = [d for _, d in ranked]
        assert distances == sorted(distances)

    def test_distance_matches_haversine(self, reference, parkings):
        p, d = rank_parkings(reference, parkings)[0]
        assert d == distance_km(reference, p.position)
