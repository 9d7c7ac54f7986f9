"""
Tests for the result ranker.
"""

import math
from types import SimpleNamespace

import pytest

from directory.geo import EARTH_RADIUS_KM
from directory.ranking import rank, within_radius, DEFAULT_ORDER, PROXIMITY_ORDER


def _on_equator(name, km):
    """A profile `km` kilometers east of (0, 0)"""
    return SimpleNamespace(name=name, latitude=0.0, longitude=math.degrees(km / EARTH_RADIUS_KM))


def _names(results):
    return [r.profile.name for r in results]


class TestProximityOrder:

    def test_sorted_ascending_by_distance(self):
        profiles = [_on_equator('p50', 50), _on_equator('p10', 10), _on_equator('p30', 30)]

        results = rank(profiles, PROXIMITY_ORDER, reference=(0, 0))

        assert _names(results) == ['p10', 'p30', 'p50']
        assert [r.distance_km for r in results] == pytest.approx([10, 30, 50])

    def test_profiles_without_coordinates_are_excluded(self):
        profiles = [
            _on_equator('near', 5),
            SimpleNamespace(name='nowhere', latitude=None, longitude=None),
            SimpleNamespace(name='half', latitude=1.0, longitude=None),
        ]

        assert _names(rank(profiles, PROXIMITY_ORDER, reference=(0, 0))) == ['near']

    def test_ties_keep_input_order(self):
        profiles = [_on_equator('first', 20), _on_equator('second', 20), _on_equator('closer', 1)]

        results = rank(profiles, PROXIMITY_ORDER, reference=(0, 0))

        assert _names(results) == ['closer', 'first', 'second']

    @pytest.mark.parametrize('reference', [None, (95, 0), (0, 200), (float('nan'), 0), ('x', 'y'), (1,)])
    def test_invalid_reference_falls_back_to_default_order(self, reference):
        profiles = [
            _on_equator('b', 50),
            SimpleNamespace(name='no-coords', latitude=None, longitude=None),
            _on_equator('a', 10),
        ]

        results = rank(profiles, PROXIMITY_ORDER, reference=reference)

        assert _names(results) == ['b', 'no-coords', 'a']
        assert all(r.distance_km is None for r in results)


class TestDefaultOrder:

    def test_keeps_input_order_and_has_no_distance(self):
        profiles = [_on_equator('x', 30), _on_equator('y', 10)]

        results = rank(profiles, DEFAULT_ORDER, reference=(0, 0))

        assert _names(results) == ['x', 'y']
        assert results[0].distance_km is None

    def test_empty_input(self):
        assert rank([], PROXIMITY_ORDER, reference=(0, 0)) == []


def test_within_radius():
    results = rank([_on_equator('a', 10), _on_equator('b', 60)], PROXIMITY_ORDER, reference=(0, 0))
    assert _names(within_radius(results, 50)) == ['a']
