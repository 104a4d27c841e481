"""Tests for splitting a range into zones around exclusions."""
from __future__ import annotations

from spectral_resample.preprocess.zones import clean_exclusions, get_zones
from spectral_resample.types import Exclusion, Zone


def test_no_exclusion() -> None:
    assert get_zones(0, 10, 11) == [Zone(0, 10, 11)]


def test_one_exclusion() -> None:
    assert get_zones(0, 10, 11, [{"from": 2, "to": 4}]) == [Zone(0, 2, 3), Zone(4, 10, 8)]


def test_two_symmetric_exclusions() -> None:
    zones = get_zones(0, 10, 12, [{"from": 2, "to": 4}, {"from": 6, "to": 8}])
    assert zones == [Zone(0, 2, 4), Zone(4, 6, 4), Zone(8, 10, 4)]


def test_two_exclusions() -> None:
    zones = get_zones(0, 12, 10, [(1, 2), (3, 4)])
    assert zones == [Zone(0, 1, 1), Zone(2, 3, 1), Zone(4, 12, 8)]


def test_exclusion_on_boundary_leaves_empty_zone() -> None:
    assert get_zones(0, 10, 5, [(0, 2)]) == [Zone(0, 0, 0), Zone(2, 10, 5)]
    assert get_zones(0, 10, 5, [(8, 10)]) == [Zone(0, 8, 5), Zone(10, 10, 0)]


def test_reverse_orders_zones_by_descending_from() -> None:
    zones = get_zones(0, 10, 12, [(2, 4), (6, 8)], reverse=True)
    assert zones == [Zone(8, 10, 4), Zone(4, 6, 4), Zone(0, 2, 4)]
    assert get_zones(0, 10, 5, [(0, 2)], reverse=True) == [Zone(2, 10, 5), Zone(0, 0, 0)]


def test_exclusions_are_cleaned() -> None:
    cleaned = clean_exclusions(0, 10, [(5, 2), (-3, 1), (4, 6), {"from": 7}, (8, 20)])
    assert cleaned == [Exclusion(0, 1), Exclusion(2, 4), Exclusion(4, 6), Exclusion(8, 10)]


def test_rounding_never_overallocates() -> None:
    # 4 zones of equal width, 2 points: every share is exactly 0.5
    zones = get_zones(0, 7, 2, [(1, 2), (3, 4), (5, 6)])
    assert [z.number_of_points for z in zones] == [1, 1, 0, 0]


def test_points_sum_and_zones_tile_the_range() -> None:
    exclusions = [(0.3, 1.1), (2.0, 2.7), (5.5, 6.25), (9.0, 9.9)]
    for total in (1, 2, 3, 7, 10, 33, 100, 1001):
        zones = get_zones(0.0, 10.0, total, exclusions)
        assert sum(z.number_of_points for z in zones) == total
        assert all(z.number_of_points >= 0 for z in zones)
        assert zones[0].from_ == 0.0 and zones[-1].to == 10.0
        for zone, (a, b), nxt in zip(zones, exclusions, zones[1:]):
            assert zone.to == a and nxt.from_ == b
