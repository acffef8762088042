from skyline_palletizer.models import BoxType, Pallet
from skyline_palletizer.orientations import (
    box_orientations,
    enumerate_orientations,
    pallet_orientations,
)


def test_all_distinct_dimensions_give_six_orientations():
    result = enumerate_orientations(1, 2, 3)
    assert result == [(1, 2, 3), (1, 3, 2), (2, 1, 3), (2, 3, 1), (3, 1, 2), (3, 2, 1)]


def test_two_equal_dimensions_give_three_orientations():
    result = enumerate_orientations(5, 5, 2)
    assert result == [(5, 5, 2), (5, 2, 5), (2, 5, 5)]


def test_cube_gives_single_orientation():
    assert enumerate_orientations(7, 7, 7) == [(7, 7, 7)]


def test_box_orientations_start_with_catalog_dimensions():
    box = BoxType("A", w=20, h=10, d=15, qty=1)
    orientations = box_orientations(box)
    assert orientations[0] == (20, 10, 15)
    assert len(orientations) == 6


def test_pallet_orientations_are_new_pallets():
    pallet = Pallet(84, 96, 104)
    oriented = pallet_orientations(pallet)
    assert oriented[0] == pallet
    assert len(oriented) == 6
    assert len(set(oriented)) == 6
    assert all(p.volume == pallet.volume for p in oriented)
