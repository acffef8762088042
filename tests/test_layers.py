from skyline_palletizer.layers import build_layer_candidates, closest_dimension_distance
from skyline_palletizer.models import BoxType, LayerCandidate, Pallet


def test_closest_dimension_distance():
    box = BoxType("B", w=15, h=15, d=15, qty=1)
    assert closest_dimension_distance(box, 20) == 5
    assert closest_dimension_distance(box, 15) == 0


def test_candidates_sorted_by_score_with_stable_ties():
    boxes = [
        BoxType("A", w=20, h=10, d=15, qty=1),
        BoxType("B", w=15, h=15, d=15, qty=1),
    ]
    candidates = build_layer_candidates(boxes, Pallet(84, 96, 104))

    assert candidates == [
        LayerCandidate(15, 0),
        LayerCandidate(20, 5),
        LayerCandidate(10, 5),
    ]


def test_heights_above_pallet_are_skipped():
    boxes = [
        BoxType("A", w=20, h=10, d=15, qty=1),
        BoxType("B", w=15, h=15, d=15, qty=1),
    ]
    candidates = build_layer_candidates(boxes, Pallet(84, 12, 104))
    assert candidates == [LayerCandidate(10, 5)]


def test_single_box_type_scores_zero_for_own_dimensions():
    boxes = [BoxType("A", w=20, h=10, d=15, qty=10)]
    candidates = build_layer_candidates(boxes, Pallet(84, 96, 104))
    assert [c.height for c in candidates] == [20, 10, 15]
    assert all(c.eval_score == 0 for c in candidates)


def test_empty_catalog_has_no_candidates():
    assert build_layer_candidates([], Pallet(84, 96, 104)) == []
