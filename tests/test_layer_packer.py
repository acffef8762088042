from skyline_palletizer.layer_packer import pack_layer
from skyline_palletizer.models import BoxType, Pallet
from skyline_palletizer.sanity import find_overlaps, out_of_bounds, replay_layer
from skyline_palletizer.scoring import DEFAULT_WEIGHTS


def test_single_layer_places_every_unit():
    pallet = Pallet(84, 96, 104)
    boxes = [BoxType("A", w=20, h=10, d=15, qty=10)]

    layer = pack_layer(boxes, pallet, 10, 0, weights=DEFAULT_WEIGHTS)

    assert len(layer.placements) == 10
    assert boxes[0].qty == 0
    assert layer.boxes is boxes
    assert all(p.y == 0 and p.h == 10 for p in layer.placements)
    assert layer.height == 10

    # first column fills x=0 in 15-deep steps, the rest starts at x=20
    column = [p for p in layer.placements if p.x == 0]
    assert [p.z for p in column] == [0, 15, 30, 45, 60, 75]
    assert [p.z for p in layer.placements if p.x == 20] == [0, 15, 30, 45]


def test_replay_reproduces_incremental_profile():
    pallet = Pallet(84, 96, 104)
    boxes = [
        BoxType("A", w=20, h=10, d=15, qty=10),
        BoxType("B", w=15, h=15, d=15, qty=5),
        BoxType("C", w=10, h=20, d=30, qty=3),
    ]

    layer = pack_layer(boxes, pallet, 15, 0, weights=DEFAULT_WEIGHTS)

    assert layer.placements
    assert layer.profile is not None
    assert layer.profile.is_valid()
    replayed = replay_layer(pallet, layer.placements)
    assert replayed.nodes == layer.profile.nodes
    assert find_overlaps(layer.placements) == []
    assert out_of_bounds(pallet, layer.placements) == []


def test_empty_catalog_gives_empty_layer():
    pallet = Pallet(84, 96, 104)
    boxes = [BoxType("A", w=20, h=10, d=15, qty=0)]

    layer = pack_layer(boxes, pallet, 10, 0, weights=DEFAULT_WEIGHTS)

    assert layer.placements == []
    assert layer.height == 0
    assert boxes[0].qty == 0


def test_no_headroom_gives_empty_layer():
    pallet = Pallet(84, 96, 104)
    boxes = [BoxType("A", w=20, h=10, d=15, qty=5)]

    layer = pack_layer(boxes, pallet, 6, 90, weights=DEFAULT_WEIGHTS)

    assert layer.placements == []
    assert boxes[0].qty == 5


def test_overflowing_box_is_placed_when_nothing_else_fits():
    pallet = Pallet(20, 40, 15)
    boxes = [BoxType("T", w=20, h=15, d=15, qty=1)]

    layer = pack_layer(boxes, pallet, 10, 0, weights=DEFAULT_WEIGHTS)

    assert [(p.w, p.h, p.d) for p in layer.placements] == [(20, 15, 15)]
    assert layer.height == 15


def test_decimal_widths_fill_the_pallet_exactly():
    pallet = Pallet(1.7, 1, 1)
    boxes = [
        BoxType("A", w=0.6, h=1, d=1, qty=1),
        BoxType("B", w=1.1, h=1, d=1, qty=1),
    ]

    layer = pack_layer(boxes, pallet, 1, 0, weights=DEFAULT_WEIGHTS)

    assert len(layer.placements) == 2
    assert [box.qty for box in boxes] == [0, 0]
    assert layer.profile.is_valid()
    assert replay_layer(pallet, layer.placements).nodes == layer.profile.nodes
    assert find_overlaps(layer.placements) == []
    assert out_of_bounds(pallet, layer.placements) == []


def test_decimal_catalog_layer_conserves_boxes():
    pallet = Pallet(4.0, 2.4, 1.7)
    boxes = [
        BoxType("0", w=1.1, h=2.0, d=2.1, qty=2),
        BoxType("1", w=1.1, h=0.8, d=0.5, qty=3),
        BoxType("2", w=1.8, h=0.6, d=1.8, qty=1),
    ]

    layer = pack_layer(boxes, pallet, 0.8, 0, weights=DEFAULT_WEIGHTS)

    placed = {box_id: 0 for box_id in ("0", "1", "2")}
    for p in layer.placements:
        placed[p.box_id] += 1
    assert [placed[box.id] + box.qty for box in boxes] == [2, 3, 1]
    assert layer.profile.is_valid()
    assert find_overlaps(layer.placements) == []
    assert out_of_bounds(pallet, layer.placements) == []
