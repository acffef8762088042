from skyline_palletizer.models import Pallet, PlacedBox
from skyline_palletizer.render import color_map, render_placements


def test_color_map_is_stable_per_type():
    placements = [
        PlacedBox("A", w=1, h=1, d=1, x=0, y=0, z=0),
        PlacedBox("B", w=1, h=1, d=1, x=1, y=0, z=0),
        PlacedBox("A", w=1, h=1, d=1, x=2, y=0, z=0),
    ]
    colors = color_map(placements)
    assert list(colors) == ["A", "B"]
    assert colors["A"] != colors["B"]


def test_render_writes_image(tmp_path):
    pallet = Pallet(40, 20, 30)
    placements = [
        PlacedBox("A", w=20, h=10, d=15, x=0, y=0, z=0),
        PlacedBox("B", w=20, h=10, d=15, x=20, y=0, z=0),
    ]
    target = render_placements(pallet, placements, tmp_path / "pallet.png", title="demo")
    assert target.exists()
    assert target.stat().st_size > 0
