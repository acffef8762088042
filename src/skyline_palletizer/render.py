from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Union

import matplotlib

from .models import Pallet, PlacedBox


def _cuboid_faces(x: float, y: float, z: float, dx: float, dy: float, dz: float) -> List[list]:
    corners = [
        (x, y, z), (x + dx, y, z), (x + dx, y + dy, z), (x, y + dy, z),
        (x, y, z + dz), (x + dx, y, z + dz), (x + dx, y + dy, z + dz), (x, y + dy, z + dz),
    ]
    faces = [
        (0, 1, 2, 3),
        (4, 5, 6, 7),
        (0, 1, 5, 4),
        (2, 3, 7, 6),
        (1, 2, 6, 5),
        (0, 3, 7, 4),
    ]
    return [[corners[i] for i in face] for face in faces]


def color_map(placements: Sequence[PlacedBox]) -> Dict[str, str]:
    """One color per box type, assigned in order of first appearance."""
    from matplotlib import colors as mcolors

    palette = list(mcolors.TABLEAU_COLORS.values())
    mapping: Dict[str, str] = {}
    for placement in placements:
        if placement.box_id not in mapping:
            mapping[placement.box_id] = palette[len(mapping) % len(palette)]
    return mapping


def render_placements(
    pallet: Pallet,
    placements: Sequence[PlacedBox],
    path: Union[str, Path],
    *,
    title: str = "",
) -> Path:
    """Draw the packed pallet and save it as an image.

    The pallet width runs along the plot's x axis, depth along y and the
    stacking height is drawn vertically.
    """
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from mpl_toolkits.mplot3d.art3d import Poly3DCollection

    fig = plt.figure(figsize=(8, 6))
    try:
        ax = fig.add_subplot(111, projection="3d")
        outline = Poly3DCollection(
            _cuboid_faces(0, 0, 0, pallet.w, pallet.d, pallet.h),
            facecolors=(0, 0, 0, 0),
            edgecolors="black",
            linewidths=0.5,
        )
        ax.add_collection3d(outline)

        colors = color_map(placements)
        for p in placements:
            ax.add_collection3d(
                Poly3DCollection(
                    _cuboid_faces(p.x, p.z, p.y, p.w, p.d, p.h),
                    facecolors=colors[p.box_id],
                    edgecolors="dimgray",
                    linewidths=0.3,
                    alpha=0.6,
                )
            )

        ax.set_xlim(0, pallet.w)
        ax.set_ylim(0, pallet.d)
        ax.set_zlim(0, pallet.h)
        ax.set_xlabel("Width")
        ax.set_ylabel("Depth")
        ax.set_zlabel("Height")
        if title:
            ax.set_title(title)
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        fig.tight_layout()
        fig.savefig(target)
    finally:
        plt.close(fig)
    return target
