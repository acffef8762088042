from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from .models import Pallet, PlacedBox
from .skyline import SkylineProfile
from .units import EPS

DEFAULT_EPS = EPS


def _corners(placements: Sequence[PlacedBox]) -> Tuple[np.ndarray, np.ndarray]:
    mins = np.array([[p.x, p.y, p.z] for p in placements], dtype=float).reshape(-1, 3)
    extents = np.array([[p.w, p.h, p.d] for p in placements], dtype=float).reshape(-1, 3)
    return mins, mins + extents


def find_overlaps(
    placements: Sequence[PlacedBox], eps: float = DEFAULT_EPS
) -> List[Tuple[int, int]]:
    """Index pairs of placed boxes whose volumes intersect.

    Boxes that only share a face do not count as overlapping.
    """
    if len(placements) < 2:
        return []
    mins, maxs = _corners(placements)
    separated = (maxs[:, None, :] <= mins[None, :, :] + eps) | (
        maxs[None, :, :] <= mins[:, None, :] + eps
    )
    overlapping = ~separated.any(axis=2)
    pairs = np.argwhere(np.triu(overlapping, k=1))
    return [(int(i), int(j)) for i, j in pairs]


def out_of_bounds(
    pallet: Pallet, placements: Sequence[PlacedBox], eps: float = DEFAULT_EPS
) -> List[int]:
    if not placements:
        return []
    mins, maxs = _corners(placements)
    limits = np.array([pallet.w, pallet.h, pallet.d], dtype=float)
    outside = (mins < -eps).any(axis=1) | (maxs > limits + eps).any(axis=1)
    return [int(i) for i in np.flatnonzero(outside)]


def replay_layer(
    pallet: Pallet, placements: Sequence[PlacedBox], eps: float = DEFAULT_EPS
) -> SkylineProfile:
    """Rebuild a layer's skyline from its placements in commit order.

    Every box must rest exactly on the frontier left by the boxes before it
    and stay within the pallet depth, otherwise ``ValueError`` is raised.
    """
    profile = SkylineProfile(pallet.w)
    for idx, placement in enumerate(placements):
        top = profile.depth_under(placement.x, placement.w)
        if abs(top - placement.z) > eps:
            raise ValueError(
                f"placement #{idx} ({placement.box_id}) at z={placement.z!r} "
                f"does not rest on the skyline (depth {top!r})"
            )
        if placement.z + placement.d > pallet.d + eps:
            raise ValueError(
                f"placement #{idx} ({placement.box_id}) exceeds pallet depth {pallet.d!r}"
            )
        profile.commit(placement.x, placement.w, placement.z + placement.d)
    return profile
