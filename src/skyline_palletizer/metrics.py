from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np

from .models import Pallet, PlacedBox
from .units import EPS


def extents_array(placements: Sequence[PlacedBox]) -> np.ndarray:
    """``(n, 3)`` array of placed box extents ``(w, h, d)``."""
    if not placements:
        return np.zeros((0, 3), dtype=float)
    return np.array([[p.w, p.h, p.d] for p in placements], dtype=float)


def placed_volume(placements: Sequence[PlacedBox]) -> float:
    if not placements:
        return 0.0
    return float(np.prod(extents_array(placements), axis=1).sum())


def utilization(pallet: Pallet, placements: Sequence[PlacedBox]) -> float:
    volume = pallet.volume
    if volume <= 0:
        return 0.0
    ratio = placed_volume(placements) / volume
    # summed decimal volumes can land a hair above a completely full pallet
    if 1.0 < ratio <= 1.0 + EPS:
        return 1.0
    return ratio


def count_by_type(placements: Sequence[PlacedBox]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for placement in placements:
        counts[placement.box_id] = counts.get(placement.box_id, 0) + 1
    return counts


def layer_elevations(placements: Sequence[PlacedBox]) -> List[float]:
    """Distinct layer base elevations in stacking order."""
    return sorted({p.y for p in placements})


def group_by_layer(placements: Sequence[PlacedBox]) -> Dict[float, List[PlacedBox]]:
    layers: Dict[float, List[PlacedBox]] = {}
    for placement in placements:
        layers.setdefault(placement.y, []).append(placement)
    return layers
