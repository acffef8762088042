from __future__ import annotations

from typing import List

from .models import BoxType, Orientation, Pallet


def enumerate_orientations(a: float, b: float, c: float) -> List[Orientation]:
    """Return the distinct axis-aligned permutations of ``(a, b, c)``.

    Order is fixed: ``abc, acb, bac, bca, cab, cba``; repeated triples (equal
    sides) are dropped on exact equality, keeping the first occurrence.
    """
    candidates = [
        (a, b, c),
        (a, c, b),
        (b, a, c),
        (b, c, a),
        (c, a, b),
        (c, b, a),
    ]
    seen = set()
    result: List[Orientation] = []
    for dims in candidates:
        if dims in seen:
            continue
        seen.add(dims)
        result.append(dims)
    return result


def box_orientations(box: BoxType) -> List[Orientation]:
    return enumerate_orientations(box.w, box.h, box.d)


def pallet_orientations(pallet: Pallet) -> List[Pallet]:
    return [Pallet(w, h, d) for w, h, d in enumerate_orientations(pallet.w, pallet.h, pallet.d)]
