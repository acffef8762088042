from __future__ import annotations

from typing import Dict, List

from .models import BoxType, LayerCandidate, Pallet


def closest_dimension_distance(box: BoxType, height: float) -> float:
    return min(abs(box.w - height), abs(box.h - height), abs(box.d - height))


def build_layer_candidates(boxes: List[BoxType], pallet: Pallet) -> List[LayerCandidate]:
    """Rank box dimensions as layer heights, best match first.

    Each height that fits under ``pallet.h`` is scored by summing, over the
    catalog, the distance from the height to each box's closest side. Lower
    scores mean more boxes can sit flush against the layer ceiling.
    """
    heights: Dict[float, float] = {}
    for box in boxes:
        for dim in (box.w, box.h, box.d):
            if dim > pallet.h:
                continue
            heights[dim] = sum(closest_dimension_distance(b, dim) for b in boxes)

    candidates = [LayerCandidate(height, score) for height, score in heights.items()]
    # sorted() is stable: equal scores keep first-occurrence order
    return sorted(candidates, key=lambda candidate: candidate.eval_score)
