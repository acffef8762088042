from __future__ import annotations

import logging
from typing import List, Optional

from .models import BoxType, LayerResult, Pallet, PlacedBox
from .scoring import ScoringWeights, load_weights, select_best_box
from .skyline import SkylineProfile

logger = logging.getLogger(__name__)


def pack_layer(
    boxes: List[BoxType],
    pallet: Pallet,
    layer_height: float,
    base_y: float,
    weights: Optional[ScoringWeights] = None,
) -> LayerResult:
    """Greedily fill one layer starting at elevation ``base_y``.

    The layer is packed in the width x depth cross-section on a fresh skyline.
    Each step commits the best-scoring box over all gaps and decrements its
    quantity in ``boxes`` (mutated in place). Packing stops once no remaining
    box fits any gap; an empty layer is a normal outcome.
    """
    if weights is None:
        weights = load_weights()

    profile = SkylineProfile(pallet.w)
    max_height = pallet.h - base_y
    placements: List[PlacedBox] = []

    while True:
        choice = select_best_box(
            profile.gaps(pallet.d),
            boxes,
            layer_height,
            max_height=max_height,
            weights=weights,
        )
        if choice is None:
            break
        width, height, depth = choice.orientation
        gap = choice.gap
        choice.box.qty -= 1
        profile.commit(gap.x, width, gap.z + depth)
        placements.append(
            PlacedBox(
                box_id=choice.box.id,
                w=width,
                h=height,
                d=depth,
                x=gap.x,
                y=base_y,
                z=gap.z,
            )
        )

    logger.debug(
        "Layer at y=%s (target height %s): placed %d boxes, %d skyline nodes",
        base_y,
        layer_height,
        len(placements),
        len(profile),
    )
    return LayerResult(placements=placements, boxes=boxes, profile=profile)
