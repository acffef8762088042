from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .layer_packer import pack_layer
from .metrics import utilization
from .models import BoxType, LayerCandidate, PackingResult, Pallet, PlacedBox, copy_catalog
from .scoring import ScoringWeights, load_weights
from .units import EPS
from .validation import ensure_valid_inputs

logger = logging.getLogger(__name__)


def stack_layers(
    boxes: List[BoxType],
    pallet: Pallet,
    layer_height: float,
    weights: Optional[ScoringWeights] = None,
) -> PackingResult:
    """Stack layers of ``layer_height`` from the pallet floor upward.

    ``boxes`` is consumed in place. The stacking cursor advances by the
    tallest box actually placed in each layer, which may exceed the nominal
    height when a box's best orientation overflows it.
    """
    placements: List[PlacedBox] = []
    layer_count = 0
    y = 0.0
    while y < pallet.h - EPS:
        height = min(layer_height, pallet.h - y)
        if height <= 0:
            break
        layer = pack_layer(boxes, pallet, height, y, weights=weights)
        if not layer.placements:
            break
        placements.extend(layer.placements)
        layer_count += 1
        boxes = layer.boxes
        y += layer.height

    return PackingResult(
        placements=placements,
        utilization=utilization(pallet, placements),
        layer_height=layer_height if placements else None,
        layer_count=layer_count,
        remaining=boxes,
    )


def pack_pallet_with_layers(
    boxes: List[BoxType],
    pallet: Pallet,
    candidates: Sequence[LayerCandidate],
    weights: Optional[ScoringWeights] = None,
) -> PackingResult:
    """Try every layer height candidate and keep the best utilization.

    Each candidate starts from its own copy of ``boxes``; the caller's catalog
    is left untouched. Ties keep the earlier candidate.
    """
    ensure_valid_inputs(pallet, boxes)
    if weights is None:
        weights = load_weights()

    best = PackingResult(remaining=copy_catalog(boxes))
    for candidate in candidates:
        attempt = stack_layers(copy_catalog(boxes), pallet, candidate.height, weights)
        logger.debug(
            "Layer height %s (score %s): %d boxes in %d layers, utilization %.4f",
            candidate.height,
            candidate.eval_score,
            attempt.placed_count,
            attempt.layer_count,
            attempt.utilization,
        )
        if attempt.utilization > best.utilization:
            best = attempt
    return best
