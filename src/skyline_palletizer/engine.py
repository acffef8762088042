from __future__ import annotations

import logging
from typing import List, Optional

from .layers import build_layer_candidates
from .models import BoxType, PackingResult, Pallet, SearchResult, copy_catalog
from .orientations import pallet_orientations
from .scoring import ScoringWeights, load_weights
from .stacking import pack_pallet_with_layers
from .validation import ensure_valid_inputs

logger = logging.getLogger(__name__)


def search_best_packing(
    pallet: Pallet,
    boxes: List[BoxType],
    weights: Optional[ScoringWeights] = None,
) -> SearchResult:
    """Pack ``boxes`` in every orientation of ``pallet`` and keep the best.

    Each orientation gets its own layer height candidates. The first
    orientation wins ties; when nothing fits at all the result is empty and
    refers to ``pallet`` as given.
    """
    ensure_valid_inputs(pallet, boxes)
    if weights is None:
        weights = load_weights()

    best = SearchResult(pallet=pallet, result=PackingResult(remaining=copy_catalog(boxes)))
    for oriented in pallet_orientations(pallet):
        candidates = build_layer_candidates(boxes, oriented)
        result = pack_pallet_with_layers(boxes, oriented, candidates, weights=weights)
        logger.debug(
            "Pallet %sx%sx%s: %d candidates, best utilization %.4f",
            oriented.w,
            oriented.h,
            oriented.d,
            len(candidates),
            result.utilization,
        )
        if result.utilization > best.utilization:
            best = SearchResult(pallet=oriented, result=result)

    logger.info(
        "Best packing: pallet %sx%sx%s, %d boxes, utilization %.4f",
        best.pallet.w,
        best.pallet.h,
        best.pallet.d,
        best.result.placed_count,
        best.utilization,
    )
    return best
