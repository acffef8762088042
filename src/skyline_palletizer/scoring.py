from __future__ import annotations

import logging
import math
import os
from dataclasses import asdict, dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import yaml

from .models import BoxType, Gap, Orientation
from .orientations import box_orientations
from .units import EPS

logger = logging.getLogger(__name__)

SETTINGS_ENV = "SKYLINE_PALLETIZER_SETTINGS"


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the gap-fit score (lower score = better fit).

    The overflow penalty dwarfs the other terms, so an orientation that fits
    under the layer height always beats one that does not; width mismatch
    comes next, then depth mismatch.
    """

    height_overflow_penalty: float = 100000.0
    height_weight: float = 1.0
    width_weight: float = 100.0
    depth_weight: float = 1.0


DEFAULT_WEIGHTS = ScoringWeights()


def settings_path() -> str:
    env_path = os.getenv(SETTINGS_ENV)
    if env_path:
        return str(Path(env_path).expanduser().resolve())
    return os.path.join(os.path.dirname(__file__), "settings.yaml")


@lru_cache(maxsize=None)
def load_weights() -> ScoringWeights:
    """Load scoring weights from ``settings.yaml`` when available."""

    path = settings_path()
    data: Dict[str, object] = {}
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            logger.exception("Failed to read scoring settings from %s", path)
            loaded = {}
        if isinstance(loaded, dict):
            data = loaded
        else:
            logger.warning("Ignoring scoring settings in %s: not a mapping", path)

    values = asdict(DEFAULT_WEIGHTS)
    for key in values:
        if key not in data:
            continue
        try:
            values[key] = float(data[key])
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid %s=%r in %s", key, data[key], path)
    return ScoringWeights(**values)


@dataclass(frozen=True)
class BoxChoice:
    box: BoxType
    orientation: Orientation
    gap: Gap
    score: float


def placement_score(
    orientation: Orientation,
    gap: Gap,
    layer_height: float,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    width, height, depth = orientation
    penalty = weights.height_weight * abs(height - layer_height)
    if height > layer_height:
        penalty += weights.height_overflow_penalty
    return (
        penalty
        + weights.width_weight * abs(width - gap.width)
        + weights.depth_weight * abs(depth - gap.depth)
    )


def select_best_box(
    gaps: Sequence[Gap],
    boxes: List[BoxType],
    layer_height: float,
    *,
    max_height: float = math.inf,
    weights: Optional[ScoringWeights] = None,
) -> Optional[BoxChoice]:
    """Pick the best (box, orientation, gap) triple over all gaps.

    An orientation is feasible for a gap when it fits the gap's width and
    available depth and is no taller than ``max_height``. Ties keep the first
    candidate in gap, catalog, orientation order.
    """
    if weights is None:
        weights = load_weights()

    available = [(box, box_orientations(box)) for box in boxes if box.qty > 0]
    best: Optional[BoxChoice] = None
    for gap in gaps:
        for box, orientations in available:
            for orientation in orientations:
                width, height, depth = orientation
                if (
                    width > gap.width + EPS
                    or depth > gap.depth + EPS
                    or height > max_height + EPS
                ):
                    continue
                score = placement_score(orientation, gap, layer_height, weights)
                if best is None or score < best.score:
                    best = BoxChoice(box, orientation, gap, score)
    return best
