"""Layer-by-layer skyline palletizing."""

from .engine import search_best_packing
from .layer_packer import pack_layer
from .layers import build_layer_candidates
from .models import (
    BoxType,
    Gap,
    LayerCandidate,
    LayerResult,
    PackingResult,
    Pallet,
    PlacedBox,
    SearchResult,
)
from .orientations import box_orientations, enumerate_orientations, pallet_orientations
from .scoring import ScoringWeights, load_weights, select_best_box
from .skyline import SkylineNode, SkylineProfile
from .stacking import pack_pallet_with_layers
from .validation import InvalidInputError

__all__ = [
    "BoxType",
    "Gap",
    "LayerCandidate",
    "LayerResult",
    "PackingResult",
    "Pallet",
    "PlacedBox",
    "SearchResult",
    "SkylineNode",
    "SkylineProfile",
    "ScoringWeights",
    "InvalidInputError",
    "enumerate_orientations",
    "box_orientations",
    "pallet_orientations",
    "build_layer_candidates",
    "select_best_box",
    "load_weights",
    "pack_layer",
    "pack_pallet_with_layers",
    "search_best_packing",
]
