from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, List, Optional, Tuple

from .units import MM

if TYPE_CHECKING:
    from .skyline import SkylineProfile

# (width, height, depth)
Orientation = Tuple[MM, MM, MM]


@dataclass(frozen=True)
class Pallet:
    """Pallet volume; ``h`` is the stacking axis."""

    w: MM
    h: MM
    d: MM

    @property
    def volume(self) -> float:
        return self.w * self.h * self.d


@dataclass
class BoxType:
    """A box shape together with the number of units still to place."""

    id: str
    w: MM
    h: MM
    d: MM
    qty: int = 0

    @property
    def volume(self) -> float:
        return self.w * self.h * self.d

    def copy(self) -> "BoxType":
        return replace(self)


def copy_catalog(boxes: List[BoxType]) -> List[BoxType]:
    return [box.copy() for box in boxes]


@dataclass(frozen=True)
class LayerCandidate:
    height: MM
    eval_score: float


@dataclass(frozen=True)
class Gap:
    """Span of the skyline between two adjacent breakpoints."""

    x: MM
    z: MM
    width: MM
    depth: MM


@dataclass(frozen=True)
class PlacedBox:
    box_id: str
    w: MM
    h: MM
    d: MM
    x: MM
    y: MM
    z: MM

    @property
    def volume(self) -> float:
        return self.w * self.h * self.d

    @property
    def orientation(self) -> Orientation:
        return (self.w, self.h, self.d)


@dataclass
class LayerResult:
    placements: List[PlacedBox]
    boxes: List[BoxType]
    profile: Optional["SkylineProfile"] = None

    @property
    def height(self) -> MM:
        return max((p.h for p in self.placements), default=0.0)


@dataclass
class PackingResult:
    placements: List[PlacedBox] = field(default_factory=list)
    utilization: float = 0.0
    layer_height: Optional[MM] = None
    layer_count: int = 0
    remaining: List[BoxType] = field(default_factory=list)

    @property
    def placed_count(self) -> int:
        return len(self.placements)


@dataclass
class SearchResult:
    pallet: Pallet
    result: PackingResult

    @property
    def utilization(self) -> float:
        return self.result.utilization

    @property
    def placements(self) -> List[PlacedBox]:
        return self.result.placements
