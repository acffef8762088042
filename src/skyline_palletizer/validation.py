from __future__ import annotations

import math
from typing import Iterable, List

from .models import BoxType, Pallet


class InvalidInputError(ValueError):
    """Raised when a pallet or box catalog cannot be packed as given."""

    def __init__(self, errors: List[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)


def _is_positive(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def validate_pallet(pallet: Pallet) -> List[str]:
    errors: List[str] = []
    for name in ("w", "h", "d"):
        value = getattr(pallet, name)
        if not _is_positive(value):
            errors.append(f"pallet dimension {name} must be a positive number, got {value!r}")
    return errors


def validate_catalog(boxes: Iterable[BoxType]) -> List[str]:
    errors: List[str] = []
    seen = set()
    for idx, box in enumerate(boxes):
        label = f"box {box.id!r}" if box.id else f"box #{idx}"
        if not box.id:
            errors.append(f"{label} has an empty id")
        elif box.id in seen:
            errors.append(f"{label} is listed more than once")
        seen.add(box.id)
        for name in ("w", "h", "d"):
            value = getattr(box, name)
            if not _is_positive(value):
                errors.append(f"{label} dimension {name} must be a positive number, got {value!r}")
        if isinstance(box.qty, bool) or not isinstance(box.qty, int) or box.qty < 0:
            errors.append(f"{label} quantity must be a non-negative integer, got {box.qty!r}")
    return errors


def ensure_valid_inputs(pallet: Pallet, boxes: Iterable[BoxType]) -> None:
    errors = validate_pallet(pallet) + validate_catalog(boxes)
    if errors:
        raise InvalidInputError(errors)
