from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from .models import BoxType, Pallet, PlacedBox, SearchResult
from .units import parse_float, parse_int
from .validation import InvalidInputError, ensure_valid_inputs

PathLike = Union[str, Path]


def _dimension(section: Dict[str, Any], key: str, label: str) -> float:
    if key not in section:
        raise InvalidInputError([f"{label} is missing dimension {key!r}"])
    try:
        return parse_float(section[key])
    except ValueError as exc:
        raise InvalidInputError([f"{label} dimension {key!r}: {exc}"]) from exc


def plan_from_dict(data: Dict[str, Any]) -> Tuple[Pallet, List[BoxType]]:
    """Build a pallet and box catalog from a decoded JSON plan."""
    if not isinstance(data, dict):
        raise InvalidInputError(["plan must be a JSON object"])
    pallet_data = data.get("pallet")
    if not isinstance(pallet_data, dict):
        raise InvalidInputError(["plan is missing a 'pallet' object"])
    pallet = Pallet(
        w=_dimension(pallet_data, "w", "pallet"),
        h=_dimension(pallet_data, "h", "pallet"),
        d=_dimension(pallet_data, "d", "pallet"),
    )

    boxes_data = data.get("boxes", [])
    if not isinstance(boxes_data, list):
        raise InvalidInputError(["'boxes' must be a list"])
    boxes: List[BoxType] = []
    for idx, item in enumerate(boxes_data):
        if not isinstance(item, dict):
            raise InvalidInputError([f"box #{idx} must be a JSON object"])
        label = f"box {item.get('id', idx)!r}"
        try:
            qty = parse_int(item.get("qty", 0))
        except ValueError as exc:
            raise InvalidInputError([f"{label} quantity: {exc}"]) from exc
        boxes.append(
            BoxType(
                id=str(item.get("id", "")),
                w=_dimension(item, "w", label),
                h=_dimension(item, "h", label),
                d=_dimension(item, "d", label),
                qty=qty,
            )
        )

    ensure_valid_inputs(pallet, boxes)
    return pallet, boxes


def load_plan(path: PathLike) -> Tuple[Pallet, List[BoxType]]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidInputError([f"{path}: invalid JSON ({exc})"]) from exc
    return plan_from_dict(data)


def placement_to_dict(placement: PlacedBox) -> Dict[str, Any]:
    return {
        "id": placement.box_id,
        "x": placement.x,
        "y": placement.y,
        "z": placement.z,
        "orientation": [placement.w, placement.h, placement.d],
    }


def result_to_dict(search: SearchResult) -> Dict[str, Any]:
    result = search.result
    return {
        "pallet": {"w": search.pallet.w, "h": search.pallet.h, "d": search.pallet.d},
        "utilization": result.utilization,
        "layerHeight": result.layer_height,
        "layers": result.layer_count,
        "placed": [placement_to_dict(p) for p in result.placements],
        "remaining": {box.id: box.qty for box in result.remaining},
    }


def save_result(path: PathLike, payload: Any) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)


__all__ = [
    "plan_from_dict",
    "load_plan",
    "placement_to_dict",
    "result_to_dict",
    "save_result",
]
