from __future__ import annotations

import argparse
import logging
import sys
from importlib import metadata
from typing import List, Optional

from .engine import search_best_packing
from .metrics import group_by_layer
from .models import SearchResult
from .plan_io import load_plan, result_to_dict, save_result
from .units import format_float
from .validation import InvalidInputError

logger = logging.getLogger(__name__)


def _get_app_version() -> str:
    try:
        return metadata.version("skyline-palletizer")
    except metadata.PackageNotFoundError:
        return "dev"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skyline-palletizer",
        description="Pack a box catalog onto a pallet layer by layer",
    )
    parser.add_argument("plan", help="JSON plan with 'pallet' and 'boxes'")
    parser.add_argument("--output", help="Write the best packing as JSON to this file")
    parser.add_argument("--render", help="Save a 3D picture of the best packing (PNG)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument("--version", action="version", version=_get_app_version())
    return parser


def format_summary(search: SearchResult) -> List[str]:
    result = search.result
    pallet = search.pallet
    lines = [
        f"Pallet orientation: {pallet.w} x {pallet.h} x {pallet.d}",
        f"Layer height: {result.layer_height if result.layer_height is not None else '-'}",
        f"Layers: {result.layer_count}",
        f"Packed boxes: {result.placed_count}",
        f"Best utilization: {format_float(result.utilization * 100)}%",
    ]
    layers = group_by_layer(result.placements)
    for index, (elevation, placements) in enumerate(layers.items(), start=1):
        lines.append(
            f"Layer {index} at y={format_float(elevation)}: {len(placements)} boxes"
        )
        for p in placements:
            lines.append(
                f"  {p.box_id}: at ({p.x}, {p.y}, {p.z}) size {p.w} x {p.h} x {p.d}"
            )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        pallet, boxes = load_plan(args.plan)
    except InvalidInputError as exc:
        for error in exc.errors:
            print(f"error: {error}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: cannot read {args.plan}: {exc}", file=sys.stderr)
        return 2

    search = search_best_packing(pallet, boxes)
    print("\n".join(format_summary(search)))

    if args.output:
        save_result(args.output, result_to_dict(search))
        logger.info("Wrote %s", args.output)
    if args.render:
        from .render import render_placements

        render_placements(
            search.pallet,
            search.placements,
            args.render,
            title=f"Utilization {format_float(search.utilization * 100)}%",
        )
        logger.info("Rendered %s", args.render)
    return 0


if __name__ == "__main__":
    sys.exit(main())
