from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .models import Gap
from .units import EPS

# The sentinel closes the profile at the pallet width. Its depth is never
# read and can never equal a real depth, so run merging always keeps it.
SENTINEL_Z = math.inf


@dataclass(frozen=True)
class SkylineNode:
    x: float
    z: float


class SkylineProfile:
    """Occupied depth along the pallet width within one layer.

    The profile is a sequence of breakpoints sorted by ``x``: from ``nodes[i].x``
    up to ``nodes[i + 1].x`` the occupied depth is ``nodes[i].z``. The first
    breakpoint sits at ``x = 0`` and the last one is a sentinel at the pallet
    width. Adjacent breakpoints never share a depth.
    """

    def __init__(self, width: float, eps: float = EPS) -> None:
        if width <= 0:
            raise ValueError(f"profile width must be positive, got {width!r}")
        self.width = width
        self.eps = eps
        self.nodes: List[SkylineNode] = [
            SkylineNode(0.0, 0.0),
            SkylineNode(width, SENTINEL_Z),
        ]

    def __iter__(self) -> Iterator[SkylineNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def segments(self) -> List[Tuple[float, float, float]]:
        """Return ``(x_start, x_end, z)`` for every segment, sentinel excluded."""
        return [
            (node.x, nxt.x, node.z) for node, nxt in zip(self.nodes, self.nodes[1:])
        ]

    def _segment_index(self, x: float) -> int:
        xs = [node.x for node in self.nodes]
        return bisect_right(xs, x) - 1

    def z_at(self, x: float) -> float:
        if x < 0 or x >= self.width:
            raise ValueError(f"x={x!r} outside profile [0, {self.width!r})")
        return self.nodes[self._segment_index(x)].z

    def _snap(self, x: float) -> float:
        """Move ``x`` onto an existing breakpoint when it lies within ``eps``."""
        for node in self.nodes:
            if abs(node.x - x) <= self.eps:
                return node.x
        return x

    def _interval(self, x: float, width: float) -> Tuple[float, float]:
        # decimal sums like 0.6 + 1.1 land one ulp off the breakpoint they meet
        start = self._snap(x)
        end = self._snap(x + width)
        if width <= 0 or start < 0 or end > self.width or end <= start:
            raise ValueError(f"interval [{x!r}, {x + width!r}) outside profile")
        return start, end

    def depth_under(self, x: float, width: float) -> float:
        """Maximum occupied depth over ``[x, x + width)``."""
        start, end = self._interval(x, width)
        idx = self._segment_index(start)
        top = self.nodes[idx].z
        idx += 1
        while self.nodes[idx].x < end:
            top = max(top, self.nodes[idx].z)
            idx += 1
        return top

    def gaps(self, depth_bound: float) -> List[Gap]:
        return [
            Gap(x=x0, z=z, width=x1 - x0, depth=depth_bound - z)
            for x0, x1, z in self.segments()
        ]

    def find_placement(
        self, width: float, depth: float, depth_bound: float
    ) -> Optional[Tuple[float, float]]:
        """Lowest feasible ``(x, z)`` for a ``width`` x ``depth`` footprint.

        Every breakpoint is tried as a left edge. The footprint rests on the
        deepest segment it covers; among starts that stay within
        ``depth_bound`` the shallowest wins, then the leftmost.
        """
        eps = self.eps
        best: Optional[Tuple[float, float]] = None
        last = len(self.nodes) - 1
        for i in range(last):
            x0 = self.nodes[i].x
            if self.width - x0 < width - eps:
                break
            top = self.nodes[i].z
            j = i + 1
            while self.nodes[j].x - x0 < width - eps:
                top = max(top, self.nodes[j].z)
                j += 1
            if top + depth > depth_bound + eps:
                continue
            if best is None or top < best[1]:
                best = (x0, top)
        return best

    def commit(self, x: float, width: float, new_top: float) -> None:
        """Overwrite the depth of ``[x, x + width)`` with ``new_top``."""
        start, end = self._interval(x, width)
        if math.isinf(new_top) or math.isnan(new_top):
            raise ValueError(f"invalid depth {new_top!r}")

        spliced = [node for node in self.nodes if node.x < start]
        spliced.append(SkylineNode(start, new_top))
        if end < self.width:
            spliced.append(SkylineNode(end, self.z_at(end)))
            spliced.extend(node for node in self.nodes if node.x > end)
        else:
            spliced.append(self.nodes[-1])

        merged: List[SkylineNode] = []
        for node in spliced:
            if merged and abs(merged[-1].z - node.z) <= self.eps:
                continue
            merged.append(node)
        self.nodes = merged

    def is_valid(self) -> bool:
        nodes = self.nodes
        if len(nodes) < 2:
            return False
        if nodes[0].x != 0 or nodes[-1].x != self.width:
            return False
        for left, right in zip(nodes, nodes[1:]):
            if left.x >= right.x or left.z == right.z:
                return False
        return True
