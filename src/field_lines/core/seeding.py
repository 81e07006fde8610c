# MIT License (see LICENSE)
"""
Seed placement for field line tracing.

Each charge gets `density` seeds evenly spaced in angle on its boundary
circle. Positive charges are traced outward along E; negative charges are
traced along -E so their lines run out of the sink and the drawn direction
can be reversed by the renderer.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from ..types import Charge, Point


@dataclass(frozen=True)
class Seed:
    """A trace origin: start point and direction of travel (+1 along E, -1 against)."""
    point: Point
    direction: int


def seed_ring(charge: Charge, density: int, radius: float) -> list[Point]:
    """
    Points on the circle of `radius` around a charge.

    The i-th point sits at angle 2πi/density, so seed 0 is on the +x side.
    """
    cx, cy = charge.position
    out = []
    for i in range(density):
        angle = (i * 2 * math.pi) / density
        out.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return out


def iter_seeds(charges: Sequence[Charge], density: int, radius: float) -> Iterator[Seed]:
    """Yield seeds charge by charge, each charge's ring in angle order."""
    for charge in charges:
        for point in seed_ring(charge, density, radius):
            yield Seed(point=point, direction=charge.polarity)
