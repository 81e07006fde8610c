# MIT License (see LICENSE)
"""
Geometry a renderer derives from traced lines.

Direction arrows are placed by walking the polyline and dropping one arrow
each time the accumulated arc length reaches `spacing`; the accumulator then
restarts from zero (the overshoot is not carried over).
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Sequence

from ..constants import ARROW_SPACING, CHARGE_RADIUS
from ..types import Charge, FieldLine


@dataclass(frozen=True)
class ArrowMark:
    """An arrow glyph: tip position and heading (radians, atan2 convention)."""
    x: float
    y: float
    angle: float


def arrow_marks(line: FieldLine, spacing: float = ARROW_SPACING) -> list[ArrowMark]:
    """
    Arrow placements along a line.

    Args:
        line: The traced line.
        spacing: Arc length between consecutive arrows.

    Returns:
        Arrows in line order, each heading along its segment.
    """
    out = []
    acc = 0.0
    pts = line.points
    for i in range(1, len(pts)):
        (x0, y0), (x1, y1) = pts[i - 1], pts[i]
        dx = x1 - x0
        dy = y1 - y0
        seg = math.hypot(dx, dy)
        acc += seg
        if acc >= spacing:
            t = (spacing - (acc - seg)) / seg
            out.append(ArrowMark(x0 + dx * t, y0 + dy * t, math.atan2(dy, dx)))
            acc = 0.0
    return out


def line_source_polarity(line: FieldLine, charges: Sequence[Charge]) -> int:
    """
    Polarity of the charge a line starts from.

    Looks for the first charge within 1.5 charge radii of the line's first
    point; +1 if none is found or its charge is zero. Renderers use it to
    flip arrows on lines traced out of a sink.
    """
    if not line.points:
        return 1
    sx, sy = line.start
    for c in charges:
        if math.hypot(sx - c.position[0], sy - c.position[1]) < CHARGE_RADIUS * 1.5:
            return -1 if c.q < 0 else 1
    return 1
