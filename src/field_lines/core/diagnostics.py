# MIT License (see LICENSE)
"""
Summary statistics over traced field lines.

Used for checking tracer behaviour in tests and for benchmark reports:
how lines ended, how long they are, and how the field varies along them.
"""
from __future__ import annotations
import math
from collections import Counter
from typing import Iterable, Sequence

from ..config import TracerConfig, DEFAULT_CONFIG
from ..types import Charge, FieldLine, Termination
from .field import field_at


def polyline_length(line: FieldLine) -> float:
    """Total arc length of a line's polyline."""
    total = 0.0
    pts = line.points
    for i in range(1, len(pts)):
        total += math.hypot(pts[i][0] - pts[i - 1][0], pts[i][1] - pts[i - 1][1])
    return total


def termination_counts(lines: Iterable[FieldLine]) -> dict[Termination, int]:
    """Tally of termination reasons, with every reason present (possibly 0)."""
    counts = Counter(line.termination for line in lines)
    return {t: counts.get(t, 0) for t in Termination}


def field_magnitudes_along(
    line: FieldLine,
    charges: Sequence[Charge],
    config: TracerConfig = DEFAULT_CONFIG,
) -> list[float]:
    """
    |E| at every vertex of a line.

    Useful for checking that field strength falls off away from an
    isolated source.
    """
    return [field_at(p, charges, config).magnitude for p in line.points]
