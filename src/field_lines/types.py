# MIT License (see LICENSE)
"""
Core type definitions for the field line engine.

Defines the fundamental data structures:
- Charge: a static point charge in the canvas plane.
- FieldVector: the electric field (Ex, Ey) at a single point.
- FieldLine: a traced polyline plus how its trace ended.

All of them are immutable values. A recomputation pass reads a snapshot of
charges and produces a fresh collection of FieldLines; nothing is shared or
mutated between passes.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field, replace
from enum import Enum

Point = tuple[float, float]


def as_point(p) -> Point:
    """Normalise any 2-sequence (tuple, list, numpy array) to a float tuple."""
    return (float(p[0]), float(p[1]))


# =============================================================================
# Charges
# =============================================================================

@dataclass(frozen=True)
class Charge:
    """
    A point charge.

    Attributes:
        position: Centre (x, y) in canvas units.
        q: Signed charge in Coulombs. The sign is the polarity.
        id: Identifier assigned by ChargeSet.place(). Only used for drag
            tracking by the caller, never by the numeric core.
    """
    position: Point
    q: float
    id: int = -1

    def __post_init__(self) -> None:
        """Store position as plain floats so charges compare and hash by value."""
        object.__setattr__(self, "position", as_point(self.position))
        object.__setattr__(self, "q", float(self.q))

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def polarity(self) -> int:
        """+1 for a source (q > 0), -1 otherwise."""
        return 1 if self.q > 0 else -1

    def moved_to(self, point) -> "Charge":
        """Return a copy of this charge centred at `point`."""
        return replace(self, position=as_point(point))

    def distance_to(self, point) -> float:
        return math.hypot(point[0] - self.position[0], point[1] - self.position[1])


# =============================================================================
# Field values
# =============================================================================

@dataclass(frozen=True)
class FieldVector:
    """
    Electric field at a point, in N/C.

    Supports vector addition so superposition reads naturally:
        field_at(p, [a, b]) == field_at(p, [a]) + field_at(p, [b])
    """
    ex: float = 0.0
    ey: float = 0.0

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.ex * self.ex + self.ey * self.ey)

    def __add__(self, other: "FieldVector") -> "FieldVector":
        return FieldVector(self.ex + other.ex, self.ey + other.ey)

    def __iter__(self):
        yield self.ex
        yield self.ey


class Termination(str, Enum):
    """Why a trace stopped."""
    MAX_STEPS = "max_steps"
    FIELD_VANISHED = "field_vanished"
    OUT_OF_BOUNDS = "out_of_bounds"
    HIT = "hit"


@dataclass(frozen=True)
class FieldLine:
    """
    A traced field line.

    Attributes:
        points: Ordered polyline vertices, starting at the seed. When the
                trace hit a charge the last vertex is that charge's centre.
        termination: How the trace ended.
        direction: +1 when traced along E, -1 when traced against it.
        target: The charge the line was snapped to, if any.
    """
    points: tuple[Point, ...]
    termination: Termination = Termination.MAX_STEPS
    direction: int = 1
    target: Charge | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(as_point(p) for p in self.points))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]
