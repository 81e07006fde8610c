# MIT License (see LICENSE)
"""
The caller-owned collection of charges.

ChargeSet is what an interactive front end edits: clicks place charges,
drags move them, a button clears them. The engine never touches it; it is
handed an immutable snapshot() for each recomputation pass.

Structure:
    - User creates a ChargeSet.
    - place() / move() / remove() / clear() edit it and bump `version`.
    - query_point() picks the charge under the cursor for dragging.
    - snapshot() freezes the current state for FieldLineEngine.recompute().
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .constants import CHARGE_RADIUS, DEFAULT_CHARGE
from .types import Charge, as_point

logger = logging.getLogger(__name__)


@dataclass
class ChargeSet:
    """
    Mutable, ordered set of charges with sequential ids.

    Attributes:
        charges: Current charges in placement order.
        version: Incremented on every mutation; lets callers tell whether a
                 finished recomputation still matches the charges on screen.
    """
    charges: list[Charge] = field(default_factory=list)
    version: int = 0

    def __post_init__(self) -> None:
        # Unassigned (id < 1) and repeated ids get fresh ones after the highest kept id.
        self.charges = list(self.charges)
        self._next_id = max([0] + [c.id for c in self.charges]) + 1
        seen = set()
        for i, c in enumerate(self.charges):
            if c.id < 1 or c.id in seen:
                self.charges[i] = Charge(position=c.position, q=c.q, id=self._next_id)
                self._next_id += 1
            seen.add(self.charges[i].id)

    def __len__(self) -> int:
        return len(self.charges)

    def __iter__(self):
        return iter(self.charges)

    def _touch(self) -> None:
        self.version += 1

    def add(self, charge: Charge) -> Charge:
        """
        Add an existing charge value, assigning it a fresh id.

        Returns:
            The stored charge (a copy carrying the new id).
        """
        stored = Charge(position=charge.position, q=charge.q, id=self._next_id)
        self._next_id += 1
        self.charges.append(stored)
        self._touch()
        return stored

    def place(self, point, polarity: int = 1, magnitude: float = DEFAULT_CHARGE) -> Charge:
        """
        Place a new charge, as a click on the canvas does.

        Args:
            point: Centre (x, y).
            polarity: +1 or -1.
            magnitude: Absolute charge in Coulombs; must be positive.

        Raises:
            ValueError: If polarity is not ±1 or magnitude is not positive.
        """
        if polarity not in (1, -1):
            raise ValueError(f"polarity must be +1 or -1, got {polarity}")
        if magnitude <= 0:
            raise ValueError(f"magnitude must be positive, got {magnitude}")
        charge = self.add(Charge(position=as_point(point), q=polarity * magnitude))
        logger.debug("Placed charge %d q=%g at (%.1f, %.1f)", charge.id, charge.q, *charge.position)
        return charge

    def _index(self, charge_id: int) -> int:
        for i, c in enumerate(self.charges):
            if c.id == charge_id:
                return i
        raise KeyError(f"No charge with id {charge_id}")

    def get(self, charge_id: int) -> Charge:
        """Look up a charge by id. Raises KeyError if absent."""
        return self.charges[self._index(charge_id)]

    def move(self, charge_id: int, point) -> Charge:
        """
        Move a charge to a new centre (drag).

        Raises:
            KeyError: If no charge has this id.
        """
        i = self._index(charge_id)
        moved = self.charges[i].moved_to(point)
        self.charges[i] = moved
        self._touch()
        return moved

    def remove(self, charge_id: int) -> Charge:
        """Remove and return a charge. Raises KeyError if absent."""
        removed = self.charges.pop(self._index(charge_id))
        self._touch()
        return removed

    def clear(self) -> None:
        """Remove all charges. Ids keep counting up."""
        self.charges.clear()
        self._touch()

    def query_point(self, point, radius: float = CHARGE_RADIUS) -> Charge | None:
        """
        Find the charge under a point.

        Used for drag picking.

        Args:
            point: Canvas point (x, y).
            radius: Pick radius around each charge centre.

        Returns:
            The first charge, in placement order, whose centre is strictly
            within `radius` of the point, or None.
        """
        for c in self.charges:
            if c.distance_to(point) < radius:
                return c
        return None

    def snapshot(self) -> tuple[Charge, ...]:
        """Immutable view of the current charges for a recomputation pass."""
        return tuple(self.charges)
