# MIT License (see LICENSE)
"""
field_lines - Electric field line tracing for point charges in 2D.

This package computes the electric field of a set of static point charges
and traces field lines from seeds around every charge, producing polylines
ready for drawing on an interactive canvas.

Main entry points:
    - recompute_field_lines: Trace all lines for a charge set in one call.
    - field_at: Field vector at a single point.
    - FieldLineEngine: Recomputation with atomic publication of results.
    - ChargeSet: The editable charge collection a front end maintains.
    - Charge, FieldVector, FieldLine: Value types.

Submodules:
    - core: Field evaluation, tracing, seeding, diagnostics.
    - io: JSON layouts and line export.
    - renderer: Optional drawing adapters and arrow placement.

Example:
    from field_lines import ChargeSet, FieldLineEngine

    charges = ChargeSet()
    charges.place((300, 300), polarity=+1)
    charges.place((700, 300), polarity=-1)
    engine = FieldLineEngine(width=1000, height=600)
    lines = engine.recompute(charges.snapshot())
"""
from .types import Charge, FieldVector, FieldLine, Termination
from .config import TracerConfig
from .charges import ChargeSet
from .engine import FieldLineEngine, recompute_field_lines, field_at

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "recompute_field_lines",
    "field_at",
    "FieldLineEngine",
    # Types
    "Charge",
    "ChargeSet",
    "FieldVector",
    "FieldLine",
    "Termination",
    # Configuration
    "TracerConfig",
]
