# MIT License (see LICENSE)
"""
Core numeric components.

This subpackage provides:
    - Field evaluation: Coulomb superposition at a point or on a grid.
    - Tracing: adaptive-step streamline integration with capture rules.
    - Seeding: evenly spaced trace origins around each charge.
    - Diagnostics: statistics over traced lines.

Typical usage:
    from field_lines.core import field_at, trace_field_line

    E = field_at((100.0, 50.0), charges)
    line = trace_field_line((320.0, 300.0), +1, charges, bounds=(1000, 600))
"""
from .field import field_at, field_components, field_on_grid, field_magnitude_on_grid
from .tracer import trace_field_line, adaptive_step
from .seeding import Seed, seed_ring, iter_seeds
from .diagnostics import polyline_length, termination_counts, field_magnitudes_along

__all__ = [
    # Field
    "field_at",
    "field_components",
    "field_on_grid",
    "field_magnitude_on_grid",
    # Tracing
    "trace_field_line",
    "adaptive_step",
    # Seeding
    "Seed",
    "seed_ring",
    "iter_seeds",
    # Diagnostics
    "polyline_length",
    "termination_counts",
    "field_magnitudes_along",
]
