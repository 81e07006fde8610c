# MIT License (see LICENSE)
"""
Streamline integration along the electric field.

A field line is traced with explicit Euler steps along the unit field
direction:

    p_{n+1} = p_n + d · (E(p_n) / |E(p_n)|) · h(|E(p_n)|)

where d = ±1 picks the sense of travel and h is a heuristic step length

    h(m) = max(h0 · (1 - 1 / (m / m0 + 1)), h_min)

that shrinks in strong fields (near sources, where curvature is high) and
tends to h0 as the field weakens. This is a smoothing rule for drawing, not
an error-controlled integrator.

A trace stops when one of these fires:
- the step cap is exhausted,
- |E| falls below min_field,
- the next point leaves [0, width] × [0, height],
- the next point is inside a target charge (see _hit_charge).

No condition raises; every path returns a FieldLine.
"""
from __future__ import annotations
import math
from typing import Sequence

from ..config import TracerConfig, DEFAULT_CONFIG
from ..types import Charge, FieldLine, Termination
from .field import field_components


def adaptive_step(magnitude: float, config: TracerConfig = DEFAULT_CONFIG) -> float:
    """
    Step length for a local field magnitude.

    Args:
        magnitude: |E| at the current point.
        config: Supplies step_size, field_scale and min_step.
    """
    return max(
        config.step_size * (1.0 - 1.0 / (magnitude / config.field_scale + 1.0)),
        config.min_step,
    )


def _hit_charge(
    x: float,
    y: float,
    direction: int,
    charges: Sequence[Charge],
    config: TracerConfig,
) -> bool:
    """
    True if (x, y) lies inside a charge that ends the line.

    Opposite-polarity charges capture within charge_radius; any charge,
    including a same-sign one, captures within the tighter capture_radius.
    """
    for c in charges:
        dist = math.hypot(x - c.position[0], y - c.position[1])
        if dist >= config.charge_radius:
            continue
        opposite = c.q < 0 if direction == 1 else c.q > 0
        if opposite or dist < config.capture_radius:
            return True
    return False


def _snap_target(x: float, y: float, charges: Sequence[Charge], radius: float) -> Charge | None:
    """First charge, in set order, whose centre is within `radius` of (x, y)."""
    for c in charges:
        if math.hypot(x - c.position[0], y - c.position[1]) < radius:
            return c
    return None


def trace_field_line(
    seed,
    direction: int,
    charges: Sequence[Charge],
    bounds: tuple[float, float],
    config: TracerConfig = DEFAULT_CONFIG,
) -> FieldLine:
    """
    Trace one field line from a seed point.

    Args:
        seed: Start point (x, y); always the first vertex of the result.
        direction: +1 to follow E (away from positive charges), -1 to
                   follow -E (toward the sink of a negative charge).
        charges: Charges defining the field and the capture targets.
        bounds: Canvas (width, height); the trace stops on leaving it.
        config: Step, capture and cap parameters.

    Returns:
        FieldLine with at most max_steps + 2 points. On a hit with at least
        two points collected, the last point is the captured charge's exact
        centre.
    """
    width, height = bounds
    k = config.coulomb_k
    rs = config.singularity_radius

    x, y = float(seed[0]), float(seed[1])
    points = [(x, y)]
    termination = Termination.MAX_STEPS
    steps = 0

    while steps < config.max_steps:
        steps += 1

        ex, ey = field_components(x, y, charges, k, rs)
        m = math.sqrt(ex * ex + ey * ey)
        if m < config.min_field:
            termination = Termination.FIELD_VANISHED
            break

        h = adaptive_step(m, config)
        x += direction * (ex / m) * h
        y += direction * (ey / m) * h

        if x < 0 or x > width or y < 0 or y > height:
            termination = Termination.OUT_OF_BOUNDS
            break

        points.append((x, y))

        if _hit_charge(x, y, direction, charges, config):
            termination = Termination.HIT
            break

    target = None
    if termination is Termination.HIT and len(points) >= 2:
        target = _snap_target(x, y, charges, config.charge_radius)
        if target is not None:
            points.append(target.position)

    return FieldLine(points=tuple(points), termination=termination, direction=direction, target=target)
