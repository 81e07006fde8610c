import pytest

from field_lines import Charge, FieldLine, Termination, TracerConfig
from field_lines.core.tracer import adaptive_step, trace_field_line

BOUNDS = (1000.0, 600.0)
A = Charge(position=(300.0, 300.0), q=1e-6)
B = Charge(position=(700.0, 300.0), q=-1e-6)


def test_adaptive_step_limits():
    """
    h(m) = max(3 (1 - 1/(m/1000 + 1)), 0.5)
      m = 0     -> 0.5 (floor)
      m = 1000  -> 1.5
      m -> inf  -> 3
    """
    assert adaptive_step(0.0) == 0.5
    assert adaptive_step(20.0) == 0.5
    assert adaptive_step(1000.0) == pytest.approx(1.5)
    assert adaptive_step(1e12) == pytest.approx(3.0, rel=1e-6)
    steps = [adaptive_step(m) for m in (0.0, 500.0, 1e3, 1e4, 1e6)]
    assert steps == sorted(steps)


def test_single_charge_exits_bounds():
    """
    On the axis of an isolated charge Ey is exactly 0 and |E| < 200, so the
    line marches in +x with h = 0.5 from x=320 to x=1000 (inclusive):
      1 seed + 680/0.5 = 1361 points
    """
    line = trace_field_line((320.0, 300.0), 1, [A], BOUNDS)
    assert line.termination is Termination.OUT_OF_BOUNDS
    assert len(line) == 1361
    assert line.end == (1000.0, 300.0)
    assert line.target is None
    assert all(y == 300.0 for _, y in line.points)


def test_dipole_axis_hits_and_snaps():
    """
    From A toward B along the axis: capture once |p - B| < 20, i.e. x = 680.5
    after 721 steps, then snap to B's centre.
    """
    line = trace_field_line((320.0, 300.0), 1, [A, B], BOUNDS)
    print("dipole axis", len(line), line.points[-3:])
    assert line.termination is Termination.HIT
    assert line.target == B
    assert line.end == (700.0, 300.0)
    assert line.points[-2] == (680.5, 300.0)
    assert len(line) == 1 + 721 + 1


def test_negative_seed_traced_backward_reaches_positive():
    """Direction -1 from the sink follows -E back to the source."""
    line = trace_field_line((680.0, 300.0), -1, [A, B], BOUNDS)
    assert line.termination is Termination.HIT
    assert line.target == A
    assert line.end == (300.0, 300.0)
    assert line.points[1][0] < 680.0


def test_field_vanishes_at_null_point():
    """
    Two equal positive charges 200 apart: the field is exactly zero at the
    midpoint (400, 300), which the line reaches in 160 half-unit steps.
    """
    C = Charge(position=(500.0, 300.0), q=1e-6)
    line = trace_field_line((320.0, 300.0), 1, [A, C], BOUNDS)
    assert line.termination is Termination.FIELD_VANISHED
    assert line.end == (400.0, 300.0)
    assert len(line) == 161


def test_grazing_same_sign_charge_captures():
    """
    A same-sign charge is not a target inside 20 units, but it does capture
    inside 15. A strong sink at (200, 300) drags the line toward the weak
    positive charge at (300, 300): 315.5 and 315.0 pass, 314.5 is caught.
    """
    weak = Charge(position=(300.0, 300.0), q=1e-9)
    sink = Charge(position=(200.0, 300.0), q=-1e-5)
    line = trace_field_line((316.0, 300.0), 1, [weak, sink], BOUNDS)
    assert line.termination is Termination.HIT
    assert line.target == weak
    assert line.points == (
        (316.0, 300.0), (315.5, 300.0), (315.0, 300.0), (314.5, 300.0), (300.0, 300.0),
    )


def test_empty_charge_set_stops_immediately():
    line = trace_field_line((100.0, 100.0), 1, [], BOUNDS)
    assert line.termination is Termination.FIELD_VANISHED
    assert line.points == ((100.0, 100.0),)


def test_step_cap():
    cfg = TracerConfig(max_steps=10)
    line = trace_field_line((320.0, 300.0), 1, [A], BOUNDS, cfg)
    assert line.termination is Termination.MAX_STEPS
    assert len(line) == 11


def test_seed_outside_canvas():
    line = trace_field_line((-5.0, 300.0), 1, [A], BOUNDS)
    assert line.termination is Termination.OUT_OF_BOUNDS
    assert len(line) == 1


def test_bounded_length_and_containment():
    """len ≤ max_steps + 2, and every point but a snap point is on the canvas."""
    cfg = TracerConfig(max_steps=300)
    charges = [A, B, Charge(position=(500.0, 100.0), q=2e-6)]
    seeds = [(320.0, 300.0), (300.0, 320.0), (500.0, 120.0), (690.0, 290.0), (10.0, 590.0)]
    for seed in seeds:
        for direction in (1, -1):
            line = trace_field_line(seed, direction, charges, BOUNDS, cfg)
            assert len(line) <= cfg.max_steps + 2
            body = line.points[:-1] if line.target is not None else line.points
            for x, y in body[1:]:
                assert 0.0 <= x <= BOUNDS[0] and 0.0 <= y <= BOUNDS[1]


def test_trace_is_deterministic():
    charges = [A, B, Charge(position=(450.0, 500.0), q=-3e-6)]
    first = trace_field_line((310.0, 317.0), 1, charges, BOUNDS)
    second = trace_field_line((310.0, 317.0), 1, charges, BOUNDS)
    assert first == second
    assert isinstance(first, FieldLine)
