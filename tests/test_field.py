import math

import numpy as np
import pytest

from field_lines import Charge, FieldVector, TracerConfig, field_at
from field_lines.constants import K_COULOMB
from field_lines.core.field import field_on_grid, field_magnitude_on_grid


A = Charge(position=(300.0, 300.0), q=1e-6)
B = Charge(position=(700.0, 300.0), q=-2e-6)


def test_single_charge_matches_coulomb():
    """
    Point charge on the x axis:
      E = k q / r²  along +x for q > 0
    """
    E = field_at((400.0, 300.0), [A])
    expected = K_COULOMB * 1e-6 / (100.0 ** 2)
    print("E", E, "expected", expected)
    assert E.ex == pytest.approx(expected, rel=1e-12)
    assert E.ey == 0.0
    assert E.magnitude == pytest.approx(expected, rel=1e-12)


def test_negative_charge_points_inward():
    E = field_at((700.0, 400.0), [B])
    assert E.ex == pytest.approx(0.0, abs=1e-15)
    assert E.ey < 0.0


def test_superposition():
    """E(p, {A, B}) = E(p, {A}) + E(p, {B}) away from both charges."""
    for p in [(0.0, 0.0), (500.0, 300.0), (310.0, 290.0), (950.0, 10.0), (700.0, 250.0)]:
        both = field_at(p, [A, B])
        summed = field_at(p, [A]) + field_at(p, [B])
        assert both.ex == pytest.approx(summed.ex, rel=1e-12, abs=1e-15)
        assert both.ey == pytest.approx(summed.ey, rel=1e-12, abs=1e-15)


def test_singularity_exclusion():
    """A charge closer than 5 units contributes nothing at all."""
    p = (303.0, 302.0)  # |p - A| ≈ 3.6
    assert field_at(p, [A, B]) == field_at(p, [B])
    assert field_at(p, [A]) == FieldVector(0.0, 0.0)


def test_exclusion_boundary_is_strict():
    """r == 5 is evaluated; only r < 5 is skipped."""
    E = field_at((305.0, 300.0), [A])
    assert E.ex == pytest.approx(K_COULOMB * 1e-6 / 25.0, rel=1e-12)


def test_empty_and_zero_charges():
    assert field_at((10.0, 10.0), []) == FieldVector(0.0, 0.0)
    zero = Charge(position=(100.0, 100.0), q=0.0)
    assert field_at((150.0, 100.0), [zero]) == FieldVector(0.0, 0.0)


def test_symmetric_cancellation():
    """Equal charges mirrored about a point cancel exactly there."""
    c1 = Charge(position=(400.0, 300.0), q=1e-6)
    c2 = Charge(position=(600.0, 300.0), q=1e-6)
    E = field_at((500.0, 300.0), [c1, c2])
    assert E.ex == 0.0
    assert E.ey == 0.0


def test_order_insensitive():
    p = (123.0, 456.0)
    C = Charge(position=(50.0, 500.0), q=3e-6)
    E1 = field_at(p, [A, B, C])
    E2 = field_at(p, [C, A, B])
    assert E1.ex == pytest.approx(E2.ex, rel=1e-12)
    assert E1.ey == pytest.approx(E2.ey, rel=1e-12)


def test_deterministic():
    p = (512.25, 77.5)
    assert field_at(p, [A, B]) == field_at(p, [A, B])


def test_config_constant_scales_field():
    cfg = TracerConfig(coulomb_k=1.0)
    E = field_at((400.0, 300.0), [A], cfg)
    assert E.ex == pytest.approx(1e-6 / 1e4, rel=1e-12)


def test_grid_matches_scalar_evaluation():
    """Grid evaluation agrees with field_at node by node, including a node on a charge."""
    xs = np.linspace(0.0, 1000.0, 11)   # includes x=300 and x=700
    ys = np.linspace(0.0, 600.0, 7)     # includes y=300
    Ex, Ey = field_on_grid(xs, ys, [A, B])
    assert Ex.shape == (len(ys), len(xs))
    assert np.all(np.isfinite(Ex)) and np.all(np.isfinite(Ey))
    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            E = field_at((x, y), [A, B])
            assert Ex[j, i] == pytest.approx(E.ex, rel=1e-9, abs=1e-12)
            assert Ey[j, i] == pytest.approx(E.ey, rel=1e-9, abs=1e-12)


def test_grid_magnitude():
    xs = np.array([400.0, 500.0])
    ys = np.array([300.0])
    M = field_magnitude_on_grid(xs, ys, [A])
    assert M[0, 0] == pytest.approx(K_COULOMB * 1e-6 / 1e4, rel=1e-12)
    assert M[0, 1] == pytest.approx(K_COULOMB * 1e-6 / 4e4, rel=1e-12)


def test_field_vector_arithmetic():
    ex, ey = FieldVector(3.0, 4.0)
    assert (ex, ey) == (3.0, 4.0)
    assert FieldVector(3.0, 4.0).magnitude == 5.0
    assert math.isclose((FieldVector(1.0, 2.0) + FieldVector(0.5, -2.0)).ex, 1.5)
