# MIT License (see LICENSE)
"""
Tunable parameters for field evaluation, tracing and seeding.

TracerConfig bundles every constant the engine uses so a caller can trade
smoothness for speed without touching module globals. Defaults are the
values in constants.py; the step-size heuristic stays the same, only its
coefficients change.
"""
from __future__ import annotations
import os
from dataclasses import dataclass, asdict, fields, replace
from typing import Any

from . import constants as C


@dataclass(frozen=True)
class TracerConfig:
    """
    Engine parameters.

    Attributes:
        coulomb_k: Coulomb constant used by the evaluator.
        singularity_radius: Charges closer than this contribute nothing.
        step_size: Nominal step length (approached in weak fields).
        min_step: Lower bound on the adaptive step.
        field_scale: |E| at which the step reaches half of step_size.
        min_field: |E| below which a trace stops.
        max_steps: Step cap per trace.
        charge_radius: Seed ring radius and opposite-charge capture radius.
        capture_radius: Capture radius for charges of either polarity.
        density: Seeds per charge.
        min_points: Lines with fewer points are dropped by the driver.
    """
    coulomb_k: float = C.K_COULOMB
    singularity_radius: float = C.SINGULARITY_RADIUS
    step_size: float = C.STEP_SIZE
    min_step: float = C.MIN_STEP
    field_scale: float = C.FIELD_SCALE
    min_field: float = C.MIN_FIELD
    max_steps: int = C.MAX_STEPS
    charge_radius: float = C.CHARGE_RADIUS
    capture_radius: float = C.CAPTURE_RADIUS
    density: int = C.FIELD_LINE_DENSITY
    min_points: int = C.MIN_LINE_POINTS

    def validate(self) -> "TracerConfig":
        """
        Check parameter ranges.

        Returns:
            self, so calls can be chained.

        Raises:
            ValueError: If a parameter is out of range.
        """
        for name in ("step_size", "min_step", "field_scale", "charge_radius"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        for name in ("singularity_radius", "min_field", "capture_radius"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.max_steps < 1:
            raise ValueError(f"max_steps must be at least 1, got {self.max_steps}")
        if self.density < 1:
            raise ValueError(f"density must be at least 1, got {self.density}")
        if self.min_points < 1:
            raise ValueError(f"min_points must be at least 1, got {self.min_points}")
        if self.capture_radius > self.charge_radius:
            raise ValueError(
                f"capture_radius ({self.capture_radius}) cannot exceed "
                f"charge_radius ({self.charge_radius})"
            )
        return self

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "TracerConfig":
        """
        Build a validated config from a (possibly partial) dictionary.

        Missing keys keep their defaults.

        Raises:
            ValueError: On unknown keys, non-numeric, non-integral or
                out-of-range values.
        """
        if not isinstance(d, dict):
            raise ValueError(f"Config must be a mapping, got {type(d).__name__}")
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(d) - set(known))
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        values = {}
        for name, value in d.items():
            try:
                number = float(value)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Config value {name} must be a number, got {value!r}") from e
            if known[name].type == "int":
                if not number.is_integer():
                    raise ValueError(f"Config value {name} must be an integer, got {value!r}")
                number = int(number)
            values[name] = number
        return replace(cls(), **values).validate()


DEFAULT_CONFIG = TracerConfig()


def workers_from_env(default: int = 1) -> int:
    """Process count for parallel tracing, from FIELD_LINES_WORKERS."""
    raw = os.environ.get("FIELD_LINES_WORKERS")
    if not raw:
        return default
    try:
        return max(1, int(raw))
    except ValueError:
        raise ValueError(f"FIELD_LINES_WORKERS must be an integer, got {raw!r}") from None
