# MIT License (see LICENSE)
"""
Physical and numerical constants used by the field line engine.

Distances are in canvas units (pixels), charges in Coulombs. The tracing
constants are tuning knobs for visual smoothness, not derived physical
quantities; TracerConfig takes its defaults from here.
"""
from __future__ import annotations

# Coulomb's constant, k = 1/(4πε₀), rounded as used by the interactive canvas.
# Value: 8.988 × 10⁹ N·m²/C²
K_COULOMB: float = 8.988e9

# Magnitude given to a charge placed by a click (sign carries the polarity).
DEFAULT_CHARGE: float = 1e-6

# Contributions from charges closer than this are excluded outright
# (no softening, no clamping).
SINGULARITY_RADIUS: float = 5.0

# Nominal integration step and its lower bound.
STEP_SIZE: float = 3.0
MIN_STEP: float = 0.5

# Field magnitude at which the adaptive step reaches half of STEP_SIZE.
FIELD_SCALE: float = 1e3

# Below this |E| the field is considered vanished and tracing stops.
MIN_FIELD: float = 1e-3

MAX_STEPS: int = 2000

# Radius of a charge body; seeds start on this circle and opposite charges
# capture lines inside it.
CHARGE_RADIUS: float = 20.0

# Tighter capture radius applied to charges of either polarity.
CAPTURE_RADIUS: float = 15.0

# Seeds per charge, evenly spaced in angle.
FIELD_LINE_DENSITY: int = 24

# Lines with fewer points are discarded by the driver.
MIN_LINE_POINTS: int = 6

# Arc length between direction arrows drawn along a line.
ARROW_SPACING: float = 60.0

DEFAULT_WIDTH: float = 1000.0
DEFAULT_HEIGHT: float = 600.0
