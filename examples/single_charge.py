from field_lines import Charge, recompute_field_lines
from field_lines.core.diagnostics import polyline_length, termination_counts
from field_lines.core.field import field_magnitude_on_grid
import numpy as np

charge = Charge(position=(500.0, 300.0), q=1e-6)
lines = recompute_field_lines([charge], bounds=(1000, 600))

print("terminations", {t.value: n for t, n in termination_counts(lines).items()})
for i, line in enumerate(lines[:6]):
    print(f"line {i:2d}: {len(line):5d} pts, length {polyline_length(line):7.1f}")

# Coarse |E| overlay
xs = np.linspace(0, 1000, 11)
ys = np.linspace(0, 600, 7)
print(np.array2string(field_magnitude_on_grid(xs, ys, [charge]), precision=3))
