import sys

from field_lines import recompute_field_lines
from field_lines.io import load_layout, save_field_lines

# Usage: python examples/layout_file.py layout.json lines.json
layout = load_layout(sys.argv[1])
lines = recompute_field_lines(layout.charges.snapshot(), layout.bounds, layout.config)
save_field_lines(lines, sys.argv[2])
print("wrote", len(lines), "lines to", sys.argv[2])
