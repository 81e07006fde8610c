from field_lines import ChargeSet, FieldLineEngine
from field_lines.core.diagnostics import termination_counts
from field_lines.logging_config import setup_logging
from field_lines.renderer import DebugRenderer
import logging

setup_logging(logging.DEBUG)

# Source and sink on a horizontal axis, as placed by two clicks
charges = ChargeSet()
charges.place((300, 300), polarity=+1)
charges.place((700, 300), polarity=-1)

engine = FieldLineEngine(width=1000, height=600)
lines = engine.recompute(charges.snapshot())

print("lines", len(lines), {t.value: n for t, n in termination_counts(lines).items()})
DebugRenderer().render(charges.snapshot(), engine.lines, engine.bounds)

# Drag the sink and recompute; the published set is replaced as a whole
sink = charges.query_point((705, 295))
charges.move(sink.id, (650, 450))
engine.recompute(charges.snapshot())
print("after drag", len(engine.lines), "lines")
