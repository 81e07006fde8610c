"""
Microbenchmark: time per recomputation pass vs number of charges.
Run:
  python benchmarks/bench_recompute.py
"""
import time
import numpy as np
from field_lines import ChargeSet, FieldLineEngine
from field_lines.core.diagnostics import termination_counts
from field_lines.profiler import Profiler

def run(n: int, passes: int = 3, workers: int = 1):
    prof = Profiler()
    engine = FieldLineEngine(width=1000, height=600, profiler=prof, workers=workers)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    charges = ChargeSet()
    for _ in range(n):
        x = float(rng.uniform(50, 950))
        y = float(rng.uniform(50, 550))
        charges.place((x, y), polarity=int(rng.choice([-1, 1])))
    snapshot = charges.snapshot()

    t0 = time.perf_counter()
    for _ in range(passes):
        lines = engine.recompute(snapshot)
    t1 = time.perf_counter()

    return (t1 - t0) / passes, len(lines), termination_counts(lines), prof.stats.summary()

if __name__ == "__main__":
    for n in [1, 2, 5, 10, 20]:
        per_pass, n_lines, counts, summary = run(n)
        print(f"N={n:3d}  pass={1e3*per_pass:9.1f} ms  lines={n_lines:4d}")
        print(" ", {t.value: c for t, c in counts.items()})
        for k in ["trace", "filter"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
