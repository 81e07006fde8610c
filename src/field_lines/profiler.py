# MIT License (see LICENSE)
"""
Timing of recomputation passes.

A pass costs O(density × max_steps × N²) field evaluations, so it is the
number worth watching as charges are added. The engine reports its phases
("trace", "filter") into a Profiler when one is attached.

Example:
    profiler = Profiler()
    engine = FieldLineEngine(1000, 600, profiler=profiler)
    engine.recompute(charges)
    print(profiler.stats.summary()["trace"]["mean_ms"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Timing samples (seconds) grouped by section name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': worst time in milliseconds
            - 'total_ms': summed time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class Profiler:
    """Context-manager timer feeding a ProfileStats."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under `name`, even if it raises."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def reset(self) -> None:
        self.stats = ProfileStats()
