# MIT License (see LICENSE)
"""
The recomputation engine.

FieldLineEngine turns a snapshot of charges into the published set of field
lines. A recomputation pass:
    1. Snapshots the charges (the caller must not mutate them mid-pass).
    2. Seeds `density` traces on the boundary circle of every charge.
    3. Traces each seed (serially, or in a process pool).
    4. Drops lines with fewer than `min_points` vertices.
    5. Publishes the result with a single reference swap.

Every pass takes a revision number when it starts. invalidate() (or a newer
pass) makes older revisions stale, and a stale pass is never published: the
caller gets its result back but `lines` keeps the newer set. Cancellation is
therefore per pass, never mid-trace.

Structure:
    - Caller creates a FieldLineEngine for its canvas size.
    - On every charge mutation (debounced by the caller) it calls recompute().
    - The renderer reads engine.lines.
"""
from __future__ import annotations
import logging
import threading
from contextlib import nullcontext
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, Sequence

from .config import TracerConfig, DEFAULT_CONFIG, workers_from_env
from .constants import DEFAULT_WIDTH, DEFAULT_HEIGHT
from .core.diagnostics import termination_counts
from .core.field import field_at as _field_at
from .core.seeding import Seed, iter_seeds
from .core.tracer import trace_field_line
from .profiler import Profiler
from .types import Charge, FieldLine, FieldVector

logger = logging.getLogger(__name__)


def _trace_seed_worker(args: tuple) -> FieldLine:
    """Trace one seed in a pool process; module level so it pickles."""
    point, direction, charges, bounds, config = args
    return trace_field_line(point, direction, charges, bounds, config)


class FieldLineEngine:
    """
    Field line recomputation with atomic publication.

    Attributes:
        width, height: Canvas bounds used for the out-of-bounds test.
        config: Tracing parameters.
        profiler: Optional Profiler receiving "trace" and "filter" timings.
        workers: Process count for tracing; 1 traces serially. Defaults to
                 the FIELD_LINES_WORKERS environment variable.
    """

    def __init__(
        self,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        config: TracerConfig = DEFAULT_CONFIG,
        profiler: Profiler | None = None,
        workers: int | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas bounds must be positive, got ({width}, {height})")
        self.width = float(width)
        self.height = float(height)
        self.config = config.validate()
        self.profiler = profiler
        self.workers = workers_from_env() if workers is None else max(1, int(workers))

        self._lock = threading.Lock()
        self._revision = 0
        self._published_revision = 0
        self._lines: tuple[FieldLine, ...] = ()

    @property
    def bounds(self) -> tuple[float, float]:
        return (self.width, self.height)

    @property
    def lines(self) -> tuple[FieldLine, ...]:
        """The last published line set."""
        return self._lines

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def published_revision(self) -> int:
        return self._published_revision

    # -------------------------------------------------------------------------
    # Pass lifecycle
    # -------------------------------------------------------------------------

    def begin_pass(self) -> int:
        """Start a pass and return its revision; older passes become stale."""
        with self._lock:
            self._revision += 1
            return self._revision

    def invalidate(self) -> int:
        """Mark any in-flight pass stale (e.g. the charges just changed)."""
        return self.begin_pass()

    def publish(self, revision: int, lines: Sequence[FieldLine]) -> bool:
        """
        Publish the result of pass `revision` if it is still current.

        Returns:
            True if published, False if the pass was stale and dropped.
        """
        with self._lock:
            if revision != self._revision:
                logger.debug("Dropping stale pass %d (current revision %d)", revision, self._revision)
                return False
            self._lines = tuple(lines)
            self._published_revision = revision
            return True

    # -------------------------------------------------------------------------
    # Computation
    # -------------------------------------------------------------------------

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def _trace_all(self, seeds: list[Seed], charges: tuple[Charge, ...]) -> list[FieldLine]:
        bounds = self.bounds
        if self.workers > 1 and len(seeds) > 1:
            args = [(s.point, s.direction, charges, bounds, self.config) for s in seeds]
            chunk = max(1, len(args) // (4 * self.workers))
            with ProcessPoolExecutor(max_workers=self.workers) as pool:
                return list(pool.map(_trace_seed_worker, args, chunksize=chunk))
        return [trace_field_line(s.point, s.direction, charges, bounds, self.config) for s in seeds]

    def compute(self, charges: Iterable[Charge]) -> tuple[FieldLine, ...]:
        """
        Run one pass without publishing.

        Args:
            charges: Charges to trace; copied into a tuple first.

        Returns:
            Lines with at least config.min_points vertices, in seed order
            (charge by charge, each ring by increasing angle).
        """
        snapshot = tuple(charges)
        seeds = list(iter_seeds(snapshot, self.config.density, self.config.charge_radius))

        with self._section("trace"):
            traced = self._trace_all(seeds, snapshot)

        with self._section("filter"):
            kept = tuple(line for line in traced if len(line) >= self.config.min_points)

        if logger.isEnabledFor(logging.DEBUG):
            tally = {t.value: n for t, n in termination_counts(kept).items()}
            logger.debug(
                "Traced %d seeds around %d charges: kept %d, dropped %d short; %s",
                len(seeds), len(snapshot), len(kept), len(traced) - len(kept), tally,
            )
        return kept

    def recompute(self, charges: Iterable[Charge]) -> tuple[FieldLine, ...]:
        """
        Recompute and publish the field lines for a charge set.

        Returns:
            The lines of this pass (published unless a newer pass started
            or invalidate() was called while it ran).
        """
        revision = self.begin_pass()
        lines = self.compute(charges)
        self.publish(revision, lines)
        return lines

    def field_at(self, point, charges: Sequence[Charge]) -> FieldVector:
        """Direct field query with this engine's config."""
        return _field_at(point, charges, self.config)


def recompute_field_lines(
    charges: Iterable[Charge],
    bounds: tuple[float, float] = (DEFAULT_WIDTH, DEFAULT_HEIGHT),
    config: TracerConfig | None = None,
) -> list[FieldLine]:
    """
    Trace and filter the field lines of a charge set in one call.

    Deterministic: the same charges, bounds and config give the same lines.
    """
    engine = FieldLineEngine(bounds[0], bounds[1], config or DEFAULT_CONFIG, workers=1)
    return list(engine.compute(charges))


def field_at(point, charges: Sequence[Charge], config: TracerConfig | None = None) -> FieldVector:
    """Electric field at `point` from `charges`."""
    return _field_at(point, charges, config or DEFAULT_CONFIG)
