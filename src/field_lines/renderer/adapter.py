# MIT License (see LICENSE)
"""
Renderer adapters for field line output.

The engine has no drawing dependency. A front end implements
RendererAdapter for its graphics backend (canvas, matplotlib, a web view)
and feeds it the engine's published lines. The adapters here cover text
debugging, no-op runs and frame recording.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Sequence, TextIO
import sys

from ..constants import ARROW_SPACING
from ..types import Charge, FieldLine
from .glyphs import ArrowMark, arrow_marks, line_source_polarity


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(1000, 600)
        for line in engine.lines:
            renderer.draw_field_line(line, arrow_marks(line), polarity=+1)
        for charge in charges:
            renderer.draw_charge(charge)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render(charges, engine.lines, bounds=engine.bounds)
    """

    arrow_spacing: float = ARROW_SPACING

    @abstractmethod
    def begin_frame(self, width: float, height: float) -> None:
        """Begin a frame covering a width × height canvas."""
        ...

    @abstractmethod
    def draw_field_line(self, line: FieldLine, arrows: list[ArrowMark], polarity: int) -> None:
        """
        Draw one field line.

        Args:
            line: The traced polyline.
            arrows: Direction arrow placements along it.
            polarity: Polarity of the charge the line starts from; -1 means
                      arrows should point back toward the start.
        """
        ...

    @abstractmethod
    def draw_charge(self, charge: Charge) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render(
        self,
        charges: Sequence[Charge],
        lines: Sequence[FieldLine],
        bounds: tuple[float, float],
        show_field: bool = True,
    ) -> None:
        """Draw lines (if shown) under the charges, as one frame."""
        self.begin_frame(*bounds)
        if show_field:
            for line in lines:
                if len(line) < 2:
                    continue
                polarity = line_source_polarity(line, charges)
                self.draw_field_line(line, arrow_marks(line, self.arrow_spacing), polarity)
        for charge in charges:
            self.draw_charge(charge)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame 1000x600 ===
        line +1 hit 724 pts (320.0, 300.0) -> (700.0, 300.0) arrows=6
        [1] + q=1e-06 @ (300.0, 300.0)
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def begin_frame(self, width: float, height: float) -> None:
        self.output.write(f"=== Frame {width:g}x{height:g} ===\n")

    def draw_field_line(self, line: FieldLine, arrows: list[ArrowMark], polarity: int) -> None:
        (sx, sy), (ex, ey) = line.start, line.end
        self.output.write(
            f"line {polarity:+d} {line.termination.value} {len(line)} pts "
            f"({sx:.1f}, {sy:.1f}) -> ({ex:.1f}, {ey:.1f}) arrows={len(arrows)}\n"
        )

    def draw_charge(self, charge: Charge) -> None:
        sign = "+" if charge.q > 0 else "-"
        self.output.write(f"[{charge.id}] {sign} q={charge.q:g} @ ({charge.x:.1f}, {charge.y:.1f})\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for timing passes without drawing overhead."""

    def begin_frame(self, width: float, height: float) -> None:
        pass

    def draw_field_line(self, line: FieldLine, arrows: list[ArrowMark], polarity: int) -> None:
        pass

    def draw_charge(self, charge: Charge) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frames as plain dicts.

    Example:
        renderer = BufferedRenderer()
        renderer.render(charges, engine.lines, engine.bounds)
        frame = renderer.frames[-1]
        print(len(frame["lines"]), "lines,", len(frame["charges"]), "charges")
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, width: float, height: float) -> None:
        self._current_frame = {
            "width": width,
            "height": height,
            "lines": [],
            "charges": [],
        }

    def draw_field_line(self, line: FieldLine, arrows: list[ArrowMark], polarity: int) -> None:
        if self._current_frame is None:
            return
        self._current_frame["lines"].append({
            "points": [list(p) for p in line.points],
            "polarity": polarity,
            "arrows": [(a.x, a.y, a.angle) for a in arrows],
        })

    def draw_charge(self, charge: Charge) -> None:
        if self._current_frame is None:
            return
        self._current_frame["charges"].append({
            "id": charge.id,
            "position": list(charge.position),
            "q": charge.q,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
