# MIT License (see LICENSE)
"""
Rendering adapters and glyph geometry.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the drawing interface.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for timing runs.
    - BufferedRenderer: Records frames for playback or export.
    - arrow_marks / line_source_polarity: Arrow placement along lines.

The engine has no rendering dependency; these adapters are optional.

Typical usage:
    from field_lines.renderer import DebugRenderer

    DebugRenderer().render(charges, engine.lines, engine.bounds)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)
from .glyphs import ArrowMark, arrow_marks, line_source_polarity

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "ArrowMark",
    "arrow_marks",
    "line_source_polarity",
]
