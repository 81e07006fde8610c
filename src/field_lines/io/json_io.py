# MIT License (see LICENSE)
"""
JSON serialization of charge layouts and traced field lines.

Layouts are what a user builds on the canvas; saving them makes a scene
reproducible (examples, benchmarks, bug reports). Field line exports are
one-way: lines are always recomputed from a layout, never loaded back.

Layout Schema:
--------------
{
  "width": float,                  # Canvas width, default: 1000
  "height": float,                 # Canvas height, default: 600
  "config": {                      # Optional TracerConfig overrides
    "step_size": float,
    "max_steps": int,
    ...
  },
  "charges": [
    {
      "position": [x, y],          # Required
      "q": float                   # Required, Coulombs (sign = polarity)
    }
  ]
}

Field Line Schema:
------------------
{
  "lines": [
    {
      "points": [[x, y], ...],
      "termination": "max_steps" | "field_vanished" | "out_of_bounds" | "hit",
      "direction": 1 | -1
    }
  ]
}
"""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from ..charges import ChargeSet
from ..config import TracerConfig, DEFAULT_CONFIG
from ..constants import DEFAULT_WIDTH, DEFAULT_HEIGHT
from ..types import Charge, FieldLine

logger = logging.getLogger(__name__)


@dataclass
class Layout:
    """A saved scene: charges, canvas size and tracer parameters."""
    charges: ChargeSet = field(default_factory=ChargeSet)
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    config: TracerConfig = DEFAULT_CONFIG

    @property
    def bounds(self) -> tuple[float, float]:
        return (self.width, self.height)


def load_layout_raw(path: str) -> dict[str, Any]:
    """Load raw JSON data from a layout file without object construction."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def charge_from_json(d: dict[str, Any]) -> Charge:
    """
    Parse one charge entry.

    Raises:
        ValueError: If position or q is missing or malformed.
    """
    if not isinstance(d, dict):
        raise ValueError(f"Charge definition must be an object, got {type(d).__name__}")
    if "position" not in d or "q" not in d:
        raise ValueError("Charge definition requires 'position' and 'q' fields.")
    pos = d["position"]
    if not isinstance(pos, (list, tuple)) or len(pos) != 2:
        raise ValueError(f"Charge position must be a list of 2 coordinates, got {pos!r}")
    try:
        return Charge(position=(float(pos[0]), float(pos[1])), q=float(d["q"]))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Charge position and q must be numbers: {e}") from e


def charge_to_json(charge: Charge) -> dict[str, Any]:
    if not isinstance(charge, Charge):
        raise TypeError(f"Cannot serialize {type(charge).__name__} as a charge")
    return {"position": list(charge.position), "q": charge.q}


def layout_from_json(data: dict[str, Any]) -> Layout:
    """
    Build a Layout from a parsed JSON document.

    Charges get fresh sequential ids in file order.

    Raises:
        ValueError: On non-positive canvas size, bad charges or bad config.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Layout document must be an object, got {type(data).__name__}")
    try:
        width = float(data.get("width", DEFAULT_WIDTH))
        height = float(data.get("height", DEFAULT_HEIGHT))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Canvas size must be numeric: {e}") from e
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got ({width}, {height})")

    config = DEFAULT_CONFIG
    if "config" in data:
        config = TracerConfig.from_dict(data["config"])

    entries = data.get("charges", [])
    if not isinstance(entries, list):
        raise ValueError(f"Layout charges must be a list, got {type(entries).__name__}")

    charges = ChargeSet()
    for entry in entries:
        charges.add(charge_from_json(entry))

    return Layout(charges=charges, width=width, height=height, config=config)


def layout_to_json(layout: Layout) -> dict[str, Any]:
    """
    Serialize a Layout to a dictionary.

    Only config fields that differ from the defaults are written.
    """
    result: dict[str, Any] = {
        "width": layout.width,
        "height": layout.height,
        "charges": [charge_to_json(c) for c in layout.charges],
    }
    defaults = DEFAULT_CONFIG.to_dict()
    overrides = {k: v for k, v in layout.config.to_dict().items() if defaults[k] != v}
    if overrides:
        result["config"] = overrides
    return result


def load_layout(path: str) -> Layout:
    """
    Load a layout file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document does not describe a valid layout.
    """
    layout = layout_from_json(load_layout_raw(path))
    logger.info("Loaded %d charges from %s", len(layout.charges), path)
    return layout


def save_layout(layout: Layout, path: str, indent: int = 2) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(layout_to_json(layout), f, indent=indent)


def field_lines_to_json(lines: Iterable[FieldLine]) -> dict[str, Any]:
    """Serialize traced lines for export."""
    out = []
    for line in lines:
        if not isinstance(line, FieldLine):
            raise TypeError(f"Cannot serialize {type(line).__name__} as a field line")
        out.append({
            "points": [list(p) for p in line.points],
            "termination": line.termination.value,
            "direction": line.direction,
        })
    return {"lines": out}


def save_field_lines(lines: Iterable[FieldLine], path: str, indent: int | None = None) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(field_lines_to_json(lines), f, indent=indent)
