# MIT License (see LICENSE)
"""
Input/Output utilities for charge layouts and field lines.

This subpackage provides:
    - Layout files: Save and load charges, canvas size and tracer config.
    - Line export: Dump traced field lines to JSON for external tools.

Typical usage:
    from field_lines.io import load_layout, save_field_lines

    layout = load_layout("dipole.json")
    lines = recompute_field_lines(layout.charges.snapshot(), layout.bounds, layout.config)
    save_field_lines(lines, "dipole_lines.json")
"""
from .json_io import (
    Layout,
    load_layout,
    load_layout_raw,
    save_layout,
    layout_from_json,
    layout_to_json,
    charge_from_json,
    charge_to_json,
    field_lines_to_json,
    save_field_lines,
)

__all__ = [
    "Layout",
    # Loading
    "load_layout",
    "load_layout_raw",
    # Saving
    "save_layout",
    "save_field_lines",
    # Serialization
    "layout_from_json",
    "layout_to_json",
    "charge_from_json",
    "charge_to_json",
    "field_lines_to_json",
]
