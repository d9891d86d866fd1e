#!/usr/bin/env python3
"""
Venue Map Export Script
=======================

Standalone script that generates a venue map and writes it as JSON.

This script:
    1. Builds a grid or circular layout from command-line parameters
    2. Optionally places gates (circular layouts only)
    3. Writes the VenueMapDocument to ``{kind}-map-{unixMillis}.json``

Usage:
    python scripts/export_map.py grid --rows 3 --cols 8
    python scripts/export_map.py circular --layers 3 --sections 1 6 12 --gates 0 90 180 270
"""

import argparse
import logging
import math
import os
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from venue_engine.config import settings
from venue_engine.editor import CircularLayoutEditor, GridLayoutEditor


logger = logging.getLogger(__name__)


def build_grid(args: argparse.Namespace) -> GridLayoutEditor:
    return GridLayoutEditor(
        rows=args.rows,
        cols=args.cols,
        inset=settings.editor.grid_inset,
        limits=settings.limits,
    )


def build_circular(args: argparse.Namespace) -> CircularLayoutEditor:
    cfg = settings.ring_pack
    editor = CircularLayoutEditor(
        layers=args.layers,
        limits=settings.limits,
        void_ratio=cfg.void_ratio,
        gap=cfg.gap,
        margin=cfg.margin,
        min_void=cfg.min_void,
        angular_gap=cfg.angular_gap,
        sector_steps=cfg.sector_steps,
        gate_candidates=settings.editor.gate_candidates,
        gate_offset=settings.editor.gate_offset,
        gate_snap_radius=settings.editor.gate_snap_radius,
    )
    for index, count in enumerate(args.sections or []):
        if index >= editor.layers:
            logger.warning(f"Ignoring section counts beyond layer {editor.layers}")
            break
        editor.set_sections(index, count)

    # Gates are placed by "clicking" on the candidate at each bearing
    pack = editor.ring_pack
    radius = pack.outer_radius + settings.editor.gate_offset
    for angle in args.gates or []:
        a = math.radians(angle)
        gate = editor.toggle_gate_at(
            pack.center_x + radius * math.cos(a),
            pack.center_y + radius * math.sin(a),
        )
        if gate is None:
            logger.warning(f"No gate position near {angle}°")
    return editor


def main() -> int:
    parser = argparse.ArgumentParser(description="Export a generated venue map")
    parser.add_argument("--out-dir", default=".", help="Output directory")
    sub = parser.add_subparsers(dest="kind", required=True)

    grid = sub.add_parser("grid", help="Rectangular rows x cols layout")
    grid.add_argument("--rows", type=int, default=settings.editor.default_rows)
    grid.add_argument("--cols", type=int, default=settings.editor.default_cols)

    circular = sub.add_parser("circular", help="Concentric ring layout")
    circular.add_argument("--layers", type=int, default=settings.editor.default_layers)
    circular.add_argument("--sections", type=int, nargs="*", help="Sections per layer")
    circular.add_argument("--gates", type=float, nargs="*", help="Gate bearings in degrees")

    args = parser.parse_args()

    editor = build_grid(args) if args.kind == "grid" else build_circular(args)
    out_path = Path(args.out_dir) / editor.export_filename()
    out_path.write_text(editor.to_json())

    document = editor.to_document()
    logger.info(
        f"Wrote {out_path}: sections={document.sections}, "
        f"layers={document.layers}, exits={document.exits}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
