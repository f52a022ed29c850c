# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON frame exporter.

Writes one frame snapshot (positions, colors, link segments and the
selected orbit) as JSON for an external renderer.
External dependencies (json, file I/O) are confined to this adapter.
"""
import json
from typing import Any

from orbitlink.domain.simulation import FrameSnapshot
from orbitlink.ports.export import FrameExporter


def _point(p) -> list[float] | None:
    return None if p is None else [round(float(c), 6) for c in p]


def frame_to_dict(frame: FrameSnapshot) -> dict[str, Any]:
    """Plain-JSON representation of a frame."""
    satellites = [
        {
            "id": i,
            "position": _point(position),
            "color": _point(color),
        }
        for i, (position, color) in enumerate(zip(frame.positions, frame.colors))
    ]
    links = [
        {
            "start": _point(seg.start),
            "end": _point(seg.end),
            "start_color": list(seg.start_color),
            "end_color": list(seg.end_color),
        }
        for seg in frame.segments
    ]
    selected = None
    if frame.selected is not None:
        selected = {
            "id": frame.selected.id,
            "name": frame.selected.name,
            "orbit_path": [_point(p) for p in frame.selected.orbit_path],
            "marker": _point(frame.selected.marker),
        }

    return {
        "instant": frame.instant.isoformat(),
        "earth_rotation_rad": frame.earth_rotation_rad,
        "satellites": satellites,
        "links": links,
        "selected": selected,
    }


class JsonFrameExporter(FrameExporter):
    """Exports frame snapshots to JSON files."""

    def export(self, frame: FrameSnapshot, path: str) -> int:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(frame_to_dict(frame), f, indent=2, ensure_ascii=False)
        return frame.visible_count
