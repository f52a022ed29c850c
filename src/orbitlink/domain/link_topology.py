# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Optical link topology between satellites for one tick.

Each satellite with a position links to at most ``max_links`` nearest
neighbours within range. The search is a brute-force O(n²) pass over
all valid pairs, which is fine for a few hundred satellites and is the
scaling limit of this module. Filtering uses squared distances only.

Edges are directed: a satellite emits one segment per retained
neighbour, tagged outgoing at its own end and incoming at the
neighbour's end. A mutual pair therefore yields two segments.
Ties at equal distance go to the lower target id.
"""
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from orbitlink.domain.constants import MAX_LINK_RANGE_UNITS, MAX_LINKS_PER_SATELLITE

# Red-orange at the source end, cyan at the target end (#ff3300 -> #00ffff)
OUTGOING_COLOR = (1.0, 0.2, 0.0)
INCOMING_COLOR = (0.0, 1.0, 1.0)


@dataclass(frozen=True)
class LinkEdge:
    """Directed link from a satellite to one of its nearest neighbours."""
    source_id: int
    target_id: int
    distance: float


@dataclass(frozen=True)
class LinkSegment:
    """Renderable line segment with per-endpoint colors."""
    start: tuple[float, float, float]
    end: tuple[float, float, float]
    start_color: tuple[float, float, float] = OUTGOING_COLOR
    end_color: tuple[float, float, float] = INCOMING_COLOR


def pack_positions(
    positions: Sequence[tuple[float, float, float] | None],
    out: np.ndarray | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Pack optional positions into an (n, 3) array plus a validity mask.

    ``out`` is reused when it already has shape (n, 3), so a caller can
    keep one scratch buffer across ticks.
    """
    n = len(positions)
    if out is None or out.shape != (n, 3):
        out = np.zeros((n, 3), dtype=float)
    valid = np.zeros(n, dtype=bool)
    for i, position in enumerate(positions):
        if position is None:
            out[i] = 0.0
        else:
            out[i] = position
            valid[i] = True
    return out, valid


def nearest_link_edges(
    coords: np.ndarray,
    valid: np.ndarray,
    max_range: float = MAX_LINK_RANGE_UNITS,
    max_links: int = MAX_LINKS_PER_SATELLITE,
) -> list[LinkEdge]:
    """
    Capped nearest-neighbour edges over packed positions.

    Args:
        coords: (n, 3) render-space positions; row i belongs to id i.
        valid: (n,) mask, False where the satellite has no position.
        max_range: Link range in render units (inclusive).
        max_links: Maximum outgoing edges per satellite.

    Returns:
        Edges grouped by source id ascending, nearest first within each.
    """
    if max_range < 0:
        raise ValueError(f"max_range must be non-negative, got {max_range}")
    if max_links < 0:
        raise ValueError(f"max_links must be non-negative, got {max_links}")

    max_range_sq = max_range * max_range
    valid_ids = np.flatnonzero(valid)
    edges: list[LinkEdge] = []

    for i in valid_ids:
        others = valid_ids[valid_ids != i]
        if others.size == 0:
            continue
        diff = coords[others] - coords[i]
        dist_sq = np.einsum("ij,ij->i", diff, diff)

        within = dist_sq <= max_range_sq
        candidate_ids = others[within]
        candidate_dist_sq = dist_sq[within]

        # lexsort: last key is primary
        order = np.lexsort((candidate_ids, candidate_dist_sq))[:max_links]
        for k in order:
            edges.append(LinkEdge(
                source_id=int(i),
                target_id=int(candidate_ids[k]),
                distance=math.sqrt(float(candidate_dist_sq[k])),
            ))

    return edges


def build_link_edges(
    positions: Sequence[tuple[float, float, float] | None],
    max_range: float = MAX_LINK_RANGE_UNITS,
    max_links: int = MAX_LINKS_PER_SATELLITE,
) -> list[LinkEdge]:
    """Capped nearest-neighbour edges; ``positions[i]`` belongs to id i."""
    coords, valid = pack_positions(positions)
    return nearest_link_edges(coords, valid, max_range, max_links)


def edges_to_segments(
    edges: Sequence[LinkEdge],
    positions: Sequence[tuple[float, float, float] | None],
) -> list[LinkSegment]:
    """One outgoing→incoming segment per edge."""
    return [
        LinkSegment(start=positions[e.source_id], end=positions[e.target_id])
        for e in edges
    ]


def build_link_segments(
    positions: Sequence[tuple[float, float, float] | None],
    max_range: float = MAX_LINK_RANGE_UNITS,
    max_links: int = MAX_LINKS_PER_SATELLITE,
) -> list[LinkSegment]:
    return edges_to_segments(build_link_edges(positions, max_range, max_links), positions)


def segment_buffers(segments: Sequence[LinkSegment]) -> tuple[np.ndarray, np.ndarray]:
    """
    Flatten segments into vertex and color buffers for line drawing.

    Returns:
        (vertices, colors), each float32 of shape (2 * len(segments), 3);
        vertex 2k is the start of segment k, vertex 2k + 1 its end.
    """
    vertices = np.empty((2 * len(segments), 3), dtype=np.float32)
    colors = np.empty((2 * len(segments), 3), dtype=np.float32)
    for k, seg in enumerate(segments):
        vertices[2 * k] = seg.start
        vertices[2 * k + 1] = seg.end
        colors[2 * k] = seg.start_color
        colors[2 * k + 1] = seg.end_color
    return vertices, colors
