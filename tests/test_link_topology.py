# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for capped nearest-neighbour optical link topology."""
import math

import numpy as np
import pytest

from orbitlink.domain.link_topology import (
    INCOMING_COLOR,
    OUTGOING_COLOR,
    LinkEdge,
    LinkSegment,
    build_link_edges,
    build_link_segments,
    nearest_link_edges,
    pack_positions,
    segment_buffers,
)


def _line(n):
    return [(float(i), 0.0, 0.0) for i in range(n)]


def _targets(edges, source):
    return [e.target_id for e in edges if e.source_id == source]


class TestNearestNeighbours:

    def test_collinear_tie_break_by_id(self):
        """Sat at x=2 links 1, 3 (tie at 1 → lower id first), then 0, 4."""
        edges = build_link_edges(_line(5), max_range=2.5)
        assert _targets(edges, 2) == [1, 3, 0, 4]

    def test_distances_are_euclidean(self):
        edges = build_link_edges(_line(5), max_range=2.5)
        from_two = [e for e in edges if e.source_id == 2]
        assert [e.distance for e in from_two] == pytest.approx([1.0, 1.0, 2.0, 2.0])

    def test_at_most_four_nearest(self):
        """Six neighbours in range → exactly the four nearest, in order."""
        positions = [
            (0.0, 0.0, 0.0),
            (0.0, 0.0, 0.9),   # 0.9
            (0.3, 0.0, 0.0),   # 0.3
            (0.0, -0.7, 0.0),  # 0.7
            (0.0, 0.5, 0.0),   # 0.5
            (0.0, 0.0, -0.1),  # 0.1
            (-0.8, 0.0, 0.0),  # 0.8
        ]
        edges = build_link_edges(positions, max_range=1.0)
        assert _targets(edges, 0) == [5, 2, 4, 3]

    def test_range_is_inclusive(self):
        edges = build_link_edges([(0.0, 0.0, 0.0), (0.5, 0.0, 0.0)], max_range=0.5)
        assert len(edges) == 2

    def test_out_of_range_pair_never_linked(self):
        """Two sats just beyond range share no edge, even with nothing else around."""
        edges = build_link_edges([(0.0, 0.0, 0.0), (0.0, 0.0, 0.50001)], max_range=0.5)
        assert edges == []

    def test_custom_cap(self):
        edges = build_link_edges(_line(5), max_range=10.0, max_links=2)
        assert _targets(edges, 2) == [1, 3]
        assert all(len(_targets(edges, i)) == 2 for i in range(5))

    def test_zero_cap(self):
        assert build_link_edges(_line(3), max_range=10.0, max_links=0) == []

    def test_edges_ordered_by_source(self):
        edges = build_link_edges(_line(4), max_range=1.5)
        assert [e.source_id for e in edges] == sorted(e.source_id for e in edges)

    def test_deterministic(self):
        rng = np.random.default_rng(7)
        positions = [tuple(p) for p in rng.uniform(-1, 1, size=(40, 3))]
        assert build_link_edges(positions, 0.6) == build_link_edges(positions, 0.6)

    def test_matches_brute_force(self):
        rng = np.random.default_rng(11)
        positions = [tuple(p) for p in rng.uniform(-1, 1, size=(30, 3))]
        edges = build_link_edges(positions, max_range=0.8)
        for i, p in enumerate(positions):
            candidates = sorted(
                (math.dist(p, q), j) for j, q in enumerate(positions)
                if j != i and math.dist(p, q) <= 0.8
            )[:4]
            assert _targets(edges, i) == [j for _, j in candidates]


class TestMissingPositions:

    def test_absent_satellites_have_no_edges(self):
        positions = [(0.0, 0.0, 0.0), None, (0.1, 0.0, 0.0), None]
        edges = build_link_edges(positions, max_range=1.0)
        assert edges == [
            LinkEdge(source_id=0, target_id=2, distance=pytest.approx(0.1)),
            LinkEdge(source_id=2, target_id=0, distance=pytest.approx(0.1)),
        ]
        involved = {e.source_id for e in edges} | {e.target_id for e in edges}
        assert 1 not in involved and 3 not in involved

    def test_origin_is_a_valid_position(self):
        """A real position at the origin still links."""
        edges = build_link_edges([(0.0, 0.0, 0.0), (0.2, 0.0, 0.0)], max_range=1.0)
        assert len(edges) == 2

    def test_empty_and_single(self):
        assert build_link_edges([]) == []
        assert build_link_edges([(1.0, 0.0, 0.0)]) == []
        assert build_link_edges([None, None]) == []


class TestValidation:

    def test_negative_range(self):
        with pytest.raises(ValueError):
            build_link_edges(_line(2), max_range=-1.0)

    def test_negative_cap(self):
        with pytest.raises(ValueError):
            build_link_edges(_line(2), max_links=-1)


class TestPackPositions:

    def test_reuses_matching_buffer(self):
        buf = np.full((3, 3), 9.0)
        coords, valid = pack_positions([(1.0, 2.0, 3.0), None, (4.0, 5.0, 6.0)], out=buf)
        assert coords is buf
        assert valid.tolist() == [True, False, True]
        assert coords[1].tolist() == [0.0, 0.0, 0.0]

    def test_reallocates_on_size_change(self):
        buf = np.zeros((2, 3))
        coords, _ = pack_positions([(1.0, 2.0, 3.0)] * 4, out=buf)
        assert coords is not buf
        assert coords.shape == (4, 3)

    def test_nearest_on_packed(self):
        coords, valid = pack_positions(_line(5))
        assert nearest_link_edges(coords, valid, 2.5) == build_link_edges(_line(5), 2.5)


class TestSegments:

    def test_directed_mutual_pair_drawn_twice(self):
        positions = [(0.0, 0.0, 0.0), (0.1, 0.0, 0.0)]
        segments = build_link_segments(positions, max_range=1.0)
        assert segments == [
            LinkSegment(start=positions[0], end=positions[1]),
            LinkSegment(start=positions[1], end=positions[0]),
        ]

    def test_endpoint_colors(self):
        seg = build_link_segments([(0.0, 0.0, 0.0), (0.1, 0.0, 0.0)], max_range=1.0)[0]
        assert seg.start_color == OUTGOING_COLOR
        assert seg.end_color == INCOMING_COLOR

    def test_segment_buffers(self):
        segments = build_link_segments(_line(3), max_range=1.0)
        vertices, colors = segment_buffers(segments)
        assert vertices.shape == (2 * len(segments), 3)
        assert vertices.dtype == np.float32
        assert vertices[0].tolist() == [0.0, 0.0, 0.0]
        assert vertices[1].tolist() == [1.0, 0.0, 0.0]
        assert colors[0].tolist() == pytest.approx(list(OUTGOING_COLOR))
        assert colors[1].tolist() == pytest.approx(list(INCOMING_COLOR))

    def test_empty_buffers(self):
        vertices, colors = segment_buffers([])
        assert vertices.shape == (0, 3) and colors.shape == (0, 3)
