"""Tests for drawing quality checks."""

import numpy as np

from planar_layout import Link, Node
from planar_layout.metrics import (
    crossing_pairs,
    drawing_extent,
    edge_crossings,
    segments_intersect,
)


class TestSegmentsIntersect:
    """Closed-segment intersection."""

    def test_proper_crossing(self):
        assert segments_intersect((0, 0), (2, 2), (0, 2), (2, 0))

    def test_disjoint(self):
        assert not segments_intersect((0, 0), (1, 0), (0, 1), (1, 1))

    def test_endpoint_touching_interior(self):
        """A node lying on another edge counts."""
        assert segments_intersect((0, 0), (4, 0), (2, 0), (2, 3))

    def test_collinear_overlap(self):
        assert segments_intersect((0, 0), (3, 0), (2, 0), (5, 0))

    def test_collinear_apart(self):
        assert not segments_intersect((0, 0), (1, 0), (2, 0), (3, 0))

    def test_lines_cross_outside_segments(self):
        assert not segments_intersect((0, 0), (1, 1), (3, 0), (2, 1))


class TestEdgeCrossings:
    """Tests for edge crossing detection."""

    def test_no_crossings_triangle(self):
        """Triangle has no crossings."""
        nodes = [Node(x=0, y=0), Node(x=100, y=0), Node(x=50, y=87)]
        links = [Link(0, 1), Link(1, 2), Link(2, 0)]

        assert edge_crossings(nodes, links) == 0

    def test_crossing_square_with_diagonals(self):
        """Square with diagonals has exactly 1 crossing."""
        nodes = [
            Node(x=0, y=0),
            Node(x=100, y=0),
            Node(x=100, y=100),
            Node(x=0, y=100),
        ]
        links = [
            Link(0, 1),
            Link(1, 2),
            Link(2, 3),
            Link(3, 0),  # Square edges
            Link(0, 2),
            Link(1, 3),  # Diagonals
        ]

        assert edge_crossings(nodes, links) == 1

    def test_empty_graph(self):
        """Empty graph has no crossings."""
        assert edge_crossings([], []) == 0

    def test_links_by_node(self):
        """Link endpoints may be Node objects."""
        nodes = [
            Node(index=0, x=0, y=0),
            Node(index=1, x=10, y=10),
            Node(index=2, x=0, y=10),
            Node(index=3, x=10, y=0),
        ]
        links = [Link(nodes[0], nodes[1]), Link(nodes[2], nodes[3])]
        assert edge_crossings(nodes, links) == 1


class TestCrossingPairs:
    def test_reports_pairs(self):
        positions = np.array([[0, 0], [2, 2], [0, 2], [2, 0]])
        pairs = crossing_pairs(positions, [(0, 1), (2, 3), (0, 2)])
        assert pairs == [((0, 1), (2, 3))]

    def test_shared_endpoint_ignored(self):
        positions = [(0, 0), (2, 0), (1, 1)]
        assert crossing_pairs(positions, [(0, 1), (1, 2), (2, 0)]) == []

    def test_out_of_range_ignored(self):
        positions = [(0, 0), (2, 2), (0, 2)]
        assert crossing_pairs(positions, [(0, 1), (2, 7)]) == []

    def test_node_on_edge(self):
        """Collinear grid points are caught exactly."""
        positions = np.array([[0, 0], [4, 0], [2, 0], [2, 3]], dtype=np.int64)
        assert crossing_pairs(positions, [(0, 1), (2, 3)]) == [((0, 1), (2, 3))]


class TestDrawingExtent:
    def test_extent(self):
        positions = np.array([[-2, 0], [4, 0], [1, 3]])
        assert drawing_extent(positions) == (6.0, 3.0)

    def test_empty(self):
        assert drawing_extent(np.zeros((0, 2))) == (0.0, 0.0)
