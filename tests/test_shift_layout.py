"""
Tests for ShiftLayout.
"""

import numpy as np
import pytest

from planar_layout import EventType, Graph, ShiftLayout
from planar_layout.metrics import crossing_pairs
from planar_layout.planarity import DMPEmbedder
from planar_layout.validation import (
    EmbeddingError,
    InvalidLinkError,
    NotPlanarError,
    ValidationError,
)


def _k4_links():
    return [{"source": i, "target": j} for i in range(4) for j in range(i + 1, 4)]


def _octahedron_links():
    opposite = {(0, 1), (2, 3), (4, 5)}
    return [(i, j) for i in range(6) for j in range(i + 1, 6) if (i, j) not in opposite]


def _k33_links():
    return [(i, 3 + j) for i in range(3) for j in range(3)]


class TestShiftLayoutBasic:
    """Basic functionality tests."""

    def test_layout_runs_without_error(self):
        """Layout should run and return itself."""
        layout = ShiftLayout(nodes=[{} for _ in range(4)], links=_k4_links(), size=(400, 300))
        result = layout.run()

        assert result is layout
        assert layout.is_planar is True

    @pytest.mark.parametrize(
        "n,links",
        [(4, _k4_links()), (6, _octahedron_links())],
        ids=["k4", "octahedron"],
    )
    def test_nodes_inside_padded_canvas(self, n, links):
        """All nodes should land inside the canvas minus padding."""
        layout = ShiftLayout(nodes=[{} for _ in range(n)], links=links, size=(400, 300), padding=20)
        layout.run()

        eps = 1e-9
        for node in layout.nodes:
            assert 20 - eps <= node.x <= 380 + eps
            assert 20 - eps <= node.y <= 280 + eps

    @pytest.mark.parametrize(
        "n,links",
        [(4, _k4_links()), (6, _octahedron_links())],
        ids=["k4", "octahedron"],
    )
    def test_grid_drawing_is_crossing_free(self, n, links):
        """The integer drawing of the triangulation has no crossings."""
        layout = ShiftLayout(nodes=[{} for _ in range(n)], links=links, size=(400, 300))
        layout.run()

        grid = layout.grid_positions
        assert grid is not None
        assert grid.shape == (n, 2)

        tri = layout.triangulated
        assert tri is not None
        assert tri.edges_count == 3 * n - 6
        edges = [(e.src, e.dest) for e in tri.get_edges()]
        assert crossing_pairs(grid, edges) == []

    def test_positions_follow_grid(self):
        """Canvas positions are a uniform scaling of the grid, y flipped."""
        layout = ShiftLayout(nodes=[{}, {}, {}], links=[(0, 1), (1, 2), (2, 0)], size=(400, 300))
        layout.run(center_graph=False)

        assert layout.grid_positions.tolist() == [[0, 0], [2, 0], [1, 1]]
        a, b, c = layout.nodes
        assert a.y == pytest.approx(b.y)
        assert c.y < a.y
        assert c.x == pytest.approx((a.x + b.x) / 2)
        # scale = min(400 / 2, 300 / 1)
        assert b.x - a.x == pytest.approx(400)
        assert a.y - c.y == pytest.approx(200)

    def test_triangulation_marks_added_edges(self):
        """Chords added for drawing are temporary, input links are not."""
        links = [(i, (i + 1) % 6) for i in range(6)]
        layout = ShiftLayout(nodes=[{} for _ in range(6)], links=links, size=(400, 300))
        layout.run()

        original = {(min(s, t), max(s, t)) for s, t in links}
        for edge in layout.triangulated.get_edges():
            assert edge.is_temporary == ((edge.src, edge.dest) not in original)


class TestShiftLayoutSmallGraphs:
    """Graphs with fewer than three nodes."""

    def test_empty_graph(self):
        layout = ShiftLayout(nodes=[], links=[], size=(400, 300))
        layout.run()

        assert layout.is_planar is True
        assert layout.grid_positions.shape == (0, 2)

    def test_single_node_centered(self):
        layout = ShiftLayout(nodes=[{}], size=(400, 300), padding=20)
        layout.run()

        assert layout.nodes[0].x == pytest.approx(200)
        assert layout.nodes[0].y == pytest.approx(150)

    def test_two_nodes(self):
        layout = ShiftLayout(nodes=[{}, {}], links=[(0, 1)], size=(400, 300), padding=20)
        layout.run()

        a, b = layout.nodes
        assert layout.grid_positions.tolist() == [[0, 0], [2, 0]]
        assert b.x - a.x == pytest.approx(360)
        assert a.y == pytest.approx(b.y)


class TestShiftLayoutErrors:
    """Inputs the pipeline cannot draw."""

    def test_non_planar_raises(self):
        layout = ShiftLayout(nodes=[{} for _ in range(6)], links=_k33_links(), size=(400, 300))
        with pytest.raises(NotPlanarError):
            layout.run()
        assert layout.is_planar is False
        assert layout.grid_positions is None

    def test_not_biconnected_raises(self):
        layout = ShiftLayout(nodes=[{}, {}, {}], links=[(0, 1), (1, 2)], size=(400, 300))
        with pytest.raises(EmbeddingError):
            layout.run()
        assert layout.is_planar is None

    def test_invalid_link_raises(self):
        layout = ShiftLayout(nodes=[{}, {}, {}], links=[(0, 1), (1, 5)], size=(400, 300))
        with pytest.raises(InvalidLinkError):
            layout.run()

    def test_repeated_links_warn(self):
        links = [(0, 1), (1, 2), (2, 0), (1, 0), (2, 2)]
        layout = ShiftLayout(nodes=[{}, {}, {}], links=links, size=(400, 300))
        with pytest.warns(RuntimeWarning, match="Ignored 2"):
            layout.run()
        assert layout.triangulated.edges_count == 3


class TestShiftLayoutConfiguration:
    """Configuration property tests."""

    def test_padding_property(self):
        layout = ShiftLayout(size=(400, 300), padding=10)
        assert layout.padding == 10.0

        layout.padding = 50
        assert layout.padding == 50.0

    def test_negative_padding_raises(self):
        with pytest.raises(ValidationError, match=">= 0"):
            ShiftLayout(size=(400, 300), padding=-1)

    def test_padding_too_large_raises(self):
        layout = ShiftLayout(size=(400, 300))
        with pytest.raises(ValidationError, match="no drawing area"):
            layout.padding = 150

    def test_default_strategies(self):
        layout = ShiftLayout()
        assert isinstance(layout.embedder, DMPEmbedder)
        assert hasattr(layout.drawer, "draw")

    def test_custom_drawer(self):
        """Any object with a draw(graph) method can place the nodes."""

        class DiagonalDrawer:
            def draw(self, triangulated: Graph) -> np.ndarray:
                n = triangulated.nodes_count
                return np.array([[i, i % 2] for i in range(n)], dtype=np.int64)

        layout = ShiftLayout(
            nodes=[{} for _ in range(4)],
            links=_k4_links(),
            size=(400, 300),
            drawer=DiagonalDrawer(),
        )
        layout.run()
        assert layout.grid_positions.tolist() == [[0, 0], [1, 1], [2, 0], [3, 1]]

    def test_custom_embedder(self):
        """The embedder is called once with the working graph."""

        class RecordingEmbedder:
            def __init__(self):
                self.calls = []
                self._inner = DMPEmbedder()

            def embed(self, graph: Graph) -> Graph:
                self.calls.append(graph.edges_count)
                return self._inner.embed(graph)

        embedder = RecordingEmbedder()
        layout = ShiftLayout(
            nodes=[{} for _ in range(4)], links=_k4_links(), size=(400, 300), embedder=embedder
        )
        layout.run()
        assert embedder.calls == [6]


class TestShiftLayoutEvents:
    """Event system tests."""

    def test_start_and_end_events(self):
        events = []
        layout = ShiftLayout(
            nodes=[{} for _ in range(4)],
            links=_k4_links(),
            size=(400, 300),
            on_start=lambda e: events.append(e["type"]),
            on_end=lambda e: events.append(e["type"]),
        )
        layout.run()
        assert events == [EventType.start, EventType.end]

    def test_on_by_name(self):
        events = []
        layout = ShiftLayout(nodes=[{}, {}, {}], links=[(0, 1), (1, 2), (2, 0)], size=(400, 300))
        layout.on("end", lambda e: events.append("end"))
        layout.run()
        assert events == ["end"]
