"""
Straight-line planar layout.

Runs the full pipeline on the layout's nodes and links: planar embedding,
triangulation, canonical ordering and the shift method. The integer grid
drawing is then scaled uniformly into the canvas, so every edge stays a
straight segment and no two edges cross.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Optional, Sequence

import numpy as np

from ..base import Callback, StaticLayout
from ..planarity._graph import Graph
from ..planarity._triangulate import triangulate
from ..planarity.embedders import DMPEmbedder, PlanarEmbedder
from ..types import LinkLike, NodeLike, SizeType
from ..validation import NotPlanarError, validate_padding
from .shift import PlanarDrawer, ShiftDrawer, draw_on_plane

logger = logging.getLogger(__name__)


class ShiftLayout(StaticLayout):
    """
    Crossing-free straight-line layout of a planar graph.

    The graph must be biconnected with at least three nodes, or have fewer
    than three nodes. Self-loops and repeated links are ignored with a
    warning.

    Example:
        layout = ShiftLayout(
            nodes=[{}, {}, {}, {}],
            links=[
                {"source": 0, "target": 1},
                {"source": 1, "target": 2},
                {"source": 2, "target": 3},
                {"source": 3, "target": 0},
                {"source": 0, "target": 2},
            ],
            size=(800, 600),
            padding=40,
        )
        layout.run()
        print(layout.grid_positions)

    Raises (from ``run``):
        NotPlanarError: If the graph is not planar.
        EmbeddingError: If the graph is not biconnected.
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        links: Optional[Sequence[LinkLike]] = None,
        size: SizeType = (1.0, 1.0),
        on_start: Optional[Callback] = None,
        on_end: Optional[Callback] = None,
        # Shift-specific parameters
        padding: float = 0.0,
        embedder: Optional[PlanarEmbedder] = None,
        drawer: Optional[PlanarDrawer] = None,
    ) -> None:
        """
        Initialize Shift layout.

        Args:
            nodes: List of nodes
            links: List of links
            size: Canvas size as (width, height)
            on_start: Callback for start event
            on_end: Callback for end event
            padding: Margin kept free on every side of the canvas
            embedder: Planar embedding strategy (default: DMPEmbedder)
            drawer: Drawing strategy for the triangulated graph
                (default: ShiftDrawer)
        """
        super().__init__(
            nodes=nodes,
            links=links,
            size=size,
            on_start=on_start,
            on_end=on_end,
        )

        self._padding: float = validate_padding(padding, self._canvas_size)
        self._embedder: PlanarEmbedder = embedder if embedder is not None else DMPEmbedder()
        self._drawer: PlanarDrawer = drawer if drawer is not None else ShiftDrawer()

        # Results
        self._is_planar: Optional[bool] = None
        self._grid_positions: Optional[np.ndarray] = None
        self._triangulated: Optional[Graph] = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def padding(self) -> float:
        """Get canvas margin."""
        return self._padding

    @padding.setter
    def padding(self, value: float) -> None:
        """Set canvas margin; must leave a drawing area."""
        self._padding = validate_padding(value, self._canvas_size)

    @property
    def embedder(self) -> PlanarEmbedder:
        """Get planar embedding strategy."""
        return self._embedder

    @embedder.setter
    def embedder(self, value: PlanarEmbedder) -> None:
        """Set planar embedding strategy."""
        self._embedder = value

    @property
    def drawer(self) -> PlanarDrawer:
        """Get drawing strategy."""
        return self._drawer

    @drawer.setter
    def drawer(self, value: PlanarDrawer) -> None:
        """Set drawing strategy."""
        self._drawer = value

    @property
    def is_planar(self) -> Optional[bool]:
        """Planarity of the last run, or None before the first run."""
        return self._is_planar

    @property
    def grid_positions(self) -> Optional[np.ndarray]:
        """Integer (n, 2) grid coordinates of the last run."""
        return self._grid_positions

    @property
    def triangulated(self) -> Optional[Graph]:
        """Triangulated graph of the last run, with temporary chords marked."""
        return self._triangulated

    # -------------------------------------------------------------------------
    # Layout Computation
    # -------------------------------------------------------------------------

    def _build_graph(self) -> Graph:
        """Build the working graph from links, skipping loops and repeats."""
        graph = Graph()
        for _ in self._nodes:
            graph.add_node()

        seen: set[tuple[int, int]] = set()
        skipped = 0
        for src, tgt in self._link_endpoints():
            key = (min(src, tgt), max(src, tgt))
            if src == tgt or key in seen:
                skipped += 1
                continue
            seen.add(key)
            graph.add_edge(src, tgt)

        if skipped:
            warnings.warn(
                f"Ignored {skipped} self-loop or repeated link(s)",
                RuntimeWarning,
                stacklevel=4,
            )
        return graph

    def _compute(self, **kwargs: Any) -> None:
        """Compute straight-line planar layout positions."""
        self.validate()
        self._is_planar = None
        self._grid_positions = None
        self._triangulated = None

        n = len(self._nodes)
        if n == 0:
            self._is_planar = True
            self._grid_positions = np.zeros((0, 2), dtype=np.int64)
            return

        graph = self._build_graph()
        if n < 3:
            self._is_planar = True
            self._triangulated = graph
            grid = draw_on_plane(graph)
        else:
            try:
                embedded = self._embedder.embed(graph)
            except NotPlanarError:
                self._is_planar = False
                raise
            self._is_planar = True
            self._triangulated = triangulate(embedded)
            grid = self._drawer.draw(self._triangulated)

        self._grid_positions = grid
        self._scale_into_canvas(grid)

    def _scale_into_canvas(self, grid: np.ndarray) -> None:
        """Map grid coordinates into the padded canvas, y pointing down."""
        w, h = self._canvas_size
        pad = self._padding
        min_x, min_y = grid.min(axis=0).tolist()
        span_x, span_y = np.maximum(grid.max(axis=0) - grid.min(axis=0), 1).tolist()
        scale = min((w - 2 * pad) / span_x, (h - 2 * pad) / span_y)
        logger.debug("grid span %dx%d scaled by %.3f", span_x, span_y, scale)

        for node, (gx, gy) in zip(self._nodes, grid.tolist()):
            node.x = pad + (gx - min_x) * scale
            node.y = h - pad - (gy - min_y) * scale


__all__ = ["ShiftLayout"]
