"""Pluggable planar embedding strategies.

An embedder takes a ``Graph`` and returns an embedded copy: every rotation in
clockwise order and ``faces`` filled in. Unlike ``embed``, which reports
non-planarity as a flag, an embedder raises, because its callers cannot go on
without an embedding.

Available strategies:
    DMPEmbedder -- Incremental face-splitting embedding; needs a biconnected
                   graph.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from ..validation import NotPlanarError
from ._dmp import embed
from ._graph import Graph

logger = logging.getLogger(__name__)


class PlanarEmbedder(Protocol):
    """Protocol for planar embedding strategies."""

    def embed(self, graph: Graph) -> Graph:
        """Compute a planar embedding.

        Args:
            graph: Graph to embed. Not modified.

        Returns:
            Embedded copy with clockwise rotations and faces.

        Raises:
            NotPlanarError: If the graph is not planar.
        """
        ...


class DMPEmbedder:
    """Embed with the incremental face-splitting algorithm.

    The embedding is kept in ``last_embedding`` for inspection, including the
    partial one left behind when the graph turns out not to be planar.
    """

    def __init__(self) -> None:
        self.last_embedding: Optional[Graph] = None

    def embed(self, graph: Graph) -> Graph:
        planar, embedded = embed(graph)
        self.last_embedding = embedded
        if not planar:
            logger.debug("embedding stopped with %d faces", len(embedded.faces))
            raise NotPlanarError(
                f"Graph with {graph.nodes_count} nodes and {graph.edges_count} edges "
                "is not planar"
            )
        return embedded


__all__ = ["PlanarEmbedder", "DMPEmbedder"]
