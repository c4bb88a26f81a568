"""
planar-shift-layout: planarity testing and straight-line planar drawing.

This package decides whether a graph is planar, builds a planar embedding,
triangulates it, and places every node on an integer grid so that edges
drawn as straight segments never cross.

Available modules:
- planarity: Graph model, incremental face-splitting embedding,
  triangulation, block-wise planarity test
- straight_line: Canonical ordering, shift method, ShiftLayout
- metrics: Crossing checks for finished drawings
- loader: Plain-text graph files
"""

__version__ = "0.1.0"

# Base classes for building layouts
from .base import (
    BaseLayout,
    StaticLayout,
)

# Plain-text graph files
from .loader import format_graph, parse_graph, read_graph

# Metrics for drawing verification
from .metrics import (
    crossing_pairs,
    drawing_extent,
    edge_crossings,
    segments_intersect,
)

# Planarity testing and embedding
from .planarity import (
    DMPEmbedder,
    Edge,
    Face,
    Graph,
    PlanarEmbedder,
    PlanarityResult,
    check_planarity,
    embed,
    is_planar,
    triangulate,
)

# Straight-line drawing
from .straight_line import (
    PlanarDrawer,
    ShiftDrawer,
    ShiftLayout,
    canonical_order,
    draw_on_plane,
)
from .types import (
    Event,
    EventType,
    Link,
    LinkLike,
    Node,
    NodeLike,
    SizeType,
)

# Validation utilities
from .validation import (
    DrawingError,
    EmbeddingError,
    GraphFormatError,
    InvalidCanvasSizeError,
    InvalidIndexError,
    InvalidLinkError,
    NotPlanarError,
    PlanarityError,
    TriangulationError,
    ValidationError,
    validate_canvas_size,
    validate_link_indices,
    validate_node_index,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Node",
    "Link",
    "EventType",
    "Event",
    # Type aliases for API
    "NodeLike",
    "LinkLike",
    "SizeType",
    # Base classes
    "BaseLayout",
    "StaticLayout",
    # Planarity
    "Graph",
    "Edge",
    "Face",
    "embed",
    "triangulate",
    "is_planar",
    "check_planarity",
    "PlanarityResult",
    "PlanarEmbedder",
    "DMPEmbedder",
    # Straight-line drawing
    "canonical_order",
    "draw_on_plane",
    "PlanarDrawer",
    "ShiftDrawer",
    "ShiftLayout",
    # Metrics
    "edge_crossings",
    "crossing_pairs",
    "segments_intersect",
    "drawing_extent",
    # Loader
    "parse_graph",
    "read_graph",
    "format_graph",
    # Validation
    "ValidationError",
    "InvalidCanvasSizeError",
    "InvalidIndexError",
    "InvalidLinkError",
    "GraphFormatError",
    "PlanarityError",
    "EmbeddingError",
    "TriangulationError",
    "DrawingError",
    "NotPlanarError",
    "validate_canvas_size",
    "validate_link_indices",
    "validate_node_index",
]
