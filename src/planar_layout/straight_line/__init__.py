"""Straight-line grid drawing of planar graphs.

Canonical ordering plus the shift method of de Fraysseix, Pach and Pollack:
every planar graph with n >= 3 nodes gets a crossing-free drawing with
straight edges on an integer grid of size (2n - 4) x (n - 2).

Public API:
    canonical_order(triangulated) -> list[int]
    draw_on_plane(triangulated) -> numpy.ndarray of shape (n, 2)
    ShiftLayout -- layout class running the whole pipeline
"""

from __future__ import annotations

from ._canonical import canonical_order
from .layout import ShiftLayout
from .shift import PlanarDrawer, ShiftDrawer, draw_on_plane

__all__ = [
    "canonical_order",
    "draw_on_plane",
    "PlanarDrawer",
    "ShiftDrawer",
    "ShiftLayout",
]
