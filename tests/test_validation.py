"""Tests for input validation module."""

import pytest

from planar_layout import Link
from planar_layout.validation import (
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
    validate_padding,
)


class TestCanvasSizeValidation:
    """Tests for canvas size validation."""

    def test_valid_size(self):
        """Valid canvas size returns tuple."""
        w, h = validate_canvas_size([800, 600])
        assert w == 800.0
        assert h == 600.0

    def test_negative_width_raises(self):
        """Negative width raises InvalidCanvasSizeError."""
        with pytest.raises(InvalidCanvasSizeError, match="width must be positive"):
            validate_canvas_size([-100, 600])

    def test_zero_height_raises(self):
        """Zero height raises InvalidCanvasSizeError."""
        with pytest.raises(InvalidCanvasSizeError, match="height must be positive"):
            validate_canvas_size([800, 0])

    def test_too_few_elements_raises(self):
        """Single element raises InvalidCanvasSizeError."""
        with pytest.raises(InvalidCanvasSizeError, match="must have 2 elements"):
            validate_canvas_size([800])


class TestNodeIndexValidation:
    def test_valid_index(self):
        assert validate_node_index(2, 3) == 2

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range_raises(self, index):
        with pytest.raises(InvalidIndexError, match="Number of nodes in graph: 3"):
            validate_node_index(index, 3)

    def test_is_index_error(self):
        """Callers catching IndexError still see bad indices."""
        with pytest.raises(IndexError):
            validate_node_index(5, 1)


class TestLinkIndexValidation:
    """Tests for link index validation."""

    def test_valid_links(self):
        """Valid links pass validation."""
        links = [Link(0, 1), Link(1, 2)]
        assert validate_link_indices(links, 3) == []

    def test_dict_links(self):
        """Dict links are validated too."""
        links = [{"source": 0, "target": 1}]
        assert validate_link_indices(links, 2) == []

    def test_target_out_of_bounds_raises(self):
        links = [Link(0, 5)]
        with pytest.raises(InvalidLinkError, match="target index 5 out of bounds"):
            validate_link_indices(links, 3)

    def test_non_strict_returns_issues(self):
        """Non-strict mode returns the problems instead of raising."""
        links = [Link(-1, 0), Link(0, 1)]
        issues = validate_link_indices(links, 1, strict=False)
        assert [i for i, _ in issues] == [0, 1]


class TestPaddingValidation:
    def test_valid_padding(self):
        assert validate_padding(10, (100.0, 50.0)) == 10.0

    def test_negative_raises(self):
        with pytest.raises(ValidationError, match=">= 0"):
            validate_padding(-5, (100.0, 100.0))

    def test_fills_canvas_raises(self):
        """Padding must leave room on the shorter side."""
        with pytest.raises(ValidationError, match="no drawing area"):
            validate_padding(25, (100.0, 50.0))


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    @pytest.mark.parametrize(
        "exc",
        [InvalidCanvasSizeError, InvalidIndexError, InvalidLinkError, GraphFormatError],
    )
    def test_input_errors_are_validation_errors(self, exc):
        assert issubclass(exc, ValidationError)
        assert issubclass(exc, ValueError)

    @pytest.mark.parametrize(
        "exc",
        [EmbeddingError, TriangulationError, DrawingError, NotPlanarError],
    )
    def test_pipeline_errors_are_planarity_errors(self, exc):
        assert issubclass(exc, PlanarityError)
        assert not issubclass(exc, ValidationError)
