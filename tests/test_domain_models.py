"""Tests for domain models to verify they work correctly."""

import pytest

from svgdevice.domain import (
    Circle,
    FillRule,
    GraphicsContext,
    Path,
    Point,
    Polyline,
    Rect,
    Text,
    points_from_arrays,
    to_point,
)
from svgdevice.exceptions import PrimitiveError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.5, -2.0).to_tuple() == (1.5, -2.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_to_point_from_tuple(self) -> None:
        """Test coercing a pair to a Point."""
        assert to_point((3, 4)) == Point(3.0, 4.0)

    def test_to_point_passthrough(self) -> None:
        """Test that Points are returned unchanged."""
        p = Point(1.0, 2.0)
        assert to_point(p) is p

    def test_to_point_rejects_bad_input(self) -> None:
        """Test that a non-pair raises PrimitiveError."""
        with pytest.raises(PrimitiveError):
            to_point((1, 2, 3))
        with pytest.raises(PrimitiveError):
            to_point(("a", "b"))


class TestPointsFromArrays:
    """Tests for the parallel-array adapter."""

    def test_zips_arrays(self) -> None:
        """Test that x and y arrays are paired in order."""
        points = points_from_arrays([0, 1, 2], [5, 6, 7])
        assert points == (Point(0, 5), Point(1, 6), Point(2, 7))

    def test_empty_arrays(self) -> None:
        """Test that empty arrays give no points."""
        assert points_from_arrays([], []) == ()

    def test_length_mismatch(self) -> None:
        """Test that arrays of different length are rejected."""
        with pytest.raises(PrimitiveError, match="differ in length"):
            points_from_arrays([0, 1], [0])


class TestFillRule:
    """Tests for FillRule mapping."""

    def test_winding_true_is_nonzero(self) -> None:
        assert FillRule.from_winding(True) is FillRule.NONZERO
        assert FillRule.NONZERO.value == "nonzero"

    def test_winding_false_is_evenodd(self) -> None:
        assert FillRule.from_winding(False) is FillRule.EVENODD
        assert FillRule.EVENODD.value == "evenodd"

    def test_path_fill_rule(self) -> None:
        """Test that Path exposes the rule of its winding flag."""
        assert Path((), winding=True).fill_rule is FillRule.NONZERO
        assert Path((), winding=False).fill_rule is FillRule.EVENODD


class TestPrimitives:
    """Tests for primitive dataclasses."""

    def test_kinds(self) -> None:
        """Test that each primitive names its kind."""
        assert Circle(Point(0, 0), 1).kind == "circle"
        assert Polyline(()).kind == "polyline"
        assert Text(Point(0, 0), "x").kind == "text"

    def test_text_defaults(self) -> None:
        """Test default angle and hadj."""
        t = Text(Point(1, 2), "label")
        assert t.angle == 0.0
        assert t.hadj == 0.0

    @pytest.mark.parametrize(
        "corner1, corner2",
        [((10, 10), (0, 0)), ((0, 0), (10, 10)), ((0, 10), (10, 0)), ((10, 0), (0, 10))],
    )
    def test_rect_normalized(self, corner1, corner2) -> None:
        """Test that rect normalization ignores corner order."""
        rect = Rect(to_point(corner1), to_point(corner2))
        assert rect.normalized() == (0.0, 0.0, 10.0, 10.0)

    def test_graphics_context_defaults(self) -> None:
        """Test GraphicsContext default fill and line width."""
        gc = GraphicsContext(col=0xFF000000)
        assert gc.fill == 0
        assert gc.lwd == 1.0
