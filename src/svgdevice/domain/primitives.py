"""Drawing primitives and graphics context.

This module defines the values a drawing host hands to the device on every
call:
- Point: A 2D point in device coordinates
- GraphicsContext: The pen and brush state accompanying a call
- FillRule: Enum for the path interior rule
- Circle, Line, Polyline, Polygon, Rect, Text, Path: One type per primitive
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from svgdevice.exceptions import PrimitiveError


class FillRule(Enum):
    """Rule deciding the interior of a self-intersecting path.

    The host passes a boolean winding flag; set means non-zero winding.
    """

    NONZERO = "nonzero"
    EVENODD = "evenodd"

    @classmethod
    def from_winding(cls, winding: bool) -> "FillRule":
        """Map the host's winding flag to a fill rule."""
        return cls.NONZERO if winding else cls.EVENODD


@dataclass(frozen=True, slots=True)
class Point:
    """A point in device space.

    The page origin is the visual top-left corner, y increases downward.

    Attributes:
        x: X coordinate in device points
        y: Y coordinate in device points
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


PointLike = Union[Point, Sequence[float]]


def to_point(value: PointLike) -> Point:
    """Coerce a Point or an (x, y) pair to a Point.

    Args:
        value: Point instance or a two-element sequence

    Returns:
        Point instance

    Raises:
        PrimitiveError: If value is not a pair of numbers
    """
    if isinstance(value, Point):
        return value
    try:
        x, y = value
        return Point(float(x), float(y))
    except (TypeError, ValueError) as e:
        raise PrimitiveError(f"expected an (x, y) pair, got {value!r}") from e


def to_points(values: Iterable[PointLike]) -> tuple[Point, ...]:
    """Coerce an iterable of point-likes to a tuple of Points."""
    return tuple(to_point(v) for v in values)


def points_from_arrays(xs: Sequence[float], ys: Sequence[float]) -> tuple[Point, ...]:
    """Build a point sequence from parallel coordinate arrays.

    Some hosts hand over coordinates as separate x and y arrays rather than
    as pairs. This adapter turns them into the canonical form.

    Args:
        xs: X coordinates
        ys: Y coordinates, same length as xs

    Returns:
        Tuple of Points

    Raises:
        PrimitiveError: If the arrays differ in length
    """
    if len(xs) != len(ys):
        raise PrimitiveError(
            f"coordinate arrays differ in length ({len(xs)} x, {len(ys)} y)"
        )
    return tuple(Point(float(x), float(y)) for x, y in zip(xs, ys))


@dataclass(frozen=True, slots=True)
class GraphicsContext:
    """Graphics state snapshot for one draw call.

    Colours are packed 32-bit integers with red in the lowest byte, then
    green, blue and alpha in the highest byte. Negative values (signed
    32-bit hosts) are accepted.

    Attributes:
        col: Stroke (pen) colour
        fill: Fill colour
        lwd: Line width in 1/96 inch
    """

    col: int
    fill: int = 0
    lwd: float = 1.0


@dataclass(frozen=True, slots=True)
class Circle:
    """Circle given by center and radius."""

    kind: ClassVar[str] = "circle"

    center: Point
    radius: float


@dataclass(frozen=True, slots=True)
class Line:
    """Straight segment between two points."""

    kind: ClassVar[str] = "line"

    start: Point
    end: Point


@dataclass(frozen=True, slots=True)
class Polyline:
    """Open sequence of connected segments. May be empty."""

    kind: ClassVar[str] = "polyline"

    points: tuple[Point, ...]


@dataclass(frozen=True, slots=True)
class Polygon:
    """Closed, filled sequence of segments. May be empty."""

    kind: ClassVar[str] = "polygon"

    points: tuple[Point, ...]


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle given by two opposite corners in any order."""

    kind: ClassVar[str] = "rect"

    corner1: Point
    corner2: Point

    def normalized(self) -> tuple[float, float, float, float]:
        """Return (x, y, width, height) with the top-left corner first."""
        x0, y0 = self.corner1.to_tuple()
        x1, y1 = self.corner2.to_tuple()
        return (min(x0, x1), min(y0, y1), abs(x0 - x1), abs(y0 - y1))


@dataclass(frozen=True, slots=True)
class Text:
    """Positioned text string.

    Attributes:
        position: Anchor point of the text
        text: The string, passed through without layout
        angle: Rotation in degrees, counter-clockwise positive
        hadj: Horizontal adjustment hint (0 left, 0.5 centre, 1 right); unused
    """

    kind: ClassVar[str] = "text"

    position: Point
    text: str
    angle: float = 0.0
    hadj: float = 0.0


@dataclass(frozen=True, slots=True)
class Path:
    """Filled path made of one or more closed subpaths.

    Attributes:
        subpaths: Each subpath is an ordered sequence of points
        winding: True for non-zero winding, False for even-odd
    """

    kind: ClassVar[str] = "path"

    subpaths: tuple[tuple[Point, ...], ...]
    winding: bool = True

    @property
    def fill_rule(self) -> FillRule:
        """Fill rule corresponding to the winding flag."""
        return FillRule.from_winding(self.winding)


Primitive = Union[Circle, Line, Polyline, Polygon, Rect, Text, Path]
