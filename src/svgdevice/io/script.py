"""JSON draw scripts.

A draw script records a page size and a list of draw calls, so a drawing
session can be replayed against a canvas without a live graphics host:

    {
      "width": 7, "height": 7,
      "calls": [
        {"op": "circle", "center": [100, 100], "r": 20,
         "gc": {"col": 4278190335, "fill": 0}},
        {"op": "polyline", "x": [0, 10, 20], "y": [5, 0, 5], "gc": {"col": -16777216}}
      ]
    }

Polylines and polygons take either "points" ([[x, y], ...]) or parallel
"x" and "y" arrays.
"""

from pathlib import Path as FilePath
from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

from svgdevice.domain.primitives import (
    Circle,
    GraphicsContext,
    Line,
    Path,
    Point,
    Polygon,
    Polyline,
    Primitive,
    Rect,
    Text,
    points_from_arrays,
    to_points,
)
from svgdevice.exceptions import ScriptError

if TYPE_CHECKING:
    from svgdevice.device import SvgDevice

XY = tuple[float, float]


class ContextModel(BaseModel):
    """Graphics context of one call."""

    col: int = Field(description="Packed stroke colour (red in the lowest byte)")
    fill: int = Field(default=0, description="Packed fill colour")
    lwd: float = Field(default=1.0, ge=0.0, description="Line width in 1/96 inch")

    def to_context(self) -> GraphicsContext:
        return GraphicsContext(col=self.col, fill=self.fill, lwd=self.lwd)


class _Call(BaseModel):
    gc: ContextModel


class CircleCall(_Call):
    op: Literal["circle"]
    center: XY
    r: float = Field(ge=0.0)

    def to_primitive(self) -> Primitive:
        return Circle(Point(*self.center), self.r)


class LineCall(_Call):
    op: Literal["line"]
    start: XY
    end: XY

    def to_primitive(self) -> Primitive:
        return Line(Point(*self.start), Point(*self.end))


class _PointsCall(_Call):
    points: list[XY] | None = None
    x: list[float] | None = None
    y: list[float] | None = None

    @model_validator(mode="after")
    def _check_coordinates(self) -> "_PointsCall":
        if self.points is not None and (self.x is not None or self.y is not None):
            raise ValueError("give either 'points' or 'x'/'y', not both")
        if (self.x is None) != (self.y is None):
            raise ValueError("'x' and 'y' must be given together")
        if self.x is not None and len(self.x) != len(self.y or []):
            raise ValueError("'x' and 'y' must have the same length")
        return self

    def to_points(self) -> tuple[Point, ...]:
        if self.x is not None and self.y is not None:
            return points_from_arrays(self.x, self.y)
        return to_points(self.points or [])


class PolylineCall(_PointsCall):
    op: Literal["polyline"]

    def to_primitive(self) -> Primitive:
        return Polyline(self.to_points())


class PolygonCall(_PointsCall):
    op: Literal["polygon"]

    def to_primitive(self) -> Primitive:
        return Polygon(self.to_points())


class RectCall(_Call):
    op: Literal["rect"]
    corner1: XY
    corner2: XY

    def to_primitive(self) -> Primitive:
        return Rect(Point(*self.corner1), Point(*self.corner2))


class TextCall(_Call):
    op: Literal["text"]
    pos: XY
    text: str
    angle: float = 0.0
    hadj: float = 0.0

    def to_primitive(self) -> Primitive:
        return Text(Point(*self.pos), self.text, self.angle, self.hadj)


class PathCall(_Call):
    op: Literal["path"]
    subpaths: list[list[XY]]
    winding: bool = True

    def to_primitive(self) -> Primitive:
        return Path(tuple(to_points(s) for s in self.subpaths), self.winding)


DrawCall = Annotated[
    Union[CircleCall, LineCall, PolylineCall, PolygonCall, RectCall, TextCall, PathCall],
    Field(discriminator="op"),
]


class DrawScript(BaseModel):
    """A recorded drawing session."""

    width: float = Field(default=7.0, gt=0.0, description="Page width in inches")
    height: float = Field(default=7.0, gt=0.0, description="Page height in inches")
    calls: list[DrawCall] = Field(default_factory=list)

    def replay(self, device: "SvgDevice") -> None:
        """Issue every call, in order, on an open canvas."""
        for call in self.calls:
            device.draw(call.to_primitive(), call.gc.to_context())


def load_script(path: FilePath) -> DrawScript:
    """Read and validate a draw script.

    Args:
        path: Path to a JSON draw script

    Returns:
        Validated DrawScript

    Raises:
        ScriptError: If the file cannot be read or is not a valid script
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScriptError(str(path), str(e)) from e

    try:
        return DrawScript.model_validate_json(text)
    except ValidationError as e:
        raise ScriptError(str(path), f"{e.error_count()} validation error(s): {e}") from e
