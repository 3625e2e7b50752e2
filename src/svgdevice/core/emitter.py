"""Conversion of drawing primitives to SVG elements.

Each primitive kind has its own routine returning one complete element as a
single line of text (without the trailing newline). Geometry is written in
device coordinates as received; the y-axis flip is done once by the root
element's viewBox, never per element.
"""

from collections.abc import Callable, Sequence

from svgdevice.config import OutputConfig
from svgdevice.core.color import to_css_color
from svgdevice.core.formatting import escape_text, format_number, format_point, format_points
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
)
from svgdevice.exceptions import PrimitiveError


class PrimitiveEmitter:
    """Builds SVG element strings from primitives and graphics contexts.

    The emitter is stateless apart from its output configuration, so one
    instance can serve any number of canvases.

    Example:
        emitter = PrimitiveEmitter()
        emitter.rect(Rect(Point(10, 10), Point(0, 0)), GraphicsContext(col=0))
        # '<rect x="0.000" y="0.000" width="10.000" height="10.000" ... />'
    """

    def __init__(self, config: OutputConfig | None = None) -> None:
        """Initialize the emitter.

        Args:
            config: Output configuration (defaults if None)
        """
        self.config = config or OutputConfig()
        self._dispatch: dict[type, Callable[[Primitive, GraphicsContext], str]] = {
            Circle: self.circle,
            Line: self.line,
            Polyline: self.polyline,
            Polygon: self.polygon,
            Rect: self.rect,
            Text: self.text,
            Path: self.path,
        }

    def _num(self, value: float) -> str:
        return format_number(value, self.config.precision)

    def emit(self, primitive: Primitive, gc: GraphicsContext) -> str:
        """Build the element for any primitive.

        Args:
            primitive: One of the seven primitive types
            gc: Graphics context of the call

        Returns:
            SVG element text

        Raises:
            PrimitiveError: If primitive is not a known primitive type
        """
        handler = self._dispatch.get(type(primitive))
        if handler is None:
            raise PrimitiveError(f"unsupported primitive type {type(primitive).__name__}")
        return handler(primitive, gc)

    def circle(self, circle: Circle, gc: GraphicsContext) -> str:
        """Circle stroked and filled from the context."""
        return (
            f'<circle cx="{self._num(circle.center.x)}" cy="{self._num(circle.center.y)}" '
            f'r="{self._num(circle.radius)}" '
            f'stroke="{to_css_color(gc.col)}" fill="{to_css_color(gc.fill)}" />'
        )

    def line(self, line: Line, gc: GraphicsContext) -> str:
        """Line segment; never filled."""
        return (
            f'<line x1="{self._num(line.start.x)}" y1="{self._num(line.start.y)}" '
            f'x2="{self._num(line.end.x)}" y2="{self._num(line.end.y)}" '
            f'stroke="{to_css_color(gc.col)}" fill="none" />'
        )

    def polyline(self, polyline: Polyline, gc: GraphicsContext) -> str:
        """Open polyline; never filled. Zero points give an empty points list."""
        points = format_points(polyline.points, self.config.precision)
        return f'<polyline points="{points}" stroke="{to_css_color(gc.col)}" fill="none" />'

    def polygon(self, polygon: Polygon, gc: GraphicsContext) -> str:
        """Closed polygon, filled from the context."""
        points = format_points(polygon.points, self.config.precision)
        return (
            f'<polygon points="{points}" '
            f'stroke="{to_css_color(gc.col)}" fill="{to_css_color(gc.fill)}" />'
        )

    def rect(self, rect: Rect, gc: GraphicsContext) -> str:
        """Rectangle; the corners may come in any order."""
        x, y, width, height = rect.normalized()
        return (
            f'<rect x="{self._num(x)}" y="{self._num(y)}" '
            f'width="{self._num(width)}" height="{self._num(height)}" '
            f'stroke="{to_css_color(gc.col)}" fill="{to_css_color(gc.fill)}" />'
        )

    def text(self, text: Text, gc: GraphicsContext) -> str:
        """Rotated text drawn in the pen colour.

        The host measures angles counter-clockwise while SVG rotates
        clockwise, so the angle is negated. The hadj hint is ignored.
        """
        x = self._num(text.position.x)
        y = self._num(text.position.y)
        rotation = self._num(-text.angle)
        content = escape_text(text.text) if self.config.escape_text else text.text
        return (
            f'<text x="{x}" y="{y}" transform="rotate({rotation}, {x}, {y})" '
            f'fill="{to_css_color(gc.col)}">{content}</text>'
        )

    def path(self, path: Path, gc: GraphicsContext) -> str:
        """Multi-contour filled path with the host's fill rule."""
        stroke_width = self._num(gc.lwd / self.config.stroke_width_divisor)
        return (
            f'<path d="{self.path_data(path.subpaths)}" '
            f'stroke="{to_css_color(gc.col)}" stroke-width="{stroke_width}" '
            f'fill-rule="{path.fill_rule.value}" fill="{to_css_color(gc.fill)}" />'
        )

    def path_data(self, subpaths: Sequence[Sequence[Point]]) -> str:
        """Build the d attribute: one "M x y L x y ... Z" block per subpath.

        Subpaths without points are skipped.
        """
        precision = self.config.precision
        blocks = []
        for subpath in subpaths:
            if not subpath:
                continue
            first, *rest = subpath
            commands = [f"M {format_point(first, precision, sep=' ')}"]
            commands.extend(f"L {format_point(p, precision, sep=' ')}" for p in rest)
            commands.append("Z")
            blocks.append(" ".join(commands))
        return " ".join(blocks)
