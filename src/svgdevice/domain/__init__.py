"""Domain models for svgdevice.

This module contains the geometry and graphics-state types passed from the
drawing host to the device. All models are:

- Immutable (frozen dataclasses)
- Transient: built per draw call and never retained by the device
- Independent of the SVG text they are rendered to

Key classes:
- Point: A 2D point in device coordinates (y grows downward)
- GraphicsContext: Stroke colour, fill colour and line width of a call
- Circle, Line, Polyline, Polygon, Rect, Text, Path: The drawing primitives
"""

from svgdevice.domain.primitives import (
    Circle,
    FillRule,
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
    to_point,
)

__all__: list[str] = [
    # Enums
    "FillRule",
    # Core types
    "Point",
    "GraphicsContext",
    # Primitives
    "Circle",
    "Line",
    "Path",
    "Polygon",
    "Polyline",
    "Primitive",
    "Rect",
    "Text",
    # Helpers
    "points_from_arrays",
    "to_point",
]
