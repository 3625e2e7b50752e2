"""Number, point-list and text formatting for SVG attributes."""

import math
import re
from collections.abc import Iterable

from svgdevice.domain.primitives import Point
from svgdevice.exceptions import PrimitiveError

DEFAULT_PRECISION = 3

# Only what is needed inside element content; attribute values never carry text.
_TEXT_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;"})

# Code points XML 1.0 forbids even as character references.
_ILLEGAL_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")
REPLACEMENT_CHAR = "\ufffd"


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a number with a fixed number of decimals.

    Values that round to zero are written without a sign, so output does not
    depend on whether an intermediate result was -0.0.

    Args:
        value: Number to format
        precision: Number of decimals

    Returns:
        Formatted number, e.g. "12.500"

    Raises:
        PrimitiveError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise PrimitiveError(f"non-finite number {value!r}")
    text = f"{value:.{precision}f}"
    if text.startswith("-") and not text.strip("-0."):
        return text[1:]
    return text


def format_point(point: Point, precision: int = DEFAULT_PRECISION, sep: str = ",") -> str:
    """Format one point as "x,y" (or with another separator)."""
    return f"{format_number(point.x, precision)}{sep}{format_number(point.y, precision)}"


def format_points(points: Iterable[Point], precision: int = DEFAULT_PRECISION) -> str:
    """Format a point sequence for a points attribute.

    Returns:
        Space-separated "x,y" pairs; empty string for no points
    """
    return " ".join(format_point(p, precision) for p in points)


def escape_text(text: str) -> str:
    """Escape XML special characters in element content.

    Control characters that XML 1.0 cannot represent at all are replaced
    with U+FFFD.
    """
    return _ILLEGAL_XML_CHARS.sub(REPLACEMENT_CHAR, text).translate(_TEXT_ESCAPES)
