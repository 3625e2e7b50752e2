"""Core SVG emission for svgdevice.

This module contains the translation from drawing primitives to SVG text:

- Colour decoding (packed ABGR integers to CSS rgba())
- Fixed-precision number and point-list formatting
- Element construction, one routine per primitive

All functions are pure: they return strings and never touch the output
stream. Writing is the job of svgdevice.io.DocumentWriter.

Key functions:
- to_css_color: Decode a packed colour
- format_number: Fixed-precision, negative-zero-free number formatting
- format_points: "x,y x,y ..." point lists

Key classes:
- PrimitiveEmitter: Converts a primitive plus graphics context to an element
"""

from svgdevice.core.color import RGBA, to_css_color, unpack_color
from svgdevice.core.emitter import PrimitiveEmitter
from svgdevice.core.formatting import escape_text, format_number, format_points

__all__ = [
    "RGBA",
    "PrimitiveEmitter",
    "escape_text",
    "format_number",
    "format_points",
    "to_css_color",
    "unpack_color",
]
