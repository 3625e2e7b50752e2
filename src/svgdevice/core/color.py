"""Packed colour decoding.

Hosts pack colours into one 32-bit integer with alpha in the highest byte
and red in the lowest (alpha:blue:green:red from high to low). SVG has no
"#RRGGBBAA" form we can rely on, so colours are written as rgba().
"""

from typing import NamedTuple

_BYTE = 0xFF
_WORD = 0xFFFFFFFF


class RGBA(NamedTuple):
    """Colour channels, each in 0..255."""

    red: int
    green: int
    blue: int
    alpha: int

    def to_css(self) -> str:
        """Format as rgba() with alpha kept in 0..255."""
        return f"rgba({self.red}, {self.green}, {self.blue}, {self.alpha})"


def unpack_color(value: int) -> RGBA:
    """Split a packed colour into its channels.

    Args:
        value: Packed colour; signed 32-bit values are reinterpreted as unsigned

    Returns:
        RGBA channels
    """
    value &= _WORD
    return RGBA(
        red=value & _BYTE,
        green=(value >> 8) & _BYTE,
        blue=(value >> 16) & _BYTE,
        alpha=(value >> 24) & _BYTE,
    )


def to_css_color(value: int) -> str:
    """Decode a packed colour to an SVG paint value.

    Example:
        >>> to_css_color(0x12345678)
        'rgba(120, 86, 52, 18)'
    """
    return unpack_color(value).to_css()
