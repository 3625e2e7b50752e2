"""svgdevice - An SVG graphics device for immediate-mode drawing hosts.

svgdevice turns a stream of drawing calls (circles, lines, polylines, polygons,
rectangles, rotated text and multi-contour filled paths) into an SVG document
written incrementally to a file.

Example:
    from svgdevice import svg_device
    from svgdevice.domain import GraphicsContext

    dev = svg_device("plot.svg", 7, 7)
    dev.circle((100, 100), 20, GraphicsContext(col=0xFF0000FF, fill=0))
    dev.close()

This creates plot.svg, a 504 x 504 point page holding one red circle.
"""

from svgdevice.device import SvgDevice, active_device, svg_device

__version__ = "0.1.0"
__author__ = "svgdevice contributors"

__all__ = ["SvgDevice", "__author__", "__version__", "active_device", "svg_device"]
