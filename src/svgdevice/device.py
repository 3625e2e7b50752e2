"""The SVG canvas and its host-facing entry point.

A drawing host opens a canvas with svg_device(), issues draw calls on the
returned SvgDevice, and finally closes it. Only one canvas is active at a
time; the active handle is the single piece of module state.
"""

import threading
from collections.abc import Iterable, Sequence
from pathlib import Path as FilePath
from typing import TextIO

from svgdevice.config import DeviceSettings, WriteErrorPolicy
from svgdevice.core.emitter import PrimitiveEmitter
from svgdevice.domain.primitives import (
    Circle,
    GraphicsContext,
    Line,
    Path,
    PointLike,
    Polygon,
    Polyline,
    Primitive,
    Rect,
    Text,
    to_point,
    to_points,
)
from svgdevice.exceptions import CanvasClosedError, DeviceSetupError, DeviceWriteError
from svgdevice.io.writer import DocumentWriter
from svgdevice.utils.logging import DeviceLogger, DeviceStats, get_logger

logger = get_logger("svgdevice.device")

_active_lock = threading.Lock()
_active: "SvgDevice | None" = None


class SvgDevice:
    """An open SVG canvas.

    Every operation holds one re-entrant lock for its whole duration, so
    callers on several threads are serialized and elements keep call order.

    Example:
        with SvgDevice.open_stream(io.StringIO(), 504, 504) as dev:
            dev.line((0, 0), (10, 10), GraphicsContext(col=0xFF000000))
    """

    def __init__(
        self,
        writer: DocumentWriter,
        width_pt: int,
        height_pt: int,
        settings: DeviceSettings | None = None,
    ) -> None:
        """Wrap an already opened document writer.

        Use svg_device() or open_stream() rather than calling this directly.

        Args:
            writer: Writer whose root element has been written
            width_pt: Page width in device points
            height_pt: Page height in device points
            settings: Device settings (defaults if None)
        """
        self.settings = settings or DeviceSettings()
        self.width_pt = width_pt
        self.height_pt = height_pt
        self._writer = writer
        self._emitter = PrimitiveEmitter(self.settings.output)
        self._lock = threading.RLock()
        self._log = DeviceLogger(logger, writer.name)
        self._log.log_opened(width_pt, height_pt)

    @classmethod
    def open_stream(
        cls,
        sink: TextIO,
        width_pt: int,
        height_pt: int,
        settings: DeviceSettings | None = None,
        name: str = "<stream>",
    ) -> "SvgDevice":
        """Open a canvas on an existing text stream.

        The stream is flushed but not closed by close().
        """
        writer = DocumentWriter(sink, name=name)
        writer.open(width_pt, height_pt)
        return cls(writer, width_pt, height_pt, settings)

    @property
    def is_closed(self) -> bool:
        """True once close() has been called."""
        return self._writer.is_closed

    @property
    def stats(self) -> DeviceStats:
        """Elements written and failures so far."""
        return self._log.stats

    def draw(self, primitive: Primitive, gc: GraphicsContext) -> None:
        """Emit one primitive.

        Args:
            primitive: Any of the seven primitive types
            gc: Graphics context of the call

        Raises:
            CanvasClosedError: If the canvas is closed
            PrimitiveError: If primitive is not a known primitive type
            DeviceWriteError: If the element cannot be written and the
                write-error policy is "raise"
        """
        kind = getattr(primitive, "kind", type(primitive).__name__)
        with self._lock:
            if self._writer.is_closed:
                raise CanvasClosedError(f"draw {kind}")
            fragment = self._emitter.emit(primitive, gc)
            try:
                self._writer.append(fragment, kind=kind)
            except DeviceWriteError as e:
                self._log.log_element_error(kind, e)
                if self.settings.output.on_write_error is WriteErrorPolicy.RAISE:
                    raise
                return
            self._log.log_element(kind)

    def circle(self, center: PointLike, r: float, gc: GraphicsContext) -> None:
        """Draw a circle."""
        self.draw(Circle(to_point(center), float(r)), gc)

    def line(self, start: PointLike, end: PointLike, gc: GraphicsContext) -> None:
        """Draw a line segment."""
        self.draw(Line(to_point(start), to_point(end)), gc)

    def polyline(self, points: Iterable[PointLike], gc: GraphicsContext) -> None:
        """Draw an open polyline."""
        self.draw(Polyline(to_points(points)), gc)

    def polygon(self, points: Iterable[PointLike], gc: GraphicsContext) -> None:
        """Draw a filled polygon."""
        self.draw(Polygon(to_points(points)), gc)

    def rect(self, corner1: PointLike, corner2: PointLike, gc: GraphicsContext) -> None:
        """Draw a rectangle from two opposite corners."""
        self.draw(Rect(to_point(corner1), to_point(corner2)), gc)

    def text(
        self,
        pos: PointLike,
        text: str,
        angle: float,
        hadj: float,
        gc: GraphicsContext,
    ) -> None:
        """Draw a text string rotated counter-clockwise by angle degrees."""
        self.draw(Text(to_point(pos), text, float(angle), float(hadj)), gc)

    def path(
        self,
        subpaths: Iterable[Sequence[PointLike]],
        winding: bool,
        gc: GraphicsContext,
    ) -> None:
        """Draw a filled path made of one or more closed subpaths."""
        self.draw(Path(tuple(to_points(s) for s in subpaths), bool(winding)), gc)

    def close(self) -> None:
        """Finalize the document.

        Calls after the first are no-ops.

        Raises:
            DeviceCloseError: If the closing tag or flush fails
        """
        with self._lock:
            try:
                finalized = self._writer.close()
            except Exception as e:
                self._log.log_close_error(e)
                raise
            finally:
                _unregister(self)
            if finalized:
                self._log.log_closed()
            else:
                self._log.log_repeated_close()

    def __enter__(self) -> "SvgDevice":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


def _register(device: SvgDevice) -> None:
    global _active
    with _active_lock:
        _active = device


def _unregister(device: SvgDevice) -> None:
    global _active
    with _active_lock:
        if _active is device:
            _active = None


def active_device() -> SvgDevice | None:
    """Return the canvas most recently opened by svg_device(), if still open."""
    return _active


def svg_device(
    svg_file: str | FilePath,
    width: float,
    height: float,
    settings: DeviceSettings | None = None,
) -> SvgDevice:
    """Create an SVG file and make it the active drawing target.

    The file is created or truncated and the root element written before the
    canvas is returned. The page is width x height inches.

    Args:
        svg_file: Output file path
        width: Page width in inches
        height: Page height in inches
        settings: Device settings (defaults if None)

    Returns:
        The open canvas

    Raises:
        DeviceSetupError: If the file cannot be created or written
    """
    settings = settings or DeviceSettings()
    width_pt, height_pt = settings.output.page_size(width, height)
    path = str(svg_file)

    try:
        sink = open(path, "w", encoding=settings.output.encoding, newline="\n")
    except OSError as e:
        raise DeviceSetupError(path, str(e)) from e

    writer = DocumentWriter(sink, name=path, owns_sink=True)
    try:
        writer.open(width_pt, height_pt)
    except (OSError, ValueError) as e:
        sink.close()
        raise DeviceSetupError(path, f"cannot write the start tag: {e}") from e

    device = SvgDevice(writer, width_pt, height_pt, settings)
    _register(device)
    return device
