"""Document writer for SVG output.

This module provides the DocumentWriter class, which owns the output
stream of one SVG document from the root tag to the closing tag.
"""

from typing import TextIO

from svgdevice.exceptions import CanvasClosedError, DeviceCloseError, DeviceWriteError

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def root_tag(width_pt: int, height_pt: int) -> str:
    """Build the opening root element for a page of the given size."""
    return (
        f'<svg xmlns="{SVG_NAMESPACE}" viewBox="0 0 {width_pt} {height_pt}" '
        f'width="{width_pt}" height="{height_pt}">'
    )


class DocumentWriter:
    """Writes one SVG document to a text stream.

    The writer does not validate fragments; it only guarantees that the
    root element is opened once, that fragments appear in append order,
    and that the closing tag is written exactly once.

    Example:
        with open("out.svg", "w", encoding="utf-8") as sink:
            writer = DocumentWriter(sink, name="out.svg")
            writer.open(504, 504)
            writer.append('<circle cx="1.000" cy="1.000" r="1.000" ... />')
            writer.close()
    """

    def __init__(self, sink: TextIO, name: str = "<stream>", owns_sink: bool = False) -> None:
        """Initialize the document writer.

        Args:
            sink: Buffered text stream to write to
            name: Name used in error messages (usually the file path)
            owns_sink: Close the sink when the document is closed
        """
        self._sink = sink
        self._name = name
        self._owns_sink = owns_sink
        self._opened = False
        self._closed = False
        self.fragment_count = 0

    @property
    def name(self) -> str:
        """Name of the underlying stream."""
        return self._name

    @property
    def is_open(self) -> bool:
        """True between open() and close()."""
        return self._opened and not self._closed

    @property
    def is_closed(self) -> bool:
        """True once close() has been called."""
        return self._closed

    def open(self, width_pt: int, height_pt: int) -> None:
        """Write the root element.

        Args:
            width_pt: Page width in device points
            height_pt: Page height in device points

        Raises:
            RuntimeError: If the document was already opened
            OSError: If the root element cannot be written
        """
        if self._opened:
            raise RuntimeError("Document already opened")
        self._sink.write(root_tag(width_pt, height_pt) + "\n")
        self._opened = True

    def append(self, fragment: str, kind: str = "element") -> None:
        """Append one element line.

        Args:
            fragment: Complete element text, without trailing newline
            kind: Element kind, used in error messages

        Raises:
            CanvasClosedError: If the document is not open
            DeviceWriteError: If the stream rejects the write
        """
        if not self.is_open:
            raise CanvasClosedError(f"write {kind}")
        try:
            self._sink.write(fragment + "\n")
        except (OSError, ValueError) as e:
            raise DeviceWriteError(kind, str(e)) from e
        self.fragment_count += 1

    def close(self) -> bool:
        """Write the closing tag and flush everything to the medium.

        Calls after the first are no-ops.

        Returns:
            True if this call finalized the document, False if already closed

        Raises:
            DeviceCloseError: If the closing tag or flush fails; the document
                is still marked closed and the sink is released
        """
        if self._closed:
            return False
        self._closed = True

        error: Exception | None = None
        try:
            if self._opened:
                self._sink.write("</svg>\n")
            self._sink.flush()
        except (OSError, ValueError) as e:
            error = e
        finally:
            if self._owns_sink:
                try:
                    self._sink.close()
                except (OSError, ValueError) as e:
                    error = error or e

        if error is not None:
            raise DeviceCloseError(self._name, str(error)) from error
        return True
