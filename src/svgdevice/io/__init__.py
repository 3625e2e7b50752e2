"""Output and input layer for svgdevice.

This module handles the byte-level side of the device: it owns the output
stream an SVG document is written to, and loads draw scripts replayed by
the command-line host.

Key responsibilities:
- Write the root element with the page viewport
- Append element lines in call order
- Finalize the document (closing tag, flush, release)
- Parse and validate JSON draw scripts

Key classes:
- DocumentWriter: Append-only SVG document writer
- DrawScript: Validated draw script
"""

from svgdevice.io.script import DrawScript, load_script
from svgdevice.io.writer import SVG_NAMESPACE, DocumentWriter

__all__ = [
    "SVG_NAMESPACE",
    "DocumentWriter",
    "DrawScript",
    "load_script",
]
