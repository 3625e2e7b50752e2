"""Exception hierarchy for svgdevice."""


class SvgDeviceError(Exception):
    """Base exception for all svgdevice errors."""

    pass


class DeviceSetupError(SvgDeviceError):
    """The output document could not be created."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to open SVG device '{path}': {reason}")


class DeviceWriteError(SvgDeviceError):
    """A single element could not be written to the document."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Failed to write {kind}: {reason}")


class DeviceCloseError(SvgDeviceError):
    """The document could not be finalized; the output may be incomplete."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to close SVG device '{path}': {reason}")


class CanvasClosedError(SvgDeviceError):
    """A drawing call was made after the canvas was closed."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}: canvas is closed")


class PrimitiveError(SvgDeviceError):
    """Malformed or unknown drawing primitive."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid primitive: {reason}")


class ScriptError(SvgDeviceError):
    """A draw script could not be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load draw script '{path}': {reason}")
