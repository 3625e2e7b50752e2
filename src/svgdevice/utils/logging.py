"""Logging utilities for svgdevice."""

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_LIBRARY_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a library logger routed through the stdlib logger of the same name.

    Events are filtered by the stdlib level before rendering, so output
    follows the host's logging setup. Without any setup only warnings and
    errors reach stderr.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_LIBRARY_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


@dataclass
class DeviceStats:
    """Statistics for one canvas, from open to close."""

    elements: Counter[str] = field(default_factory=Counter)
    failures: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def element_count(self) -> int:
        """Total number of elements written."""
        return sum(self.elements.values())

    @property
    def failure_count(self) -> int:
        """Number of elements that could not be written."""
        return len(self.failures)

    @property
    def duration_seconds(self) -> float:
        """Time the canvas was open."""
        if self.start_time is not None and self.end_time is not None:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svgdevice")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class DeviceLogger:
    """Logger for tracking the life of one canvas and its statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, path: str) -> None:
        self._logger = logger.bind(device=path)
        self._stats = DeviceStats()

    def log_opened(self, width_pt: int, height_pt: int) -> None:
        """Log a new canvas."""
        self._stats.start_time = time.perf_counter()
        self._logger.info("Device opened", width_pt=width_pt, height_pt=height_pt)

    def log_element(self, kind: str) -> None:
        """Log a written element."""
        self._logger.debug("Element written", kind=kind)
        self._stats.elements[kind] += 1

    def log_element_error(self, kind: str, error: Exception) -> None:
        """Log an element that could not be written."""
        self._logger.error(
            "Element write failed",
            kind=kind,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failures.append((kind, str(error)))

    def log_closed(self) -> None:
        """Log the finalized document."""
        self._stats.end_time = time.perf_counter()
        self._logger.info(
            "Device closed",
            elements=self._stats.element_count,
            failures=self._stats.failure_count,
        )

    def log_close_error(self, error: Exception) -> None:
        """Log a failure to finalize the document."""
        self._stats.end_time = time.perf_counter()
        self._logger.error(
            "Device close failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_repeated_close(self) -> None:
        """Log a close() on an already closed canvas."""
        self._logger.debug("Device already closed")

    @property
    def stats(self) -> DeviceStats:
        """Get current canvas statistics."""
        return self._stats
