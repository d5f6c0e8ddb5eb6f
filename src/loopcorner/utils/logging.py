"""Logging utilities for Loopcorner."""

import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog

from loopcorner.domain.corner import Corner


@dataclass
class CornerStats:
    """Statistics from a classification run."""

    loop_count: int = 0
    corner_count: int = 0
    sharp_count: int = 0
    dull_count: int = 0
    quite_sharp_count: int = 0
    quite_dull_count: int = 0
    degenerate_count: int = 0
    error_count: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)

    def record(self, corner: Corner) -> None:
        """Count a classified corner."""
        self.corner_count += 1
        self.sharp_count += corner.is_sharp
        self.dull_count += corner.is_dull
        self.quite_sharp_count += corner.is_quite_sharp
        self.quite_dull_count += corner.is_quite_dull
        self.degenerate_count += corner.is_degenerate


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"loopcorner_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
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

    logger = structlog.get_logger("loopcorner")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


def configure_console_logging(level: str = "WARNING") -> structlog.stdlib.BoundLogger:
    """Configure structured logging to stderr only, without a log file.

    Args:
        level: Minimum level to print

    Returns:
        Configured structlog logger
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )
    return structlog.get_logger("loopcorner")


class CornerLogger:
    """Logger for tracking classified loops and corners."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = CornerStats()

    def log_loop_start(self, loop_idx: int, curve_count: int) -> None:
        """Log start of loop classification."""
        self._logger.debug("Classifying loop", loop=loop_idx, curves=curve_count)
        self._stats.loop_count += 1

    def log_corner(self, loop_idx: int, curve_idx: int, corner: Corner) -> None:
        """Log a classified corner."""
        self._logger.debug(
            "Corner",
            loop=loop_idx,
            curve=curve_idx,
            cross=round(corner.cross_tangents, 6),
            sharp=corner.is_sharp,
            dull=corner.is_dull,
            quite_sharp=corner.is_quite_sharp,
            quite_dull=corner.is_quite_dull,
        )
        self._stats.record(corner)

    def log_loop_error(self, loop_idx: int, error: Exception) -> None:
        """Log loop classification error."""
        self._logger.error(
            "Loop classification failed",
            loop=loop_idx,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((loop_idx, str(error)))

    @property
    def stats(self) -> CornerStats:
        """Get current statistics."""
        return self._stats
