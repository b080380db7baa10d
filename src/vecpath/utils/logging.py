"""Logging utilities for Vecpath."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from vecpath.domain import DrawCommand

FILE_HANDLER_NAME = "vecpath.file"
CONSOLE_HANDLER_NAME = "vecpath.console"


@dataclass
class FrameStats:
    """Statistics gathered while drawing one frame."""

    stroke_passes: int = 0
    fill_passes: int = 0
    commands_issued: int = 0
    points_emitted: int = 0
    triangles_emitted: int = 0
    empty_passes: int = 0
    command_counts: dict[str, int] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate frame duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
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

    # Replace handlers left by an earlier call in the same process
    for handler in list(root_logger.handlers):
        if handler.get_name() in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
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

    logger = structlog.get_logger("vecpath")
    logger.info("Logging initialized", log_file=str(log_file) if log_file else None, level=file_level)

    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Structlog logger backed by the stdlib logger ``name``.

    Output goes through the stdlib ``logging`` module, so the library stays
    silent until the host application configures handlers.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class FrameLogger:
    """Logger for tracking one frame's drawing passes and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = FrameStats()

    def log_frame_begin(self, width: int, height: int) -> None:
        """Log start of a frame."""
        self._stats.start_time = time.time()
        self._logger.debug("Frame started", width=width, height=height)

    def log_pass(self, operation: str, commands: list[DrawCommand]) -> None:
        """Log one stroke or fill pass and account for its commands.

        Args:
            operation: "stroke" or "fill"
            commands: Draw commands issued by the pass
        """
        if operation == "stroke":
            self._stats.stroke_passes += 1
        else:
            self._stats.fill_passes += 1

        if not commands:
            self._stats.empty_passes += 1

        triangles = 0
        points = 0
        for command in commands:
            name = type(command).__name__
            self._stats.command_counts[name] = self._stats.command_counts.get(name, 0) + 1
            points += command.point_count()
            triangles += command.triangle_count()

        self._stats.commands_issued += len(commands)
        self._stats.points_emitted += points
        self._stats.triangles_emitted += triangles

        self._logger.debug(
            "Path drawn",
            operation=operation,
            commands=len(commands),
            points=points,
            triangles=triangles,
        )

    def log_clear(self) -> None:
        """Log a full-surface clear."""
        self._logger.debug("Surface cleared")

    def log_frame_end(self) -> None:
        """Log end of a frame with its totals."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Frame flushed",
            commands=self._stats.commands_issued,
            points=self._stats.points_emitted,
            triangles=self._stats.triangles_emitted,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    @property
    def stats(self) -> FrameStats:
        """Get current frame statistics."""
        return self._stats
