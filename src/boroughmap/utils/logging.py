"""Logging utilities for Boroughmap."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class BuildStats:
    """Statistics from a region store build."""

    built_count: int = 0
    failed_count: int = 0
    dropped_segments: int = 0
    failures: list[tuple[str, str]] = field(default_factory=list)
    region_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate build duration."""
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
        log_file: Path to log file (console only if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_boroughmap", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler._boroughmap = True  # type: ignore[attr-defined]
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler._boroughmap = True  # type: ignore[attr-defined]
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("boroughmap")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class BuildLogger:
    """Logger for tracking region store build progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = BuildStats()

    def log_region_start(self, region: str, way_count: int) -> None:
        """Log start of region assembly."""
        self._logger.debug("Building region", region=region, ways=way_count)

    def log_segment_dropped(self, region: str, way_id: int | str, reason: str) -> None:
        """Log a raw way rejected during ingestion."""
        self._logger.warning(
            "Segment dropped",
            region=region,
            way_id=way_id,
            reason=reason,
        )
        self._stats.dropped_segments += 1

    def log_region_built(
        self,
        region: str,
        full_points: int,
        simplified_points: int,
        duration_ms: float,
    ) -> None:
        """Log successful region build."""
        self._logger.info(
            "Region built",
            region=region,
            full_points=full_points,
            simplified_points=simplified_points,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.built_count += 1
        self._stats.region_timings_ms.append(duration_ms)

    def log_region_failed(self, region: str, error: Exception) -> None:
        """Log a region excluded from the store."""
        self._logger.error(
            "Region excluded",
            region=region,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failed_count += 1
        self._stats.failures.append((region, str(error)))

    @property
    def stats(self) -> BuildStats:
        """Get current build statistics."""
        return self._stats
