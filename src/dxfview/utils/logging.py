"""Logging utilities for dxfview."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from dxfview.domain import Document, Point


@dataclass
class ParseStats:
    """Statistics from loading and drawing documents."""

    documents_loaded: int = 0
    entity_counts: dict[str, int] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    renders: int = 0
    snaps: int = 0
    snap_hits: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def entity_total(self) -> int:
        """Total entities across all loaded documents."""
        return sum(self.entity_counts.values())

    @property
    def duration_seconds(self) -> float:
        """Calculate time between first and last recorded event."""
        if self.start_time and self.end_time:
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
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_dxfview", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._dxfview = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._dxfview = True  # type: ignore[attr-defined]
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

    logger = structlog.get_logger("dxfview")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ViewerLogger:
    """Logger for tracking viewer events and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ParseStats()

    def log_document_loaded(self, path: str, document: Document, duration_ms: float) -> None:
        """Log a parsed document and accumulate its entity counts."""
        counts = {kind.value: count for kind, count in document.count_by_kind().items()}
        self._logger.info(
            "Document loaded",
            path=path,
            entities=len(document.entities),
            duration_ms=round(duration_ms, 2),
            **{kind.lower(): count for kind, count in counts.items()},
        )
        self._stats.documents_loaded += 1
        for kind, count in counts.items():
            self._stats.entity_counts[kind] = self._stats.entity_counts.get(kind, 0) + count
        for warning in document.warnings:
            self.log_document_warning(path, warning)

    def log_document_warning(self, path: str, warning: str) -> None:
        """Log a non-fatal parse warning."""
        self._logger.info("Document warning", path=path, warning=warning)
        self._stats.warnings.append(warning)

    def log_render(self, width: int, height: int, pixel_ratio: float, duration_ms: float) -> None:
        """Log a completed draw."""
        self._logger.debug(
            "Document rendered",
            width=width,
            height=height,
            pixel_ratio=pixel_ratio,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.renders += 1

    def log_snap(self, screen_x: float, screen_y: float, result: Point | None) -> None:
        """Log a nearest-vertex query."""
        self._logger.debug(
            "Vertex snap",
            screen_x=screen_x,
            screen_y=screen_y,
            hit=result.to_tuple() if result is not None else None,
        )
        self._stats.snaps += 1
        if result is not None:
            self._stats.snap_hits += 1

    @property
    def stats(self) -> ParseStats:
        """Get current statistics."""
        return self._stats

