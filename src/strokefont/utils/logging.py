"""Logging utilities for StrokeFont."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class SynthesisStats:
    """Statistics from a synthesis run."""

    built_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    merge_fallbacks: int = 0
    unresolved_ribbons: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    glyph_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate synthesis duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_glyph_time_ms(self) -> float | None:
        """Average time spent per built glyph."""
        if not self.glyph_timings_ms:
            return None
        return sum(self.glyph_timings_ms) / len(self.glyph_timings_ms)


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
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # replace handlers from an earlier call instead of stacking them
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

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

    logger = structlog.get_logger("strokefont")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger(name: str = "strokefont") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger without touching global configuration."""
    return structlog.get_logger(name)


class SynthesisLogger:
    """Logger for tracking synthesis progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = SynthesisStats()

    def log_glyph_start(self, char: str, stroke_count: int) -> None:
        """Log start of character processing."""
        self._logger.debug("Synthesizing glyph", char=char, strokes=stroke_count)

    def log_glyph_complete(
        self,
        char: str,
        contours: int,
        advance_width: int,
        merged: bool,
        unresolved_ribbons: int,
        duration_ms: float,
    ) -> None:
        """Log a successfully built glyph."""
        self._logger.info(
            "Glyph built",
            char=char,
            contours=contours,
            advance_width=advance_width,
            merged=merged,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.built_count += 1
        self._stats.glyph_timings_ms.append(duration_ms)
        self._stats.unresolved_ribbons += unresolved_ribbons
        if not merged:
            self._stats.merge_fallbacks += 1

    def log_glyph_skipped(self, char: str, reason: str) -> None:
        """Log skipped character."""
        self._logger.debug("Glyph skipped", char=char, reason=reason)
        self._stats.skipped_count += 1

    def log_glyph_error(
        self,
        char: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log character processing error."""
        self._logger.error(
            "Glyph synthesis failed",
            char=char,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((char, str(error)))

    @property
    def stats(self) -> SynthesisStats:
        """Get current synthesis statistics."""
        return self._stats
