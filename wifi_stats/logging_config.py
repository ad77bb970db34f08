"""Logging configuration and probe event sinks for wifi-stats."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Literal, Protocol, TextIO

EventLevel = Literal["info", "success", "error"]


def setup_logging(
    level: str = "WARNING",
    log_to_file: bool = False,
    log_dir: Path | None = None,
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_to_file: Whether to also log to a file
        log_dir: Directory for log files (default: data/logs/)

    Returns:
        Configured package logger
    """
    logger = logging.getLogger("wifi_stats")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler on stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_dir = log_dir or Path("data/logs")
        log_dir.mkdir(parents=True, exist_ok=True)

        # Daily log file
        log_file = log_dir / f"wifi_stats_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")

    return logger


def get_logger(name: str = "wifi_stats") -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)


class EventSink(Protocol):
    """Destination for structured probe lifecycle events."""

    def emit(
        self,
        level: EventLevel,
        event: str,
        data: dict[str, Any] | None = None,
    ) -> None: ...


class JsonLinesSink:
    """Write each event as a single JSON object per line."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def emit(
        self,
        level: EventLevel,
        event: str,
        data: dict[str, Any] | None = None,
    ) -> None:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "message": event,
            "data": data or {},
        }
        # Resolve stderr lazily so redirection after construction is honoured
        stream = self._stream or sys.stderr
        stream.write(json.dumps(entry, default=str) + "\n")
        stream.flush()


class LoggerSink:
    """Forward events to the standard logging tree."""

    LEVELS = {
        "info": logging.INFO,
        "success": logging.INFO,
        "error": logging.WARNING,
    }

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or get_logger("wifi_stats.events")

    def emit(
        self,
        level: EventLevel,
        event: str,
        data: dict[str, Any] | None = None,
    ) -> None:
        self.logger.log(
            self.LEVELS.get(level, logging.INFO),
            "%s %s",
            event,
            json.dumps(data or {}, default=str),
        )


class NullSink:
    """Discard every event."""

    def emit(
        self,
        level: EventLevel,
        event: str,
        data: dict[str, Any] | None = None,
    ) -> None:
        return None


def create_event_sink(kind: str) -> EventSink:
    """Build the event sink named in configuration."""
    if kind == "stderr":
        return JsonLinesSink()
    if kind == "logger":
        return LoggerSink()
    if kind == "none":
        return NullSink()
    raise ValueError(f"Unknown event sink: {kind}")
