"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

JSON-per-line logger used by every shapecalc component.

Design:
- Wraps Python's logging module
- Writes to stderr (stdout is reserved for the demo report)
- Typed events (LogEvent enum)

Output:
    {
        "timestamp": "2025-10-24T15:30:45.123456+00:00",
        "level": "DEBUG",
        "component": "geometry",
        "event": "shape.area.computed",
        "message": "Circle area cached",
        "metadata": {"shape": "Circle", "value": 50.26548245743669}
    }
"""

import json
import logging
import math
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent

PACKAGE_LOGGER_NAME = "shapecalc"

_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
if _package_logger.level == logging.NOTSET:
    _package_logger.setLevel(logging.INFO)


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "geometry", "pipeline")
        logger: Underlying Python logger instance

    Example:
        >>> logger = StructuredLogger("pipeline")
        >>> logger.info(
        ...     event=LogEvent.DEMO_STARTED,
        ...     message="Demo started",
        ...     metadata={'shape_count': 5}
        ... )
    """

    def __init__(
        self,
        component: str,
        level: Optional[int] = None,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "geometry")
            level: Logging level pinned on this logger (default: inherit
                the "shapecalc" package level, see set_package_level)
            logger_name: Custom logger name (default: shapecalc.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"shapecalc.{component}"
        self.logger = logging.getLogger(self.logger_name)
        if level is not None:
            self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()  # stderr
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = _json_safe(metadata)

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(log_level, json.dumps(log_entry, allow_nan=False))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log WARNING level message.

        Example:
            >>> logger.warning(
            ...     event=LogEvent.GEOMETRY_DEGENERATE,
            ...     message="Triangle area is NaN",
            ...     metadata={'sides': [1.0, 2.0, 10.0]}
            ... )
        """
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance, summarized under "exception"
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change logging level dynamically."""
        self.logger.setLevel(level)


def _json_safe(value: Any) -> Any:
    """Replace NaN and infinities with None so every line is strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


def set_package_level(level: int) -> int:
    """
    Set the level shared by every shapecalc logger that does not pin its own.

    Returns:
        The previous package level, for restoring later
    """
    previous = _package_logger.level
    _package_logger.setLevel(level)
    return previous


class JSONFormatter(logging.Formatter):
    """Pass-through formatter: StructuredLogger already hands over JSON."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: Optional[int] = None
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("pipeline")  # follows the package level
    """
    return StructuredLogger(component=component, level=level)
