"""
Structured Logging for shapecalc
================================

Bounded Context: Observability

JSON-structured logging shared by geometry, analytics and the demo driver.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function
    set_package_level: Level shared by all shapecalc component loggers

Example:
    >>> from shapecalc.logging import create_logger, LogEvent
    >>> logger = create_logger("pipeline")
    >>> logger.info(
    ...     event=LogEvent.DEMO_COMPLETED,
    ...     message="Demo finished",
    ...     metadata={'shape_count': 5}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger, set_package_level

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
    'set_package_level',
]
