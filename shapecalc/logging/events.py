"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: shape, geometry, stats, demo, config, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - shape.*: Lazy cache fills on individual shapes
    - geometry.*: Geometric anomalies (never raised, only reported)
    - stats.*: Aggregation
    - demo.*: Demo driver lifecycle
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Shape Events ==========
    SHAPE_AREA_COMPUTED = "shape.area.computed"
    """Area computed and cached for the first time."""

    SHAPE_PERIMETER_COMPUTED = "shape.perimeter.computed"
    """Perimeter computed and cached for the first time."""

    GEOMETRY_DEGENERATE = "geometry.degenerate"
    """Computed value is not a number (e.g. impossible triangle)."""

    # ========== Stats Events ==========
    STATS_COMPUTED = "stats.computed"
    """Collection folded into a ShapeStats snapshot."""

    # ========== Demo Events ==========
    DEMO_STARTED = "demo.started"
    """Demo run started."""

    DEMO_COMPLETED = "demo.completed"
    """Demo run finished."""

    CONFIG_LOADED = "config.loaded"
    """Demo configuration loaded from YAML."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration could not be loaded or validated."""


SHAPE_EVENTS = {
    LogEvent.SHAPE_AREA_COMPUTED,
    LogEvent.SHAPE_PERIMETER_COMPUTED,
    LogEvent.GEOMETRY_DEGENERATE,
}

DEMO_EVENTS = {
    LogEvent.STATS_COMPUTED,
    LogEvent.DEMO_STARTED,
    LogEvent.DEMO_COMPLETED,
    LogEvent.CONFIG_LOADED,
}

ERROR_EVENTS = {
    LogEvent.CONFIG_ERROR,
}
