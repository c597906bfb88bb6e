"""
Shape Demo Pipeline Module
==========================

Bounded Context: Orchestration of the polymorphism demo.

Design:
- Orchestrator: combines geometry, analytics and rendering
- Builder pattern: fluent configuration
- Fail Fast: configuration checked at build time

Run order:
    header -> describe each shape -> summary statistics -> process_shape()
    for each standalone shape
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, TextIO

from shapecalc.analytics.stats import ShapeStats, compute_stats
from shapecalc.config import DemoConfig
from shapecalc.constants import PRECISION
from shapecalc.geometry.shapes import Circle, Rectangle, Shape, Triangle
from shapecalc.logging import LogEvent, create_logger, set_package_level
from shapecalc.rendering.report import ShapeReporter

_logger = create_logger("pipeline")


@dataclass
class DemoSettings:
    """
    Demo configuration as assembled by DemoBuilder.

    Design:
    - The shape list owns its shapes; nothing else keeps references
    - Reporter injected (sink + precision)
    """

    title: str
    shapes: List[Shape]
    standalone_shapes: List[Shape]
    reporter: ShapeReporter
    log_level: int = logging.INFO


class ShapeDemo:
    """
    Runs the shape demo end to end.

    Usage:
        demo = (
            DemoBuilder()
            .add_rectangle(5.0, 3.0)
            .add_circle(4.0)
            .add_triangle(3.0, 4.0, 5.0)
            .build()
        )
        stats = demo.run()
    """

    def __init__(self, settings: DemoSettings):
        self.settings = settings

    def run(self) -> ShapeStats:
        """
        Print the full report.

        The configured log level applies to every shapecalc logger for the
        duration of the run and is restored afterwards.

        Returns:
            Statistics for the main collection (standalone shapes excluded)
        """
        previous_level = set_package_level(self.settings.log_level)
        try:
            return self._report()
        finally:
            set_package_level(previous_level)

    def _report(self) -> ShapeStats:
        reporter = self.settings.reporter

        _logger.info(
            event=LogEvent.DEMO_STARTED,
            message="Shape demo started",
            metadata={
                'shape_count': len(self.settings.shapes),
                'standalone_count': len(self.settings.standalone_shapes),
            },
        )

        reporter.print_header(self.settings.title)
        reporter.print_shapes(self.settings.shapes)

        stats = compute_stats(self.settings.shapes)
        reporter.print_summary(stats)

        if self.settings.standalone_shapes:
            reporter.sink.write("Demonstrating polymorphism with function calls:\n")
            for shape in self.settings.standalone_shapes:
                reporter.process_shape(shape)

        _logger.info(
            event=LogEvent.DEMO_COMPLETED,
            message="Shape demo completed",
            metadata={
                'count': stats.count,
                'total_area': stats.total_area,
                'total_perimeter': stats.total_perimeter,
                'average_area': stats.average_area,
            },
        )
        return stats


class DemoBuilder:
    """
    Fluent builder for ShapeDemo.

    Usage:
        demo = (
            DemoBuilder()
            .with_title("=== Shapes ===")
            .add_rectangle(5.0, 3.0)
            .add_circle(4.0)
            .add_standalone(Rectangle(7.0, 2.0))
            .with_sink(io.StringIO())
            .build()
        )
    """

    def __init__(self):
        self._title: str = DemoConfig.title
        self._shapes: List[Shape] = []
        self._standalone: List[Shape] = []
        self._sink: Optional[TextIO] = None
        self._precision: int = PRECISION
        self._log_level: int = logging.INFO

    @classmethod
    def from_config(cls, config: DemoConfig) -> "DemoBuilder":
        """Start a builder preloaded with a DemoConfig."""
        builder = (
            cls()
            .with_title(config.title)
            .with_precision(config.precision)
            .with_log_level(config.logging_level)
        )
        for shape in config.build_shapes():
            builder.add_shape(shape)
        for shape in config.build_standalone_shapes():
            builder.add_standalone(shape)
        return builder

    def with_title(self, title: str) -> "DemoBuilder":
        self._title = title
        return self

    def with_sink(self, sink: TextIO) -> "DemoBuilder":
        """Write the report to sink instead of stdout."""
        self._sink = sink
        return self

    def with_precision(self, precision: int) -> "DemoBuilder":
        self._precision = precision
        return self

    def with_log_level(self, level: int) -> "DemoBuilder":
        self._log_level = level
        return self

    def add_shape(self, shape: Shape) -> "DemoBuilder":
        """Append any Shape to the described and aggregated collection."""
        if not isinstance(shape, Shape):
            raise TypeError(f"shape must be a Shape, got {type(shape).__name__}")
        self._shapes.append(shape)
        return self

    def add_rectangle(self, width: float, height: float) -> "DemoBuilder":
        return self.add_shape(Rectangle(width, height))

    def add_circle(self, radius: float) -> "DemoBuilder":
        return self.add_shape(Circle(radius))

    def add_triangle(self, side1: float, side2: float, side3: float) -> "DemoBuilder":
        return self.add_shape(Triangle(side1, side2, side3))

    def add_standalone(self, shape: Shape) -> "DemoBuilder":
        """Append a shape shown through process_shape() after the summary."""
        if not isinstance(shape, Shape):
            raise TypeError(f"shape must be a Shape, got {type(shape).__name__}")
        self._standalone.append(shape)
        return self

    def build(self) -> ShapeDemo:
        """
        Build the demo.

        Raises:
            ValueError: If precision is out of range
        """
        if not 0 <= self._precision <= 10:
            raise ValueError(f"precision must be in [0, 10], got {self._precision}")

        settings = DemoSettings(
            title=self._title,
            shapes=list(self._shapes),
            standalone_shapes=list(self._standalone),
            reporter=ShapeReporter(sink=self._sink, precision=self._precision),
            log_level=self._log_level,
        )
        return ShapeDemo(settings)
