"""
Shape Report Module
===================

Text rendering of shape collections and their statistics.

Design:
- Stateless apart from style (sink, precision)
- No computation: reads cached accessors and ShapeStats only
- Per-shape blocks delegate to Shape.describe() (dynamic dispatch)
"""

import sys
from typing import Iterable, Optional, TextIO

from shapecalc.analytics.stats import ShapeStats
from shapecalc.constants import PRECISION
from shapecalc.geometry.shapes import Shape


class ShapeReporter:
    """
    Writes the demo's text sections to a sink.

    Usage:
        reporter = ShapeReporter(sink=sys.stdout, precision=2)
        reporter.print_header("=== Shape Calculator ===")
        reporter.print_shapes(shapes)
        reporter.print_summary(compute_stats(shapes))
        reporter.process_shape(Rectangle(7.0, 2.0))
    """

    def __init__(self, sink: Optional[TextIO] = None, precision: int = PRECISION):
        """
        Args:
            sink: Writable text stream (default: sys.stdout at write time)
            precision: Decimal places for all numbers
        """
        self._sink = sink
        self.precision = precision

    @property
    def sink(self) -> TextIO:
        # Resolved lazily so pytest's capsys replacement of sys.stdout is honored
        return self._sink if self._sink is not None else sys.stdout

    def print_header(self, title: str) -> None:
        self.sink.write(f"{title}\n\n")

    def print_shapes(self, shapes: Iterable[Shape]) -> None:
        """Describe every shape in order."""
        self.sink.write("Individual Shape Information:\n")
        for shape in shapes:
            shape.describe(self.sink, self.precision)

    def print_summary(self, stats: ShapeStats) -> None:
        """
        Write the summary block.

        Average area is guarded: 0.00 for an empty collection.
        """
        p = self.precision
        self.sink.write(
            "\n=== Summary Statistics ===\n"
            f"Total shapes: {stats.count}\n"
            f"Total area: {stats.total_area:.{p}f} square units\n"
            f"Total perimeter: {stats.total_perimeter:.{p}f} units\n"
            f"Average area: {stats.average_area:.{p}f} square units\n\n"
        )

    def process_shape(self, shape: Shape) -> None:
        """Announce a shape by name, then let it describe itself."""
        self.sink.write(f"Processing {shape.get_name()}:\n")
        shape.describe(self.sink, self.precision)


def process_shape(shape: Shape, sink: Optional[TextIO] = None) -> None:
    """Call the shape contract through a generic Shape reference."""
    ShapeReporter(sink=sink).process_shape(shape)
