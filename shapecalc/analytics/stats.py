"""
Shape Statistics Module
=======================

Fold a collection of shapes into an immutable summary.

Design:
- Immutable snapshot (ShapeStats)
- Recomputed on every call, nothing persisted
- Reads shapes only through their cached accessors
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from shapecalc.geometry.shapes import Shape
from shapecalc.logging import LogEvent, create_logger

_logger = create_logger("analytics")


@dataclass(frozen=True)
class ShapeStats:
    """
    Immutable statistics snapshot for a shape collection.

    Design:
    - Frozen dataclass (value object, no identity)
    - No back-reference to the source collection
    """

    count: int = 0
    total_area: float = 0.0
    total_perimeter: float = 0.0

    @property
    def average_area(self) -> float:
        """Mean area, 0.0 for an empty collection."""
        if self.count == 0:
            return 0.0
        return self.total_area / self.count

    def __str__(self) -> str:
        return (
            f"shapes={self.count}, area={self.total_area:.2f}, "
            f"perimeter={self.total_perimeter:.2f}"
        )


def compute_stats(shapes: Sequence[Shape]) -> ShapeStats:
    """
    Aggregate count, total area and total perimeter.

    Populates each shape's area/perimeter cache as a side effect.

    Args:
        shapes: Ordered shapes, possibly empty

    Returns:
        ShapeStats snapshot (zeros for an empty sequence)
    """
    count = len(shapes)
    areas = np.fromiter((shape.get_area() for shape in shapes), dtype=float, count=count)
    perimeters = np.fromiter(
        (shape.get_perimeter() for shape in shapes), dtype=float, count=count
    )

    stats = ShapeStats(
        count=count,
        total_area=float(areas.sum()),
        total_perimeter=float(perimeters.sum()),
    )

    _logger.debug(
        event=LogEvent.STATS_COMPUTED,
        message=f"Aggregated {count} shapes",
        metadata={
            'count': stats.count,
            'total_area': stats.total_area,
            'total_perimeter': stats.total_perimeter,
        },
    )
    return stats
