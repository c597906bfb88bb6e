"""
Geometry Layer
==============

Bounded Context: Shapes and their closed-form measurements.

Responsibilities:
- Shape representation (immutable)
- Area / perimeter formulas
- Lazy, per-instance caching of computed values
- Text description of a single shape
"""

from shapecalc.geometry.shapes import (
    Shape,
    Rectangle,
    Circle,
    Triangle,
    InvalidGeometryError,
)

__all__ = [
    "Shape",
    "Rectangle",
    "Circle",
    "Triangle",
    "InvalidGeometryError",
]
