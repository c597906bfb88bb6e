"""
Rendering Layer
===============

Bounded Context: Human-readable text output.

Responsibilities:
- Section headers and per-shape blocks
- Summary statistics block
- process_shape() for dispatch through a generic reference
"""

from shapecalc.rendering.report import ShapeReporter, process_shape

__all__ = [
    "ShapeReporter",
    "process_shape",
]
