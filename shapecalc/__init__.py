"""
shapecalc
=========

Runtime polymorphism demo: shapes that compute and describe themselves.

Architecture:

    shapecalc/
    ├── geometry/          # Shape contract + Rectangle, Circle, Triangle
    │   └── shapes.py
    │
    ├── analytics/         # Aggregation
    │   └── stats.py       # ShapeStats, compute_stats
    │
    ├── rendering/         # Text output
    │   └── report.py      # ShapeReporter, process_shape
    │
    ├── logging/           # Structured JSON logs (stderr)
    ├── config.py          # DemoConfig, ShapeConfig (YAML)
    └── pipeline.py        # ShapeDemo, DemoBuilder

Usage:

    from shapecalc import Rectangle, Circle, Triangle, compute_stats

    shapes = [Rectangle(5.0, 3.0), Circle(4.0), Triangle(3.0, 4.0, 5.0)]
    for shape in shapes:
        shape.describe()

    stats = compute_stats(shapes)
    print(stats.total_area, stats.average_area)

    # Or the full demo
    from shapecalc import DemoBuilder, DemoConfig

    DemoBuilder.from_config(DemoConfig()).build().run()
"""

# Geometry Layer
from shapecalc.geometry.shapes import (
    Shape,
    Rectangle,
    Circle,
    Triangle,
    InvalidGeometryError,
)

# Analytics Layer
from shapecalc.analytics.stats import ShapeStats, compute_stats

# Rendering Layer
from shapecalc.rendering.report import ShapeReporter, process_shape

# Configuration + orchestration
from shapecalc.config import DemoConfig, ShapeConfig
from shapecalc.pipeline import ShapeDemo, DemoBuilder

__all__ = [
    # Geometry
    "Shape",
    "Rectangle",
    "Circle",
    "Triangle",
    "InvalidGeometryError",
    # Analytics
    "ShapeStats",
    "compute_stats",
    # Rendering
    "ShapeReporter",
    "process_shape",
    # Config / pipeline
    "DemoConfig",
    "ShapeConfig",
    "ShapeDemo",
    "DemoBuilder",
]

__version__ = "1.0.0"
