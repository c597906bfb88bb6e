"""
Geometric Shapes Module
========================

Immutable shapes behind a common polymorphic contract.

Design:
- Frozen dataclasses (parameters fixed at construction)
- Derived values (radius_squared, semi_perimeter) precomputed in __post_init__
- Area/perimeter computed lazily, once per instance, then cached
- No validation unless validate() is called explicitly
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, List, Optional, TextIO

import numpy as np

from shapecalc.constants import PI, PRECISION, SEPARATOR
from shapecalc.logging import LogEvent, create_logger

_logger = create_logger("geometry")


class InvalidGeometryError(ValueError):
    """Raised by Shape.validate() when parameters describe no real shape."""
    pass


class Shape(ABC):
    """
    Abstract shape contract.

    Variants implement compute_area(), compute_perimeter() and
    _dimension_lines(). The cached accessors get_area() / get_perimeter()
    are shared and must not be overridden.

    Usage:
        shapes: List[Shape] = [Rectangle(5.0, 3.0), Circle(4.0)]
        for shape in shapes:
            shape.describe()
    """

    name: ClassVar[str] = "Shape"
    perimeter_label: ClassVar[str] = "Perimeter"

    def __post_init__(self):
        # None = not computed yet; negative and NaN results are cached too
        object.__setattr__(self, '_cached_area', None)
        object.__setattr__(self, '_cached_perimeter', None)

    @abstractmethod
    def compute_area(self) -> float:
        """Geometric area from the instance's fixed parameters."""

    @abstractmethod
    def compute_perimeter(self) -> float:
        """Perimeter (circumference for circles)."""

    @abstractmethod
    def _dimension_lines(self, precision: int) -> List[str]:
        """Variant-specific lines listing the shape's parameters."""

    def validate(self) -> None:
        """
        Check the parameters describe a real, non-degenerate shape.

        Raises:
            InvalidGeometryError: If any dimension is not strictly positive
        """
        for field_name, value in self._dimensions().items():
            if not value > 0:
                raise InvalidGeometryError(
                    f"{self.name} {field_name} must be positive, got {value}"
                )

    def _dimensions(self) -> dict:
        return {}

    def get_name(self) -> str:
        return self.name

    def get_area(self) -> float:
        """
        Area, computed on first call and cached for the instance lifetime.

        Returns:
            Same float object on every call
        """
        if self._cached_area is None:
            area = self.compute_area()
            object.__setattr__(self, '_cached_area', area)
            self._report(LogEvent.SHAPE_AREA_COMPUTED, "area", area)
        return self._cached_area

    def get_perimeter(self) -> float:
        """Perimeter, computed on first call and cached for the instance lifetime."""
        if self._cached_perimeter is None:
            perimeter = self.compute_perimeter()
            object.__setattr__(self, '_cached_perimeter', perimeter)
            self._report(LogEvent.SHAPE_PERIMETER_COMPUTED, "perimeter", perimeter)
        return self._cached_perimeter

    def _report(self, event: LogEvent, quantity: str, value: float) -> None:
        metadata = {'shape': self.name, 'quantity': quantity, 'value': value}
        if np.isnan(value):
            _logger.warning(
                event=LogEvent.GEOMETRY_DEGENERATE,
                message=f"{self.name} {quantity} is not a number",
                metadata={**metadata, 'dimensions': self._dimensions()},
            )
        else:
            _logger.debug(event=event, message=f"{self.name} {quantity} cached", metadata=metadata)

    def describe(self, sink: Optional[TextIO] = None, precision: int = PRECISION) -> None:
        """
        Write a multi-line summary of the shape to a text sink.

        Layout:
            Shape: <name>
            <dimension lines>
            Area: <area>
            <Perimeter|Circumference>: <perimeter>
            ------------------------

        Args:
            sink: Writable text stream (default: sys.stdout)
            precision: Decimal places for numbers
        """
        sink = sink if sink is not None else sys.stdout
        lines = [f"Shape: {self.name}"]
        lines.extend(self._dimension_lines(precision))
        lines.append(f"Area: {self.get_area():.{precision}f}")
        lines.append(f"{self.perimeter_label}: {self.get_perimeter():.{precision}f}")
        lines.append(SEPARATOR)
        sink.write("\n".join(lines) + "\n")


@dataclass(frozen=True)
class Rectangle(Shape):
    """
    Axis-free rectangle.

    Attributes:
        width: Side length along one axis
        height: Side length along the other axis
    """

    name: ClassVar[str] = "Rectangle"

    width: float
    height: float

    def compute_area(self) -> float:
        return self.width * self.height

    def compute_perimeter(self) -> float:
        return 2.0 * (self.width + self.height)

    def _dimensions(self) -> dict:
        return {'width': self.width, 'height': self.height}

    def _dimension_lines(self, precision: int) -> List[str]:
        return [f"Dimensions: {self.width:.{precision}f} x {self.height:.{precision}f}"]


@dataclass(frozen=True)
class Circle(Shape):
    """
    Circle with radius_squared precomputed at construction.

    Attributes:
        radius: Circle radius
        radius_squared: radius ** 2 (derived, not an init argument)
    """

    name: ClassVar[str] = "Circle"
    perimeter_label: ClassVar[str] = "Circumference"

    radius: float

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, 'radius_squared', self.radius * self.radius)

    def compute_area(self) -> float:
        return PI * self.radius_squared

    def compute_perimeter(self) -> float:
        return 2.0 * PI * self.radius

    def _dimensions(self) -> dict:
        return {'radius': self.radius}

    def _dimension_lines(self, precision: int) -> List[str]:
        return [f"Radius: {self.radius:.{precision}f}"]


@dataclass(frozen=True)
class Triangle(Shape):
    """
    Triangle given by its three side lengths.

    Area uses Heron's formula over the semi-perimeter, which is computed once
    at construction. Sides that break the triangle inequality give a NaN area
    (reported as a degenerate-geometry warning, never raised).

    Attributes:
        side1, side2, side3: Side lengths
        semi_perimeter: (side1 + side2 + side3) / 2 (derived)
    """

    name: ClassVar[str] = "Triangle"

    side1: float
    side2: float
    side3: float

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(
            self, 'semi_perimeter', (self.side1 + self.side2 + self.side3) * 0.5
        )

    def compute_area(self) -> float:
        s = self.semi_perimeter
        term = s * (s - self.side1) * (s - self.side2) * (s - self.side3)
        with np.errstate(invalid="ignore"):
            return float(np.sqrt(term))

    def compute_perimeter(self) -> float:
        return 2.0 * self.semi_perimeter

    def validate(self) -> None:
        """
        Check sides are positive and satisfy the strict triangle inequality.

        Raises:
            InvalidGeometryError: On a non-positive side or degenerate triangle
        """
        super().validate()
        longest = max(self.side1, self.side2, self.side3)
        if not longest < self.semi_perimeter:
            raise InvalidGeometryError(
                f"Sides {self.side1}, {self.side2}, {self.side3} "
                f"violate the triangle inequality"
            )

    def _dimensions(self) -> dict:
        return {'side1': self.side1, 'side2': self.side2, 'side3': self.side3}

    def _dimension_lines(self, precision: int) -> List[str]:
        sides = ", ".join(
            f"{side:.{precision}f}" for side in (self.side1, self.side2, self.side3)
        )
        return [f"Sides: {sides}"]
