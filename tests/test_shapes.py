"""Formulas, caching and description of individual shapes."""

import dataclasses
import math
from unittest.mock import patch

import pytest

from shapecalc.constants import PI
from shapecalc.geometry.shapes import (
    Circle,
    InvalidGeometryError,
    Rectangle,
    Shape,
    Triangle,
)


@pytest.mark.parametrize("width, height", [(5.0, 3.0), (2.5, 6.0), (0.1, 1000.0)])
def test_rectangle_formulas(width, height):
    rect = Rectangle(width, height)
    assert rect.get_area() == pytest.approx(width * height)
    assert rect.get_perimeter() == pytest.approx(2 * (width + height))


@pytest.mark.parametrize("radius", [0.5, 2.5, 4.0, 10.0])
def test_circle_formulas(radius):
    circle = Circle(radius)
    assert circle.radius_squared == radius * radius
    assert circle.get_area() == pytest.approx(math.pi * radius ** 2)
    assert circle.get_perimeter() == pytest.approx(2 * math.pi * radius)
    # area / perimeter == r / 2
    assert circle.get_area() / circle.get_perimeter() == pytest.approx(radius / 2)


def test_pi_constant_is_double_precision_pi():
    assert PI == 3.14159265358979323846


@pytest.mark.parametrize("sides", [(3.0, 4.0, 5.0), (2.0, 2.0, 2.0), (7.0, 8.0, 9.0)])
def test_triangle_matches_heron(sides):
    a, b, c = sides
    tri = Triangle(a, b, c)
    s = (a + b + c) / 2
    assert tri.semi_perimeter == s
    expected = math.sqrt(s * (s - a) * (s - b) * (s - c))
    assert tri.get_area() == pytest.approx(expected)
    assert tri.get_area() > 0
    assert tri.get_perimeter() == pytest.approx(a + b + c)


def test_impossible_triangle_area_is_nan_not_an_error():
    tri = Triangle(1.0, 2.0, 10.0)
    assert math.isnan(tri.get_area())
    assert tri.get_perimeter() == pytest.approx(13.0)


def test_negative_dimensions_are_accepted():
    rect = Rectangle(-5.0, 3.0)
    assert rect.get_area() == pytest.approx(-15.0)
    assert rect.get_perimeter() == pytest.approx(-4.0)


def test_end_to_end_values(rectangle, circle, triangle):
    assert f"{rectangle.get_area():.2f}" == "15.00"
    assert f"{rectangle.get_perimeter():.2f}" == "16.00"
    assert f"{circle.get_area():.2f}" == "50.27"
    assert f"{circle.get_perimeter():.2f}" == "25.13"
    assert f"{triangle.get_area():.2f}" == "6.00"
    assert f"{triangle.get_perimeter():.2f}" == "12.00"


def test_cached_values_are_identical(circle):
    first_area = circle.get_area()
    first_perimeter = circle.get_perimeter()
    for _ in range(3):
        assert circle.get_area() is first_area
        assert circle.get_perimeter() is first_perimeter


def test_area_computed_at_most_once():
    circle = Circle(4.0)
    with patch.object(Circle, "compute_area", autospec=True, return_value=42.0) as compute:
        assert circle.get_area() == 42.0
        assert circle.get_area() == 42.0
        circle.get_area()
    assert compute.call_count == 1


def test_perimeter_computed_at_most_once_even_when_negative():
    rect = Rectangle(-1.0, -1.0)
    with patch.object(Rectangle, "compute_perimeter", autospec=True, return_value=-4.0) as compute:
        rect.get_perimeter()
        rect.get_perimeter()
    assert compute.call_count == 1


def test_caches_are_per_instance():
    first, second = Rectangle(1.0, 2.0), Rectangle(1.0, 2.0)
    with patch.object(Rectangle, "compute_area", autospec=True, return_value=2.0) as compute:
        first.get_area()
        second.get_area()
    assert compute.call_count == 2


def test_shapes_are_immutable(rectangle):
    with pytest.raises(dataclasses.FrozenInstanceError):
        rectangle.width = 10.0


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_names():
    assert Rectangle(1.0, 1.0).get_name() == "Rectangle"
    assert Circle(1.0).get_name() == "Circle"
    assert Triangle(1.0, 1.0, 1.0).get_name() == "Triangle"


def test_describe_rectangle(rectangle, sink):
    rectangle.describe(sink)
    assert sink.getvalue() == (
        "Shape: Rectangle\n"
        "Dimensions: 5.00 x 3.00\n"
        "Area: 15.00\n"
        "Perimeter: 16.00\n"
        "------------------------\n"
    )


def test_describe_circle(circle, sink):
    circle.describe(sink)
    assert sink.getvalue() == (
        "Shape: Circle\n"
        "Radius: 4.00\n"
        "Area: 50.27\n"
        "Circumference: 25.13\n"
        "------------------------\n"
    )


def test_describe_triangle_with_precision(triangle, sink):
    triangle.describe(sink, precision=1)
    assert sink.getvalue() == (
        "Shape: Triangle\n"
        "Sides: 3.0, 4.0, 5.0\n"
        "Area: 6.0\n"
        "Perimeter: 12.0\n"
        "------------------------\n"
    )


def test_describe_defaults_to_stdout(capsys, rectangle):
    rectangle.describe()
    assert "Shape: Rectangle" in capsys.readouterr().out


def test_validate_accepts_real_shapes(rectangle, circle, triangle):
    rectangle.validate()
    circle.validate()
    triangle.validate()


@pytest.mark.parametrize(
    "shape",
    [
        Rectangle(-1.0, 2.0),
        Rectangle(1.0, 0.0),
        Circle(-3.0),
        Triangle(1.0, 2.0, 10.0),
        Triangle(1.0, 2.0, 3.0),
        Triangle(0.0, 1.0, 1.0),
    ],
)
def test_validate_rejects_invalid_geometry(shape):
    with pytest.raises(InvalidGeometryError):
        shape.validate()


def test_invalid_geometry_error_is_value_error():
    assert issubclass(InvalidGeometryError, ValueError)
