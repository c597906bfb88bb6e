"""
Shared pytest fixtures.

Shapes are rebuilt per test so every fixture starts with an empty cache.
"""

import io

import pytest

from shapecalc.geometry.shapes import Circle, Rectangle, Triangle


@pytest.fixture
def rectangle():
    return Rectangle(5.0, 3.0)


@pytest.fixture
def circle():
    return Circle(4.0)


@pytest.fixture
def triangle():
    return Triangle(3.0, 4.0, 5.0)


@pytest.fixture
def sample_shapes(rectangle, circle, triangle):
    # Known totals: area 71.27, perimeter 53.13
    return [rectangle, circle, triangle]


@pytest.fixture
def sink():
    # In-memory text sink for describe()/report output
    return io.StringIO()
