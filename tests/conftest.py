"""Pytest configuration and fixtures for svgcanvas-py tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from svgcanvas_py.core.color import BLUE, RED, Color
from svgcanvas_py.core.logging import configure_default_logging
from svgcanvas_py.core.models import Circle, Line, Rect, Text
from svgcanvas_py.core.vector import Vector2
from svgcanvas_py.services.canvas import Canvas

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Restore the library logging default after each test."""
    yield
    configure_default_logging()


# Model fixtures


@pytest.fixture
def sample_line() -> Line:
    """Create a diagonal line from the origin."""
    return Line(start=Vector2(0, 0), end=Vector2(1, 1))


@pytest.fixture
def sample_circle() -> Circle:
    """Create a circle of radius 5 at the origin."""
    return Circle(center=Vector2(0, 0), radius=5.0)


@pytest.fixture
def sample_rect() -> Rect:
    """Create a unit square at the origin."""
    return Rect.from_corners(Vector2(0, 0), Vector2(1, 1))


@pytest.fixture
def sample_text() -> Text:
    """Create a text element."""
    return Text(text="Hello", pos=Vector2(10, 20))


# Canvas fixtures


@pytest.fixture
def canvas() -> Canvas:
    """Create an empty full HD canvas."""
    return Canvas(1920, 1080)


@pytest.fixture
def populated_canvas() -> Canvas:
    """Create a canvas holding one drawable of each type."""
    canvas = Canvas(800, 600)
    canvas.add_line(Vector2(10, 10), Vector2(110, 10), stroke_color=RED, stroke_width=3)
    canvas.add_circle(Vector2(300, 300), 50)
    canvas.add_rect(Vector2(500, 100), Vector2(600, 200), fill=BLUE)
    canvas.add_text("Label", Vector2(20, 580), fill=Color(10, 20, 30))
    return canvas
