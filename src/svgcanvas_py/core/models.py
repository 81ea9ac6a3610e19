"""Drawable shapes for the svgcanvas-py scene model."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Self

from svgcanvas_py.core.color import BLACK, TRANSPARENT, Color
from svgcanvas_py.core.markup import Drawable, format_number
from svgcanvas_py.core.types import DrawableType
from svgcanvas_py.core.vector import EPSILON, Vector2, effective_scale


def _rotation_transform(angle: float, pivot: Vector2) -> str:
    return f"rotate({format_number(math.degrees(angle))} {format_number(pivot.x)} {format_number(pivot.y)})"


@dataclass
class Line(Drawable):
    """A straight segment between two points.

    Attributes:
        start: First endpoint.
        end: Second endpoint.
        stroke_color: Colour of the segment.
        fill: Fill colour written to the style attribute.
        stroke_width: Width of the segment in pixels.
    """

    drawable_type: ClassVar[DrawableType] = DrawableType.LINE

    start: Vector2
    end: Vector2
    stroke_color: Color = BLACK
    fill: Color = TRANSPARENT
    stroke_width: int = 1

    def __post_init__(self) -> None:
        """Take private copies of the endpoints."""
        self.start = self.start.copy()
        self.end = self.end.copy()

    @property
    def len(self) -> float:
        """Length of the segment."""
        return (self.end - self.start).len

    @property
    def angle(self) -> float:
        """Direction of ``end - start`` in radians."""
        return (self.end - self.start).arg

    def translate(self, offset: Vector2) -> Self:
        self.start.translate(offset)
        self.end.translate(offset)
        return self

    def rotate(self, angle: float) -> Self:
        """Rotate ``end`` about ``start`` by ``angle`` radians."""
        self.end = self.start + (self.end - self.start).rotate(angle)
        return self

    def scale(self, c: float) -> Self:
        """Scale the segment's length by ``c``, keeping ``start`` fixed."""
        self.end = self.start + (self.end - self.start).scale(c)
        return self

    def contains(self, point: Vector2) -> bool:
        """Return whether ``point`` lies on the segment.

        The point must be collinear with the endpoints and no further from
        either endpoint than the segment is long.
        """
        to_point = point - self.start
        to_end = self.end - point
        if abs(to_point.cross(to_end)) > EPSILON:
            return False
        return max(to_point.len, to_end.len) <= self.len + EPSILON

    def tag_properties(self) -> dict[str, str]:
        return {
            "x1": format_number(self.start.x),
            "y1": format_number(self.start.y),
            "x2": format_number(self.end.x),
            "y2": format_number(self.end.y),
            "style": f"fill:{self.fill};stroke:{self.stroke_color};stroke-width:{self.stroke_width}",
        }


@dataclass
class Circle(Drawable):
    """A circle given by its center and radius.

    Attributes:
        center: Center point.
        radius: Radius in pixels.
        stroke_color: Colour of the outline.
        fill: Colour of the interior.
        stroke_width: Outline width in pixels.
    """

    drawable_type: ClassVar[DrawableType] = DrawableType.CIRCLE

    center: Vector2
    radius: float
    stroke_color: Color = BLACK
    fill: Color = TRANSPARENT
    stroke_width: int = 1

    def __post_init__(self) -> None:
        """Take a private copy of the center."""
        self.center = self.center.copy()

    @property
    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    @property
    def area(self) -> float:
        return math.pi * self.radius**2

    def translate(self, offset: Vector2) -> Self:
        self.center.translate(offset)
        return self

    def rotate(self, angle: float) -> Self:  # noqa: ARG002
        # rotating a circle about its own center changes nothing
        return self

    def scale(self, c: float) -> Self:
        # the sign of c is dropped, a radius is a length
        self.radius *= abs(effective_scale(c))
        return self

    def contains(self, point: Vector2) -> bool:
        """Return whether ``point`` is inside the circle or on its boundary."""
        return (point - self.center).len <= self.radius + EPSILON

    def tag_properties(self) -> dict[str, str]:
        return {
            "cx": format_number(self.center.x),
            "cy": format_number(self.center.y),
            "r": format_number(self.radius),
        }


@dataclass
class Rect(Drawable):
    """A rectangle anchored at one corner.

    The opposite corner is ``start + diagonal``. ``angle`` accumulates every
    rotation applied to the rectangle, so rotating ``diagonal`` back by
    ``-angle`` gives its sides in the rectangle's own frame.

    Attributes:
        start: Anchor corner.
        diagonal: Vector from ``start`` to the opposite corner.
        angle: Accumulated rotation in radians.
        stroke_color: Colour of the outline.
        fill: Colour of the interior.
        stroke_width: Outline width in pixels.
    """

    drawable_type: ClassVar[DrawableType] = DrawableType.RECT

    start: Vector2
    diagonal: Vector2
    angle: float = 0.0
    stroke_color: Color = BLACK
    fill: Color = TRANSPARENT
    stroke_width: int = 1

    def __post_init__(self) -> None:
        """Take private copies of the geometry."""
        self.start = self.start.copy()
        self.diagonal = self.diagonal.copy()

    @classmethod
    def from_corners(cls, start: Vector2, end: Vector2, **style: object) -> Rect:
        """Create an unrotated rectangle from two opposite corners."""
        return cls(start=start, diagonal=end - start, **style)  # type: ignore[arg-type]

    @classmethod
    def square(cls, start: Vector2, side: float, **style: object) -> Rect:
        """Create an unrotated square extending right and down from ``start``."""
        return cls(start=start, diagonal=Vector2(side, side), **style)  # type: ignore[arg-type]

    @property
    def end(self) -> Vector2:
        """Corner opposite to ``start``."""
        return self.start + self.diagonal

    def _local_diagonal(self) -> Vector2:
        return self.diagonal.copy().rotate(-self.angle)

    def dimensions(self) -> Vector2:
        """Return ``(width, height)`` of the rectangle in its own frame."""
        local = self._local_diagonal()
        return Vector2(abs(local.x), abs(local.y))

    def translate(self, offset: Vector2) -> Self:
        self.start.translate(offset)
        return self

    def rotate(self, angle: float) -> Self:
        """Rotate the rectangle about ``start`` by ``angle`` radians."""
        self.angle += angle
        self.diagonal.rotate(angle)
        return self

    def scale(self, c: float) -> Self:
        self.diagonal.scale(c)
        return self

    def contains(self, point: Vector2) -> bool:
        """Return whether ``point`` is inside the rectangle or on its edge.

        The point is rotated back by ``angle`` about ``start`` first, so the
        test follows the rectangle after any rotation.
        """
        local_point = (point - self.start).rotate(-self.angle)
        local_diagonal = self._local_diagonal()
        return all(
            min(0.0, side) - EPSILON <= offset <= max(0.0, side) + EPSILON
            for offset, side in zip(local_point, local_diagonal, strict=True)
        )

    def tag_properties(self) -> dict[str, str]:
        local = self._local_diagonal()
        props = {
            "x": format_number(self.start.x + min(0.0, local.x)),
            "y": format_number(self.start.y + min(0.0, local.y)),
            "width": format_number(abs(local.x)),
            "height": format_number(abs(local.y)),
            "style": f"fill:{self.fill};stroke:{self.stroke_color};stroke_width:{self.stroke_width};",
        }
        if self.angle:
            props["transform"] = _rotation_transform(self.angle, self.start)
        return props


@dataclass
class Text(Drawable):
    """A run of text anchored at a position.

    Text is never hit by :meth:`contains` and ignores scaling; ``angle`` only
    affects how the text is rendered.

    Attributes:
        text: The text content.
        pos: Anchor position.
        angle: Accumulated rotation in radians.
        fill: Colour of the glyphs.
    """

    drawable_type: ClassVar[DrawableType] = DrawableType.TEXT

    text: str
    pos: Vector2
    angle: float = 0.0
    fill: Color = field(default=BLACK)

    def __post_init__(self) -> None:
        """Take a private copy of the anchor."""
        self.pos = self.pos.copy()

    def translate(self, offset: Vector2) -> Self:
        self.pos.translate(offset)
        return self

    def rotate(self, angle: float) -> Self:
        self.angle += angle
        return self

    def scale(self, c: float) -> Self:  # noqa: ARG002
        return self

    def contains(self, point: Vector2) -> bool:  # noqa: ARG002
        return False

    def tag_properties(self) -> dict[str, str]:
        props = {"x": format_number(self.pos.x), "y": format_number(self.pos.y)}
        if self.angle:
            props["transform"] = _rotation_transform(self.angle, self.pos)
        return props

    def inner_content(self) -> str:
        return self.text
