"""Two-dimensional vector algebra shared by every drawable."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = structlog.get_logger(__name__)

EPSILON = 1e-9
"""Absolute tolerance used for vector equality and collinearity checks."""


def effective_scale(c: float) -> float:
    """Return the factor actually applied for a requested scale of ``c``.

    A factor of zero would collapse the geometry to a point, so it is treated
    as an invalid request and replaced with ``1``.

    Args:
        c: The requested scale factor.

    Returns:
        ``c`` unchanged, or ``1.0`` when ``c`` is zero.
    """
    if c == 0:
        logger.debug("Zero scale factor replaced with 1")
        return 1.0
    return c


class Vector2:
    """A vector in 2D cartesian space with cached magnitude and angle.

    ``len`` and ``arg`` are recomputed together every time ``x`` or ``y``
    change, so they always describe the current components. ``arg`` is the
    angle from the positive x-axis in radians, in the range ``(-pi, pi]``.

    Equality is approximate: two vectors compare equal when both components
    differ by at most :data:`EPSILON`. The comparison is not transitive.

    Example:
        >>> v = Vector2(1.0, 1.0)
        >>> v.rotate(math.pi / 4) == (0.0, math.sqrt(2))
        True
    """

    __slots__ = ("_arg", "_len", "_x", "_y")

    def __init__(self, x: float, y: float) -> None:
        """Initialize the vector from its components.

        Args:
            x: X component.
            y: Y component.
        """
        self._set(x, y)

    def _set(self, x: float, y: float) -> None:
        self._x = float(x)
        self._y = float(y)
        self._len = math.hypot(self._x, self._y)
        self._arg = math.atan2(self._y, self._x)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def len(self) -> float:
        """Magnitude of the vector."""
        return self._len

    @property
    def arg(self) -> float:
        """Angle from the positive x-axis in radians."""
        return self._arg

    def dot(self, other: Vector2) -> float:
        """Calculate the dot product with another vector."""
        return self._x * other._x + self._y * other._y

    def cross(self, other: Vector2) -> float:
        """Calculate the z component of the cross product with another vector."""
        return self._x * other._y - self._y * other._x

    def translate(self, offset: Vector2) -> Vector2:
        """Shift the vector by ``offset`` in place.

        Returns:
            This vector, to allow chaining.
        """
        self._set(self._x + offset._x, self._y + offset._y)
        return self

    def rotate(self, angle: float) -> Vector2:
        """Rotate the vector about the origin by ``angle`` radians in place.

        Returns:
            This vector, to allow chaining.
        """
        if angle == 0:
            return self
        arg = self._arg + angle
        self._set(self._len * math.cos(arg), self._len * math.sin(arg))
        return self

    def scale(self, c: float) -> Vector2:
        """Multiply the vector by ``c`` in place.

        A factor of zero is ignored (see :func:`effective_scale`).

        Returns:
            This vector, to allow chaining.
        """
        c = effective_scale(c)
        self._set(self._x * c, self._y * c)
        return self

    def copy(self) -> Vector2:
        """Return an independent vector with the same components."""
        return Vector2(self._x, self._y)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self._x + other._x, self._y + other._y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self._x - other._x, self._y - other._y)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Vector2):
            ox, oy = other._x, other._y
        elif isinstance(other, tuple) and len(other) == 2:
            ox, oy = other
        else:
            return NotImplemented
        return abs(self._x - ox) <= EPSILON and abs(self._y - oy) <= EPSILON

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y

    def __repr__(self) -> str:
        return f"Vector2(x={self._x!r}, y={self._y!r})"

    def __str__(self) -> str:
        return f"({self._x}, {self._y})"
