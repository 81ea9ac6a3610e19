"""Shared SVG serialization for drawables.

Every drawable describes itself through a tag name, an ordered mapping of
attributes and optional inner content. :func:`compose_tag` turns that
description into a single markup fragment, so no drawable renders its own tag.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Self

if TYPE_CHECKING:
    from collections.abc import Mapping

    from svgcanvas_py.core.types import DrawableType
    from svgcanvas_py.core.vector import Vector2


def format_number(value: float) -> str:
    """Format a number for markup output.

    Values are rounded to nine decimal places to hide floating point noise
    left by rotations. Integral values are written without a fractional part
    (``960`` rather than ``960.0``); everything else uses the shortest
    round-trip form.
    """
    value = round(float(value), 9)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def escape_xml(text: str) -> str:
    """Escape special XML characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def compose_tag(name: str, properties: Mapping[str, str], inner_content: str | None = None) -> str:
    """Build one markup fragment.

    Args:
        name: Tag name, e.g. ``"line"``.
        properties: Attribute names mapped to their (unescaped) values, in output order.
        inner_content: Text placed between opening and closing tags. When
            ``None`` the tag is self-closing.

    Returns:
        The serialized fragment.
    """
    attrs = "".join(f' {key}="{escape_xml(value)}"' for key, value in properties.items())
    if inner_content is None:
        return f"<{name}{attrs}/>"
    return f"<{name}{attrs}>{escape_xml(inner_content)}</{name}>"


class Drawable(ABC):
    """Capability contract shared by every shape a canvas can hold.

    Transformations mutate the drawable in place and return it, so calls can
    be chained: ``line.translate(offset).rotate(angle)``.
    """

    drawable_type: ClassVar[DrawableType]

    @abstractmethod
    def translate(self, offset: Vector2) -> Self:
        """Shift the drawable by ``offset``."""

    @abstractmethod
    def rotate(self, angle: float) -> Self:
        """Rotate the drawable by ``angle`` radians."""

    @abstractmethod
    def scale(self, c: float) -> Self:
        """Scale the drawable by factor ``c``."""

    @abstractmethod
    def contains(self, point: Vector2) -> bool:
        """Return whether ``point`` hits the drawable."""

    def tag_name(self) -> str:
        return str(self.drawable_type)

    @abstractmethod
    def tag_properties(self) -> dict[str, str]:
        """Return SVG attribute names mapped to their values."""

    def inner_content(self) -> str | None:
        return None

    def to_svg(self) -> str:
        """Serialize the drawable into a single SVG fragment."""
        return compose_tag(self.tag_name(), self.tag_properties(), self.inner_content())
