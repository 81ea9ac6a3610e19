"""Colour values used for strokes and fills."""

from __future__ import annotations

import re
from dataclasses import dataclass

from svgcanvas_py.core.markup import format_number
from svgcanvas_py.exceptions import InvalidStyleError

_RGBA_PATTERN = re.compile(
    r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([0-9]*\.?[0-9]+)\s*)?\)$",
)


@dataclass(frozen=True)
class Color:
    """An RGBA colour.

    Attributes:
        r: Red channel, 0-255.
        g: Green channel, 0-255.
        b: Blue channel, 0-255.
        a: Alpha from 0.0 (transparent) to 1.0 (opaque).
    """

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        """Validate channel ranges."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                msg = f"Colour channel {name} must be an integer in 0..255, got {value!r}"
                raise InvalidStyleError(msg)
        if not 0.0 <= self.a <= 1.0:
            msg = f"Alpha must be in 0.0..1.0, got {self.a!r}"
            raise InvalidStyleError(msg)

    @classmethod
    def from_hex(cls, value: int, alpha: float = 1.0) -> Color:
        """Create a colour from a ``0xRRGGBB`` number.

        Args:
            value: The packed RGB value.
            alpha: Alpha channel for the new colour.

        Returns:
            The decoded colour.
        """
        if not 0 <= value <= 0xFFFFFF:
            msg = f"Hex colour must be in 0x000000..0xFFFFFF, got {value:#x}"
            raise InvalidStyleError(msg)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha)

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse ``#rrggbb``, ``#rrggbbaa`` or ``rgba(r, g, b, a)`` notation.

        Raises:
            InvalidStyleError: If the text is not a recognised colour.
        """
        text = text.strip()
        if text.startswith("#"):
            digits = text[1:]
            try:
                if len(digits) == 6:
                    return cls.from_hex(int(digits, 16))
                if len(digits) == 8:
                    return cls.from_hex(int(digits[:6], 16), int(digits[6:], 16) / 255)
            except ValueError:
                pass
        else:
            match = _RGBA_PATTERN.match(text)
            if match:
                r, g, b, a = match.groups()
                return cls(int(r), int(g), int(b), float(a) if a is not None else 1.0)
        msg = f"Unrecognised colour: {text!r}"
        raise InvalidStyleError(msg)

    def __str__(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {format_number(self.a)})"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
TRANSPARENT = Color(0, 0, 0, 0.0)
