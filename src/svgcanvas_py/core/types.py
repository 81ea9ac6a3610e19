"""Core type definitions for svgcanvas-py."""

from __future__ import annotations

from enum import StrEnum


class DrawableType(StrEnum):
    """Enumeration of drawable types a canvas can hold."""

    LINE = "line"
    CIRCLE = "circle"
    RECT = "rect"
    TEXT = "text"
