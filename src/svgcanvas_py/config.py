"""Configuration for svgcanvas-py."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class CanvasConfig:
    """Settings used when creating canvases and configuring logging.

    Attributes:
        width: Default canvas width in pixels.
        height: Default canvas height in pixels.
        debug: Enable debug level logging.
        json_logs: Output logs as JSON instead of coloured console lines.

    Example:
        >>> config = CanvasConfig(width=1200, height=800)
        >>> canvas = Canvas.from_config(config)
    """

    width: int = 1920
    height: int = 1080
    debug: bool = False
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> CanvasConfig:
        """Build a configuration from ``SVGCANVAS_*`` environment variables.

        Reads ``SVGCANVAS_WIDTH``, ``SVGCANVAS_HEIGHT``, ``SVGCANVAS_DEBUG`` and
        ``SVGCANVAS_JSON_LOGS``; unset variables keep their defaults.

        Raises:
            ValueError: If a size variable is not an integer.
        """
        defaults = cls()
        return cls(
            width=int(os.environ.get("SVGCANVAS_WIDTH", defaults.width)),
            height=int(os.environ.get("SVGCANVAS_HEIGHT", defaults.height)),
            debug=_env_flag("SVGCANVAS_DEBUG", defaults.debug),
            json_logs=_env_flag("SVGCANVAS_JSON_LOGS", defaults.json_logs),
        )
