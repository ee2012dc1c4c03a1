"""Text-layer stripping engines"""

from typing import Any

from .base import TextLayerStripper
from .ghostscript import GhostscriptStripper, default_executable

__all__ = ["TextLayerStripper", "GhostscriptStripper", "default_executable", "build_stripper"]


def build_stripper(settings: Any) -> TextLayerStripper:
    """Create the configured engine from a settings object"""
    return GhostscriptStripper(
        executable=settings.ghostscript_executable,
        timeout=settings.engine_timeout,
    )
