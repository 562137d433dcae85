"""
Interaction strategies for crop mode.

This package implements the Strategy pattern for the two crop gestures
(dragging the whole region and resizing from a corner handle).
"""

from .abstract import InteractionStrategy
from .pan_strategy import PanStrategy
from .resize_strategy import ResizeStrategy

__all__ = [
    "InteractionStrategy",
    "PanStrategy",
    "ResizeStrategy",
]
