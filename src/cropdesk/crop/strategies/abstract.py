"""
Abstract base class for crop interaction strategies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from PySide6.QtCore import QPointF

from ..mapper import CoordinateMapper


class InteractionStrategy(ABC):
    """Base class for crop interaction strategies (pan, resize)."""

    @property
    @abstractmethod
    def anchor(self) -> QPointF:
        """Display-space anchor captured when the gesture started."""

    @abstractmethod
    def on_drag(self, pos: QPointF, mapper: CoordinateMapper) -> None:
        """Handle pointer movement.

        Parameters
        ----------
        pos:
            Current pointer position, relative to the display surface.
        mapper:
            Mapper built from the display and image sizes at this event.
        """

    @abstractmethod
    def on_end(self) -> None:
        """Handle end of interaction (pointer release)."""
