"""
Conversion between display space and native image-pixel space.

Display space is the coordinate system of the rendered surface, relative to
its top-left corner.  Native space is the pixel grid of the loaded image.
"""

from __future__ import annotations

import math

from PySide6.QtCore import QPointF

from ..errors import MissingSurfaceContextError


class CoordinateMapper:
    """Scale pointer coordinates from the display surface onto the image grid.

    A mapper is a snapshot of one ``(display size, native size)`` pair.  The
    rendered size can change between two events, so callers build a fresh
    mapper for every event instead of keeping one around.
    """

    def __init__(
        self,
        display_size: tuple[float, float],
        native_size: tuple[float, float],
    ) -> None:
        self._display_w = float(display_size[0])
        self._display_h = float(display_size[1])
        self._native_w = float(native_size[0])
        self._native_h = float(native_size[1])

    @property
    def native_size(self) -> tuple[float, float]:
        return (self._native_w, self._native_h)

    def is_valid(self) -> bool:
        """Return True when both sizes are positive and finite."""
        return all(
            math.isfinite(value) and value > 0.0
            for value in (self._display_w, self._display_h, self._native_w, self._native_h)
        )

    def scale(self) -> tuple[float, float]:
        """Return ``(scale_x, scale_y)`` as native pixels per display unit."""
        self._require_valid()
        return (self._native_w / self._display_w, self._native_h / self._display_h)

    def map_point(self, pos: QPointF) -> QPointF:
        """Map a surface-relative display position into native pixels."""
        scale_x, scale_y = self.scale()
        return QPointF(float(pos.x()) * scale_x, float(pos.y()) * scale_y)

    def map_delta(self, delta: QPointF) -> QPointF:
        """Map a display-space displacement into native pixels."""
        return self.map_point(delta)

    def map_to_display(self, x: float, y: float) -> QPointF:
        """Map a native pixel position back onto the display surface."""
        scale_x, scale_y = self.scale()
        return QPointF(float(x) / scale_x, float(y) / scale_y)

    @staticmethod
    def relative_to_surface(pos: QPointF, surface_origin: QPointF) -> QPointF:
        """Convert a raw pointer position into one relative to the surface's top-left."""
        return QPointF(pos.x() - surface_origin.x(), pos.y() - surface_origin.y())

    def _require_valid(self) -> None:
        if not self.is_valid():
            raise MissingSurfaceContextError(
                "Cannot map coordinates: display "
                f"{self._display_w}x{self._display_h}, image {self._native_w}x{self._native_h}"
            )
