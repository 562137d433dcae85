"""
Pan/move strategy for crop box interaction.
"""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QPointF

from ..mapper import CoordinateMapper
from ..model import CropRegion
from .abstract import InteractionStrategy


class PanStrategy(InteractionStrategy):
    """Strategy for moving the entire crop box."""

    def __init__(
        self,
        *,
        region: CropRegion,
        press_pos: QPointF,
        region_origin: QPointF,
        on_crop_changed: Callable[[], None],
    ) -> None:
        """Initialize pan strategy.

        Parameters
        ----------
        region:
            Crop region being moved.
        press_pos:
            Pointer position at press, in display space.
        region_origin:
            Top-left corner of the region at press, in display space.
        on_crop_changed:
            Callback when the region moves.
        """
        self._region = region
        # Offset from the region's corner to the pointer; constant for the
        # whole gesture so the region does not jump on the first move.
        self._anchor = QPointF(press_pos.x() - region_origin.x(), press_pos.y() - region_origin.y())
        self._on_crop_changed = on_crop_changed

    @property
    def anchor(self) -> QPointF:
        return QPointF(self._anchor)

    def on_drag(self, pos: QPointF, mapper: CoordinateMapper) -> None:
        """Handle pan drag movement."""
        pointer = mapper.map_point(pos)
        offset = mapper.map_point(self._anchor)
        image_w, image_h = mapper.native_size

        snapshot = self._region.snapshot()
        self._region.translate(
            pointer.x() - offset.x() - self._region.x,
            pointer.y() - offset.y() - self._region.y,
            image_w,
            image_h,
        )
        if self._region.has_changed(snapshot):
            self._on_crop_changed()

    def on_end(self) -> None:
        """Handle end of pan interaction."""
        # No special cleanup needed
