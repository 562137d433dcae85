"""
Resize strategy for crop box corner dragging.
"""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QPointF

from ..mapper import CoordinateMapper
from ..model import CropRegion
from ..utils import CropHandle
from .abstract import InteractionStrategy


class ResizeStrategy(InteractionStrategy):
    """Strategy for resizing the crop box via corner dragging.

    Deltas are incremental: every move is measured from the previous pointer
    sample, and the anchor then advances to the current position.
    """

    def __init__(
        self,
        *,
        handle: CropHandle,
        region: CropRegion,
        press_pos: QPointF,
        on_crop_changed: Callable[[], None],
    ) -> None:
        """Initialize resize strategy.

        Parameters
        ----------
        handle:
            The corner handle being dragged.
        region:
            Crop region being resized.
        press_pos:
            Pointer position at press, in display space.
        on_crop_changed:
            Callback when the region changes.
        """
        self._handle = CropHandle.parse(handle)
        self._region = region
        self._anchor = QPointF(press_pos)
        self._on_crop_changed = on_crop_changed

    @property
    def handle(self) -> CropHandle:
        return self._handle

    @property
    def anchor(self) -> QPointF:
        return QPointF(self._anchor)

    def on_drag(self, pos: QPointF, mapper: CoordinateMapper) -> None:
        """Handle resize drag movement."""
        delta = mapper.map_delta(QPointF(pos.x() - self._anchor.x(), pos.y() - self._anchor.y()))
        image_w, image_h = mapper.native_size

        snapshot = self._region.snapshot()
        self._region.resize_from_handle(self._handle, delta.x(), delta.y(), image_w, image_h)
        self._anchor = QPointF(pos)
        if self._region.has_changed(snapshot):
            self._on_crop_changed()

    def on_end(self) -> None:
        """Handle end of resize interaction."""
        # No special cleanup needed
