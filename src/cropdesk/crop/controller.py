"""
Crop interaction controller.

This module acts as the orchestrator of a crop session: it owns the crop
region and the gesture mode, resolves presses through the hit tester, and
delegates pointer movement to the pan and resize strategies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QMouseEvent

from ..config import HANDLE_HIT_PADDING
from ..errors import (
    CropDeskError,
    CropNotStartedError,
    ExportFailureError,
    InvalidHandleError,
    MissingImageError,
)
from .exporter import CropExporter
from .hit_tester import HitTester
from .mapper import CoordinateMapper
from .model import CropRegion
from .resize_policy import Rect
from .strategies import InteractionStrategy, PanStrategy, ResizeStrategy
from .utils import CropHandle, InteractionMode, cursor_for_handle

_LOGGER = logging.getLogger(__name__)


class CropInteractionController:
    """Manages the crop session state machine ``IDLE -> DRAGGING | RESIZING -> IDLE``."""

    def __init__(
        self,
        *,
        image_size_provider: Callable[[], tuple[int, int]],
        surface_size_provider: Callable[[], tuple[float, float]],
        exporter: CropExporter | None = None,
        on_crop_changed: Callable[[float, float, float, float], None] | None = None,
        on_mode_changed: Callable[[InteractionMode, CropHandle | None], None] | None = None,
        on_cursor_change: Callable[[Qt.CursorShape | None], None] | None = None,
        on_crop_committed: Callable[[object], None] | None = None,
        hit_padding: float = HANDLE_HIT_PADDING,
    ) -> None:
        """Initialize the crop interaction controller.

        Parameters
        ----------
        image_size_provider:
            Callable that returns the native (width, height) of the loaded
            image, or zeros when no image is loaded.
        surface_size_provider:
            Callable that returns the rendered (width, height) of the display
            surface.
        exporter:
            Collaborator that stores the cropped pixels on apply.
        on_crop_changed:
            Callback when the region changes, signature: (x, y, width, height).
        on_mode_changed:
            Callback when the gesture mode changes, signature: (mode, handle or None).
        on_cursor_change:
            Callback to change cursor, signature: (cursor_shape or None to unset).
        on_crop_committed:
            Callback fired once per successful apply with the asset location.
        hit_padding:
            Corner handle grab radius in display pixels.
        """
        self._image_size_provider = image_size_provider
        self._surface_size_provider = surface_size_provider
        self._exporter = exporter
        self._on_crop_changed_callback = on_crop_changed
        self._on_mode_changed = on_mode_changed
        self._on_cursor_change = on_cursor_change
        self._on_crop_committed = on_crop_committed

        self._region = CropRegion()
        self._hit_tester = HitTester(hit_padding=hit_padding)

        self._cropping: bool = False
        self._has_cropped_image: bool = False
        self._mode = InteractionMode.IDLE
        self._resize_handle = CropHandle.NONE
        self._current_strategy: InteractionStrategy | None = None

    # ------------------------------------------------------------------
    # Public state
    # ------------------------------------------------------------------
    @property
    def mode(self) -> InteractionMode:
        return self._mode

    @property
    def resize_handle(self) -> CropHandle | None:
        """Handle being dragged while resizing, otherwise None."""
        if self._mode is InteractionMode.RESIZING:
            return self._resize_handle
        return None

    @property
    def drag_anchor(self) -> QPointF | None:
        """Display-space anchor of the current gesture, if any."""
        if self._current_strategy is None:
            return None
        return self._current_strategy.anchor

    def is_cropping(self) -> bool:
        """Return True while a crop session is active."""
        return self._cropping

    def has_cropped_image(self) -> bool:
        """Return True once a crop has been applied and not reset since."""
        return self._has_cropped_image

    def get_crop_region(self) -> CropRegion:
        """Return the current crop region object."""
        return self._region

    def crop_rect(self) -> Rect:
        """Return the current crop rectangle as ``(x, y, width, height)``."""
        return self._region.as_tuple()

    def get_crop_values(self) -> dict[str, float]:
        """Return the current crop region as a mapping."""
        return self._region.as_mapping()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def start_cropping(self) -> None:
        """Begin a crop session with the centred default region."""
        image_w, image_h = self._require_image("start cropping")
        self._end_gesture()
        self._region.init_centered(image_w, image_h)
        self._cropping = True
        _LOGGER.info("Crop session started on %dx%d image: %s", image_w, image_h, self._region)
        self._emit_crop_changed()

    def set_crop_values(self, values: Mapping[str, float]) -> None:
        """Restore a previously saved region, clamped to the current image."""
        image_w, image_h = self._require_image("restore crop values")
        snapshot = self._region.snapshot()
        self._region.set_from_mapping(values, image_w, image_h)
        if self._region.has_changed(snapshot):
            self._emit_crop_changed()

    def apply_crop(self) -> object:
        """Export the current region and close the crop session.

        Returns the location reported by the exporter.  On failure an error
        derived from :class:`CropDeskError` is raised and no state changes.
        """
        self._require_image("apply crop")
        if self._region.is_empty():
            _LOGGER.warning("Cannot apply crop: no crop region has been set up")
            raise CropNotStartedError("No crop region to apply")
        if self._exporter is None:
            _LOGGER.error("Cannot apply crop: no exporter configured")
            raise ExportFailureError("No exporter configured")

        box = self._region.to_pixel_box()
        try:
            location = self._exporter.export(box)
        except CropDeskError:
            _LOGGER.error("Export of crop %s failed", box)
            raise
        except Exception as exc:
            _LOGGER.error("Export of crop %s failed: %s", box, exc)
            raise ExportFailureError(str(exc)) from exc

        self._end_gesture()
        self._cropping = False
        self._has_cropped_image = True
        _LOGGER.info("Crop applied: %s -> %s", box, location)
        if self._on_crop_committed is not None:
            self._on_crop_committed(location)
        return location

    def cancel_crop(self) -> None:
        """Abort the session and show the full image, whatever gesture is running."""
        self._end_gesture()
        self._cropping = False
        image_w, image_h = self._image_size_provider()
        if image_w <= 0 or image_h <= 0:
            return
        snapshot = self._region.snapshot()
        self._region.reset_to_full(image_w, image_h)
        _LOGGER.info("Crop cancelled")
        if self._region.has_changed(snapshot):
            self._emit_crop_changed()

    def reset_crop(self) -> None:
        """Clear the region and forget any applied crop."""
        self._end_gesture()
        self._cropping = False
        self._has_cropped_image = False
        snapshot = self._region.snapshot()
        self._region.reset()
        if self._region.has_changed(snapshot):
            self._emit_crop_changed()

    # ------------------------------------------------------------------
    # Pointer entry points
    # ------------------------------------------------------------------
    def handle_pointer_down(self, pos: QPointF, target: CropHandle | str | None = None) -> bool:
        """Start a drag or resize gesture.

        *target* is what the UI layer reports under the pointer; when omitted
        it is resolved by hit testing.  Returns True when the press started a
        gesture, in which case the caller should suppress the platform's
        default handling of the event.
        """
        handle = self._parse_target(target) if target is not None else None
        if not self._cropping:
            return False
        if self._mode is not InteractionMode.IDLE:
            _LOGGER.debug("Ignoring press while %s", self._mode.value)
            return False

        mapper = self._build_mapper()
        if not mapper.is_valid():
            _LOGGER.debug("Ignoring press: no valid surface context")
            return False

        if handle is None:
            handle = self._hit_test(pos, mapper)
        if handle == CropHandle.NONE:
            self._set_cursor(Qt.CursorShape.ArrowCursor)
            return False

        if handle == CropHandle.INSIDE:
            self._current_strategy = PanStrategy(
                region=self._region,
                press_pos=pos,
                region_origin=mapper.map_to_display(self._region.x, self._region.y),
                on_crop_changed=self._emit_crop_changed,
            )
            self._set_mode(InteractionMode.DRAGGING, CropHandle.NONE)
            self._set_cursor(Qt.CursorShape.ClosedHandCursor)
        else:
            self._current_strategy = ResizeStrategy(
                handle=handle,
                region=self._region,
                press_pos=pos,
                on_crop_changed=self._emit_crop_changed,
            )
            self._set_mode(InteractionMode.RESIZING, handle)
            self._set_cursor(cursor_for_handle(handle))
        return True

    def handle_pointer_move(self, pos: QPointF) -> bool:
        """Feed a pointer sample to the active gesture.

        Returns True when a gesture consumed the sample.
        """
        mapper = self._build_mapper()
        if self._current_strategy is None:
            if self._cropping and mapper.is_valid():
                self._set_cursor(cursor_for_handle(self._hit_test(pos, mapper)))
            return False
        if not mapper.is_valid():
            _LOGGER.debug("Skipping move: no valid surface context")
            return False

        self._current_strategy.on_drag(pos, mapper)
        return True

    def handle_pointer_up(self) -> None:
        """Finish the current gesture, if any."""
        if self._current_strategy is not None:
            self._current_strategy.on_end()
        self._end_gesture()
        self._set_cursor(None)

    # ------------------------------------------------------------------
    # Qt event adapters
    # ------------------------------------------------------------------
    def handle_mouse_press(self, event: QMouseEvent) -> None:
        """Handle mouse press events in crop mode."""
        if self.handle_pointer_down(event.position()):
            event.accept()

    def handle_mouse_move(self, event: QMouseEvent) -> None:
        """Handle mouse move events in crop mode."""
        if self.handle_pointer_move(event.position()):
            event.accept()

    def handle_mouse_release(self, event: QMouseEvent) -> None:
        """Handle mouse release events in crop mode."""
        del event  # unused
        self.handle_pointer_up()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _build_mapper(self) -> CoordinateMapper:
        return CoordinateMapper(self._surface_size_provider(), self._image_size_provider())

    def _require_image(self, action: str) -> tuple[int, int]:
        image_w, image_h = self._image_size_provider()
        if image_w <= 0 or image_h <= 0:
            _LOGGER.warning("Cannot %s: no image loaded", action)
            raise MissingImageError(f"Cannot {action}: no image loaded")
        return image_w, image_h

    @staticmethod
    def _parse_target(target: CropHandle | str) -> CropHandle:
        if isinstance(target, CropHandle):
            return target
        try:
            return CropHandle(str(target).strip().lower())
        except ValueError:
            _LOGGER.warning("Press on unknown crop target %r", target)
            raise InvalidHandleError(f"Unknown crop target: {target!r}") from None

    def _hit_test(self, pos: QPointF, mapper: CoordinateMapper) -> CropHandle:
        """Determine which crop handle (if any) is under the pointer."""
        region = self._region
        if region.is_empty():
            return CropHandle.NONE
        top_left = mapper.map_to_display(region.x, region.y)
        bottom_right = mapper.map_to_display(region.x + region.width, region.y + region.height)
        return self._hit_tester.test(pos, top_left, bottom_right)

    def _end_gesture(self) -> None:
        self._current_strategy = None
        self._set_mode(InteractionMode.IDLE, CropHandle.NONE)

    def _set_mode(self, mode: InteractionMode, handle: CropHandle) -> None:
        if mode is self._mode and handle == self._resize_handle:
            return
        _LOGGER.debug("Crop mode %s -> %s (%s)", self._mode.value, mode.value, handle.value)
        self._mode = mode
        self._resize_handle = handle
        if self._on_mode_changed is not None:
            self._on_mode_changed(mode, self.resize_handle)

    def _set_cursor(self, shape: Qt.CursorShape | None) -> None:
        if self._on_cursor_change is not None:
            self._on_cursor_change(shape)

    def _emit_crop_changed(self) -> None:
        """Emit the crop changed callback."""
        if self._on_crop_changed_callback is None:
            return
        region = self._region
        self._on_crop_changed_callback(
            float(region.x), float(region.y), float(region.width), float(region.height)
        )
