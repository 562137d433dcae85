"""
Crop-related enumerations and small helpers.

This module contains pure data types that support the crop interaction without
any dependency on Qt event handling.
"""

from __future__ import annotations

import enum

from PySide6.QtCore import Qt

from ..errors import InvalidHandleError


class CropHandle(enum.Enum):
    """Targets a pointer press can resolve to on the crop overlay."""

    NONE = "none"
    INSIDE = "inside"
    TOP_LEFT = "nw"
    TOP_RIGHT = "ne"
    BOTTOM_LEFT = "sw"
    BOTTOM_RIGHT = "se"

    @property
    def is_corner(self) -> bool:
        return self in CORNER_HANDLES

    @classmethod
    def parse(cls, value: CropHandle | str) -> CropHandle:
        """Return the corner handle named by *value*.

        Accepts either a :class:`CropHandle` member or one of the compass
        identifiers ``"nw"``, ``"ne"``, ``"sw"`` and ``"se"``.
        """
        if isinstance(value, CropHandle):
            handle = value
        else:
            try:
                handle = cls(str(value).strip().lower())
            except ValueError:
                raise InvalidHandleError(f"Unknown crop handle: {value!r}") from None
        if not handle.is_corner:
            raise InvalidHandleError(f"Not a resize handle: {handle.value!r}")
        return handle


CORNER_HANDLES: tuple[CropHandle, ...] = (
    CropHandle.TOP_LEFT,
    CropHandle.TOP_RIGHT,
    CropHandle.BOTTOM_LEFT,
    CropHandle.BOTTOM_RIGHT,
)


class InteractionMode(enum.Enum):
    """Gesture state of the crop overlay."""

    IDLE = "idle"
    DRAGGING = "dragging"
    RESIZING = "resizing"


def cursor_for_handle(handle: CropHandle) -> Qt.CursorShape:
    """Return the appropriate cursor shape for a given crop handle."""
    return {
        CropHandle.TOP_LEFT: Qt.CursorShape.SizeFDiagCursor,
        CropHandle.BOTTOM_RIGHT: Qt.CursorShape.SizeFDiagCursor,
        CropHandle.TOP_RIGHT: Qt.CursorShape.SizeBDiagCursor,
        CropHandle.BOTTOM_LEFT: Qt.CursorShape.SizeBDiagCursor,
        CropHandle.INSIDE: Qt.CursorShape.OpenHandCursor,
    }.get(handle, Qt.CursorShape.ArrowCursor)
