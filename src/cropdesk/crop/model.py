"""
Crop region model.

The crop rectangle is stored in native image pixels.  This module manages the
rectangle and its invariants without any UI interaction.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from ..config import INITIAL_CROP_FRACTION, MIN_CROP_SIZE_PX
from .resize_policy import Rect, rule_for_handle
from .utils import CropHandle


class CropRegion:
    """Crop rectangle ``(x, y, width, height)`` in native image pixels."""

    def __init__(self) -> None:
        self.x: float = 0.0
        self.y: float = 0.0
        self.width: float = 0.0
        self.height: float = 0.0

    def __repr__(self) -> str:
        return f"CropRegion(x={self.x}, y={self.y}, width={self.width}, height={self.height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CropRegion):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def as_tuple(self) -> Rect:
        return (self.x, self.y, self.width, self.height)

    def as_mapping(self) -> dict[str, float]:
        """Export the region as a mapping suitable for persistence."""
        return {
            "x": float(self.x),
            "y": float(self.y),
            "width": float(self.width),
            "height": float(self.height),
        }

    def set_from_mapping(
        self, values: Mapping[str, float], image_width: float, image_height: float
    ) -> None:
        """Load the region from *values* and clamp it to the image."""
        self.x = float(values.get("x", 0.0))
        self.y = float(values.get("y", 0.0))
        self.width = float(values.get("width", image_width))
        self.height = float(values.get("height", image_height))
        self.clamp(image_width, image_height)

    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0

    def to_pixel_box(self) -> tuple[int, int, int, int]:
        """Return ``(left, top, right, bottom)`` rounded to whole pixels."""
        left = int(round(self.x))
        top = int(round(self.y))
        return (
            left,
            top,
            max(left, int(round(self.x + self.width))),
            max(top, int(round(self.y + self.height))),
        )

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def snapshot(self) -> Rect:
        """Return a tuple describing the current crop rectangle."""
        return self.as_tuple()

    def restore(self, snapshot: Rect) -> None:
        self.x, self.y, self.width, self.height = snapshot

    def has_changed(self, snapshot: Rect) -> bool:
        """Return True when the current rectangle differs from *snapshot*."""
        return any(abs(a - b) > 1e-6 for a, b in zip(snapshot, self.as_tuple(), strict=True))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def init_centered(self, image_width: int, image_height: int) -> None:
        """Cover the central 80% of each axis, rounded down to whole pixels."""
        self.width = math.floor(image_width * INITIAL_CROP_FRACTION)
        self.height = math.floor(image_height * INITIAL_CROP_FRACTION)
        self.x = math.floor((image_width - self.width) / 2)
        self.y = math.floor((image_height - self.height) / 2)

    def translate(self, dx: float, dy: float, image_width: float, image_height: float) -> None:
        """Move the rectangle by ``(dx, dy)`` without leaving the image."""
        self.x = max(0.0, min(self.x + dx, image_width - self.width))
        self.y = max(0.0, min(self.y + dy, image_height - self.height))

    def resize_from_handle(
        self,
        handle: CropHandle | str,
        dx: float,
        dy: float,
        image_width: float,
        image_height: float,
    ) -> None:
        """Drag the corner *handle* by ``(dx, dy)``; the opposite corner stays put."""
        rule = rule_for_handle(handle)
        self.x, self.y, self.width, self.height = rule(
            self.as_tuple(), dx, dy, (image_width, image_height)
        )

    def reset(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.width = 0.0
        self.height = 0.0

    def reset_to_full(self, image_width: float, image_height: float) -> None:
        """Reset crop to the full image."""
        self.x = 0.0
        self.y = 0.0
        self.width = image_width
        self.height = image_height

    def clamp(self, image_width: float, image_height: float) -> None:
        """Ensure the region satisfies the size and bounds invariants."""
        min_w = min(MIN_CROP_SIZE_PX, image_width)
        min_h = min(MIN_CROP_SIZE_PX, image_height)
        self.width = max(min_w, min(image_width, self.width))
        self.height = max(min_h, min(image_height, self.height))
        self.x = max(0.0, min(image_width - self.width, self.x))
        self.y = max(0.0, min(image_height - self.height, self.y))
