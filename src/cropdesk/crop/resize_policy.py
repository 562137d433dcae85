"""
Per-corner resize rules for the crop rectangle.

Each rule is a pure function ``(rect, dx, dy, bounds) -> rect`` working in
native image pixels.  A rule moves the two edges that meet at its corner and
pins the other two, so the opposite corner never moves.  Growth stops at the
image border and shrinking stops at the minimum crop size.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from ..config import MIN_CROP_SIZE_PX
from .utils import CropHandle

Rect = tuple[float, float, float, float]
ResizeRule = Callable[[Rect, float, float, tuple[float, float]], Rect]


def _min_extent(image_extent: float) -> float:
    # Images smaller than the minimum can only be cropped to their own extent.
    return float(min(MIN_CROP_SIZE_PX, image_extent))


def _move_near_edge(start: float, length: float, delta: float, min_len: float) -> tuple[float, float]:
    """Move the left/top edge by *delta* with the far edge pinned."""
    far = start + length
    new_start = max(0.0, min(start + delta, far - min_len))
    return new_start, far - new_start


def _move_far_edge(
    start: float, length: float, delta: float, limit: float, min_len: float
) -> float:
    """Return the new length after moving the right/bottom edge by *delta*."""
    return max(min_len, min(limit - start, length + delta))


def resize_top_left(rect: Rect, dx: float, dy: float, bounds: tuple[float, float]) -> Rect:
    x, y, width, height = rect
    image_w, image_h = bounds
    new_x, new_w = _move_near_edge(x, width, dx, _min_extent(image_w))
    new_y, new_h = _move_near_edge(y, height, dy, _min_extent(image_h))
    return (new_x, new_y, new_w, new_h)


def resize_top_right(rect: Rect, dx: float, dy: float, bounds: tuple[float, float]) -> Rect:
    x, y, width, height = rect
    image_w, image_h = bounds
    new_w = _move_far_edge(x, width, dx, image_w, _min_extent(image_w))
    new_y, new_h = _move_near_edge(y, height, dy, _min_extent(image_h))
    return (x, new_y, new_w, new_h)


def resize_bottom_left(rect: Rect, dx: float, dy: float, bounds: tuple[float, float]) -> Rect:
    x, y, width, height = rect
    image_w, image_h = bounds
    new_x, new_w = _move_near_edge(x, width, dx, _min_extent(image_w))
    new_h = _move_far_edge(y, height, dy, image_h, _min_extent(image_h))
    return (new_x, y, new_w, new_h)


def resize_bottom_right(rect: Rect, dx: float, dy: float, bounds: tuple[float, float]) -> Rect:
    x, y, width, height = rect
    image_w, image_h = bounds
    new_w = _move_far_edge(x, width, dx, image_w, _min_extent(image_w))
    new_h = _move_far_edge(y, height, dy, image_h, _min_extent(image_h))
    return (x, y, new_w, new_h)


RESIZE_RULES: Mapping[CropHandle, ResizeRule] = MappingProxyType(
    {
        CropHandle.TOP_LEFT: resize_top_left,
        CropHandle.TOP_RIGHT: resize_top_right,
        CropHandle.BOTTOM_LEFT: resize_bottom_left,
        CropHandle.BOTTOM_RIGHT: resize_bottom_right,
    }
)


def rule_for_handle(handle: CropHandle | str) -> ResizeRule:
    """Return the resize rule for *handle*, raising ``InvalidHandleError`` if unknown."""
    return RESIZE_RULES[CropHandle.parse(handle)]
