"""
Hit testing logic for crop handles.

This module contains pure geometric functions for detecting which crop handle
(if any) is under a given point, with no dependencies on Qt events or UI state.
"""

from __future__ import annotations

import math

from PySide6.QtCore import QPointF

from ..config import HANDLE_HIT_PADDING
from .utils import CropHandle


class HitTester:
    """Pure-function hit tester for the crop box and its corner handles."""

    def __init__(self, hit_padding: float = HANDLE_HIT_PADDING) -> None:
        """Initialize hit tester.

        Parameters
        ----------
        hit_padding:
            Distance threshold for detecting corner hits, in display pixels.
        """
        self._hit_padding = float(hit_padding)

    def test(self, point: QPointF, top_left: QPointF, bottom_right: QPointF) -> CropHandle:
        """Determine which part of the crop box (if any) is under the pointer.

        Corner handles sit on top of the region body, so they are checked
        first and win whenever both would match.

        Parameters
        ----------
        point:
            The point to test in display coordinates.
        top_left, bottom_right:
            Opposite corners of the crop box in display coordinates.

        Returns
        -------
        CropHandle:
            The handle that was hit, ``CropHandle.INSIDE`` for the body, or
            ``CropHandle.NONE`` when the point is outside the box.
        """
        left, top = top_left.x(), top_left.y()
        right, bottom = bottom_right.x(), bottom_right.y()
        corners = [
            (CropHandle.TOP_LEFT, left, top),
            (CropHandle.TOP_RIGHT, right, top),
            (CropHandle.BOTTOM_RIGHT, right, bottom),
            (CropHandle.BOTTOM_LEFT, left, bottom),
        ]
        best = CropHandle.NONE
        best_distance = self._hit_padding
        for handle, cx, cy in corners:
            distance = math.hypot(point.x() - cx, point.y() - cy)
            if distance <= best_distance:
                best = handle
                best_distance = distance
        if best != CropHandle.NONE:
            return best

        if left <= point.x() <= right and top <= point.y() <= bottom:
            return CropHandle.INSIDE

        return CropHandle.NONE
