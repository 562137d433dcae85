"""
Crop interaction module.

This package provides the crop-region interaction logic: a pixel-space crop
model, per-corner resize rules, display-to-image coordinate mapping and the
controller that turns pointer events into crop updates.
"""

from .controller import CropInteractionController
from .exporter import CropExporter, PillowCropExporter
from .hit_tester import HitTester
from .mapper import CoordinateMapper
from .model import CropRegion
from .resize_policy import RESIZE_RULES
from .utils import CropHandle, InteractionMode, cursor_for_handle

__all__ = [
    "RESIZE_RULES",
    "CoordinateMapper",
    "CropExporter",
    "CropHandle",
    "CropInteractionController",
    "CropRegion",
    "HitTester",
    "InteractionMode",
    "PillowCropExporter",
    "cursor_for_handle",
]
