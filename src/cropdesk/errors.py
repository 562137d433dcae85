"""Custom exception hierarchy for cropdesk."""

from __future__ import annotations


class CropDeskError(Exception):
    """Base class for all custom errors raised by cropdesk."""


class MissingImageError(CropDeskError):
    """Raised when a crop command runs while no image is loaded."""


class MissingSurfaceContextError(CropDeskError):
    """Raised when the display surface has no usable size for coordinate mapping."""


class InvalidHandleError(CropDeskError):
    """Raised when a resize references an unknown corner handle."""


class CropNotStartedError(CropDeskError):
    """Raised when applying a crop before a crop region has been set up."""


class ExportFailureError(CropDeskError):
    """Raised when the export collaborator fails to produce the cropped asset."""
