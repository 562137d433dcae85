"""Default configuration values for cropdesk."""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Crop geometry
# ---------------------------------------------------------------------------

# Smallest width/height, in native image pixels, the crop rectangle may shrink
# to while a corner handle is dragged.
MIN_CROP_SIZE_PX: Final[int] = 50

# Fraction of each image axis covered by the rectangle shown when a crop
# session starts.  The rectangle is centred and rounded down to whole pixels.
INITIAL_CROP_FRACTION: Final[float] = 0.8

# Distance, in display pixels, within which a press counts as grabbing a
# corner handle rather than the body of the crop rectangle.
HANDLE_HIT_PADDING: Final[float] = 12.0

# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

EXPORT_FORMAT: Final[str] = "JPEG"
EXPORT_QUALITY: Final[int] = 80
EXPORT_SUFFIX: Final[str] = ".jpg"
EXPORT_DIR_NAME: Final[str] = "cropped"
