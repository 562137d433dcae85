"""
Export of the cropped pixels.

The interaction controller never touches pixel data; it hands the final
integer box to a :class:`CropExporter` and receives an opaque location back.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from pathlib import Path
from typing import Protocol, Union

from PIL import Image

from ..config import EXPORT_FORMAT, EXPORT_QUALITY, EXPORT_SUFFIX
from ..errors import ExportFailureError, MissingImageError

LOGGER = logging.getLogger(__name__)

ImageSource = Union[Path, str, Callable[[], "Image.Image | None"]]


class CropExporter(Protocol):
    """Collaborator that turns a crop box into a stored asset."""

    def export(self, box: tuple[int, int, int, int]) -> object:
        """Store the pixels inside ``(left, top, right, bottom)`` and return their location."""
        ...


class PillowCropExporter:
    """Crops images with Pillow and writes the result as a JPEG file."""

    def __init__(self, source: ImageSource, output_dir: Path) -> None:
        self._source = source
        self._output_dir = Path(output_dir)

    def export(self, box: tuple[int, int, int, int]) -> Path:
        image = self._load_source()
        try:
            cropped = image.crop(box)
            if cropped.mode != "RGB":
                cropped = cropped.convert("RGB")
            self._output_dir.mkdir(parents=True, exist_ok=True)
            target = self._output_dir / f"crop-{uuid.uuid4().hex[:12]}{EXPORT_SUFFIX}"
            cropped.save(target, EXPORT_FORMAT, quality=EXPORT_QUALITY)
        except (OSError, ValueError) as exc:
            LOGGER.error("Failed to export crop %s: %s", box, exc)
            raise ExportFailureError(f"Could not write cropped image: {exc}") from exc
        LOGGER.info("Exported crop %s to %s", box, target)
        return target

    def _load_source(self) -> Image.Image:
        if callable(self._source):
            image = self._source()
            if image is None:
                raise MissingImageError("No image loaded")
            return image
        path = Path(self._source)
        try:
            with Image.open(path) as img:
                img.load()
                return img.copy()
        except FileNotFoundError as exc:
            raise MissingImageError(f"Image not found: {path}") from exc
        except OSError as exc:
            raise ExportFailureError(f"Pillow failed to open {path}: {exc}") from exc
