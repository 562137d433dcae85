"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Optional, Tuple

import typer
from PIL import Image
from PySide6.QtCore import QPointF
from rich import print

from .config import EXPORT_DIR_NAME
from .crop import CropHandle, CropInteractionController, CropRegion, PillowCropExporter
from .errors import CropDeskError, MissingImageError

app = typer.Typer(help="Select and export a rectangular crop of an image")


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CropDeskError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _format_region(rect: tuple[float, float, float, float]) -> str:
    return "({:g}, {:g}, {:g}, {:g})".format(*rect)


def _drag(controller: CropInteractionController, start: QPointF, target, dx: float, dy: float) -> None:
    controller.handle_pointer_down(start, target)
    controller.handle_pointer_move(QPointF(start.x() + dx, start.y() + dy))
    controller.handle_pointer_up()


@app.command()
@_handle_errors
def region(
    width: int = typer.Argument(..., help="Image width in pixels"),
    height: int = typer.Argument(..., help="Image height in pixels"),
) -> None:
    """Print the crop region a new session starts with."""
    if width <= 0 or height <= 0:
        raise MissingImageError(f"Invalid image size {width}x{height}")
    crop_region = CropRegion()
    crop_region.init_centered(width, height)
    print(f"[bold]Initial region:[/bold] {_format_region(crop_region.as_tuple())}")


@app.command()
@_handle_errors
def crop(
    image: Path = typer.Argument(..., help="Image to crop"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory for the cropped file"
    ),
    move: Optional[Tuple[float, float]] = typer.Option(
        None, "--move", help="Drag the region by DX DY image pixels"
    ),
    resize: Optional[Tuple[str, float, float]] = typer.Option(
        None, "--resize", help="Drag corner HANDLE (nw, ne, sw, se) by DX DY image pixels"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Crop IMAGE to the centred default region, optionally adjusted, and save it."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    try:
        with Image.open(image) as img:
            size = img.size
    except FileNotFoundError as exc:
        raise MissingImageError(f"Image not found: {image}") from exc
    except OSError as exc:
        raise MissingImageError(f"Cannot read image {image}: {exc}") from exc

    controller = CropInteractionController(
        image_size_provider=lambda: size,
        # A surface rendered at native size keeps display and image deltas equal.
        surface_size_provider=lambda: size,
        exporter=PillowCropExporter(image, output_dir or image.parent / EXPORT_DIR_NAME),
    )
    controller.start_cropping()
    current = controller.get_crop_region()

    if move is not None:
        centre = QPointF(current.x + current.width / 2, current.y + current.height / 2)
        _drag(controller, centre, CropHandle.INSIDE, *move)

    if resize is not None:
        handle_name, dx, dy = resize
        handle = CropHandle.parse(handle_name)
        corner = QPointF(
            current.x + (current.width if handle.value.endswith("e") else 0.0),
            current.y + (current.height if handle.value.startswith("s") else 0.0),
        )
        _drag(controller, corner, handle, dx, dy)

    final = controller.crop_rect()
    location = controller.apply_crop()
    print(f"[green]Cropped {image} to {_format_region(final)}")
    print(f"Saved to {location}")


if __name__ == "__main__":
    app()
