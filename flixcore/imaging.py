"""Cover image generation and resizing.

A standard cover is 240x320 pixels and a square cover 240x240; both are
stretched from the source image to fit exactly.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from PIL import Image

from flixcore.cover import Cover

__all__ = [
    "STANDARD_SIZE",
    "SQUARE_SIZE",
    "JPEG_QUALITY",
    "create_covers",
    "resize_to_width",
    "scale_image",
    "resize_exact",
]

PathLike = Union[str, "os.PathLike[str]"]

STANDARD_SIZE = (240, 320)
SQUARE_SIZE = (240, 240)
JPEG_QUALITY = 80


def create_covers(img_source: PathLike, output_name: str, output_dir: PathLike) -> Cover:
    """Write ``<name>.jpg`` and ``<name>_square.jpg`` into ``output_dir``.

    Returns a Cover pointing at the two files, or the default Cover when the
    source cannot be read or the outputs cannot be written.
    """
    try:
        with Image.open(img_source) as source:
            source.load()
            standard = resize_exact(source, *STANDARD_SIZE)
            square = resize_exact(source, *SQUARE_SIZE)
    except OSError:
        return Cover()

    directory = Path(output_dir)
    standard_dest = directory / f"{output_name}.jpg"
    square_dest = directory / f"{output_name}_square.jpg"

    try:
        _save_jpeg(standard, standard_dest)
    except OSError:
        return Cover()
    try:
        _save_jpeg(square, square_dest)
    except OSError:
        standard_dest.unlink(missing_ok=True)
        return Cover()

    return Cover(standard_dest, square_dest)


def _save_jpeg(image: Image.Image, destination: Path) -> None:
    if image.mode != "RGB":
        image = image.convert("RGB")
    image.save(destination, format="JPEG", quality=JPEG_QUALITY)


def resize_to_width(image: Image.Image, width: int) -> Image.Image:
    """Resize proportionally so that the result is ``width`` pixels wide."""
    src_width, src_height = image.size
    return resize_exact(image, width, (width * src_height) // src_width)


def scale_image(image: Image.Image, ratio: float) -> Image.Image:
    """Scale both dimensions by ``ratio``; its sign is ignored."""
    ratio = abs(ratio)
    src_width, src_height = image.size
    return resize_exact(image, int(src_width * ratio), int(src_height * ratio))


def resize_exact(image: Image.Image, width: int, height: int) -> Image.Image:
    """Return a new true-colour image of exactly ``width`` x ``height``.

    Raises ValueError if either dimension is not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid image size: {width}x{height}")
    has_alpha = image.mode in ("RGBA", "LA", "PA") or (
        image.mode == "P" and "transparency" in image.info
    )
    truecolor = image.convert("RGBA" if has_alpha else "RGB")
    return truecolor.resize((width, height), Image.Resampling.BICUBIC)