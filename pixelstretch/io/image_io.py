"""
Pillow-based image reading and writing.

Author: B.G.
"""

import math
import os

import numpy as np
from PIL import Image

from .. import constants as cte
from ..core import PixelBuffer


def from_pil(img) -> PixelBuffer:
    """Convert a PIL image (any mode) to an RGBA PixelBuffer."""
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    return PixelBuffer.from_array(np.asarray(img, dtype=np.uint8))


def to_pil(buffer: PixelBuffer):
    """Convert a PixelBuffer to a PIL RGBA image."""
    return Image.fromarray(np.ascontiguousarray(buffer.to_array()))


def load_image(path) -> PixelBuffer:
    """
    Load an image file as an RGBA PixelBuffer.

    Args:
        path: Path to any image format Pillow can decode

    Returns:
        PixelBuffer: Decoded image

    Raises:
        FileNotFoundError: If the file does not exist
        PIL.UnidentifiedImageError: If Pillow cannot decode the file
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image not found: {path}")
    with Image.open(path) as img:
        img.load()
        return from_pil(img)


def save_image(buffer: PixelBuffer, path, format: str | None = None):
    """
    Save a PixelBuffer to an image file.

    The format is deduced from the extension unless given. Formats without
    alpha support (JPEG, ...) receive the RGB channels only.
    """
    img = to_pil(buffer)
    fmt = format or Image.registered_extensions().get(os.path.splitext(str(path))[1].lower())
    if fmt in ("JPEG", "BMP", "PPM"):
        img = img.convert("RGB")
    img.save(path, format=format)


def default_output_path(input_path) -> str:
    """``dir/photo.png`` -> ``dir/stretched_photo.png``."""
    folder, name = os.path.split(str(input_path))
    return os.path.join(folder, cte.OUTPUT_PREFIX + name)


def default_starting_pixel(width: int, height: int) -> int:
    """Middle of the shortest side, valid for every direction."""
    return int(math.floor(min(width, height) * 0.5))


def display_size(width: int, height: int, max_size: int = cte.MAX_DISPLAY_SIZE):
    """
    Size fitting within max_size x max_size, keeping the aspect ratio.

    Images already small enough are returned unchanged.
    """
    if max_size <= 0:
        raise ValueError(f"max_size must be > 0, got {max_size}")
    if width <= max_size and height <= max_size:
        return width, height
    # Longest side becomes max_size, integer math keeps the result exact
    if width >= height:
        return max_size, max(1, height * max_size // width)
    return max(1, width * max_size // height), max_size


def fit_to_display(buffer: PixelBuffer, max_size: int = cte.MAX_DISPLAY_SIZE) -> PixelBuffer:
    """Down-scale a buffer to ``display_size`` with Pillow (no-op if it already fits)."""
    size = display_size(buffer.width, buffer.height, max_size)
    if size == (buffer.width, buffer.height):
        return buffer
    return from_pil(to_pil(buffer).resize(size, Image.Resampling.LANCZOS))


__all__ = [
    "default_output_path",
    "default_starting_pixel",
    "display_size",
    "fit_to_display",
    "from_pil",
    "load_image",
    "save_image",
    "to_pil",
]
