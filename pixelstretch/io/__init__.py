"""
Image I/O for PixelStretch.

Bridges image files and ``PixelBuffer`` using Pillow. Every image is decoded
as straight (non-premultiplied) RGBA8, whatever its original mode.

Available Functions:
- load_image: Decode an image file into a PixelBuffer
- save_image: Encode a PixelBuffer to an image file
- to_pil / from_pil: Conversions between PixelBuffer and PIL images
- default_output_path: "stretched_<name>" next to the input
- default_starting_pixel: Middle of the shortest side
- display_size / fit_to_display: Down-scaling to a maximum display size

Author: B.G.
"""

from .image_io import (
    default_output_path,
    default_starting_pixel,
    display_size,
    fit_to_display,
    from_pil,
    load_image,
    save_image,
    to_pil,
)

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
