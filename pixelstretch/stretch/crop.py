"""
Crop a stretched raster back to the original canvas size.

The window that is kept depends on the stretch direction: the part of the
image that was left untouched stays in place and the excess produced by the
stretch is discarded. Indices past the source extent are clamped, so a source
smaller than the target repeats its last row/column instead of wrapping.

Author: B.G.
"""

import logging

import taichi as ti

from .. import constants as cte
from .. import pool
from ..core import Direction, PixelBuffer

logger = logging.getLogger(__name__)


@ti.kernel
def crop_kernel(
    source_field: ti.template(),
    target_field: ti.template(),
    nx_src: ti.i32,
    ny_src: ti.i32,
    nx_t: ti.i32,
    ny_t: ti.i32,
    x0: ti.i32,
    y0: ti.i32,
):
    """
    Copy the nx_t x ny_t window anchored at (x0, y0) of the source.

    Args:
        source_field: Source raster (nx_src * ny_src * 4 elements)
        target_field: Output raster (nx_t * ny_t * 4 elements)
        nx_src: Source width
        ny_src: Source height
        nx_t: Target width
        ny_t: Target height
        x0: Horizontal anchor in the source
        y0: Vertical anchor in the source
    """
    for idx in range(nx_t * ny_t):
        j = idx // nx_t
        i = idx % nx_t
        sx = ti.min(x0 + i, nx_src - 1)
        sy = ti.min(y0 + j, ny_src - 1)
        src = (sy * nx_src + sx) * 4
        dst = idx * 4
        for c in ti.static(range(4)):
            target_field[dst + c] = source_field[src + c]


def crop_anchor(width: int, height: int, target_width: int, target_height: int, direction):
    """
    Top-left corner of the kept window.

    down / right: (0, 0), keep the leading rows and columns
    up:           keep the trailing rows
    left:         keep the trailing columns
    """
    direction = Direction.parse(direction)
    x0 = 0
    y0 = 0
    if direction is Direction.UP:
        y0 = max(0, height - target_height)
    elif direction is Direction.LEFT:
        x0 = max(0, width - target_width)
    return x0, y0


def crop_to_size(buffer: PixelBuffer, width: int, height: int, direction) -> PixelBuffer:
    """
    Crop (or clamp-extend) a buffer to exactly width x height.

    Args:
        buffer: Stretched buffer in the original orientation
        width: Target width
        height: Target height
        direction: Stretch direction, selects the anchor

    Returns:
        PixelBuffer: The buffer itself if it already has the target size,
        otherwise a new width x height buffer
    """
    if buffer.width == width and buffer.height == height:
        return buffer
    if width <= 0 or height <= 0:
        raise ValueError(f"Target size must be positive, got {width}x{height}")
    if buffer.empty:
        raise ValueError(f"Cannot crop an empty {buffer.width}x{buffer.height} buffer")

    x0, y0 = crop_anchor(buffer.width, buffer.height, width, height, direction)
    logger.debug(
        "crop_to_size: %dx%d -> %dx%d anchored at (%d, %d)",
        buffer.width,
        buffer.height,
        width,
        height,
        x0,
        y0,
    )

    source_field = pool.get_temp_field(ti.u8, (buffer.data.size,))
    target_field = pool.get_temp_field(ti.u8, (width * height * cte.CHANNELS,))
    try:
        source_field.field.from_numpy(buffer.data)
        crop_kernel(
            source_field.field,
            target_field.field,
            buffer.width,
            buffer.height,
            width,
            height,
            x0,
            y0,
        )
        data = target_field.field.to_numpy()
    finally:
        source_field.release()
        target_field.release()
    return PixelBuffer(data, width, height)


__all__ = ["crop_to_size", "crop_anchor", "crop_kernel"]
