"""
Orientation normalization for the stretch transform.

The builder only knows how to stretch downward. Every other direction is
reduced to that case by rotating the image before the build and rotating the
result back afterwards. Each direction is described once, in the
``ORIENTATIONS`` table, as a (rotate_in, offset_in, rotate_out) strategy.

Rotation convention (width x height source, height x width target):
    clockwise:         (x, y) -> (height - 1 - y, x)
    counter-clockwise: (x, y) -> (y, width - 1 - x)

Author: B.G.
"""

import logging
from typing import Callable, NamedTuple

import numpy as np
import taichi as ti

from .. import constants as cte
from .. import pool
from ..core import Direction, PixelBuffer

logger = logging.getLogger(__name__)


@ti.kernel
def rotate90_kernel(
    source_field: ti.template(),
    target_field: ti.template(),
    nx: ti.i32,
    ny: ti.i32,
    clockwise: ti.i32,
):
    """
    Rotate a flat RGBA raster by 90 degrees.

    Args:
        source_field: Source raster (nx * ny * 4 elements)
        target_field: Rotated raster (ny * nx * 4 elements, ny columns)
        nx: Source width
        ny: Source height
        clockwise: 1 for clockwise, 0 for counter-clockwise
    """
    for idx in range(nx * ny):
        y = idx // nx
        x = idx % nx
        new_x = 0
        new_y = 0
        if clockwise == 1:
            new_x = ny - 1 - y
            new_y = x
        else:
            new_x = y
            new_y = nx - 1 - x
        src = idx * 4
        dst = (new_y * ny + new_x) * 4
        for c in ti.static(range(4)):
            target_field[dst + c] = source_field[src + c]


def rotate90(buffer: PixelBuffer, clockwise: bool = True) -> PixelBuffer:
    """
    Rotate a buffer by 90 degrees.

    Args:
        buffer: Source buffer
        clockwise: Rotation sense (default: clockwise)

    Returns:
        PixelBuffer: New buffer of size height x width
    """
    nx, ny = buffer.width, buffer.height
    if buffer.empty:
        return PixelBuffer(np.zeros(0, dtype=np.uint8), ny, nx)

    size = nx * ny * cte.CHANNELS
    source_field = pool.get_temp_field(ti.u8, (size,))
    target_field = pool.get_temp_field(ti.u8, (size,))
    try:
        source_field.field.from_numpy(buffer.data)
        rotate90_kernel(source_field.field, target_field.field, nx, ny, 1 if clockwise else 0)
        data = target_field.field.to_numpy()
    finally:
        source_field.release()
        target_field.release()
    return PixelBuffer(data, ny, nx)


def rotate180(buffer: PixelBuffer) -> PixelBuffer:
    """Rotate a buffer by 180 degrees (two clockwise quarter turns)."""
    return rotate90(rotate90(buffer, True), True)


def _identity(buffer):
    return buffer.copy()


def _rotate_cw(buffer):
    return rotate90(buffer, True)


def _rotate_ccw(buffer):
    return rotate90(buffer, False)


def _same_offset(rotated, start):
    return start


def _offset_from_end(rotated, start):
    return rotated.height - start - 1


class Orientation(NamedTuple):
    """How one direction maps to and from the canonical downward case."""

    rotate_in: Callable[[PixelBuffer], PixelBuffer]
    offset_in: Callable[[PixelBuffer, int], int]
    rotate_out: Callable[[PixelBuffer], PixelBuffer]


ORIENTATIONS = {
    Direction.DOWN: Orientation(_identity, _same_offset, _identity),
    Direction.UP: Orientation(rotate180, _offset_from_end, rotate180),
    Direction.RIGHT: Orientation(_rotate_cw, _offset_from_end, _rotate_ccw),
    Direction.LEFT: Orientation(_rotate_ccw, _same_offset, _rotate_cw),
}


def clamp_start(buffer: PixelBuffer, direction, starting_pixel: int) -> int:
    """Clamp a starting pixel to [0, dimension - 1] for the given direction."""
    direction = Direction.parse(direction)
    dim = buffer.height if direction.vertical else buffer.width
    return max(0, min(int(starting_pixel), dim - 1))


def to_canonical(buffer: PixelBuffer, direction, starting_pixel: int):
    """
    Rotate a buffer so that ``direction`` becomes downward.

    Args:
        buffer: Source buffer in its original orientation
        direction: Requested stretch direction
        starting_pixel: Row (up/down) or column (left/right) in the original buffer

    Returns:
        tuple[PixelBuffer, int]: Rotated buffer and the starting row in it
    """
    direction = Direction.parse(direction)
    strategy = ORIENTATIONS[direction]
    start = clamp_start(buffer, direction, starting_pixel)
    rotated = strategy.rotate_in(buffer)
    offset = strategy.offset_in(rotated, start)
    logger.debug(
        "to_canonical %s: %dx%d -> %dx%d, start %d -> %d",
        direction.value,
        buffer.width,
        buffer.height,
        rotated.width,
        rotated.height,
        start,
        offset,
    )
    return rotated, offset


def from_canonical(buffer: PixelBuffer, direction) -> PixelBuffer:
    """Rotate a canonical (downward) result back to the original orientation."""
    return ORIENTATIONS[Direction.parse(direction)].rotate_out(buffer)


__all__ = [
    "rotate90",
    "rotate90_kernel",
    "rotate180",
    "Orientation",
    "ORIENTATIONS",
    "clamp_start",
    "to_canonical",
    "from_canonical",
]
