"""
Row gradient interpolation.

A gradient run between two pixel rows A and B of size n is made of n + 2 rows:
A itself, n linearly interpolated rows and B itself. RGB channels are blended
with round-half-up rounding (exact integer arithmetic); interpolated rows are
always fully opaque.

The per-channel arithmetic lives in ``blend_channel`` so that the standalone
``interpolate`` wrapper and the stretch builder kernel produce identical bytes.

Author: B.G.
"""

import numpy as np
import taichi as ti

from .. import constants as cte
from .. import pool


@ti.func
def blend_channel(a: ti.i32, b: ti.i32, k: ti.i32, size: ti.i32) -> ti.i32:
    """
    Value of step k (1..size) of a gradient from a to b with size inner steps.

    round_half_up(a + (b - a) * k / (size + 1)), evaluated exactly in integers
    as floor((2 * a * d + 2 * (b - a) * k + d) / (2 * d)) with d = size + 1.
    The numerator is always positive since the result lies between a and b.
    """
    d = size + 1
    return (2 * a * d + 2 * (b - a) * k + d) // (2 * d)


@ti.func
def write_blended_pixel(
    src_a: ti.template(),
    ia: ti.i32,
    src_b: ti.template(),
    ib: ti.i32,
    dst: ti.template(),
    io: ti.i32,
    k: ti.i32,
    size: ti.i32,
):
    """Write step k of the blend of pixel src_a[ia:ia+4] and src_b[ib:ib+4] to dst[io:io+4]."""
    for c in ti.static(range(3)):
        val = blend_channel(
            ti.cast(src_a[ia + c], ti.i32), ti.cast(src_b[ib + c], ti.i32), k, size
        )
        dst[io + c] = ti.cast(val, ti.u8)
    dst[io + 3] = ti.cast(cte.OPAQUE, ti.u8)


@ti.kernel
def gradient_run_kernel(
    row_a: ti.template(),
    row_b: ti.template(),
    target_field: ti.template(),
    nx: ti.i32,
    gradient_size: ti.i32,
):
    """
    Fill target_field with the (gradient_size + 2) rows of the run from row_a to row_b.

    Args:
        row_a: First row (nx * 4 elements)
        row_b: Last row (nx * 4 elements)
        target_field: Output ((gradient_size + 2) * nx * 4 elements)
        nx: Row width in pixels
        gradient_size: Number of interpolated rows
    """
    for idx in range((gradient_size + 2) * nx):
        r = idx // nx
        i = idx % nx
        src = i * 4
        dst = idx * 4
        if r == 0:
            for c in ti.static(range(4)):
                target_field[dst + c] = row_a[src + c]
        elif r == gradient_size + 1:
            for c in ti.static(range(4)):
                target_field[dst + c] = row_b[src + c]
        else:
            write_blended_pixel(row_a, src, row_b, src, target_field, dst, r, gradient_size)


def _as_row(row, name):
    arr = np.ascontiguousarray(row, dtype=np.uint8)
    if arr.ndim == 1:
        if arr.size % cte.CHANNELS != 0:
            raise ValueError(f"{name} length must be a multiple of 4, got {arr.size}")
        arr = arr.reshape(-1, cte.CHANNELS)
    if arr.ndim != 2 or arr.shape[1] != cte.CHANNELS:
        raise ValueError(f"{name} must be a (width, 4) or flat RGBA row, got shape {arr.shape}")
    return arr


def interpolate(row_a, row_b, gradient_size: int, width: int | None = None):
    """
    Interpolate between two RGBA rows.

    Args:
        row_a: First row, (width, 4) array or flat width * 4 array
        row_b: Last row, same layout as row_a
        gradient_size: Number of interpolated rows to insert (>= 0)
        width: Optional expected row width in pixels

    Returns:
        numpy.ndarray: uint8 array of shape (gradient_size + 2, width, 4).
        Row 0 is row_a, the last row is row_b, rows in between are blended
        with alpha forced to 255.

    Example:
        black = np.array([[0, 0, 0, 255]], dtype=np.uint8)
        white = np.array([[255, 255, 255, 255]], dtype=np.uint8)
        run = interpolate(black, white, 1)  # middle row is (128, 128, 128, 255)
    """
    if gradient_size < 0:
        raise ValueError(f"gradient_size must be >= 0, got {gradient_size}")
    a = _as_row(row_a, "row_a")
    b = _as_row(row_b, "row_b")
    if a.shape[0] != b.shape[0]:
        raise ValueError(f"Rows differ in width: {a.shape[0]} vs {b.shape[0]}")
    nx = a.shape[0]
    if width is not None and width != nx:
        raise ValueError(f"Rows are {nx} pixels wide, expected {width}")

    n_rows = gradient_size + 2
    if nx == 0:
        return np.zeros((n_rows, 0, cte.CHANNELS), dtype=np.uint8)

    row_len = nx * cte.CHANNELS
    a_field = pool.get_temp_field(ti.u8, (row_len,))
    b_field = pool.get_temp_field(ti.u8, (row_len,))
    target_field = pool.get_temp_field(ti.u8, (n_rows * row_len,))
    try:
        a_field.field.from_numpy(a.reshape(-1))
        b_field.field.from_numpy(b.reshape(-1))
        gradient_run_kernel(
            a_field.field, b_field.field, target_field.field, nx, gradient_size
        )
        result = target_field.field.to_numpy().reshape(n_rows, nx, cte.CHANNELS)
    finally:
        a_field.release()
        b_field.release()
        target_field.release()
    return result


__all__ = ["interpolate", "gradient_run_kernel", "blend_channel", "write_blended_pixel"]
