"""
Stretch builder: downward stretching of a raster from a starting row.

Rows above the starting row are kept. From the starting row on, every pair of
adjacent source rows (r, r + 1) is replaced by the first ``n + 1`` rows of the
gradient run between them, n being the next entry of the index sequence. The
last row of each run is dropped; the next step starts again from the fresh
source row r + 1.

The build is split in two:
1. ``plan_rows`` (NumPy) decides, for every output row, which source row it
   comes from, its step inside the run and the run size;
2. ``stretch_fill_kernel`` (Taichi) writes all output pixels from that plan.

Author: B.G.
"""

import logging

import numpy as np
import taichi as ti

from .. import constants as cte
from .. import pool
from ..core import PixelBuffer
from .gradient import write_blended_pixel

logger = logging.getLogger(__name__)


def _n_steps(index_sequence, height, start_offset):
    return max(0, min(len(index_sequence), height - start_offset - 1))


def estimate_output_height(index_sequence, height: int, start_offset: int) -> int:
    """
    Height of the stretched raster.

    start_offset + sum of (run + 1) over the first min(len(sequence), height - start_offset - 1) runs.
    """
    n = _n_steps(index_sequence, height, start_offset)
    return int(start_offset + sum(int(v) + 1 for v in index_sequence[:n]))


def plan_rows(index_sequence, height: int, start_offset: int):
    """
    Describe every row of the stretched raster.

    Args:
        index_sequence: Run lengths (see generate_index_sequence)
        height: Height of the source raster
        start_offset: First row to stretch, in [0, height]

    Returns:
        tuple[np.ndarray, np.ndarray, np.ndarray]: int32 arrays (source_row, step, run_size)
        with one entry per output row. step == 0 means the source row is copied
        verbatim; otherwise the row is step k of the run between source_row and
        source_row + 1.
    """
    if not 0 <= start_offset <= height:
        raise ValueError(f"start_offset must be in [0, {height}], got {start_offset}")

    n = _n_steps(index_sequence, height, start_offset)
    runs = np.asarray(index_sequence[:n], dtype=np.int64)
    if np.any(runs < 0):
        raise ValueError("index_sequence entries must be non-negative")
    lengths = runs + 1

    # One write cursor walking the runs in order; each run emits all its rows
    # but the last, so run j fills [offsets[j], offsets[j] + lengths[j]).
    offsets = np.cumsum(lengths) - lengths
    total = int(lengths.sum())

    head = np.arange(start_offset, dtype=np.int32)
    source_rows = np.concatenate(
        [head, np.repeat(start_offset + np.arange(n), lengths).astype(np.int32)]
    )
    steps = np.concatenate(
        [np.zeros(start_offset, dtype=np.int32), (np.arange(total) - np.repeat(offsets, lengths)).astype(np.int32)]
    )
    sizes = np.concatenate(
        [np.zeros(start_offset, dtype=np.int32), np.repeat(runs, lengths).astype(np.int32)]
    )
    return source_rows, steps, sizes


@ti.kernel
def stretch_fill_kernel(
    source_field: ti.template(),
    target_field: ti.template(),
    source_rows: ti.template(),
    steps: ti.template(),
    run_sizes: ti.template(),
    nx: ti.i32,
    ny_out: ti.i32,
):
    """
    Write every pixel of the stretched raster from its row plan.

    Args:
        source_field: Source raster (nx * ny * 4 elements)
        target_field: Output raster (nx * ny_out * 4 elements)
        source_rows: Source row of each output row (ny_out elements)
        steps: Step inside the run of each output row (ny_out elements)
        run_sizes: Run size of each output row (ny_out elements)
        nx: Raster width
        ny_out: Output height
    """
    for idx in range(nx * ny_out):
        r = idx // nx
        i = idx % nx
        k = steps[r]
        src = (source_rows[r] * nx + i) * 4
        dst = idx * 4
        if k == 0:
            for c in ti.static(range(4)):
                target_field[dst + c] = source_field[src + c]
        else:
            write_blended_pixel(
                source_field, src, source_field, src + nx * 4, target_field, dst, k, run_sizes[r]
            )


def build_stretched(index_sequence, source: PixelBuffer, start_offset: int) -> PixelBuffer:
    """
    Stretch a raster downward from ``start_offset``.

    Args:
        index_sequence: Run lengths (see generate_index_sequence)
        source: Source raster in canonical (downward) orientation
        start_offset: First row to stretch

    Returns:
        PixelBuffer: Raster with the same width and a height of at least
        start_offset (see estimate_output_height)
    """
    nx, ny = source.width, source.height
    source_rows, steps, sizes = plan_rows(index_sequence, ny, start_offset)
    ny_out = int(source_rows.size)
    logger.debug("build_stretched: %dx%d from row %d -> %d rows", nx, ny, start_offset, ny_out)

    if nx == 0 or ny_out == 0:
        return PixelBuffer(np.zeros(0, dtype=np.uint8), nx, ny_out)

    source_field = pool.get_temp_field(ti.u8, (source.data.size,))
    target_field = pool.get_temp_field(ti.u8, (nx * ny_out * cte.CHANNELS,))
    rows_field = pool.get_temp_field(ti.i32, (ny_out,))
    steps_field = pool.get_temp_field(ti.i32, (ny_out,))
    sizes_field = pool.get_temp_field(ti.i32, (ny_out,))
    try:
        source_field.field.from_numpy(source.data)
        rows_field.field.from_numpy(source_rows)
        steps_field.field.from_numpy(steps)
        sizes_field.field.from_numpy(sizes)
        stretch_fill_kernel(
            source_field.field,
            target_field.field,
            rows_field.field,
            steps_field.field,
            sizes_field.field,
            nx,
            ny_out,
        )
        data = target_field.field.to_numpy()
    finally:
        for tpf in (source_field, target_field, rows_field, steps_field, sizes_field):
            tpf.release()
    return PixelBuffer(data, nx, ny_out)


__all__ = ["build_stretched", "plan_rows", "estimate_output_height", "stretch_fill_kernel"]
