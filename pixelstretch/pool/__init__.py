"""
Temporary Taichi field pool for PixelStretch.

Kernels in this package work on flat ``ti.u8``/``ti.i32`` fields that only live
for the duration of one call. The pool hands out such fields and takes them
back once their content has been copied to NumPy, so repeated calls on images
of the same size reuse the same device memory.

Usage:
    from pixelstretch import pool

    tmp = pool.get_temp_field(ti.u8, (ny * nx * 4,))
    tmp.field.from_numpy(data)
    ...
    tmp.release()

Author: B.G.
"""

from .pool import TPField, TaiPool, taipool, get_temp_field, reset

__all__ = ["TPField", "TaiPool", "taipool", "get_temp_field", "reset"]
