"""
Pool of reusable Taichi fields.

Fields are keyed by (dtype, shape). A field handed out by the pool is marked
busy until ``release()`` is called on its wrapper; after that it may be handed
out again by a later request with the same key.

Every field lives in its own SNode tree (``ti.FieldsBuilder``) so it can be
destroyed on its own. The pool keeps at most ``max_free`` released fields;
past that, the field released the longest time ago is destroyed. Busy fields
are never destroyed.

Fields belong to the Taichi runtime that was active when they were created.
Call ``reset()`` after re-initializing Taichi.

Author: B.G.
"""

import taichi as ti

from .. import constants as cte


class TPField:
    """
    Wrapper around a pooled Taichi field.

    Attributes:
        field: The underlying Taichi field (None once destroyed)
        dtype: Taichi data type of the field
        shape: Shape tuple of the field
        in_use: True while the field is checked out
    """

    def __init__(self, pool, dtype, shape):
        self._pool = pool
        self.dtype = dtype
        self.shape = shape
        self.field = ti.field(dtype=dtype)
        fb = ti.FieldsBuilder()
        fb.dense(ti.axes(*range(len(shape))), shape).place(self.field)
        self._tree = fb.finalize()
        self.in_use = False

    @property
    def destroyed(self):
        return self._tree is None

    def destroy(self):
        """Free the device memory of the field."""
        if self._tree is not None:
            self._tree.destroy()
            self._tree = None
            self.field = None

    def release(self):
        """Give the field back to its pool."""
        self._pool.release(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


class TaiPool:
    """
    Keeps track of allocated fields and which of them are free.

    Args:
        max_free: Number of released fields kept for reuse
    """

    def __init__(self, max_free=cte.POOL_MAX_FREE):
        if max_free < 0:
            raise ValueError(f"max_free must be >= 0, got {max_free}")
        self.max_free = max_free
        self._fields = {}
        # Released fields, oldest first
        self._free = []

    @staticmethod
    def _key(dtype, shape):
        if isinstance(shape, int):
            shape = (shape,)
        return (dtype, tuple(int(s) for s in shape))

    def get_tpfield(self, dtype, shape):
        """
        Check out a field of the given type and shape.

        Args:
            dtype: Taichi data type (e.g. ti.u8, ti.i32)
            shape: Field shape (int or tuple); every dimension must be > 0

        Returns:
            TPField: Checked-out field wrapper
        """
        key = self._key(dtype, shape)
        if not key[1] or any(s <= 0 for s in key[1]):
            raise ValueError(f"Cannot allocate a Taichi field of shape {key[1]}")

        bucket = self._fields.setdefault(key, [])
        for tpf in bucket:
            if not tpf.in_use:
                tpf.in_use = True
                self._free.remove(tpf)
                return tpf

        tpf = TPField(self, dtype, key[1])
        tpf.in_use = True
        bucket.append(tpf)
        return tpf

    def release(self, tpf):
        if not tpf.in_use:
            return
        tpf.in_use = False
        self._free.append(tpf)
        while len(self._free) > self.max_free:
            self._evict(self._free.pop(0))

    def _evict(self, tpf):
        key = self._key(tpf.dtype, tpf.shape)
        bucket = self._fields.get(key, [])
        if tpf in bucket:
            bucket.remove(tpf)
        if not bucket:
            self._fields.pop(key, None)
        tpf.destroy()

    def n_fields(self, busy_only=False):
        """Number of fields held by the pool."""
        return sum(
            1
            for bucket in self._fields.values()
            for tpf in bucket
            if tpf.in_use or not busy_only
        )

    def clear(self):
        """Destroy every released field."""
        while self._free:
            self._evict(self._free.pop(0))

    def reset(self):
        """Forget every field (required after ti.init is called again)."""
        self._fields = {}
        self._free = []


taipool = TaiPool()


def get_temp_field(dtype, shape):
    """Shortcut for ``taipool.get_tpfield``."""
    return taipool.get_tpfield(dtype, shape)


def reset():
    """Shortcut for ``taipool.reset``."""
    taipool.reset()
