"""
RGBA8 pixel buffer used throughout PixelStretch.

Author: B.G.
"""

from dataclasses import dataclass

import numpy as np

from .. import constants as cte


@dataclass(eq=False)
class PixelBuffer:
    """
    Flat RGBA8 raster.

    Attributes:
        data: Contiguous 1D uint8 array of length width * height * 4
              (R, G, B, A per pixel, row-major, top row first)
        width: Number of columns
        height: Number of rows
    """

    data: np.ndarray
    width: int
    height: int

    def __post_init__(self):
        self.width = int(self.width)
        self.height = int(self.height)
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Buffer dimensions must be non-negative, got {self.width}x{self.height}"
            )
        self.data = np.ascontiguousarray(self.data, dtype=np.uint8).reshape(-1)
        expected = self.width * self.height * cte.CHANNELS
        if self.data.size != expected:
            raise ValueError(
                f"Buffer of {self.width}x{self.height} needs {expected} bytes, got {self.data.size}"
            )

    @classmethod
    def from_array(cls, arr):
        """Build a buffer from an (height, width, 4) uint8 array (data is copied)."""
        arr = np.asarray(arr)
        if arr.ndim != 3 or arr.shape[2] != cte.CHANNELS:
            raise ValueError(f"Expected an (h, w, 4) array, got shape {arr.shape}")
        height, width = arr.shape[:2]
        return cls(np.array(arr, dtype=np.uint8).reshape(-1), width, height)

    @classmethod
    def blank(cls, width, height, color=(0, 0, 0, cte.OPAQUE)):
        """Buffer filled with a single RGBA color."""
        arr = np.empty((int(height), int(width), cte.CHANNELS), dtype=np.uint8)
        arr[...] = np.asarray(color, dtype=np.uint8)
        return cls(arr.reshape(-1), width, height)

    @property
    def shape(self):
        return (self.height, self.width)

    @property
    def empty(self):
        return self.width == 0 or self.height == 0

    def to_array(self):
        """(height, width, 4) view on the data."""
        return self.data.reshape(self.height, self.width, cte.CHANNELS)

    def row(self, index):
        """(width, 4) view on row ``index``."""
        return self.to_array()[index]

    def copy(self):
        return PixelBuffer(self.data.copy(), self.width, self.height)

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.data, other.data)
        )

    def __repr__(self):
        return f"PixelBuffer(width={self.width}, height={self.height})"
