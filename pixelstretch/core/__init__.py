"""
Core data types for PixelStretch.

- PixelBuffer: flat RGBA8 raster (row-major, top row first)
- Direction: stretch direction with lenient parsing
- StretchParams: user-facing parameters of the transform

Author: B.G.
"""

from .pixelbuffer import PixelBuffer
from .params import Direction, StretchParams

__all__ = ["PixelBuffer", "Direction", "StretchParams"]
