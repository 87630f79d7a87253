"""
PixelStretch: directional pixel stretching ("melt") effect for RGBA images.

Rows beyond a starting pixel are progressively replaced by gradients between
adjacent source rows, in any of the four directions, and the result is
trimmed back to the original canvas.

Submodules:
- core: PixelBuffer, Direction, StretchParams
- stretch: the transform pipeline (Taichi kernels + NumPy planning)
- io: Pillow-based image loading/saving and display helpers
- misc: random parameters and matplotlib preview
- pool: temporary Taichi field pool
- cli: command line entry points

Usage:
    import taichi as ti
    import pixelstretch as ps

    ti.init(arch=ti.cpu)
    img = ps.io.load_image("photo.png")
    out = ps.stretch_image(img, ps.StretchParams(intensity=4, starting_pixel=80, direction="left"))
    ps.io.save_image(out, "stretched_photo.png")

Author: B.G.
"""

import logging

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.0.1"

from . import constants
from . import pool
from .core import Direction, PixelBuffer, StretchParams
from . import stretch
from .stretch import stretch_image
from . import io
from . import misc

__all__ = [
    "constants",
    "pool",
    "Direction",
    "PixelBuffer",
    "StretchParams",
    "stretch",
    "stretch_image",
    "io",
    "misc",
    "__version__",
]
