"""
Directional pixel stretching for PixelStretch.

Pipeline (leaves first):
- index_sequence: intensity -> run lengths
- gradient: interpolated rows between two pixel rows
- orientation: rotate any direction to the canonical downward case and back
- builder: downward stretch from a starting row
- crop: trim the result back to the original canvas
- pipeline: ``stretch_image``, the fail-safe orchestrator

Pixel-parallel steps run as Taichi kernels on pooled fields; each kernel is
exported next to its NumPy-facing wrapper.

Usage:
    import taichi as ti
    import pixelstretch as ps

    ti.init(arch=ti.cpu)
    out = ps.stretch.stretch_image(buffer, ps.StretchParams(7, 40, "left"))

Author: B.G.
"""

from .index_sequence import generate_index_sequence, index_sequence_length, scaled_counts
from .gradient import interpolate, gradient_run_kernel, blend_channel
from .orientation import (
    ORIENTATIONS,
    Orientation,
    clamp_start,
    from_canonical,
    rotate90,
    rotate90_kernel,
    rotate180,
    to_canonical,
)
from .builder import build_stretched, estimate_output_height, plan_rows, stretch_fill_kernel
from .crop import crop_anchor, crop_kernel, crop_to_size
from .pipeline import stretch_image

__all__ = [
    "generate_index_sequence",
    "index_sequence_length",
    "scaled_counts",
    "interpolate",
    "gradient_run_kernel",
    "blend_channel",
    "ORIENTATIONS",
    "Orientation",
    "clamp_start",
    "from_canonical",
    "rotate90",
    "rotate90_kernel",
    "rotate180",
    "to_canonical",
    "build_stretched",
    "estimate_output_height",
    "plan_rows",
    "stretch_fill_kernel",
    "crop_anchor",
    "crop_kernel",
    "crop_to_size",
    "stretch_image",
]
