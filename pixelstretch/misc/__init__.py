"""
Miscellaneous Utilities for PixelStretch

Helpers around the stretch transform that are not part of the transform itself.

Available Functions:
- random_params: Random StretchParams for an image size
- show_before_after: Side-by-side matplotlib preview

Author: B.G.
"""

from .random_params import random_params
from .preview import show_before_after

__all__ = ["random_params", "show_before_after"]
