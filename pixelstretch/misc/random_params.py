"""
Random stretch parameters.

Author: B.G.
"""

import numpy as np

from .. import constants as cte
from ..core import Direction, StretchParams


def random_params(width: int, height: int, seed: int | None = None) -> StretchParams:
    """
    Draw random stretch parameters for a width x height image.

    Direction is uniform among the four directions, intensity uniform in
    [1, 13] and the starting pixel uniform in [0, dimension) along the chosen
    direction.

    Args:
        width: Image width
        height: Image height
        seed: Optional seed for reproducible draws

    Returns:
        StretchParams: Random parameters
    """
    rng = np.random.default_rng(seed)
    directions = list(Direction)
    direction = directions[int(rng.integers(len(directions)))]
    intensity = int(rng.integers(cte.MIN_INTENSITY, cte.MAX_INTENSITY + 1))
    dim = height if direction.vertical else width
    start = int(rng.integers(dim)) if dim > 0 else 0
    return StretchParams(intensity=intensity, starting_pixel=start, direction=direction)
