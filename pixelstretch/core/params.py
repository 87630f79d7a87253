"""
Stretch parameters and direction handling.

Parameters coming from the outside (CLI, random generator, callers) are never
rejected: out of range values are clamped and unknown directions fall back to
DOWN, the canonical processing direction.

Author: B.G.
"""

from dataclasses import dataclass, replace
from enum import Enum

from .. import constants as cte


class Direction(str, Enum):
    """Direction in which pixels are stretched."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value):
        """Return the matching Direction, DOWN for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.DOWN

    @property
    def vertical(self):
        return self in (Direction.UP, Direction.DOWN)


@dataclass(frozen=True)
class StretchParams:
    """
    Parameters of the stretch transform.

    Attributes:
        intensity: Stretch rate in [1, 13]; 13 is gradual, 1 degrades fastest
        starting_pixel: Row (up/down) or column (left/right) of the original
                        image where the effect begins
        direction: Stretch direction
    """

    intensity: int = cte.DEFAULT_INTENSITY
    starting_pixel: int = 0
    direction: Direction = Direction.DOWN

    def dimension(self, width, height):
        """Extent of the image along the stretch axis."""
        return height if Direction.parse(self.direction).vertical else width

    def normalized(self, width, height):
        """
        Copy of the parameters clamped to a width x height image.

        Intensity is rounded and clamped to [MIN_INTENSITY, MAX_INTENSITY],
        the direction is parsed and the starting pixel is clamped to
        [0, dimension - 1].
        """
        direction = Direction.parse(self.direction)
        intensity = int(round(float(self.intensity)))
        intensity = min(max(intensity, cte.MIN_INTENSITY), cte.MAX_INTENSITY)
        dim = height if direction.vertical else width
        start = int(self.starting_pixel)
        start = min(max(start, 0), max(dim - 1, 0))
        return replace(
            self, intensity=intensity, starting_pixel=start, direction=direction
        )
