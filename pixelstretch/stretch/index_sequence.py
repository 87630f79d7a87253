"""
Index sequence generation for the stretch transform.

The index sequence lists, for each consecutive pair of source rows processed,
how many interpolated rows are inserted between them. It only depends on the
intensity: short runs first (subtle stretch right after the starting pixel),
then Fibonacci-growing runs that flood color over ever larger spans.

Author: B.G.
"""

import math

from .. import constants as cte


def _check_intensity(intensity):
    if isinstance(intensity, bool) or int(intensity) != intensity:
        raise ValueError(f"intensity must be an integer, got {intensity!r}")
    intensity = int(intensity)
    if intensity not in cte.INTENSITY_SCALE:
        raise ValueError(
            f"intensity must be in [{cte.MIN_INTENSITY}, {cte.MAX_INTENSITY}], got {intensity}"
        )
    return intensity


def scaled_counts(intensity):
    """
    Repetition count of each base run for the given intensity.

    Returns:
        list[tuple[int, int]]: (run length, count) pairs in table order
    """
    factor = cte.INTENSITY_SCALE[_check_intensity(intensity)]
    return [(value, math.floor(count * factor)) for value, count in cte.BASE_RUNS]


def generate_index_sequence(intensity=cte.DEFAULT_INTENSITY):
    """
    Build the run-length sequence for an intensity.

    Args:
        intensity: Integer in [1, 13]

    Returns:
        list[int]: Run lengths, each base value repeated floor(count * factor) times

    Example:
        >>> generate_index_sequence(13)[:15]
        [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2]
    """
    sequence = []
    for value, count in scaled_counts(intensity):
        sequence.extend([value] * count)
    return sequence


def index_sequence_length(intensity):
    """Length of ``generate_index_sequence(intensity)`` without building it."""
    return sum(count for _, count in scaled_counts(intensity))


__all__ = ["generate_index_sequence", "index_sequence_length", "scaled_counts"]
