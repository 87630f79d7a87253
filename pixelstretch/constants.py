"""
Global constants for PixelStretch.

Static tables driving the stretch transform plus a handful of tunables shared
by the I/O layer and the command line tools.

Author: B.G.
"""

# Pixel layout
CHANNELS = 4
OPAQUE = 255

# (run length, base repetition count), applied in order
BASE_RUNS = (
    (1, 13),
    (2, 8),
    (3, 5),
    (5, 3),
    (8, 2),
    (13, 1),
    (21, 1),
    (34, 1),
    (55, 1),
    (89, 1),
    (144, 1),
    (233, 1),
    (377, 1),
    (610, 1),
    (987, 1),
)

# Repetition multiplier per intensity (13 = gentlest, 1 = strongest)
INTENSITY_SCALE = {
    13: 1.00,
    12: 1.25,
    11: 1.50,
    10: 1.75,
    9: 2.00,
    8: 2.25,
    7: 2.50,
    6: 2.75,
    5: 3.00,
    4: 3.25,
    3: 3.50,
    2: 3.75,
    1: 4.00,
}

MIN_INTENSITY = 1
MAX_INTENSITY = 13
DEFAULT_INTENSITY = 13
DEFAULT_DIRECTION = "down"

# I/O and display
MAX_DISPLAY_SIZE = 600
OUTPUT_PREFIX = "stretched_"

# Field pool: released fields kept for reuse, oldest destroyed past this count
POOL_MAX_FREE = 16
