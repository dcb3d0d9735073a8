"""
Level Mapper

Converts a percentage mark into a national achievement level (1-7).
"""

from .constants import LEVEL_THRESHOLDS, MIN_LEVEL


def level_of(mark: float) -> int:
    """
    Map a percentage mark to its achievement level.

    Lower bounds are inclusive, so 80 is level 7 and 79 is level 6.
    Marks outside 0-100 are not rejected: anything below 30 is level 1 and
    anything at or above 80 is level 7.

    Args:
        mark: Percentage mark

    Returns:
        Achievement level between 1 and 7
    """
    for lower_bound, level in LEVEL_THRESHOLDS:
        if mark >= lower_bound:
            return level
    return MIN_LEVEL
