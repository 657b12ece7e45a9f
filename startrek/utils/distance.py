"""Distance calculations for the sector grid."""

import math


def euclidean_distance(x1: int, y1: int, x2: int, y2: int) -> float:
    """Calculate straight-line distance between two grid points.

    Weapons fire and Klingon return fire both scale with this distance
    (FND in the legacy listing).

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Euclidean distance between the two points

    Examples:
        >>> euclidean_distance(1, 1, 4, 5)
        5.0
        >>> euclidean_distance(4, 4, 5, 5)
        1.4142135623730951
    """
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def is_adjacent(x1: int, y1: int, x2: int, y2: int) -> bool:
    """Check whether two sectors touch (8-connected, excluding the same sector).

    Args:
        x1: X coordinate of first sector
        y1: Y coordinate of first sector
        x2: X coordinate of second sector
        y2: Y coordinate of second sector

    Returns:
        True if the sectors are neighbours
    """
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    return dx <= 1 and dy <= 1 and (dx > 0 or dy > 0)
