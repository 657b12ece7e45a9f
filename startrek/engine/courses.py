"""Course direction tables and interpolation.

A course is a number from 1.0 up to (but excluding) 9.0; course 9 is the
same heading as course 1. Whole courses index an 8-point compass table,
fractional courses interpolate linearly between neighbouring entries.

Navigation and torpedo fire use different tables. Navigation works in
galaxy coordinates where course 1 increases y; torpedoes work in the
short range scan orientation where course 1 decreases y (up the screen)
and course 3 increases x.
"""

import math

NAVIGATION_DIRECTIONS = {
    1: (0.0, 1.0),
    2: (-1.0, 1.0),
    3: (-1.0, 0.0),
    4: (-1.0, -1.0),
    5: (0.0, -1.0),
    6: (1.0, -1.0),
    7: (1.0, 0.0),
    8: (1.0, 1.0),
}

TORPEDO_DIRECTIONS = {
    1: (0.0, -1.0),
    2: (1.0, -1.0),
    3: (1.0, 0.0),
    4: (1.0, 1.0),
    5: (0.0, 1.0),
    6: (-1.0, 1.0),
    7: (-1.0, 0.0),
    8: (-1.0, -1.0),
}


def parse_course(text: str) -> float | None:
    """Parse a course argument.

    Args:
        text: Raw argument

    Returns:
        Course as a float, or None if the text is not a finite number
    """
    try:
        course = float(text)
    except ValueError:
        return None
    if not math.isfinite(course):
        return None
    return course


def normalize_course(course: float) -> float:
    """Map course 9 onto course 1."""
    return 1.0 if course == 9.0 else course


def course_vector(course: float, table: dict[int, tuple[float, float]]) -> tuple[float, float]:
    """Direction vector (dx, dy) for a course.

    ``d = t[c] + (t[c+1] - t[c]) * frac`` with the table read modulo 8, so
    course 8.5 interpolates between entries 8 and 1 and course 9 equals
    course 1.

    Args:
        course: Course in [1.0, 9.0]
        table: NAVIGATION_DIRECTIONS or TORPEDO_DIRECTIONS

    Returns:
        Interpolated direction vector
    """
    whole = int(course)
    fraction = course - whole
    x1, y1 = table[(whole - 1) % 8 + 1]
    x2, y2 = table[whole % 8 + 1]
    return x1 + (x2 - x1) * fraction, y1 + (y2 - y1) * fraction
