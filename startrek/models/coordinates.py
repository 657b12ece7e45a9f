"""Grid coordinate value type."""

from dataclasses import dataclass

from ..utils.constants import GRID_SIZE
from ..utils.distance import euclidean_distance


@dataclass(frozen=True)
class Coordinates:
    """A 1-based position on the 8x8 grid.

    Used both for quadrants within the galaxy and for sectors within a
    quadrant. Both axes run from 1 to 8, matching the legacy game.
    """

    x: int
    y: int

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not (1 <= self.x <= GRID_SIZE):
            raise ValueError(f"Invalid x coordinate: {self.x} (must be 1-{GRID_SIZE})")
        if not (1 <= self.y <= GRID_SIZE):
            raise ValueError(f"Invalid y coordinate: {self.y} (must be 1-{GRID_SIZE})")

    @staticmethod
    def is_valid(x: int, y: int) -> bool:
        """Check whether (x, y) is on the grid without raising."""
        return 1 <= x <= GRID_SIZE and 1 <= y <= GRID_SIZE

    def distance_to(self, other: "Coordinates") -> float:
        """Euclidean distance to another position."""
        return euclidean_distance(self.x, self.y, other.x, other.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
