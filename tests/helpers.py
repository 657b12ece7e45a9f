"""Shared test doubles and board-setup helpers."""

from startrek.models.coordinates import Coordinates
from startrek.models.game_state import GameState
from startrek.utils.constants import EMPTY_GLYPH, GRID_SIZE
from startrek.utils.rng import GameRNG


class ScriptedRNG(GameRNG):
    """GameRNG that returns queued values before falling back to its seed.

    random() pops from ``values`` and randint() pops from ``ints``; once a
    queue is empty the seeded generator takes over. choice() always uses
    the seeded generator.
    """

    def __init__(self, values=(), ints=(), seed: int = 0):
        super().__init__(seed)
        self.values = list(values)
        self.ints = list(ints)

    def random(self) -> float:
        if self.values:
            return self.values.pop(0)
        return super().random()

    def legacy_index(self) -> int:
        return int(self.random() * 7.98 + 1.01)

    def randint(self, a: int, b: int) -> int:
        if self.ints:
            return self.ints.pop(0)
        return super().randint(a, b)


def clear_quadrant(state: GameState, coords: Coordinates) -> None:
    """Remove every Klingon, starbase and star from a quadrant."""
    quadrant = state.galaxy.get_quadrant(coords)
    for klingon in list(quadrant.klingons):
        state.galaxy.remove_klingon(coords, klingon)
    if quadrant.has_starbase:
        state.galaxy.remove_starbase(coords)
    for star in list(quadrant.stars):
        quadrant.set_sector_display(star, EMPTY_GLYPH)
        quadrant.stars.remove(star)


def place_ship(state: GameState, quadrant: Coordinates, sector: Coordinates, clear: bool = True) -> None:
    """Move the Enterprise to an (optionally emptied) quadrant."""
    if clear:
        clear_quadrant(state, quadrant)
    if quadrant == state.enterprise.quadrant:
        state.move_enterprise_to_sector(sector)
    else:
        state.move_enterprise_to_quadrant(quadrant, sector)


def remove_all_klingons(state: GameState) -> None:
    """Destroy every Klingon in the galaxy."""
    for x in range(1, GRID_SIZE + 1):
        for y in range(1, GRID_SIZE + 1):
            coords = Coordinates(x, y)
            quadrant = state.galaxy.get_quadrant(coords)
            for klingon in list(quadrant.klingons):
                state.galaxy.remove_klingon(coords, klingon)


def track_sectors(message: str) -> list[str]:
    """Sectors listed in a torpedo track."""
    lines = message.splitlines()
    return [
        line.strip()
        for line in lines
        if line.startswith("               ") and "," in line and line.strip()[0].isdigit()
    ]
