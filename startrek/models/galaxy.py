"""Galaxy data model: the 8x8 grid of quadrants."""

import logging

from ..utils.constants import GRID_SIZE, KLINGON_THRESHOLDS, STARBASE_THRESHOLD
from ..utils.rng import GameRNG
from .coordinates import Coordinates
from .klingon import KlingonShip
from .quadrant import Quadrant

logger = logging.getLogger(__name__)


def encode_quadrant(klingons: int, starbases: int, stars: int) -> int:
    """Pack quadrant contents as klingons*100 + starbases*10 + stars."""
    return klingons * 100 + starbases * 10 + stars


def decode_quadrant(code: int) -> tuple[int, int, int]:
    """Unpack a quadrant code into (klingons, starbases, stars)."""
    return code // 100, (code % 100) // 10, code % 10


class Galaxy:
    """The whole galaxy: packed quadrant summaries plus materialized quadrants.

    The packed codes are the authoritative summary of every quadrant. A
    Quadrant object is created from its code the first time it is
    requested and cached for the rest of the game; from then on its live
    objects (damaged Klingons, a destroyed starbase) persist. The two
    representations are re-synchronized inside remove_klingon and
    remove_starbase, the only destruction entry points.
    """

    def __init__(self, rng: GameRNG):
        """Generate a new galaxy.

        Args:
            rng: Shared game RNG (generation consumes 192 draws, plus two
                more if a starbase has to be forced)
        """
        self.rng = rng
        self._codes = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
        self._known = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
        self._explored: set[Coordinates] = set()
        self._quadrants: dict[Coordinates, Quadrant] = {}
        self.total_starbases = 0

        self._generate()

    @property
    def total_klingons(self) -> int:
        """Klingons left in the galaxy.

        Materialized quadrants report their living ships; the rest report
        the Klingon digit of their code.
        """
        total = 0
        for x in range(1, GRID_SIZE + 1):
            for y in range(1, GRID_SIZE + 1):
                coords = Coordinates(x, y)
                quadrant = self._quadrants.get(coords)
                if quadrant is not None:
                    total += quadrant.klingon_count
                else:
                    total += self._codes[x - 1][y - 1] // 100
        return total

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_quadrant_data(self, coords: Coordinates) -> int:
        """True packed code of a quadrant."""
        return self._codes[coords.x - 1][coords.y - 1]

    def get_known_data(self, coords: Coordinates) -> int:
        """Packed code as known to the player (0 if never explored)."""
        return self._known[coords.x - 1][coords.y - 1]

    def is_explored(self, coords: Coordinates) -> bool:
        return coords in self._explored

    def is_materialized(self, coords: Coordinates) -> bool:
        return coords in self._quadrants

    def mark_quadrant_explored(self, coords: Coordinates) -> None:
        """Reveal a quadrant's true code to the player."""
        self._explored.add(coords)
        self._known[coords.x - 1][coords.y - 1] = self._codes[coords.x - 1][coords.y - 1]

    def get_quadrant(self, coords: Coordinates) -> Quadrant:
        """Return the quadrant at coords, materializing it on first access."""
        quadrant = self._quadrants.get(coords)
        if quadrant is None:
            quadrant = self._materialize(coords)
            self._quadrants[coords] = quadrant
        return quadrant

    # -------------------------------------------------------------------------
    # Destruction events
    # -------------------------------------------------------------------------

    def remove_klingon(self, coords: Coordinates, klingon: KlingonShip | None = None) -> None:
        """Record the destruction of a Klingon in a quadrant.

        Removes the ship from the materialized quadrant (if given) and
        brings the packed Klingon digit back in line with it.

        Args:
            coords: Quadrant where the Klingon was destroyed
            klingon: The destroyed ship, if it should be taken off the grid
        """
        quadrant = self._quadrants.get(coords)
        if quadrant is not None and klingon is not None:
            quadrant.remove_klingon(klingon)

        klingons, starbases, stars = decode_quadrant(self.get_quadrant_data(coords))
        if quadrant is not None:
            klingons = min(quadrant.klingon_count, 9)
        elif klingons > 0:
            klingons -= 1
        self._set_code(coords, encode_quadrant(klingons, starbases, stars))

    def remove_starbase(self, coords: Coordinates) -> None:
        """Record the destruction of the starbase in a quadrant.

        Clears the starbase from the materialized quadrant and the packed
        code, and decrements the galaxy-wide starbase total once.

        Args:
            coords: Quadrant whose starbase was destroyed
        """
        klingons, starbases, stars = decode_quadrant(self.get_quadrant_data(coords))
        had_starbase = starbases > 0

        quadrant = self._quadrants.get(coords)
        if quadrant is not None and quadrant.remove_starbase():
            had_starbase = True

        if had_starbase:
            self.total_starbases = max(0, self.total_starbases - 1)
            logger.debug(f"Starbase in quadrant {coords} destroyed, {self.total_starbases} left")
        self._set_code(coords, encode_quadrant(klingons, 0, stars))

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def _set_code(self, coords: Coordinates, code: int) -> None:
        self._codes[coords.x - 1][coords.y - 1] = code
        if coords in self._explored:
            self._known[coords.x - 1][coords.y - 1] = code

    def _generate(self) -> None:
        """Fill every quadrant code using the legacy generation rules."""
        self.total_starbases = 0

        for x in range(1, GRID_SIZE + 1):
            for y in range(1, GRID_SIZE + 1):
                klingons = 0
                r1 = self.rng.random()
                for threshold, count in KLINGON_THRESHOLDS:
                    if r1 > threshold:
                        klingons = count
                        break

                starbases = 0
                if self.rng.random() > STARBASE_THRESHOLD:
                    starbases = 1
                    self.total_starbases += 1

                stars = self.rng.legacy_index()

                self._codes[x - 1][y - 1] = encode_quadrant(klingons, starbases, stars)

        # There must be somewhere to resupply
        if self.total_starbases == 0:
            coords = Coordinates(self.rng.legacy_index(), self.rng.legacy_index())
            klingons, _, stars = decode_quadrant(self.get_quadrant_data(coords))
            self._codes[coords.x - 1][coords.y - 1] = encode_quadrant(klingons, 1, stars)
            self.total_starbases = 1

        logger.debug(
            f"Galaxy generated: {self.total_klingons} Klingons, {self.total_starbases} starbases"
        )

    def _materialize(self, coords: Coordinates) -> Quadrant:
        """Build a Quadrant from its packed code.

        Klingons are placed first, then the starbase, then stars, each on a
        random empty sector.
        """
        quadrant = Quadrant()
        klingons, starbases, stars = decode_quadrant(self.get_quadrant_data(coords))

        for _ in range(klingons):
            sector = quadrant.find_empty_sector(self.rng)
            if sector is not None:
                quadrant.place_klingon(KlingonShip.with_random_shields(sector, self.rng))

        if starbases > 0:
            sector = quadrant.find_empty_sector(self.rng)
            if sector is not None:
                quadrant.place_starbase(sector)

        for _ in range(stars):
            sector = quadrant.find_empty_sector(self.rng)
            if sector is not None:
                quadrant.place_star(sector)

        logger.debug(f"Quadrant {coords} materialized from code {klingons}{starbases}{stars}")
        return quadrant
