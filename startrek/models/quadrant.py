"""Quadrant data model: one 8x8 sector grid of the galaxy."""

from ..utils.constants import (
    EMPTY_GLYPH,
    ENTERPRISE_GLYPH,
    GRID_SIZE,
    KLINGON_GLYPH,
    STAR_GLYPH,
    STARBASE_GLYPH,
)
from ..utils.rng import GameRNG
from .coordinates import Coordinates
from .klingon import KlingonShip


class Quadrant:
    """An 8x8 grid of sectors.

    Each sector holds a 3-character glyph (the short range sensor display
    format) and at most one object. The glyph grid and the membership
    attributes (klingons, starbase, stars, enterprise) are always updated
    together by the place/remove methods below.
    """

    def __init__(self):
        """Initialize an empty quadrant."""
        self._sectors = [[EMPTY_GLYPH] * GRID_SIZE for _ in range(GRID_SIZE)]
        self.klingons: list[KlingonShip] = []
        self.starbase: Coordinates | None = None
        self.stars: list[Coordinates] = []
        self.enterprise: Coordinates | None = None

    @property
    def klingon_count(self) -> int:
        """Number of living Klingon ships."""
        return sum(1 for k in self.klingons if not k.is_destroyed)

    @property
    def has_starbase(self) -> bool:
        return self.starbase is not None

    @property
    def star_count(self) -> int:
        return len(self.stars)

    def living_klingons(self) -> list[KlingonShip]:
        """Living Klingon ships in placement order."""
        return [k for k in self.klingons if not k.is_destroyed]

    def klingon_at(self, sector: Coordinates) -> KlingonShip | None:
        """Return the living Klingon in a sector, if any."""
        for klingon in self.klingons:
            if klingon.sector == sector and not klingon.is_destroyed:
                return klingon
        return None

    # -------------------------------------------------------------------------
    # Sector glyphs
    # -------------------------------------------------------------------------

    def get_sector_display(self, sector: Coordinates) -> str:
        return self._sectors[sector.x - 1][sector.y - 1]

    def set_sector_display(self, sector: Coordinates, glyph: str) -> None:
        if len(glyph) != 3:
            raise ValueError(f"Sector display must be exactly 3 characters (got {glyph!r})")
        self._sectors[sector.x - 1][sector.y - 1] = glyph

    def is_sector_empty(self, sector: Coordinates) -> bool:
        return self.get_sector_display(sector) == EMPTY_GLYPH

    def find_empty_sector(self, rng: GameRNG) -> Coordinates | None:
        """Pick a uniformly random empty sector.

        Sectors are scanned column by column (x outer, y inner) and one of
        the empty ones is chosen, so the draw depends only on the grid
        contents and the RNG state.

        Args:
            rng: Shared game RNG

        Returns:
            Coordinates of an empty sector, or None if the quadrant is full
        """
        empty = [
            Coordinates(x, y)
            for x in range(1, GRID_SIZE + 1)
            for y in range(1, GRID_SIZE + 1)
            if self._sectors[x - 1][y - 1] == EMPTY_GLYPH
        ]
        if not empty:
            return None
        return rng.choice(empty)

    # -------------------------------------------------------------------------
    # Placement and removal
    # -------------------------------------------------------------------------

    def place_enterprise(self, sector: Coordinates) -> None:
        self.enterprise = sector
        self.set_sector_display(sector, ENTERPRISE_GLYPH)

    def remove_enterprise(self) -> None:
        if self.enterprise is not None:
            self.set_sector_display(self.enterprise, EMPTY_GLYPH)
            self.enterprise = None

    def place_klingon(self, klingon: KlingonShip) -> None:
        self.set_sector_display(klingon.sector, KLINGON_GLYPH)
        if klingon not in self.klingons:
            self.klingons.append(klingon)

    def remove_klingon(self, klingon: KlingonShip) -> None:
        if klingon in self.klingons:
            self.set_sector_display(klingon.sector, EMPTY_GLYPH)
            self.klingons.remove(klingon)

    def place_starbase(self, sector: Coordinates) -> None:
        if self.starbase is not None and self.starbase != sector:
            self.set_sector_display(self.starbase, EMPTY_GLYPH)
        self.set_sector_display(sector, STARBASE_GLYPH)
        self.starbase = sector

    def remove_starbase(self) -> bool:
        """Remove the starbase.

        Returns:
            True if a starbase was present
        """
        if self.starbase is None:
            return False
        self.set_sector_display(self.starbase, EMPTY_GLYPH)
        self.starbase = None
        return True

    def place_star(self, sector: Coordinates) -> None:
        self.set_sector_display(sector, STAR_GLYPH)
        if sector not in self.stars:
            self.stars.append(sector)

    def has_star_at(self, sector: Coordinates) -> bool:
        return sector in self.stars

    # -------------------------------------------------------------------------
    # Summaries
    # -------------------------------------------------------------------------

    def galaxy_code(self) -> int:
        """Packed summary: hundreds=Klingons, tens=starbases, units=stars."""
        klingons = min(self.klingon_count, 9)
        starbases = 1 if self.has_starbase else 0
        stars = min(self.star_count, 9)
        return klingons * 100 + starbases * 10 + stars

    def glyph_rows(self) -> list[list[str]]:
        """Glyphs row by row (y outer, x inner), as drawn by short range sensors."""
        return [
            [self._sectors[x - 1][y - 1] for x in range(1, GRID_SIZE + 1)]
            for y in range(1, GRID_SIZE + 1)
        ]

    def display_string(self) -> str:
        """The 8 glyph rows, each glyph preceded by a space."""
        return "\n".join("".join(f" {glyph}" for glyph in row) for row in self.glyph_rows())
