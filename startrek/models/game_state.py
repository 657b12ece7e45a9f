"""Game state container."""

import logging
from dataclasses import dataclass, field

from ..utils.constants import MISSION_BASE_DAYS, MISSION_EXTRA_DAYS, MOVE_TIME
from ..utils.rng import GameRNG
from .coordinates import Coordinates
from .enterprise import Enterprise
from .galaxy import Galaxy
from .quadrant import Quadrant
from .status import MissionBriefing, ShipStatus

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Main game state container.

    Owns the galaxy, the Enterprise, the mission clock and the single RNG
    stream that galaxy generation, game setup and every command draw from.
    All command handlers operate on this state.
    """

    seed: int | None = None  # RNG seed (None for an unseeded game)
    rng: GameRNG | None = None  # Shared RNG instance
    galaxy: Galaxy = field(init=False, repr=False)
    enterprise: Enterprise = field(init=False)
    current_stardate: float = field(init=False)
    starting_stardate: float = field(init=False)
    mission_time_limit: int = field(init=False)  # Days available
    initial_klingon_count: int = field(init=False)  # For the efficiency rating
    ship_stranded: bool = field(default=False, init=False)
    briefing: MissionBriefing = field(init=False, repr=False)

    def __post_init__(self):
        """Generate the galaxy and set up the mission."""
        if self.rng is None:
            self.rng = GameRNG(self.seed)

        self.galaxy = Galaxy(self.rng)
        self.enterprise = Enterprise()

        self.current_stardate = float(int(self.rng.random() * 20 + 20) * 100)
        self.starting_stardate = self.current_stardate

        self.mission_time_limit = MISSION_BASE_DAYS + int(self.rng.random() * MISSION_EXTRA_DAYS)
        if self.galaxy.total_klingons > self.mission_time_limit:
            self.mission_time_limit = self.galaxy.total_klingons + 1

        self._place_enterprise_randomly()
        self.initial_klingon_count = self.galaxy.total_klingons

        self.briefing = MissionBriefing(
            klingons=self.initial_klingon_count,
            starting_stardate=self.starting_stardate,
            mission_end_stardate=self.mission_end_stardate,
            mission_time_limit=self.mission_time_limit,
            starbases=self.starbases_remaining,
        )
        logger.debug(
            f"Mission set: {self.initial_klingon_count} Klingons, "
            f"{self.mission_time_limit} days from stardate {self.starting_stardate:.1f}"
        )

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def mission_end_stardate(self) -> float:
        return self.starting_stardate + self.mission_time_limit

    @property
    def remaining_time(self) -> float:
        return self.mission_end_stardate - self.current_stardate

    @property
    def time_used(self) -> float:
        return self.current_stardate - self.starting_stardate

    @property
    def klingons_remaining(self) -> int:
        return self.galaxy.total_klingons

    @property
    def starbases_remaining(self) -> int:
        return self.galaxy.total_starbases

    @property
    def current_quadrant(self) -> Quadrant:
        """Quadrant the Enterprise is in (materialized on demand)."""
        return self.galaxy.get_quadrant(self.enterprise.quadrant)

    # -------------------------------------------------------------------------
    # Terminal conditions
    # -------------------------------------------------------------------------

    @property
    def is_mission_complete(self) -> bool:
        return self.klingons_remaining <= 0

    @property
    def is_ship_stranded(self) -> bool:
        return self.ship_stranded

    @property
    def is_mission_failed(self) -> bool:
        return self.remaining_time <= 0 or self.enterprise.energy <= 0 or self.ship_stranded

    @property
    def is_game_over(self) -> bool:
        return self.is_mission_complete or self.is_mission_failed

    def set_ship_stranded(self) -> None:
        self.ship_stranded = True
        logger.debug("Enterprise stranded")

    def mission_status(self) -> str:
        """One-line mission status used by the status and game-over screens."""
        if self.is_mission_complete:
            return "MISSION ACCOMPLISHED!"
        if self.remaining_time <= 0:
            return "MISSION FAILED - TIME EXPIRED"
        if self.enterprise.energy <= 0:
            return "MISSION FAILED - ENTERPRISE DESTROYED"
        if self.ship_stranded:
            return "MISSION FAILED - SHIP STRANDED IN SPACE"
        return f"MISSION IN PROGRESS - {self.klingons_remaining} KLINGONS REMAINING"

    def efficiency_rating(self) -> float:
        """Legacy rating 1000 * (initial Klingons / stardates used)^2.

        Returns 0 unless the mission is complete. At least one stardate is
        counted as used.
        """
        if not self.is_mission_complete:
            return 0.0
        time_used = max(self.time_used, MOVE_TIME)
        return 1000 * (self.initial_klingon_count / time_used) ** 2

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def advance_time(self, stardates: float) -> None:
        self.current_stardate += stardates

    def move_enterprise_to_quadrant(self, quadrant: Coordinates, sector: Coordinates) -> None:
        """Move the Enterprise to a sector of another quadrant and explore it."""
        self.current_quadrant.remove_enterprise()
        self.enterprise.quadrant = quadrant
        self.enterprise.sector = sector
        self.current_quadrant.place_enterprise(sector)
        self.galaxy.mark_quadrant_explored(quadrant)

    def move_enterprise_to_sector(self, sector: Coordinates) -> None:
        """Move the Enterprise within its current quadrant."""
        quadrant = self.current_quadrant
        quadrant.remove_enterprise()
        self.enterprise.sector = sector
        quadrant.place_enterprise(sector)

    def status(self) -> ShipStatus:
        """Snapshot of the ship and mission."""
        quadrant = self.current_quadrant
        enterprise = self.enterprise
        return ShipStatus(
            stardate=self.current_stardate,
            remaining_time=self.remaining_time,
            condition=enterprise.condition(quadrant.klingon_count > 0),
            quadrant=(enterprise.quadrant.x, enterprise.quadrant.y),
            sector=(enterprise.sector.x, enterprise.sector.y),
            energy=enterprise.energy,
            shields=enterprise.shields,
            torpedoes=enterprise.torpedoes,
            docked=enterprise.docked,
            klingons_remaining=self.klingons_remaining,
            klingons_in_quadrant=quadrant.klingon_count,
            starbases_remaining=self.starbases_remaining,
            damaged_systems=[system.display_name for system in enterprise.damaged_systems()],
            mission_status=self.mission_status(),
        )

    def _place_enterprise_randomly(self) -> None:
        """Pick the starting quadrant and sector with the legacy formula."""
        quadrant_coords = Coordinates(self.rng.legacy_index(), self.rng.legacy_index())
        sector = Coordinates(self.rng.legacy_index(), self.rng.legacy_index())

        self.enterprise.quadrant = quadrant_coords
        quadrant = self.galaxy.get_quadrant(quadrant_coords)
        if not quadrant.is_sector_empty(sector):
            sector = quadrant.find_empty_sector(self.rng)
            if sector is None:
                raise ValueError(f"Quadrant {quadrant_coords} has no room for the Enterprise")

        self.enterprise.sector = sector
        quadrant.place_enterprise(sector)
        self.galaxy.mark_quadrant_explored(quadrant_coords)
