"""Klingon warship data model."""

from dataclasses import dataclass

from ..utils.constants import KLINGON_BASE_SHIELDS
from ..utils.rng import GameRNG
from .coordinates import Coordinates


@dataclass(eq=False)
class KlingonShip:
    """A Klingon warship inside a quadrant.

    Ships compare by identity: two ships with the same position and shield
    level are still different ships. The shield level doubles as the ship's
    health; it is destroyed once the level reaches zero.
    """

    sector: Coordinates  # Position within the owning quadrant
    shield_level: int  # Shield/health units

    @property
    def is_destroyed(self) -> bool:
        return self.shield_level <= 0

    def take_damage(self, damage: int) -> bool:
        """Apply damage to the ship.

        Args:
            damage: Units of damage to subtract from the shield level

        Returns:
            True if this hit destroyed the ship
        """
        was_alive = not self.is_destroyed
        self.shield_level -= damage
        return was_alive and self.is_destroyed

    def distance_to(self, target: Coordinates) -> float:
        return self.sector.distance_to(target)

    @classmethod
    def with_random_shields(cls, sector: Coordinates, rng: GameRNG) -> "KlingonShip":
        """Create a ship with the legacy random shield level (100-299)."""
        shield_level = int(KLINGON_BASE_SHIELDS * (0.5 + rng.random()))
        return cls(sector=sector, shield_level=shield_level)
