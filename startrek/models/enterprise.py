"""Enterprise data model: the player's ship."""

import logging
from dataclasses import dataclass, field

from ..utils.constants import (
    MAX_ENERGY,
    MAX_TORPEDOES,
    MINOR_DAMAGE_FLOOR,
    RANDOM_DAMAGE_EVENT_PROB,
    RANDOM_DAMAGE_PROB,
    LOW_ENERGY_FRACTION,
    LOW_SHIELD_WARNING,
    SYSTEM_HIT_THRESHOLD,
)
from ..utils.rng import GameRNG
from .coordinates import Coordinates
from .ship_system import ShipSystem

logger = logging.getLogger(__name__)

DESTROYED_MESSAGE = "THE ENTERPRISE HAS BEEN DESTROYED. THE FEDERATION WILL BE CONQUERED"
STARBASE_PROTECTION_MESSAGE = "STARBASE SHIELDS PROTECT THE ENTERPRISE"
SHIELDS_DROPPED_MESSAGE = "SHIELDS DROPPED FOR DOCKING PURPOSES"


@dataclass
class Enterprise:
    """The USS Enterprise.

    Energy and shields together form the ship's disposable power pool.
    System damage is a float per ShipSystem, stored in ordinal order:
    0 means fully operational, negative values are damage measured in
    stardates of repair time.
    """

    quadrant: Coordinates = field(default_factory=lambda: Coordinates(1, 1))
    sector: Coordinates = field(default_factory=lambda: Coordinates(1, 1))
    energy: int = MAX_ENERGY
    shields: int = 0
    torpedoes: int = MAX_TORPEDOES
    docked: bool = False
    max_energy: int = MAX_ENERGY
    max_torpedoes: int = MAX_TORPEDOES
    damage: list[float] = field(default_factory=lambda: [0.0] * len(ShipSystem))

    def __post_init__(self):
        """Validate ship data after initialization."""
        if len(self.damage) != len(ShipSystem):
            raise ValueError(f"Invalid damage table: {len(self.damage)} entries (must be {len(ShipSystem)})")
        if self.torpedoes < 0:
            raise ValueError(f"Invalid torpedoes: {self.torpedoes} (must be >= 0)")

    # -------------------------------------------------------------------------
    # System damage
    # -------------------------------------------------------------------------

    def get_system_damage(self, system: ShipSystem) -> float:
        return self.damage[system - 1]

    def set_system_damage(self, system: ShipSystem, value: float) -> None:
        self.damage[system - 1] = value

    def is_system_operational(self, system: ShipSystem) -> bool:
        return self.damage[system - 1] >= 0

    def damaged_systems(self) -> list[ShipSystem]:
        """Damaged systems in ordinal order."""
        return [system for system in ShipSystem if self.damage[system - 1] < 0]

    def repair_all_systems(self) -> None:
        for system in ShipSystem:
            self.damage[system - 1] = 0.0

    # -------------------------------------------------------------------------
    # Starbase services
    # -------------------------------------------------------------------------

    def resupply(self) -> None:
        """Refill energy and torpedoes; shields stay down while docked."""
        self.energy = self.max_energy
        self.torpedoes = self.max_torpedoes
        self.shields = 0

    def dock_at_starbase(self) -> str:
        """Dock, lowering shields.

        Returns:
            "SHIELDS DROPPED FOR DOCKING PURPOSES" if shields were up,
            otherwise an empty string
        """
        self.docked = True
        logger.debug(f"Docked at sector {self.sector} of quadrant {self.quadrant}")
        if self.shields > 0:
            self.shields = 0
            return SHIELDS_DROPPED_MESSAGE
        return ""

    def undock_from_starbase(self) -> None:
        if self.docked:
            logger.debug("Undocked from starbase")
        self.docked = False

    def transfer_to_shields(self, level: int) -> None:
        """Set the shield level, drawing from or returning to main energy.

        The energy + shields pool is conserved. Callers check the level
        against the pool first.
        """
        pool = self.energy + self.shields
        if not (0 <= level <= pool):
            raise ValueError(f"Invalid shield level: {level} (must be 0-{pool})")
        self.shields = level
        self.energy = pool - level

    # -------------------------------------------------------------------------
    # Combat damage
    # -------------------------------------------------------------------------

    def absorb_hit(self, damage: int, rng: GameRNG) -> list[str]:
        """Resolve incoming fire against shields, systems and hull.

        Combat rules:
        - Docked: starbase shields absorb everything, nothing changes
        - Shields >= damage: shields absorb it; a hit of 20+ units may also
          damage a random system
        - Otherwise: shields drop to 0 and the remainder comes off energy;
          energy <= 0 destroys the ship

        Args:
            damage: Total incoming damage
            rng: Shared game RNG

        Returns:
            Report lines
        """
        if self.docked:
            return [STARBASE_PROTECTION_MESSAGE]
        if damage <= 0:
            return []

        messages = []
        if self.shields >= damage:
            self.shields -= damage
            messages.append(f"      <SHIELDS DOWN TO {self.shields} UNITS>")
            damaged = self.apply_combat_damage(damage, rng)
            if damaged is not None:
                messages.append(f"DAMAGE CONTROL REPORTS '{damaged.display_name}' DAMAGED BY THE HIT'")
        else:
            hull_damage = damage - self.shields
            self.shields = 0
            self.energy -= hull_damage
            messages.append("      <SHIELDS DOWN TO 0 UNITS>")
            messages.append(f"HULL DAMAGE: {hull_damage} UNITS")
            if self.energy <= 0:
                logger.debug("Enterprise destroyed")
                messages.append("")
                messages.append(DESTROYED_MESSAGE)
        return messages

    def apply_combat_damage(self, hit: int, rng: GameRNG) -> ShipSystem | None:
        """Possibly damage a random system after shields absorbed a hit.

        Only hits of at least 20 units qualify; then the system is damaged
        when a fresh draw is <= 0.6 and the hit is more than 2% of the
        remaining shields.

        Args:
            hit: Damage absorbed by the shields
            rng: Shared game RNG

        Returns:
            The damaged system, or None
        """
        if hit < SYSTEM_HIT_THRESHOLD:
            return None

        ratio = hit / self.shields if self.shields > 0 else float(hit)
        if not (rng.random() <= 0.6 and ratio > 0.02):
            return None

        system = ShipSystem(rng.randint(1, len(ShipSystem)))
        self.damage[system - 1] -= ratio + 0.5 * rng.random()
        return system

    # -------------------------------------------------------------------------
    # Automatic repair
    # -------------------------------------------------------------------------

    def perform_automatic_repairs(self, warp_factor: float, rng: GameRNG) -> list[str]:
        """Repair systems while under way, then roll for a random damage event.

        Each damaged system recovers min(warp_factor, 1.0). A result between
        -0.1 and 0 is held at -0.1; a result >= 0 completes the repair.
        Afterwards there is a 20% chance that one random system is either
        damaged further (60%) or improved (40%); this can undo a repair
        completed in the same pass.

        Args:
            warp_factor: Warp factor of the move just made
            rng: Shared game RNG

        Returns:
            Damage control report lines (empty if nothing happened)
        """
        messages = []
        repair_amount = min(warp_factor, 1.0)

        for system in ShipSystem:
            current = self.damage[system - 1]
            if current >= 0:
                continue

            repaired = current + repair_amount
            if MINOR_DAMAGE_FLOOR < repaired < 0:
                self.damage[system - 1] = MINOR_DAMAGE_FLOOR
            elif repaired < 0:
                self.damage[system - 1] = repaired
            else:
                self.damage[system - 1] = 0.0
                if not messages:
                    messages.append("DAMAGE CONTROL REPORT:")
                messages.append(f"        {system.display_name} REPAIR COMPLETED.")

        if rng.random() <= RANDOM_DAMAGE_EVENT_PROB:
            system = ShipSystem(rng.randint(1, len(ShipSystem)))
            if not messages:
                messages.append("DAMAGE CONTROL REPORT:")
            if rng.random() < RANDOM_DAMAGE_PROB:
                self.damage[system - 1] -= rng.random() * 5 + 1
                messages.append(f"{system.display_name} DAMAGED")
            else:
                self.damage[system - 1] += rng.random() * 3 + 1
                messages.append(f"{system.display_name} STATE OF REPAIR IMPROVED")

        return messages

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def condition(self, enemies_present: bool) -> str:
        """Alert condition shown on the status display."""
        if self.docked:
            return "DOCKED"
        if enemies_present:
            return "*RED*"
        if self.energy < self.max_energy * LOW_ENERGY_FRACTION:
            return "YELLOW"
        return "GREEN"

    def shields_dangerously_low(self) -> bool:
        return self.shields < LOW_SHIELD_WARNING and not self.docked
