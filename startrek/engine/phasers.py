"""PHA command: phaser fire against every Klingon in the quadrant."""

import logging

from ..models.game_state import GameState
from ..models.klingon import KlingonShip
from ..models.ship_system import ShipSystem
from ..utils.constants import MOVE_TIME, PHASER_SIGNIFICANT_HIT
from .combat import klingon_counter_attack
from .results import CommandError, CommandResult, ErrorType

logger = logging.getLogger(__name__)

NO_ENEMY_MESSAGE = (
    "SCIENCE OFFICER SPOCK REPORTS  'SENSORS SHOW NO ENEMY SHIPS\n"
    "                                IN THIS QUADRANT'"
)


def _validate(state: GameState, args: list[str]) -> tuple[int, list[KlingonShip]]:
    """Check a PHA command and return (energy, targets).

    Raises:
        CommandError: If the command cannot be carried out
    """
    enterprise = state.enterprise

    if not enterprise.is_system_operational(ShipSystem.PHASER_CONTROL):
        raise CommandError(ErrorType.SYSTEM_DAMAGED, "PHASERS INOPERATIVE")

    if not args:
        raise CommandError(
            ErrorType.INVALID_INPUT,
            f"PHASERS LOCKED ON TARGET;  ENERGY AVAILABLE = {enterprise.energy} UNITS\n"
            "Example: PHA 200",
        )

    try:
        energy = int(args[0])
    except ValueError:
        energy = 0
    if energy <= 0:
        raise CommandError(ErrorType.INVALID_INPUT, "INVALID ENERGY AMOUNT. MUST BE A POSITIVE NUMBER")

    if enterprise.energy < energy:
        raise CommandError(
            ErrorType.INSUFFICIENT_RESOURCE,
            f"INSUFFICIENT ENERGY. AVAILABLE = {enterprise.energy} UNITS",
        )

    targets = state.current_quadrant.living_klingons()
    if not targets:
        raise CommandError(ErrorType.NO_TARGET, NO_ENEMY_MESSAGE)

    return energy, targets


def execute_phasers(state: GameState, args: list[str]) -> CommandResult:
    """Execute PHA <energy>.

    The energy is split evenly between the Klingons in the quadrant. A
    damaged shield control wastes a random share of it; a damaged library
    computer degrades each hit. A hit only registers if it exceeds 15% of
    the target's shields.

    Args:
        state: Current game state
        args: Raw arguments (energy to fire)

    Returns:
        CommandResult with the combat report; takes one stardate
    """
    try:
        energy, targets = _validate(state, args)
    except CommandError as e:
        return CommandResult.from_error(e)

    enterprise = state.enterprise
    quadrant_coords = enterprise.quadrant
    enterprise.energy -= energy

    effective_energy = energy
    if not enterprise.is_system_operational(ShipSystem.SHIELD_CONTROL):
        effective_energy = int(energy * state.rng.random())

    lines = []
    computer_damaged = not enterprise.is_system_operational(ShipSystem.LIBRARY_COMPUTER)
    if computer_damaged:
        lines.append("COMPUTER FAILURE HAMPERS ACCURACY")

    energy_per_target = effective_energy // len(targets)
    for klingon in targets:
        distance = enterprise.sector.distance_to(klingon.sector)
        damage = int((energy_per_target / distance) * (state.rng.random() + 2))
        if computer_damaged:
            damage = int(damage * (0.5 + state.rng.random() * 0.5))

        position = f"{klingon.sector.x},{klingon.sector.y}"
        if damage <= PHASER_SIGNIFICANT_HIT * klingon.shield_level:
            lines.append(f"SENSORS SHOW NO DAMAGE TO ENEMY AT {position}")
            continue

        destroyed = klingon.take_damage(damage)
        lines.append(f"{damage} UNIT HIT ON KLINGON AT SECTOR {position}")
        if destroyed:
            lines.append("*** KLINGON DESTROYED ***")
            state.galaxy.remove_klingon(quadrant_coords, klingon)
        else:
            lines.append(f"   (SENSORS SHOW {klingon.shield_level} UNITS REMAINING)")

    logger.debug(f"Phasers fired {energy} units ({effective_energy} effective) at {len(targets)} targets")

    if state.klingons_remaining <= 0:
        lines.append("")
        lines.append("*** MISSION ACCOMPLISHED ***")
        return CommandResult.ok("\n".join(lines), time_consumed=MOVE_TIME)

    lines.extend(klingon_counter_attack(state))
    return CommandResult.ok("\n".join(lines), time_consumed=MOVE_TIME)
