"""TOR command: photon torpedo fire."""

import logging

from ..models.coordinates import Coordinates
from ..models.game_state import GameState
from ..models.ship_system import ShipSystem
from ..utils.constants import GRID_SIZE, MOVE_TIME, TORPEDO_ENERGY_COST
from .combat import klingon_counter_attack
from .courses import TORPEDO_DIRECTIONS, course_vector, normalize_course, parse_course
from .results import CommandError, CommandResult, ErrorType

logger = logging.getLogger(__name__)

BAD_COURSE_MESSAGE = "ENSIGN CHEKOV REPORTS,  'INCORRECT COURSE DATA, SIR!'"


def _validate(state: GameState, args: list[str]) -> float:
    """Check a TOR command and return the course.

    Raises:
        CommandError: If the command cannot be carried out
    """
    enterprise = state.enterprise

    if enterprise.torpedoes <= 0:
        raise CommandError(ErrorType.RESOURCE_EXHAUSTED, "ALL PHOTON TORPEDOES EXPENDED")

    if not enterprise.is_system_operational(ShipSystem.PHOTON_TUBES):
        raise CommandError(ErrorType.SYSTEM_DAMAGED, "PHOTON TUBES ARE NOT OPERATIONAL")

    if not args:
        raise CommandError(
            ErrorType.INVALID_INPUT,
            "PHOTON TORPEDO COURSE REQUIRED (1-9)\nExample: TOR 1.5",
        )

    course = parse_course(args[0])
    if course is None:
        raise CommandError(ErrorType.INVALID_INPUT, BAD_COURSE_MESSAGE)
    course = normalize_course(course)
    if not (1.0 <= course < 9.0):
        raise CommandError(ErrorType.INVALID_INPUT, BAD_COURSE_MESSAGE)

    return course


def execute_torpedoes(state: GameState, args: list[str]) -> CommandResult:
    """Execute TOR <course>.

    The torpedo steps one unit along the course from the ship's sector,
    rounding to the nearest sector after each step, until it leaves the
    quadrant or hits something. Klingons are destroyed outright, stars
    absorb the torpedo, and a starbase hit destroys the starbase.

    Args:
        state: Current game state
        args: Raw arguments (course)

    Returns:
        CommandResult with the torpedo track; takes one stardate
    """
    try:
        course = _validate(state, args)
    except CommandError as e:
        return CommandResult.from_error(e)

    enterprise = state.enterprise
    enterprise.torpedoes -= 1
    enterprise.energy -= TORPEDO_ENERGY_COST

    dx, dy = course_vector(course, TORPEDO_DIRECTIONS)
    x = float(enterprise.sector.x)
    y = float(enterprise.sector.y)

    lines = ["TORPEDO TRACK:"]
    while True:
        x += dx
        y += dy
        sector_x = int(x + 0.5)
        sector_y = int(y + 0.5)

        if not (1 <= sector_x <= GRID_SIZE and 1 <= sector_y <= GRID_SIZE):
            lines.append("TORPEDO MISSED")
            break

        lines.append(f"               {sector_x},{sector_y}")
        if _resolve_impact(state, Coordinates(sector_x, sector_y), lines):
            break

    if state.current_quadrant.klingon_count > 0:
        lines.extend(klingon_counter_attack(state))

    return CommandResult.ok("\n".join(lines), time_consumed=MOVE_TIME)


def _resolve_impact(state: GameState, sector: Coordinates, lines: list[str]) -> bool:
    """Apply the torpedo's effect on a sector.

    Returns:
        True if the torpedo stopped in this sector
    """
    quadrant = state.current_quadrant
    quadrant_coords = state.enterprise.quadrant

    if quadrant.is_sector_empty(sector):
        return False

    klingon = quadrant.klingon_at(sector)
    if klingon is not None:
        klingon.take_damage(klingon.shield_level)
        state.galaxy.remove_klingon(quadrant_coords, klingon)
        lines.append("*** KLINGON DESTROYED ***")
        if state.klingons_remaining <= 0:
            lines.append("")
            lines.append("*** MISSION ACCOMPLISHED ***")
        return True

    if quadrant.has_star_at(sector):
        lines.append(f"STAR AT {sector.x},{sector.y} ABSORBED TORPEDO ENERGY.")
        return True

    if quadrant.starbase == sector:
        lines.append("*** STARBASE DESTROYED ***")
        state.galaxy.remove_starbase(quadrant_coords)
        logger.debug(f"Starbase destroyed by torpedo in quadrant {quadrant_coords}")

        if state.starbases_remaining > 0 or state.klingons_remaining + state.remaining_time > 0:
            lines.append("STARFLEET COMMAND REVIEWING YOUR RECORD TO CONSIDER")
            lines.append("COURT MARTIAL!")
        else:
            lines.append("THAT DOES IT, CAPTAIN!!  YOU ARE HEREBY RELIEVED OF COMMAND")
            lines.append("AND SENTENCED TO 99 STARDATES AT HARD LABOR ON CYGNUS 12!!")
        state.enterprise.undock_from_starbase()
        return True

    return False
