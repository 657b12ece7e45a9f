"""NAV command: warp travel across sectors and quadrants.

Movement follows the legacy absolute-position arithmetic:

1. distance = round(warp * 8) sectors (halves round to even)
2. absolute = 8 * quadrant + sector + distance * direction, per axis
3. quadrant = int(absolute / 8), sector = int(absolute - quadrant * 8);
   a sector of 0 belongs to the previous quadrant as sector 8
4. A quadrant outside 1-8 is clamped to the edge (sector 1 or 8) and
   Starfleet's perimeter warning is added to the report

Energy cost is distance + 10 units; every move takes one stardate.
"""

import logging
import math
from dataclasses import dataclass

from ..models.coordinates import Coordinates
from ..models.enterprise import Enterprise
from ..models.game_state import GameState
from ..models.ship_system import ShipSystem
from ..utils.constants import GRID_SIZE, MOVE_TIME, NAVIGATION_ENERGY_SURCHARGE
from ..utils.distance import is_adjacent
from .courses import NAVIGATION_DIRECTIONS, course_vector, normalize_course, parse_course
from .results import CommandError, CommandResult, ErrorType

logger = logging.getLogger(__name__)


@dataclass
class NavigationPlan:
    """Where a validated NAV command will take the ship.

    Attributes:
        quadrant: Destination quadrant (after perimeter clamping)
        sector: Destination sector (after perimeter clamping)
        distance: Sectors travelled
        energy_cost: Energy the move consumes
        perimeter_reached: True if the move was stopped at the galaxy edge
    """

    quadrant: Coordinates
    sector: Coordinates
    distance: int
    energy_cost: int
    perimeter_reached: bool = False


def warp_distance(warp_factor: float) -> int:
    """Sectors travelled at a warp factor (halves round to even)."""
    return int(round(warp_factor * 8))


def plot_course(enterprise: Enterprise, course: float, warp_factor: float) -> NavigationPlan:
    """Compute the destination of a move without changing anything.

    Args:
        enterprise: Ship at its starting position
        course: Course in [1.0, 9.0)
        warp_factor: Positive warp factor

    Returns:
        NavigationPlan for the move
    """
    dx, dy = course_vector(course, NAVIGATION_DIRECTIONS)
    distance = warp_distance(warp_factor)

    qx, sx, clamped_x = _resolve_axis(enterprise.quadrant.x, enterprise.sector.x, distance * dx)
    qy, sy, clamped_y = _resolve_axis(enterprise.quadrant.y, enterprise.sector.y, distance * dy)

    return NavigationPlan(
        quadrant=Coordinates(qx, qy),
        sector=Coordinates(sx, sy),
        distance=distance,
        energy_cost=distance + NAVIGATION_ENERGY_SURCHARGE,
        perimeter_reached=clamped_x or clamped_y,
    )


def _resolve_axis(quadrant: int, sector: int, offset: float) -> tuple[int, int, bool]:
    """Resolve one axis of a move into (quadrant, sector, clamped)."""
    absolute = GRID_SIZE * quadrant + sector + offset
    new_quadrant = int(absolute / GRID_SIZE)
    new_sector = int(absolute - new_quadrant * GRID_SIZE)

    if new_sector == 0:
        new_quadrant -= 1
        new_sector = GRID_SIZE

    if new_quadrant < 1:
        return 1, 1, True
    if new_quadrant > GRID_SIZE:
        return GRID_SIZE, GRID_SIZE, True
    return new_quadrant, new_sector, False


def perimeter_message(plan: NavigationPlan) -> str:
    """Starfleet's refusal to let the ship leave the galaxy."""
    return (
        "LT. UHURA REPORTS MESSAGE FROM STARFLEET COMMAND:\n"
        "  'PERMISSION TO ATTEMPT CROSSING OF GALACTIC PERIMETER\n"
        "  IS HEREBY *DENIED*.  SHUT DOWN YOUR ENGINES.'\n"
        "CHIEF ENGINEER SCOTT REPORTS  'WARP ENGINES SHUT DOWN\n"
        f"  AT SECTOR {plan.sector.x},{plan.sector.y} OF QUADRANT {plan.quadrant.x},{plan.quadrant.y}.'"
    )


def check_docking(state: GameState) -> str:
    """Dock or undock according to the ship's position.

    Docking happens when the ship is in one of the eight sectors around an
    intact starbase and not yet docked; it drops the shields and resupplies
    the ship. A docked ship that is no longer adjacent (or whose quadrant
    has no starbase) undocks.

    Returns:
        Docking message (empty if none)
    """
    enterprise = state.enterprise
    quadrant = state.current_quadrant

    if not quadrant.has_starbase:
        enterprise.undock_from_starbase()
        return ""

    starbase = quadrant.starbase
    adjacent = is_adjacent(enterprise.sector.x, enterprise.sector.y, starbase.x, starbase.y)

    if adjacent and not enterprise.docked:
        message = enterprise.dock_at_starbase()
        enterprise.resupply()
        return message
    if not adjacent and enterprise.docked:
        enterprise.undock_from_starbase()
    return ""


def _validate(state: GameState, args: list[str]) -> tuple[float, float]:
    """Check a NAV command and return (course, warp_factor).

    Raises:
        CommandError: If the command cannot be carried out
    """
    enterprise = state.enterprise

    if not enterprise.is_system_operational(ShipSystem.WARP_ENGINES):
        raise CommandError(ErrorType.SYSTEM_DAMAGED, "WARP ENGINES ARE DAMAGED")

    if len(args) < 2:
        raise CommandError(
            ErrorType.INVALID_INPUT,
            "NAVIGATION REQUIRES COURSE AND WARP FACTOR\nExample: NAV 1 4.2",
        )

    course = parse_course(args[0])
    if course is None or not (1.0 <= course <= 9.0):
        raise CommandError(ErrorType.INVALID_INPUT, "COURSE MUST BE BETWEEN 1.0 AND 9.0")
    course = normalize_course(course)

    try:
        warp_factor = float(args[1])
    except ValueError:
        warp_factor = math.nan
    if not (math.isfinite(warp_factor) and warp_factor > 0):
        raise CommandError(ErrorType.INVALID_INPUT, "WARP FACTOR MUST BE POSITIVE")

    energy_required = warp_distance(warp_factor) + NAVIGATION_ENERGY_SURCHARGE
    if enterprise.energy < energy_required:
        raise CommandError(
            ErrorType.INSUFFICIENT_RESOURCE,
            f"INSUFFICIENT ENERGY. NEED {energy_required} UNITS, HAVE {enterprise.energy}",
        )

    return course, warp_factor


def execute_navigation(state: GameState, args: list[str]) -> CommandResult:
    """Execute NAV <course> <warp>.

    Args:
        state: Current game state
        args: Raw arguments (course, warp factor)

    Returns:
        CommandResult with the navigation report; takes one stardate
    """
    try:
        course, warp_factor = _validate(state, args)
    except CommandError as e:
        return CommandResult.from_error(e)

    enterprise = state.enterprise
    start_quadrant = enterprise.quadrant
    start_sector = enterprise.sector
    plan = plot_course(enterprise, course, warp_factor)

    enterprise.energy -= plan.energy_cost
    state.current_quadrant.remove_enterprise()

    # An occupied destination forces an emergency stop elsewhere in that quadrant
    quadrant = plan.quadrant
    sector = plan.sector
    hit_star = False
    emergency_stop = False
    destination = state.galaxy.get_quadrant(quadrant)
    if not destination.is_sector_empty(sector):
        hit_star = destination.has_star_at(sector)
        emergency_stop = True
        sector = destination.find_empty_sector(state.rng)
        if sector is None:
            quadrant, sector = start_quadrant, start_sector

    quadrant_changed = quadrant != start_quadrant
    if quadrant_changed:
        state.move_enterprise_to_quadrant(quadrant, sector)
    else:
        state.move_enterprise_to_sector(sector)

    logger.debug(
        f"NAV {course} warp {warp_factor}: {start_quadrant}/{start_sector} -> {quadrant}/{sector}"
    )

    docking_message = check_docking(state)
    repair_messages = enterprise.perform_automatic_repairs(warp_factor, state.rng)

    lines = []
    if plan.perimeter_reached:
        lines.append(perimeter_message(plan))
        lines.append("")
    if hit_star:
        lines.append("*** COLLISION WITH STAR ***")
    if emergency_stop:
        lines.append("EMERGENCY STOP EXECUTED")
    if quadrant_changed:
        lines.append(f"ENTERING QUADRANT {quadrant.x},{quadrant.y}")
    lines.append("NAVIGATION COMPLETE")
    lines.append(f"NEW POSITION: QUADRANT {quadrant.x},{quadrant.y} SECTOR {sector.x},{sector.y}")
    lines.append(f"ENERGY CONSUMED: {plan.energy_cost} UNITS")
    if docking_message:
        lines.append(docking_message)
    lines.extend(repair_messages)

    return CommandResult.ok("\n".join(lines), time_consumed=MOVE_TIME)
