"""DAM command: damage report and starbase repairs."""

import logging
import math
from collections.abc import Callable

from ..models.enterprise import Enterprise
from ..models.game_state import GameState
from ..models.ship_system import ShipSystem
from ..utils.constants import REPAIR_ESTIMATE_CAP, REPAIR_OVERHEAD, REPAIR_TIME_PER_SYSTEM
from ..utils.rng import GameRNG
from .results import CommandResult

logger = logging.getLogger(__name__)

# Called with the estimated repair time; returns True to authorize repairs
RepairAuthorizer = Callable[[float], bool]


def damage_report(enterprise: Enterprise) -> list[str]:
    """Repair state table, one row per system in ordinal order.

    Values are truncated to hundredths (legacy INT(D*100)*.01) and aligned
    by padding each name to 25 columns.
    """
    lines = ["DEVICE             STATE OF REPAIR"]
    for system in ShipSystem:
        name = system.display_name
        value = math.floor(enterprise.get_system_damage(system) * 100) * 0.01
        lines.append(f"{name}{' ' * max(1, 25 - len(name))}{value:.2f}")
    return lines


def repair_estimate(enterprise: Enterprise, rng: GameRNG) -> float:
    """Stardates a starbase needs to repair every damaged system.

    0.1 per damaged system plus 0.5 * random(); an estimate of a full
    stardate or more is quoted as 0.9.
    """
    estimate = REPAIR_TIME_PER_SYSTEM * len(enterprise.damaged_systems()) + 0.5 * rng.random()
    if estimate >= 1.0:
        estimate = REPAIR_ESTIMATE_CAP
    return estimate


def execute_damage_control(
    state: GameState, args: list[str], authorize: RepairAuthorizer | None = None
) -> CommandResult:
    """Execute DAM.

    A damaged damage control system makes the report unavailable, but a
    docked ship can still have starbase technicians repair it. When docked
    with damage the repair offer is passed to ``authorize``; without a
    callback the offer is declined.

    Args:
        state: Current game state
        args: Raw arguments (unused)
        authorize: Decides whether to accept the repair estimate

    Returns:
        CommandResult with the report; authorized repairs take the
        estimated time plus 0.1 stardates
    """
    enterprise = state.enterprise
    lines = []
    time_consumed = 0.0

    if not enterprise.is_system_operational(ShipSystem.DAMAGE_CONTROL):
        lines.append("DAMAGE CONTROL REPORT NOT AVAILABLE")
        if not enterprise.docked:
            lines.append("")
            lines.extend(damage_report(enterprise))
            return CommandResult.ok("\n".join(lines))

    if enterprise.docked and enterprise.damaged_systems():
        estimate = repair_estimate(enterprise, state.rng)
        lines.append("TECHNICIANS STANDING BY TO EFFECT REPAIRS TO YOUR SHIP;")
        lines.append(f"ESTIMATED TIME TO REPAIR: {estimate:.2f} STARDATES")

        if authorize is not None and authorize(estimate):
            enterprise.repair_all_systems()
            time_consumed = estimate + REPAIR_OVERHEAD
            lines.append("REPAIRS COMPLETED.")
            logger.debug(f"Starbase repairs completed in {time_consumed:.2f} stardates")
        lines.append("")

    lines.extend(damage_report(enterprise))
    return CommandResult.ok("\n".join(lines), time_consumed=time_consumed)
