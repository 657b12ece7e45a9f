"""Per-turn emergency check for a ship that can no longer move."""

import logging

from ..models.game_state import GameState
from ..models.ship_system import ShipSystem
from ..utils.constants import STRANDED_POWER_LIMIT

logger = logging.getLogger(__name__)

STRANDED_MESSAGE = (
    "** FATAL ERROR **   YOU'VE JUST STRANDED YOUR SHIP IN\n"
    "SPACE\n"
    "YOU HAVE INSUFFICIENT MANEUVERING ENERGY,\n"
    " AND SHIELD CONTROL\n"
    "IS PRESENTLY INCAPABLE OF CROSS\n"
    "-CIRCUITING TO ENGINE ROOM!!"
)


def is_stranded(state: GameState) -> bool:
    """True when total power is exhausted and shield energy cannot be rerouted."""
    enterprise = state.enterprise
    return (
        enterprise.shields + enterprise.energy <= STRANDED_POWER_LIMIT
        and enterprise.energy <= STRANDED_POWER_LIMIT
        and not enterprise.is_system_operational(ShipSystem.SHIELD_CONTROL)
    )


def check_emergency_conditions(state: GameState) -> str | None:
    """Mark the mission failed if the ship is stranded.

    Returns:
        The fatal error text if the ship is stranded, otherwise None
    """
    if not is_stranded(state):
        return None
    state.set_ship_stranded()
    logger.debug(
        f"Stranded with {state.enterprise.energy} energy and {state.enterprise.shields} shields"
    )
    return STRANDED_MESSAGE
