"""Klingon return fire, shared by the phaser and torpedo commands."""

import logging

from ..models.enterprise import STARBASE_PROTECTION_MESSAGE
from ..models.game_state import GameState

logger = logging.getLogger(__name__)


def klingon_counter_attack(state: GameState) -> list[str]:
    """Every living Klingon in the quadrant fires at the Enterprise.

    Each ship hits for int((shield / distance) * (2 + random())) and its
    own shields then drop to int(shield / (3 + random())). A weak ship can
    wear itself out this way and is then removed from the galaxy. The
    summed hits are resolved against the Enterprise in one go; a docked
    ship is protected by the starbase.

    Args:
        state: Current game state

    Returns:
        Report lines (empty if no Klingon is present)
    """
    enterprise = state.enterprise
    attackers = state.current_quadrant.living_klingons()
    if not attackers:
        return []

    if enterprise.docked:
        return [STARBASE_PROTECTION_MESSAGE]

    messages = ["", "KLINGON ATTACK:"]
    total_damage = 0
    for klingon in attackers:
        distance = klingon.distance_to(enterprise.sector)
        hit = int((klingon.shield_level / distance) * (2 + state.rng.random()))
        total_damage += hit
        messages.append(
            f"{hit} UNIT HIT ON ENTERPRISE FROM SECTOR {klingon.sector.x},{klingon.sector.y}"
        )
        klingon.shield_level = int(klingon.shield_level / (3 + state.rng.random()))
        if klingon.is_destroyed:
            state.galaxy.remove_klingon(enterprise.quadrant, klingon)
            logger.debug(f"Klingon at {klingon.sector} exhausted its shields firing")

    logger.debug(f"{len(attackers)} Klingons fired for {total_damage} total damage")
    messages.extend(enterprise.absorb_hit(total_damage, state.rng))
    return messages
