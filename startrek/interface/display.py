"""Text screens shown by the command loop.

Each function returns the text of one screen; printing is left to the
caller so the screens can be tested directly.
"""

from ..models.game_state import GameState
from ..models.status import MissionBriefing, ShipStatus

BANNER = "*" * 50


def introduction() -> str:
    return "\n".join(
        [
            "                                    ,------*------,",
            "                    ,-------------   '---  ------'",
            "                     '-------- --'      / /",
            "                         ,---' '-------/ /--,",
            "                          '----------------'",
            "",
            "                    THE USS ENTERPRISE --- NCC-1701",
            "",
            "                         SUPER STAR TREK",
        ]
    )


def briefing_text(briefing: MissionBriefing) -> str:
    """Mission orders shown once at the start of the game."""
    return "\n".join(
        [
            BANNER,
            "*                MISSION BRIEFING               *",
            BANNER,
            "",
            "YOUR ORDERS ARE AS FOLLOWS:",
            f"     DESTROY THE {briefing.klingons} KLINGON WARSHIPS",
            "     WHICH HAVE INVADED THE GALAXY",
            "     BEFORE THEY CAN ATTACK FEDERATION HEADQUARTERS",
            f"     ON STARDATE {briefing.mission_end_stardate:.1f}.",
            "",
            f"THIS GIVES YOU {briefing.mission_time_limit} DAYS.",
            f"THERE ARE {briefing.starbases} STARBASES IN THE GALAXY FOR RESUPPLY.",
            "",
            "GOOD LUCK!",
        ]
    )


def status_block(status: ShipStatus) -> str:
    """Status summary printed before every command prompt."""
    lines = [
        BANNER,
        f"STARDATE: {status.stardate:.1f}   TIME REMAINING: {status.remaining_time:.1f}",
        f"CONDITION: {status.condition}",
        f"QUADRANT: ({status.quadrant[0]},{status.quadrant[1]})   "
        f"SECTOR: ({status.sector[0]},{status.sector[1]})",
        f"ENERGY: {status.energy}   SHIELDS: {status.shields}   TORPEDOES: {status.torpedoes}",
        f"KLINGONS REMAINING: {status.klingons_remaining}",
    ]
    if status.damaged_systems:
        lines.append(f"DAMAGED: {', '.join(status.damaged_systems)}")
    lines.append(BANNER)
    return "\n".join(lines)


def game_over_text(state: GameState) -> str:
    """Final screen with the mission result and, on victory, the rating."""
    lines = [
        BANNER,
        "*                  GAME OVER                    *",
        BANNER,
        "",
        state.mission_status(),
        "",
    ]
    if state.is_mission_complete:
        lines.append(f"YOUR EFFICIENCY RATING: {state.efficiency_rating():.2f}")
        lines.append("")
        lines.append("CONGRATULATIONS, CAPTAIN!")
        lines.append("THE FEDERATION HAS BEEN SAVED!")
    else:
        lines.append("BETTER LUCK NEXT TIME, CAPTAIN.")
    return "\n".join(lines)
