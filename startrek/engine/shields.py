"""SHE command: move energy between the main banks and the shields."""

from ..models.game_state import GameState
from ..models.ship_system import ShipSystem
from .results import CommandError, CommandResult, ErrorType

UNCHANGED_MESSAGE = "<SHIELDS UNCHANGED>"


def _validate(state: GameState, args: list[str]) -> None:
    enterprise = state.enterprise

    if not enterprise.is_system_operational(ShipSystem.SHIELD_CONTROL):
        raise CommandError(ErrorType.SYSTEM_DAMAGED, "SHIELD CONTROL INOPERABLE")

    if enterprise.docked:
        raise CommandError(
            ErrorType.INVALID_INPUT,
            "SHIELDS CANNOT BE RAISED WHILE DOCKED AT STARBASE\n"
            "SHIELDS REMAIN DOWN FOR DOCKING PURPOSES",
        )


def execute_shields(state: GameState, args: list[str]) -> CommandResult:
    """Execute SHE [level].

    Without an argument the current levels are reported. Otherwise the
    shields are set to the requested level and the energy + shields pool
    is conserved. Shield changes take no time.

    Args:
        state: Current game state
        args: Raw arguments (new shield level, optional)

    Returns:
        CommandResult with the deflector report
    """
    try:
        _validate(state, args)
    except CommandError as e:
        return CommandResult.from_error(e)

    enterprise = state.enterprise
    pool = enterprise.energy + enterprise.shields

    if not args:
        return CommandResult.ok(
            f"ENERGY AVAILABLE = {pool}\n"
            f"CURRENT SHIELD LEVEL = {enterprise.shields} UNITS\n"
            f"{UNCHANGED_MESSAGE}"
        )

    try:
        level = int(args[0])
    except ValueError:
        return CommandResult.failure(
            ErrorType.INVALID_INPUT, "INVALID ENERGY AMOUNT. MUST BE A WHOLE NUMBER"
        )

    if level < 0 or level == enterprise.shields:
        return CommandResult.ok(UNCHANGED_MESSAGE)

    if level > pool:
        return CommandResult.failure(
            ErrorType.INSUFFICIENT_RESOURCE,
            f"SHIELD CONTROL REPORTS  'THIS IS NOT THE FEDERATION TREASURY.'\n{UNCHANGED_MESSAGE}",
        )

    enterprise.transfer_to_shields(level)
    return CommandResult.ok(
        "DEFLECTOR CONTROL ROOM REPORT:\n"
        f"  'SHIELDS NOW AT {enterprise.shields} UNITS PER YOUR COMMAND.'"
    )
