"""Command registry: maps three-letter verbs to engine handlers."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from ..engine.damage_control import RepairAuthorizer, execute_damage_control
from ..engine.navigation import execute_navigation
from ..engine.phasers import execute_phasers
from ..engine.results import CommandResult, ErrorType
from ..engine.sensors import execute_long_range_scan, execute_short_range_scan
from ..engine.shields import execute_shields
from ..engine.torpedoes import execute_torpedoes
from ..models.game_state import GameState

logger = logging.getLogger(__name__)

CommandHandler = Callable[[GameState, list[str]], CommandResult]

EXIT_VERB = "XXX"
HELP_VERBS = ("HELP", "?")


@dataclass
class Command:
    """A registered command.

    Attributes:
        verb: Upper-case verb typed by the player
        handler: Engine entry point called with (state, args)
        help_text: One or more lines shown by HELP
    """

    verb: str
    handler: CommandHandler
    help_text: str


class CommandRegistry:
    """Look up and run player commands."""

    def __init__(self, authorize_repairs: RepairAuthorizer | None = None):
        """Initialize registry with the standard commands.

        Args:
            authorize_repairs: Asked to approve starbase repair offers
                made by DAM (offers are declined when None)
        """
        self._commands: dict[str, Command] = {}

        self.register("SRS", execute_short_range_scan, "SRS  (FOR SHORT RANGE SENSOR SCAN)")
        self.register("LRS", execute_long_range_scan, "LRS  (FOR LONG RANGE SENSOR SCAN)")
        self.register(
            "NAV",
            execute_navigation,
            "NAV <course> <warp>  (TO SET COURSE)\n"
            "  Course: 1-9 (1=+Y, 3=-X, 5=-Y, 7=+X; 9 is the same as 1)\n"
            "  Warp: each warp factor moves 8 sectors and costs 8 energy units",
        )
        self.register("PHA", execute_phasers, "PHA <energy>  (TO FIRE PHASERS)")
        self.register(
            "TOR",
            execute_torpedoes,
            "TOR <course>  (TO FIRE PHOTON TORPEDOES)\n"
            "  Course: 1-9 on the sensor display (1=up, 3=right, 5=down, 7=left)",
        )
        self.register("SHE", execute_shields, "SHE [level]  (TO RAISE OR LOWER SHIELDS)")
        self.register(
            "DAM",
            partial(execute_damage_control, authorize=authorize_repairs),
            "DAM  (FOR DAMAGE CONTROL REPORTS)",
        )

    def register(self, verb: str, handler: CommandHandler, help_text: str) -> None:
        """Add or replace a command."""
        verb = verb.upper()
        self._commands[verb] = Command(verb=verb, handler=handler, help_text=help_text)

    @property
    def verbs(self) -> list[str]:
        return list(self._commands)

    def get(self, verb: str) -> Command | None:
        return self._commands.get(verb.strip().upper())

    def help_text(self) -> str:
        """Help for every command, in registration order."""
        lines = ["ENTER ONE OF THE FOLLOWING:"]
        lines.extend(command.help_text for command in self._commands.values())
        lines.append(f"{EXIT_VERB}  (TO RESIGN YOUR COMMAND)")
        lines.append("HELP  (FOR THIS LIST)")
        return "\n".join(lines)

    def execute(self, state: GameState, verb: str, args: list[str]) -> CommandResult:
        """Run a command.

        Args:
            state: Current game state
            verb: Command verb (case-insensitive)
            args: Raw argument strings

        Returns:
            The handler's result, or an INVALID_INPUT failure for an
            unknown verb
        """
        command = self.get(verb)
        if command is None:
            return CommandResult.failure(
                ErrorType.INVALID_INPUT, "UNKNOWN COMMAND. TYPE 'HELP' FOR COMMAND LIST."
            )

        result = command.handler(state, args)
        logger.debug(
            f"{command.verb} {' '.join(args)} -> success={result.success} time={result.time_consumed}"
        )
        return result


def split_command(line: str) -> tuple[str, list[str]]:
    """Split an input line into (VERB, args).

    Returns:
        Upper-case verb ("" for a blank line) and the remaining words
    """
    parts = line.split()
    if not parts:
        return "", []
    return parts[0].upper(), parts[1:]
