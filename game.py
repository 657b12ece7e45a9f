#!/usr/bin/env python3
"""Super Star Trek - Main entry point.

Command the Enterprise and destroy every Klingon warship in the galaxy
before the Federation's deadline runs out.
"""

import argparse
import logging
import sys
from collections.abc import Callable

from startrek.engine.emergency import check_emergency_conditions
from startrek.interface.commands import EXIT_VERB, HELP_VERBS, CommandRegistry, split_command
from startrek.interface.display import briefing_text, game_over_text, introduction, status_block
from startrek.models.game_state import GameState

logger = logging.getLogger(__name__)


class GameSession:
    """Runs the read-execute-print loop for one game."""

    def __init__(
        self,
        state: GameState,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        """Initialize game session.

        Args:
            state: Game to play
            read_line: Prompt function returning one line of input
            write: Output function
        """
        self.state = state
        self.read_line = read_line
        self.write = write
        self.registry = CommandRegistry(authorize_repairs=self._authorize_repairs)
        self.running = True

    def run(self) -> GameState:
        """Main game loop."""
        self.write(introduction())
        self.write("")
        self.write(briefing_text(self.state.briefing))

        try:
            while self.running:
                self.write("")
                self.write(status_block(self.state.status()))

                stranded_message = check_emergency_conditions(self.state)
                if stranded_message:
                    self.write(stranded_message)
                    self._show_game_over()
                    break

                self._process_command()

                if self.state.is_game_over:
                    self._show_game_over()
                    break
        except (KeyboardInterrupt, EOFError):
            self.write("\n\nGame interrupted. Exiting...")

        return self.state

    def _process_command(self) -> None:
        verb, args = split_command(self.read_line("COMMAND? "))

        if not verb:
            self.write("PLEASE ENTER A COMMAND")
            return
        if verb == EXIT_VERB:
            self.write("EMERGENCY EXIT")
            self.running = False
            return
        if verb in HELP_VERBS:
            self.write(self.registry.help_text())
            return

        result = self.registry.execute(self.state, verb, args)
        if result.message:
            self.write("")
            self.write(result.message)
        if result.consumes_time:
            self.state.advance_time(result.time_consumed)

    def _authorize_repairs(self, estimate: float) -> bool:
        answer = self.read_line("WILL YOU AUTHORIZE THE REPAIR ORDER (Y/N)? ")
        return answer.strip().upper() == "Y"

    def _show_game_over(self) -> None:
        self.write("")
        self.write(game_over_text(self.state))
        self.running = False


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Super Star Trek - Classic turn-based starship command",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                # Start a new random game
  %(prog)s --seed 42      # Reproducible galaxy and combat rolls
  %(prog)s --debug        # Show engine debug logging
        """,
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for galaxy generation and combat (default: random)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logger.debug(f"Starting game with seed {args.seed}")
    GameSession(GameState(seed=args.seed)).run()


if __name__ == "__main__":
    main()
