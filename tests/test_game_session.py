"""Tests for the command loop and its text screens."""

from game import GameSession
from startrek.engine.emergency import STRANDED_MESSAGE
from startrek.interface.display import briefing_text, game_over_text, status_block
from startrek.models.game_state import GameState
from startrek.models.ship_system import ShipSystem

from helpers import remove_all_klingons


class ScriptedConsole:
    """Feeds queued input lines and records everything written."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []
        self.output = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def run_session(state, lines):
    console = ScriptedConsole(lines)
    GameSession(state, read_line=console.read_line, write=console.write).run()
    return console


class TestGameSession:
    """Test the read-execute-print loop."""

    def setup_method(self):
        self.state = GameState(seed=42)

    def test_briefing_then_exit(self):
        console = run_session(self.state, ["XXX"])

        assert "SUPER STAR TREK" in console.output[0]
        assert "MISSION BRIEFING" in console.text
        assert console.output[-1] == "EMERGENCY EXIT"
        assert console.prompts == ["COMMAND? "]

    def test_blank_line_and_help(self):
        console = run_session(self.state, ["", "help", "XXX"])

        assert "PLEASE ENTER A COMMAND" in console.output
        assert "XXX  (TO RESIGN YOUR COMMAND)" in console.text
        assert self.state.current_stardate == self.state.starting_stardate

    def test_unknown_command(self):
        console = run_session(self.state, ["WARP 9", "XXX"])

        assert "UNKNOWN COMMAND. TYPE 'HELP' FOR COMMAND LIST." in console.output

    def test_timed_command_advances_stardate(self):
        start = self.state.current_stardate

        run_session(self.state, ["NAV 1 0.125", "XXX"])

        assert self.state.current_stardate == start + 1.0

    def test_instant_command_takes_no_time(self):
        start = self.state.current_stardate

        run_session(self.state, ["SHE 300", "DAM", "XXX"])

        assert self.state.enterprise.shields == 300
        assert self.state.current_stardate == start

    def test_repair_prompt(self):
        self.state.enterprise.set_system_damage(ShipSystem.PHOTON_TUBES, -1.0)
        self.state.enterprise.dock_at_starbase()
        start = self.state.current_stardate

        console = run_session(self.state, ["DAM", "y", "XXX"])

        assert "WILL YOU AUTHORIZE THE REPAIR ORDER (Y/N)? " in console.prompts
        assert self.state.enterprise.damaged_systems() == []
        assert self.state.current_stardate > start

    def test_end_of_input(self):
        console = run_session(self.state, [])

        assert "Game interrupted. Exiting..." in console.output[-1]

    def test_stranded_ship_ends_game(self):
        self.state.enterprise.energy = 5
        self.state.enterprise.set_system_damage(ShipSystem.SHIELD_CONTROL, -1.0)

        console = run_session(self.state, [])

        assert STRANDED_MESSAGE in console.output
        assert "MISSION FAILED - SHIP STRANDED IN SPACE" in console.text
        assert console.prompts == []

    def test_victory_screen(self):
        remove_all_klingons(self.state)

        console = run_session(self.state, ["SRS"])

        assert "MISSION ACCOMPLISHED!" in console.text
        assert "CONGRATULATIONS, CAPTAIN!" in console.text
        assert console.prompts == ["COMMAND? "]


class TestDisplay:
    """Test the text screens."""

    def setup_method(self):
        self.state = GameState(seed=42)

    def test_briefing(self):
        text = briefing_text(self.state.briefing)

        assert f"DESTROY THE {self.state.initial_klingon_count} KLINGON WARSHIPS" in text
        assert f"ON STARDATE {self.state.mission_end_stardate:.1f}." in text
        assert f"THIS GIVES YOU {self.state.mission_time_limit} DAYS." in text

    def test_status_block(self):
        text = status_block(self.state.status())
        assert "ENERGY: 3000   SHIELDS: 0   TORPEDOES: 10" in text
        assert "DAMAGED" not in text

        self.state.enterprise.set_system_damage(ShipSystem.PHOTON_TUBES, -1.0)
        self.state.enterprise.set_system_damage(ShipSystem.WARP_ENGINES, -1.0)
        text = status_block(self.state.status())
        assert "DAMAGED: WARP ENGINES, PHOTON TUBES" in text

    def test_game_over_defeat(self):
        self.state.advance_time(self.state.mission_time_limit)

        text = game_over_text(self.state)

        assert "MISSION FAILED - TIME EXPIRED" in text
        assert "BETTER LUCK NEXT TIME, CAPTAIN." in text
        assert "EFFICIENCY" not in text

    def test_game_over_victory(self):
        remove_all_klingons(self.state)
        self.state.advance_time(2.0)

        text = game_over_text(self.state)

        assert f"YOUR EFFICIENCY RATING: {self.state.efficiency_rating():.2f}" in text
        assert "THE FEDERATION HAS BEEN SAVED!" in text
