"""Tests for command lookup and dispatch."""

import pytest

from startrek.engine.results import CommandResult, ErrorType
from startrek.interface.commands import CommandRegistry, split_command
from startrek.models.game_state import GameState
from startrek.models.ship_system import ShipSystem


@pytest.mark.parametrize(
    "line,expected",
    [
        ("NAV 1 2", ("NAV", ["1", "2"])),
        ("  nav   3.5  0.5 ", ("NAV", ["3.5", "0.5"])),
        ("srs", ("SRS", [])),
        ("", ("", [])),
        ("   ", ("", [])),
    ],
)
def test_split_command(line, expected):
    assert split_command(line) == expected


class TestCommandRegistry:
    """Test the standard command set."""

    def setup_method(self):
        self.registry = CommandRegistry()
        self.state = GameState(seed=42)

    def test_standard_verbs(self):
        assert self.registry.verbs == ["SRS", "LRS", "NAV", "PHA", "TOR", "SHE", "DAM"]

    def test_lookup_is_case_insensitive(self):
        assert self.registry.get("nav") is self.registry.get("NAV")
        assert self.registry.get("warp") is None

    def test_help_lists_every_command(self):
        text = self.registry.help_text()
        for verb in self.registry.verbs:
            assert verb in text
        assert "XXX  (TO RESIGN YOUR COMMAND)" in text
        assert "HELP" in text

    def test_unknown_command(self):
        result = self.registry.execute(self.state, "WARP", ["9"])

        assert not result.success
        assert result.error_type == ErrorType.INVALID_INPUT
        assert result.message == "UNKNOWN COMMAND. TYPE 'HELP' FOR COMMAND LIST."

    def test_dispatch(self):
        result = self.registry.execute(self.state, "she", ["400"])

        assert result.success
        assert self.state.enterprise.shields == 400

    def test_register_custom_command(self):
        calls = []

        def handler(state, args):
            calls.append(args)
            return CommandResult.ok("DONE")

        self.registry.register("com", handler, "COM  (FOR THE LIBRARY-COMPUTER)")

        assert self.registry.execute(self.state, "COM", ["1"]).message == "DONE"
        assert calls == [["1"]]
        assert "COM" in self.registry.verbs

    def test_repair_authorizer_passed_to_damage_control(self):
        registry = CommandRegistry(authorize_repairs=lambda estimate: True)
        self.state.enterprise.set_system_damage(ShipSystem.WARP_ENGINES, -1.0)
        self.state.enterprise.dock_at_starbase()

        result = registry.execute(self.state, "DAM", [])

        assert "REPAIRS COMPLETED." in result.message
        assert result.consumes_time
        assert self.state.enterprise.damaged_systems() == []
