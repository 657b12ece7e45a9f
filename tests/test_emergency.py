"""Tests for the stranded-ship check."""

from startrek.engine.emergency import STRANDED_MESSAGE, check_emergency_conditions, is_stranded
from startrek.models.game_state import GameState
from startrek.models.ship_system import ShipSystem


class TestStranded:
    """Test detection of a ship with no usable power."""

    def setup_method(self):
        self.state = GameState(seed=42)
        self.enterprise = self.state.enterprise

    def test_healthy_ship(self):
        assert not is_stranded(self.state)
        assert check_emergency_conditions(self.state) is None
        assert not self.state.is_ship_stranded

    def test_stranded(self):
        self.enterprise.energy = 5
        self.enterprise.shields = 3
        self.enterprise.set_system_damage(ShipSystem.SHIELD_CONTROL, -1.0)

        assert check_emergency_conditions(self.state) == STRANDED_MESSAGE
        assert self.state.is_ship_stranded
        assert self.state.is_game_over
        assert self.state.mission_status() == "MISSION FAILED - SHIP STRANDED IN SPACE"

    def test_working_shield_control_can_reroute(self):
        self.enterprise.energy = 5
        self.enterprise.shields = 3

        assert check_emergency_conditions(self.state) is None

    def test_shield_reserve_keeps_ship_going(self):
        self.enterprise.energy = 5
        self.enterprise.shields = 500
        self.enterprise.set_system_damage(ShipSystem.SHIELD_CONTROL, -1.0)

        assert not is_stranded(self.state)
