"""Tests for the NAV command."""

import pytest

from startrek.engine.courses import (
    NAVIGATION_DIRECTIONS,
    TORPEDO_DIRECTIONS,
    course_vector,
    normalize_course,
    parse_course,
)
from startrek.engine.navigation import execute_navigation, plot_course, warp_distance
from startrek.engine.results import ErrorType
from startrek.models.coordinates import Coordinates
from startrek.models.game_state import GameState
from startrek.models.ship_system import ShipSystem

from helpers import ScriptedRNG, clear_quadrant, place_ship


class TestCourses:
    """Test direction tables and interpolation."""

    def test_whole_courses(self):
        assert course_vector(1.0, NAVIGATION_DIRECTIONS) == (0.0, 1.0)
        assert course_vector(3.0, NAVIGATION_DIRECTIONS) == (-1.0, 0.0)
        assert course_vector(1.0, TORPEDO_DIRECTIONS) == (0.0, -1.0)
        assert course_vector(3.0, TORPEDO_DIRECTIONS) == (1.0, 0.0)

    def test_fractional_course_interpolates(self):
        assert course_vector(1.5, NAVIGATION_DIRECTIONS) == pytest.approx((-0.5, 1.0))
        assert course_vector(8.5, TORPEDO_DIRECTIONS) == pytest.approx((-0.5, -1.0))

    def test_course_nine_is_course_one(self):
        for table in (NAVIGATION_DIRECTIONS, TORPEDO_DIRECTIONS):
            assert course_vector(9.0, table) == course_vector(1.0, table)
        assert normalize_course(9.0) == 1.0
        assert normalize_course(4.5) == 4.5

    def test_parse_course(self):
        assert parse_course("2.5") == 2.5
        assert parse_course("abc") is None
        assert parse_course("nan") is None
        assert parse_course("inf") is None


class TestPlotCourse:
    """Test destination arithmetic."""

    def test_warp_distance_rounds_half_to_even(self):
        assert warp_distance(1.0) == 8
        assert warp_distance(0.3125) == 2
        assert warp_distance(0.1875) == 2
        assert warp_distance(0.0625) == 0
        assert warp_distance(0.05) == 0
        assert warp_distance(0.35) == 3

    def test_move_within_quadrant(self):
        state = GameState(seed=42)
        state.enterprise.quadrant = Coordinates(4, 4)
        state.enterprise.sector = Coordinates(4, 4)

        plan = plot_course(state.enterprise, 1.0, 0.25)

        assert plan.quadrant == Coordinates(4, 4)
        assert plan.sector == Coordinates(4, 6)
        assert plan.energy_cost == 12
        assert not plan.perimeter_reached

    def test_sector_zero_belongs_to_previous_quadrant(self):
        state = GameState(seed=42)
        state.enterprise.quadrant = Coordinates(4, 4)
        state.enterprise.sector = Coordinates(4, 4)

        # 8*4 + 4 + 4 = 40 -> quadrant 5 sector 0 -> quadrant 4 sector 8
        plan = plot_course(state.enterprise, 1.0, 0.5)

        assert plan.quadrant == Coordinates(4, 4)
        assert plan.sector == Coordinates(4, 8)

    def test_clamp_low(self):
        state = GameState(seed=42)
        state.enterprise.quadrant = Coordinates(1, 1)
        state.enterprise.sector = Coordinates(1, 1)

        plan = plot_course(state.enterprise, 3.0, 1.0)

        assert plan.quadrant == Coordinates(1, 1)
        assert plan.sector == Coordinates(1, 1)
        assert plan.perimeter_reached


class TestNavigation:
    """Test NAV execution."""

    def setup_method(self):
        self.state = GameState(seed=42)

    def test_energy_cost_and_quadrant_change(self):
        clear_quadrant(self.state, Coordinates(5, 4))
        place_ship(self.state, Coordinates(4, 4), Coordinates(4, 4))

        result = execute_navigation(self.state, ["7", "1"])

        assert result.success
        assert result.time_consumed == 1.0
        assert self.state.enterprise.energy == 3000 - 18
        assert self.state.enterprise.quadrant == Coordinates(5, 4)
        assert self.state.enterprise.sector == Coordinates(4, 4)
        assert self.state.galaxy.is_explored(Coordinates(5, 4))
        assert self.state.current_quadrant.get_sector_display(Coordinates(4, 4)) == "<*>"
        assert not self.state.galaxy.get_quadrant(Coordinates(4, 4)).enterprise
        assert "ENTERING QUADRANT 5,4" in result.message
        assert "NEW POSITION: QUADRANT 5,4 SECTOR 4,4" in result.message
        assert "ENERGY CONSUMED: 18 UNITS" in result.message

    def test_half_sector_rounds_to_even(self):
        place_ship(self.state, Coordinates(4, 4), Coordinates(4, 4))

        result = execute_navigation(self.state, ["1", "0.3125"])

        # round(2.5) == 2
        assert result.success
        assert self.state.enterprise.sector == Coordinates(4, 6)
        assert self.state.enterprise.energy == 3000 - 12
        assert "ENTERING QUADRANT" not in result.message

    def test_galactic_perimeter(self):
        """NAV 1 2 from quadrant (4,7) sector (4,8) stops at the edge."""
        clear_quadrant(self.state, Coordinates(4, 8))
        place_ship(self.state, Coordinates(4, 7), Coordinates(4, 8))

        result = execute_navigation(self.state, ["1", "2"])

        assert result.success
        assert "UHURA" in result.message
        assert "*DENIED*" in result.message
        assert "SCOTT" in result.message
        assert "AT SECTOR 4,8 OF QUADRANT 4,8." in result.message
        assert self.state.enterprise.quadrant == Coordinates(4, 8)
        assert self.state.enterprise.sector == Coordinates(4, 8)

    def test_course_nine_same_as_course_one(self):
        other = GameState(seed=42)
        for state in (self.state, other):
            clear_quadrant(state, Coordinates(4, 5))
            place_ship(state, Coordinates(4, 4), Coordinates(4, 4))

        execute_navigation(self.state, ["1", "1"])
        execute_navigation(other, ["9", "1"])

        assert self.state.enterprise.quadrant == other.enterprise.quadrant == Coordinates(4, 5)
        assert self.state.enterprise.sector == other.enterprise.sector

    def test_star_collision(self):
        place_ship(self.state, Coordinates(4, 4), Coordinates(4, 4))
        quadrant = self.state.current_quadrant
        quadrant.place_star(Coordinates(4, 6))

        result = execute_navigation(self.state, ["1", "0.25"])

        assert result.success
        assert "*** COLLISION WITH STAR ***" in result.message
        assert "EMERGENCY STOP EXECUTED" in result.message
        assert self.state.enterprise.sector != Coordinates(4, 6)
        assert quadrant.get_sector_display(Coordinates(4, 6)) == " * "
        assert quadrant.get_sector_display(self.state.enterprise.sector) == "<*>"

    def test_docking_on_arrival(self):
        """Arriving next to a starbase docks and resupplies in the same command."""
        place_ship(self.state, Coordinates(4, 4), Coordinates(4, 2))
        self.state.current_quadrant.place_starbase(Coordinates(5, 5))
        self.state.enterprise.energy = 1000
        self.state.enterprise.shields = 400
        self.state.enterprise.torpedoes = 3

        result = execute_navigation(self.state, ["1", "0.25"])

        assert result.success
        assert self.state.enterprise.sector == Coordinates(4, 4)
        assert self.state.enterprise.docked
        assert self.state.enterprise.shields == 0
        assert self.state.enterprise.energy == 3000
        assert self.state.enterprise.torpedoes == 10
        assert "SHIELDS DROPPED FOR DOCKING PURPOSES" in result.message

    def test_undock_when_leaving(self):
        place_ship(self.state, Coordinates(4, 4), Coordinates(4, 4))
        self.state.current_quadrant.place_starbase(Coordinates(5, 5))
        self.state.enterprise.dock_at_starbase()

        execute_navigation(self.state, ["5", "0.25"])

        assert self.state.enterprise.sector == Coordinates(4, 2)
        assert not self.state.enterprise.docked

    def test_automatic_repair_after_move(self):
        place_ship(self.state, Coordinates(4, 4), Coordinates(4, 4))
        self.state.enterprise.set_system_damage(ShipSystem.PHASER_CONTROL, -0.5)
        self.state.rng = ScriptedRNG([0.9])

        result = execute_navigation(self.state, ["1", "1"])

        assert self.state.enterprise.get_system_damage(ShipSystem.PHASER_CONTROL) == 0.0
        assert "PHASER CONTROL REPAIR COMPLETED." in result.message


class TestNavigationFailures:
    """Test rejected NAV commands change nothing."""

    def setup_method(self):
        self.state = GameState(seed=42)
        self.start = (self.state.enterprise.quadrant, self.state.enterprise.sector)

    def assert_unchanged(self, result, error_type):
        assert not result.success
        assert result.error_type == error_type
        assert result.time_consumed == 0
        assert (self.state.enterprise.quadrant, self.state.enterprise.sector) == self.start

    def test_warp_engines_damaged(self):
        self.state.enterprise.set_system_damage(ShipSystem.WARP_ENGINES, -1.0)
        result = execute_navigation(self.state, ["1", "1"])

        self.assert_unchanged(result, ErrorType.SYSTEM_DAMAGED)
        assert result.message == "WARP ENGINES ARE DAMAGED"

    def test_missing_arguments(self):
        result = execute_navigation(self.state, ["1"])

        self.assert_unchanged(result, ErrorType.INVALID_INPUT)
        assert result.message.startswith("NAVIGATION REQUIRES COURSE AND WARP FACTOR")

    @pytest.mark.parametrize("course", ["0.5", "9.5", "abc"])
    def test_bad_course(self, course):
        result = execute_navigation(self.state, [course, "1"])

        self.assert_unchanged(result, ErrorType.INVALID_INPUT)
        assert result.message == "COURSE MUST BE BETWEEN 1.0 AND 9.0"

    @pytest.mark.parametrize("warp", ["0", "-1", "fast"])
    def test_bad_warp(self, warp):
        result = execute_navigation(self.state, ["1", warp])

        self.assert_unchanged(result, ErrorType.INVALID_INPUT)
        assert result.message == "WARP FACTOR MUST BE POSITIVE"

    def test_insufficient_energy(self):
        self.state.enterprise.energy = 15
        result = execute_navigation(self.state, ["1", "1"])

        self.assert_unchanged(result, ErrorType.INSUFFICIENT_RESOURCE)
        assert result.message == "INSUFFICIENT ENERGY. NEED 18 UNITS, HAVE 15"
        assert self.state.enterprise.energy == 15
