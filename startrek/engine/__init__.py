"""Game engine components."""

from .combat import klingon_counter_attack
from .damage_control import execute_damage_control
from .emergency import check_emergency_conditions
from .navigation import execute_navigation
from .phasers import execute_phasers
from .results import CommandError, CommandResult, ErrorType
from .sensors import execute_long_range_scan, execute_short_range_scan
from .shields import execute_shields
from .torpedoes import execute_torpedoes

__all__ = [
    "CommandError",
    "CommandResult",
    "ErrorType",
    "check_emergency_conditions",
    "execute_damage_control",
    "execute_long_range_scan",
    "execute_navigation",
    "execute_phasers",
    "execute_short_range_scan",
    "execute_shields",
    "execute_torpedoes",
    "klingon_counter_attack",
]
