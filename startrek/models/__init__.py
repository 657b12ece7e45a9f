"""Data models for Super Star Trek."""

from .coordinates import Coordinates
from .enterprise import Enterprise
from .galaxy import Galaxy
from .game_state import GameState
from .klingon import KlingonShip
from .quadrant import Quadrant
from .ship_system import ShipSystem
from .status import MissionBriefing, ShipStatus

__all__ = [
    "Coordinates",
    "ShipSystem",
    "KlingonShip",
    "Quadrant",
    "Galaxy",
    "Enterprise",
    "GameState",
    "ShipStatus",
    "MissionBriefing",
]
