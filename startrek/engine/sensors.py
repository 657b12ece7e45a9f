"""SRS and LRS commands: short and long range sensor displays."""

from ..models.coordinates import Coordinates
from ..models.galaxy import Galaxy
from ..models.game_state import GameState
from ..models.ship_system import ShipSystem
from ..utils.constants import EMPTY_GLYPH, UNKNOWN_QUADRANT
from .results import CommandResult, ErrorType

LRS_BORDER = "    -------------------"
LRS_LEGEND = [
    "LEGEND:",
    "  First digit: Klingons",
    "  Second digit: Starbases",
    "  Third digit: Stars",
]


def long_range_scan(galaxy: Galaxy, center: Coordinates) -> list[list[str]]:
    """Scan the 3x3 block of quadrants around center.

    The center quadrant is marked explored first. Explored quadrants show
    their known code as three digits, unexplored ones show "***" and
    positions outside the galaxy are blank.

    Args:
        galaxy: The galaxy
        center: Quadrant the ship is in

    Returns:
        Three rows (y - 1 to y + 1) of three cells (x - 1 to x + 1)
    """
    galaxy.mark_quadrant_explored(center)

    rows = []
    for dy in (-1, 0, 1):
        row = []
        for dx in (-1, 0, 1):
            x, y = center.x + dx, center.y + dy
            if not Coordinates.is_valid(x, y):
                row.append(EMPTY_GLYPH)
                continue
            coords = Coordinates(x, y)
            if galaxy.is_explored(coords):
                row.append(f"{galaxy.get_known_data(coords):03d}")
            else:
                row.append(UNKNOWN_QUADRANT)
        rows.append(row)
    return rows


def status_column(state: GameState) -> list[str]:
    """The eight status lines printed beside the short range scan."""
    enterprise = state.enterprise
    condition = enterprise.condition(state.current_quadrant.klingon_count > 0)
    return [
        f"STARDATE      {state.current_stardate:.1f}",
        f"CONDITION     {condition}",
        f"QUADRANT      {enterprise.quadrant.x},{enterprise.quadrant.y}",
        f"SECTOR        {enterprise.sector.x},{enterprise.sector.y}",
        f"PHOTON TORPEDOES {enterprise.torpedoes}",
        f"TOTAL ENERGY  {enterprise.energy + enterprise.shields}",
        f"SHIELDS       {enterprise.shields}",
        f"KLINGONS REMAINING {state.klingons_remaining}",
    ]


def execute_short_range_scan(state: GameState, args: list[str]) -> CommandResult:
    """Execute SRS: draw the current quadrant with the ship's status."""
    if not state.enterprise.is_system_operational(ShipSystem.SHORT_RANGE_SENSORS):
        return CommandResult.failure(ErrorType.SYSTEM_DAMAGED, "SHORT RANGE SENSORS ARE DAMAGED")

    lines = ["SHORT RANGE SENSORS", ""]
    rows = state.current_quadrant.glyph_rows()
    for row, status in zip(rows, status_column(state)):
        lines.append("".join(f" {glyph}" for glyph in row) + f"    {status}")

    if state.enterprise.shields_dangerously_low():
        lines.append("")
        lines.append("   SHIELDS DANGEROUSLY LOW")
    return CommandResult.ok("\n".join(lines))


def execute_long_range_scan(state: GameState, args: list[str]) -> CommandResult:
    """Execute LRS: show the codes of the surrounding quadrants."""
    enterprise = state.enterprise
    if not enterprise.is_system_operational(ShipSystem.LONG_RANGE_SENSORS):
        return CommandResult.failure(ErrorType.SYSTEM_DAMAGED, "LONG RANGE SENSORS ARE DAMAGED")

    lines = [
        "LONG RANGE SENSORS",
        f"FOR QUADRANT {enterprise.quadrant.x},{enterprise.quadrant.y}",
        "",
        LRS_BORDER,
    ]
    for row in long_range_scan(state.galaxy, enterprise.quadrant):
        lines.append("    " + "".join(f": {cell} " for cell in row) + ":")
    lines.append(LRS_BORDER)
    lines.append("")
    lines.extend(LRS_LEGEND)
    return CommandResult.ok("\n".join(lines))
