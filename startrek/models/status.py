"""Pydantic snapshots of the game for displays and callers."""

from pydantic import BaseModel, Field


class ShipStatus(BaseModel):
    """Read-only view of the Enterprise and mission at one moment."""

    stardate: float
    remaining_time: float
    condition: str = Field(description="DOCKED, *RED*, YELLOW or GREEN")
    quadrant: tuple[int, int]
    sector: tuple[int, int]
    energy: int
    shields: int
    torpedoes: int
    docked: bool
    klingons_remaining: int
    klingons_in_quadrant: int
    starbases_remaining: int
    damaged_systems: list[str] = Field(default_factory=list, description="Display names, ordinal order")
    mission_status: str


class MissionBriefing(BaseModel):
    """Mission orders, fixed when the game is created."""

    klingons: int = Field(description="Klingon warships to destroy")
    starting_stardate: float
    mission_end_stardate: float
    mission_time_limit: int = Field(description="Days available")
    starbases: int = Field(description="Starbases available for resupply")
