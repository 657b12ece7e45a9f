"""Utility functions and constants for Super Star Trek."""

from .constants import (
    EMPTY_GLYPH,
    ENTERPRISE_GLYPH,
    GRID_SIZE,
    KLINGON_GLYPH,
    MAX_ENERGY,
    MAX_TORPEDOES,
    RNG_SEED_DEFAULT,
    STAR_GLYPH,
    STARBASE_GLYPH,
    UNKNOWN_QUADRANT,
)
from .distance import euclidean_distance, is_adjacent
from .rng import GameRNG

__all__ = [
    "EMPTY_GLYPH",
    "ENTERPRISE_GLYPH",
    "GRID_SIZE",
    "KLINGON_GLYPH",
    "MAX_ENERGY",
    "MAX_TORPEDOES",
    "RNG_SEED_DEFAULT",
    "STAR_GLYPH",
    "STARBASE_GLYPH",
    "UNKNOWN_QUADRANT",
    "euclidean_distance",
    "is_adjacent",
    "GameRNG",
]
