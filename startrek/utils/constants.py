"""Game configuration constants."""

# Grid dimensions (galaxy is GRID_SIZE x GRID_SIZE quadrants, each quadrant
# is GRID_SIZE x GRID_SIZE sectors)
GRID_SIZE = 8

# Enterprise starting resources
MAX_ENERGY = 3000
MAX_TORPEDOES = 10

# Klingon ships
KLINGON_BASE_SHIELDS = 200  # S9 in the legacy listing

# Galaxy generation thresholds
KLINGON_THRESHOLDS = ((0.98, 3), (0.95, 2), (0.80, 1))
STARBASE_THRESHOLD = 0.96

# Mission clock
MISSION_BASE_DAYS = 25
MISSION_EXTRA_DAYS = 10
MOVE_TIME = 1.0  # Stardates consumed by a navigation or weapons command

# Navigation
NAVIGATION_ENERGY_SURCHARGE = 10

# Torpedoes
TORPEDO_ENERGY_COST = 2

# Combat
PHASER_SIGNIFICANT_HIT = 0.15  # Fraction of target shields a hit must exceed
SYSTEM_HIT_THRESHOLD = 20  # Minimum hit that can damage a ship system

# Damage control
REPAIR_TIME_PER_SYSTEM = 0.1
REPAIR_ESTIMATE_CAP = 0.9
REPAIR_OVERHEAD = 0.1
MINOR_DAMAGE_FLOOR = -0.1
RANDOM_DAMAGE_EVENT_PROB = 0.2
RANDOM_DAMAGE_PROB = 0.6

# Condition / emergencies
LOW_ENERGY_FRACTION = 0.1  # Below this share of max energy the condition is YELLOW
LOW_SHIELD_WARNING = 200
STRANDED_POWER_LIMIT = 10

# Sector glyphs (3 characters each)
EMPTY_GLYPH = "   "
ENTERPRISE_GLYPH = "<*>"
KLINGON_GLYPH = "+K+"
STAR_GLYPH = " * "
STARBASE_GLYPH = ">!<"
UNKNOWN_QUADRANT = "***"

# Testing
RNG_SEED_DEFAULT = 42  # Default seed for testing
