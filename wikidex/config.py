"""
Global configuration for wikidex.
All paths, constants, and tunable parameters live here.
"""

from pathlib import Path
from types import MappingProxyType

# ── Paths ────────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = ROOT_DIR / "data"

CREATURES_FILE = "creatures.json"
MOVES_FILE = "moves.json"

# ── Move filter defaults ─────────────────────────────────────────────────────
# (min, max) inclusive.  A range at these bounds imposes no constraint.
MOVE_POWER_BOUNDS = (0, 200)
MOVE_ACCURACY_BOUNDS = (0, 100)
MOVE_PRIORITY_BOUNDS = (-5, 5)

MOVE_EFFECT_TOGGLES = (
    "has_status",
    "has_multi_hit",
    "has_recoil",
    "has_priority",
    "has_healing",
    "has_stat_changes",
    "has_flinch",
    "has_confusion",
)

# ── Creature filter defaults ─────────────────────────────────────────────────
STAT_BOUNDS = (0, 255)
CATCH_RATE_BOUNDS = (0, 255)
WEIGHT_BOUNDS = (0, 1000)
DEX_NUMBER_BOUNDS = (1, 999)


class EvolutionStatus:
    ALL = "all"
    CAN_EVOLVE = "can_evolve"
    FINAL = "final"


EVOLUTION_STATUSES = (EvolutionStatus.ALL, EvolutionStatus.CAN_EVOLVE, EvolutionStatus.FINAL)

# Catalog JSON key → BaseStats field
BASE_STAT_KEYS = MappingProxyType({
    "HP": "hp",
    "Attack": "attack",
    "Defense": "defense",
    "SpecialAttack": "special_attack",
    "SpecialDefense": "special_defense",
    "Speed": "speed",
})

# ── Color theme extraction ───────────────────────────────────────────────────
# Images above this many pixels are sampled every LARGE_IMAGE_STRIDE pixels.
LARGE_IMAGE_PIXELS = 10_000
LARGE_IMAGE_STRIDE = 4
# Pixels with alpha below this are treated as transparent.
ALPHA_THRESHOLD = 128

LIGHT_MIX = 0.15        # share of the primary color in the light variant
WHITE_MIX = 0.85        # share of white in the light variant
DARK_FACTOR = 0.7       # brightness kept in the dark variant
GRADIENT_ANGLE = 135

# Slate fallback palette (used when no color can be computed)
DEFAULT_THEME_COLORS = MappingProxyType({
    "primary": "#64748b",
    "primary_rgb": "100, 116, 139",
    "light": "#f1f5f9",
    "dark": "#475569",
})
