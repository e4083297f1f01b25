"""Game-wide constants for Hyrule Heroes.

The numeric values here are design choices carried by every engine;
changing one changes recorded playthroughs.
"""

from __future__ import annotations

# =============================================================================
# Damage
# =============================================================================

CRITICAL_MULTIPLIER = 2
"""Damage multiplier applied on a critical hit."""

MINIMUM_DAMAGE = 1
"""Floor for any damage that lands after defense."""

ATTACK_DIVISOR = 10
"""Attack points needed per extra damage multiplier step."""

CRITICAL_RESIDUE = 7
"""An attack stat ending in this digit always lands a critical hit."""

# =============================================================================
# Player progression
# =============================================================================

STARTING_HEALTH = 100
STARTING_ATTACK = 10
STARTING_DEFENSE = 5

BASE_EXP_REQUIREMENT = 100
"""Experience required to leave level 1."""

EXP_MULTIPLIER = 1.5
"""Growth factor of the experience requirement per level."""

HEALTH_PER_LEVEL = 20
ATTACK_PER_LEVEL = 3
DEFENSE_PER_LEVEL = 2

# =============================================================================
# Enemies
# =============================================================================

ATTACK_RANGE = 1
"""Manhattan distance at which an enemy attacks."""

FLEE_THRESHOLD = 20
"""Health percentage below which non-boss enemies flee."""

# =============================================================================
# Inventory
# =============================================================================

DEFAULT_INVENTORY_CAPACITY = 20
BOOST_AMOUNT = 5
"""Stat bonus granted by attack and defense boost consumables."""

# =============================================================================
# World
# =============================================================================

WORLD_SIZE = 100
"""Width and height of the world grid."""

START_POSITION = (50, 50)
START_AREA = "Hyrule Field"

ENCOUNTER_RATE = 2
"""Encounter buckets out of ten that trigger a fight."""
