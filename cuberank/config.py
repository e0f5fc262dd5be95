"""Shared constants for round scoring.

Values that more than one module relies on live here so that formats,
the ranking engine and the points mapper agree on them.
"""

from types import MappingProxyType

# --- Attempts ---
DEFAULT_ATTEMPT_COUNT = 5  # Canonical attempts per competitor in a round
MIN_ATTEMPTS_FOR_AVERAGE = 3  # Fewer valid attempts than this -> no average

# --- Round formats ---
DEFAULT_FORMAT = "Average of 5"

# --- Placement points ---
# 1st through 8th; any later position scores 0
PLACEMENT_POINTS = MappingProxyType({
    1: 10,
    2: 8,
    3: 6,
    4: 5,
    5: 4,
    6: 3,
    7: 2,
    8: 1,
})

# --- Advancement ---
DEFAULT_FINALS_SIZE = 8
MIN_MEDALISTS = 3

# --- Logging ---
LOG_LEVEL_ENV_VAR = "CUBERANK_LOG_LEVEL"
