"""Progression and planning constants."""

# Rep ladder
LADDER_FLOOR_REPS = 5
LADDER_CEILING_REPS = 7

# Deload
FAILURES_BEFORE_DELOAD = 2
DELOAD_FACTOR = 0.95

WEIGHT_STEP_KG = 0.25

# Day keys
MOBILITY_DAY_KEY = "Mobility"
PULL_DAY_PREFIX = "Pull"

# Bodyweight progression
PULLDOWN_EXERCISE_ID = "lat_pulldown"
PULLUP_EXERCISE_ID = "pullup"
PULLUP_NEGATIVE_EXERCISE_ID = "pullup_negative"
PULLDOWN_LOOKBACK = 4
NEGATIVES_MIN_SUCCESSES = 2
NEGATIVES_BODYWEIGHT_RATIO = 0.8
PULLUP_MIN_SUCCESSES = 3
PULLUP_BODYWEIGHT_RATIO = 1.0
