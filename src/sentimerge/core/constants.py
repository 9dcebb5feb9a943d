"""Scoring constants.

These are fixed values that don't change between environments.
For configurable values, see config.py Settings.
"""

# ─────────────────────────────────────────────────────────────
# Modifiers
# ─────────────────────────────────────────────────────────────
NEGATION_SCALAR = -0.75  # Flip sign, keep 75% of the magnitude
INTENSIFIER_THRESHOLD = 1.0  # |valence| below this marks an intensifier
BASE_INTENSIFIER_FACTOR = 1.0

# ─────────────────────────────────────────────────────────────
# Punctuation / capitalization amplifier
# ─────────────────────────────────────────────────────────────
TRIPLE_EXCLAMATION = "!!!"
DOUBLE_EXCLAMATION = "!!"
TRIPLE_EXCLAMATION_BOOST = 1.3
DOUBLE_EXCLAMATION_BOOST = 1.1
SHOUTING_BOOST = 1.2
SHOUTING_MIN_LENGTH = 5  # Text must be strictly longer than this

# ─────────────────────────────────────────────────────────────
# Normalization bounds
# ─────────────────────────────────────────────────────────────
SCORE_MIN = -1.0
SCORE_MAX = 1.0
