"""
Centralized constants for editkit.

Scoring weights for the fuzzy matcher and defaults shared by the
settings layer, the picker and the CLI.
"""

# Fuzzy scoring weights
MATCH_SCORE = 1
START_OF_TERM_BONUS = 4
SEPARATOR_BONUS = 2
SEQUENCE_START_BONUS = 4

# Text measurement
DEFAULT_TAB_WIDTH = 4

# Picker / ranking
DEFAULT_MAX_RESULTS = 50

# Config
SETTINGS_PATH_PARTS = (".config", "editkit", "settings.json")
LOCALE_ENV_VAR = "EDITKIT_LOCALE"
