# dfa_animator/utils/config.py
"""
Central configuration file for the DFA Animator application.

Contains static application settings and playback defaults. Values that the
user can change at runtime (speed, auto-play) are stored by the
SettingsManager; the constants here are only their defaults.
"""

# ==============================================================================
# STATIC APPLICATION CONFIGURATION
# ==============================================================================

APP_VERSION = "1.0.0"
APP_NAME = "DFA Animator"
ORGANIZATION_NAME = "DFA-Animator-Devs"

EXPORT_FILE_EXTENSION = ".json"
DEFAULT_EXPORTER_NAME = "DFA JSON"
DEFAULT_IMPORTER_NAME = "DFA JSON"
DEFAULT_EXPORT_BASENAME = "custom-dfa"

# Key under which named automata are kept in the key-value store.
SAVED_AUTOMATA_KEY = "savedDFAs"


# ==============================================================================
# PLAYBACK DEFAULTS
# ==============================================================================

DEFAULT_ANIMATION_SPEED_MS = 1000
MIN_ANIMATION_SPEED_MS = 50
MAX_ANIMATION_SPEED_MS = 5000
DEFAULT_AUTO_PLAY = True

# Construction steps run faster than simulation steps: delay = speed / divisor.
CONSTRUCTION_SPEED_DIVISOR = 1.5

SPEED_PRESETS = {
    "step": 1000,
    "fast": 400,
    "slow": 2000,
}
FAST_SPEED_THRESHOLD_MS = 400
SLOW_SPEED_THRESHOLD_MS = 2000

RANDOM_TEST_MIN_LENGTH = 3
RANDOM_TEST_MAX_LENGTH = 10


# ==============================================================================
# RENDERING HINTS
# ==============================================================================
# The core does not draw anything; this is the curve geometry that
# renderers and the grouping helpers agree on.

BIDIRECTIONAL_CURVE_OFFSET = 25


def speed_name(speed_ms: int) -> str:
    """Human-readable name for an animation speed."""
    if speed_ms <= FAST_SPEED_THRESHOLD_MS:
        return "Fast"
    if speed_ms >= SLOW_SPEED_THRESHOLD_MS:
        return "Slow"
    return "Normal"
