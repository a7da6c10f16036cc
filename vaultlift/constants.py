"""Shared constants for vaultlift dot-directories and artefact locations."""

VAULTLIFT_HOME_EXT = ".vaultlift"  # user-level state/config directory suffix

CONFIG_FILENAME = "config.json"
LOG_FILENAME = "vaultlift.log"

# Number of preview lines shown by the CLI report
MAX_PREVIEW_LINES = 200
