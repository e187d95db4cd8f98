"""Shared constants for badlinks dot-directories and artefact locations."""

BADLINKS_HOME_EXT = ".badlinks"  # user-level state/config directory suffix

BADLINKS_HOME_DISPLAY = f"~/{BADLINKS_HOME_EXT}"  # user-readable path hint
