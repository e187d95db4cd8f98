"""Get badlinks home directory path or path under it."""

import os
from pathlib import Path

from ...constants import BADLINKS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get badlinks home directory path or path under it.

    Checks the BADLINKS_HOME environment variable first and defaults to
    ~/.badlinks when it is not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "logfile")

    Returns:
        Absolute path to the home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.badlinks")
        >>> get_home_dir("config.json")
        Path("/Users/user/.badlinks/config.json")
    """
    home_env = os.environ.get("BADLINKS_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # HOME is honoured for test isolation
        user_home = os.environ.get("HOME")
        home = (Path(user_home) if user_home else Path.home()) / BADLINKS_HOME_EXT

    return home / Path(*parts) if parts else home
