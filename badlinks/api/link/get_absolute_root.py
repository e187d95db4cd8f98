from pathlib import Path

from ..config.BadLinksConfig import BadLinksConfig
from ._resolve import find_git_top_level


def get_absolute_root(scan_root: Path, config: BadLinksConfig) -> Path:
    """Directory that links starting with ``/`` resolve against."""
    if config.absolute_links_root == "git":
        return find_git_top_level(scan_root) or scan_root
    return scan_root
