"""Enumerate the documents under a scan root."""

import logging
import os
import re
from pathlib import Path

from ..config.BadLinksConfig import BadLinksConfig

logger = logging.getLogger(__name__)


def find_markdown_files(root: Path, config: BadLinksConfig | None = None) -> list[Path]:
    """Return every document under ``root``, sorted by path.

    Directories whose name matches one of ``config.ignore_dirnames`` are not
    walked. A ``root`` that is itself a document is returned alone.

    Raises:
        FileNotFoundError: If ``root`` does not exist
    """
    config = config or BadLinksConfig()
    root = Path(root).expanduser().resolve()
    if not root.exists():
        raise FileNotFoundError(f"Path does not exist: {root}")

    extensions = {extension.lower() for extension in config.extensions}
    if root.is_file():
        return [root] if root.suffix.lower() in extensions else []

    ignored = [re.compile(pattern) for pattern in config.ignore_dirnames]
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        skipped = [name for name in dirnames if any(pattern.search(name) for pattern in ignored)]
        if skipped:
            logger.debug("Skipping %s under %s", ", ".join(sorted(skipped)), dirpath)
        dirnames[:] = sorted(name for name in dirnames if name not in skipped)
        found.extend(
            Path(dirpath) / name for name in filenames if Path(name).suffix.lower() in extensions
        )

    logger.debug("Found %d documents under %s", len(found), root)
    return sorted(found)
