"""Resolved link target dataclass (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ResolvedTarget:
    """Where a local link points once resolved against the filesystem."""

    target_path: Path | None
    target_exists: bool = False
    is_directory: bool = False
    match_count: int = 0
    anchor_fragment: str | None = None
