from pathlib import Path


def find_git_top_level(path: Path) -> Path | None:
    """Closest directory at or above ``path`` holding a ``.git`` entry."""
    path = Path(path).resolve()
    for candidate in (path, *path.parents):
        if (candidate / ".git").exists():
            return candidate
    return None
