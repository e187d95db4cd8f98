from pathlib import Path

from .FileSystem import FileSystem


def find_matching_files(path: Path, file_system: FileSystem) -> list[Path]:
    """Files next to ``path`` that ``path`` names without their extension."""
    return file_system.list_sibling_stems(path.parent, path.name)
