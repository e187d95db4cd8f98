"""Filesystem primitives used by the resolver."""

from pathlib import Path


class FileSystem:
    """Existence and listing queries against the real filesystem.

    Tests may substitute another object exposing the same three methods.
    """

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def list_sibling_stems(self, directory: Path, base_name: str) -> list[Path]:
        """Files in ``directory`` whose stem is exactly ``base_name`` (case-sensitive)."""
        if not directory.is_dir():
            return []
        return sorted(entry for entry in directory.iterdir() if entry.is_file() and entry.stem == base_name)
