"""Lazily filled cache of header slug tables keyed by document path."""

import threading
from pathlib import Path

from ..HeaderEntry import HeaderEntry
from .build_slug_table import build_slug_table


class SlugTableCache:
    """Slug tables of documents already read during one scan.

    Documents are not expected to change mid-scan, so entries are never
    invalidated. Concurrent inserts of the same path keep the first table.
    """

    def __init__(self) -> None:
        self._tables: dict[Path, list[HeaderEntry]] = {}
        self._lock = threading.Lock()

    def __contains__(self, path: Path) -> bool:
        with self._lock:
            return Path(path) in self._tables

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)

    def get(self, path: Path, text: str | None = None) -> list[HeaderEntry]:
        """Return the slug table of ``path``, reading the file when ``text`` is not given."""
        key = Path(path)
        with self._lock:
            cached = self._tables.get(key)
        if cached is not None:
            return cached

        if text is None:
            text = key.read_text(encoding="utf-8")
        table = build_slug_table(text)
        with self._lock:
            return self._tables.setdefault(key, table)
