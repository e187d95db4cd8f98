"""Document dataclass (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Document:
    """A markdown document read at scan start. Immutable for the scan."""

    path: Path
    text: str

    @property
    def directory(self) -> Path:
        return self.path.parent

    @classmethod
    def read(cls, path: Path) -> "Document":
        resolved = Path(path).expanduser().resolve()
        return cls(path=resolved, text=resolved.read_text(encoding="utf-8"))
