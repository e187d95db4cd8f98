"""Abstract base parser for link extraction."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from ..LinkOccurrence import LinkOccurrence


class BaseParser(ABC):
    """Abstract interface for link parsers.

    Parsers search ``masked`` so code and comments are never matched, and read
    ``raw`` at the same offsets to reproduce the source text.
    """

    @abstractmethod
    def parse(self, masked: str, raw: str) -> Iterator[LinkOccurrence]:
        """Parse text and yield found links."""
        pass
