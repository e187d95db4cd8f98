"""Header entry dataclass (UNO: single model)."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HeaderEntry:
    """A header of a document and the anchor slug that links to it."""

    header_text: str
    slug: str
    source_line: int
    variants: tuple[str, ...] = field(default_factory=tuple)

    def matches(self, anchor: str) -> bool:
        return anchor == self.slug or anchor in self.variants
