"""Link parsers package."""

from ..LinkOccurrence import LinkOccurrence
from ._AnchorTagParser import AnchorTagParser
from ._BaseParser import BaseParser
from ._InlineLinkParser import InlineLinkParser
from ._MarkdownParser import MarkdownParser
from ._ReferenceLinkParser import ReferenceLinkParser


def extract_links(masked: str, raw: str) -> list[LinkOccurrence]:
    """Every link occurrence of a masked document, in source order."""
    return list(MarkdownParser().parse(masked, raw))


__all__ = [
    "AnchorTagParser",
    "BaseParser",
    "InlineLinkParser",
    "MarkdownParser",
    "ReferenceLinkParser",
    "extract_links",
]
