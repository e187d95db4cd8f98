"""Markdown link parser."""

from collections.abc import Iterator

from ..LinkOccurrence import LinkOccurrence
from ._AnchorTagParser import AnchorTagParser
from ._BaseParser import BaseParser
from ._InlineLinkParser import InlineLinkParser
from ._ReferenceLinkParser import ReferenceLinkParser


class MarkdownParser(BaseParser):
    """Parser for markdown files: inline, reference and anchor tag links in source order."""

    def __init__(self) -> None:
        self._parsers: list[BaseParser] = [InlineLinkParser(), ReferenceLinkParser(), AnchorTagParser()]

    def parse(self, masked: str, raw: str) -> Iterator[LinkOccurrence]:
        found = [occurrence for parser in self._parsers for occurrence in parser.parse(masked, raw)]
        yield from sorted(found, key=lambda occurrence: (occurrence.start, occurrence.end))
