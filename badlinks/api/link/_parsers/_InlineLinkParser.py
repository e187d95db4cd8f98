"""Inline link parser: [text](target) and ![alt](target)."""

import re
from collections.abc import Iterator

from ..LinkKind import LinkKind
from ..LinkOccurrence import LinkOccurrence
from ._BaseParser import BaseParser
from .line_number_at import line_number_at
from .parse_destination import parse_destination

INLINE_LINK_OPEN_PATTERN = re.compile(r"(!?)\[((?:[^\[\]\n]|\[[^\[\]\n]*\])*)\]\(")


class InlineLinkParser(BaseParser):
    """Parser for inline links.

    The destination ends at the parenthesis balancing the opening one, so text
    such as ``[a](./a.md)(foobar)`` never runs into the following parentheses.
    """

    def parse(self, masked: str, raw: str) -> Iterator[LinkOccurrence]:
        position = 0
        while True:
            match = INLINE_LINK_OPEN_PATTERN.search(masked, position)
            if match is None:
                return

            closing = _find_closing_parenthesis(masked, match.end())
            if closing == -1:
                position = match.start() + 1
                continue
            # links nested in the text, such as the image of a badge, are scanned next
            position = match.start(2) if "[" in match.group(2) else closing + 1

            destination = parse_destination(raw[match.end() : closing])
            if destination is None:
                continue

            yield LinkOccurrence(
                kind=LinkKind.INLINE,
                is_image=bool(match.group(1)),
                literal_text=raw[match.start() : closing + 1],
                raw_target=destination,
                display_text=raw[match.start(2) : match.end(2)],
                start=match.start(),
                end=closing + 1,
                line_number=line_number_at(raw, match.start()),
            )


def _find_closing_parenthesis(text: str, start: int) -> int:
    depth = 1
    in_angle = False
    for index in range(start, len(text)):
        char = text[index]
        if char == "\n":
            return -1
        if in_angle:
            in_angle = char != ">"
        elif char == "<" and not text[start:index].strip():
            in_angle = True
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
    return -1
