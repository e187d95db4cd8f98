"""Reference link parser: [text][id], [id] and their [id]: target definitions."""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from ..LinkKind import LinkKind
from ..LinkOccurrence import LinkOccurrence
from ._BaseParser import BaseParser
from .line_number_at import line_number_at
from .parse_destination import parse_destination

# Only whitespace and blockquote markers may precede a definition.
DEFINITION_PATTERN = re.compile(r"^(?P<prefix>[ \t>]*)\[(?P<id>[^\[\]\n]+)\]:(?P<rest>.*)$", re.MULTILINE)
FULL_REFERENCE_PATTERN = re.compile(r"(!?)\[([^\[\]\n]+)\]\[([^\[\]\n]*)\]")
SHORTHAND_REFERENCE_PATTERN = re.compile(r"(?<!\])(!?)\[([^\[\]\n]+)\](?![\[(:])")


@dataclass
class _Definition:
    start: int
    end: int
    literal_text: str
    destination: str
    line_number: int


def normalize_reference_id(reference_id: str) -> str:
    return " ".join(reference_id.split()).lower()


class ReferenceLinkParser(BaseParser):
    """Parser for full and shorthand reference links.

    Usages are yielded for ordering and image detection. The definition line is
    the occurrence that carries the target; it is an image reference when any
    usage of its id starts with ``!``.
    """

    def parse(self, masked: str, raw: str) -> Iterator[LinkOccurrence]:
        definitions: dict[str, list[_Definition]] = {}
        for match in DEFINITION_PATTERN.finditer(masked):
            destination = parse_destination(raw[match.start("rest") : match.end("rest")])
            if destination is None:
                continue
            line = raw[match.start() : match.end()]
            definitions.setdefault(normalize_reference_id(match.group("id")), []).append(
                _Definition(
                    start=match.start() + len(line) - len(line.lstrip()),
                    end=match.end(),
                    literal_text=line.strip(),
                    destination=destination,
                    line_number=line_number_at(raw, match.start()),
                )
            )

        if not definitions:
            return

        usages: list[LinkOccurrence] = []
        covered: list[tuple[int, int]] = []
        for match in FULL_REFERENCE_PATTERN.finditer(masked):
            reference_id = normalize_reference_id(match.group(3) or match.group(2))
            covered.append((match.start(), match.end()))
            if reference_id not in definitions:
                continue
            usages.append(
                _usage(LinkKind.REFERENCE, match, raw, reference_id, definitions[reference_id][0].destination)
            )

        for match in SHORTHAND_REFERENCE_PATTERN.finditer(masked):
            if any(start <= match.start() < end for start, end in covered):
                continue
            reference_id = normalize_reference_id(match.group(2))
            if reference_id not in definitions:
                continue
            usages.append(
                _usage(
                    LinkKind.SHORTHAND_REFERENCE, match, raw, reference_id, definitions[reference_id][0].destination
                )
            )

        image_ids = {usage.reference_id for usage in usages if usage.is_image}
        occurrences = list(usages)
        for reference_id, found in definitions.items():
            for definition in found:
                occurrences.append(
                    LinkOccurrence(
                        kind=LinkKind.REFERENCE_DEFINITION,
                        is_image=reference_id in image_ids,
                        literal_text=definition.literal_text,
                        raw_target=definition.destination,
                        display_text=reference_id,
                        start=definition.start,
                        end=definition.end,
                        line_number=definition.line_number,
                        reference_id=reference_id,
                    )
                )
        yield from sorted(occurrences, key=lambda occurrence: occurrence.start)


def _usage(kind: LinkKind, match: re.Match[str], raw: str, reference_id: str, destination: str) -> LinkOccurrence:
    return LinkOccurrence(
        kind=kind,
        is_image=bool(match.group(1)),
        literal_text=raw[match.start() : match.end()],
        raw_target=destination,
        display_text=raw[match.start(2) : match.end(2)],
        start=match.start(),
        end=match.end(),
        line_number=line_number_at(raw, match.start()),
        reference_id=reference_id,
    )
