"""HTML anchor tag parser: <a href=...>text</a>."""

import re
from collections.abc import Iterator

from ..LinkKind import LinkKind
from ..LinkOccurrence import LinkOccurrence
from ..QuoteStyle import QuoteStyle
from ._BaseParser import BaseParser
from .line_number_at import line_number_at

# One rule for every quoting convention; the value group keeps its quotes.
ANCHOR_TAG_PATTERN = re.compile(
    r"""<a\s(?:[^>]*?\s)?href\s*=\s*(?P<value>"[^"]*"|'[^']*'|[“”][^“”>]*[“”]|[^\s>]+)[^>]*>(?P<text>.*?)</a\s*>""",
    re.IGNORECASE | re.DOTALL,
)

_QUOTES = {
    '"': QuoteStyle.DOUBLE,
    "'": QuoteStyle.SINGLE,
    "”": QuoteStyle.SMART,
    "“": QuoteStyle.SMART,
}


class AnchorTagParser(BaseParser):
    """Parser for HTML anchor tags quoted with ", ', the invalid ” or nothing."""

    def parse(self, masked: str, raw: str) -> Iterator[LinkOccurrence]:
        for match in ANCHOR_TAG_PATTERN.finditer(masked):
            value = raw[match.start("value") : match.end("value")]
            quote = _QUOTES.get(value[0], QuoteStyle.NONE)
            target = value[1:-1] if quote is not QuoteStyle.NONE else value
            target = target.strip()
            if not target or any(char.isspace() for char in target):
                continue

            yield LinkOccurrence(
                kind=LinkKind.ANCHOR_TAG,
                is_image=False,
                literal_text=raw[match.start() : match.end()],
                raw_target=target,
                display_text=raw[match.start("text") : match.end("text")],
                start=match.start(),
                end=match.end(),
                line_number=line_number_at(raw, match.start()),
                quote=quote,
            )
