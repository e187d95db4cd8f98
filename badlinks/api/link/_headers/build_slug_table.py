"""Build the ordered header slug table of a markdown document."""

import re

from ..HeaderEntry import HeaderEntry
from .._mask import mask_text
from .slugify_header import slug_variants, slugify_header

ATX_HEADER_PATTERN = re.compile(r"^[ \t]*#{1,6}[ \t]+(?P<text>.*?)(?:[ \t]+#+)?[ \t]*$")
SETEXT_UNDERLINE_PATTERN = re.compile(r"^ {0,3}(?:=+|-+)[ \t]*$")


def build_slug_table(text: str) -> list[HeaderEntry]:
    """Return every header of ``text`` with its de-duplicated anchor slug.

    Headers inside fenced code, ``<pre>``/``<code>`` blocks and comments are not
    headers. The first occurrence of a slug keeps it bare; later ones get ``-1``,
    ``-2``, ... in the order they appear.
    """
    raw_lines = text.splitlines()
    masked_lines = mask_text(text, code_at_start=False).splitlines()

    headers: list[tuple[int, str]] = []
    atx_lines: set[int] = set()
    for index, masked in enumerate(masked_lines):
        if ATX_HEADER_PATTERN.match(masked):
            match = ATX_HEADER_PATTERN.match(raw_lines[index])
            if match:
                headers.append((index, match.group("text")))
                atx_lines.add(index)
            continue

        if index == 0 or not SETEXT_UNDERLINE_PATTERN.match(masked):
            continue
        previous = index - 1
        if previous in atx_lines or not masked_lines[previous].strip():
            continue
        if SETEXT_UNDERLINE_PATTERN.match(masked_lines[previous]):
            continue
        headers.append((previous, raw_lines[previous].strip()))

    headers.sort(key=lambda header: header[0])

    seen: dict[str, int] = {}
    table: list[HeaderEntry] = []
    for index, header_text in headers:
        slug = slugify_header(header_text)
        variants = slug_variants(header_text)
        count = seen.get(slug, 0)
        seen[slug] = count + 1
        if count:
            slug = f"{slug}-{count}"
            variants = tuple(f"{variant}-{count}" for variant in variants)
        table.append(HeaderEntry(header_text=header_text, slug=slug, source_line=index + 1, variants=variants))
    return table
