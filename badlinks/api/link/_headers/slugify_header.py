"""Turn header text into the anchor slug used to link to it."""

import re

# https://stackoverflow.com/questions/51221730/markdown-link-to-header
_COMMENTS = re.compile(r"<!--.*?-->|<\?.*?\?>", re.DOTALL)
_CODE_ELEMENTS = re.compile(r"<(code|pre)(?:\s[^>]*)?>.*?(?:</\1\s*>|$)", re.IGNORECASE | re.DOTALL)
_NOT_SLUG_CHARS = re.compile(r"[^\w\s-]")  # \w keeps letters, digits and underscores
_WHITESPACE_RUN = re.compile(r"\s+")
_WHITESPACE = re.compile(r"\s")


def clean_header_text(header_text: str) -> str:
    """Drop comments and <code>/<pre> elements from header text and unwrap code spans."""
    text = _COMMENTS.sub("", header_text)
    text = _CODE_ELEMENTS.sub("", text)
    return text.replace("`", "").strip()


def slugify_header(header_text: str) -> str:
    """Canonical slug: lowercase, punctuation removed, whitespace runs become one hyphen."""
    text = _NOT_SLUG_CHARS.sub("", clean_header_text(header_text).lower())
    return _WHITESPACE_RUN.sub("-", text).strip("-")


def slug_variants(header_text: str) -> tuple[str, ...]:
    """Other slugs markdown renderers produce for the same header.

    GitHub replaces every whitespace character with its own hyphen and keeps a
    trailing one left behind by removed punctuation (``# title ?`` -> ``title-``).
    Links to snake case headers also work with the underscores dropped.
    """
    canonical = slugify_header(header_text)
    github = _WHITESPACE.sub("-", _NOT_SLUG_CHARS.sub("", clean_header_text(header_text).lower()))
    candidates = [github, canonical.replace("_", ""), github.replace("_", "")]
    variants: list[str] = []
    for candidate in candidates:
        if candidate != canonical and candidate not in variants:
            variants.append(candidate)
    return tuple(variants)
