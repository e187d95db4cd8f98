"""Check a link's anchor against a slug table."""

from urllib.parse import unquote

from ..BadLinkReason import BadLinkReason
from ..HeaderEntry import HeaderEntry


def check_anchor(table: list[HeaderEntry], anchor: str) -> BadLinkReason | None:
    """Return the reason ``anchor`` does not name a header in ``table``, or None.

    An anchor that only matches once lower-cased is reported as case sensitive
    rather than missing.
    """
    anchor = unquote(anchor)
    if any(entry.matches(anchor) for entry in table):
        return None
    lowered = anchor.lower()
    if lowered != anchor and any(entry.matches(lowered) for entry in table):
        return BadLinkReason.CASE_SENSITIVE_HEADER_TAG
    return BadLinkReason.HEADER_TAG_NOT_FOUND
