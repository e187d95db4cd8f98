"""Link occurrence dataclass (UNO: single model)."""

from dataclasses import dataclass

from .LinkKind import LinkKind
from .QuoteStyle import QuoteStyle


@dataclass(frozen=True)
class LinkOccurrence:
    """A single link found in a document.

    ``start``/``end`` are offsets into the document text; ``literal_text`` is the
    exact source substring echoed in reports.
    """

    kind: LinkKind
    is_image: bool
    literal_text: str
    raw_target: str
    display_text: str
    start: int
    end: int
    line_number: int = 1
    quote: QuoteStyle | None = None
    reference_id: str = ""
