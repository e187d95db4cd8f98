"""Finding dataclass (UNO: single model)."""

from dataclasses import dataclass, field

from .BadLinkReason import BadLinkReason


@dataclass
class Finding:
    """A bad link in a document together with every reason it is bad."""

    file_path: str
    markdown_link: str
    reasons: list[BadLinkReason] = field(default_factory=list)
    line_numbers: list[int] = field(default_factory=list)

    def add_reasons(self, reasons: list[BadLinkReason]) -> None:
        for reason in reasons:
            if reason not in self.reasons:
                self.reasons.append(reason)

    def to_dict(self) -> dict:
        return {
            "markdown_link": self.markdown_link,
            "reasons": [reason.value for reason in self.reasons],
            "line_numbers": list(self.line_numbers),
        }
