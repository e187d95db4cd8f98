"""Link API domain."""

from .._output_schemas.link import BadLinksInFile, FoundIssue, LinkCheckOutput, LinkScanOutput

__all__ = [
    "BadLinksInFile",
    "FoundIssue",
    "LinkCheckOutput",
    "LinkScanOutput",
]
