"""Output schemas for API commands."""

from ._base import BaseOutputSchema
from .link import LinkCheckOutput, LinkScanOutput

__all__ = ["BaseOutputSchema", "LinkCheckOutput", "LinkScanOutput"]
