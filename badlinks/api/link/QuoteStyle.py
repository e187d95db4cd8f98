"""Quoting used around an anchor tag's href value."""

from enum import Enum


class QuoteStyle(str, Enum):
    DOUBLE = "double"
    SINGLE = "single"
    SMART = "smart"  # ” is not a valid attribute quote
    NONE = "none"
