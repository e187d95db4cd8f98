"""Masking of code and commented regions in markdown text."""

from .mask_text import mask_text
from .MaskState import MaskState

__all__ = ["MaskState", "mask_text"]
