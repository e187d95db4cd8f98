"""Syntactic form of a link occurrence."""

from enum import Enum


class LinkKind(str, Enum):
    INLINE = "inline"
    REFERENCE = "reference"
    SHORTHAND_REFERENCE = "shorthand-reference"
    ANCHOR_TAG = "anchor-tag"
    REFERENCE_DEFINITION = "reference-definition"
