"""Reasons a local link is reported as bad."""

from enum import Enum


class BadLinkReason(str, Enum):
    """Stable reason codes attached to findings.

    The value is the code compared in reports and tests; ``message`` is the
    human readable explanation used by the text report.
    """

    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    MISSING_FILE_EXTENSION = "MISSING_FILE_EXTENSION"
    MULTIPLE_MATCHING_FILES = "MULTIPLE_MATCHING_FILES"
    HEADER_TAG_NOT_FOUND = "HEADER_TAG_NOT_FOUND"
    CASE_SENSITIVE_HEADER_TAG = "CASE_SENSITIVE_HEADER_TAG"
    TOO_MANY_HASH_CHARACTERS = "TOO_MANY_HASH_CHARACTERS"
    ABSOLUTE_LINK_INVALID_START_POINT = "ABSOLUTE_LINK_INVALID_START_POINT"
    BAD_RELATIVE_LINK_SYNTAX = "BAD_RELATIVE_LINK_SYNTAX"
    POTENTIAL_WINDOWS_ABSOLUTE_LINK = "POTENTIAL_WINDOWS_ABSOLUTE_LINK"
    INVALID_IMAGE_EXTENSIONS = "INVALID_IMAGE_EXTENSIONS"
    ANCHOR_TAG_INVALID_QUOTE = "ANCHOR_TAG_INVALID_QUOTE"

    @property
    def message(self) -> str:
        return _MESSAGES[self.value]


_MESSAGES = {
    "FILE_NOT_FOUND": "File cannot be found",
    "MISSING_FILE_EXTENSION": (
        "Either the link is pointing at a non existent directory or it requires a file extension"
    ),
    "MULTIPLE_MATCHING_FILES": (
        "There are two files the link could be referencing. It is unclear which one it should link to"
    ),
    "HEADER_TAG_NOT_FOUND": "Header tag cannot be found in the file",
    "CASE_SENSITIVE_HEADER_TAG": (
        "Header tag includes upper case characters. It will work in github but may not work in other markdown readers"
    ),
    "TOO_MANY_HASH_CHARACTERS": "A header link should not contain more than one hash character",
    "ABSOLUTE_LINK_INVALID_START_POINT": "Absolute links must start from the root of the scanned directory",
    "BAD_RELATIVE_LINK_SYNTAX": (
        "Relative link syntax can only step up by one parent directory at a time. '.../' is invalid"
    ),
    "POTENTIAL_WINDOWS_ABSOLUTE_LINK": (
        "This link is potentially an absolute link on a windows machine. These do not work on github"
    ),
    "INVALID_IMAGE_EXTENSIONS": "Image extension is not one of the supported image extensions",
    "ANCHOR_TAG_INVALID_QUOTE": "The anchor tag is using invalid quotes and may not work when clicked",
}
