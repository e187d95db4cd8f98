"""Scanner states for markdown masking."""

from enum import Enum


class MaskState(Enum):
    NORMAL = "normal"
    FENCED_CODE = "fenced_code"
    INDENTED_CODE = "indented_code"
    HTML_PRE = "html_pre"
    HTML_CODE_TAG = "html_code_tag"
    HTML_COMMENT = "html_comment"
    PROCESSING_INSTRUCTION = "processing_instruction"
    INLINE_CODE_SPAN = "inline_code_span"
