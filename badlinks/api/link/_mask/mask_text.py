"""Blank out the regions of markdown text that links must not be read from."""

import re

from .MaskState import MaskState

FILLER = " "
# Characters str.splitlines() breaks on; never masked so line structure survives.
LINE_BREAKS = "\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"

FENCE_OPEN_PATTERN = re.compile(r"^[ \t]*(`{3,}|~{3,})(.*)$")
FENCE_CLOSE_PATTERN = re.compile(r"^[ \t]*(`{3,}|~{3,})[ \t]*$")
# [//]: # hidden text   |   [//]:# hidden text   |   [//]: #
COMMENT_LINE_PATTERN = re.compile(r"^[ \t]*\[//\]:[ \t]*#(?:\s.*)?$")
REFERENCE_DEFINITION_LINE_PATTERN = re.compile(r"^[ \t>]*\[[^\]]+\]:")

# Openers recognised inside a line, tried at every position in NORMAL state.
_INLINE_OPENERS: list[tuple[re.Pattern[str], MaskState, re.Pattern[str]]] = [
    (re.compile(r"<!--"), MaskState.HTML_COMMENT, re.compile(r"-->")),
    (re.compile(r"<\?"), MaskState.PROCESSING_INSTRUCTION, re.compile(r"\?>")),
    (re.compile(r"<pre(?:\s[^>]*)?>", re.IGNORECASE), MaskState.HTML_PRE, re.compile(r"</pre\s*>", re.IGNORECASE)),
    (
        re.compile(r"<code(?:\s[^>]*)?>", re.IGNORECASE),
        MaskState.HTML_CODE_TAG,
        re.compile(r"</code\s*>", re.IGNORECASE),
    ),
]
_BACKTICK_RUN = re.compile(r"`+")


def mask_text(text: str, code_at_start: bool = True) -> str:
    """Return ``text`` with code and commented regions replaced by filler.

    The result has the same length and the same line breaks as ``text`` so
    offsets found in it address the same characters in the original. Regions
    that are never closed are masked to the end of the document.

    Args:
        text: Raw markdown.
        code_at_start: Whether indented lines before any other content open an
            indented code block. Header detection turns this off so an indented
            header at the top of a document is still a header.
    """
    chars = list(text)
    state = MaskState.NORMAL
    fence = ""
    closer: re.Pattern[str] | None = None
    previous_blank = True
    seen_content = False
    offset = 0

    for line in text.splitlines(keepends=True):
        body = line.rstrip("\r\n")
        line_end = offset + len(body)
        blank_line = not body.strip()

        if state is MaskState.FENCED_CODE:
            _blank(chars, offset, line_end)
            if _closes_fence(body, fence):
                state = MaskState.NORMAL
        elif state is MaskState.INDENTED_CODE and (blank_line or _indent_width(body) >= 4):
            if not REFERENCE_DEFINITION_LINE_PATTERN.match(body):
                _blank(chars, offset, line_end)
        else:
            if state is MaskState.INDENTED_CODE:
                state = MaskState.NORMAL

            opened_fence = _opens_fence(body) if state is MaskState.NORMAL else ""
            if opened_fence:
                fence = opened_fence
                state = MaskState.FENCED_CODE
                _blank(chars, offset, line_end)
            elif (
                state is MaskState.NORMAL
                and previous_blank
                and (seen_content or code_at_start)
                and not blank_line
                and _indent_width(body) >= 4
            ):
                state = MaskState.INDENTED_CODE
                if not REFERENCE_DEFINITION_LINE_PATTERN.match(body):
                    _blank(chars, offset, line_end)
            elif state is MaskState.NORMAL and COMMENT_LINE_PATTERN.match(body):
                _blank(chars, offset, line_end)
            else:
                state, closer = _mask_inline(chars, text, offset, line_end, state, closer)

        previous_blank = blank_line
        seen_content = seen_content or not blank_line
        offset += len(line)

    return "".join(chars)


def _mask_inline(
    chars: list[str],
    text: str,
    start: int,
    end: int,
    state: MaskState,
    closer: re.Pattern[str] | None,
) -> tuple[MaskState, re.Pattern[str] | None]:
    position = start
    while position < end:
        if state is MaskState.NORMAL:
            opened = _match_opener(text, position, end)
            if opened is None:
                position += 1
                continue
            state, length, closer = opened
            _blank(chars, position, position + length)
            position += length
            continue

        assert closer is not None
        found = closer.search(text, position, end)
        if found is None:
            _blank(chars, position, end)
            position = end
        else:
            _blank(chars, position, found.end())
            position = found.end()
            state = MaskState.NORMAL
            closer = None
    return state, closer


def _match_opener(text: str, position: int, end: int) -> tuple[MaskState, int, re.Pattern[str]] | None:
    char = text[position]
    if char == "`":
        run = _BACKTICK_RUN.match(text, position, end)
        assert run is not None
        width = len(run.group(0))
        return MaskState.INLINE_CODE_SPAN, width, re.compile(rf"(?<!`)`{{{width}}}(?!`)")
    if char != "<":
        return None
    for pattern, state, closer in _INLINE_OPENERS:
        opened = pattern.match(text, position, end)
        if opened:
            return state, len(opened.group(0)), closer
    return None


def _opens_fence(line: str) -> str:
    match = FENCE_OPEN_PATTERN.match(line)
    if not match:
        return ""
    marker, info = match.group(1), match.group(2)
    if marker.startswith("`") and "`" in info:
        return ""  # ```inline``` code on one line, not a fence
    return marker


def _closes_fence(line: str, fence: str) -> bool:
    match = FENCE_CLOSE_PATTERN.match(line)
    if not match:
        return False
    marker = match.group(1)
    return marker[0] == fence[0] and len(marker) >= len(fence)


def _indent_width(line: str) -> int:
    width = 0
    for char in line:
        if char == " ":
            width += 1
        elif char == "\t":
            width += 4
        else:
            break
    return width


def _blank(chars: list[str], start: int, end: int) -> None:
    for index in range(start, end):
        if chars[index] not in LINE_BREAKS:
            chars[index] = FILLER
