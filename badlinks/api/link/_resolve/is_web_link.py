import re

# http:, https:, mailto:, ftp:, ... (one letter followed by ":" is a drive letter)
WEB_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+-]+:")


def is_web_link(target: str) -> bool:
    """Whether ``target`` uses a web or email scheme and is never checked locally."""
    return bool(WEB_SCHEME_PATTERN.match(target.strip()))
