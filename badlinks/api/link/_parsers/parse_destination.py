"""Split a link destination from its optional label."""

import re

# "label"  |  'label'  |  (label)
_LABEL_PATTERN = re.compile(r"""^(?:"[^"]*"|'[^']*'|\([^()]*\))$""", re.DOTALL)


def parse_destination(value: str) -> str | None:
    """Return the destination written in ``value``, or None when it is not one.

    Accepts ``target``, ``<target>`` and either followed by a quoted label, e.g.
    ``./file.md "the links label text"``. Anything else containing whitespace is
    not a valid destination.
    """
    value = value.strip()
    if not value:
        return None

    if value.startswith("<"):
        closing = value.find(">")
        if closing == -1:
            return None
        destination, rest = value[1:closing].strip(), value[closing + 1 :].strip()
    else:
        parts = value.split(None, 1)
        destination = parts[0]
        rest = parts[1].strip() if len(parts) > 1 else ""

    if rest and not _LABEL_PATTERN.match(rest):
        return None
    return destination or None
