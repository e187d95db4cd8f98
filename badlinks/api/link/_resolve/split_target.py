"""Split a link target into its file and anchor parts."""


def split_target(target: str) -> tuple[str, str | None, bool]:
    """Return ``(file_part, anchor, too_many_hashes)`` for ``target``.

    The split happens on the first ``#``. Any further leading ``#`` characters
    of the fragment are dropped from the anchor and flagged. ``anchor`` is None
    when the target has no ``#`` at all.
    """
    file_part, separator, fragment = target.partition("#")
    if not separator:
        return file_part, None, False
    anchor = fragment.lstrip("#")
    return file_part, anchor, anchor != fragment
