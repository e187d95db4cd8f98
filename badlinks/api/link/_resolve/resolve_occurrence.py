"""Classify a link occurrence and resolve its target against the filesystem."""

import os
import re
from pathlib import Path, PurePosixPath
from urllib.parse import unquote

from ..BadLinkReason import BadLinkReason
from ..LinkKind import LinkKind
from ..LinkOccurrence import LinkOccurrence
from ..QuoteStyle import QuoteStyle
from ..ResolvedTarget import ResolvedTarget
from .._headers import SlugTableCache, check_anchor
from .FileSystem import FileSystem
from .find_matching_files import find_matching_files
from .is_web_link import is_web_link
from .split_target import split_target

WINDOWS_ABSOLUTE_PATTERN = re.compile(r"^/?\w:")
BAD_RELATIVE_SYNTAX_PATTERN = re.compile(r"(?:^|/)\.{3,}")
LINE_NUMBER_ANCHOR_PATTERN = re.compile(r"^L\d+(?:-L\d+)?$", re.IGNORECASE)
SMART_QUOTES = "“”"

DEFAULT_IMAGE_EXTENSIONS = (
    ".apng",
    ".avif",
    ".bmp",
    ".gif",
    ".ico",
    ".jpeg",
    ".jpg",
    ".jfif",
    ".pjpeg",
    ".pjp",
    ".png",
    ".svg",
    ".tif",
    ".tiff",
    ".webp",
)


def resolve_occurrence(
    occurrence: LinkOccurrence,
    document_path: Path,
    scan_root: Path,
    cache: SlugTableCache,
    *,
    image_extensions: tuple[str, ...] | list[str] = DEFAULT_IMAGE_EXTENSIONS,
    markdown_extensions: tuple[str, ...] | list[str] = (".md",),
    file_system: FileSystem | None = None,
) -> list[BadLinkReason]:
    """Return every reason ``occurrence`` is a bad link, in discovery order.

    Args:
        occurrence: The link to check.
        document_path: Resolved path of the document containing the link.
        scan_root: Directory that links starting with ``/`` resolve against.
        cache: Slug tables shared across the scan.
        image_extensions: Allowed extensions for image links.
        markdown_extensions: Targets with these extensions have their anchors checked.
        file_system: Filesystem primitives (real filesystem by default).

    Returns:
        Reasons in the order the checks find them. Empty when the link is fine
        or is not a local link.
    """
    file_system = file_system or FileSystem()
    reasons: list[BadLinkReason] = []

    def add(reason: BadLinkReason | None) -> None:
        if reason is not None and reason not in reasons:
            reasons.append(reason)

    target = occurrence.raw_target
    smart_quoted = occurrence.kind is LinkKind.ANCHOR_TAG and occurrence.quote is QuoteStyle.SMART
    if smart_quoted:
        target = target.strip(SMART_QUOTES)

    if is_web_link(target):
        return reasons

    file_part, anchor, too_many_hashes = split_target(target)

    if not file_part:
        if anchor and not LINE_NUMBER_ANCHOR_PATTERN.match(anchor):
            add(check_anchor(cache.get(document_path), anchor))
        if too_many_hashes:
            add(BadLinkReason.TOO_MANY_HASH_CHARACTERS)
        if smart_quoted:
            add(BadLinkReason.ANCHOR_TAG_INVALID_QUOTE)
        return reasons

    if WINDOWS_ABSOLUTE_PATTERN.match(file_part):
        add(BadLinkReason.POTENTIAL_WINDOWS_ABSOLUTE_LINK)

    decoded = unquote(file_part)
    if file_part.startswith("/"):
        candidate = _normalize(scan_root / decoded.lstrip("/"))
        if not _is_valid_absolute(candidate, scan_root, file_system):
            add(BadLinkReason.ABSOLUTE_LINK_INVALID_START_POINT)
    else:
        if BAD_RELATIVE_SYNTAX_PATTERN.search(file_part):
            add(BadLinkReason.BAD_RELATIVE_LINK_SYNTAX)
        candidate = _normalize(document_path.parent / decoded)

    has_extension = bool(PurePosixPath(decoded).suffix)
    resolved = _locate_target(
        candidate,
        anchor,
        has_extension=has_extension,
        allow_stem_match=occurrence.kind is not LinkKind.ANCHOR_TAG,
        file_system=file_system,
    )
    existence_reasons = _existence_reasons(resolved, has_extension=has_extension)

    if occurrence.is_image and not resolved.is_directory:
        image_path = resolved.target_path if resolved.target_exists else candidate
        suffix = image_path.suffix.lower() if image_path is not None else ""
        allowed = {extension.lower() for extension in image_extensions}
        if suffix and suffix not in allowed:
            existence_reasons = [BadLinkReason.INVALID_IMAGE_EXTENSIONS]

    for reason in existence_reasons:
        add(reason)

    anchor_fragment = resolved.anchor_fragment
    if (
        anchor_fragment
        and resolved.target_exists
        and not resolved.is_directory
        and resolved.target_path is not None
        and resolved.target_path.suffix.lower() in {extension.lower() for extension in markdown_extensions}
        and not LINE_NUMBER_ANCHOR_PATTERN.match(anchor_fragment)
    ):
        add(check_anchor(cache.get(resolved.target_path), anchor_fragment))

    if too_many_hashes:
        add(BadLinkReason.TOO_MANY_HASH_CHARACTERS)
    if smart_quoted:
        add(BadLinkReason.ANCHOR_TAG_INVALID_QUOTE)
    return reasons


def _normalize(path: Path) -> Path:
    return Path(os.path.normpath(path))


def _is_valid_absolute(candidate: Path, scan_root: Path, file_system: FileSystem) -> bool:
    root = _normalize(scan_root)
    if candidate == root:
        return True
    if root not in candidate.parents:
        return False
    first_segment = candidate.relative_to(root).parts[0]
    return file_system.exists(root / first_segment)


def _locate_target(
    candidate: Path,
    anchor: str | None,
    *,
    has_extension: bool,
    allow_stem_match: bool,
    file_system: FileSystem,
) -> ResolvedTarget:
    if file_system.is_dir(candidate):
        return ResolvedTarget(target_path=candidate, target_exists=True, is_directory=True, anchor_fragment=anchor)

    if has_extension or not allow_stem_match:
        exists = has_extension and file_system.exists(candidate)
        return ResolvedTarget(target_path=candidate, target_exists=exists, anchor_fragment=anchor)

    matches = find_matching_files(candidate, file_system)
    if len(matches) == 1:
        return ResolvedTarget(target_path=matches[0], target_exists=True, match_count=1, anchor_fragment=anchor)
    return ResolvedTarget(target_path=candidate, match_count=len(matches), anchor_fragment=anchor)


def _existence_reasons(resolved: ResolvedTarget, *, has_extension: bool) -> list[BadLinkReason]:
    if resolved.is_directory:
        return []
    if has_extension:
        return [] if resolved.target_exists else [BadLinkReason.FILE_NOT_FOUND]
    if resolved.match_count == 0:
        return [BadLinkReason.MISSING_FILE_EXTENSION, BadLinkReason.FILE_NOT_FOUND]
    if resolved.match_count == 1:
        return [BadLinkReason.MISSING_FILE_EXTENSION]
    return [BadLinkReason.MISSING_FILE_EXTENSION, BadLinkReason.MULTIPLE_MATCHING_FILES]
