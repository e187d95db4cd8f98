"""Find the bad links of one document."""

import logging
from pathlib import Path

from ..config.BadLinksConfig import BadLinksConfig
from ._headers import SlugTableCache
from ._mask import mask_text
from ._parsers import extract_links
from ._resolve import FileSystem, resolve_occurrence
from .Document import Document
from .Finding import Finding
from .get_absolute_root import get_absolute_root
from .LinkKind import LinkKind

logger = logging.getLogger(__name__)

# Usages only carry their definition's target; the definition line is checked.
_UNRESOLVED_KINDS = (LinkKind.REFERENCE, LinkKind.SHORTHAND_REFERENCE)


def scan_document(
    document: Document,
    scan_root: Path,
    cache: SlugTableCache,
    config: BadLinksConfig | None = None,
    *,
    absolute_root: Path | None = None,
    file_system: FileSystem | None = None,
) -> list[Finding]:
    """Return the findings of ``document`` in source order.

    Occurrences with the same literal text merge into one finding whose
    reasons are the union of theirs and whose line numbers are collected.
    """
    config = config or BadLinksConfig()
    scan_root = Path(scan_root)
    if absolute_root is None:
        absolute_root = get_absolute_root(scan_root, config)

    cache.get(document.path, document.text)
    masked = mask_text(document.text)
    occurrences = extract_links(masked, document.text)
    logger.debug("%s: %d link occurrences", document.path, len(occurrences))

    file_path = _display_path(document.path, scan_root)
    findings: dict[str, Finding] = {}
    for occurrence in occurrences:
        if occurrence.kind in _UNRESOLVED_KINDS:
            continue
        reasons = resolve_occurrence(
            occurrence,
            document.path,
            absolute_root,
            cache,
            image_extensions=config.image_extensions,
            markdown_extensions=config.extensions,
            file_system=file_system,
        )
        if not reasons:
            continue

        finding = findings.get(occurrence.literal_text)
        if finding is None:
            finding = findings[occurrence.literal_text] = Finding(
                file_path=file_path, markdown_link=occurrence.literal_text
            )
        finding.add_reasons(reasons)
        if occurrence.line_number not in finding.line_numbers:
            finding.line_numbers.append(occurrence.line_number)

    return list(findings.values())


def _display_path(path: Path, scan_root: Path) -> str:
    try:
        return path.relative_to(scan_root).as_posix()
    except ValueError:
        return str(path)
