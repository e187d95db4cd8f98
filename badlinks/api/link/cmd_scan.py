"""Link scan API command."""

import logging
from collections.abc import Iterator
from pathlib import Path

from ..config.BadLinksConfig import BadLinksConfig
from ..config.get_home_dir import get_home_dir
from ..log.append_log import append_log
from ..StageResult import StageResult
from . import LinkScanOutput
from ._headers import SlugTableCache
from .Document import Document
from .find_markdown_files import find_markdown_files
from .get_absolute_root import get_absolute_root
from .scan_document import scan_document

logger = logging.getLogger(__name__)


def cmd_scan(path: str) -> StageResult:
    """Find bad local links in every markdown document under a directory."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        root = Path(path).expanduser().resolve()

        yield (0.05, "Loading configuration...")
        try:
            config = BadLinksConfig.load()
        except ValueError as e:
            result_obj.output = LinkScanOutput(root=str(root), files_scanned=0, bad_links=[], errors=[str(e)]).model_dump(
                mode="python"
            )
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        yield (0.1, "Finding markdown files...")
        try:
            paths = find_markdown_files(root, config)
        except FileNotFoundError as e:
            result_obj.output = LinkScanOutput(root=str(root), files_scanned=0, bad_links=[], errors=[str(e)]).model_dump(
                mode="python"
            )
            result_obj.result = f"Path not found: {path}"
            result_obj.success = False
            append_log(get_home_dir("logfile"), "scan", "ERROR", str(e), config.log.level)
            return

        scan_root = root if root.is_dir() else root.parent
        absolute_root = get_absolute_root(scan_root, config)
        cache = SlugTableCache()
        bad_links: list[dict] = []
        errors: list[str] = []
        files_scanned = 0

        total = len(paths)
        for batch_start in range(0, total, config.batch_size):
            batch = paths[batch_start : batch_start + config.batch_size]
            for file_path in batch:
                try:
                    document = Document.read(file_path)
                except (OSError, UnicodeDecodeError) as e:
                    logger.warning("Cannot read %s: %s", file_path, e)
                    errors.append(f"Cannot read {file_path}: {e}")
                    continue
                try:
                    findings = scan_document(document, scan_root, cache, config, absolute_root=absolute_root)
                except (OSError, UnicodeDecodeError) as e:
                    # a linked document could not be read for its headers
                    logger.warning("Cannot scan %s: %s", file_path, e)
                    errors.append(f"Cannot scan {file_path}: {e}")
                    continue
                files_scanned += 1
                if findings:
                    bad_links.append(
                        {
                            "file_path": findings[0].file_path,
                            "found_issues": [finding.to_dict() for finding in findings],
                        }
                    )
            done = batch_start + len(batch)
            yield (0.1 + 0.85 * done / total, f"Scanned {done}/{total} files")

        bad_links.sort(key=lambda entry: entry["file_path"])
        issue_count = sum(len(entry["found_issues"]) for entry in bad_links)

        yield (1.0, "Complete")
        result_obj.output = LinkScanOutput(
            root=str(scan_root),
            files_scanned=files_scanned,
            bad_links=bad_links,
            errors=errors,
        ).model_dump(mode="python")

        if issue_count:
            result_obj.result = f"Found {issue_count} bad links in {len(bad_links)} of {files_scanned} files"
        else:
            result_obj.result = f"No bad links found in {files_scanned} files"
        if errors:
            result_obj.result += f" ({len(errors)} files could not be scanned)"
        result_obj.success = not issue_count and not errors

        level = "ERROR" if errors else "WARN" if issue_count else "INFO"
        append_log(get_home_dir("logfile"), "scan", level, f"{scan_root}: {result_obj.result}", config.log.level)

    return StageResult(announce=f"Scanning {path} for bad links...", progress_callback=do_work)
