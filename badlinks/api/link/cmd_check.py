"""Link check API command."""

from collections.abc import Iterator
from pathlib import Path

from ..config.BadLinksConfig import BadLinksConfig
from ..config.get_home_dir import get_home_dir
from ..log.append_log import append_log
from ..StageResult import StageResult
from . import LinkCheckOutput
from ._headers import SlugTableCache
from .Document import Document
from .get_absolute_root import get_absolute_root
from .scan_document import scan_document


def cmd_check(path: str, root: str | None = None) -> StageResult:
    """Find bad local links in a single markdown document.

    Links starting with ``/`` resolve against ``root``, which defaults to the
    document's directory.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser().resolve()
        scan_root = Path(root).expanduser().resolve() if root else file_path.parent

        def fail(message: str, error: str) -> None:
            result_obj.output = LinkCheckOutput(
                path=str(file_path), root=str(scan_root), bad_links=[], errors=[error]
            ).model_dump(mode="python")
            result_obj.result = message
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = BadLinksConfig.load()
        except ValueError as e:
            fail(f"Configuration error: {e}", str(e))
            return

        yield (0.3, "Reading file...")
        if not file_path.is_file():
            fail(f"File not found: {path}", "File does not exist")
            return
        if not scan_root.is_dir():
            fail(f"Root not found: {root}", f"Root directory does not exist: {scan_root}")
            return
        try:
            document = Document.read(file_path)
        except (OSError, UnicodeDecodeError) as e:
            fail(f"Cannot read file: {path}", f"Cannot read file: {e}")
            return

        yield (0.6, "Checking links...")
        try:
            findings = scan_document(
                document, scan_root, SlugTableCache(), config, absolute_root=get_absolute_root(scan_root, config)
            )
        except (OSError, UnicodeDecodeError) as e:
            fail(f"Cannot check file: {path}", f"Cannot read linked file: {e}")
            return

        yield (1.0, "Complete")
        bad_links = []
        if findings:
            bad_links.append(
                {"file_path": findings[0].file_path, "found_issues": [finding.to_dict() for finding in findings]}
            )
        result_obj.output = LinkCheckOutput(
            path=str(file_path),
            root=str(scan_root),
            bad_links=bad_links,
            errors=[],
        ).model_dump(mode="python")
        if findings:
            result_obj.result = f"Found {len(findings)} bad links in {file_path.name}"
        else:
            result_obj.result = f"No bad links found in {file_path.name}"
        result_obj.success = not findings

        append_log(
            get_home_dir("logfile"),
            "check",
            "WARN" if findings else "INFO",
            f"{file_path}: {result_obj.result}",
            config.log.level,
        )

    return StageResult(announce=f"Checking links in {path}...", progress_callback=do_work)
