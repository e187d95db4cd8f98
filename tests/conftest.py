"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests running commands against a directory tree")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def badlinks_home(tmp_path, monkeypatch) -> Path:
    """Isolate BADLINKS_HOME (config file and logfile) per test."""
    home = tmp_path / ".badlinks-home"
    home.mkdir()
    monkeypatch.setenv("BADLINKS_HOME", str(home))
    return home


@pytest.fixture
def write_config(badlinks_home):
    """Write a config.json into the isolated home."""

    def _write(data: dict) -> Path:
        path = badlinks_home / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def docs(tmp_path) -> Path:
    """Empty directory to build a documentation tree in."""
    root = tmp_path / "docs"
    root.mkdir()
    return root


def write_files(root: Path, files: dict[str, str]) -> None:
    """Create ``files`` (relative path -> contents) under ``root``."""
    for relative, contents in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def issues_by_file(output: dict) -> dict[str, list[dict]]:
    """Map file path -> found issues of a scan/check output."""
    return {entry["file_path"]: entry["found_issues"] for entry in output["bad_links"]}
