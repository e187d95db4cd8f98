"""Unit tests for badlinks.api.link.find_markdown_files."""

import pytest

from badlinks.api.config.BadLinksConfig import BadLinksConfig
from badlinks.api.link.find_markdown_files import find_markdown_files
from tests.conftest import write_files


class TestFindMarkdownFiles:
    def test_sorted_and_filtered(self, docs):
        write_files(
            docs,
            {
                "z.md": "",
                "a.md": "",
                "notes.txt": "",
                "sub/b.md": "",
                "sub/UPPER.MD": "",
                ".hidden/c.md": "",
                "node_modules/pkg/readme.md": "",
            },
        )
        found = [path.relative_to(docs.resolve()).as_posix() for path in find_markdown_files(docs)]
        assert found == ["a.md", "sub/UPPER.MD", "sub/b.md", "z.md"]

    def test_custom_config(self, docs):
        write_files(docs, {"a.md": "", "b.markdown": "", "vendor/c.md": ""})
        config = BadLinksConfig(extensions=["markdown", ".md"], ignore_dirnames=["^vendor$"])
        found = [path.name for path in find_markdown_files(docs, config)]
        assert found == ["a.md", "b.markdown"]

    def test_root_is_a_file(self, docs):
        write_files(docs, {"a.md": ""})
        assert find_markdown_files(docs / "a.md") == [(docs / "a.md").resolve()]

    def test_missing_root(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_markdown_files(tmp_path / "missing")
