"""Unit tests for badlinks.api.link._resolve."""

from pathlib import Path

import pytest

from badlinks.api.link.BadLinkReason import BadLinkReason as R
from badlinks.api.link.LinkKind import LinkKind
from badlinks.api.link.LinkOccurrence import LinkOccurrence
from badlinks.api.link.QuoteStyle import QuoteStyle
from badlinks.api.link._headers import SlugTableCache
from badlinks.api.link._resolve import (
    FileSystem,
    find_git_top_level,
    is_web_link,
    resolve_occurrence,
    split_target,
)
from badlinks.api.link._resolve.resolve_occurrence import _locate_target
from tests.conftest import write_files


def occurrence(target, kind=LinkKind.INLINE, is_image=False, quote=None):
    literal = f"[x]({target})"
    return LinkOccurrence(
        kind=kind,
        is_image=is_image,
        literal_text=literal,
        raw_target=target,
        display_text="x",
        start=0,
        end=len(literal),
        quote=quote,
    )


@pytest.fixture
def tree(docs) -> Path:
    write_files(
        docs,
        {
            "a.md": "# Main Title\n\n## Second_Header\n",
            "b.md": "# B\n",
            "name.md": "# Name\n",
            "name.js": "// name\n",
            "single.md": "# Single\n",
            "my file.md": "# Spaced\n",
            "images/logo.png": "png",
            "images/clip.mp3": "mp3",
            "sub/c.md": "# C\n",
            "sub/deep/d.md": "# D\n",
            "src/main.py": "print()\n",
        },
    )
    return docs


@pytest.fixture
def resolve(tree):
    cache = SlugTableCache()

    def _resolve(target, document="a.md", **kwargs):
        kind_kwargs = {key: kwargs.pop(key) for key in ("kind", "is_image", "quote") if key in kwargs}
        return resolve_occurrence(occurrence(target, **kind_kwargs), tree / document, tree, cache, **kwargs)

    return _resolve


class TestIsWebLink:
    @pytest.mark.parametrize(
        "target", ["http://example.com", "https://example.com/a.md", "mailto:me@example.com", "ftp://x", "tel:+1"]
    )
    def test_web(self, target):
        assert is_web_link(target) is True

    @pytest.mark.parametrize("target", ["./a.md", "a.md", "C:/x.md", "/C:/x.md", "#top", "../a.md"])
    def test_local(self, target):
        assert is_web_link(target) is False


class TestSplitTarget:
    def test_split(self):
        assert split_target("./a.md#top") == ("./a.md", "top", False)
        assert split_target("./a.md") == ("./a.md", None, False)
        assert split_target("##top") == ("", "top", True)
        assert split_target("#a#b") == ("", "a#b", False)


class TestResolveOccurrence:
    def test_existing_file(self, resolve):
        assert resolve("./b.md") == []
        assert resolve("b.md") == []
        assert resolve("sub/c.md") == []

    def test_missing_file(self, resolve):
        assert resolve("./missing.md") == [R.FILE_NOT_FOUND]

    def test_web_links_ignored(self, resolve):
        assert resolve("https://example.com/missing.md") == []

    def test_parent_traversal(self, resolve):
        assert resolve("../../a.md", document="sub/deep/d.md") == []
        assert resolve("../c.md", document="sub/deep/d.md") == []

    def test_directory(self, resolve):
        assert resolve("./sub") == []
        assert resolve("./sub/") == []

    def test_percent_decoded(self, resolve):
        assert resolve("./my%20file.md") == []

    def test_anchor_in_document(self, resolve):
        assert resolve("#main-title") == []
        assert resolve("#MAIN-TITLE") == [R.CASE_SENSITIVE_HEADER_TAG]
        assert resolve("#nope") == [R.HEADER_TAG_NOT_FOUND]

    def test_anchor_in_other_document(self, resolve):
        assert resolve("./a.md#second_header", document="b.md") == []
        assert resolve("./a.md#secondheader", document="b.md") == []
        assert resolve("./a.md#Second_Header", document="b.md") == [R.CASE_SENSITIVE_HEADER_TAG]
        assert resolve("./a.md#missing", document="b.md") == [R.HEADER_TAG_NOT_FOUND]

    def test_anchor_on_missing_file_not_checked(self, resolve):
        assert resolve("./missing.md#top") == [R.FILE_NOT_FOUND]

    def test_anchor_on_non_markdown_never_checked(self, resolve):
        assert resolve("./src/main.py#L10") == []
        assert resolve("./src/main.py#anything") == []

    def test_anchor_on_directory_never_checked(self, resolve):
        assert resolve("./sub#anything") == []

    def test_too_many_hashes(self, resolve):
        assert resolve("##main-title") == [R.TOO_MANY_HASH_CHARACTERS]
        assert resolve("##nope") == [R.HEADER_TAG_NOT_FOUND, R.TOO_MANY_HASH_CHARACTERS]
        assert resolve("./b.md##b") == [R.TOO_MANY_HASH_CHARACTERS]

    def test_missing_extension_single_match(self, resolve):
        assert resolve("./single") == [R.MISSING_FILE_EXTENSION]
        assert resolve("./single#single") == [R.MISSING_FILE_EXTENSION]
        assert resolve("./single#nope") == [R.MISSING_FILE_EXTENSION, R.HEADER_TAG_NOT_FOUND]

    def test_missing_extension_multiple_matches(self, resolve):
        assert resolve("./name") == [R.MISSING_FILE_EXTENSION, R.MULTIPLE_MATCHING_FILES]

    def test_missing_extension_no_match(self, resolve):
        assert resolve("./nothing") == [R.MISSING_FILE_EXTENSION, R.FILE_NOT_FOUND]

    def test_stem_match_is_case_sensitive(self, resolve):
        assert resolve("./SINGLE") == [R.MISSING_FILE_EXTENSION, R.FILE_NOT_FOUND]

    def test_absolute_links(self, resolve):
        assert resolve("/sub/c.md", document="sub/deep/d.md") == []
        assert resolve("/missing/c.md") == [R.ABSOLUTE_LINK_INVALID_START_POINT, R.FILE_NOT_FOUND]

    def test_absolute_link_escaping_root(self, resolve, tree):
        outside = tree.parent / "outside.md"
        outside.write_text("# Outside\n", encoding="utf-8")
        assert R.ABSOLUTE_LINK_INVALID_START_POINT in resolve("/../outside.md")

    def test_bad_relative_syntax(self, resolve):
        assert resolve(".../a.md", document="sub/c.md") == [R.BAD_RELATIVE_LINK_SYNTAX, R.FILE_NOT_FOUND]

    def test_windows_absolute(self, resolve):
        assert resolve("C:/docs/a.md")[0] is R.POTENTIAL_WINDOWS_ABSOLUTE_LINK
        assert resolve("/C:/docs/a.md")[0] is R.POTENTIAL_WINDOWS_ABSOLUTE_LINK

    def test_images(self, resolve):
        assert resolve("./images/logo.png", is_image=True) == []
        assert resolve("./images/missing.png", is_image=True) == [R.FILE_NOT_FOUND]
        assert resolve("./images/clip.mp3", is_image=True) == [R.INVALID_IMAGE_EXTENSIONS]
        assert resolve("./images/missing.mp3", is_image=True) == [R.INVALID_IMAGE_EXTENSIONS]
        assert resolve("./images/clip.mp3") == []

    def test_image_extension_allow_list_is_configurable(self, resolve):
        assert resolve("./images/clip.mp3", is_image=True, image_extensions=[".MP3"]) == []

    def test_smart_quoted_anchor_tag(self, resolve):
        assert resolve("./b.md", kind=LinkKind.ANCHOR_TAG, quote=QuoteStyle.SMART) == [R.ANCHOR_TAG_INVALID_QUOTE]
        assert resolve("./missing.md", kind=LinkKind.ANCHOR_TAG, quote=QuoteStyle.SMART) == [
            R.FILE_NOT_FOUND,
            R.ANCHOR_TAG_INVALID_QUOTE,
        ]

    def test_anchor_tag_without_extension(self, resolve):
        assert resolve("./single", kind=LinkKind.ANCHOR_TAG, quote=QuoteStyle.DOUBLE) == [
            R.MISSING_FILE_EXTENSION,
            R.FILE_NOT_FOUND,
        ]
        assert resolve("./sub", kind=LinkKind.ANCHOR_TAG, quote=QuoteStyle.DOUBLE) == []

    def test_idempotent(self, resolve):
        targets = ["./missing.md", "./name", "#MAIN-TITLE", "./a.md#nope"]
        assert [resolve(target) for target in targets] == [resolve(target) for target in targets]

    def test_custom_file_system(self, tree):
        class EmptyFileSystem(FileSystem):
            def exists(self, path):
                return False

            def is_dir(self, path):
                return False

            def list_sibling_stems(self, directory, base_name):
                return []

        reasons = resolve_occurrence(
            occurrence("./b.md"), tree / "a.md", tree, SlugTableCache(), file_system=EmptyFileSystem()
        )
        assert reasons == [R.FILE_NOT_FOUND]


class TestLocateTarget:
    def locate(self, candidate, anchor=None, has_extension=False, allow_stem_match=True):
        return _locate_target(
            candidate,
            anchor,
            has_extension=has_extension,
            allow_stem_match=allow_stem_match,
            file_system=FileSystem(),
        )

    def test_match_counts(self, tree):
        assert self.locate(tree / "missing").match_count == 0
        single = self.locate(tree / "single", anchor="single")
        assert single.match_count == 1
        assert single.target_exists
        assert single.target_path == tree / "single.md"
        assert single.anchor_fragment == "single"
        multiple = self.locate(tree / "name")
        assert multiple.match_count == 2
        assert not multiple.target_exists

    def test_directory(self, tree):
        resolved = self.locate(tree / "sub", anchor="top")
        assert resolved.is_directory
        assert resolved.anchor_fragment == "top"

    def test_no_stem_match_for_anchor_tags(self, tree):
        resolved = self.locate(tree / "single", allow_stem_match=False)
        assert resolved.match_count == 0
        assert not resolved.target_exists


class TestFindGitTopLevel:
    def test_found(self, tmp_path):
        (tmp_path / "repo" / ".git").mkdir(parents=True)
        (tmp_path / "repo" / "docs").mkdir()
        assert find_git_top_level(tmp_path / "repo" / "docs") == (tmp_path / "repo").resolve()

    def test_not_found(self, tmp_path):
        # tmp_path may itself live inside a repository; only check the nearest hit
        found = find_git_top_level(tmp_path)
        assert found is None or tmp_path.resolve().is_relative_to(found)
