"""Unit tests for header slugs and the slug table."""

import threading

import pytest

from badlinks.api.link.BadLinkReason import BadLinkReason
from badlinks.api.link._headers import (
    SlugTableCache,
    build_slug_table,
    check_anchor,
    slug_variants,
    slugify_header,
)


class TestSlugifyHeader:
    @pytest.mark.parametrize(
        ("header", "slug"),
        [
            ("Main Title", "main-title"),
            ("What's new?", "whats-new"),
            ("snake_case_header", "snake_case_header"),
            ("Reading:   sources of information", "reading-sources-of-information"),
            ("main-title ?", "main-title"),
            ("`code` in <code>header</code>", "code-in"),
            ("Header `text`", "header-text"),
            ("header <!-- omit-in-toc -->", "header"),
            ("  padded  ", "padded"),
            ("Über Café", "über-café"),
        ],
    )
    def test_canonical(self, header, slug):
        assert slugify_header(header) == slug

    def test_deterministic(self):
        assert slugify_header("Some Header!") == slugify_header("Some Header!")

    def test_variants(self):
        assert slug_variants("Reading  sources") == ("reading--sources",)
        assert slug_variants("main-title ?") == ("main-title-",)
        assert "snakecase" in slug_variants("snake_case")

    def test_no_variants_for_simple_header(self):
        assert slug_variants("simple") == ()


class TestBuildSlugTable:
    def test_atx_and_setext(self):
        text = "# One\n\nTwo\n===\n\nThree\n---\n\n### Four ###\n"
        table = build_slug_table(text)
        assert [(entry.slug, entry.source_line) for entry in table] == [
            ("one", 1),
            ("two", 3),
            ("three", 6),
            ("four", 9),
        ]

    def test_duplicates_are_suffixed_in_order(self):
        text = "# Intro\n## Intro\n### intro\n"
        assert [entry.slug for entry in build_slug_table(text)] == ["intro", "intro-1", "intro-2"]

    def test_duplicate_variants_are_suffixed(self):
        table = build_slug_table("# a ?\n# a ?\n")
        assert table[1].slug == "a-1"
        assert table[1].variants == ("a--1",)

    def test_headers_in_code_are_ignored(self):
        text = "```\n# not a header\n```\n<pre>\n# nor this\n</pre>\n<!--\n# nor this\n-->\n# real\n"
        assert [entry.slug for entry in build_slug_table(text)] == ["real"]

    def test_indented_header(self):
        text = "\n        # main-title\n"
        assert [entry.slug for entry in build_slug_table(text)] == ["main-title"]

    def test_header_in_indented_code_block(self):
        text = "Some text\n\n    # Cool Header\nmore text\n"
        assert build_slug_table(text) == []

    def test_setext_needs_text_on_previous_line(self):
        assert build_slug_table("Title\n\n===\n") == []

    def test_setext_underline_is_not_its_own_header(self):
        table = build_slug_table("Title\n---\n---\n")
        assert [entry.slug for entry in table] == ["title"]

    def test_hash_without_space_is_not_a_header(self):
        assert build_slug_table("#hashtag\n") == []


class TestCheckAnchor:
    @pytest.fixture
    def table(self):
        return build_slug_table("# Main Title\n## other ?\n# snake_case\n")

    def test_exact(self, table):
        assert check_anchor(table, "main-title") is None

    def test_variant(self, table):
        assert check_anchor(table, "other-") is None
        assert check_anchor(table, "snakecase") is None

    def test_case(self, table):
        assert check_anchor(table, "MAIN-TITLE") is BadLinkReason.CASE_SENSITIVE_HEADER_TAG

    def test_missing(self, table):
        assert check_anchor(table, "nope") is BadLinkReason.HEADER_TAG_NOT_FOUND

    def test_percent_encoded(self):
        assert check_anchor(build_slug_table("# café\n"), "caf%C3%A9") is None


class TestSlugTableCache:
    def test_reads_file_once(self, tmp_path):
        path = tmp_path / "a.md"
        path.write_text("# One\n", encoding="utf-8")
        cache = SlugTableCache()

        first = cache.get(path)
        path.write_text("# Two\n", encoding="utf-8")

        assert cache.get(path) is first
        assert path in cache
        assert len(cache) == 1

    def test_text_given(self, tmp_path):
        cache = SlugTableCache()
        table = cache.get(tmp_path / "missing.md", "# Given\n")
        assert [entry.slug for entry in table] == ["given"]

    def test_concurrent_insert_keeps_one_table(self, tmp_path):
        path = tmp_path / "a.md"
        path.write_text("# One\n", encoding="utf-8")
        cache = SlugTableCache()
        results = []

        threads = [threading.Thread(target=lambda: results.append(cache.get(path))) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(result is results[0] for result in results)
