"""Tests for text and number formatting helpers."""

from __future__ import annotations

import pytest

from profile_card.formatting import escape_xml, k_format, wrap_text


@pytest.mark.parametrize("n", [0, 1, 7, 42, 100, 999])
def test_k_format_small_numbers_are_plain(n):
    assert k_format(n) == str(n)


def test_k_format_all_below_thousand():
    assert all(k_format(n) == str(n) for n in range(1000))


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (1000, "1k"),
        (1234, "1.2k"),
        (1500, "1.5k"),
        (1250, "1.3k"),
        (9999, "10k"),
        (999_999, "1000k"),
        (1_000_000, "1M"),
        (1_500_000, "1.5M"),
        (12_345_678, "12.3M"),
    ],
)
def test_k_format_suffixes(n, expected):
    assert k_format(n) == expected


def test_escape_xml_special_characters():
    assert escape_xml("&") == "&amp;"
    assert escape_xml("<") == "&lt;"
    assert escape_xml(">") == "&gt;"
    assert escape_xml('"') == "&quot;"
    assert escape_xml("'") == "&#39;"


def test_escape_xml_leaves_no_raw_characters():
    escaped = escape_xml("""<a href="x">Tom & Jerry's</a>""")
    for raw in "<>\"'":
        assert raw not in escaped


def test_escape_xml_single_pass_does_not_double_escape():
    # Entities produced for < > " ' are not escaped again in the same pass.
    assert escape_xml("<") == "&lt;"
    assert "&amp;lt;" not in escape_xml("<tag>")


def test_escape_xml_plain_text_unchanged():
    assert escape_xml("hello world") == "hello world"


def test_wrap_text_fits_on_one_line():
    assert wrap_text("short bio", 42, 2) == ["short bio"]


def test_wrap_text_splits_on_words():
    assert wrap_text("aaa bbb ccc", 7, 2) == ["aaa bbb", "ccc"]


def test_wrap_text_truncates_with_ellipsis():
    lines = wrap_text("one two three four five six", 9, 2)
    assert len(lines) == 2
    assert lines[0] == "one two"
    assert lines[1].endswith("…")


def test_wrap_text_empty():
    assert wrap_text("", 42, 2) == []
