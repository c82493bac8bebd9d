# tests/test_formatting.py
from __future__ import annotations

from datetime import date

import pytest

from shelfprint.formatting import (
    ELLIPSIS,
    author_country_badge,
    compose_meta_line,
    escape,
    format_price,
    format_release_date_and_badge,
    rich_text_to_plain_text,
    strip_control_chars,
    truncate_at_word_boundary,
    truncation_severity,
)

TODAY = date(2025, 6, 15)


# ---------- rich text ----------

def test_rich_text_paragraphs_and_breaks_become_newlines():
    out = rich_text_to_plain_text("<p>First line<br>second</p><p>Next para</p>")
    assert out == "First line\nsecond\nNext para"


def test_rich_text_drops_tags_and_decodes_entities():
    out = rich_text_to_plain_text('<p class="x"><strong>Fish &amp; Chips</strong> &lt;3&nbsp;ok</p>')
    assert out == "Fish & Chips <3 ok"


def test_rich_text_amp_decoded_last():
    assert rich_text_to_plain_text("&amp;lt;") == "&lt;"


def test_rich_text_collapses_blank_runs():
    out = rich_text_to_plain_text("a<br><br><br><br>b")
    assert out == "a\n\nb"


def test_rich_text_empty_inputs():
    assert rich_text_to_plain_text(None) == ""
    assert rich_text_to_plain_text("") == ""


def test_rich_text_drops_xml_control_chars():
    assert rich_text_to_plain_text("<p>Line\x0bone\x00</p>") == "Lineone"


def test_strip_control_chars_keeps_whitespace():
    assert strip_control_chars("a\tb\nc\rd\x0ce\x1f") == "a\tb\nc\rde"
    assert strip_control_chars(None) == ""


def test_escape():
    assert escape('<a href="x">Tom & Jerry\'s</a>') == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#x27;s&lt;/a&gt;"
    )
    assert escape(None) == ""


# ---------- truncation ----------

def test_truncate_short_text_unchanged():
    assert truncate_at_word_boundary("Short text", 50) == "Short text"


def test_truncate_cuts_at_word_boundary():
    out = truncate_at_word_boundary("The quick brown fox jumps", 10)
    assert out == "The quick" + ELLIPSIS
    assert len(out) <= 10 + len(ELLIPSIS)


def test_truncate_hard_cut_without_whitespace():
    out = truncate_at_word_boundary("abcdefghijklmnop", 5)
    assert out == "abcde" + ELLIPSIS


@pytest.mark.parametrize("n", [5, 10, 40, 150])
def test_truncate_is_idempotent(n):
    text = (
        "Long-form description text that keeps going well past any small budget "
        "so that every bound here actually forces a cut somewhere in the middle."
    )
    once = truncate_at_word_boundary(text, n)
    assert truncate_at_word_boundary(once, n) == once


def test_truncate_empty():
    assert truncate_at_word_boundary("", 10) == ""
    assert truncate_at_word_boundary(None, 10) == ""


# ---------- release dates ----------

@pytest.mark.parametrize(
    "raw, formatted, badge",
    [
        ("05/2025", "05/2025", "current"),
        ("06/2025", "06/2025", "future"),
        ("7/2025", "07/2025", "future"),
        ("12/2024", "12/2024", "current"),
        ("2025-07-01", "07/2025", "future"),
        ("2024-01-31", "01/2024", "current"),
        ("03/14/2025", "03/2025", "current"),
        ("September 2025", "09/2025", "future"),
    ],
)
def test_release_date_badges(raw, formatted, badge):
    info = format_release_date_and_badge(raw, today=TODAY)
    assert info.formatted_date == formatted
    assert info.badge == badge


@pytest.mark.parametrize("raw", ["2025-06", "13/2025", "soon", "Q3 2025"])
def test_release_date_unparseable_passes_through(raw):
    info = format_release_date_and_badge(raw, today=TODAY)
    assert info.formatted_date == raw
    assert info.badge is None


def test_release_date_blank():
    info = format_release_date_and_badge("  ", today=TODAY)
    assert info.formatted_date == ""
    assert info.badge is None


# ---------- detail strings ----------

def test_compose_meta_line_skips_missing_parts():
    assert compose_meta_line(["Paperback", None, "", "234 x 153 mm"]) == "Paperback • 234 x 153 mm"
    assert compose_meta_line([None, "  "]) == ""


def test_format_price():
    assert format_price("29.99") == "AUD$ 29.99"
    assert format_price("$12.00") == "AUD$ 12.00"
    assert format_price("") is None
    assert format_price(None) is None


def test_author_country_badge():
    assert author_country_badge("x") == "AUS-x"
    assert author_country_badge(" ") is None
    assert author_country_badge(None) is None


@pytest.mark.parametrize("length, limit, severity", [
    (100, 400, "none"),
    (400, 400, "none"),
    (500, 400, "mild"),
    (560, 400, "moderate"),
    (601, 400, "severe"),
    (100, 0, "none"),
])
def test_truncation_severity(length, limit, severity):
    assert truncation_severity(length, limit) == severity
