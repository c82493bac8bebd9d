"""
Pure formatting helpers shared by every layout handler.

- rich_text_to_plain_text(): HTML-ish product copy -> plain text
- truncate_at_word_boundary(): idempotent word-boundary truncation
- format_release_date_and_badge(): MM/YYYY + "current"/"future" badge
- compose_meta_line(): join optional parts without dangling separators

Nothing here raises on bad input; malformed values degrade to best-effort text.

author: Cole McGregor
date: 2026-03-02
version: 0.1.0
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

from .errors import FormatAmbiguous
from .logging import get_logger

log = get_logger("formatting")

ELLIPSIS = "…"
META_SEPARATOR = " • "


# ---------------------------------------------------------------------------
# Rich text
# ---------------------------------------------------------------------------

_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_P_CLOSE_RE = re.compile(r"</p\s*>", re.IGNORECASE)
_P_OPEN_RE = re.compile(r"<p(?:\s[^>]*)?>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_BLANK_RUN_RE = re.compile(r"\n[ \t\r\f\v]*(?:\n[ \t\r\f\v]*)+\n")
# characters XML 1.0 (and so DOCX) cannot carry
_XML_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")

# order matters: &amp; last so "&amp;lt;" stays "&lt;"
_ENTITIES = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&amp;", "&"),
)


def strip_control_chars(text: Optional[str]) -> str:
    """Drop control characters that XML-based outputs reject (tab and newlines stay)."""
    if not text:
        return ""
    return _XML_CONTROL_RE.sub("", str(text))


def rich_text_to_plain_text(markup: Optional[str]) -> str:
    """
    Convert product copy markup to plain text.

    <br> and </p> become newlines, other tags are dropped, the common entities
    are decoded and runs of 3+ newlines collapse to a single blank line.
    """
    if not markup:
        return ""
    text = strip_control_chars(markup)
    text = _BR_RE.sub("\n", text)
    text = _P_CLOSE_RE.sub("\n", text)
    text = _P_OPEN_RE.sub("", text)
    text = _TAG_RE.sub("", text)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def escape(s: Optional[str]) -> str:
    """html.escape with quotes (None -> "")."""
    if s is None:
        return ""
    return html.escape(str(s), quote=True)


# ---------------------------------------------------------------------------
# Truncation
# ---------------------------------------------------------------------------

def truncate_at_word_boundary(text: Optional[str], max_chars: int) -> str:
    """
    Cut `text` at the last whitespace at or before `max_chars` and append "…".

    Falls back to a hard cut when there is no whitespace to break on. A string
    this function already produced for the same (or a smaller) bound is
    returned untouched, so repeated calls are stable.
    """
    if not text:
        return ""
    if max_chars <= 0:
        return ELLIPSIS
    if len(text) <= max_chars:
        return text
    if text.endswith(ELLIPSIS) and len(text) - len(ELLIPSIS) <= max_chars:
        return text

    window = text[: max_chars + 1]
    cut = -1
    for i in range(len(window) - 1, -1, -1):
        if window[i].isspace():
            cut = i
            break

    head = text[:cut].rstrip() if cut > 0 else ""
    if not head:
        head = text[:max_chars].rstrip() or text[:max_chars]
    return head + ELLIPSIS


def truncation_severity(length: int, limit: int) -> str:
    """
    How far past its budget a text ran: "none", "mild" (up to 25% over),
    "moderate" (up to 50%) or "severe".
    """
    if limit <= 0 or length <= limit:
        return "none"
    over = (length - limit) / limit * 100
    if over > 50:
        return "severe"
    if over > 25:
        return "moderate"
    return "mild"


# ---------------------------------------------------------------------------
# Release dates
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReleaseInfo:
    formatted_date: str
    badge: Optional[str]  # "current" | "future" | None


_MONTH_YEAR_RE = re.compile(r"^(\d{1,2})/(\d{4})$")
_MONTH_DAY_YEAR_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_GENERIC_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%SZ",
    "%B %Y",
    "%b %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)


def _parse_release_date(raw: str) -> date:
    s = raw.strip()

    m = _MONTH_YEAR_RE.match(s)
    if m:
        month, year = int(m.group(1)), int(m.group(2))
        if 1 <= month <= 12:
            return date(year, month, 1)
        raise FormatAmbiguous(f"month out of range in {raw!r}")

    m = _MONTH_DAY_YEAR_RE.match(s)
    if m:
        try:
            return date(int(m.group(3)), int(m.group(1)), int(m.group(2)))
        except ValueError as exc:
            raise FormatAmbiguous(f"invalid date {raw!r}") from exc

    for fmt in _GENERIC_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    raise FormatAmbiguous(f"unrecognised date {raw!r}")


def format_release_date_and_badge(
    date_string: Optional[str],
    today: Optional[date] = None,
) -> ReleaseInfo:
    """
    Normalize a release date to MM/YYYY and classify it.

    "current" when the release month is strictly before this month,
    "future" otherwise. Unparseable input comes back unchanged with no badge.
    """
    if not date_string or not date_string.strip():
        return ReleaseInfo(formatted_date="", badge=None)

    try:
        released = _parse_release_date(date_string)
    except FormatAmbiguous as exc:
        log.debug("release date passthrough: %s", exc)
        return ReleaseInfo(formatted_date=date_string, badge=None)

    now = today or date.today()
    formatted = f"{released.month:02d}/{released.year}"
    if (released.year, released.month) < (now.year, now.month):
        badge = "current"
    else:
        badge = "future"
    return ReleaseInfo(formatted_date=formatted, badge=badge)


# ---------------------------------------------------------------------------
# Detail strings
# ---------------------------------------------------------------------------

def compose_meta_line(
    parts: Iterable[Optional[str]],
    separator: str = META_SEPARATOR,
) -> str:
    """Join the non-empty parts; undefined/blank parts leave no separator."""
    kept = [p.strip() for p in parts if p is not None and str(p).strip()]
    return separator.join(kept)


def format_price(price: Optional[str], currency: str = "AUD$") -> Optional[str]:
    if price is None:
        return None
    raw = str(price).strip()
    if not raw:
        return None
    if raw.startswith("$"):
        raw = raw[1:].strip()
    return f"{currency} {raw}"


def author_country_badge(code: Optional[str], country: str = "AUS") -> Optional[str]:
    if not code or not str(code).strip():
        return None
    return f"{country}-{str(code).strip()}"


__all__ = [
    "ELLIPSIS",
    "META_SEPARATOR",
    "ReleaseInfo",
    "rich_text_to_plain_text",
    "escape",
    "strip_control_chars",
    "truncate_at_word_boundary",
    "truncation_severity",
    "format_release_date_and_badge",
    "compose_meta_line",
    "format_price",
    "author_country_badge",
]
