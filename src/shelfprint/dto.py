# shelfprint/dto.py
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional, Sequence

from .errors import ValidationError
from .formatting import rich_text_to_plain_text, strip_control_chars


"""
This is the data transfer object for one catalogue item.
It is what every layout handler reads when projecting a card or a list row.

Rich-text fields are normalized once, here: `description_html` keeps the raw
markup from the shop, `description` is the plain text handlers use.

author: Cole McGregor
date: 2026-03-02
version: 0.1.0
"""


# Source payload key -> Item attribute (camelCase from the shop API)
KEY_ALIASES = {
    "authorBio": "author_bio",
    "imageUrl": "image_url",
    "additionalImages": "additional_images",
    "releaseDate": "release_date",
    "icauth": "author_country",
    "authorCountry": "author_country",
    "icrkdt": "discount_code",
    "discountCode": "discount_code",
    "discount": "discount_code",
    "icillus": "illustrations",
}


def _clean(v: Any) -> Optional[str]:
    """Convert to a trimmed string without control characters; None/blank -> None."""
    if v is None:
        return None
    s = strip_control_chars(str(v)).strip()
    return s or None


def _clean_list(v: Any) -> tuple[str, ...]:
    if not v:
        return ()
    if isinstance(v, str):
        v = [v]
    out = []
    for x in v:
        s = _clean(x)
        if s:
            out.append(s)
    return tuple(out)


# --- Item -------------------------------------------------------------------
@dataclass(frozen=True)
class Item:
    """
    One catalogue entry. Only `title` and `handle` are required; a missing
    optional field means "omit that line".
    """
    title: str
    handle: str
    subtitle: Optional[str] = None
    author: Optional[str] = None
    author_bio: Optional[str] = None        # plain text
    author_bio_html: Optional[str] = None   # raw markup
    description: Optional[str] = None       # plain text
    description_html: Optional[str] = None  # raw markup
    price: Optional[str] = None             # decimal-as-string
    image_url: Optional[str] = None
    additional_images: tuple[str, ...] = field(default_factory=tuple)
    binding: Optional[str] = None
    pages: Optional[str] = None
    dimensions: Optional[str] = None
    release_date: Optional[str] = None
    imprint: Optional[str] = None
    weight: Optional[str] = None
    illustrations: Optional[str] = None
    edition: Optional[str] = None
    author_country: Optional[str] = None
    discount_code: Optional[str] = None
    sku: Optional[str] = None
    vendor: Optional[str] = None
    tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_internals(self) -> bool:
        return bool(self.additional_images)

    # ---- construction --------------------------------------------------

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Item":
        """
        Build an Item from a source payload (camelCase or snake_case keys).
        Raises ValidationError when title or handle is missing.
        """
        norm: dict[str, Any] = {}
        for k, v in data.items():
            norm[KEY_ALIASES.get(k, k)] = v

        title = _clean(norm.get("title"))
        handle = _clean(norm.get("handle"))
        if not title:
            raise ValidationError(f"Item is missing a title (handle={handle!r})")
        if not handle:
            raise ValidationError(f"Item {title!r} is missing a handle")

        description_html = _clean(norm.get("description_html") or norm.get("description"))
        author_bio_html = _clean(norm.get("author_bio_html") or norm.get("author_bio"))

        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for name in known:
            if name in ("title", "handle", "description", "description_html",
                        "author_bio", "author_bio_html", "additional_images", "tags"):
                continue
            if name in norm:
                kwargs[name] = _clean(norm[name])

        return cls(
            title=title,
            handle=handle,
            description_html=description_html,
            description=rich_text_to_plain_text(description_html) or None,
            author_bio_html=author_bio_html,
            author_bio=rich_text_to_plain_text(author_bio_html) or None,
            additional_images=_clean_list(norm.get("additional_images")),
            tags=_clean_list(norm.get("tags")),
            **kwargs,
        )

    def to_mapping(self) -> dict[str, Any]:
        """
        Inverse of from_mapping (snake_case keys, raw markup for rich text).
        None values are dropped.
        """
        out: dict[str, Any] = {}
        for f in fields(self):
            if f.name in ("description", "author_bio"):
                continue
            v = getattr(self, f.name)
            if f.name == "description_html":
                out["description"] = v
                continue
            if f.name == "author_bio_html":
                out["author_bio"] = v
                continue
            if isinstance(v, tuple):
                v = list(v)
            out[f.name] = v
        return {k: v for k, v in out.items() if v not in (None, [])}


# --- helpers ----------------------------------------------------------------
def to_items(rows: Sequence[Mapping[str, Any]]) -> list[Item]:
    return [Item.from_mapping(r) for r in rows]


def check_unique_handles(items: Sequence[Item]) -> None:
    """Raise ValidationError on a blank or repeated handle."""
    seen: set[str] = set()
    for i, it in enumerate(items):
        if not it.handle:
            raise ValidationError(f"Item {i} has no handle")
        if it.handle in seen:
            raise ValidationError(f"Duplicate handle: {it.handle!r}")
        seen.add(it.handle)


__all__ = [
    "Item",
    "KEY_ALIASES",
    "to_items",
    "check_unique_handles",
]
