from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from .dto import KEY_ALIASES
from .errors import ValidationError

"""
Per-request render configuration.

RenderConfig is immutable and passed explicitly down the call chain
(pipeline -> assembler -> handlers); nothing here is process-wide state
except the environment-derived defaults read at construction time.

Environment overrides:
  SHELFPRINT_BANNER_COLOR
  SHELFPRINT_WEBSITE_NAME
  SHELFPRINT_HYPERLINK_TARGET
"""


DEFAULT_BANNER_COLOR = "#F7981D"
DEFAULT_WEBSITE_NAME = "www.woodslane.com.au"


class HyperlinkTarget(Enum):
    WOODSLANE = "woodslane"
    WOODSLANE_HEALTH = "woodslanehealth"
    WOODSLANE_EDUCATION = "woodslaneeducation"
    WOODSLANE_PRESS = "woodslanepress"

    @property
    def base_url(self) -> str:
        return _BASE_URLS[self]

    @classmethod
    def parse(cls, value: Any) -> "HyperlinkTarget":
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        for t in cls:
            if t.value == key:
                return t
        raise ValidationError(
            f"Unknown hyperlink target: {value!r}. "
            f"Available: {', '.join(t.value for t in cls)}"
        )


_BASE_URLS = {
    HyperlinkTarget.WOODSLANE: "https://woodslane.com.au",
    HyperlinkTarget.WOODSLANE_HEALTH: "https://www.woodslanehealth.com.au",
    HyperlinkTarget.WOODSLANE_EDUCATION: "https://www.woodslaneeducation.com.au",
    HyperlinkTarget.WOODSLANE_PRESS: "https://www.woodslanepress.com.au",
}


class Orientation(Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    @classmethod
    def parse(cls, value: Any) -> "Orientation":
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        for o in cls:
            if o.value == key:
                return o
        raise ValidationError(f"Unknown orientation: {value!r}")


# ---------------------------------------------------------------------------
# URL building
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UtmParams:
    source: Optional[str] = None
    medium: Optional[str] = None
    campaign: Optional[str] = None
    content: Optional[str] = None
    term: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> Optional["UtmParams"]:
        if not data:
            return None
        return cls(
            source=data.get("utmSource") or data.get("source"),
            medium=data.get("utmMedium") or data.get("medium"),
            campaign=data.get("utmCampaign") or data.get("campaign"),
            content=data.get("utmContent") or data.get("content"),
            term=data.get("utmTerm") or data.get("term"),
        )

    def query_pairs(self) -> list[tuple[str, str]]:
        pairs = [
            ("utm_source", self.source),
            ("utm_medium", self.medium),
            ("utm_campaign", self.campaign),
            ("utm_content", self.content),
            ("utm_term", self.term),
        ]
        return [(k, v) for k, v in pairs if v]


@dataclass(frozen=True)
class UrlBuilder:
    """Builds product links: <base>/products/<handle>[?utm_...]."""
    target: HyperlinkTarget = HyperlinkTarget.WOODSLANE
    utm: Optional[UtmParams] = None

    def product_url(self, handle: str) -> str:
        url = f"{self.target.base_url}/products/{handle}"
        if self.utm:
            pairs = self.utm.query_pairs()
            if pairs:
                return f"{url}?{urlencode(pairs)}"
        return url

    __call__ = product_url


# ---------------------------------------------------------------------------
# RenderConfig
# ---------------------------------------------------------------------------

def _env_default(name: str, fallback: str) -> str:
    v = os.getenv(name)
    return v.strip() if v and v.strip() else fallback


def _default_target() -> HyperlinkTarget:
    return HyperlinkTarget.parse(_env_default("SHELFPRINT_HYPERLINK_TARGET", "woodslane"))


_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def field_key(name: str) -> str:
    """showFields keys arrive camelCase (authorBio, releaseDate); handlers use snake_case."""
    name = str(name).strip()
    if name in KEY_ALIASES:
        return KEY_ALIASES[name]
    return _CAMEL_RE.sub("_", name).lower()


def _freeze(m: Optional[Mapping]) -> Mapping:
    return MappingProxyType(dict(m or {}))


@dataclass(frozen=True)
class RenderConfig:
    """
    Everything a render request needs besides the items and the layout.

    show_fields: per-field visibility toggles; a field missing from the
        mapping is shown.
    item_barcode_types / item_orientations / page_headers: keyed by global
        item index (or page index for headers).
    today: pins "today" for release-date badges (None = real date).
    """
    show_fields: Mapping[str, bool] = field(default_factory=dict)
    banner_color: str = field(
        default_factory=lambda: _env_default("SHELFPRINT_BANNER_COLOR", DEFAULT_BANNER_COLOR)
    )
    website_name: str = field(
        default_factory=lambda: _env_default("SHELFPRINT_WEBSITE_NAME", DEFAULT_WEBSITE_NAME)
    )
    hyperlink_target: HyperlinkTarget = field(default_factory=_default_target)
    utm: Optional[UtmParams] = None
    barcode_type: str = "None"
    item_barcode_types: Mapping[int, str] = field(default_factory=dict)
    page_headers: Mapping[int, str] = field(default_factory=dict)
    internals_orientation: Orientation = Orientation.PORTRAIT
    item_orientations: Mapping[int, Orientation] = field(default_factory=dict)
    today: Optional[date] = None

    def __post_init__(self) -> None:
        # mappings are copied so later caller mutation can't leak in
        object.__setattr__(self, "show_fields", _freeze(self.show_fields))
        object.__setattr__(self, "item_barcode_types", _freeze(self.item_barcode_types))
        object.__setattr__(self, "page_headers", _freeze(self.page_headers))
        object.__setattr__(self, "item_orientations", _freeze(self.item_orientations))

    @property
    def urls(self) -> UrlBuilder:
        return UrlBuilder(target=self.hyperlink_target, utm=self.utm)

    def is_shown(self, field_name: str) -> bool:
        return bool(self.show_fields.get(field_name, True))

    def orientation_for(self, index: int) -> Orientation:
        return self.item_orientations.get(index, self.internals_orientation)

    def header_for(self, page_index: int) -> str:
        text = self.page_headers.get(page_index)
        if text is not None and str(text).strip():
            return str(text)
        return self.website_name

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "RenderConfig":
        """
        Read the render request keys (showFields, bannerColor, websiteName,
        hyperlinkToggle, utmParams, barcodeType, itemBarcodeTypes, pageHeaders).
        Unknown keys are ignored.
        """
        kwargs: dict[str, Any] = {}
        if payload.get("showFields") is not None:
            kwargs["show_fields"] = {field_key(k): bool(v) for k, v in payload["showFields"].items()}
        if payload.get("bannerColor"):
            kwargs["banner_color"] = str(payload["bannerColor"])
        if payload.get("websiteName"):
            kwargs["website_name"] = str(payload["websiteName"])
        if payload.get("hyperlinkToggle"):
            kwargs["hyperlink_target"] = HyperlinkTarget.parse(payload["hyperlinkToggle"])
        if payload.get("utmParams"):
            kwargs["utm"] = UtmParams.from_mapping(payload["utmParams"])
        if payload.get("barcodeType"):
            kwargs["barcode_type"] = str(payload["barcodeType"])
        if payload.get("itemBarcodeTypes"):
            kwargs["item_barcode_types"] = {
                int(k): str(v) for k, v in payload["itemBarcodeTypes"].items()
            }
        headers = payload.get("pageHeaders")
        if headers:
            if isinstance(headers, Mapping):
                kwargs["page_headers"] = {int(k): v for k, v in headers.items() if v}
            else:
                kwargs["page_headers"] = {i: v for i, v in enumerate(headers) if v}
        if payload.get("internalsOrientation"):
            kwargs["internals_orientation"] = Orientation.parse(payload["internalsOrientation"])
        if payload.get("itemOrientations"):
            kwargs["item_orientations"] = {
                int(k): Orientation.parse(v) for k, v in payload["itemOrientations"].items()
            }
        return cls(**kwargs)


__all__ = [
    "DEFAULT_BANNER_COLOR",
    "DEFAULT_WEBSITE_NAME",
    "HyperlinkTarget",
    "Orientation",
    "UtmParams",
    "UrlBuilder",
    "field_key",
    "RenderConfig",
]
