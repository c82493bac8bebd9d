# tests/test_config.py
from __future__ import annotations

import pytest

from shelfprint.config import (
    DEFAULT_BANNER_COLOR,
    DEFAULT_WEBSITE_NAME,
    HyperlinkTarget,
    Orientation,
    RenderConfig,
    UrlBuilder,
    UtmParams,
    field_key,
)
from shelfprint.errors import ValidationError


# ---------- URLs ----------

def test_product_url_without_utm():
    assert UrlBuilder().product_url("my-book") == "https://woodslane.com.au/products/my-book"


def test_product_url_per_target():
    b = UrlBuilder(target=HyperlinkTarget.WOODSLANE_HEALTH)
    assert b.product_url("x") == "https://www.woodslanehealth.com.au/products/x"


def test_product_url_utm_order_and_skips_empty():
    utm = UtmParams(source="newsletter", medium="email", campaign=None, content="", term="books")
    url = UrlBuilder(utm=utm).product_url("x")
    assert url == (
        "https://woodslane.com.au/products/x"
        "?utm_source=newsletter&utm_medium=email&utm_term=books"
    )


def test_product_url_with_all_empty_utm_has_no_query():
    assert "?" not in UrlBuilder(utm=UtmParams()).product_url("x")


def test_utm_from_mapping_accepts_request_keys():
    utm = UtmParams.from_mapping({"utmSource": "a", "utmCampaign": "c"})
    assert utm.query_pairs() == [("utm_source", "a"), ("utm_campaign", "c")]
    assert UtmParams.from_mapping(None) is None


def test_hyperlink_target_parse():
    assert HyperlinkTarget.parse(" WoodslanePress ") is HyperlinkTarget.WOODSLANE_PRESS
    with pytest.raises(ValidationError):
        HyperlinkTarget.parse("amazon")


# ---------- RenderConfig ----------

def test_defaults(monkeypatch):
    monkeypatch.delenv("SHELFPRINT_BANNER_COLOR", raising=False)
    monkeypatch.delenv("SHELFPRINT_WEBSITE_NAME", raising=False)
    monkeypatch.delenv("SHELFPRINT_HYPERLINK_TARGET", raising=False)
    cfg = RenderConfig()
    assert cfg.banner_color == DEFAULT_BANNER_COLOR
    assert cfg.website_name == DEFAULT_WEBSITE_NAME
    assert cfg.hyperlink_target is HyperlinkTarget.WOODSLANE
    assert cfg.is_shown("anything")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SHELFPRINT_BANNER_COLOR", "#000000")
    monkeypatch.setenv("SHELFPRINT_WEBSITE_NAME", "www.example.org")
    monkeypatch.setenv("SHELFPRINT_HYPERLINK_TARGET", "woodslaneeducation")
    cfg = RenderConfig()
    assert cfg.banner_color == "#000000"
    assert cfg.website_name == "www.example.org"
    assert cfg.hyperlink_target is HyperlinkTarget.WOODSLANE_EDUCATION


def test_header_for_prefers_non_blank_override():
    cfg = RenderConfig(website_name="site", page_headers={0: "Front", 1: "   "})
    assert cfg.header_for(0) == "Front"
    assert cfg.header_for(1) == "site"
    assert cfg.header_for(7) == "site"


def test_config_mappings_are_frozen():
    headers = {0: "Front"}
    cfg = RenderConfig(page_headers=headers)
    headers[0] = "changed"
    assert cfg.header_for(0) == "Front"
    with pytest.raises(TypeError):
        cfg.page_headers[1] = "x"  # type: ignore[index]


def test_orientation_for_falls_back_to_default():
    cfg = RenderConfig(
        internals_orientation=Orientation.LANDSCAPE,
        item_orientations={2: Orientation.PORTRAIT},
    )
    assert cfg.orientation_for(0) is Orientation.LANDSCAPE
    assert cfg.orientation_for(2) is Orientation.PORTRAIT


def test_from_mapping_reads_request_keys():
    cfg = RenderConfig.from_mapping({
        "showFields": {"authorBio": False, "releaseDate": True, "price": False},
        "bannerColor": "#123456",
        "websiteName": "www.woodslanepress.com.au",
        "hyperlinkToggle": "woodslanepress",
        "utmParams": {"utmSource": "s"},
        "barcodeType": "QR Code",
        "itemBarcodeTypes": {"1": "EAN-13"},
        "pageHeaders": ["Cover page", "", "Third"],
        "internalsOrientation": "landscape",
        "ignored": 1,
    })
    assert dict(cfg.show_fields) == {"author_bio": False, "release_date": True, "price": False}
    assert not cfg.is_shown("author_bio")
    assert cfg.banner_color == "#123456"
    assert cfg.hyperlink_target is HyperlinkTarget.WOODSLANE_PRESS
    assert cfg.utm.source == "s"
    assert cfg.barcode_type == "QR Code"
    assert dict(cfg.item_barcode_types) == {1: "EAN-13"}
    assert dict(cfg.page_headers) == {0: "Cover page", 2: "Third"}
    assert cfg.internals_orientation is Orientation.LANDSCAPE


@pytest.mark.parametrize("raw, key", [
    ("authorBio", "author_bio"),
    ("releaseDate", "release_date"),
    ("icauth", "author_country"),
    ("subtitle", "subtitle"),
    ("author_bio", "author_bio"),
])
def test_field_key(raw, key):
    assert field_key(raw) == key
