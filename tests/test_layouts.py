# tests/test_layouts.py
from __future__ import annotations

from datetime import date

import pytest

from shelfprint.assets import MISSING, ResolvedAsset
from shelfprint.config import Orientation, UrlBuilder
from shelfprint.dto import Item
from shelfprint.errors import UnknownLayoutError, ValidationError
from shelfprint.layouts import LayoutRegistry, default_registry
from shelfprint.layouts.base import (
    AuxiliaryContent,
    LayoutShape,
    PLACEHOLDER_TEXT,
    ProjectionOptions,
)
from shelfprint.layouts.cards import FourUpLayoutHandler, OneUpLayoutHandler

TODAY = date(2025, 6, 15)
OPTS = ProjectionOptions(today=TODAY)
URLS = UrlBuilder()

LONG = " ".join(["word"] * 400)  # ~2000 chars


@pytest.fixture(scope="module")
def registry():
    return default_registry()


def _item(**kw) -> Item:
    row = {"title": "A Book", "handle": "a-book"}
    row.update(kw)
    return Item.from_mapping(row)


def _doc_roles(blocks):
    return [b.role for b in blocks]


# ---------- projection consistency ----------

@pytest.mark.parametrize("shape", list(LayoutShape))
def test_projections_share_one_sizing_table(registry, make_items, shape):
    handler = registry.get(shape)
    item = make_items(1)[0]
    proj = handler.project(item, 0, URLS, options=OPTS)
    s = proj.sizing

    assert proj.print_fragment.sizing is s
    assert s is handler.sizing_table(OPTS.orientation)

    title_node = proj.preview.find("title")
    assert title_node.style["fontSize"] == s.title
    assert f"font-size:{s.title}pt" in proj.print_fragment.markup

    title_block = next(b for b in proj.document if b.role == "title")
    assert title_block.runs[0].size == s.title


@pytest.mark.parametrize("shape", list(LayoutShape))
def test_projections_agree_on_roles(registry, make_items, shape):
    handler = registry.get(shape)
    item = make_items(1, description=LONG)[0]
    plan = handler.plan(item, 0, URLS, OPTS)
    proj = handler.project(item, 0, URLS, options=OPTS)

    text_roles = set(plan.roles())
    assert text_roles <= proj.preview.roles()
    assert text_roles <= set(_doc_roles(proj.document))
    for role in text_roles:
        if role != "title":
            assert f'class="product-{role.replace("_", "-")}"' in proj.print_fragment.markup


def test_truncated_text_is_identical_everywhere(registry):
    handler = registry.get("8-up")
    item = _item(description=LONG)
    proj = handler.project(item, 0, URLS, options=OPTS)
    text = handler.plan(item, 0, URLS, OPTS).line("description").text

    assert len(text) <= 150 + 1
    assert text.endswith("…")
    assert proj.preview.find("description").text == text
    assert text in proj.print_fragment.markup
    block = next(b for b in proj.document if b.role == "description")
    assert block.runs[0].text == text


@pytest.mark.parametrize("shape, budget", [
    ("2-up", 1000), ("3-up", 1000), ("4-up", 400), ("8-up", 150), ("list", 200), ("2-int", 700),
])
def test_description_budgets(registry, shape, budget):
    handler = registry.get(shape)
    text = handler.plan(_item(description=LONG), 0, URLS, OPTS).line("description").text
    assert len(text) <= budget + 1


def test_one_up_shows_full_description_and_truncates_bio(registry):
    handler = registry.get("1-up")
    plan = handler.plan(_item(description=LONG, authorBio=LONG), 0, URLS, OPTS)
    assert plan.line("description").text == LONG
    bio = plan.line("author_bio")
    assert bio.label == "About the Author"
    assert len(bio.text) <= 1001


def test_plan_records_truncated_fields(registry):
    item = _item(description=LONG, authorBio=LONG)
    assert registry.get("4-up").plan(item, 0, URLS, OPTS).truncated == {"description"}
    assert registry.get("1-up").plan(item, 0, URLS, OPTS).truncated == {"author_bio"}
    assert registry.get("12-up").plan(item, 0, URLS, OPTS).truncated == frozenset()
    short = _item(description="Short copy.")
    assert registry.get("4-up").plan(short, 0, URLS, OPTS).truncated == frozenset()


def test_projection_carries_truncation_notices(registry):
    proj = registry.get("4-up").project(_item(description=LONG), 0, URLS, options=OPTS)
    assert proj.truncated == {"description"}
    (notice,) = proj.truncations
    assert notice.handle == "a-book"
    assert notice.shape is LayoutShape.FOUR_UP
    assert (notice.length, notice.limit) == (len(LONG), 400)
    assert notice.severity == "severe"
    assert str(notice) == f"a-book: description cut to 400 of {len(LONG)} characters on 4-up (severe)"


def test_author_bio_only_on_one_up(registry):
    for shape in LayoutShape:
        if shape is LayoutShape.ONE_UP:
            continue
        plan = registry.get(shape).plan(_item(authorBio="Bio"), 0, URLS, OPTS)
        assert plan.line("author_bio") is None


# ---------- missing / hidden fields ----------

@pytest.mark.parametrize("shape", list(LayoutShape))
def test_missing_fields_are_omitted_everywhere(registry, shape):
    handler = registry.get(shape)
    proj = handler.project(_item(), 0, URLS, options=OPTS)
    for role in ("subtitle", "author", "release", "description", "price", "code", "specs", "meta"):
        assert proj.preview.find(role) is None
        assert role not in _doc_roles(proj.document)
    assert "product-subtitle" not in proj.print_fragment.markup
    assert "product-price" not in proj.print_fragment.markup
    assert "product-release" not in proj.print_fragment.markup


def test_show_fields_hides_lines(registry, make_items):
    handler = registry.get("1-up")
    opts = ProjectionOptions(show_fields={"price": False, "subtitle": False}, today=TODAY)
    proj = handler.project(make_items(1)[0], 0, URLS, options=opts)
    assert proj.preview.find("price") is None
    assert proj.preview.find("subtitle") is None
    assert proj.preview.find("author") is not None


def test_shape_field_subsets(registry, make_items):
    item = make_items(1)[0]
    twelve = registry.get("12-up").plan(item, 0, URLS, OPTS)
    assert twelve.line("subtitle") is None
    assert twelve.line("author") is not None
    nine = registry.get("9-up").plan(item, 0, URLS, OPTS)
    assert nine.line("code").text == "ISBN: 9781234567897"


# ---------- content ----------

def test_title_links_to_product_url(registry):
    proj = registry.get("2-up").project(_item(), 0, URLS, options=OPTS)
    url = "https://woodslane.com.au/products/a-book"
    assert proj.preview.find("title").href == url
    assert f'href="{url}"' in proj.print_fragment.markup
    title_block = next(b for b in proj.document if b.role == "title")
    assert title_block.runs[0].link == url


def test_release_badges(registry):
    handler = registry.get("1-up")
    plan = handler.plan(_item(releaseDate="07/2025", icauth="x"), 0, URLS, OPTS)
    line = plan.line("release")
    assert line.text == "07/2025"
    assert line.badges == (("future", "FUTURE"), ("country", "AUS-x"))

    plan = handler.plan(_item(releaseDate="2025-06"), 0, URLS, OPTS)
    assert plan.line("release").text == "2025-06"
    assert plan.line("release").badges == ()


def test_country_badge_without_release_date(registry):
    handler = registry.get("2-up")
    item = _item(icauth="x")
    plan = handler.plan(item, 0, URLS, OPTS)
    assert plan.line("release") is None
    assert plan.line("country").badges == (("country", "AUS-x"),)

    proj = handler.project(item, 0, URLS, options=OPTS)
    assert proj.preview.find("badge-country").text == "AUS-x"
    assert "AUS-x</span>" in proj.print_fragment.markup
    country_block = next(b for b in proj.document if b.role == "country")
    assert country_block.runs[-1].text.strip() == "AUS-x"


def test_country_badge_rides_on_release_line(registry):
    plan = registry.get("2-up").plan(_item(releaseDate="03/2025", icauth="x"), 0, URLS, OPTS)
    assert plan.line("country") is None
    assert ("country", "AUS-x") in plan.line("release").badges


def test_meta_lines_and_specs(registry):
    plan = registry.get("1-up").plan(
        _item(binding="Hardback", pages="200", imprint="Press", weight="1kg", sku="123",
              discountCode="D1"),
        0, URLS, OPTS,
    )
    assert plan.line("specs").text == "Hardback • 200 pages"
    metas = [ln.display_text for ln in plan.lines if ln.role == "meta"]
    assert metas == ["Publisher: Press", "Weight: 1kg"]
    assert plan.line("code").text == "ISBN: 123 • Discount: D1"


# ---------- images ----------

def test_placeholder_cover_when_no_image(registry):
    handler = registry.get("2-up")
    plan = handler.plan(_item(), 0, URLS, OPTS)
    assert plan.image_is_placeholder
    assert plan.image_url.startswith("https://via.placeholder.com/120x180")
    proj = handler.project(_item(), 0, URLS, options=OPTS)
    assert proj.preview.find("cover").style["placeholder"] is True
    assert "book-cover placeholder" in proj.print_fragment.markup


def test_document_uses_resolved_asset_or_placeholder(registry):
    handler = registry.get("3-up")
    url = "https://cdn.example/c.jpg"
    asset = ResolvedAsset(data=b"img", width=400, height=600)

    blocks = handler.project(_item(imageUrl=url), 0, URLS, {url: asset}, options=OPTS).document
    cover = blocks[0]
    assert cover.kind == "image" and cover.role == "cover"
    assert cover.asset is asset
    assert (cover.width, cover.height) == (100, 150)

    blocks = handler.project(_item(imageUrl=url), 0, URLS, {url: MISSING}, options=OPTS).document
    assert blocks[0].role == "cover-placeholder"
    assert blocks[0].runs[0].text == PLACEHOLDER_TEXT


def test_compact_list_has_no_cover(registry, make_items):
    handler = registry.get("compact-list")
    proj = handler.project(make_items(1)[0], 0, URLS, options=OPTS)
    assert proj.preview.find("cover") is None
    assert "book-cover" not in proj.print_fragment.markup
    assert "cover" not in _doc_roles(proj.document)
    assert proj.preview.kind == "row"


def test_one_up_internals_capped(registry):
    imgs = [f"https://cdn.example/i{i}.jpg" for i in range(6)]
    plan = registry.get("1-up").plan(_item(additionalImages=imgs), 0, URLS, OPTS)
    assert plan.internals == tuple(imgs[:4])


def test_two_int_internals_always_shown_and_capped(registry):
    handler = registry.get("2-int")
    imgs = [f"https://cdn.example/i{i}.jpg" for i in range(3)]
    opts = ProjectionOptions(show_fields={"internals": False}, today=TODAY)
    proj = handler.project(_item(additionalImages=imgs), 0, URLS, options=opts)
    internals = proj.preview.find("internals")
    assert internals is not None
    assert len(internals.children) == 2
    assert proj.print_fragment.markup.count('class="internal-image"') == 2


def test_two_int_landscape_table(registry):
    handler = registry.get("2-int")
    opts = ProjectionOptions(today=TODAY, orientation=Orientation.LANDSCAPE)
    proj = handler.project(_item(imageUrl="https://cdn.example/w.jpg"), 0, URLS, options=opts)
    assert proj.sizing.image.width == 180
    assert proj.sizing.image.height == 120
    assert 'class="product-card landscape"' in proj.print_fragment.markup
    assert proj.preview.find("cover").style["width"] == 180


def test_auxiliary_content_is_placed(registry):
    handler = registry.get("1-up")
    code = ResolvedAsset(data=b"bc", width=200, height=100)
    aux = AuxiliaryContent(markup="<svg>code</svg>", asset=code)
    proj = handler.project(_item(), 0, URLS, auxiliary=aux, options=OPTS)
    assert '<div class="barcode"><svg>code</svg></div>' in proj.print_fragment.markup
    barcode = proj.document[-1]
    assert barcode.role == "barcode"
    assert barcode.width == pytest.approx(200 * proj.sizing.barcode_scale)


def test_separate_projection_methods_match_project(registry, make_items):
    handler = registry.get("4-up")
    item = make_items(1)[0]
    proj = handler.project(item, 2, URLS, options=OPTS)
    assert handler.project_preview(item, 2, URLS, OPTS) == proj.preview
    assert handler.project_print(item, 2, URLS, None, OPTS).markup == proj.print_fragment.markup
    assert handler.project_document(item, 2, None, URLS, None, OPTS) == proj.document


# ---------- registry ----------

def test_registry_has_every_shape(registry):
    assert set(registry.available()) == {s.value for s in LayoutShape}
    for s in LayoutShape:
        assert registry.get(s).capacity() == s.capacity
    assert "4-up" in registry
    assert 4 in registry
    assert "5-up" not in registry


def test_registry_unknown_shape_lists_available():
    reg = LayoutRegistry()
    reg.register("4-up", FourUpLayoutHandler())
    with pytest.raises(UnknownLayoutError) as exc:
        reg.get("1-up")
    assert "4-up" in str(exc.value)
    with pytest.raises(UnknownLayoutError):
        reg.get("banana")


def test_registry_rejects_mismatched_handler():
    reg = LayoutRegistry()
    with pytest.raises(ValidationError):
        reg.register("4-up", OneUpLayoutHandler())


def test_pads_empty_slots(registry):
    assert registry.get("4-up").pads_empty_slots()
    assert registry.get("2-int").pads_empty_slots()
    assert not registry.get("1-up").pads_empty_slots()
    assert not registry.get("list").pads_empty_slots()
    assert not registry.get("compact-list").pads_empty_slots()


def test_merged_styles_are_scoped_per_shape(registry):
    css = registry.merged_styles()
    for s in LayoutShape:
        assert f".layout-{s.value} .product-title" in css
    assert ".layout-4-up .product-title { font-size: 12pt;" in css
