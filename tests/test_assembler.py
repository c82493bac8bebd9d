# tests/test_assembler.py
from __future__ import annotations

from typing import Optional

from shelfprint.assembler import EmptySlot, PageAssembler, RenderedSlot
from shelfprint.barcodes import CodeType
from shelfprint.config import Orientation, RenderConfig
from shelfprint.layouts import default_registry
from shelfprint.layouts.base import AuxiliaryContent
from shelfprint.pagination import paginate


class RecordingBarcodes:
    """BarcodeProvider stub: remembers every call and returns fixed markup."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, CodeType, str]] = []

    def render(self, item, code_type: CodeType, payload: str) -> Optional[AuxiliaryContent]:
        self.calls.append((item.handle, code_type, payload))
        return AuxiliaryContent(markup=f"<code>{payload}</code>")


def _assemble(items, layout, config, barcodes=None):
    assembler = PageAssembler(default_registry(), config, barcodes=barcodes)
    return assembler.assemble_all(paginate(items, layout))


def test_grid_page_is_padded_to_capacity(make_items, config):
    pages = _assemble(make_items(3), "4-up", config)
    assert len(pages) == 1
    page = pages[0]
    assert len(page.slots) == 4
    assert page.empty_slots == 1
    assert isinstance(page.slots[-1], EmptySlot)
    assert page.slots[-1].slot_index == 3


def test_list_page_is_not_padded(make_items, config):
    page = _assemble(make_items(3), "list", config)[0]
    assert len(page.slots) == 3
    assert page.empty_slots == 0


def test_one_up_is_never_padded(make_items, config):
    pages = _assemble(make_items(2), "1-up", config)
    assert [len(p.slots) for p in pages] == [1, 1]


def test_mixed_pages_pad_per_shape(make_items, config):
    pages = _assemble(make_items(4), ["2-up", "4-up", "4-up", "list"], config)
    assert [(p.shape.value, len(p.slots), p.empty_slots) for p in pages] == [
        ("2-up", 2, 1), ("4-up", 4, 2), ("list", 1, 0),
    ]


def test_banners_use_website_name_and_overrides(make_items):
    cfg = RenderConfig(
        banner_color="#FF0000",
        website_name="www.woodslane.com.au",
        page_headers={1: "New Releases"},
    )
    pages = _assemble(make_items(3), "1-up", cfg)
    assert [p.header.text for p in pages] == [
        "www.woodslane.com.au", "New Releases", "www.woodslane.com.au",
    ]
    assert all(p.header == p.footer for p in pages)
    assert all(p.header.color == "#FF0000" for p in pages)


def test_page_breaks_between_pages(make_items, config):
    pages = _assemble(make_items(5), "2-up", config)
    assert [p.break_before for p in pages] == [False, True, True]


def test_projection_per_slot(make_items, config):
    page = _assemble(make_items(2), "2-up", config)[0]
    slots = page.rendered
    assert [s.global_index for s in slots] == [0, 1]
    assert all(isinstance(s, RenderedSlot) for s in slots)
    assert slots[0].projection.preview.find("title").text == "Book 0"


def test_barcodes_consulted_once_per_item_with_resolved_type(make_items):
    cfg = RenderConfig(barcode_type="EAN-13", item_barcode_types={1: "QR Code", 2: "None"})
    barcodes = RecordingBarcodes()
    page = _assemble(make_items(3), "4-up", cfg, barcodes=barcodes)[0]

    assert barcodes.calls == [
        ("book-0", CodeType.EAN13, "9781234567897"),
        ("book-1", CodeType.QR, "https://woodslane.com.au/products/book-1"),
    ]
    assert [s.code_type for s in page.rendered] == [CodeType.EAN13, CodeType.QR, CodeType.NONE]
    assert "<code>9781234567897</code>" in page.rendered[0].projection.print_fragment.markup
    assert 'class="barcode"' not in page.rendered[2].projection.print_fragment.markup


def test_no_barcode_provider_means_no_codes(make_items):
    cfg = RenderConfig(barcode_type="EAN-13")
    page = _assemble(make_items(1), "1-up", cfg)[0]
    assert 'class="barcode"' not in page.rendered[0].projection.print_fragment.markup


def test_item_orientation_reaches_two_int(make_items):
    cfg = RenderConfig(item_orientations={1: Orientation.LANDSCAPE})
    page = _assemble(make_items(2), "2-int", cfg)[0]
    widths = [s.projection.sizing.image.width for s in page.rendered]
    assert widths == [120, 180]
