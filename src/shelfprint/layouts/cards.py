# shelfprint/layouts/cards.py
from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import Optional

from ..config import Orientation, UrlBuilder
from ..dto import Item
from .base import (
    ALL_FIELDS,
    CardPlan,
    ImageBox,
    LayoutHandler,
    LayoutShape,
    ProjectionOptions,
    SizingTable,
)

"""
Card-form handlers: 1-up, 2-up, 3-up, 4-up, 8-up, 9-up, 12-up and 2-int.

Each class is a declaration: shape, sizing table, truncation budgets and the
optional fields its card shows. Rendering lives in LayoutHandler.
"""


# Fields shown by the mid-sized grids (no author bio, no internals)
_GRID_FIELDS = ALL_FIELDS - {"author_bio", "internals"}


class CardLayoutHandler(LayoutHandler):
    form = "card"

    def form_style(self, sel: str) -> str:
        return "\n".join([
            f"{sel} .product-card {{ display: flex; gap: 8pt; align-items: flex-start; "
            "page-break-inside: avoid; break-inside: avoid; }",
            f"{sel} .product-card.empty {{ visibility: hidden; }}",
            f"{sel} .product-details {{ flex: 1; min-width: 0; }}",
            f"{sel} .badge {{ color: #fff; padding: 1pt 4pt; margin-left: 4pt; "
            "border-radius: 3pt; text-transform: uppercase; }",
            f"{sel} .badge-country {{ color: #000; }}",
        ])


class OneUpLayoutHandler(CardLayoutHandler):
    shape = LayoutShape.ONE_UP
    table = SizingTable(
        title=20, subtitle=14, author=12, description=10, price=14, code=8, details=9,
        image=ImageBox(200, 300),
        internals=ImageBox(70, 105), max_internals=4,
        barcode_scale=0.8, columns=1,
    )
    budgets = MappingProxyType({"description": None, "author_bio": 1000})
    fields = ALL_FIELDS


class TwoUpLayoutHandler(CardLayoutHandler):
    shape = LayoutShape.TWO_UP
    table = SizingTable(
        title=16, subtitle=12, author=11, description=9, price=12, code=8, details=8,
        image=ImageBox(120, 180),
        barcode_scale=0.6, columns=1,
    )
    budgets = MappingProxyType({"description": 1000})
    fields = _GRID_FIELDS


class ThreeUpLayoutHandler(CardLayoutHandler):
    shape = LayoutShape.THREE_UP
    table = SizingTable(
        title=14, subtitle=11, author=10, description=8, price=11, code=7, details=8,
        image=ImageBox(100, 150),
        barcode_scale=0.65, columns=1,
    )
    budgets = MappingProxyType({"description": 1000})
    fields = _GRID_FIELDS - {"edition"}


class FourUpLayoutHandler(CardLayoutHandler):
    shape = LayoutShape.FOUR_UP
    table = SizingTable(
        title=12, subtitle=10, author=9, description=8, price=10, code=7, details=7,
        image=ImageBox(80, 120),
        barcode_scale=0.5, columns=2,
    )
    budgets = MappingProxyType({"description": 400})
    fields = _GRID_FIELDS - {"edition", "discount_code"}


class EightUpLayoutHandler(CardLayoutHandler):
    shape = LayoutShape.EIGHT_UP
    table = SizingTable(
        title=9, subtitle=8, author=7, description=6, price=8, code=6, details=6,
        image=ImageBox(60, 90),
        barcode_scale=0.4, columns=4,
    )
    budgets = MappingProxyType({"description": 150})
    fields = frozenset({
        "subtitle", "author", "description", "price", "release_date",
        "binding", "pages",
    })


class NineUpLayoutHandler(CardLayoutHandler):
    shape = LayoutShape.NINE_UP
    table = SizingTable(
        title=8, subtitle=7, author=7, description=6, price=7, code=6, details=6,
        image=ImageBox(70, 105),
        barcode_scale=0.4, columns=3,
    )
    fields = frozenset({"author", "imprint", "sku", "binding", "price", "release_date"})


class TwelveUpLayoutHandler(CardLayoutHandler):
    shape = LayoutShape.TWELVE_UP
    table = SizingTable(
        title=7, subtitle=6, author=6, description=5, price=6, code=5, details=5,
        image=ImageBox(60, 90),
        barcode_scale=0.35, columns=4,
    )
    fields = frozenset({"author", "binding", "price", "release_date"})


class TwoIntLayoutHandler(CardLayoutHandler):
    """
    2-up with internals: the right-hand strip is always drawn when the item
    has additional images. Landscape source images get the wide table.
    """
    shape = LayoutShape.TWO_INT
    table = SizingTable(
        title=16, subtitle=12, author=11, description=9, price=12, code=8, details=8,
        image=ImageBox(120, 180),
        internals=ImageBox(60, 90), max_internals=2,
        barcode_scale=0.5, columns=1,
    )
    landscape_table = replace(
        table,
        image=ImageBox(180, 120),
        internals=ImageBox(90, 60),
    )
    budgets = MappingProxyType({"description": 700})
    fields = _GRID_FIELDS | {"internals"}

    def sizing_table(self, orientation: Optional[Orientation] = None) -> SizingTable:
        if orientation is Orientation.LANDSCAPE:
            return self.landscape_table
        return self.table

    def _visible(self, field_name: str, options: ProjectionOptions) -> bool:
        # internals are mandatory for this shape
        if field_name == "internals":
            return True
        return super()._visible(field_name, options)

    def plan(
        self,
        item: Item,
        slot_index: int,
        urls: UrlBuilder,
        options: Optional[ProjectionOptions] = None,
    ) -> CardPlan:
        p = super().plan(item, slot_index, urls, options)
        if p.sizing is self.landscape_table:
            return replace(p, variant="landscape")
        return p

    def shared_style(self) -> str:
        return "\n".join([
            self._style_for(self.table, self.shape.css_class),
            f".{self.shape.css_class} .landscape .book-cover "
            f"{{ width: {self.landscape_table.image.width}pt; "
            f"height: {self.landscape_table.image.height}pt; }}",
            f".{self.shape.css_class} .landscape .internal-image "
            f"{{ width: {self.landscape_table.internals.width}pt; "
            f"height: {self.landscape_table.internals.height}pt; }}",
            f".{self.shape.css_class} .product-card {{ display: grid; "
            "grid-template-columns: auto 1fr auto; }",
            f".{self.shape.css_class} .internals-strip {{ display: flex; "
            "flex-direction: column; gap: 4pt; }",
        ])


CARD_HANDLERS = (
    OneUpLayoutHandler,
    TwoUpLayoutHandler,
    ThreeUpLayoutHandler,
    FourUpLayoutHandler,
    EightUpLayoutHandler,
    NineUpLayoutHandler,
    TwelveUpLayoutHandler,
    TwoIntLayoutHandler,
)


__all__ = [
    "CardLayoutHandler",
    "OneUpLayoutHandler",
    "TwoUpLayoutHandler",
    "ThreeUpLayoutHandler",
    "FourUpLayoutHandler",
    "EightUpLayoutHandler",
    "NineUpLayoutHandler",
    "TwelveUpLayoutHandler",
    "TwoIntLayoutHandler",
    "CARD_HANDLERS",
]
