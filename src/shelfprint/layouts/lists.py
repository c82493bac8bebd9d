# shelfprint/layouts/lists.py
from __future__ import annotations

from types import MappingProxyType

from .base import ImageBox, LayoutHandler, LayoutShape, SizingTable

"""
Row-form handlers: list (10 per page) and compact-list (20 per page).
Rows grow vertically, so these pages are never padded with empty slots.
"""


class RowLayoutHandler(LayoutHandler):
    form = "row"

    def form_style(self, sel: str) -> str:
        return "\n".join([
            f"{sel} .page-content {{ display: block; }}",
            f"{sel} .product-row {{ display: flex; gap: 8pt; align-items: center; "
            "border-bottom: 1px solid #E9ECEF; padding: 4pt 0; break-inside: avoid; }",
            f"{sel} .product-details {{ flex: 1; min-width: 0; }}",
            f"{sel} .product-details > div {{ display: inline; margin-right: 6pt; }}",
            f"{sel} .product-details > h2 {{ display: block; }}",
        ])


class ListLayoutHandler(RowLayoutHandler):
    shape = LayoutShape.LIST
    table = SizingTable(
        title=12, subtitle=10, author=10, description=9, price=11, code=8, details=8,
        image=ImageBox(50, 75),
        barcode_scale=0.5, columns=1,
    )
    budgets = MappingProxyType({"description": 200})
    fields = frozenset({
        "subtitle", "author", "description", "price", "release_date",
        "author_country", "binding", "pages", "dimensions", "imprint",
    })


class CompactListLayoutHandler(RowLayoutHandler):
    """No cover image; one dense line per title."""
    shape = LayoutShape.COMPACT_LIST
    table = SizingTable(
        title=9, subtitle=8, author=8, description=7, price=9, code=7, details=7,
        image=None,
        barcode_scale=0.35, columns=1,
    )
    fields = frozenset({
        "subtitle", "author", "price", "release_date", "binding", "pages",
        "dimensions", "imprint", "sku",
    })


ROW_HANDLERS = (
    ListLayoutHandler,
    CompactListLayoutHandler,
)


__all__ = [
    "RowLayoutHandler",
    "ListLayoutHandler",
    "CompactListLayoutHandler",
    "ROW_HANDLERS",
]
