# shelfprint/renderers/html.py
from __future__ import annotations

from typing import Sequence

from ..assembler import EmptySlot, RenderedPage, RenderedSlot
from ..formatting import escape
from .base import CatalogueRenderer


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _banner(kind: str, text: str, color: str) -> str:
    return (
        f'<div class="page-{kind}" style="background-color:{escape(color)}">'
        f"{escape(text)}</div>"
    )


def _slot_markup(slot: RenderedSlot | EmptySlot, wrapper: str) -> str:
    if isinstance(slot, EmptySlot):
        return f'<div class="{wrapper} empty" data-slot="{slot.slot_index}"></div>'
    return slot.projection.print_fragment.markup


# ---------------------------------------------------------------------------
# HTMLCatalogueRenderer
# ---------------------------------------------------------------------------

class HTMLCatalogueRenderer(CatalogueRenderer):
    """
    Render assembled pages as one printable HTML document.

    Page layout:
      - Banner header and footer in the configured colour
      - Cards/rows in a container scoped by `layout-<shape>` so the merged
        handler styles apply per page
      - Hard page break after every page except the last
    """

    name = "html"
    binary = False

    # ---- page ---------------------------------------------------------

    def render_page(self, page: RenderedPage) -> str:
        wrapper = "product-row" if page.shape.is_list else "product-card"
        inner = "\n    ".join(_slot_markup(s, wrapper) for s in page.slots)
        classes = ["print-page", page.shape.css_class]
        if page.is_last:
            classes.append("last-page")
        return f"""<section class="{' '.join(classes)}" data-layout="{page.shape.value}" data-page="{page.index + 1}">
  {_banner("header", page.header.text, page.header.color)}
  <div class="page-content">
    {inner}
  </div>
  {_banner("footer", page.footer.text, page.footer.color)}
</section>"""

    def render(
        self,
        pages: Sequence[RenderedPage],
        *,
        styles: str = "",
        title: str = "Product Catalogue",
    ) -> str:
        if pages:
            pages_markup = "\n".join(self.render_page(p) for p in pages)
        else:
            pages_markup = '<div class="no-pages">No items to display.</div>'

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>{escape(title)}</title>
<meta name="viewport" content="width=device-width, initial-scale=1">
<style>
  @page {{
    size: A4;
    margin: 10mm;
  }}

  body {{
    margin: 0;
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
    color: #2C3E50;
    background: #F1F3F5;
  }}

  .print-page {{
    background: #fff;
    margin: 0 auto 12pt;
    max-width: 190mm;
    padding: 6pt;
  }}

  .page-header, .page-footer {{
    color: #fff;
    font-weight: 600;
    text-align: center;
    padding: 4pt 0;
    font-size: 10pt;
  }}

  .page-content {{
    padding: 8pt 0;
  }}

  .product-card {{
    border: 1px solid #E9ECEF;
    border-radius: 6px;
    padding: 8pt;
    break-inside: avoid;
  }}

  .product-title a {{
    color: inherit;
    text-decoration: none;
  }}

  .badge {{
    display: inline-block;
    color: #fff;
    border-radius: 3px;
    padding: 0 4pt;
    margin-left: 4pt;
    font-size: 0.85em;
    font-weight: bold;
  }}

  .badge-country {{
    color: #000;
  }}

  .barcode {{
    margin-top: 4pt;
  }}

  .internals-strip {{
    display: flex;
    gap: 4pt;
    margin-top: 6pt;
  }}

{styles}

  @media print {{
    body {{
      background: #fff;
    }}

    .print-page {{
      margin: 0;
      max-width: none;
      break-after: page;
      page-break-after: always;
    }}

    .print-page.last-page {{
      break-after: auto;
      page-break-after: auto;
    }}

    .page-header, .page-footer, .badge {{
      -webkit-print-color-adjust: exact;
      print-color-adjust: exact;
    }}
  }}
</style>
</head>
<body>
<main class="catalogue">
{pages_markup}
</main>
</body>
</html>"""

    def write(
        self,
        pages: Sequence[RenderedPage],
        out_path: str,
        *,
        styles: str = "",
        title: str = "Product Catalogue",
    ) -> None:
        html_doc = self.render(pages, styles=styles, title=title)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(html_doc)
