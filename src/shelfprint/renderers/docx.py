# shelfprint/renderers/docx.py
from __future__ import annotations

import io
from typing import Sequence, Union

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.image.exceptions import UnrecognizedImageError
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Mm, Pt, RGBColor

from ..assembler import EmptySlot, RenderedPage, RenderedSlot
from ..layouts.base import PALETTE, PLACEHOLDER_TEXT, DocumentBlock, DocumentRun
from ..logging import get_logger
from .base import CatalogueRenderer

"""
DOCX renderer (python-docx).

Consumes the DocumentBlocks each handler already projected; sizes, colours
and truncated text come from there untouched. Grid pages become a borderless
table with the shape's column count, 1-up and list pages flow as paragraphs.

author: Cole McGregor
date: 2026-03-08
version: 0.1.0
"""

log = get_logger("renderers.docx")

_ALIGN = {
    "left": WD_ALIGN_PARAGRAPH.LEFT,
    "center": WD_ALIGN_PARAGRAPH.CENTER,
    "right": WD_ALIGN_PARAGRAPH.RIGHT,
}


# ---------------------------------------------------------------------------
# Low-level XML helpers
# ---------------------------------------------------------------------------

def _hex(color: str) -> str:
    return color.lstrip("#").upper()


def _rgb(color: str) -> RGBColor:
    return RGBColor.from_string(_hex(color))


def _shading(fill: str):
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), _hex(fill))
    return shd


def _shade_paragraph(paragraph, fill: str) -> None:
    paragraph._p.get_or_add_pPr().append(_shading(fill))


def _style_run(run, r: DocumentRun) -> None:
    run.font.size = Pt(r.size)
    run.font.bold = r.bold
    run.font.italic = r.italic
    run.font.color.rgb = _rgb(r.color)
    if r.highlight:
        run._r.get_or_add_rPr().append(_shading(r.highlight))


def _add_hyperlink(paragraph, url: str, r: DocumentRun) -> None:
    """python-docx has no public hyperlink API; build w:hyperlink by hand."""
    r_id = paragraph.part.relate_to(url, RT.HYPERLINK, is_external=True)
    link = OxmlElement("w:hyperlink")
    link.set(qn("r:id"), r_id)

    new_run = OxmlElement("w:r")
    rpr = OxmlElement("w:rPr")
    color = OxmlElement("w:color")
    color.set(qn("w:val"), _hex(r.color))
    rpr.append(color)
    if r.bold:
        rpr.append(OxmlElement("w:b"))
    if r.italic:
        rpr.append(OxmlElement("w:i"))
    size = OxmlElement("w:sz")
    size.set(qn("w:val"), str(int(round(r.size * 2))))  # half-points
    rpr.append(size)
    new_run.append(rpr)

    text = OxmlElement("w:t")
    text.text = r.text
    text.set(qn("xml:space"), "preserve")
    new_run.append(text)

    link.append(new_run)
    paragraph._p.append(link)


def _remove_table_borders(table) -> None:
    tbl_pr = table._tbl.tblPr
    borders = OxmlElement("w:tblBorders")
    for edge in ("top", "left", "bottom", "right", "insideH", "insideV"):
        el = OxmlElement(f"w:{edge}")
        el.set(qn("w:val"), "nil")
        borders.append(el)
    tbl_pr.append(borders)


# ---------------------------------------------------------------------------
# DocxCatalogueRenderer
# ---------------------------------------------------------------------------

class DocxCatalogueRenderer(CatalogueRenderer):
    name = "docx"
    binary = True

    # ---- blocks -------------------------------------------------------

    def _add_block(self, container, block: DocumentBlock, first: bool = False) -> None:
        # Table cells start with one empty paragraph; reuse it for the first block.
        if first and not container.paragraphs[0].text:
            p = container.paragraphs[0]
        else:
            p = container.add_paragraph()
        p.alignment = _ALIGN.get(block.align, WD_ALIGN_PARAGRAPH.LEFT)
        p.paragraph_format.space_after = Pt(block.space_after)

        if block.kind == "image" and block.asset is not None:
            try:
                p.add_run().add_picture(
                    io.BytesIO(block.asset.data),
                    width=Pt(block.width or block.asset.width),
                    height=Pt(block.height or block.asset.height),
                )
                return
            except UnrecognizedImageError:
                log.warning("unsupported image format for %s block, using placeholder", block.role)
                run = p.add_run(PLACEHOLDER_TEXT)
                run.font.italic = True
                run.font.color.rgb = _rgb(PALETTE["placeholder"])
                return

        for r in block.runs:
            if r.link:
                _add_hyperlink(p, r.link, r)
            else:
                _style_run(p.add_run(r.text), r)

    def _add_slot(self, container, slot: RenderedSlot, in_cell: bool = False) -> None:
        for i, block in enumerate(slot.projection.document):
            self._add_block(container, block, first=in_cell and i == 0)

    def _add_banner(self, doc, text: str, color: str) -> None:
        p = doc.add_paragraph()
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER
        _shade_paragraph(p, color)
        run = p.add_run(text)
        run.font.bold = True
        run.font.size = Pt(10)
        run.font.color.rgb = RGBColor(0xFF, 0xFF, 0xFF)

    # ---- page ---------------------------------------------------------

    def _columns(self, page: RenderedPage) -> int:
        for s in page.rendered:
            return max(1, s.projection.sizing.columns)
        return 1

    def render_page(self, doc, page: RenderedPage) -> None:
        if page.break_before:
            doc.add_page_break()
        self._add_banner(doc, page.header.text, page.header.color)

        columns = self._columns(page)
        if page.shape.is_list or len(page.slots) == 1:
            for s in page.rendered:
                self._add_slot(doc, s)
        else:
            rows = -(-len(page.slots) // columns)
            table = doc.add_table(rows=rows, cols=columns)
            _remove_table_borders(table)
            for i, s in enumerate(page.slots):
                cell = table.cell(i // columns, i % columns)
                if isinstance(s, EmptySlot):
                    continue
                self._add_slot(cell, s, in_cell=True)

        self._add_banner(doc, page.footer.text, page.footer.color)

    def build(self, pages: Sequence[RenderedPage], *, title: str = "Product Catalogue"):
        doc = Document()
        doc.core_properties.title = title
        for section in doc.sections:
            section.top_margin = section.bottom_margin = Mm(10)
            section.left_margin = section.right_margin = Mm(10)
        for p in pages:
            self.render_page(doc, p)
        log.debug("built docx with %d pages", len(pages))
        return doc

    def render(
        self,
        pages: Sequence[RenderedPage],
        *,
        styles: str = "",
        title: str = "Product Catalogue",
    ) -> bytes:
        doc = self.build(pages, title=title)
        buf = io.BytesIO()
        doc.save(buf)
        return buf.getvalue()

    def write(
        self,
        pages: Sequence[RenderedPage],
        out_path: Union[str, "io.IOBase"],
        *,
        styles: str = "",
        title: str = "Product Catalogue",
    ) -> None:
        self.build(pages, title=title).save(out_path)
