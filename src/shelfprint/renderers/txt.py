# shelfprint/renderers/txt.py
from __future__ import annotations

from typing import Sequence

from ..assembler import EmptySlot, RenderedPage
from ..layouts.base import PreviewNode
from .base import CatalogueRenderer

"""
Plain-text renderer for assembled pages. Walks each slot's preview tree,
so what the terminal shows is exactly what the interactive preview holds.

author: Cole McGregor
date: 2026-03-07
version: 0.1.0
"""

WIDTH = 72


def _node_lines(node: PreviewNode) -> list[str]:
    if node.kind == "image":
        if node.role == "cover":
            marker = "(placeholder)" if node.style.get("placeholder") else node.src
            return [f"[cover] {marker}"]
        return []
    if node.kind == "group":
        if node.role == "internals":
            return [f"[internals] {len(node.children)} image(s)"]
        out: list[str] = []
        for c in node.children:
            out.extend(_node_lines(c))
        return out
    if node.kind in ("text", "link"):
        badges = " ".join(f"[{b.text}]" for b in node.children if b.kind == "badge")
        line = node.text or ""
        if badges:
            line = f"{line} {badges}" if line else badges
        if node.href:
            line = f"{line}\n  <{node.href}>"
        return [line]
    return []


class TextCatalogueRenderer(CatalogueRenderer):
    """
    Plain-text renderer (good for CLI output or logs).
    """
    name = "text"
    binary = False

    def render_slot(self, preview: PreviewNode) -> str:
        lines: list[str] = []
        for child in preview.children:
            lines.extend(_node_lines(child))
        return "\n".join(lines)

    def render_page(self, page: RenderedPage) -> str:
        parts = [
            "=" * WIDTH,
            f"Page {page.index + 1} [{page.shape.value}]  {page.header.text}",
            "=" * WIDTH,
        ]
        for s in page.slots:
            if isinstance(s, EmptySlot):
                parts.append(f"({s.slot_index + 1}) (empty)")
                continue
            parts.append(f"({s.slot_index + 1})")
            parts.append(self.render_slot(s.projection.preview))
            parts.append("-" * WIDTH)
        return "\n".join(parts)

    def render(
        self,
        pages: Sequence[RenderedPage],
        *,
        styles: str = "",
        title: str = "Product Catalogue",
    ) -> str:
        parts = [f"# {title}"]
        if not pages:
            parts.append("(no pages)")
        for p in pages:
            parts.append(self.render_page(p))
        return "\n".join(parts) + "\n"

    def write(
        self,
        pages: Sequence[RenderedPage],
        out_path: str,
        *,
        styles: str = "",
        title: str = "Product Catalogue",
    ) -> None:
        doc = self.render(pages, styles=styles, title=title)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(doc)
