# shelfprint/layouts/base.py
from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Iterator, Mapping, Optional, Union

from ..assets import MISSING, ResolvedAsset
from ..config import Orientation, RenderConfig, UrlBuilder
from ..dto import Item
from ..errors import UnknownLayoutError
from ..formatting import (
    ReleaseInfo,
    author_country_badge,
    compose_meta_line,
    escape,
    format_price,
    format_release_date_and_badge,
    truncate_at_word_boundary,
    truncation_severity,
)

"""
Layout handler contract.

A handler owns exactly one SizingTable per shape (two for 2-int: portrait and
landscape) plus its truncation budgets. `plan()` turns (item, shape) into a
CardPlan once; the three projections (preview tree, print markup, document
blocks) only ever render a CardPlan, so they cannot disagree on sizes or
truncated text.

author: Cole McGregor
date: 2026-03-04
version: 0.1.0
"""


# ---------------------------------------------------------------------------
# Layout Shape Contract
# ---------------------------------------------------------------------------

class LayoutShape(Enum):
    """
    Named layout configuration. Capacity (items per page) is a HARD contract
    the pagination engine relies on.
    """
    ONE_UP = "1-up"
    TWO_UP = "2-up"
    THREE_UP = "3-up"
    FOUR_UP = "4-up"
    EIGHT_UP = "8-up"
    NINE_UP = "9-up"
    TWELVE_UP = "12-up"
    LIST = "list"
    COMPACT_LIST = "compact-list"
    TWO_INT = "2-int"

    @property
    def capacity(self) -> int:
        return _CAPACITY[self]

    @property
    def is_list(self) -> bool:
        return self in (LayoutShape.LIST, LayoutShape.COMPACT_LIST)

    @property
    def css_class(self) -> str:
        return f"layout-{self.value}"

    @classmethod
    def parse(cls, value: Union["LayoutShape", str, int]) -> "LayoutShape":
        """
        Accept a shape, its id ("4-up"), or the bare number the request
        payloads use (4 -> "4-up"). Raises UnknownLayoutError otherwise.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise UnknownLayoutError(value, [s.value for s in cls])
        key = str(value).strip().lower()
        if key.isdigit():
            key = f"{key}-up"
        for s in cls:
            if s.value == key:
                return s
        raise UnknownLayoutError(value, [s.value for s in cls])


_CAPACITY = MappingProxyType({
    LayoutShape.ONE_UP: 1,
    LayoutShape.TWO_UP: 2,
    LayoutShape.THREE_UP: 3,
    LayoutShape.FOUR_UP: 4,
    LayoutShape.EIGHT_UP: 8,
    LayoutShape.NINE_UP: 9,
    LayoutShape.TWELVE_UP: 12,
    LayoutShape.LIST: 10,
    LayoutShape.COMPACT_LIST: 20,
    LayoutShape.TWO_INT: 2,
})


# ---------------------------------------------------------------------------
# Sizing
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ImageBox:
    width: int   # points
    height: int  # points


@dataclass(frozen=True)
class SizingTable:
    """
    Font sizes (pt) and image boxes for one shape. The only place a size
    may come from.
    """
    title: float
    subtitle: float
    author: float
    description: float
    price: float
    code: float
    details: float
    image: Optional[ImageBox]
    internals: Optional[ImageBox] = None
    max_internals: int = 0
    barcode_scale: float = 0.5
    columns: int = 1


# Text colours (hex, no '#'); shared by every shape.
PALETTE = MappingProxyType({
    "title": "2C3E50",
    "subtitle": "7F8C8D",
    "author": "667EEA",
    "release": "6C757D",
    "description": "495057",
    "author_bio": "495057",
    "specs": "6C757D",
    "meta": "6C757D",
    "price": "2C3E50",
    "code": "6C757D",
    "placeholder": "999999",
})

BADGE_COLORS = MappingProxyType({
    "current": "28A745",
    "future": "007BFF",
    "country": "FFD700",
})

PLACEHOLDER_TEXT = "Image not available"

# Optional fields a handler may show; `fields` on each handler picks a subset.
ALL_FIELDS = frozenset({
    "subtitle", "author", "author_bio", "description", "price",
    "release_date", "author_country", "binding", "pages", "dimensions",
    "imprint", "weight", "illustrations", "edition", "discount_code",
    "sku", "internals",
})


def placeholder_image_url(box: ImageBox) -> str:
    return f"https://via.placeholder.com/{box.width}x{box.height}?text=No+Image"


# ---------------------------------------------------------------------------
# Projection options & plan
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectionOptions:
    show_fields: Mapping[str, bool] = field(default_factory=dict)
    today: Optional[date] = None
    orientation: Orientation = Orientation.PORTRAIT

    def shows(self, name: str) -> bool:
        return bool(self.show_fields.get(name, True))

    @classmethod
    def from_config(cls, config: RenderConfig, index: int) -> "ProjectionOptions":
        return cls(
            show_fields=config.show_fields,
            today=config.today,
            orientation=config.orientation_for(index),
        )


DEFAULT_OPTIONS = ProjectionOptions()


@dataclass(frozen=True)
class PlanLine:
    """One text line of a card/row, already truncated and sized."""
    role: str
    text: str
    size: float
    bold: bool = False
    italic: bool = False
    href: Optional[str] = None
    label: Optional[str] = None
    badges: tuple[tuple[str, str], ...] = ()  # (kind, text)

    @property
    def color(self) -> str:
        return PALETTE.get(self.role, PALETTE["meta"])

    @property
    def display_text(self) -> str:
        return f"{self.label}: {self.text}" if self.label else self.text


@dataclass(frozen=True)
class CardPlan:
    """Every decision for one (item, shape), computed once."""
    shape: LayoutShape
    item: Item
    slot_index: int
    url: str
    sizing: SizingTable
    lines: tuple[PlanLine, ...]
    image_url: Optional[str]        # None when the shape has no cover image
    image_is_placeholder: bool
    internals: tuple[str, ...]
    release: Optional[ReleaseInfo]
    variant: Optional[str] = None   # e.g. "landscape" for 2-int
    truncated: frozenset[str] = frozenset()  # fields cut to their budget

    def line(self, role: str) -> Optional[PlanLine]:
        for ln in self.lines:
            if ln.role == role:
                return ln
        return None

    def roles(self) -> list[str]:
        return [ln.role for ln in self.lines]


# ---------------------------------------------------------------------------
# Projection outputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PreviewNode:
    """
    Back-end-neutral element tree for the interactive preview.
    kind: card | row | group | image | link | text | badge | html
    """
    kind: str
    role: str
    text: Optional[str] = None
    href: Optional[str] = None
    src: Optional[str] = None
    style: Mapping[str, Any] = field(default_factory=dict)
    children: tuple["PreviewNode", ...] = ()

    def walk(self) -> Iterator["PreviewNode"]:
        yield self
        for c in self.children:
            yield from c.walk()

    def find(self, role: str) -> Optional["PreviewNode"]:
        for n in self.walk():
            if n.role == role:
                return n
        return None

    def roles(self) -> set[str]:
        return {n.role for n in self.walk()}


@dataclass(frozen=True)
class PrintFragment:
    markup: str
    shape: LayoutShape
    sizing: SizingTable

    def __str__(self) -> str:
        return self.markup


@dataclass(frozen=True)
class DocumentRun:
    text: str
    size: float
    bold: bool = False
    italic: bool = False
    color: str = "000000"
    link: Optional[str] = None
    highlight: Optional[str] = None


@dataclass(frozen=True)
class DocumentBlock:
    """
    kind: paragraph | image
    Images carry resolved bytes; width/height are points.
    """
    kind: str
    role: str
    runs: tuple[DocumentRun, ...] = ()
    asset: Optional[ResolvedAsset] = None
    width: Optional[float] = None
    height: Optional[float] = None
    align: str = "left"
    space_after: float = 4.0


@dataclass(frozen=True)
class AuxiliaryContent:
    """Opaque barcode/QR output: markup for print, asset for documents."""
    markup: Optional[str] = None
    asset: Optional[ResolvedAsset] = None


@dataclass(frozen=True)
class TruncationNotice:
    """One field of one item that will not fit its shape's budget."""
    handle: str
    field: str
    shape: LayoutShape
    length: int
    limit: int

    @property
    def severity(self) -> str:
        return truncation_severity(self.length, self.limit)

    def __str__(self) -> str:
        return (
            f"{self.handle}: {self.field.replace('_', ' ')} cut to {self.limit} "
            f"of {self.length} characters on {self.shape.value} ({self.severity})"
        )


@dataclass(frozen=True)
class RenderedProjection:
    shape: LayoutShape
    sizing: SizingTable
    preview: PreviewNode
    print_fragment: PrintFragment
    document: tuple[DocumentBlock, ...]
    truncations: tuple[TruncationNotice, ...] = ()

    @property
    def truncated(self) -> frozenset[str]:
        return frozenset(n.field for n in self.truncations)


AssetMap = Mapping[str, Any]  # url -> ResolvedAsset | MISSING


# ---------------------------------------------------------------------------
# Handler Base
# ---------------------------------------------------------------------------

class LayoutHandler(ABC):
    """
    Strategy interface: one subclass per LayoutShape.

    Subclasses declare `shape`, `table`, `budgets`, `fields` and the visual
    `form` ("card" or "row"); they should not override the projection
    methods' size handling.
    """

    shape: ClassVar[LayoutShape]
    table: ClassVar[SizingTable]
    budgets: ClassVar[Mapping[str, Optional[int]]] = MappingProxyType({})
    fields: ClassVar[frozenset[str]] = ALL_FIELDS
    form: ClassVar[str] = "card"

    # ---- declarations ----------------------------------------------------

    @property
    def name(self) -> str:
        return self.shape.value

    def capacity(self) -> int:
        return self.shape.capacity

    def sizing_table(self, orientation: Optional[Orientation] = None) -> SizingTable:
        return self.table

    def truncation_budget(self, field_name: str) -> Optional[int]:
        return self.budgets.get(field_name)

    def pads_empty_slots(self) -> bool:
        return self.form == "card" and self.capacity() > 1

    def _visible(self, field_name: str, options: ProjectionOptions) -> bool:
        return field_name in self.fields and options.shows(field_name)

    # ---- plan ------------------------------------------------------------

    def plan(
        self,
        item: Item,
        slot_index: int,
        urls: UrlBuilder,
        options: Optional[ProjectionOptions] = None,
    ) -> CardPlan:
        opts = options or DEFAULT_OPTIONS
        sizing = self.sizing_table(opts.orientation)
        url = urls.product_url(item.handle)
        show = lambda name: self._visible(name, opts)  # noqa: E731

        lines: list[PlanLine] = [
            PlanLine("title", item.title, sizing.title, bold=True, href=url),
        ]
        if item.subtitle and show("subtitle"):
            lines.append(PlanLine("subtitle", item.subtitle, sizing.subtitle, italic=True))
        if item.author and show("author"):
            lines.append(PlanLine("author", f"By {item.author}", sizing.author, bold=True))

        country = author_country_badge(item.author_country) if show("author_country") else None
        release = None
        if item.release_date and show("release_date"):
            release = format_release_date_and_badge(item.release_date, opts.today)
            badges: list[tuple[str, str]] = []
            if release.badge:
                badges.append((release.badge, release.badge.upper()))
            if country:
                badges.append(("country", country))
            lines.append(PlanLine(
                "release", release.formatted_date, sizing.details,
                label="Release Date", badges=tuple(badges),
            ))
        elif country:
            # no release line to carry it
            lines.append(PlanLine("country", "", sizing.details, badges=(("country", country),)))

        truncated: set[str] = set()
        if item.description and show("description"):
            text = self._truncate("description", item.description)
            if text != item.description:
                truncated.add("description")
            lines.append(PlanLine("description", text, sizing.description))
        if item.author_bio and show("author_bio"):
            text = self._truncate("author_bio", item.author_bio)
            if text != item.author_bio:
                truncated.add("author_bio")
            lines.append(PlanLine("author_bio", text, sizing.description, label="About the Author"))

        specs = compose_meta_line([
            item.binding if show("binding") else None,
            f"{item.pages} pages" if item.pages and show("pages") else None,
            item.dimensions if show("dimensions") else None,
        ])
        if specs:
            lines.append(PlanLine("specs", specs, sizing.details))

        for name, label in (
            ("imprint", "Publisher"),
            ("weight", "Weight"),
            ("illustrations", "Illustrations"),
            ("edition", "Edition"),
        ):
            value = getattr(item, name)
            if value and show(name):
                lines.append(PlanLine("meta", value, sizing.details, label=label))

        price = format_price(item.price) if show("price") else None
        if price:
            lines.append(PlanLine("price", price, sizing.price, bold=True))

        code_line = compose_meta_line([
            f"ISBN: {item.sku}" if item.sku and show("sku") else None,
            f"Discount: {item.discount_code}" if item.discount_code and show("discount_code") else None,
        ])
        if code_line:
            lines.append(PlanLine("code", code_line, sizing.code))

        if sizing.image is None:
            image_url, placeholder = None, False
        elif item.image_url:
            image_url, placeholder = item.image_url, False
        else:
            image_url, placeholder = placeholder_image_url(sizing.image), True

        internals: tuple[str, ...] = ()
        if sizing.internals and sizing.max_internals and show("internals"):
            internals = item.additional_images[: sizing.max_internals]

        return CardPlan(
            shape=self.shape,
            item=item,
            slot_index=slot_index,
            url=url,
            sizing=sizing,
            lines=tuple(lines),
            image_url=image_url,
            image_is_placeholder=placeholder,
            internals=internals,
            release=release,
            truncated=frozenset(truncated),
        )

    def _truncate(self, field_name: str, text: str) -> str:
        budget = self.truncation_budget(field_name)
        if budget is None:
            return text
        return truncate_at_word_boundary(text, budget)

    def truncation_notices(self, plan: CardPlan) -> tuple[TruncationNotice, ...]:
        """Describe each field the plan cut, longest overrun first."""
        notices = [
            TruncationNotice(
                handle=plan.item.handle,
                field=name,
                shape=self.shape,
                length=len(getattr(plan.item, name) or ""),
                limit=self.truncation_budget(name) or 0,
            )
            for name in sorted(plan.truncated)
        ]
        notices.sort(key=lambda n: n.length - n.limit, reverse=True)
        return tuple(notices)

    # ---- projections -----------------------------------------------------

    def project_preview(
        self,
        item: Item,
        slot_index: int,
        urls: UrlBuilder,
        options: Optional[ProjectionOptions] = None,
    ) -> PreviewNode:
        return self.render_preview(self.plan(item, slot_index, urls, options))

    def project_print(
        self,
        item: Item,
        slot_index: int,
        urls: UrlBuilder,
        auxiliary_markup: Optional[str] = None,
        options: Optional[ProjectionOptions] = None,
    ) -> PrintFragment:
        return self.render_print(self.plan(item, slot_index, urls, options), auxiliary_markup)

    def project_document(
        self,
        item: Item,
        slot_index: int,
        resolved_assets: Optional[AssetMap],
        urls: UrlBuilder,
        auxiliary_asset: Optional[ResolvedAsset] = None,
        options: Optional[ProjectionOptions] = None,
    ) -> tuple[DocumentBlock, ...]:
        plan = self.plan(item, slot_index, urls, options)
        return self.render_document(plan, resolved_assets or {}, auxiliary_asset)

    def project(
        self,
        item: Item,
        slot_index: int,
        urls: UrlBuilder,
        resolved_assets: Optional[AssetMap] = None,
        auxiliary: Optional[AuxiliaryContent] = None,
        options: Optional[ProjectionOptions] = None,
    ) -> RenderedProjection:
        """All three projections from a single plan."""
        plan = self.plan(item, slot_index, urls, options)
        aux = auxiliary or AuxiliaryContent()
        return RenderedProjection(
            shape=self.shape,
            sizing=plan.sizing,
            preview=self.render_preview(plan),
            print_fragment=self.render_print(plan, aux.markup),
            document=self.render_document(plan, resolved_assets or {}, aux.asset),
            truncations=self.truncation_notices(plan),
        )

    # ---- renderers (plan -> output) --------------------------------------

    def render_preview(self, plan: CardPlan) -> PreviewNode:
        s = plan.sizing
        children: list[PreviewNode] = []
        if plan.image_url is not None and s.image is not None:
            children.append(PreviewNode(
                kind="image",
                role="cover",
                src=plan.image_url,
                text=plan.item.title,
                style={"width": s.image.width, "height": s.image.height,
                       "placeholder": plan.image_is_placeholder},
            ))

        detail_nodes: list[PreviewNode] = []
        for ln in plan.lines:
            badges = tuple(
                PreviewNode(kind="badge", role=f"badge-{kind}", text=text,
                            style={"background": BADGE_COLORS[kind]})
                for kind, text in ln.badges
            )
            detail_nodes.append(PreviewNode(
                kind="link" if ln.href else "text",
                role=ln.role,
                text=ln.display_text,
                href=ln.href,
                style={"fontSize": ln.size, "color": ln.color,
                       "bold": ln.bold, "italic": ln.italic},
                children=badges,
            ))
        children.append(PreviewNode(kind="group", role="details", children=tuple(detail_nodes)))

        if plan.internals and s.internals is not None:
            children.append(PreviewNode(
                kind="group",
                role="internals",
                children=tuple(
                    PreviewNode(kind="image", role="internal", src=u,
                                text=f"Internal {i + 1}",
                                style={"width": s.internals.width, "height": s.internals.height})
                    for i, u in enumerate(plan.internals)
                ),
            ))

        return PreviewNode(
            kind=self.form,
            role=self.shape.value,
            style={"columns": s.columns, "slot": plan.slot_index},
            children=tuple(children),
        )

    def render_print(self, plan: CardPlan, auxiliary_markup: Optional[str] = None) -> PrintFragment:
        s = plan.sizing
        item = plan.item
        parts: list[str] = []
        wrapper = "product-card" if self.form == "card" else "product-row"
        if plan.variant:
            wrapper += f" {plan.variant}"
        parts.append(
            f'<div class="{wrapper}" data-handle="{escape(item.handle)}" '
            f'data-slot="{plan.slot_index}">'
        )

        if plan.image_url is not None and s.image is not None:
            cls = "book-cover placeholder" if plan.image_is_placeholder else "book-cover"
            parts.append(
                '<div class="product-image">'
                f'<img src="{escape(plan.image_url)}" alt="{escape(item.title)}" class="{cls}" '
                f'style="width:{s.image.width}pt;height:{s.image.height}pt">'
                "</div>"
            )

        parts.append('<div class="product-details">')
        for ln in plan.lines:
            parts.append(self._print_line(ln))
        if auxiliary_markup:
            parts.append(f'<div class="barcode">{auxiliary_markup}</div>')
        parts.append("</div>")

        if plan.internals and s.internals is not None:
            imgs = "".join(
                f'<img src="{escape(u)}" alt="Internal {i + 1}" class="internal-image" '
                f'style="width:{s.internals.width}pt;height:{s.internals.height}pt">'
                for i, u in enumerate(plan.internals)
            )
            parts.append(f'<div class="internals-strip">{imgs}</div>')

        parts.append("</div>")
        return PrintFragment(markup="".join(parts), shape=self.shape, sizing=s)

    @staticmethod
    def _print_line(ln: PlanLine) -> str:
        style = f"font-size:{ln.size}pt;color:#{ln.color}"
        if ln.role == "title":
            return (
                f'<h2 class="product-title" style="{style}">'
                f'<a href="{escape(ln.href)}" target="_blank" rel="noopener noreferrer">'
                f"{escape(ln.text)}</a></h2>"
            )
        body = escape(ln.text)
        if ln.label:
            body = f"<strong>{escape(ln.label)}:</strong> {body}"
        badges = "".join(
            f'<span class="badge badge-{kind}" style="background:#{BADGE_COLORS[kind]}">'
            f"{escape(text)}</span>"
            for kind, text in ln.badges
        )
        css = f"product-{ln.role.replace('_', '-')}"
        return f'<div class="{css}" style="{style}">{body}{badges}</div>'

    def render_document(
        self,
        plan: CardPlan,
        resolved_assets: AssetMap,
        auxiliary_asset: Optional[ResolvedAsset] = None,
    ) -> tuple[DocumentBlock, ...]:
        s = plan.sizing
        blocks: list[DocumentBlock] = []

        if plan.image_url is not None and s.image is not None:
            blocks.append(self._document_image(
                plan.item.image_url, "cover", s.image, resolved_assets, s.details,
            ))

        for ln in plan.lines:
            runs = [DocumentRun(
                text=ln.display_text,
                size=ln.size,
                bold=ln.bold,
                italic=ln.italic,
                color=ln.color,
                link=ln.href,
            )]
            for kind, text in ln.badges:
                runs.append(DocumentRun(
                    text=f"  {text}", size=ln.size, bold=True,
                    color="000000" if kind == "country" else "FFFFFF",
                    highlight=BADGE_COLORS[kind],
                ))
            blocks.append(DocumentBlock(kind="paragraph", role=ln.role, runs=tuple(runs)))

        if plan.internals and s.internals is not None:
            for u in plan.internals:
                blocks.append(self._document_image(u, "internal", s.internals, resolved_assets, s.details))

        if auxiliary_asset is not None:
            blocks.append(DocumentBlock(
                kind="image",
                role="barcode",
                asset=auxiliary_asset,
                width=auxiliary_asset.width * s.barcode_scale,
                height=auxiliary_asset.height * s.barcode_scale,
                align="center",
            ))
        return tuple(blocks)

    @staticmethod
    def _document_image(
        url: Optional[str],
        role: str,
        box: ImageBox,
        resolved_assets: AssetMap,
        text_size: float,
    ) -> DocumentBlock:
        asset = resolved_assets.get(url) if url else None
        if isinstance(asset, ResolvedAsset):
            return DocumentBlock(
                kind="image", role=role, asset=asset,
                width=box.width, height=box.height, align="center",
            )
        return DocumentBlock(
            kind="paragraph",
            role=f"{role}-placeholder",
            runs=(DocumentRun(PLACEHOLDER_TEXT, size=text_size, italic=True,
                              color=PALETTE["placeholder"]),),
            align="center",
        )

    # ---- styles ------------------------------------------------------------

    def shared_style(self) -> str:
        """CSS scoped to this shape, derived from the sizing table."""
        return self._style_for(self.sizing_table(), self.shape.css_class)

    def _style_for(self, s: SizingTable, scope: str) -> str:
        sel = f".{scope}"
        rules = [
            f"{sel} .page-content {{ display: grid; "
            f"grid-template-columns: repeat({s.columns}, 1fr); gap: 12pt; }}",
            f"{sel} .product-title {{ font-size: {s.title}pt; margin: 0 0 4pt; }}",
            f"{sel} .product-subtitle {{ font-size: {s.subtitle}pt; font-style: italic; }}",
            f"{sel} .product-author {{ font-size: {s.author}pt; font-weight: 600; }}",
            f"{sel} .product-description, {sel} .product-author-bio "
            f"{{ font-size: {s.description}pt; line-height: 1.4; }}",
            f"{sel} .product-specs, {sel} .product-meta, {sel} .product-release "
            f"{{ font-size: {s.details}pt; }}",
            f"{sel} .product-price {{ font-size: {s.price}pt; font-weight: bold; }}",
            f"{sel} .product-code {{ font-size: {s.code}pt; }}",
        ]
        if s.image is not None:
            rules.append(
                f"{sel} .book-cover {{ width: {s.image.width}pt; height: {s.image.height}pt; "
                "object-fit: cover; border: 1px solid #ddd; }"
            )
        if s.internals is not None:
            rules.append(
                f"{sel} .internal-image {{ width: {s.internals.width}pt; "
                f"height: {s.internals.height}pt; object-fit: contain; }}"
            )
        rules.append(self.form_style(sel))
        return "\n".join(r for r in rules if r)

    def form_style(self, sel: str) -> str:
        return ""


__all__ = [
    "LayoutShape",
    "ImageBox",
    "SizingTable",
    "PALETTE",
    "BADGE_COLORS",
    "PLACEHOLDER_TEXT",
    "ALL_FIELDS",
    "placeholder_image_url",
    "ProjectionOptions",
    "DEFAULT_OPTIONS",
    "PlanLine",
    "CardPlan",
    "PreviewNode",
    "PrintFragment",
    "DocumentRun",
    "DocumentBlock",
    "AuxiliaryContent",
    "RenderedProjection",
    "TruncationNotice",
    "AssetMap",
    "LayoutHandler",
    "MISSING",
]
