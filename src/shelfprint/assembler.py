"""
Page assembler.

Wraps each paginated page with its banner header/footer, projects every
occupied slot through the page's handler (once per slot), asks the barcode
collaborator for auxiliary content, and pads grid pages with EmptySlot
markers so grid back-ends can draw complete rows. List pages are not padded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from .assets import AssetLookup
from .barcodes import BarcodeProvider, CodeType, code_payload, resolve_code_type
from .config import RenderConfig
from .dto import Item
from .layouts import LayoutRegistry
from .layouts.base import AuxiliaryContent, LayoutShape, ProjectionOptions, RenderedProjection
from .logging import get_logger
from .pagination import Page

log = get_logger("assembler")


@dataclass(frozen=True)
class Banner:
    text: str
    color: str


@dataclass(frozen=True)
class EmptySlot:
    slot_index: int


@dataclass(frozen=True)
class RenderedSlot:
    item: Item
    slot_index: int
    global_index: int
    code_type: CodeType
    projection: RenderedProjection


Slot = Union[RenderedSlot, EmptySlot]


@dataclass(frozen=True)
class RenderedPage:
    index: int
    shape: LayoutShape
    header: Banner
    footer: Banner
    slots: tuple[Slot, ...]
    is_first: bool
    is_last: bool
    starts_new_shape: bool

    @property
    def rendered(self) -> list[RenderedSlot]:
        return [s for s in self.slots if isinstance(s, RenderedSlot)]

    @property
    def empty_slots(self) -> int:
        return sum(1 for s in self.slots if isinstance(s, EmptySlot))

    @property
    def break_before(self) -> bool:
        return not self.is_first


class PageAssembler:
    def __init__(
        self,
        registry: LayoutRegistry,
        config: RenderConfig,
        barcodes: Optional[BarcodeProvider] = None,
    ) -> None:
        self.registry = registry
        self.config = config
        self.barcodes = barcodes

    def _auxiliary(self, item: Item, code_type: CodeType) -> Optional[AuxiliaryContent]:
        if code_type is CodeType.NONE or self.barcodes is None:
            return None
        payload = code_payload(item, code_type, self.config.urls)
        if payload is None:
            return None
        return self.barcodes.render(item, code_type, payload)

    def assemble(
        self,
        page: Page,
        resolved_assets: Optional[Mapping[str, AssetLookup]] = None,
    ) -> RenderedPage:
        handler = self.registry.get(page.shape)
        urls = self.config.urls

        slots: list[Slot] = []
        for entry in page.entries:
            code_type = resolve_code_type(
                entry.global_index,
                self.config.item_barcode_types,
                self.config.barcode_type,
            )
            projection = handler.project(
                entry.item,
                entry.slot_index,
                urls,
                resolved_assets=resolved_assets,
                auxiliary=self._auxiliary(entry.item, code_type),
                options=ProjectionOptions.from_config(self.config, entry.global_index),
            )
            slots.append(RenderedSlot(
                item=entry.item,
                slot_index=entry.slot_index,
                global_index=entry.global_index,
                code_type=code_type,
                projection=projection,
            ))

        if handler.pads_empty_slots():
            for i in range(len(slots), handler.capacity()):
                slots.append(EmptySlot(slot_index=i))

        text = self.config.header_for(page.index)
        banner = Banner(text=text, color=self.config.banner_color)
        return RenderedPage(
            index=page.index,
            shape=page.shape,
            header=banner,
            footer=banner,
            slots=tuple(slots),
            is_first=page.is_first,
            is_last=page.is_last,
            starts_new_shape=page.starts_new_shape,
        )

    def assemble_all(
        self,
        pages: Iterable[Page],
        resolved_assets: Optional[Mapping[str, AssetLookup]] = None,
    ) -> list[RenderedPage]:
        out = [self.assemble(p, resolved_assets) for p in pages]
        log.debug("assembled %d pages", len(out))
        return out


__all__ = [
    "Banner",
    "EmptySlot",
    "RenderedSlot",
    "RenderedPage",
    "PageAssembler",
]
