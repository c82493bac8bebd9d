# shelfprint/pipeline.py
from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from . import renderers
from .assembler import PageAssembler, RenderedPage
from .assets import AssetResolver, collect_asset_urls, resolve_assets
from .barcodes import BarcodeProvider, CodeType
from .config import RenderConfig
from .dto import Item, check_unique_handles, to_items
from .errors import RenderResult, ShelfPrintError, ValidationError
from .layouts import LayoutRegistry, default_registry
from .layouts.base import ProjectionOptions, TruncationNotice
from .logging import get_logger
from .pagination import LayoutAssignment, ShapeLike, as_assignment, paginate

"""
One render request end to end:

    validate -> paginate -> resolve assets -> assemble -> sink

Everything is validated before the first page is built; any ShelfPrintError
(renderer lookup failures included) comes back as a failure RenderResult
with no partial output.
"""

log = get_logger("pipeline")

ItemsLike = Sequence[Union[Item, Mapping[str, Any]]]
AssignmentLike = Union[LayoutAssignment, ShapeLike, Sequence[ShapeLike]]


def _coerce_items(items: ItemsLike) -> list[Item]:
    if not items:
        raise ValidationError("No items provided")
    if all(isinstance(it, Item) for it in items):
        return list(items)  # type: ignore[arg-type]
    return to_items([it.to_mapping() if isinstance(it, Item) else it for it in items])


def validate_request(
    items: Sequence[Item],
    assignment: LayoutAssignment,
    registry: LayoutRegistry,
    config: Optional[RenderConfig] = None,
) -> None:
    """Raise ValidationError (or UnknownLayoutError) for anything unrenderable."""
    assignment.validate(len(items))
    check_unique_handles(items)

    for shape in assignment.shapes():
        registry.get(shape)

    if config is not None:
        CodeType.parse(config.barcode_type)
        for v in config.item_barcode_types.values():
            CodeType.parse(v)


def truncation_report(
    items: ItemsLike,
    layout: AssignmentLike,
    config: Optional[RenderConfig] = None,
    *,
    registry: Optional[LayoutRegistry] = None,
) -> list[TruncationNotice]:
    """
    Which descriptions / author bios will be cut for this layout choice,
    without rendering anything. Raises ValidationError like render_catalogue
    would reject the request.
    """
    cfg = config or RenderConfig()
    reg = registry or default_registry()
    item_list = _coerce_items(items)
    assignment = as_assignment(layout)
    validate_request(item_list, assignment, reg, cfg)

    notices: list[TruncationNotice] = []
    for page in paginate(item_list, assignment):
        handler = reg.get(page.shape)
        for entry in page.entries:
            options = ProjectionOptions.from_config(cfg, entry.global_index)
            plan = handler.plan(entry.item, entry.slot_index, cfg.urls, options)
            notices.extend(handler.truncation_notices(plan))
    return notices


def _warnings(pages: Sequence[RenderedPage]) -> tuple[str, ...]:
    return tuple(
        str(n)
        for page in pages
        for s in page.rendered
        for n in s.projection.truncations
    )


def render_catalogue(
    items: ItemsLike,
    layout: AssignmentLike,
    config: Optional[RenderConfig] = None,
    *,
    backend: str = "html",
    registry: Optional[LayoutRegistry] = None,
    resolver: Optional[AssetResolver] = None,
    barcodes: Optional[BarcodeProvider] = None,
    title: str = "Product Catalogue",
) -> RenderResult:
    """
    Render `items` with `layout` (a shape, a per-item list of shapes, or a
    LayoutAssignment) through the `backend` sink.

    Images are only fetched for binary sinks and only when a resolver is
    given; print HTML references image URLs directly. Text cut to fit a
    shape comes back in `RenderResult.warnings`.
    """
    cfg = config or RenderConfig()
    reg = registry or default_registry()
    try:
        sink = renderers.get(backend)
        item_list = _coerce_items(items)
        assignment = as_assignment(layout)
        validate_request(item_list, assignment, reg, cfg)
    except ShelfPrintError as exc:
        log.info("render rejected: %s", exc)
        return RenderResult.failure(exc)

    try:
        pages = paginate(item_list, assignment)

        resolved = None
        if resolver is not None and sink.binary:
            resolved = resolve_assets(collect_asset_urls(item_list), resolver)

        assembler = PageAssembler(reg, cfg, barcodes=barcodes)
        rendered = assembler.assemble_all(pages, resolved)
        output = sink.render(rendered, styles=reg.merged_styles(), title=title)
    except ShelfPrintError as exc:
        log.info("render failed: %s", exc)
        return RenderResult.failure(exc)

    warnings = _warnings(rendered)
    for w in warnings:
        log.info("truncated: %s", w)
    log.info(
        "rendered %d items into %d pages (%s, %s)",
        len(item_list), len(rendered), backend, "mixed" if assignment.is_mixed else assignment.uniform.value,
    )
    return RenderResult.ok(output, pages=tuple(rendered), warnings=warnings)


__all__ = [
    "validate_request",
    "truncation_report",
    "render_catalogue",
]
