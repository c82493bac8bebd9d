# shelfprint/layouts/__init__.py
from __future__ import annotations

from typing import Dict, Union

from ..errors import UnknownLayoutError, ValidationError
from .base import (
    AuxiliaryContent,
    CardPlan,
    DocumentBlock,
    DocumentRun,
    ImageBox,
    LayoutHandler,
    LayoutShape,
    PreviewNode,
    PrintFragment,
    ProjectionOptions,
    RenderedProjection,
    SizingTable,
)
from .cards import CARD_HANDLERS
from .lists import ROW_HANDLERS

"""
Layout registry.

- Maps a LayoutShape to its handler instance.
- Lookup of an unregistered shape raises UnknownLayoutError; there is no
  fallback handler.
- merged_styles() concatenates every handler's shared_style() for sinks.
"""

ShapeKey = Union[LayoutShape, str, int]


class LayoutRegistry:
    def __init__(self) -> None:
        self._handlers: Dict[LayoutShape, LayoutHandler] = {}

    def register(self, shape: ShapeKey, handler: LayoutHandler) -> None:
        s = LayoutShape.parse(shape)
        if handler.shape is not s:
            raise ValidationError(
                f"Handler for {handler.shape.value!r} cannot be registered as {s.value!r}"
            )
        if handler.capacity() != s.capacity:
            raise ValidationError(
                f"Handler capacity {handler.capacity()} does not match "
                f"{s.value!r} capacity {s.capacity}"
            )
        self._handlers[s] = handler

    def get(self, shape: ShapeKey) -> LayoutHandler:
        s = LayoutShape.parse(shape)
        try:
            return self._handlers[s]
        except KeyError:
            raise UnknownLayoutError(s.value, self.available())

    def __contains__(self, shape: object) -> bool:
        try:
            return LayoutShape.parse(shape) in self._handlers  # type: ignore[arg-type]
        except UnknownLayoutError:
            return False

    def all(self) -> dict[LayoutShape, LayoutHandler]:
        return dict(self._handlers)

    def shapes(self) -> list[LayoutShape]:
        return list(self._handlers)

    def available(self) -> list[str]:
        return [s.value for s in self._handlers]

    def merged_styles(self) -> str:
        return "\n".join(h.shared_style() for h in self._handlers.values())


def default_registry() -> LayoutRegistry:
    """A fresh registry with every built-in shape registered."""
    reg = LayoutRegistry()
    for cls in CARD_HANDLERS + ROW_HANDLERS:
        handler = cls()
        reg.register(handler.shape, handler)
    return reg


_REGISTRY = default_registry()


def register(shape: ShapeKey, handler: LayoutHandler) -> None:
    _REGISTRY.register(shape, handler)


def get(shape: ShapeKey) -> LayoutHandler:
    return _REGISTRY.get(shape)


def available() -> list[str]:
    return _REGISTRY.available()


def registry() -> LayoutRegistry:
    return _REGISTRY


__all__ = [
    "LayoutRegistry",
    "default_registry",
    "register",
    "get",
    "available",
    "registry",
    "LayoutShape",
    "LayoutHandler",
    "SizingTable",
    "ImageBox",
    "ProjectionOptions",
    "CardPlan",
    "PreviewNode",
    "PrintFragment",
    "DocumentBlock",
    "DocumentRun",
    "AuxiliaryContent",
    "RenderedProjection",
]
