# shelfprint/renderers/__init__.py
from __future__ import annotations

from typing import Dict

from .base import CatalogueRenderer, RendererError
from .docx import DocxCatalogueRenderer
from .html import HTMLCatalogueRenderer
from .txt import TextCatalogueRenderer

"""
Renderer registry.

- Registers concrete renderer instances keyed by renderer.name (lowercased/stripped).
- Used by the pipeline/CLI to select an output format (html, docx, text).
"""

_REGISTRY: Dict[str, CatalogueRenderer] = {}


def register(renderer: CatalogueRenderer) -> None:
    _REGISTRY[renderer.name.lower().strip()] = renderer


def get(name: str) -> CatalogueRenderer:
    key = name.lower().strip()
    try:
        return _REGISTRY[key]
    except KeyError:
        raise RendererError(
            f"Unknown renderer: {name!r}. Available: {', '.join(sorted(_REGISTRY))}"
        )


def available() -> list[str]:
    return sorted(_REGISTRY.keys())


# Pre-register built-ins
register(HTMLCatalogueRenderer())
register(DocxCatalogueRenderer())
register(TextCatalogueRenderer())
