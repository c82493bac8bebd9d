# shelfprint/renderers/base.py
from __future__ import annotations

from typing import Protocol, Sequence, Union

from ..assembler import RenderedPage
from ..errors import ShelfPrintError

"""
Base protocol for catalogue sinks.

A sink turns assembled pages (plus the registry's merged styles) into one
output document: print HTML, DOCX bytes, or terminal text. Sinks consume
projections; they never recompute sizes or truncation.

author: Cole McGregor
date: 2026-03-06
version: 0.1.0
"""


class RendererError(ShelfPrintError):
    pass


class CatalogueRenderer(Protocol):
    """
    Strategy interface: render a list of RenderedPages to a document.
    """

    name: str     # stable key, e.g., "html", "docx"
    binary: bool  # True when render() returns bytes

    def render(
        self,
        pages: Sequence[RenderedPage],
        *,
        styles: str,
        title: str,
    ) -> Union[str, bytes]: ...

    def write(
        self,
        pages: Sequence[RenderedPage],
        out_path: str,
        *,
        styles: str,
        title: str,
    ) -> None: ...
