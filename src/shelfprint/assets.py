from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Protocol, Union, runtime_checkable

import requests
from PIL import Image, UnidentifiedImageError

from .errors import AssetUnavailable
from .logging import get_logger


"""
Asset resolution for document back-ends.

The layout core never fetches anything: it receives a mapping of
url -> ResolvedAsset | MISSING and renders the placeholder path for MISSING.
HttpAssetResolver is the default collaborator that builds that mapping.
"""

log = get_logger("assets")


class _Missing:
    """Sentinel for an image that could not be resolved."""
    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


@dataclass(frozen=True)
class ResolvedAsset:
    data: bytes
    width: int
    height: int
    mime_type: str = "image/png"

    @property
    def is_landscape(self) -> bool:
        return self.width > self.height


AssetLookup = Union[ResolvedAsset, _Missing]


@runtime_checkable
class AssetResolver(Protocol):
    """Given an image URL return resolved bytes+dimensions or MISSING."""
    def resolve(self, url: str) -> AssetLookup: ...


# ---------------------------------------------------------------------------
# HTTP resolver
# ---------------------------------------------------------------------------

class HttpAssetResolver:
    UA = "shelfprint-assets/0.1"

    def __init__(self, *, timeout: float = 20, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, url: str) -> ResolvedAsset:
        """
        Download and measure one image. Raises AssetUnavailable on any
        network or decode failure.
        """
        try:
            resp = self.session.get(url, headers={"User-Agent": self.UA}, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise AssetUnavailable(url, str(exc)) from exc

        data = resp.content
        try:
            with Image.open(io.BytesIO(data)) as img:
                width, height = img.size
                fmt = (img.format or "PNG").lower()
        except (UnidentifiedImageError, OSError) as exc:
            raise AssetUnavailable(url, "not an image") from exc

        mime = resp.headers.get("Content-Type") or f"image/{fmt}"
        return ResolvedAsset(data=data, width=width, height=height, mime_type=mime.split(";")[0])

    def resolve(self, url: str) -> AssetLookup:
        try:
            return self.fetch(url)
        except AssetUnavailable as exc:
            log.warning("%s", exc)
            return MISSING


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def collect_asset_urls(items: Iterable, *, include_internals: bool = True) -> list[str]:
    """Primary + internals URLs, de-duplicated, first-seen order."""
    seen: dict[str, None] = {}
    for it in items:
        if it.image_url:
            seen.setdefault(it.image_url, None)
        if include_internals:
            for u in it.additional_images:
                seen.setdefault(u, None)
    return list(seen)


def resolve_assets(urls: Iterable[str], resolver: AssetResolver) -> Mapping[str, AssetLookup]:
    resolved: dict[str, AssetLookup] = {}
    for u in urls:
        if u in resolved:
            continue
        resolved[u] = resolver.resolve(u)
    missing = sum(1 for v in resolved.values() if v is MISSING)
    if missing:
        log.info("resolved %d assets, %d missing", len(resolved), missing)
    return resolved


__all__ = [
    "MISSING",
    "ResolvedAsset",
    "AssetLookup",
    "AssetResolver",
    "HttpAssetResolver",
    "collect_asset_urls",
    "resolve_assets",
]
