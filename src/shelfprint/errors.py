# shelfprint/errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

"""
Error taxonomy for ShelfPrint.

- ValidationError: fatal, raised before any rendering starts.
- UnknownLayoutError: a ValidationError for unregistered/unparseable shapes.
- AssetUnavailable: recovered locally (placeholder image).
- FormatAmbiguous: recovered locally (raw date passed through, no badge).

RenderResult is the single structured outcome handed back to callers.
"""


class ShelfPrintError(Exception):
    """Base class for every error raised by ShelfPrint."""


class ValidationError(ShelfPrintError):
    """Input rejected before rendering (empty list, bad assignment, ...)."""


class UnknownLayoutError(ValidationError):
    """A layout shape that is not registered (or not a shape at all)."""

    def __init__(self, shape: Any, available: Optional[list[str]] = None) -> None:
        self.shape = shape
        self.available = list(available or [])
        msg = f"Unknown layout: {shape!r}."
        if self.available:
            msg += f" Available: {', '.join(self.available)}"
        super().__init__(msg)


class AssetUnavailable(ShelfPrintError):
    """An image/logo could not be fetched or decoded."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Asset unavailable: {url}" + (f" ({reason})" if reason else ""))


class FormatAmbiguous(ShelfPrintError):
    """A free-form value (release date) could not be parsed."""


class CatalogueNotFound(ShelfPrintError):
    """No saved catalogue with the requested id."""


@dataclass(frozen=True)
class RenderResult:
    """
    Outcome of one render request. A failure never carries output.
    warnings are non-fatal notes (text cut to fit a layout).
    """
    success: bool
    error: Optional[str] = None
    message: Optional[str] = None
    output: Any = None
    pages: tuple = field(default_factory=tuple)
    warnings: tuple[str, ...] = ()

    @classmethod
    def ok(cls, output: Any, pages: tuple = (), warnings: tuple = ()) -> "RenderResult":
        return cls(success=True, output=output, pages=tuple(pages), warnings=tuple(warnings))

    @classmethod
    def failure(cls, exc: BaseException) -> "RenderResult":
        return cls(success=False, error=type(exc).__name__, message=str(exc))

    def to_dict(self) -> dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error, "message": self.message}
        out: dict[str, Any] = {"success": True, "pages": len(self.pages)}
        if self.warnings:
            out["warnings"] = list(self.warnings)
        return out


__all__ = [
    "ShelfPrintError",
    "ValidationError",
    "UnknownLayoutError",
    "AssetUnavailable",
    "FormatAmbiguous",
    "CatalogueNotFound",
    "RenderResult",
]
