"""
ShelfPrint package initializer.

This sets up environment loading and exposes key classes/functions
for convenience imports.

author: Cole McGregor
date: 2026-03-02
version: 0.1.0
"""

from dotenv import load_dotenv

# Load .env file if present (SHELFPRINT_*, DATABASE_URL)
load_dotenv()

# Re-export commonly used components
from .config import HyperlinkTarget, Orientation, RenderConfig, UrlBuilder, UtmParams
from .dto import Item, to_items
from .errors import (
    AssetUnavailable,
    FormatAmbiguous,
    RenderResult,
    ShelfPrintError,
    UnknownLayoutError,
    ValidationError,
)
from .layouts import LayoutRegistry, LayoutShape, default_registry
from .pagination import LayoutAssignment, paginate
from .pipeline import render_catalogue, truncation_report
from . import layouts, renderers

__version__ = "0.1.0"

__all__ = [
    # Config
    "HyperlinkTarget",
    "Orientation",
    "RenderConfig",
    "UrlBuilder",
    "UtmParams",
    # Items
    "Item",
    "to_items",
    # Errors
    "ShelfPrintError",
    "ValidationError",
    "UnknownLayoutError",
    "AssetUnavailable",
    "FormatAmbiguous",
    "RenderResult",
    # Layouts & pagination
    "LayoutRegistry",
    "LayoutShape",
    "default_registry",
    "LayoutAssignment",
    "paginate",
    # Pipeline
    "render_catalogue",
    "truncation_report",
    # Modules
    "layouts",
    "renderers",
]
