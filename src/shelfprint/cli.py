# src/shelfprint/cli.py
from __future__ import annotations

"""
ShelfPrint CLI

Commands:
  layouts   List layout shapes and their capacities.
  render    Render an items JSON file to HTML, DOCX or text.
  save      Save an items JSON file + layout as a named catalogue.
  list      List saved catalogues.
  export    Render a saved catalogue.
  rename    Rename a saved catalogue.
  delete    Delete a saved catalogue.

author: Cole McGregor
date: 2026-03-10
version: 0.1.0
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

# Ensure DB engine/session are initialized
from . import db

from . import layouts, renderers
from .assets import HttpAssetResolver
from .config import RenderConfig
from .errors import RenderResult, ShelfPrintError
from .logging import setup
from .pagination import LayoutAssignment
from .pipeline import render_catalogue
from .repos import CatalogueRepository


# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------

def _load_items_file(path: str) -> tuple[list[dict], dict]:
    """
    Accept either a JSON list of items or an object
    {"items": [...], <render request keys>...}.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, list):
        return data, {}
    if isinstance(data, dict) and isinstance(data.get("items"), list):
        rest = {k: v for k, v in data.items() if k != "items"}
        return data["items"], rest
    raise ShelfPrintError(f"{path}: expected a JSON list of items or an object with 'items'")


def _assignment_from_args(args, request: dict) -> Any:
    if args.assignments:
        return LayoutAssignment.mixed([s for s in args.assignments.split(",") if s.strip()])
    if args.layout:
        return LayoutAssignment.fixed(args.layout)
    # fall back to what the request file carries
    if request.get("layoutAssignments"):
        return LayoutAssignment.mixed(request["layoutAssignments"])
    if request.get("layoutType") or request.get("layout"):
        return LayoutAssignment.fixed(request.get("layoutType") or request.get("layout"))
    raise ShelfPrintError("Pass --layout SHAPE or --assignments S1,S2,...")


def _config_from_args(args, request: dict, **overrides: Any) -> RenderConfig:
    payload = dict(request)
    if getattr(args, "banner_color", None):
        payload["bannerColor"] = args.banner_color
    if getattr(args, "website_name", None):
        payload["websiteName"] = args.website_name
    if getattr(args, "hyperlink", None):
        payload["hyperlinkToggle"] = args.hyperlink
    if getattr(args, "barcode_type", None):
        payload["barcodeType"] = args.barcode_type
    utm = {
        k: getattr(args, f"utm_{k}", None)
        for k in ("source", "medium", "campaign", "content", "term")
    }
    if any(utm.values()):
        payload["utmParams"] = utm
    for k, v in overrides.items():
        if v:
            payload[k] = v
    return RenderConfig.from_mapping(payload)


def _emit(result: RenderResult, out: Optional[str], fmt: str) -> int:
    if not result.success:
        print(f"{result.error}: {result.message}", file=sys.stderr)
        return 1
    for w in result.warnings:
        print(f"Note: {w}", file=sys.stderr)

    output = result.output
    if out:
        out_path = Path(out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(output, bytes):
            out_path.write_bytes(output)
        else:
            out_path.write_text(output, encoding="utf-8")
        print(f"Wrote {len(result.pages)} page(s) of {fmt.upper()} to {out_path}")
    elif isinstance(output, bytes):
        print("Binary output needs --out PATH.", file=sys.stderr)
        return 1
    else:
        sys.stdout.write(output)
    return 0


def _print_catalogue_rows(cats) -> None:
    if not cats:
        print("No saved catalogues.")
        return
    for c in cats:
        count = len(json.loads(c.items_json or "[]"))
        print(f"[{c.id}] {c.name}  |  layout={c.layout}  |  items={count}")


# ------------------------------------------------------------------------------
# Commands
# ------------------------------------------------------------------------------

def cmd_layouts(_args) -> int:
    """List registered layout shapes."""
    reg = layouts.registry()
    for shape in reg.shapes():
        handler = reg.get(shape)
        print(f"{shape.value:<13} {handler.capacity():>2} per page  ({handler.form})")
    return 0


def cmd_render(args) -> int:
    """Render an items JSON file."""
    try:
        rows, request = _load_items_file(args.path)
        assignment = _assignment_from_args(args, request)
        config = _config_from_args(args, request)
    except (OSError, json.JSONDecodeError, ShelfPrintError) as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    result = render_catalogue(
        rows,
        assignment,
        config,
        backend=args.format,
        resolver=HttpAssetResolver() if args.fetch_images else None,
        title=args.title or "Product Catalogue",
    )
    return _emit(result, args.out, args.format)


def cmd_save(args) -> int:
    """Save an items file as a named catalogue."""
    db.init_db()
    try:
        rows, request = _load_items_file(args.path)
        assignment = _assignment_from_args(args, request)
        cat = CatalogueRepository().save(
            args.name,
            rows,
            assignment,
            description=args.description,
            banner_color=args.banner_color or request.get("bannerColor"),
            website_name=args.website_name or request.get("websiteName"),
        )
    except (OSError, json.JSONDecodeError, ShelfPrintError) as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    print(f"Saved catalogue [{cat.id}] {cat.name} ({cat.layout}).")
    return 0


def cmd_list(_args) -> int:
    db.init_db()
    _print_catalogue_rows(CatalogueRepository().list())
    return 0


def cmd_export(args) -> int:
    """Render a saved catalogue with its stored branding."""
    db.init_db()
    repo = CatalogueRepository()
    cat = repo.get(int(args.id))
    if cat is None:
        print(f"Catalogue {args.id} not found.", file=sys.stderr)
        return 1

    try:
        items, assignment = repo.load(cat.id)
        config = _config_from_args(
            args, {},
            bannerColor=args.banner_color or cat.banner_color,
            websiteName=args.website_name or cat.website_name,
        )
    except ShelfPrintError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    result = render_catalogue(
        items,
        assignment,
        config,
        backend=args.format,
        resolver=HttpAssetResolver() if args.fetch_images else None,
        title=args.title or cat.name,
    )
    return _emit(result, args.out, args.format)


def cmd_rename(args) -> int:
    db.init_db()
    try:
        cat = CatalogueRepository().rename(int(args.id), args.name)
    except ShelfPrintError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    print(f"Renamed catalogue [{cat.id}] to {cat.name}.")
    return 0


def cmd_delete(args) -> int:
    db.init_db()
    if not CatalogueRepository().delete(int(args.id)):
        print(f"Catalogue {args.id} not found.", file=sys.stderr)
        return 1
    print(f"Deleted catalogue {args.id}.")
    return 0


# ------------------------------------------------------------------------------
# argparse wiring
# ------------------------------------------------------------------------------

def _add_layout_args(sp: argparse.ArgumentParser) -> None:
    g = sp.add_mutually_exclusive_group()
    g.add_argument("--layout", help='One shape for every item, e.g. "4-up" or "list".')
    g.add_argument("--assignments",
                   help='Comma-separated shape per item, e.g. "1-up,2-up,2-up".')


def _add_render_args(sp: argparse.ArgumentParser) -> None:
    sp.add_argument("--format", default="html", choices=renderers.available(),
                    help="Output format.")
    sp.add_argument("--out", help="Output file (text/html print to stdout if omitted).")
    sp.add_argument("--title", default=None, help="Document title.")
    sp.add_argument("--hyperlink", default=None,
                    help="Storefront for product links (woodslane, woodslanehealth, ...).")
    sp.add_argument("--barcode-type", dest="barcode_type", default=None,
                    help='"EAN-13", "QR Code" or "None".')
    for k in ("source", "medium", "campaign", "content", "term"):
        sp.add_argument(f"--utm-{k}", dest=f"utm_{k}", default=None)
    sp.add_argument("--fetch-images", action="store_true",
                    help="Download images for DOCX output (placeholders otherwise).")


def _add_branding_args(sp: argparse.ArgumentParser) -> None:
    sp.add_argument("--banner-color", dest="banner_color", default=None,
                    help="Banner colour, e.g. #F7981D.")
    sp.add_argument("--website-name", dest="website_name", default=None,
                    help="Banner text, e.g. www.woodslane.com.au.")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="shelfprint",
        description="ShelfPrint CLI: paginate product items into print/DOCX catalogues."
    )
    p.add_argument("--log-level", dest="log_level", default="WARNING",
                   help="DEBUG, INFO, WARNING, ERROR.")
    sub = p.add_subparsers(dest="command", required=True)

    # layouts
    sub.add_parser("layouts", help="List layout shapes.").set_defaults(func=cmd_layouts)

    # render
    sp = sub.add_parser("render", help="Render an items JSON file.")
    sp.add_argument("path", help="Items JSON file.")
    _add_layout_args(sp)
    _add_render_args(sp)
    _add_branding_args(sp)
    sp.set_defaults(func=cmd_render)

    # save
    sp = sub.add_parser("save", help="Save an items JSON file as a named catalogue.")
    sp.add_argument("name", help="Catalogue name (re-saving a name overwrites it).")
    sp.add_argument("path", help="Items JSON file.")
    _add_layout_args(sp)
    sp.add_argument("--description", default=None)
    _add_branding_args(sp)
    sp.set_defaults(func=cmd_save)

    # list
    sub.add_parser("list", help="List saved catalogues.").set_defaults(func=cmd_list)

    # export
    sp = sub.add_parser("export", help="Render a saved catalogue.")
    sp.add_argument("id", help="Catalogue id.")
    _add_render_args(sp)
    _add_branding_args(sp)
    sp.set_defaults(func=cmd_export)

    # rename
    sp = sub.add_parser("rename", help="Rename a saved catalogue.")
    sp.add_argument("id", help="Catalogue id.")
    sp.add_argument("name", help="New name.")
    sp.set_defaults(func=cmd_rename)

    # delete
    sp = sub.add_parser("delete", help="Delete a saved catalogue.")
    sp.add_argument("id", help="Catalogue id.")
    sp.set_defaults(func=cmd_delete)

    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
