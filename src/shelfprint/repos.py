# shelfprint/repos.py
from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .db import SessionLocal
from .dto import Item, check_unique_handles, to_items
from .errors import CatalogueNotFound, ValidationError
from .logging import get_logger
from .models import MIXED, SavedCatalogue
from .pagination import LayoutAssignment, as_assignment

log = get_logger("repos")


# --- Session scope -------------------------------------------------------------

@contextmanager
def session_scope(session_factory=SessionLocal):
    s: Session = session_factory()
    try:
        yield s
        s.commit()
    except Exception:
        s.rollback()
        raise
    finally:
        s.close()


# --- Internal helpers ----------------------------------------------------------

def _trim(s: Optional[str]) -> Optional[str]:
    if s is None:
        return None
    t = s.strip()
    return t if t else None


def _items_json(items: Sequence[Union[Item, Mapping[str, Any]]]) -> str:
    rows = [it.to_mapping() if isinstance(it, Item) else dict(it) for it in items]
    return json.dumps(rows, ensure_ascii=False)


def _layout_columns(assignment: LayoutAssignment) -> Tuple[str, Optional[str]]:
    if assignment.is_mixed:
        return MIXED, json.dumps(assignment.to_list())
    return assignment.uniform.value, None


# --- Catalogue Repository ------------------------------------------------------

class CatalogueRepository:
    """
    Data-access boundary for SavedCatalogue objects.
    - Upsert by (trimmed) name.
    - Rejects rows that would not render (missing title/handle, duplicate handles).
    - Stores items as JSON in the same shape Item.from_mapping reads.
    - Never clobbers branding with empty values on re-save.
    """

    def __init__(self, session_factory=SessionLocal):
        self._session_factory = session_factory

    # -------- WRITE --------
    def save(
        self,
        name: str,
        items: Sequence[Union[Item, Mapping[str, Any]]],
        assignment: Any,
        *,
        description: Optional[str] = None,
        banner_color: Optional[str] = None,
        website_name: Optional[str] = None,
    ) -> SavedCatalogue:
        name_t = _trim(name)
        if not name_t:
            raise ValidationError("Catalogue name is required")
        if not items:
            raise ValidationError("No items provided")

        # rows must come back through load() unchanged
        item_list = to_items([it.to_mapping() if isinstance(it, Item) else it for it in items])
        check_unique_handles(item_list)
        la = as_assignment(assignment)
        la.validate(len(item_list))
        layout, assignments_json = _layout_columns(la)
        payload = _items_json(item_list)

        with session_scope(self._session_factory) as s:
            cat = s.execute(
                select(SavedCatalogue).where(SavedCatalogue.name == name_t)
            ).scalar_one_or_none()
            if cat is None:
                cat = SavedCatalogue(name=name_t)
                s.add(cat)
                log.info("saving new catalogue %r (%d items)", name_t, len(items))
            else:
                log.info("overwriting catalogue %r (%d items)", name_t, len(items))

            cat.layout = layout
            cat.layout_assignments_json = assignments_json
            cat.items_json = payload
            for field, value in (
                ("description", description),
                ("banner_color", banner_color),
                ("website_name", website_name),
            ):
                v = _trim(value)
                if v is not None:
                    setattr(cat, field, v)
            s.flush()
            s.refresh(cat)
            return cat

    def rename(self, cat_id: int, new_name: str) -> SavedCatalogue:
        name_t = _trim(new_name)
        if not name_t:
            raise ValidationError("Catalogue name is required")
        try:
            with session_scope(self._session_factory) as s:
                cat = s.get(SavedCatalogue, cat_id)
                if cat is None:
                    raise CatalogueNotFound(f"No saved catalogue with id {cat_id}")
                cat.name = name_t
                s.flush()
                s.refresh(cat)
                return cat
        except IntegrityError as exc:
            raise ValidationError(f"A catalogue named {name_t!r} already exists") from exc

    def delete(self, cat_id: int) -> bool:
        with session_scope(self._session_factory) as s:
            cat = s.get(SavedCatalogue, cat_id)
            if cat is None:
                return False
            s.delete(cat)
            return True

    # -------- READ --------
    def get(self, cat_id: int) -> Optional[SavedCatalogue]:
        with session_scope(self._session_factory) as s:
            return s.get(SavedCatalogue, cat_id)

    def get_by_name(self, name: str) -> Optional[SavedCatalogue]:
        name_t = _trim(name)
        if not name_t:
            return None
        with session_scope(self._session_factory) as s:
            return s.execute(
                select(SavedCatalogue).where(SavedCatalogue.name == name_t)
            ).scalar_one_or_none()

    def list(self) -> List[SavedCatalogue]:
        """
        Return all saved catalogues, sorted by name then id.
        """
        with session_scope(self._session_factory) as s:
            stmt = select(SavedCatalogue).order_by(SavedCatalogue.name.asc(), SavedCatalogue.id.asc())
            return list(s.execute(stmt).scalars().all())

    def load(self, cat_id: int) -> Tuple[List[Item], LayoutAssignment]:
        """
        Rebuild (items, assignment) ready for pipeline.render_catalogue.
        """
        cat = self.get(cat_id)
        if cat is None:
            raise CatalogueNotFound(f"No saved catalogue with id {cat_id}")
        items = to_items(json.loads(cat.items_json or "[]"))
        if cat.is_mixed:
            assignment = LayoutAssignment.mixed(json.loads(cat.layout_assignments_json or "[]"))
        else:
            assignment = LayoutAssignment.fixed(cat.layout)
        return items, assignment


__all__ = [
    "session_scope",
    "CatalogueRepository",
]
