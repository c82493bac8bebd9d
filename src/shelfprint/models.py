from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

"""
Data models for the ShelfPrint catalogue store.
They are for the tables in the database.
They include:

- SavedCatalogue

Only render *inputs* are stored (items, layout choice, branding), so a
catalogue can be re-rendered later. Generated documents are never stored.

author: Cole McGregor
date: 2026-03-09
version: 0.1.0
"""


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class Base(DeclarativeBase):
    pass


# ---------------------------------------------------------------------------
# SavedCatalogue
# ---------------------------------------------------------------------------

MIXED = "mixed"


class SavedCatalogue(Base):
    """
    A named item list plus the layout it should be rendered with.

    layout is a shape id ("4-up") for fixed mode, or "mixed" in which case
    layout_assignments_json holds one shape id per item.
    """
    __tablename__ = "saved_catalogues"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Layout
    layout: Mapped[str] = mapped_column(String, nullable=False)
    layout_assignments_json: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Items (JSON array of item mappings)
    items_json: Mapped[str] = mapped_column(Text, nullable=False, default="[]")

    # Branding
    banner_color: Mapped[str | None] = mapped_column(String, nullable=True)
    website_name: Mapped[str | None] = mapped_column(String, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    @property
    def is_mixed(self) -> bool:
        return self.layout == MIXED

    def __repr__(self) -> str:
        return f"<SavedCatalogue(id={self.id}, name={self.name!r}, layout={self.layout!r})>"
