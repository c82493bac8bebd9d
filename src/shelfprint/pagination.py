"""
Pagination engine.

Packs an ordered item list into pages, one pass, no look-ahead:

    Idle --item--> Accumulating(shape, count) --full / shape change--> emit Page

Fixed mode is the same machine with a constant shape. A shape change always
closes the open page, even when it still has room (no cross-shape backfill).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .dto import Item
from .errors import ValidationError
from .layouts.base import LayoutShape
from .logging import get_logger

log = get_logger("pagination")

ShapeLike = Union[LayoutShape, str, int]


# ---------------------------------------------------------------------------
# Layout assignment
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LayoutAssignment:
    """
    Either one shape for the whole run (`uniform`) or one shape per item
    (`per_item`, "mixed" mode).
    """
    uniform: Optional[LayoutShape] = None
    per_item: tuple[LayoutShape, ...] = ()

    @classmethod
    def fixed(cls, shape: ShapeLike) -> "LayoutAssignment":
        return cls(uniform=LayoutShape.parse(shape))

    @classmethod
    def mixed(cls, shapes: Sequence[ShapeLike]) -> "LayoutAssignment":
        if not shapes:
            raise ValidationError("No layout assignments provided")
        return cls(per_item=tuple(LayoutShape.parse(s) for s in shapes))

    @property
    def is_mixed(self) -> bool:
        return self.uniform is None

    def shape_at(self, index: int) -> LayoutShape:
        if self.uniform is not None:
            return self.uniform
        return self.per_item[index]

    def shapes(self) -> set[LayoutShape]:
        if self.uniform is not None:
            return {self.uniform}
        return set(self.per_item)

    def validate(self, item_count: int) -> None:
        if item_count <= 0:
            raise ValidationError("No items provided")
        if self.is_mixed and len(self.per_item) != item_count:
            raise ValidationError(
                f"Items and layout assignments must be same length "
                f"({item_count} items, {len(self.per_item)} assignments)"
            )

    def to_list(self) -> list[str]:
        if self.uniform is not None:
            return [self.uniform.value]
        return [s.value for s in self.per_item]


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PageEntry:
    item: Item
    slot_index: int    # position on the page
    global_index: int  # position in the input item list


@dataclass(frozen=True)
class Page:
    index: int
    shape: LayoutShape
    entries: tuple[PageEntry, ...]
    is_first: bool = False
    is_last: bool = False
    starts_new_shape: bool = False

    @property
    def items(self) -> list[Item]:
        return [e.item for e in self.entries]

    @property
    def free_slots(self) -> int:
        return self.shape.capacity - len(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class _Paginator:
    """The state machine; one instance per paginate() call."""

    def __init__(self) -> None:
        self.shape: Optional[LayoutShape] = None  # None == Idle
        self.entries: list[PageEntry] = []
        self.pages: list[Page] = []
        self._prev_shape: Optional[LayoutShape] = None

    def feed(self, item: Item, shape: LayoutShape, global_index: int) -> None:
        if self.shape is not None and (shape is not self.shape or len(self.entries) >= self.shape.capacity):
            self.close()
        if self.shape is None:
            self.shape = shape
        self.entries.append(PageEntry(item=item, slot_index=len(self.entries), global_index=global_index))

    def close(self) -> None:
        if self.shape is None:
            return
        self.pages.append(Page(
            index=len(self.pages),
            shape=self.shape,
            entries=tuple(self.entries),
            starts_new_shape=self._prev_shape is not None and self._prev_shape is not self.shape,
        ))
        self._prev_shape = self.shape
        self.shape = None
        self.entries = []

    def finish(self) -> list[Page]:
        self.close()
        last = len(self.pages) - 1
        return [
            Page(
                index=p.index,
                shape=p.shape,
                entries=p.entries,
                is_first=p.index == 0,
                is_last=p.index == last,
                starts_new_shape=p.starts_new_shape,
            )
            for p in self.pages
        ]


def paginate(
    items: Sequence[Item],
    assignment: Union[LayoutAssignment, ShapeLike, Sequence[ShapeLike]],
) -> list[Page]:
    """
    Split `items` into pages according to `assignment`.

    `assignment` may be a LayoutAssignment, a single shape (fixed mode) or a
    sequence of shapes, one per item (mixed mode).
    """
    la = as_assignment(assignment)
    la.validate(len(items))

    machine = _Paginator()
    for i, item in enumerate(items):
        machine.feed(item, la.shape_at(i), i)
    pages = machine.finish()
    log.debug("paginated %d items into %d pages", len(items), len(pages))
    return pages


def as_assignment(value: Union[LayoutAssignment, ShapeLike, Sequence[ShapeLike]]) -> LayoutAssignment:
    if isinstance(value, LayoutAssignment):
        return value
    if isinstance(value, (LayoutShape, str, int)):
        return LayoutAssignment.fixed(value)
    return LayoutAssignment.mixed(list(value))


__all__ = [
    "LayoutAssignment",
    "PageEntry",
    "Page",
    "paginate",
    "as_assignment",
]
