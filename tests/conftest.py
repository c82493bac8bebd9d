# tests/conftest.py
from __future__ import annotations

from datetime import date

import pytest

from shelfprint.config import RenderConfig
from shelfprint.dto import Item


TODAY = date(2025, 6, 15)


def _row(i: int, **overrides) -> dict:
    row = {
        "title": f"Book {i}",
        "handle": f"book-{i}",
        "subtitle": f"Subtitle {i}",
        "author": f"Author {i}",
        "description": f"<p>Description of book {i}.</p>",
        "price": "29.99",
        "imageUrl": f"https://cdn.example/b{i}.jpg",
        "binding": "Paperback",
        "pages": "320",
        "dimensions": "234 x 153 mm",
        "releaseDate": "05/2025",
        "imprint": "Woodslane Press",
        "sku": "9781234567897",
    }
    row.update(overrides)
    return {k: v for k, v in row.items() if v is not None}


@pytest.fixture
def make_row():
    return _row


@pytest.fixture
def make_items():
    def _make(n: int, **overrides) -> list[Item]:
        return [Item.from_mapping(_row(i, **overrides)) for i in range(n)]
    return _make


@pytest.fixture
def config() -> RenderConfig:
    return RenderConfig(
        banner_color="#F7981D",
        website_name="www.woodslane.com.au",
        today=TODAY,
    )
