"""Pytest configuration and test helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure the application package is importable when running tests without an
# editable install. This mirrors the expected runtime layout where ``app`` sits
# at the project root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


from app.models import RawTitle, coerce_catalog  # noqa: E402


@pytest.fixture
def sample_catalog() -> list[RawTitle]:
    """A small catalog mixing complete, sparse and oddly tagged records."""

    return coerce_catalog(
        [
            {
                "title": "Iron Man",
                "year": 2008,
                "category": "movie",
                "universe": "Marvel",
                "rating": 7.9,
                "genres": ["Action", "Sci-Fi"],
                "poster": "https://example.com/iron-man.jpg",
            },
            {
                "title": "A New Hope",
                "year": 1977,
                "category": "movie",
                "universe": "Star Wars",
                "poster": "https://example.com/new-hope.jpg",
            },
            {"title": "Loki", "year": 2021, "category": "series", "universe": "MCU"},
            {"title": "Untagged Oddity"},
            {
                "title": "The Mandalorian",
                "year": 2019,
                "category": "series",
                "universe": "Star Wars",
                "poster": "https://example.com/mando.jpg",
            },
            {
                "title": "Logan",
                "year": 2017,
                "universe": "X-Men",
                "poster": "   ",
            },
            {"title": "Raiders", "year": 1981, "universe": "Indiana Jones"},
            {"title": "Spider-Man", "year": 2002, "universe": "Sony", "id": "sm-2002"},
        ]
    )
