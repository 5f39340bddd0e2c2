"""Public entry points for the multiverse catalog core."""

from __future__ import annotations

from app.enrichment import display_rating, enrich
from app.models import CatalogFilters, DisplayTitle, RawTitle, coerce_catalog
from app.query import query, split_sections
from app.sampling import sample
from app.universe_defaults import UniverseDefaults, defaults_for
from app.universes import CanonicalUniverse, classify

__all__ = [
    "CanonicalUniverse",
    "CatalogFilters",
    "DisplayTitle",
    "RawTitle",
    "UniverseDefaults",
    "classify",
    "coerce_catalog",
    "defaults_for",
    "display_rating",
    "enrich",
    "query",
    "sample",
    "split_sections",
]
