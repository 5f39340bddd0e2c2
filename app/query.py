"""Filtering and chronological ordering of the raw catalog."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .models import CatalogFilters, KindFilter, RawTitle, coerce_catalog
from .universes import ALL_UNIVERSES, CanonicalUniverse, is_named_universe


@dataclass(frozen=True)
class CatalogSections:
    """Movie and series rows shown on the home view."""

    movies: list[RawTitle] = field(default_factory=list)
    series: list[RawTitle] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.movies or self.series)


def matches_universe(raw: RawTitle, universe_filter: str) -> bool:
    """Return ``True`` when ``raw`` passes the universe chip filter."""

    if universe_filter == ALL_UNIVERSES:
        return True
    tag = raw.universe_tag
    if universe_filter == CanonicalUniverse.OTHER.value:
        return not is_named_universe(tag)
    return tag == universe_filter


def matches_search(raw: RawTitle, needle: str) -> bool:
    """Case-insensitive substring match on title, universe and category.

    ``needle`` must already be stripped and lower-cased; empty matches all.
    """

    if not needle:
        return True
    haystacks = (raw.title or "", raw.universe or "", raw.category or "")
    return any(needle in value.lower() for value in haystacks)


def _release_year(raw: RawTitle) -> int:
    return raw.year or 0


def filter_catalog(
    catalog: Iterable[RawTitle] | None,
    universe_filter: str = ALL_UNIVERSES,
    search_text: str = "",
) -> list[RawTitle]:
    """Apply the universe and search filters, then sort by release year.

    ``sorted`` is stable, so titles sharing a year keep their catalog order.
    A catalog that is not a sequence of records is treated as empty.
    """

    needle = (search_text or "").strip().lower()
    selected = [
        raw
        for raw in coerce_catalog(catalog)
        if matches_universe(raw, universe_filter) and matches_search(raw, needle)
    ]
    return sorted(selected, key=_release_year)


def filter_by_kind(titles: Iterable[RawTitle], kind: KindFilter) -> list[RawTitle]:
    """Keep only movies or series; ``all`` keeps everything."""

    if kind == "all":
        return list(titles)
    return [raw for raw in titles if raw.kind == kind]


def query(
    catalog: Iterable[RawTitle] | None,
    universe_filter: str = ALL_UNIVERSES,
    search_text: str = "",
    kind_filter: KindFilter = "all",
) -> list[RawTitle]:
    """Return the titles passing every filter, oldest first."""

    return filter_by_kind(
        filter_catalog(catalog, universe_filter, search_text), kind_filter
    )


def query_with(
    catalog: Iterable[RawTitle] | None, filters: CatalogFilters
) -> list[RawTitle]:
    return query(catalog, filters.universe, filters.search, filters.kind)


def split_sections(titles: Iterable[RawTitle]) -> CatalogSections:
    """Split an already filtered list into the home view's two rows."""

    ordered = list(titles)
    return CatalogSections(
        movies=filter_by_kind(ordered, "movie"),
        series=filter_by_kind(ordered, "series"),
    )
