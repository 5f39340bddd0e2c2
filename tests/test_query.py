import pytest

from app.models import CatalogFilters, RawTitle, coerce_catalog
from app.query import filter_by_kind, filter_catalog, query, query_with, split_sections


def _titles(items):
    return [item.title for item in items]


def test_query_end_to_end_ordering():
    catalog = coerce_catalog(
        [
            {"title": "A", "year": 2008, "universe": "Marvel"},
            {"title": "B", "year": 1977, "universe": "Star Wars"},
            {"title": "C", "universe": "Bogus"},
        ]
    )

    assert _titles(query(catalog, "All", "", "all")) == ["C", "B", "A"]
    assert _titles(query(catalog, "Other", "", "all")) == ["C"]


def test_other_filter_excludes_named_universes(sample_catalog):
    result = query(sample_catalog, "Other", "", "all")

    # "MCU" is not one of the named tags, so it passes the Other chip.
    assert _titles(result) == ["Untagged Oddity", "Loki"]


def test_universe_filter_matches_raw_tag_exactly(sample_catalog):
    assert _titles(query(sample_catalog, "Star Wars")) == ["A New Hope", "The Mandalorian"]
    assert _titles(query(sample_catalog, "Marvel")) == ["Iron Man"]
    assert _titles(query(sample_catalog, "MCU")) == ["Loki"]
    assert query(sample_catalog, "star wars") == []


def test_universe_filter_falls_back_to_category():
    catalog = [RawTitle(title="Tagged", category="DC")]
    assert _titles(query(catalog, "DC")) == ["Tagged"]


def test_search_is_case_insensitive_over_title_universe_category(sample_catalog):
    assert _titles(query(sample_catalog, search_text="  IRON ")) == ["Iron Man"]
    assert _titles(query(sample_catalog, search_text="wars")) == [
        "A New Hope",
        "The Mandalorian",
    ]
    assert _titles(query(sample_catalog, search_text="SERIES")) == [
        "The Mandalorian",
        "Loki",
    ]


def test_blank_search_passes_everything(sample_catalog):
    assert len(query(sample_catalog, search_text="   ")) == len(sample_catalog)


def test_search_tolerates_missing_fields():
    catalog = [RawTitle(title="Bare")]
    assert query(catalog, search_text="movie") == []
    assert _titles(query(catalog, search_text="bar")) == ["Bare"]


def test_kind_filter_defaults_untagged_to_movie(sample_catalog):
    movies = query(sample_catalog, kind_filter="movie")
    series = query(sample_catalog, kind_filter="series")

    assert "Untagged Oddity" in _titles(movies)
    assert _titles(series) == ["The Mandalorian", "Loki"]
    assert len(movies) + len(series) == len(sample_catalog)


def test_sort_is_stable_for_equal_years():
    catalog = [
        RawTitle(title="second", year=2000),
        RawTitle(title="no-year-1"),
        RawTitle(title="first", year=1990),
        RawTitle(title="also-2000", year=2000),
        RawTitle(title="no-year-2"),
    ]

    assert _titles(query(catalog)) == [
        "no-year-1",
        "no-year-2",
        "first",
        "second",
        "also-2000",
    ]


def test_query_is_idempotent_and_leaves_input_alone(sample_catalog):
    snapshot = list(sample_catalog)
    first = query(sample_catalog, "All", "a", "all")
    second = query(sample_catalog, "All", "a", "all")

    assert first == second
    assert [a is b for a, b in zip(first, second)] == [True] * len(first)
    assert sample_catalog == snapshot


def test_query_handles_missing_catalog():
    assert query(None) == []
    assert filter_catalog([], "Marvel", "x") == []


@pytest.mark.parametrize("catalog", [5, {"title": "x"}, "catalog", b"raw"])
def test_query_treats_malformed_catalog_as_empty(catalog):
    assert query(catalog, "All", "", "all") == []
    assert split_sections(filter_catalog(catalog)).is_empty()


def test_query_accepts_plain_record_dicts():
    catalog = [{"title": "B", "year": 2}, {"title": "A", "year": 1}, "junk", {"year": 3}]

    result = query(catalog, "All", "", "all")

    assert _titles(result) == ["A", "B"]
    assert all(isinstance(raw, RawTitle) for raw in result)


def test_query_keeps_duplicate_records_in_catalog_order():
    raw = RawTitle(title="Twice", year=2000)
    catalog = [raw, RawTitle(title="Early", year=1990), raw]

    result = query(catalog)

    assert _titles(result) == ["Early", "Twice", "Twice"]
    assert result[1] is raw and result[2] is raw


def test_empty_result_is_distinct_from_inactive_filters(sample_catalog):
    filters = CatalogFilters(universe="DC")
    assert query_with(sample_catalog, filters) == []
    assert filters.is_active
    assert not CatalogFilters().is_active


def test_split_sections(sample_catalog):
    sections = split_sections(filter_catalog(sample_catalog))

    assert _titles(sections.series) == ["The Mandalorian", "Loki"]
    assert _titles(sections.movies)[:2] == ["Untagged Oddity", "A New Hope"]
    assert not sections.is_empty()
    assert split_sections([]).is_empty()


def test_filter_by_kind_all_copies():
    titles = [RawTitle(title="x")]
    result = filter_by_kind(titles, "all")
    assert result == titles
    assert result is not titles
