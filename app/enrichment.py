"""Resolve sparse catalog records into fully-populated display titles."""

from __future__ import annotations

from .models import DisplayTitle, RawTitle
from .universe_defaults import UniverseDefaults, defaults_for
from .universes import CanonicalUniverse, classify
from .utils import is_finite_number

FALLBACK_RATING = 7.5
FALLBACK_GENRES = "Action / Adventure"
GENRE_SEPARATOR = " / "
UNRATED = "NR"


def universe_of(raw: RawTitle) -> CanonicalUniverse:
    """Return the canonical bucket for a title's universe or category tag."""

    return classify(raw.universe or raw.category)


def resolve_rating(raw: RawTitle, defaults: UniverseDefaults) -> float | None:
    """Return the title's own rating, else its universe default, else ``None``."""

    if is_finite_number(raw.rating):
        return raw.rating
    if is_finite_number(defaults.rating):
        return defaults.rating
    return None


def _synthesize_plot(
    raw: RawTitle, universe: CanonicalUniverse, genres_text: str
) -> str:
    year = raw.year or "modern"
    kind = (raw.type or "story").lower()
    return (
        f"{raw.title} is a {year} {kind} set in the {universe.value} corner of "
        f"the multiverse, mixing {genres_text.lower()} with character-driven "
        "comic-book storytelling."
    )


def enrich(raw: RawTitle) -> DisplayTitle:
    """Build the display view of ``raw`` using its universe defaults.

    Each attribute prefers the title's own value and otherwise falls back to
    the defaults table, then to a fixed literal, so this never fails however
    sparse the record is.
    """

    universe = universe_of(raw)
    defaults = defaults_for(universe)

    rating = resolve_rating(raw, defaults)
    if rating is None:
        rating = FALLBACK_RATING

    genres_text = GENRE_SEPARATOR.join(raw.genres) if raw.genres else FALLBACK_GENRES
    plot = raw.plot or _synthesize_plot(raw, universe, genres_text)
    cast_list = raw.cast if raw.cast else defaults.cast or ()
    streaming_list = raw.streaming if raw.streaming else defaults.streaming or ()

    return DisplayTitle(
        rating=rating,
        genres_text=genres_text,
        plot=plot,
        cast_list=cast_list,
        streaming_list=streaming_list,
        canonical_universe=universe,
    )


def display_rating(raw: RawTitle) -> str:
    """Return the rating badge text, one decimal place or ``NR``."""

    rating = resolve_rating(raw, defaults_for(universe_of(raw)))
    if rating is None:
        return UNRATED
    return f"{rating:.1f}"
