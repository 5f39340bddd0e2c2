"""Canonical universe buckets and the tag classifier."""

from __future__ import annotations

from enum import Enum


class CanonicalUniverse(str, Enum):
    """Franchise buckets used for default resolution and filtering."""

    MARVEL = "Marvel"
    SONY = "Sony"
    X_MEN = "X-Men"
    DC = "DC"
    STAR_WARS = "Star Wars"
    INDIANA_JONES = "Indiana Jones"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


# Shared by the classifier and the "Other" catalog filter.
NAMED_UNIVERSES: tuple[str, ...] = tuple(
    universe.value
    for universe in CanonicalUniverse
    if universe is not CanonicalUniverse.OTHER
)

UNIVERSE_ALIASES: dict[str, CanonicalUniverse] = {
    "MCU": CanonicalUniverse.MARVEL,
}


def is_named_universe(tag: str | None) -> bool:
    """Return ``True`` when ``tag`` is exactly one of the named universes."""

    return tag in NAMED_UNIVERSES


def classify(tag: str | None) -> CanonicalUniverse:
    """Map a raw universe/category tag onto its canonical bucket.

    Matching is an exact, case-sensitive lookup. ``"MCU"`` is accepted as a
    historical alias for Marvel; anything unrecognised lands in ``Other``.
    """

    if not tag:
        return CanonicalUniverse.OTHER
    alias = UNIVERSE_ALIASES.get(tag)
    if alias is not None:
        return alias
    if is_named_universe(tag):
        return CanonicalUniverse(tag)
    return CanonicalUniverse.OTHER


ALL_UNIVERSES = "All"

# Filter chips in display order.
UNIVERSE_FILTERS: tuple[str, ...] = (
    ALL_UNIVERSES,
    *NAMED_UNIVERSES,
    CanonicalUniverse.OTHER.value,
)
