"""Per-universe fallback values for sparse catalog records."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .universes import CanonicalUniverse


@dataclass(frozen=True)
class UniverseDefaults:
    """Values shown when a title omits its own rating, cast or platforms."""

    rating: float
    cast: tuple[str, ...]
    streaming: tuple[str, ...]


UNIVERSE_DEFAULTS: Mapping[CanonicalUniverse, UniverseDefaults] = MappingProxyType(
    {
        CanonicalUniverse.MARVEL: UniverseDefaults(
            rating=8.0,
            cast=(
                "Robert Downey Jr.",
                "Chris Evans",
                "Scarlett Johansson",
                "Chris Hemsworth",
            ),
            streaming=("Disney+", "Prime Video (rental)"),
        ),
        CanonicalUniverse.X_MEN: UniverseDefaults(
            rating=7.7,
            cast=("Hugh Jackman", "Patrick Stewart", "Ian McKellen"),
            streaming=("Disney+", "Prime Video (rental)"),
        ),
        CanonicalUniverse.SONY: UniverseDefaults(
            rating=7.5,
            cast=("Tobey Maguire", "Andrew Garfield", "Tom Hardy"),
            streaming=("Netflix (varies)", "Prime Video (rental)"),
        ),
        CanonicalUniverse.DC: UniverseDefaults(
            rating=7.6,
            cast=("Henry Cavill", "Gal Gadot", "Ben Affleck", "Jason Momoa"),
            streaming=("Max", "Prime Video (rental)"),
        ),
        CanonicalUniverse.STAR_WARS: UniverseDefaults(
            rating=8.3,
            cast=("Mark Hamill", "Harrison Ford", "Carrie Fisher"),
            streaming=("Disney+",),
        ),
        CanonicalUniverse.INDIANA_JONES: UniverseDefaults(
            rating=8.1,
            cast=("Harrison Ford", "Karen Allen"),
            streaming=("Disney+", "Paramount+ (varies)"),
        ),
        CanonicalUniverse.OTHER: UniverseDefaults(
            rating=7.5,
            cast=("Main franchise cast",),
            streaming=("Disney+", "Max", "Netflix", "Prime Video"),
        ),
    }
)


def defaults_for(universe: CanonicalUniverse) -> UniverseDefaults:
    """Return the defaults for ``universe``; every bucket has an entry."""

    return UNIVERSE_DEFAULTS[universe]
