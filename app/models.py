"""Pydantic models describing catalog records and their display form."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .universes import ALL_UNIVERSES, CanonicalUniverse
from .utils import ensure_unique_key, is_finite_number

logger = logging.getLogger(__name__)

ContentType = Literal["movie", "series"]
KindFilter = Literal["all", "movie", "series"]


class RawTitle(BaseModel):
    """A catalog entry as supplied, with any attribute possibly missing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str = Field(validation_alias=AliasChoices("title", "name"))
    year: int | None = None
    category: str | None = None
    type: str | None = None
    universe: str | None = None
    rating: float | None = None
    genres: tuple[str, ...] | None = None
    genre: str | None = None
    plot: str | None = Field(
        default=None,
        validation_alias=AliasChoices("plot", "overview", "description"),
    )
    cast: tuple[str, ...] | None = None
    streaming: tuple[str, ...] | None = None
    poster: str | None = None
    id: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: object) -> object:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("year", mode="before")
    @classmethod
    def _parse_year(cls, value: object) -> int | None:
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        return None

    @field_validator("rating", mode="before")
    @classmethod
    def _parse_rating(cls, value: object) -> float | None:
        # Only genuine numbers count; "8.1" as text is treated as missing.
        if not is_finite_number(value):
            return None
        return float(value)  # type: ignore[arg-type]

    @field_validator("genres", "cast", "streaming", mode="before")
    @classmethod
    def _parse_text_list(cls, value: object) -> tuple[str, ...] | None:
        if value is None or isinstance(value, (str, bytes)):
            return None
        if not isinstance(value, Sequence):
            return None
        return tuple(str(entry) for entry in value if entry is not None)

    @field_validator(
        "category", "type", "universe", "genre", "plot", "poster", "id", mode="before"
    )
    @classmethod
    def _parse_optional_text(cls, value: object) -> str | None:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None

    @property
    def universe_tag(self) -> str:
        """Return the raw tag used for filtering and card badges."""

        return self.universe or self.category or CanonicalUniverse.OTHER.value

    @property
    def kind(self) -> str:
        """Return the movie/series kind, treating untagged titles as movies."""

        return self.category or "movie"

    @property
    def has_poster(self) -> bool:
        return bool(self.poster and self.poster.strip())

    def build_key(self, index: int) -> str:
        """Return the identity used to address this title at ``index``."""

        year = self.year if self.year is not None else ""
        return ensure_unique_key(self.id, f"{self.title}-{year}", index)


class DisplayTitle(BaseModel):
    """Fully-populated view of a title, derived on demand."""

    model_config = ConfigDict(frozen=True)

    rating: float
    genres_text: str
    plot: str
    cast_list: tuple[str, ...] = ()
    streaming_list: tuple[str, ...] = ()
    canonical_universe: CanonicalUniverse


class CatalogFilters(BaseModel):
    """Filter state owned by the presentation layer."""

    model_config = ConfigDict(frozen=True)

    universe: str = ALL_UNIVERSES
    search: str = ""
    kind: KindFilter = "all"

    @field_validator("universe", mode="before")
    @classmethod
    def _default_universe(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return ALL_UNIVERSES
        return value

    @field_validator("search", mode="before")
    @classmethod
    def _default_search(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value: object) -> object:
        if value is None or value == "":
            return "all"
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def is_active(self) -> bool:
        """Return ``True`` when any filter narrows the catalog."""

        return (
            self.universe != ALL_UNIVERSES
            or bool(self.search.strip())
            or self.kind != "all"
        )

    def select_universe(self, tag: str) -> "CatalogFilters":
        """Return the state after a universe chip is picked.

        Picking ``All`` behaves like going home: search and kind are cleared too.
        """

        if tag == ALL_UNIVERSES:
            return self.model_copy(
                update={"universe": ALL_UNIVERSES, "search": "", "kind": "all"}
            )
        return self.model_copy(update={"universe": tag})


def coerce_catalog(payload: object) -> list[RawTitle]:
    """Validate a loosely-shaped catalog, dropping what cannot be read.

    Anything that is not a sequence of records yields an empty catalog.
    """

    if isinstance(payload, (str, bytes, Mapping)) or not isinstance(payload, Iterable):
        if payload is not None:
            logger.warning(
                "Catalog payload is a %s, not a list; using an empty catalog",
                type(payload).__name__,
            )
        return []

    titles: list[RawTitle] = []
    for index, entry in enumerate(payload):
        if isinstance(entry, RawTitle):
            titles.append(entry)
            continue
        if not isinstance(entry, dict):
            logger.warning("Skipping catalog entry %d: not an object", index)
            continue
        try:
            titles.append(RawTitle.model_validate(entry))
        except ValidationError as exc:
            logger.warning("Skipping catalog entry %d: %s", index, exc.errors())
    return titles
