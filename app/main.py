"""Entry point for the FastAPI catalog service."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Sequence
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from .catalog import find_title, load_catalog
from .config import settings
from .enrichment import FALLBACK_GENRES, display_rating, enrich
from .models import CatalogFilters, RawTitle, coerce_catalog
from .query import filter_catalog, query_with, split_sections
from .sampling import sample
from .universes import UNIVERSE_FILTERS

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app: FastAPI


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    fastapi_app.state.catalog = load_catalog(settings.catalog_path)
    logger.info(
        "%s ready with %d titles", settings.app_name, len(fastapi_app.state.catalog)
    )
    yield


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title=settings.app_name,
        description="Franchise catalog with universe-aware defaults",
        version="1.0.0",
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_routes(fastapi_app)
    return fastapi_app


def get_catalog(app: FastAPI) -> tuple[RawTitle, ...]:
    catalog = getattr(app.state, "catalog", None)
    if catalog is None:
        raise RuntimeError("Catalog not loaded")
    return tuple(coerce_catalog(catalog))


def _position_index(catalog: Sequence[RawTitle]) -> dict[int, list[int]]:
    # Keys depend on catalog position, not on position within a result.
    positions: dict[int, list[int]] = {}
    for index, raw in enumerate(catalog):
        positions.setdefault(id(raw), []).append(index)
    return positions


def _card(raw: RawTitle, key: str) -> dict[str, Any]:
    """Return the compact payload used for posters and row cards."""

    return {
        "key": key,
        "title": raw.title,
        "year": raw.year,
        "category": raw.category,
        "universe_tag": raw.universe_tag,
        "rating": display_rating(raw),
        "genre": raw.genre or FALLBACK_GENRES,
        "poster": raw.poster,
    }


def _cards(
    titles: Sequence[RawTitle], positions: dict[int, list[int]]
) -> list[dict[str, Any]]:
    # A record listed more than once gets one slot per occurrence, in order.
    slots = {key: iter(indices) for key, indices in positions.items()}
    return [_card(raw, raw.build_key(next(slots[id(raw)]))) for raw in titles]


def _parse_filters(**params: Any) -> CatalogFilters:
    try:
        return CatalogFilters.model_validate(params)
    except ValidationError as exc:
        raise HTTPException(
            status_code=400, detail=exc.errors(include_url=False)
        ) from exc


def register_routes(fastapi_app: FastAPI) -> None:
    @fastapi_app.get("/healthz")
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @fastapi_app.get("/universes")
    async def universes() -> dict[str, list[str]]:
        return {"universes": list(UNIVERSE_FILTERS)}

    @fastapi_app.get("/titles")
    async def list_titles(
        universe: str = "All", search: str = "", kind: str = "all"
    ) -> dict[str, Any]:
        filters = _parse_filters(universe=universe, search=search, kind=kind)
        catalog = get_catalog(fastapi_app)
        titles = query_with(catalog, filters)
        return {
            "filters": filters.model_dump(),
            "filters_active": filters.is_active,
            "count": len(titles),
            "items": _cards(titles, _position_index(catalog)),
        }

    @fastapi_app.get("/sections")
    async def list_sections(universe: str = "All", search: str = "") -> dict[str, Any]:
        filters = _parse_filters(universe=universe, search=search)
        catalog = get_catalog(fastapi_app)
        sections = split_sections(
            filter_catalog(catalog, filters.universe, filters.search)
        )
        positions = _position_index(catalog)
        return {
            "movies": _cards(sections.movies, positions),
            "series": _cards(sections.series, positions),
        }

    @fastapi_app.get("/titles/{key}")
    async def title_detail(key: str) -> dict[str, Any]:
        catalog = get_catalog(fastapi_app)
        match = find_title(catalog, key)
        if match is None:
            raise HTTPException(status_code=404, detail=f"Unknown title: {key}")
        _, raw = match
        display = enrich(raw)
        return {
            "key": key,
            "kicker": (
                f"{(raw.category or 'Title').upper()} · "
                f"{display.canonical_universe.value.upper()}"
            ),
            "title": raw.model_dump(exclude_none=True),
            "display": display.model_dump(mode="json"),
        }

    @fastapi_app.get("/wallpaper")
    async def wallpaper(
        seed: int | None = None,
        tiles: int | None = Query(default=None, ge=1, le=200),
    ) -> dict[str, Any]:
        catalog = get_catalog(fastapi_app)
        if seed is None:
            seed = secrets.randbits(32)
        picked = sample(catalog, tiles or settings.wallpaper_tiles, seed=seed)
        return {
            "seed": seed,
            "items": _cards(picked, _position_index(catalog)),
        }


app = create_app()
