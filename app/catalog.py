"""Loading the read-only catalog supplied at start-up."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from .models import RawTitle, coerce_catalog

logger = logging.getLogger(__name__)


def _extract_entries(payload: object) -> object:
    if isinstance(payload, dict):
        return payload.get("items") or payload.get("titles") or []
    return payload


def load_catalog(path: str | Path) -> tuple[RawTitle, ...]:
    """Read a JSON catalog file, returning an empty catalog when unusable."""

    catalog_path = Path(path)
    try:
        contents = catalog_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Catalog file %s not found; starting empty", catalog_path)
        return ()
    except OSError as exc:
        logger.warning("Could not read catalog file %s: %s", catalog_path, exc)
        return ()

    try:
        payload = json.loads(contents)
    except json.JSONDecodeError as exc:
        logger.warning("Catalog file %s is not valid JSON: %s", catalog_path, exc)
        return ()

    titles = tuple(coerce_catalog(_extract_entries(payload)))
    logger.info("Loaded %d titles from %s", len(titles), catalog_path)
    return titles


def find_title(
    catalog: Sequence[RawTitle], key: str
) -> tuple[int, RawTitle] | None:
    """Return the position and record addressed by ``key``, if any."""

    for index, raw in enumerate(catalog):
        if raw.build_key(index) == key:
            return index, raw
    return None
