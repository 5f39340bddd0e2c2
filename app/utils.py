"""Utility helpers for the catalog service."""

from __future__ import annotations

import math
import re
import unicodedata
from typing import Any


def slugify(value: str) -> str:
    """Return a URL-friendly slug."""

    value = unicodedata.normalize("NFKD", value)
    value = value.encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^a-zA-Z0-9]+", "-", value)
    value = value.strip("-")
    value = re.sub(r"-+", "-", value)
    return value.lower() or "title"


def ensure_unique_key(base_id: str | None, fallback: str, index: int) -> str:
    """Generate a deterministic identifier for a catalog position."""

    if base_id:
        return base_id
    slug = slugify(fallback)
    return f"{slug}-{index}"


def is_finite_number(value: Any) -> bool:
    """Return ``True`` for real ints/floats that are neither NaN nor infinite."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
