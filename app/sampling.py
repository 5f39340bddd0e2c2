"""Random poster selection for the decorative wallpaper grid."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .models import RawTitle, coerce_catalog

DEFAULT_MAX_TILES = 40


def sample(
    catalog: Iterable[RawTitle] | None,
    max_tiles: int = DEFAULT_MAX_TILES,
    *,
    seed: int | str | None = None,
    rng: random.Random | None = None,
) -> list[RawTitle]:
    """Return up to ``max_tiles`` distinct poster-bearing titles in random order.

    The result is a prefix of a shuffled copy, so an entry can never appear
    twice. Pass the same ``seed`` to reproduce a draw, or an explicit ``rng``.
    """

    if max_tiles <= 0:
        return []
    candidates = [raw for raw in coerce_catalog(catalog) if raw.has_poster]
    generator = rng if rng is not None else random.Random(seed)
    generator.shuffle(candidates)
    return candidates[:max_tiles]
