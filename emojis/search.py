# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

import heapq
from typing import Iterator, Optional

from emojis import fuzzy
from emojis.catalog import Catalog, get_catalog
from emojis.records import Emoji


def best_score(query: str, emoji: Emoji) -> Optional[fuzzy.Score]:
    """Best score among the name and the shortcodes of an emoji"""
    best = None
    for candidate in (emoji.name, *emoji.shortcodes()):
        result = fuzzy.score(query, candidate)
        if result is not None and (best is None or result > best):
            best = result
    return best


def search_scored(
    query: str, catalog: Optional[Catalog] = None
) -> Iterator[tuple[Emoji, fuzzy.Score]]:
    """Yield `(emoji, score)` pairs, best score first, ties in recommended order.

    Scores are computed when the first result is requested and the ranking is
    produced one item at a time, so taking only a few results is cheap.
    """
    if catalog is None:
        catalog = get_catalog()

    heap = []
    for emoji in catalog.all():
        if (result := best_score(query, emoji)) is not None:
            # orders are unique so the emoji itself is never compared
            key = (-result.contiguity, -result.bonus, -result.precision)
            heap.append((key, emoji.order, emoji, result))
    heapq.heapify(heap)

    while heap:
        _key, _order, emoji, result = heapq.heappop(heap)
        yield emoji, result


def search(query: str, catalog: Optional[Catalog] = None) -> Iterator[Emoji]:
    """Fuzzy search emoji names and shortcodes.

    Each call returns a new, independent iterator. An empty query yields the
    whole catalog in recommended order.
    """
    return (emoji for emoji, _score in search_scored(query, catalog))
