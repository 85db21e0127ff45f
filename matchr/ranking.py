from __future__ import annotations

import logging
from collections.abc import Iterable

from matchr.models import ScoredItem
from matchr.search import MAX_SCORE, score

logger = logging.getLogger(__name__)


def match_items(query: str, items: Iterable[str]) -> list[ScoredItem]:
    """Pair every item with its score, best first.

    No item is dropped. Python's sort is stable, so items with equal scores
    keep their input order.
    """
    scored = [(item, score(query, item)) for item in items]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    logger.debug("Ranked %d candidates for query %r", len(scored), query)
    return scored


def filter_items(
    query: str,
    items: Iterable[str],
    *,
    min_score: int = 1,
    limit: int | None = None,
) -> list[ScoredItem]:
    if not 0 <= min_score <= MAX_SCORE:
        raise ValueError(f"min_score must be between 0 and {MAX_SCORE}, got {min_score}")
    if limit is not None and limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    ranked = match_items(query, items)
    results = [pair for pair in ranked if pair[1] >= min_score]
    if limit is not None:
        results = results[:limit]
    logger.debug(
        "Kept %d of %d candidates (min_score=%d, limit=%s)",
        len(results),
        len(ranked),
        min_score,
        limit,
    )
    return results
