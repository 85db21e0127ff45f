from __future__ import annotations

MAX_SCORE = 100
POSITION_WEIGHT_START = 10
MIN_POSITION_WEIGHT = 1
ADJACENCY_DIVISOR = 10


def position_weight(index: int) -> int:
    return max(POSITION_WEIGHT_START - index, MIN_POSITION_WEIGHT)


def _accumulate(running: int, index: int, previous: int) -> int:
    running += position_weight(index)
    if previous != -1 and index == previous + 1:
        running += running // ADJACENCY_DIVISOR
    return running


def raw_score(query: str, candidate: str) -> int | None:
    """Greedy subsequence score before normalization.

    Returns ``None`` when ``query`` is not a subsequence of ``candidate``.
    """
    if not query:
        return 0

    running = 0
    previous = -1
    matched = 0
    for index, char in enumerate(candidate):
        if char != query[matched]:
            continue
        running = _accumulate(running, index, previous)
        previous = index
        matched += 1
        if matched == len(query):
            return running
    return None


def ceiling_score(candidate: str) -> int:
    """Raw score of ``candidate`` matched against itself."""
    running = 0
    for index in range(len(candidate)):
        running = _accumulate(running, index, index - 1)
    return running


def match_positions(query: str, candidate: str) -> tuple[int, ...] | None:
    if not query:
        return ()

    positions: list[int] = []
    for index, char in enumerate(candidate):
        if char == query[len(positions)]:
            positions.append(index)
            if len(positions) == len(query):
                return tuple(positions)
    return None


def score(query: str, candidate: str) -> int:
    """Score how well ``query`` matches ``candidate`` on a 0-100 scale.

    An exact match scores 100 and a query that is not a subsequence of the
    candidate scores 0. Otherwise characters are matched greedily left to
    right: earlier candidate positions weigh more and runs of adjacent
    matches earn a compounding bonus. The raw total is scaled against the
    candidate's own ceiling so every other valid match lands in 1-99.
    """
    if not query:
        return 0
    if query == candidate:
        return MAX_SCORE

    raw = raw_score(query, candidate)
    if raw is None:
        return 0
    return max(1, raw * MAX_SCORE // ceiling_score(candidate))
