from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

PickerMode = Literal["browse", "filter"]
ScoredItem = tuple[str, int]


@dataclass(frozen=True)
class RankedRow:
    rank: int
    item: str
    score: int
    positions: tuple[int, ...] = ()
