from __future__ import annotations

from matchr.ranking import filter_items, match_items
from matchr.search import score

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "filter_items",
    "match_items",
    "score",
]
