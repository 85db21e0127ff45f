from __future__ import annotations

from collections.abc import Iterable

from rich.table import Table
from rich.text import Text

from matchr.models import RankedRow, ScoredItem
from matchr.search import match_positions

MATCH_STYLE = "bold red"


def highlight_match(item: str, positions: Iterable[int]) -> Text:
    text = Text(item)
    for position in positions:
        text.stylize(MATCH_STYLE, position, position + 1)
    return text


def build_rows(query: str, ranked: Iterable[ScoredItem]) -> list[RankedRow]:
    rows: list[RankedRow] = []
    for rank, (item, item_score) in enumerate(ranked, start=1):
        positions = match_positions(query, item) if item_score else None
        rows.append(
            RankedRow(
                rank=rank,
                item=item,
                score=item_score,
                positions=positions or (),
            )
        )
    return rows


def format_result_line(row: RankedRow, *, show_score: bool) -> str:
    if show_score:
        return f"{row.score:>3}  {row.item}"
    return row.item


def render_results_table(
    rows: list[RankedRow], *, show_score: bool = True
) -> Table:
    table = Table(box=None, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    if show_score:
        table.add_column("Score", justify="right")
    table.add_column("Candidate")
    for row in rows:
        cells: list[str | Text] = [str(row.rank)]
        if show_score:
            cells.append(str(row.score))
        cells.append(highlight_match(row.item, row.positions))
        table.add_row(*cells)
    return table


def format_status(visible: int, total: int) -> str:
    return f"{visible:,} of {total:,} candidates match."
