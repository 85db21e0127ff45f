from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from matchr import __version__
from matchr.ranking import filter_items
from matchr.rendering import build_rows, format_result_line, render_results_table
from matchr.search import MAX_SCORE
from matchr.sources import load_candidates, reads_stdin
from matchr.tui import PickerTui

__all__ = [
    "PickerTui",
    "cli",
    "run",
]

logger = logging.getLogger("matchr")


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"matchr {__version__}")
    raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


cli = typer.Typer(
    add_completion=False,
    help="Rank candidate strings against a fuzzy query.",
)


@cli.command()
def run(
    query: str = typer.Argument(..., help="Query matched as a subsequence."),
    items: list[str] | None = typer.Argument(
        None,
        help="Candidates to rank. Read from --file or stdin when omitted.",
    ),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Read one candidate per line from a file, '-' for stdin.",
    ),
    min_score: int = typer.Option(
        1,
        "--min-score",
        "-m",
        min=0,
        max=MAX_SCORE,
        envvar="MATCHR_MIN_SCORE",
        help="Hide results scoring below this value. 0 shows every candidate.",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        envvar="MATCHR_LIMIT",
        help="Show at most this many results.",
    ),
    show_scores: bool = typer.Option(
        True,
        "--scores/--no-scores",
        help="Show the score of each result.",
    ),
    table: bool = typer.Option(
        False,
        "--table",
        help="Render results as a table with highlighted matches.",
    ),
    pick: bool = typer.Option(
        False,
        "--pick",
        help="Choose a candidate interactively and print it. Needs candidates "
        "as arguments or from a file, not stdin.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        envvar="MATCHR_VERBOSE",
        help="Log debug output to stderr.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    _configure_logging(verbose)

    if pick and reads_stdin(items or [], path=file):
        typer.echo(
            "--pick cannot read candidates from stdin, pass them as arguments "
            "or with --file.",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        candidates = load_candidates(items or [], path=file)
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Cannot read candidates: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    logger.debug("Loaded %d candidates", len(candidates))

    if pick:
        selection = PickerTui(candidates, query=query, min_score=min_score).run()
        if selection is None:
            raise typer.Exit(code=1)
        typer.echo(selection)
        return

    ranked = filter_items(query, candidates, min_score=min_score, limit=limit)
    if not ranked:
        raise typer.Exit(code=1)

    rows = build_rows(query, ranked)
    if table:
        Console().print(render_results_table(rows, show_score=show_scores))
        return
    for row in rows:
        typer.echo(format_result_line(row, show_score=show_scores))


if __name__ == "__main__":
    cli()
