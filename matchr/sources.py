from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

STDIN_PATH = "-"


def reads_stdin(
    items: Iterable[str],
    *,
    path: Path | str | None = None,
    stdin: TextIO | None = None,
) -> bool:
    """Whether ``load_candidates`` would take candidates from stdin."""
    stdin = stdin if stdin is not None else sys.stdin
    if path is not None:
        return str(path) == STDIN_PATH
    return not list(items) and not stdin.isatty()


def read_lines(stream: Iterable[str]) -> list[str]:
    lines: list[str] = []
    for line in stream:
        text = line.rstrip("\r\n")
        if text:
            lines.append(text)
    return lines


def load_candidates(
    items: Iterable[str],
    *,
    path: Path | str | None = None,
    stdin: TextIO | None = None,
) -> list[str]:
    """Collect candidates from arguments, then a file, then stdin.

    Stdin is only read implicitly when neither items nor a path were given
    and it is not attached to a terminal.
    """
    stdin = stdin if stdin is not None else sys.stdin
    candidates = list(items)

    if path is not None:
        if str(path) == STDIN_PATH:
            candidates.extend(read_lines(stdin))
        else:
            with Path(path).open(encoding="utf-8") as handle:
                candidates.extend(read_lines(handle))
    elif not candidates and not stdin.isatty():
        candidates.extend(read_lines(stdin))

    return candidates
