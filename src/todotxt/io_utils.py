"""UTF-8 file helpers and todo.txt load/write wrappers around TaskList."""

from __future__ import annotations

from io import TextIOWrapper
from pathlib import Path
from typing import IO, Any

from todotxt.config import Config
from todotxt.tasklist import TaskList

PathLike = Path | str


def write_text(path: PathLike, text: str, **kwargs: Any) -> None:
    """Write text to path with UTF-8 encoding. Forwards extra kwargs to Path.write_text."""
    p = path if isinstance(path, Path) else Path(path)
    p.write_text(text, encoding="utf-8", **kwargs)


def open_text(
    path: PathLike,
    mode: str = "r",
    *,
    encoding: str = "utf-8",
    errors: str = "strict",
    **kwargs: Any,
) -> TextIOWrapper:
    """Open path for text I/O with UTF-8 by default."""
    return open(path, mode, encoding=encoding, errors=errors, **kwargs)


# ── todo.txt files ───────────────────────────────────────────────


def load_from_file(stream: IO[str], config: Config | None = None) -> TaskList:
    """Load a TaskList from an open text stream (a file or ``sys.stdin``)."""
    return TaskList.from_lines(stream, config)


def load_from_filename(path: PathLike, config: Config | None = None) -> TaskList:
    """Load a TaskList from a file, most likely called ``todo.txt``."""
    with open_text(path) as fh:
        return load_from_file(fh, config)


def write_to_file(tasklist: TaskList, stream: IO[str]) -> None:
    """Write *tasklist* to an open text stream (a file or ``sys.stdout``)."""
    stream.write(tasklist.serialize())
    stream.flush()


def write_to_filename(tasklist: TaskList, path: PathLike) -> None:
    # newline="" keeps '\n' line endings on every platform
    write_text(path, tasklist.serialize(), newline="")
