"""Configuration defaults, env vars, and runtime options for todotxt."""

from __future__ import annotations

import re
from dataclasses import dataclass

VERSION = "1.0.0"

DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_TODO_FILE = "todo.txt"

# Tag key reserved for Task.due_date
DUE_TAG = "due"

# strftime directive -> regex fragment matched by the parser
_DATE_DIRECTIVES: dict[str, str] = {
    "Y": r"\d{4}",
    "y": r"\d{2}",
    "m": r"\d{2}",
    "d": r"\d{2}",
    "%": "%",
}


def date_regex(date_format: str) -> str:
    """Translate a ``strftime`` layout into a regex matching date-shaped tokens.

    Only numeric directives are supported: the todo.txt grammar needs a date
    token without whitespace, so month names and times are rejected.
    """
    parts: list[str] = []
    directives = 0
    i = 0
    while i < len(date_format):
        ch = date_format[i]
        if ch != "%":
            parts.append(re.escape(ch))
            i += 1
            continue
        directive = date_format[i + 1 : i + 2]
        if directive not in _DATE_DIRECTIVES:
            raise ValueError(f"Unsupported date format directive: %{directive}")
        parts.append(_DATE_DIRECTIVES[directive])
        directives += directive != "%"
        i += 2
    if not directives or any(c.isspace() for c in date_format):
        raise ValueError(f"Invalid date format: {date_format!r}")
    return "".join(parts)


@dataclass
class Config:
    """Per-list settings for loading and rendering todo.txt files."""

    # Format
    date_format: str = DEFAULT_DATE_FORMAT
    ignore_comments: bool = True

    # CLI
    todo_file: str = DEFAULT_TODO_FILE
    verbose: bool = False

    def __post_init__(self) -> None:
        # Empty values come from unset CLI options.
        self.date_format = self.date_format or DEFAULT_DATE_FORMAT
        self.todo_file = self.todo_file or DEFAULT_TODO_FILE
        # Fail early instead of on the first parsed line.
        date_regex(self.date_format)
