"""Canonical todo.txt rendering for tasks."""

from __future__ import annotations

import re
from datetime import date
from typing import TYPE_CHECKING

from todotxt.config import DEFAULT_DATE_FORMAT, DUE_TAG

if TYPE_CHECKING:
    from todotxt.task import Task


_DIRECTIVE = re.compile(r"%.")


def format_date(value: date, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    # glibc strftime does not zero-pad %Y below year 1000
    year = f"{value.year:04d}"
    layout = _DIRECTIVE.sub(lambda m: year if m.group() == "%Y" else m.group(), date_format)
    return value.strftime(layout)


def render_task(task: Task, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Render *task* as a single todo.txt line.

    Field order is fixed: completion, completed date, priority, created date,
    description, then contexts, projects and tags (each sorted) and finally
    ``due:<date>``. Tasks parsed from the same line may therefore render
    differently from their original text, but rendering is stable under
    re-parsing.
    """
    parts: list[str] = []

    if task.completed:
        parts.append("x")
        if task.has_completed_date():
            parts.append(format_date(task.completed_date, date_format))

    if task.has_priority():
        parts.append(f"({task.priority})")

    if task.has_created_date():
        parts.append(format_date(task.created_date, date_format))

    if task.description:
        parts.append(task.description)

    parts.extend(f"@{context}" for context in sorted(set(task.contexts)))
    parts.extend(f"+{project}" for project in sorted(set(task.projects)))
    parts.extend(
        f"{key}:{task.additional_tags[key]}"
        for key in sorted(task.additional_tags)
        if key != DUE_TAG
    )

    if task.has_due_date():
        parts.append(f"{DUE_TAG}:{format_date(task.due_date, date_format)}")

    return " ".join(parts)
