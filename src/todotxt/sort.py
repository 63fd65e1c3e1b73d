"""Sort engine for task lists: priority and date orderings."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Callable

from todotxt import log
from todotxt.errors import UnknownSortOptionError
from todotxt.task import Task


class SortOption(str, Enum):
    PRIORITY_ASC = "priority-asc"
    PRIORITY_DESC = "priority-desc"
    CREATED_DATE_ASC = "created-date-asc"
    CREATED_DATE_DESC = "created-date-desc"
    COMPLETED_DATE_ASC = "completed-date-asc"
    COMPLETED_DATE_DESC = "completed-date-desc"
    DUE_DATE_ASC = "due-date-asc"
    DUE_DATE_DESC = "due-date-desc"

    @property
    def descending(self) -> bool:
        return self.value.endswith("-desc")


SORT_PRIORITY_ASC = SortOption.PRIORITY_ASC
SORT_PRIORITY_DESC = SortOption.PRIORITY_DESC
SORT_CREATED_DATE_ASC = SortOption.CREATED_DATE_ASC
SORT_CREATED_DATE_DESC = SortOption.CREATED_DATE_DESC
SORT_COMPLETED_DATE_ASC = SortOption.COMPLETED_DATE_ASC
SORT_COMPLETED_DATE_DESC = SortOption.COMPLETED_DATE_DESC
SORT_DUE_DATE_ASC = SortOption.DUE_DATE_ASC
SORT_DUE_DATE_DESC = SortOption.DUE_DATE_DESC


SortKey = Callable[[Task], "str | date | None"]


def _priority(task: Task) -> str | None:
    return task.priority if task.has_priority() else None


def _created_date(task: Task) -> date | None:
    return task.created_date if task.has_created_date() else None


def _completed_date(task: Task) -> date | None:
    return task.completed_date if task.has_completed_date() else None


def _due_date(task: Task) -> date | None:
    return task.due_date if task.has_due_date() else None


_SORT_KEYS: dict[SortOption, SortKey] = {
    SortOption.PRIORITY_ASC: _priority,
    SortOption.PRIORITY_DESC: _priority,
    SortOption.CREATED_DATE_ASC: _created_date,
    SortOption.CREATED_DATE_DESC: _created_date,
    SortOption.COMPLETED_DATE_ASC: _completed_date,
    SortOption.COMPLETED_DATE_DESC: _completed_date,
    SortOption.DUE_DATE_ASC: _due_date,
    SortOption.DUE_DATE_DESC: _due_date,
}


def resolve_sort_option(option: SortOption | str) -> SortOption:
    """Return the :class:`SortOption` for *option* or raise ``UnknownSortOptionError``."""
    try:
        return SortOption(option)
    except ValueError:
        raise UnknownSortOptionError(option) from None


def sort_tasks(tasks: list[Task], option: SortOption | str) -> None:
    """Sort *tasks* in place.

    Tasks that have the sorted field always come first, in ascending and
    descending order alike; tasks without it keep their relative order at the
    end. Equal keys keep their relative order as well.
    """
    opt = resolve_sort_option(option)
    key = _SORT_KEYS[opt]

    present = [t for t in tasks if key(t) is not None]
    missing = [t for t in tasks if key(t) is None]
    present.sort(key=key, reverse=opt.descending)
    tasks[:] = present + missing
    log.debug(f"Sorted {len(tasks)} tasks by {opt.value} ({len(missing)} without value)")
