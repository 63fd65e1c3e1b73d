"""Exceptions raised while parsing, looking up and sorting tasks."""

from __future__ import annotations


class TodoTxtError(Exception):
    """Base class for every error raised by the todotxt package."""


class DateParseError(TodoTxtError, ValueError):
    """A date-shaped token failed calendar validation (e.g. ``2014-02-32``)."""

    def __init__(self, value: str, date_format: str) -> None:
        super().__init__(f"cannot parse date {value!r} with format {date_format!r}")
        self.value = value
        self.date_format = date_format


class TaskNotFoundError(TodoTxtError, LookupError):
    """No task in the list matched the requested id or text."""

    def __init__(self, task_id: int | None = None) -> None:
        super().__init__("task not found")
        self.task_id = task_id


class UnknownSortOptionError(TodoTxtError, ValueError):
    def __init__(self, option: object) -> None:
        super().__init__(f"unrecognized sort option: {option}")
        self.option = option
