"""todotxt: parse, edit, sort and write todo.txt task lists."""

from todotxt.config import VERSION as __version__
from todotxt.config import Config
from todotxt.errors import (
    DateParseError,
    TaskNotFoundError,
    TodoTxtError,
    UnknownSortOptionError,
)
from todotxt.formatting import render_task
from todotxt.parser import parse_task
from todotxt.sort import SortOption, sort_tasks
from todotxt.task import Task
from todotxt.tasklist import TaskList

__all__ = [
    "__version__",
    "Config",
    "DateParseError",
    "SortOption",
    "Task",
    "TaskList",
    "TaskNotFoundError",
    "TodoTxtError",
    "UnknownSortOptionError",
    "parse_task",
    "render_task",
    "sort_tasks",
]
