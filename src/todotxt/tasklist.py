"""TaskList: an ordered collection of tasks with load/render/edit operations."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator

from todotxt import log
from todotxt.config import Config
from todotxt.errors import TaskNotFoundError
from todotxt.formatting import render_task
from todotxt.parser import LINE_STRIP, parse_task
from todotxt.sort import SortOption, sort_tasks
from todotxt.task import Task

COMMENT_PREFIX = "#"


@dataclass
class TaskList:
    """Tasks in file order plus the settings used to load and render them.

    Usage::

        tl = TaskList.from_text(text)
        tl.add_task(parse_task("(A) Call Mom @Phone"))
        tl.sort(SortOption.PRIORITY_ASC)
        text = tl.serialize()
    """

    tasks: list[Task] = field(default_factory=list)
    config: Config = field(default_factory=Config)

    @classmethod
    def from_lines(cls, lines: Iterable[str], config: Config | None = None) -> TaskList:
        tl = cls(config=config or Config())
        tl.load(lines)
        return tl

    @classmethod
    def from_text(cls, text: str, config: Config | None = None) -> TaskList:
        return cls.from_lines(text.split("\n"), config)

    # ── container protocol ───────────────────────────────────────

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        return self.tasks[index]

    def __str__(self) -> str:
        return self.serialize()

    # ── load / serialize ─────────────────────────────────────────

    def _is_skipped(self, text: str) -> bool:
        if not text:
            return True
        return self.config.ignore_comments and text.startswith(COMMENT_PREFIX)

    def load(self, lines: Iterable[str]) -> None:
        """Replace the contents with the tasks parsed from *lines*.

        Ids are assigned 1.. in order among the non-skipped lines. If any line
        fails to parse the exception propagates and the list is left as it
        was before the call.
        """
        loaded: list[Task] = []
        for line in lines:
            text = line.strip(LINE_STRIP)
            if self._is_skipped(text):
                continue
            task = parse_task(text, self.config.date_format)
            task.id = len(loaded) + 1
            loaded.append(task)
        self.tasks = loaded
        log.debug(f"Loaded {len(loaded)} tasks")

    def render(self, task: Task) -> str:
        return render_task(task, self.config.date_format)

    def serialize(self) -> str:
        return "".join(f"{self.render(task)}\n" for task in self.tasks)

    # ── edit ─────────────────────────────────────────────────────

    def add_task(self, task: Task) -> Task:
        """Append *task*, giving it the next free id (max id + 1)."""
        task.id = max((t.id for t in self.tasks), default=0) + 1
        self.tasks.append(task)
        return task

    def get_task(self, task_id: int) -> Task:
        for t in self.tasks:
            if t.id == task_id:
                return t
        raise TaskNotFoundError(task_id)

    def remove_task_by_id(self, task_id: int) -> None:
        """Remove every task with *task_id*."""
        kept = [t for t in self.tasks if t.id != task_id]
        if len(kept) == len(self.tasks):
            raise TaskNotFoundError(task_id)
        log.debug(f"Removed task {task_id}")
        self.tasks = kept

    def remove_task(self, task: Task) -> None:
        """Remove every task that renders to the same text as *task*."""
        text = self.render(task)
        kept = [t for t in self.tasks if self.render(t) != text]
        removed = len(self.tasks) - len(kept)
        if not removed:
            raise TaskNotFoundError(task.id or None)
        log.debug(f"Removed {removed} task(s) matching {text!r}")
        self.tasks = kept

    # ── query / order ────────────────────────────────────────────

    def filter(self, predicate: Callable[[Task], bool]) -> TaskList:
        """Return a new list holding copies of the tasks for which *predicate* is true.

        The result owns its tasks: editing them leaves this list untouched.
        """
        return TaskList(
            tasks=[copy.deepcopy(t) for t in self.tasks if predicate(t)],
            config=self.config,
        )

    def sort(self, option: SortOption | str) -> None:
        sort_tasks(self.tasks, option)
