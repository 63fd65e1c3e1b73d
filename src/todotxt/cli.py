"""todotxt CLI: list and edit a todo.txt file from the shell.

Installed as ``todotxt`` console_script via pipx / pip.
"""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

import click

from todotxt import __version__
from todotxt.config import Config
from todotxt.sort import SortOption

if TYPE_CHECKING:
    from todotxt.task import Task
    from todotxt.tasklist import TaskList

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

SORT_CHOICES = [option.value for option in SortOption]


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("-f", "--file", "todo_file", default="", envvar="TODOTXT_FILE", help="todo.txt path (default: $TODOTXT_FILE or ./todo.txt)")
@click.option("--date-format", default="", envvar="TODOTXT_DATE_FORMAT", help="strftime date layout (default: $TODOTXT_DATE_FORMAT or %Y-%m-%d)")
@click.option("--keep-comments", is_flag=True, help="Parse lines starting with '#' as tasks")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.version_option(__version__, prog_name="todotxt")
@click.pass_context
def main(
    ctx: click.Context,
    todo_file: str,
    date_format: str,
    keep_comments: bool,
    verbose: bool,
) -> None:
    """todotxt: read, edit and sort todo.txt task lists.

    \b
    EXAMPLES:
      todotxt ls                               # List all tasks
      todotxt ls --sort priority-asc -c Phone  # Prioritised calls
      todotxt add "(A) Call Mom @Phone +Family"
      todotxt do 3                             # Complete task 3
      todotxt sort due-date-asc                # Rewrite file by due date
    """
    from todotxt import log as tlog

    tlog.set_verbose(verbose)

    try:
        cfg = Config(
            date_format=date_format,
            ignore_comments=not keep_comments,
            todo_file=todo_file,
            verbose=verbose,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--date-format") from exc

    ctx.obj = cfg


# ── helpers ──────────────────────────────────────────────────────


def _load(cfg: Config) -> TaskList:
    """Load the configured todo file, exiting with status 1 on parse errors."""
    from todotxt import log as tlog
    from todotxt.errors import DateParseError
    from todotxt.io_utils import load_from_filename
    from todotxt.tasklist import TaskList

    path = Path(cfg.todo_file)
    if not path.is_file():
        tlog.debug(f"{path} does not exist; starting with an empty list")
        return TaskList(config=cfg)

    try:
        return load_from_filename(path, cfg)
    except DateParseError as exc:
        tlog.error(f"{path}: {exc}")
        sys.exit(1)


def _save(cfg: Config, tasklist: TaskList) -> None:
    from todotxt import log as tlog
    from todotxt.io_utils import write_to_filename

    write_to_filename(tasklist, cfg.todo_file)
    tlog.debug(f"Wrote {len(tasklist)} tasks to {cfg.todo_file}")


def _get_or_exit(tasklist: TaskList, task_id: int) -> Task:
    from todotxt import log as tlog
    from todotxt.errors import TaskNotFoundError

    try:
        return tasklist.get_task(task_id)
    except TaskNotFoundError:
        tlog.error(f"No task with id {task_id}")
        sys.exit(1)


# ── commands ─────────────────────────────────────────────────────


@main.command(name="ls")
@click.option("--sort", "sort_option", type=click.Choice(SORT_CHOICES), default=None, help="Sort before listing")
@click.option("-c", "--context", "contexts", multiple=True, help="Only tasks with this @context")
@click.option("-p", "--project", "projects", multiple=True, help="Only tasks with this +project")
@click.option("--pending", is_flag=True, help="Hide completed tasks")
@click.pass_obj
def list_tasks(
    cfg: Config,
    sort_option: str | None,
    contexts: tuple[str, ...],
    projects: tuple[str, ...],
    pending: bool,
) -> None:
    """List tasks with their ids."""
    from todotxt import log as tlog

    tasklist = _load(cfg)
    shown = tasklist.filter(
        lambda t: (not pending or not t.completed)
        and all(c in t.contexts for c in contexts)
        and all(p in t.projects for p in projects)
    )
    if sort_option:
        shown.sort(sort_option)

    width = len(str(max((t.id for t in shown), default=0)))
    for task in shown:
        tlog.task_line(
            task.id,
            shown.render(task),
            priority=task.priority,
            completed=task.completed,
            width=width,
        )
    tlog.footer(len(shown), len(tasklist))


@main.command()
@click.argument("text")
@click.option("--date/--no-date", "stamp_date", default=True, help="Set today's created date if the text has none")
@click.pass_obj
def add(cfg: Config, text: str, stamp_date: bool) -> None:
    """Add a task given in todo.txt syntax."""
    from todotxt import log as tlog
    from todotxt.errors import DateParseError
    from todotxt.parser import parse_task

    try:
        task = parse_task(text, cfg.date_format)
    except DateParseError as exc:
        raise click.BadParameter(str(exc), param_hint="TEXT") from exc
    if not task.description and not (task.contexts or task.projects or task.additional_tags):
        raise click.BadParameter("Task text is empty.", param_hint="TEXT")
    if stamp_date and not task.has_created_date() and not task.completed:
        task.created_date = date.today()

    tasklist = _load(cfg)
    tasklist.add_task(task)
    _save(cfg, tasklist)
    tlog.success(f"Added task {task.id}: {tasklist.render(task)}")


@main.command(name="do")
@click.argument("task_id", type=int)
@click.pass_obj
def do_task(cfg: Config, task_id: int) -> None:
    """Mark a task as completed."""
    from todotxt import log as tlog

    tasklist = _load(cfg)
    task = _get_or_exit(tasklist, task_id)
    if task.completed:
        tlog.warn(f"Task {task_id} is already completed")
        return
    task.complete()
    _save(cfg, tasklist)
    tlog.success(f"Completed task {task_id}: {tasklist.render(task)}")


@main.command()
@click.argument("task_id", type=int)
@click.pass_obj
def undo(cfg: Config, task_id: int) -> None:
    """Reopen a completed task."""
    from todotxt import log as tlog

    tasklist = _load(cfg)
    task = _get_or_exit(tasklist, task_id)
    if not task.completed:
        tlog.warn(f"Task {task_id} is not completed")
        return
    task.reopen()
    _save(cfg, tasklist)
    tlog.success(f"Reopened task {task_id}: {tasklist.render(task)}")


@main.command()
@click.argument("task_id", type=int)
@click.pass_obj
def rm(cfg: Config, task_id: int) -> None:
    """Remove a task by id."""
    from todotxt import log as tlog
    from todotxt.errors import TaskNotFoundError

    tasklist = _load(cfg)
    try:
        tasklist.remove_task_by_id(task_id)
    except TaskNotFoundError:
        tlog.error(f"No task with id {task_id}")
        sys.exit(1)
    _save(cfg, tasklist)
    tlog.success(f"Removed task {task_id}")


@main.command(name="sort")
@click.argument("option", type=click.Choice(SORT_CHOICES))
@click.pass_obj
def sort_file(cfg: Config, option: str) -> None:
    """Sort the todo file in place."""
    from todotxt import log as tlog

    tasklist = _load(cfg)
    tasklist.sort(option)
    _save(cfg, tasklist)
    tlog.success(f"Sorted {len(tasklist)} tasks by {option}")
