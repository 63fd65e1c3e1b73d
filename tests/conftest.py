"""Shared fixtures for todotxt tests.

File handling in tests:
- Fixture files live in tests/testdata; copy them into tmp_path before
  anything writes to them.
- Use todotxt.io_utils for consistent UTF-8 I/O.
"""

from __future__ import annotations

import shutil
from datetime import date
from pathlib import Path

import pytest

from todotxt.config import Config
from todotxt.io_utils import load_from_filename
from todotxt.task import Task
from todotxt.tasklist import TaskList

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's TODOTXT_* variables out of CLI option defaults."""
    monkeypatch.delenv("TODOTXT_DATE_FORMAT", raising=False)
    monkeypatch.delenv("TODOTXT_FILE", raising=False)


@pytest.fixture
def testdata() -> Path:
    return TESTDATA


@pytest.fixture
def load_fixture():
    """Factory fixture that loads a TaskList from tests/testdata/<name>."""

    def _load(name: str, config: Config | None = None) -> TaskList:
        return load_from_filename(TESTDATA / name, config)

    return _load


@pytest.fixture
def todo_copy(tmp_path: Path):
    """Factory fixture that copies a testdata file into tmp_path."""

    def _copy(name: str = "todo.txt") -> Path:
        target = tmp_path / "todo.txt"
        shutil.copy(TESTDATA / name, target)
        return target

    return _copy


def _make_task(
    description: str = "Task",
    priority: str = "",
    created: date | None = None,
    due: date | None = None,
    completed: date | None = None,
) -> Task:
    return Task(
        description=description,
        priority=priority,
        created_date=created,
        due_date=due,
        completed_date=completed,
        completed=completed is not None,
    )


@pytest.fixture
def make_task():
    """Factory fixture that creates Task instances."""
    return _make_task
