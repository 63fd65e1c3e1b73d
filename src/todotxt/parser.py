"""todo.txt line parser.

A line is parsed by running a fixed sequence of extractor steps. Every step
matches against the untouched ``original`` line and strips what it found from
a working copy; whatever remains of the working copy becomes the task
description. Step order matters: the completion and priority prefixes must be
gone from the working copy before the created-date pattern can anchor on it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from functools import lru_cache
from typing import Callable

from todotxt.config import DEFAULT_DATE_FORMAT, DUE_TAG, date_regex
from todotxt.errors import DateParseError
from todotxt.task import Task

LINE_STRIP = " \t\r\n"
DESCRIPTION_STRIP = " \t\r\n\f"


@dataclass(frozen=True)
class LinePatterns:
    """Compiled field patterns for one date format."""

    date_format: str
    date_token: re.Pattern[str]
    completed: re.Pattern[str]
    completed_date: re.Pattern[str]
    priority: re.Pattern[str]
    created_date: re.Pattern[str]
    context: re.Pattern[str]
    project: re.Pattern[str]
    tag: re.Pattern[str]


@lru_cache(maxsize=None)
def compile_patterns(date_format: str = DEFAULT_DATE_FORMAT) -> LinePatterns:
    d = date_regex(date_format)
    return LinePatterns(
        date_format=date_format,
        date_token=re.compile(d),
        # 'x ...'
        completed=re.compile(r"^x(?:\s+|$)"),
        # 'x 2012-12-12 ...'
        completed_date=re.compile(rf"^x\s*({d})\s+"),
        # '(A) ...', 'x (A) ...', 'x 2012-12-12 (A) ...'
        priority=re.compile(rf"^(?:x|x {d}|)\s*\(([A-Z])\)\s+"),
        # '2012-12-12 ...' after any of the completion/priority prefixes
        created_date=re.compile(
            rf"^(?:\([A-Z]\)|x {d} \([A-Z]\)|x \([A-Z]\)|x {d}|)\s*({d})\s+"
        ),
        context=re.compile(r"(?:^|\s+)@(\S+)"),
        project=re.compile(r"(?:^|\s+)\+(\S+)"),
        tag=re.compile(r"(?:^|\s+)([\w-]+):(\S+)"),
    )


@dataclass
class _LineState:
    original: str
    working: str
    patterns: LinePatterns
    task: Task = field(default_factory=Task)

    def strip(self, pattern: re.Pattern[str]) -> None:
        self.working = pattern.sub("", self.working)

    def parse_date(self, value: str) -> date:
        # strptime alone accepts unpadded fields such as 2014-1-5
        if not self.patterns.date_token.fullmatch(value):
            raise DateParseError(value, self.patterns.date_format)
        try:
            return datetime.strptime(value, self.patterns.date_format).date()
        except ValueError:
            raise DateParseError(value, self.patterns.date_format) from None


# ── extractor steps ──────────────────────────────────────────────


def _extract_completion(state: _LineState) -> None:
    p = state.patterns
    if not p.completed.match(state.original):
        return
    state.task.completed = True
    m = p.completed_date.match(state.original)
    if m:
        state.task.completed_date = state.parse_date(m.group(1))
        state.strip(p.completed_date)
    else:
        state.strip(p.completed)


def _extract_priority(state: _LineState) -> None:
    m = state.patterns.priority.match(state.original)
    if m:
        state.task.priority = m.group(1)
        state.strip(state.patterns.priority)


def _extract_created_date(state: _LineState) -> None:
    m = state.patterns.created_date.match(state.original)
    if m:
        state.task.created_date = state.parse_date(m.group(1))
        state.strip(state.patterns.created_date)


def _unique_sorted(pattern: re.Pattern[str], text: str) -> list[str]:
    return sorted(set(pattern.findall(text)))


def _extract_contexts(state: _LineState) -> None:
    if state.patterns.context.search(state.original):
        state.task.contexts = _unique_sorted(state.patterns.context, state.original)
        state.strip(state.patterns.context)


def _extract_projects(state: _LineState) -> None:
    if state.patterns.project.search(state.original):
        state.task.projects = _unique_sorted(state.patterns.project, state.original)
        state.strip(state.patterns.project)


def _extract_tags(state: _LineState) -> None:
    tags: dict[str, str] = {}
    matched = False
    for key, value in state.patterns.tag.findall(state.original):
        matched = True
        if key == DUE_TAG:
            state.task.due_date = state.parse_date(value)
        elif key and value:
            tags[key] = value
    state.task.additional_tags = tags
    if matched:
        state.strip(state.patterns.tag)


EXTRACTORS: tuple[Callable[[_LineState], None], ...] = (
    _extract_completion,
    _extract_priority,
    _extract_created_date,
    _extract_contexts,
    _extract_projects,
    _extract_tags,
)


def parse_task(text: str, date_format: str = DEFAULT_DATE_FORMAT) -> Task:
    """Parse one todo.txt line into a :class:`Task`.

    Raises :class:`DateParseError` if any date-shaped token is not a valid
    calendar date; no partial task is returned in that case.
    """
    original = text.strip(LINE_STRIP)
    state = _LineState(
        original=original,
        working=original,
        patterns=compile_patterns(date_format),
        task=Task(original=original),
    )
    for extract in EXTRACTORS:
        extract(state)
    state.task.description = state.working.strip(DESCRIPTION_STRIP)
    return state.task
