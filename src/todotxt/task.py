"""Task data model for a single todo.txt entry."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta


@dataclass
class Task:
    """One todo.txt line, split into its structural fields.

    ``priority`` uses ``""`` and the date fields use ``None`` for "not set";
    prefer the ``has_*`` predicates over inspecting them directly.
    """

    id: int = 0
    original: str = ""
    description: str = ""
    priority: str = ""
    projects: list[str] = field(default_factory=list)
    contexts: list[str] = field(default_factory=list)
    additional_tags: dict[str, str] = field(default_factory=dict)
    created_date: date | None = None
    due_date: date | None = None
    completed_date: date | None = None
    completed: bool = False

    @classmethod
    def new(cls, description: str = "", today: date | None = None) -> Task:
        """Return an empty task whose created date is today."""
        return cls(description=description, created_date=today or date.today())

    def __str__(self) -> str:
        from todotxt.formatting import render_task

        return render_task(self)

    # ── predicates ───────────────────────────────────────────────

    def has_priority(self) -> bool:
        return self.priority != ""

    def has_created_date(self) -> bool:
        return self.created_date is not None

    def has_due_date(self) -> bool:
        return self.due_date is not None

    def has_completed_date(self) -> bool:
        return self.completed_date is not None and self.completed

    # ── transitions ──────────────────────────────────────────────

    def complete(self, today: date | None = None) -> None:
        """Mark the task done and stamp today's date, unless already done."""
        if not self.completed:
            self.completed = True
            self.completed_date = today or date.today()

    def reopen(self) -> None:
        """Undo :meth:`complete`, clearing the completed date."""
        if self.completed:
            self.completed = False
            self.completed_date = None

    # ── due date ─────────────────────────────────────────────────

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Return ``True`` if the due date lies in the past.

        The completed flag is not considered; check ``completed`` first if
        finished tasks should never count as overdue.
        """
        if self.due_date is None:
            return False
        return _midnight(self.due_date) < (now or datetime.now())

    def due(self, now: datetime | None = None) -> timedelta:
        """Time elapsed since the due date when overdue, else time remaining.

        Like :meth:`is_overdue` this ignores the completed flag. A task
        without a due date returns ``timedelta(0)``.
        """
        if self.due_date is None:
            return timedelta(0)
        now = now or datetime.now()
        due_at = _midnight(self.due_date)
        if due_at < now:
            return now - due_at
        return due_at - now


def _midnight(day: date) -> datetime:
    return datetime.combine(day, datetime.min.time())
