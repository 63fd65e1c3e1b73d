"""Tests for todotxt.formatting — canonical rendering."""

from __future__ import annotations

from datetime import date

import pytest

from todotxt.formatting import format_date, render_task
from todotxt.parser import parse_task
from todotxt.task import Task


class TestRenderTask:
    """Field order and sorting of the canonical form."""

    def test_empty_task(self):
        assert render_task(Task()) == ""

    def test_full_field_order(self):
        task = Task(
            description="Outline chapter 5",
            priority="B",
            projects=["Novel", "Book"],
            contexts=["Computer", "Attic"],
            additional_tags={"private": "false", "Level": "5"},
            created_date=date(2013, 12, 1),
            due_date=date(2014, 2, 17),
            completed_date=date(2014, 1, 2),
            completed=True,
        )
        assert render_task(task) == (
            "x 2014-01-02 (B) 2013-12-01 Outline chapter 5 @Attic @Computer "
            "+Book +Novel Level:5 private:false due:2014-02-17"
        )

    def test_completed_date_hidden_when_not_completed(self):
        task = Task(description="Reopened", completed_date=date(2014, 1, 2))
        assert render_task(task) == "Reopened"

    def test_completed_without_date(self):
        assert render_task(Task(description="Done", completed=True)) == "x Done"

    def test_no_trailing_separator_without_description(self):
        task = Task(contexts=["Phone"], completed=True)
        assert render_task(task) == "x @Phone"

    def test_reserved_due_tag_not_rendered_twice(self):
        task = Task(description="Pay", additional_tags={"due": "x"}, due_date=date(2014, 2, 1))
        assert render_task(task) == "Pay due:2014-02-01"

    def test_custom_date_format(self):
        task = Task(description="Pay", created_date=date(2014, 2, 1), due_date=date(2014, 3, 9))
        assert render_task(task, "%d.%m.%Y") == "01.02.2014 Pay due:09.03.2014"

    def test_str_uses_default_format(self):
        task = Task(description="Pay", created_date=date(2014, 2, 1))
        assert str(task) == "2014-02-01 Pay"

    def test_format_date(self):
        assert format_date(date(2014, 1, 5)) == "2014-01-05"

    def test_format_date_pads_early_years(self):
        assert format_date(date(999, 1, 1)) == "0999-01-01"
        assert format_date(date(45, 6, 7), "%d.%m.%Y") == "07.06.0045"

    def test_percent_literal_before_y_is_kept(self):
        assert format_date(date(2014, 1, 5), "%Y%%Y%m") == "2014%Y01"

    def test_early_year_survives_reparse(self):
        task = parse_task("0999-01-01 Old task")
        assert task.created_date == date(999, 1, 1)
        assert str(task) == "0999-01-01 Old task"
        assert str(parse_task(str(task))) == "0999-01-01 Old task"


class TestCanonicalFixedPoint:
    """Rendering is a fixed point after one parse/render pass."""

    @pytest.mark.parametrize(
        "line",
        [
            "x (C) 2014-01-01 @Go due:2014-01-12 Create golang library documentation +go-todotxt",
            "(A) 2012-01-30 @Phone Call Mom @Call +Family",
            "x 2014-01-02 (B) 2013-12-30 +go-todotxt Create golang library test cases @Go",
            "(C) Turn off TV @Home @Electricity Importance:Very! @Home",
            "due:2014-02-17 Level:5 Outline chapter 5 private:false +Novel",
            "x Download Todo.txt mobile app @Phone",
            "Plain text only",
        ],
    )
    def test_render_parse_render(self, line: str):
        first = render_task(parse_task(line))
        assert render_task(parse_task(first)) == first

    def test_parse_keeps_original_but_renders_canonical(self):
        line = "(A) 2012-01-30 @Phone Call Mom @Call +Family"
        task = parse_task(line)
        assert task.original == line
        assert str(task) == "(A) 2012-01-30 Call Mom @Call @Phone +Family"
