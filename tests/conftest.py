"""
Shared fixtures for Task Flow Analyzer tests.
"""

import itertools
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from taskflow.core.models import Board, Label, Task, TaskList
from taskflow.core.status import StatusClassifier

# Monday morning
NOW = datetime(2025, 11, 3, 9, 30, tzinfo=timezone.utc)

TODO_LIST = "list-todo"
IN_PROGRESS_LIST = "list-progress"
DONE_LIST = "list-done"


def make_label(name: str) -> Label:
    """Label with an id derived from its name."""
    return Label(id=f"label-{name.lower()}", name=name, color="blue")


@pytest.fixture
def now():
    """Fixed reference instant (Monday 09:30 UTC)."""
    return NOW


@pytest.fixture
def make_task():
    """Factory for tasks; due dates are day offsets from NOW."""
    ids = itertools.count(1)

    def _make(
        name="Task",
        labels=(),
        description="",
        due_in_days=None,
        list_id=TODO_LIST,
        closed=False,
        due_satisfied=False,
    ):
        return Task(
            id=f"task-{next(ids)}",
            name=name,
            description=description,
            labels=[make_label(label) for label in labels],
            due_at=NOW + timedelta(days=due_in_days) if due_in_days is not None else None,
            due_satisfied=due_satisfied,
            last_activity_at=NOW - timedelta(days=1),
            is_closed=closed,
            list_id=list_id,
        )

    return _make


@pytest.fixture
def board_lists():
    """To Do / In Progress / Done lists."""
    return [
        TaskList(id=TODO_LIST, name="To Do", order=1),
        TaskList(id=IN_PROGRESS_LIST, name="In Progress", order=2),
        TaskList(id=DONE_LIST, name="Done", order=3),
    ]


@pytest.fixture
def make_board(board_lists):
    """Factory wrapping tasks into a board with the standard lists."""
    def _make(tasks):
        names = []
        for task in tasks:
            for label in task.labels:
                if label.name not in names:
                    names.append(label.name)
        return Board(
            id="board-test",
            name="Test Board",
            labels=[make_label(name) for name in names],
            lists=list(board_lists),
            tasks=list(tasks),
        )

    return _make


@pytest.fixture
def status_of(board_lists):
    """Name-matching classifier over the standard lists."""
    return StatusClassifier.from_lists(board_lists)
