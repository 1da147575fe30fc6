"""
Board overview: active tasks grouped by list.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from taskflow.core.models import Board, Task, normalize_name
from taskflow.core.status import StatusClassifier, StatusOf, is_completed


@dataclass
class BoardOverview:
    """Active tasks per list plus board totals"""
    total_active: int = 0
    total_completed: int = 0
    tasks_by_list: Dict[str, List[Task]] = field(default_factory=dict)


def build_overview(
    board: Board,
    status_of: Optional[StatusOf] = None,
    list_name: Optional[str] = None
) -> BoardOverview:
    """
    Group non-closed tasks by list, in board list order.

    Lists with no open task are omitted. total_active counts the grouped
    tasks; total_completed counts closed or done-list tasks over the whole
    board.

    Args:
        board: Board to summarize
        status_of: List status classifier (name matching if None)
        list_name: Only include this list (case-insensitive)
    """
    if status_of is None:
        status_of = StatusClassifier.from_board(board)

    tasks_by_list: Dict[str, List[Task]] = {}
    for task_list in board.lists:
        if list_name and normalize_name(task_list.name) != normalize_name(list_name):
            continue
        tasks = [t for t in board.tasks if t.list_id == task_list.id and not t.is_closed]
        if tasks:
            tasks_by_list[task_list.name] = tasks

    return BoardOverview(
        total_active=sum(len(tasks) for tasks in tasks_by_list.values()),
        total_completed=sum(1 for t in board.tasks if is_completed(t, status_of)),
        tasks_by_list=tasks_by_list,
    )
