"""
List status classification.

Boards describe status through their lists rather than a fixed enum, so the
engine asks a classifier which logical status a list id stands for.
"""

import re
from typing import Callable, Dict, Iterable, Mapping, Optional

from taskflow.core.config import AnalyzerConfig
from taskflow.core.models import Board, Task, TaskList, TaskStatus

StatusOf = Callable[[str], TaskStatus]

NEGATIONS = ("not", "never")


def matches_keyword(name: str, keyword: str) -> bool:
    """
    True if the keyword starts a word in the list name.

    Prefixed words ("Incomplete", "Undone") and negated phrases
    ("Not done") do not match; suffixed words ("Completed") do.
    """
    negated = "".join(rf"(?<!\b{word} )" for word in NEGATIONS)
    pattern = rf"{negated}\b{re.escape(keyword)}"
    return re.search(pattern, name, re.IGNORECASE) is not None


class StatusClassifier:
    """Maps list ids to TaskStatus. Unknown ids are treated as todo."""

    def __init__(self, statuses: Mapping[str, TaskStatus]):
        self._statuses: Dict[str, TaskStatus] = dict(statuses)

    def __call__(self, list_id: str) -> TaskStatus:
        return self._statuses.get(list_id, TaskStatus.TODO)

    @classmethod
    def from_lists(
        cls,
        lists: Iterable[TaskList],
        config: Optional[AnalyzerConfig] = None
    ) -> 'StatusClassifier':
        """
        Classify lists by case-insensitive keyword match on their names.

        Done keywords are checked first, so "Done (in progress review)" is done.
        """
        config = config or AnalyzerConfig()
        statuses: Dict[str, TaskStatus] = {}
        for task_list in lists:
            name = task_list.name
            if any(matches_keyword(name, keyword) for keyword in config.done_keywords):
                statuses[task_list.id] = TaskStatus.DONE
            elif any(matches_keyword(name, keyword) for keyword in config.in_progress_keywords):
                statuses[task_list.id] = TaskStatus.IN_PROGRESS
            else:
                statuses[task_list.id] = TaskStatus.TODO
        return cls(statuses)

    @classmethod
    def from_board(
        cls,
        board: Board,
        config: Optional[AnalyzerConfig] = None
    ) -> 'StatusClassifier':
        """Classify the lists of a board"""
        return cls.from_lists(board.lists, config)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> 'StatusClassifier':
        """Build from an explicit {list_id: status} lookup"""
        return cls({list_id: TaskStatus(status) for list_id, status in mapping.items()})


def is_completed(task: Task, status_of: StatusOf) -> bool:
    """Closed or sitting in a done list"""
    return task.is_closed or status_of(task.list_id) == TaskStatus.DONE


def is_active(task: Task, status_of: StatusOf) -> bool:
    """Neither closed nor in a done list"""
    return not is_completed(task, status_of)
