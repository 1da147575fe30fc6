"""
Data models for Task Flow Analyzer
Defines board records (labels, lists, tasks) and the derived analysis types
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, List, Dict, Any
import logging
import re

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    """Heuristic difficulty classes for a task"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class TimeOfDay(str, Enum):
    """Coarse time-of-day buckets"""
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


class FocusLevel(str, Enum):
    """Expected focus level of the user"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskStatus(str, Enum):
    """Logical status of a task, derived from the list it sits in"""
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


def normalize_name(text: str) -> str:
    """Collapse whitespace and lowercase, for name lookups"""
    return re.sub(r"\s+", " ", text or "").strip().lower()


def parse_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO timestamp; naive values are taken as UTC"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = date_parser.isoparse(str(value))
        except (ValueError, TypeError, OverflowError):
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class Label:
    """Board label. The name is the category key."""
    id: str = ""
    name: str = ""
    color: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Label':
        """Create Label from a record dictionary"""
        return cls(
            id=str(data.get('id', '')),
            name=data.get('name', '') or '',
            color=data.get('color')
        )


@dataclass
class TaskList:
    """A status column on the board"""
    id: str = ""
    name: str = ""
    order: float = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TaskList':
        """Create TaskList from a record dictionary"""
        return cls(
            id=str(data.get('id', '')),
            name=data.get('name', '') or '',
            order=data.get('order', data.get('pos', 0)) or 0
        )


@dataclass
class Task:
    """Task (card) data model"""
    id: str = ""
    name: str = ""
    description: str = ""
    labels: List[Label] = field(default_factory=list)
    due_at: Optional[datetime] = None
    due_satisfied: bool = False
    last_activity_at: Optional[datetime] = None
    is_closed: bool = False
    list_id: str = ""

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        labels_by_id: Optional[Dict[str, Label]] = None
    ) -> 'Task':
        """
        Create Task from a record dictionary.

        Accepts both Trello-shaped keys (desc, idList, due, dueComplete,
        dateLastActivity, closed) and snake_case keys. Label references given
        as ids are resolved through labels_by_id; unknown ids are dropped.
        """
        labels_by_id = labels_by_id or {}
        labels: List[Label] = []
        for raw in data.get('labels') or []:
            if isinstance(raw, Label):
                labels.append(raw)
            elif isinstance(raw, dict):
                labels.append(Label.from_dict(raw))
            elif str(raw) in labels_by_id:
                labels.append(labels_by_id[str(raw)])
            else:
                logger.warning("Task %s references unknown label %s", data.get('id'), raw)
        # Trello sends both embedded labels and idLabels; ids only fill in when nothing is embedded
        if not labels:
            for label_id in data.get('idLabels', data.get('label_ids')) or []:
                if str(label_id) in labels_by_id:
                    labels.append(labels_by_id[str(label_id)])
                else:
                    logger.warning(
                        "Task %s references unknown label %s", data.get('id'), label_id
                    )

        return cls(
            id=str(data.get('id', '')),
            name=data.get('name', '') or '',
            description=data.get('desc', data.get('description')) or '',
            labels=labels,
            due_at=parse_datetime(data.get('due', data.get('due_at'))),
            due_satisfied=bool(data.get('dueComplete', data.get('due_satisfied', False))),
            last_activity_at=parse_datetime(
                data.get('dateLastActivity', data.get('last_activity_at'))
            ),
            is_closed=bool(data.get('closed', data.get('is_closed', False))),
            list_id=str(data.get('idList', data.get('list_id', '')) or '')
        )

    @property
    def label_names(self) -> List[str]:
        """Label names in attachment order"""
        return [label.name for label in self.labels]

    def has_label(self, *names: str) -> bool:
        """Check if task carries a label with any of the given names"""
        return any(label.name in names for label in self.labels)


@dataclass
class Board:
    """Snapshot of a task board"""
    id: str = ""
    name: str = ""
    labels: List[Label] = field(default_factory=list)
    lists: List[TaskList] = field(default_factory=list)
    tasks: List[Task] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Board':
        """Create Board from a record dictionary ('cards' or 'tasks')"""
        labels = [Label.from_dict(raw) for raw in data.get('labels') or []]
        labels_by_id = {label.id: label for label in labels}
        lists = [TaskList.from_dict(raw) for raw in data.get('lists') or []]
        raw_tasks = data.get('cards', data.get('tasks')) or []
        tasks = [Task.from_dict(raw, labels_by_id) for raw in raw_tasks]
        return cls(
            id=str(data.get('id', '')),
            name=data.get('name', '') or '',
            labels=labels,
            lists=lists,
            tasks=tasks
        )

    def get_list(self, list_id: str) -> Optional[TaskList]:
        """Get list by id, None for dangling references"""
        for task_list in self.lists:
            if task_list.id == list_id:
                return task_list
        return None

    def find_list_by_name(self, name: str) -> Optional[TaskList]:
        """Find list by name (case and whitespace insensitive)"""
        match = normalize_name(name)
        for task_list in self.lists:
            if normalize_name(task_list.name) == match:
                return task_list
        return None

    def find_label_by_name(self, name: str) -> Optional[Label]:
        """Find label by name (case and whitespace insensitive)"""
        match = normalize_name(name)
        for label in self.labels:
            if normalize_name(label.name) == match:
                return label
        return None

    def find_task_by_name(self, name: str) -> Optional[Task]:
        """Find task by name (case and whitespace insensitive)"""
        match = normalize_name(name)
        for task in self.tasks:
            if normalize_name(task.name) == match:
                return task
        return None


@dataclass
class TaskPattern:
    """Aggregated statistics for one category"""
    category: str
    avg_completion_minutes: int
    difficulty: Difficulty
    success_rate_pct: int
    best_time_of_day: str
    task_count: int


@dataclass
class UserContext:
    """Temporal context used to personalize scoring"""
    now: datetime
    time_of_day: TimeOfDay
    focus_level: FocusLevel


@dataclass
class ScoredTask:
    """Task with computed recommendation score and per-term breakdown"""
    task: Task
    score: float
    breakdown: Dict[str, float] = field(default_factory=dict)

    def __lt__(self, other: 'ScoredTask') -> bool:
        """Enable sorting by score (descending)"""
        return self.score > other.score  # Reverse for descending order


@dataclass
class ProductivityInsights:
    """Board-level summary"""
    total_tasks: int = 0
    completed_tasks: int = 0
    avg_completion_minutes: int = 0
    most_productive_time: str = ""
    category_breakdown: Dict[str, int] = field(default_factory=dict)
    completion_rate_pct: float = 0.0
    patterns: List[TaskPattern] = field(default_factory=list)
