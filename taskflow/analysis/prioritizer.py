"""
Recommendation scoring for Task Flow Analyzer.

Scores active tasks against the user's context and ranks them so the user
knows what to do next.

Score is additive, every term evaluated independently:
    urgency (due date)      +100 / +50 / +20
    urgent label            +75
    time-of-day affinity    +30
    already in progress     +60
    focus/difficulty match  +25 / +20 / +15
"""

import math
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from taskflow.analysis.difficulty import assess_difficulty
from taskflow.core.config import AnalyzerConfig
from taskflow.core.models import (
    Difficulty,
    FocusLevel,
    ScoredTask,
    Task,
    TaskStatus,
    TimeOfDay,
    UserContext,
)
from taskflow.core.status import StatusOf, is_active

SECONDS_PER_DAY = 24 * 60 * 60

URGENT_LABEL = "Urgent"

# Focus level -> (difficulty that fits it, bonus)
FOCUS_ALIGNMENT = {
    FocusLevel.HIGH: (Difficulty.HARD, 25),
    FocusLevel.MEDIUM: (Difficulty.MEDIUM, 20),
    FocusLevel.LOW: (Difficulty.EASY, 15),
}


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_until_due(task: Task, now: datetime) -> Optional[int]:
    """
    Whole days until the task is due (floored, negative when overdue).

    Returns None when the task has no due date.
    """
    if task.due_at is None:
        return None
    delta = _as_utc(task.due_at) - _as_utc(now)
    return math.floor(delta.total_seconds() / SECONDS_PER_DAY)


def calculate_urgency_points(task: Task, now: datetime) -> int:
    """
    Points for due date proximity.

    Scoring:
        - Due within a day (or overdue): 100
        - Due within 3 days: 50
        - Due within a week: 20
        - Later or no due date: 0
    """
    days = days_until_due(task, now)
    if days is None:
        return 0

    if days <= 1:
        return 100
    elif days <= 3:
        return 50
    elif days <= 7:
        return 20
    return 0


def calculate_urgent_label_points(task: Task) -> int:
    """Points for carrying the Urgent label"""
    return 75 if task.has_label(URGENT_LABEL) else 0


def calculate_time_affinity_points(
    task: Task,
    time_of_day: TimeOfDay,
    config: Optional[AnalyzerConfig] = None
) -> int:
    """Points when one of the task's categories suits the current time of day"""
    config = config or AnalyzerConfig()
    favorable = config.time_affinity.get(TimeOfDay(time_of_day).value, [])
    return 30 if task.has_label(*favorable) else 0


def calculate_status_points(task: Task, status_of: Optional[StatusOf]) -> int:
    """Points for tasks already in progress"""
    if status_of is None:
        return 0
    return 60 if status_of(task.list_id) == TaskStatus.IN_PROGRESS else 0


def calculate_focus_points(task: Task, focus_level: FocusLevel) -> int:
    """Points when task difficulty matches the user's focus level"""
    fitting_difficulty, bonus = FOCUS_ALIGNMENT[FocusLevel(focus_level)]
    return bonus if assess_difficulty(task) == fitting_difficulty else 0


def score_task(
    task: Task,
    context: UserContext,
    status_of: Optional[StatusOf] = None,
    config: Optional[AnalyzerConfig] = None
) -> ScoredTask:
    """
    Score a single task against a context.

    Args:
        task: Task to score
        context: Current user context
        status_of: List status classifier (in-progress bonus skipped if None)
        config: Lookup tables

    Returns:
        ScoredTask with total score and per-term breakdown
    """
    breakdown = {
        "urgency": calculate_urgency_points(task, context.now),
        "urgent_label": calculate_urgent_label_points(task),
        "time_affinity": calculate_time_affinity_points(task, context.time_of_day, config),
        "in_progress": calculate_status_points(task, status_of),
        "focus": calculate_focus_points(task, context.focus_level),
    }
    return ScoredTask(task=task, score=sum(breakdown.values()), breakdown=breakdown)


class Prioritizer:
    """
    Task ranking engine.

    Scores active tasks and orders them by score, highest first. Tasks with
    equal scores keep their input order.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        status_of: Optional[StatusOf] = None
    ):
        """
        Initialize prioritizer.

        Args:
            config: Lookup tables for scoring
            status_of: Classifier mapping list ids to TaskStatus
        """
        self.config = config or AnalyzerConfig()
        self.status_of = status_of

    def _is_active(self, task: Task) -> bool:
        if self.status_of is None:
            return not task.is_closed
        return is_active(task, self.status_of)

    def score_task(self, task: Task, context: UserContext) -> ScoredTask:
        """Score a single task"""
        return score_task(task, context, self.status_of, self.config)

    def rank_tasks(self, tasks: Iterable[Task], context: UserContext) -> List[ScoredTask]:
        """
        Score and sort active tasks.

        Closed tasks and tasks in a done list are never scored or returned.

        Args:
            tasks: Candidate tasks
            context: Current user context

        Returns:
            List of ScoredTask sorted by score (highest first)
        """
        scored = [
            self.score_task(task, context)
            for task in tasks
            if self._is_active(task)
        ]

        # list.sort is stable, so ties keep input order
        scored.sort()
        return scored

    def get_top_priorities(
        self,
        tasks: Iterable[Task],
        context: UserContext,
        n: Optional[int] = None
    ) -> List[ScoredTask]:
        """
        Get the top N ranked tasks.

        Args:
            tasks: Candidate tasks
            context: Current user context
            n: Number of tasks (defaults to config.top_n)

        Returns:
            List of top N ScoredTask objects
        """
        if n is None:
            n = self.config.top_n
        return self.rank_tasks(tasks, context)[:max(n, 0)]
