"""
Next-task recommendation built on top of a board analysis.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from taskflow.analysis.analyzer import BoardAnalysis
from taskflow.analysis.prioritizer import URGENT_LABEL, days_until_due
from taskflow.core.models import (
    Board,
    ScoredTask,
    Task,
    TaskPattern,
    TimeOfDay,
    normalize_name,
)

DEFAULT_ESTIMATED_MINUTES = 60
MAX_ALTERNATIVES = 3


@dataclass
class Recommendation:
    """Recommended next task with the reasons behind it"""
    task: Task
    score: float
    reasons: List[str]
    confidence: float
    estimated_minutes: int
    list_name: Optional[str] = None
    alternatives: List[ScoredTask] = field(default_factory=list)


def matching_pattern(task: Task, patterns: List[TaskPattern]) -> Optional[TaskPattern]:
    """First pattern (in pattern order) whose category the task carries"""
    names = set(task.label_names)
    for pattern in patterns:
        if pattern.category in names:
            return pattern
    return None


def explain(scored: ScoredTask, analysis: BoardAnalysis) -> List[str]:
    """Human-readable reasons for a recommendation"""
    task = scored.task
    reasons: List[str] = []

    days = days_until_due(task, analysis.context.now)
    if days is not None:
        if days <= 0:
            reasons.append("Due today or overdue")
        elif days <= 3:
            reasons.append(f"Due in {days} day{'' if days == 1 else 's'}")

    if scored.breakdown.get("in_progress"):
        reasons.append("Already in progress")
    if task.has_label(URGENT_LABEL):
        reasons.append("Marked as urgent")

    pattern = matching_pattern(task, analysis.patterns)
    if (analysis.context.time_of_day == TimeOfDay.MORNING
            and pattern is not None
            and "morning" in pattern.best_time_of_day):
        reasons.append("Matches your peak morning focus")

    return reasons


def recommend_next(
    analysis: BoardAnalysis,
    board: Board,
    category: Optional[str] = None
) -> Optional[Recommendation]:
    """
    Pick the next task from the analysis' top tasks.

    Args:
        analysis: Result of BoardAnalyzer.analyze
        board: The analyzed board (for list names)
        category: Only consider tasks with this label (case-insensitive)

    Returns:
        Recommendation, or None if no active task matches
    """
    candidates = analysis.top_tasks
    if category:
        wanted = normalize_name(category)
        candidates = [
            entry for entry in candidates
            if any(normalize_name(name) == wanted for name in entry.task.label_names)
        ]

    if not candidates:
        return None

    recommended = candidates[0]
    pattern = matching_pattern(recommended.task, analysis.patterns)
    estimated = pattern.avg_completion_minutes if pattern else DEFAULT_ESTIMATED_MINUTES
    task_list = board.get_list(recommended.task.list_id)

    return Recommendation(
        task=recommended.task,
        score=recommended.score,
        reasons=explain(recommended, analysis),
        confidence=min(recommended.score / 100, 1.0),
        estimated_minutes=estimated,
        list_name=task_list.name if task_list else None,
        alternatives=candidates[1:1 + MAX_ALTERNATIVES],
    )
