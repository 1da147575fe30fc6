"""
Category pattern builder.

Derives a TaskPattern per category: estimated completion time over completed
tasks, difficulty, success rate, and best time of day.
"""

import math
from typing import Iterable, List, Optional, Sequence

from taskflow.analysis.categorizer import categorize
from taskflow.analysis.difficulty import RESEARCH_LABELS, assess_difficulty
from taskflow.core.config import AnalyzerConfig
from taskflow.core.models import Task, TaskPattern

BASE_COMPLETION_MINUTES = 60
MULTI_LABEL_BONUS = 0.5
LONG_DESCRIPTION_BONUS = 0.3
RESEARCH_BONUS = 0.7
LONG_DESCRIPTION_CHARS = 50


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up"""
    return int(math.floor(value + 0.5))


def is_pattern_completed(task: Task) -> bool:
    """A task counts as completed for patterns when closed or its due date is satisfied"""
    return task.is_closed or task.due_satisfied


def estimate_completion_minutes(task: Task) -> float:
    """
    Estimate how long a task took.

    60 minutes scaled by 1 + 0.5 (more than one label) + 0.3 (description over
    50 chars) + 0.7 (AI/ML or Research label).
    """
    multiplier = 1.0
    if len(task.labels) > 1:
        multiplier += MULTI_LABEL_BONUS
    if len(task.description or "") > LONG_DESCRIPTION_CHARS:
        multiplier += LONG_DESCRIPTION_BONUS
    if task.has_label(*RESEARCH_LABELS):
        multiplier += RESEARCH_BONUS
    return BASE_COMPLETION_MINUTES * multiplier


def average_completion_minutes(tasks: Iterable[Task]) -> int:
    """Mean estimate over completed tasks, 0 if none completed"""
    estimates = [estimate_completion_minutes(t) for t in tasks if is_pattern_completed(t)]
    if not estimates:
        return 0
    return round_half_up(sum(estimates) / len(estimates))


def success_rate(tasks: Sequence[Task]) -> int:
    """Percentage of completed tasks, 0 for an empty bucket"""
    if not tasks:
        return 0
    completed = sum(1 for t in tasks if is_pattern_completed(t))
    return round_half_up(completed / len(tasks) * 100)


def best_time_of_day(category: str, config: Optional[AnalyzerConfig] = None) -> str:
    """Look up the best time of day for a category"""
    config = config or AnalyzerConfig()
    return config.best_time_by_category.get(category, config.default_best_time)


def build_patterns(
    tasks: Iterable[Task],
    config: Optional[AnalyzerConfig] = None
) -> List[TaskPattern]:
    """
    Build one pattern per category.

    Difficulty is taken from the first task of each bucket. Patterns are
    sorted by task count, descending; ties keep discovery order.

    Args:
        tasks: All tasks to analyze
        config: Lookup tables (defaults if not provided)

    Returns:
        List of TaskPattern
    """
    config = config or AnalyzerConfig()
    patterns = []
    for category, members in categorize(tasks).items():
        patterns.append(TaskPattern(
            category=category,
            avg_completion_minutes=average_completion_minutes(members),
            difficulty=assess_difficulty(members[0]),
            success_rate_pct=success_rate(members),
            best_time_of_day=best_time_of_day(category, config),
            task_count=len(members),
        ))
    # sorted() is stable, including with reverse=True
    return sorted(patterns, key=lambda p: p.task_count, reverse=True)
