"""
Board-level productivity insights.
"""

from typing import Dict, List, Optional

from taskflow.analysis.categorizer import categorize
from taskflow.analysis.patterns import build_patterns, is_pattern_completed, round_half_up
from taskflow.core.config import AnalyzerConfig
from taskflow.core.models import Board, ProductivityInsights, TaskPattern
from taskflow.core.status import StatusClassifier, StatusOf, is_completed


def most_productive_time(
    board: Board,
    patterns: List[TaskPattern],
    config: Optional[AnalyzerConfig] = None
) -> str:
    """
    Best-time label of the category with the most completed tasks.

    Categories without a known best time are skipped; when nothing has been
    completed the configured default is returned.
    """
    config = config or AnalyzerConfig()
    buckets = categorize(board.tasks)

    best_label = None
    best_completed = 0
    for pattern in patterns:
        if pattern.best_time_of_day == config.default_best_time:
            continue
        completed = sum(1 for t in buckets.get(pattern.category, []) if is_pattern_completed(t))
        if completed > best_completed:
            best_label = pattern.best_time_of_day
            best_completed = completed

    return best_label or config.default_productive_time


def summarize(
    board: Board,
    status_of: Optional[StatusOf] = None,
    config: Optional[AnalyzerConfig] = None,
    patterns: Optional[List[TaskPattern]] = None
) -> ProductivityInsights:
    """
    Roll patterns and tasks up into a board-level summary.

    The board average weights each category average by its task count and
    divides by the total number of tasks. Tasks in several categories are
    counted once per category, so the weights may exceed the task count.

    Args:
        board: Board to summarize
        status_of: List status classifier (name matching on board lists if None)
        config: Lookup tables
        patterns: Precomputed patterns (built from board tasks if None)

    Returns:
        ProductivityInsights
    """
    config = config or AnalyzerConfig()
    if status_of is None:
        status_of = StatusClassifier.from_board(board, config)
    if patterns is None:
        patterns = build_patterns(board.tasks, config)

    total = len(board.tasks)
    completed = sum(1 for task in board.tasks if is_completed(task, status_of))

    category_breakdown: Dict[str, int] = {p.category: p.task_count for p in patterns}

    if total > 0:
        weighted_minutes = sum(p.avg_completion_minutes * p.task_count for p in patterns)
        avg_minutes = round_half_up(weighted_minutes / total)
        completion_rate = completed / total * 100
    else:
        avg_minutes = 0
        completion_rate = 0.0

    return ProductivityInsights(
        total_tasks=total,
        completed_tasks=completed,
        avg_completion_minutes=avg_minutes,
        most_productive_time=most_productive_time(board, patterns, config),
        category_breakdown=category_breakdown,
        completion_rate_pct=completion_rate,
        patterns=patterns,
    )
