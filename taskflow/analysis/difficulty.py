"""
Heuristic difficulty assessment for a single task.

Scoring starts at 0:
    +2  AI/ML or Research label
    +1  Project label
    +1  description longer than 100 characters
    +1  more than 2 labels
    -1  Practice label

Mapping: <= 1 easy, 2-3 medium, >= 4 hard.
"""

from taskflow.core.models import Difficulty, Task

RESEARCH_LABELS = ("AI/ML", "Research")
PROJECT_LABEL = "Project"
PRACTICE_LABEL = "Practice"

LONG_DESCRIPTION_CHARS = 100
MANY_LABELS = 2

EASY_MAX_SCORE = 1
MEDIUM_MAX_SCORE = 3


def difficulty_score(task: Task) -> int:
    """Raw integer difficulty score (may be negative)"""
    score = 0

    if task.has_label(*RESEARCH_LABELS):
        score += 2
    if task.has_label(PROJECT_LABEL):
        score += 1
    if len(task.description or "") > LONG_DESCRIPTION_CHARS:
        score += 1
    if len(task.labels) > MANY_LABELS:
        score += 1

    if task.has_label(PRACTICE_LABEL):
        score -= 1

    return score


def assess_difficulty(task: Task) -> Difficulty:
    """
    Classify a task as easy, medium or hard.

    Depends only on label names and description length.
    """
    score = difficulty_score(task)
    if score <= EASY_MAX_SCORE:
        return Difficulty.EASY
    if score <= MEDIUM_MAX_SCORE:
        return Difficulty.MEDIUM
    return Difficulty.HARD
