"""
Groups tasks into categories by label name.
"""

from typing import Dict, Iterable, List

from taskflow.core.models import Task


def categorize(tasks: Iterable[Task]) -> Dict[str, List[Task]]:
    """
    Bucket tasks by label name.

    A task with N distinct label names lands in N buckets; unlabeled tasks land
    in none. Buckets keep first-discovery order, and tasks keep input order
    within a bucket.

    Labels are identified by name, so a task carrying two labels with the
    same name joins that bucket once. Counting it once per label would
    inflate that category's task_count and success rate.

    Args:
        tasks: Tasks to categorize

    Returns:
        Mapping of category name to member tasks
    """
    categories: Dict[str, List[Task]] = {}
    for task in tasks:
        seen = set()
        for label in task.labels:
            if label.name in seen:
                continue
            seen.add(label.name)
            categories.setdefault(label.name, []).append(task)
    return categories
