"""
Sample board used when no board file is supplied.

Simulates a software engineering student's board. Due dates and activity
timestamps are offsets in days from the supplied instant, so the sample stays
relevant whenever it is analyzed.
"""

from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from taskflow.core.models import Board, Label, Task, TaskList

SAMPLE_LABELS: List[Tuple[str, str, str]] = [
    ("label-study", "Study", "blue"),
    ("label-aiml", "AI/ML", "purple"),
    ("label-practice", "Practice", "green"),
    ("label-project", "Project", "orange"),
    ("label-research", "Research", "sky"),
    ("label-work", "Work", "yellow"),
    ("label-urgent", "Urgent", "red"),
]

SAMPLE_LISTS: List[Tuple[str, str]] = [
    ("list-1", "Backlog"),
    ("list-2", "To Do"),
    ("list-3", "In Progress"),
    ("list-4", "Done"),
]

# (id, name, description, list id, label ids, due offset, due complete, activity offset, closed)
SAMPLE_CARDS = [
    ("card-1", "Review linear algebra notes",
     "Go over eigenvalues and eigenvectors before the ML lecture.",
     "list-2", ["label-study"], 2, False, -1, False),
    ("card-2", "Implement gradient descent from scratch",
     "Write a NumPy implementation of batch and stochastic gradient descent, "
     "compare convergence on a toy regression dataset and plot the loss curves.",
     "list-3", ["label-aiml", "label-project", "label-practice"], 4, False, 0, False),
    ("card-3", "Finish portfolio website",
     "Deploy the static site and add the capstone write-up.",
     "list-3", ["label-project"], 6, False, -2, False),
    ("card-4", "LeetCode: two pointers set",
     "", "list-2", ["label-practice"], None, False, -3, False),
    ("card-5", "Read transformer paper",
     "Attention Is All You Need, take notes on positional encodings.",
     "list-1", ["label-research", "label-aiml"], 10, False, -5, False),
    ("card-6", "Submit internship application",
     "Tailor resume and cover letter.",
     "list-2", ["label-work", "label-urgent"], 0, False, -1, False),
    ("card-7", "Database systems problem set 3",
     "", "list-2", ["label-study", "label-urgent"], 1, False, -2, False),
    ("card-8", "Set up CI for team project",
     "GitHub Actions with lint and test stages.",
     "list-1", ["label-project", "label-work"], None, False, -7, False),
    ("card-9", "Complete Python OOP exercises",
     "", "list-4", ["label-practice"], -3, True, -3, False),
    ("card-10", "Literature review outline",
     "Survey recent work on retrieval augmented generation for the seminar.",
     "list-4", ["label-research"], -5, True, -5, False),
    ("card-11", "Operating systems midterm prep",
     "", "list-4", ["label-study"], -8, True, -8, True),
    ("card-12", "Train CNN on CIFAR-10",
     "Baseline ResNet-18, log accuracy per epoch, and write up the augmentation "
     "ablation for the course report.",
     "list-4", ["label-aiml", "label-project"], -2, True, -2, True),
    ("card-13", "Weekly standup notes",
     "", "list-4", ["label-work"], None, False, -4, True),
    ("card-14", "Plan next semester courses",
     "", "list-1", [], None, False, -10, False),
]


def build_sample_board(now: Optional[datetime] = None) -> Board:
    """
    Build the sample board relative to an instant.

    Args:
        now: Reference instant for due/activity offsets (defaults to now)

    Returns:
        Board with lists, labels and tasks
    """
    if now is None:
        now = datetime.now().astimezone()

    labels = [Label(id=lid, name=name, color=color) for lid, name, color in SAMPLE_LABELS]
    labels_by_id = {label.id: label for label in labels}
    lists = [
        TaskList(id=list_id, name=name, order=index)
        for index, (list_id, name) in enumerate(SAMPLE_LISTS, start=1)
    ]

    tasks = []
    for (card_id, name, desc, list_id, label_ids, due_offset,
         due_complete, activity_offset, closed) in SAMPLE_CARDS:
        tasks.append(Task(
            id=card_id,
            name=name,
            description=desc,
            labels=[labels_by_id[label_id] for label_id in label_ids],
            due_at=now + timedelta(days=due_offset) if due_offset is not None else None,
            due_satisfied=due_complete,
            last_activity_at=now + timedelta(days=activity_offset),
            is_closed=closed,
            list_id=list_id,
        ))

    return Board(
        id="board-sample",
        name="Student Task Board",
        labels=labels,
        lists=lists,
        tasks=tasks,
    )
