"""
Unit tests for the difficulty assessor.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from taskflow.analysis.difficulty import assess_difficulty, difficulty_score
from taskflow.core.models import Difficulty


class TestDifficultyScore:
    """Tests for the raw score."""

    def test_plain_task_scores_zero(self, make_task):
        assert difficulty_score(make_task("Plain")) == 0

    def test_research_labels_add_two_once(self, make_task):
        """AI/ML and Research together still only add 2."""
        task = make_task("Paper", labels=["AI/ML", "Research"])
        assert difficulty_score(task) == 2

    def test_practice_lowers_score(self, make_task):
        assert difficulty_score(make_task("Drill", labels=["Practice"])) == -1

    def test_description_must_exceed_100_chars(self, make_task):
        """Exactly 100 characters does not count as long."""
        assert difficulty_score(make_task("Edge", description="x" * 100)) == 0
        assert difficulty_score(make_task("Long", description="x" * 101)) == 1

    def test_more_than_two_labels_adds_one(self, make_task):
        two = make_task("Two", labels=["Study", "Work"])
        three = make_task("Three", labels=["Study", "Work", "Urgent"])
        assert difficulty_score(two) == 0
        assert difficulty_score(three) == 1


class TestAssessDifficulty:
    """Tests for the easy/medium/hard mapping."""

    def test_unlabeled_short_task_is_easy(self, make_task):
        assert assess_difficulty(make_task("Email")) == Difficulty.EASY

    def test_ai_ml_task_is_medium(self, make_task):
        assert assess_difficulty(make_task("Model", labels=["AI/ML"])) == Difficulty.MEDIUM

    def test_research_project_is_medium(self, make_task):
        task = make_task("Thesis", labels=["Research", "Project"])
        assert assess_difficulty(task) == Difficulty.MEDIUM

    def test_long_ai_project_is_hard(self, make_task):
        """2 (AI/ML) + 1 (Project) + 1 (long description) = 4 -> hard."""
        task = make_task("Capstone", labels=["AI/ML", "Project"], description="d" * 150)
        assert assess_difficulty(task) == Difficulty.HARD

    def test_practice_offsets_other_factors(self, make_task):
        """2 + 1 + 1 (three labels) - 1 = 3 -> medium."""
        task = make_task("Kata", labels=["AI/ML", "Project", "Practice"])
        assert assess_difficulty(task) == Difficulty.MEDIUM

    def test_assessment_is_deterministic(self, make_task):
        task = make_task("Same", labels=["Research", "Project"], description="y" * 120)
        assert assess_difficulty(task) == assess_difficulty(task)
        assert assess_difficulty(task) == Difficulty.HARD
