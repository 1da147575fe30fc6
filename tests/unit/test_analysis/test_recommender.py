"""
Unit tests for next-task recommendations.
"""

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from taskflow.analysis.analyzer import BoardAnalyzer
from taskflow.analysis.recommender import recommend_next
from taskflow.core.sample_board import build_sample_board


@pytest.fixture
def sample_board(now):
    return build_sample_board(now)


@pytest.fixture
def analysis(sample_board, now):
    return BoardAnalyzer().analyze(sample_board, now)


class TestRecommendNext:
    """Tests for recommend_next."""

    def test_recommends_top_ranked_task(self, analysis, sample_board):
        recommendation = recommend_next(analysis, sample_board)

        assert recommendation.task.id == "card-7"
        assert recommendation.score == 205
        assert recommendation.list_name == "To Do"
        assert recommendation.confidence == 1.0
        assert recommendation.estimated_minutes == 60

    def test_reasons_in_order(self, analysis, sample_board):
        recommendation = recommend_next(analysis, sample_board)
        assert recommendation.reasons == [
            "Due in 1 day",
            "Marked as urgent",
            "Matches your peak morning focus",
        ]

    def test_alternatives_are_next_three(self, analysis, sample_board):
        recommendation = recommend_next(analysis, sample_board)
        assert [s.task.id for s in recommendation.alternatives] == ["card-6", "card-2", "card-1"]

    def test_category_filter_is_case_insensitive(self, analysis, sample_board):
        recommendation = recommend_next(analysis, sample_board, category="practice")

        assert recommendation.task.id == "card-2"
        assert recommendation.reasons == ["Already in progress"]
        # Project is the first pattern the task belongs to
        assert recommendation.estimated_minutes == 150
        assert recommendation.list_name == "In Progress"

    def test_no_match_returns_none(self, analysis, sample_board):
        assert recommend_next(analysis, sample_board, category="Research") is None

    def test_due_today_reason(self, make_task, make_board, now):
        task = make_task("Today", labels=["Work"], due_in_days=0)
        board = make_board([task])
        recommendation = recommend_next(BoardAnalyzer().analyze(board, now), board)

        assert recommendation.reasons == ["Due today or overdue"]
        assert recommendation.confidence == 1.0

    def test_low_score_confidence_and_default_estimate(self, make_task, make_board, now):
        task = make_task("Someday")
        board = make_board([task])
        recommendation = recommend_next(BoardAnalyzer().analyze(board, now), board)

        assert recommendation.confidence == 0
        assert recommendation.estimated_minutes == 60
        assert recommendation.reasons == []

    def test_dangling_list_has_no_name(self, make_task, make_board, now):
        board = make_board([make_task("Lost", due_in_days=2, list_id="list-gone")])
        recommendation = recommend_next(BoardAnalyzer().analyze(board, now), board)

        assert recommendation.list_name is None
        assert recommendation.reasons == ["Due in 2 days"]
        assert recommendation.confidence == pytest.approx(0.5)
