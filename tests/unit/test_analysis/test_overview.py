"""
Unit tests for the board overview.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from taskflow.analysis.overview import build_overview
from taskflow.core.sample_board import build_sample_board


class TestBuildOverview:
    """Tests for grouping active tasks by list."""

    def test_sample_board_grouping(self, now):
        overview = build_overview(build_sample_board(now))

        assert list(overview.tasks_by_list) == ["Backlog", "To Do", "In Progress", "Done"]
        assert [t.id for t in overview.tasks_by_list["In Progress"]] == ["card-2", "card-3"]
        assert [t.id for t in overview.tasks_by_list["Done"]] == ["card-9", "card-10"]
        assert overview.total_active == 11
        assert overview.total_completed == 5

    def test_list_filter_is_case_insensitive(self, now):
        overview = build_overview(build_sample_board(now), list_name="in  PROGRESS")

        assert list(overview.tasks_by_list) == ["In Progress"]
        assert overview.total_active == 2

    def test_lists_without_open_tasks_are_omitted(self, make_task, make_board):
        board = make_board([make_task("Closed", closed=True), make_task("Open")])
        overview = build_overview(board)

        assert list(overview.tasks_by_list) == ["To Do"]
        assert overview.total_completed == 1

    def test_empty_board(self, make_board):
        overview = build_overview(make_board([]))

        assert overview.tasks_by_list == {}
        assert overview.total_active == 0
        assert overview.total_completed == 0
