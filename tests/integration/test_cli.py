"""
Integration tests for the taskflow CLI.

Runs the Typer app end-to-end against the sample board and board files
written to a temporary directory.
"""

import json
import pytest
from rich.console import Console
from typer.testing import CliRunner

import sys
from pathlib import Path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import taskflow_cli
from taskflow_cli import app

NOW = "2025-11-03T09:30:00+00:00"

runner = CliRunner()

BOARD = {
    "id": "board-file",
    "name": "File Board",
    "labels": [
        {"id": "l-study", "name": "Study", "color": "blue"},
        {"id": "l-urgent", "name": "Urgent", "color": "red"},
    ],
    "lists": [
        {"id": "todo", "name": "To Do", "pos": 1},
        {"id": "done", "name": "Done", "pos": 2},
    ],
    "cards": [
        {
            "id": "c1",
            "name": "Write compilers lab report",
            "desc": "",
            "idList": "todo",
            "idLabels": ["l-study", "l-urgent"],
            "due": "2025-11-03T18:00:00.000Z",
            "dueComplete": False,
            "dateLastActivity": "2025-11-02T10:00:00.000Z",
            "closed": False,
        },
        {
            "id": "c2",
            "name": "Finished reading",
            "desc": "",
            "idList": "done",
            "idLabels": ["l-study"],
            "due": "2025-11-01T18:00:00.000Z",
            "dueComplete": True,
            "dateLastActivity": "2025-11-01T10:00:00.000Z",
            "closed": False,
        },
    ],
}


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Render without wrapping so names can be matched in the output."""
    monkeypatch.setattr(taskflow_cli, "console", Console(width=200, force_terminal=False))


@pytest.fixture
def board_file(tmp_path):
    path = tmp_path / "board.json"
    path.write_text(json.dumps(BOARD))
    return path


class TestSampleBoard:
    """Commands against the built-in sample board."""

    def test_analyze(self):
        result = runner.invoke(app, ["--now", NOW, "analyze"])

        assert result.exit_code == 0
        assert "Do Next" in result.output
        assert "Database systems problem set 3" in result.output
        assert "35.7% complete" in result.output

    def test_next(self):
        result = runner.invoke(app, ["--now", NOW, "next"])

        assert result.exit_code == 0
        assert "Database systems problem set 3" in result.output
        assert "Marked as urgent" in result.output

    def test_next_with_category(self):
        result = runner.invoke(app, ["--now", NOW, "next", "--category", "project"])

        assert result.exit_code == 0
        assert "Implement gradient descent from scratch" in result.output

    def test_next_without_candidates(self):
        result = runner.invoke(app, ["--now", NOW, "next", "-c", "Research"])

        assert result.exit_code == 1
        assert "No matching active tasks found." in result.output

    def test_insights(self):
        result = runner.invoke(app, ["--now", NOW, "insights"])

        assert result.exit_code == 0
        assert "Productivity Insights" in result.output
        assert "35.7%" in result.output

    def test_tasks_for_one_list(self):
        result = runner.invoke(app, ["--now", NOW, "tasks", "--list", "in progress"])

        assert result.exit_code == 0
        assert "In Progress (2)" in result.output
        assert "Backlog" not in result.output

    def test_tasks_for_unknown_list(self):
        result = runner.invoke(app, ["--now", NOW, "tasks", "--list", "Someday"])

        assert result.exit_code == 1
        assert 'No list named "Someday"' in result.output

    def test_invalid_now(self):
        result = runner.invoke(app, ["--now", "yesterday-ish", "next"])

        assert result.exit_code == 1
        assert "invalid --now" in result.output


class TestBoardFile:
    """Commands against board files."""

    def test_next_from_board_file(self, board_file):
        result = runner.invoke(app, ["--board", str(board_file), "--now", NOW, "next"])

        assert result.exit_code == 0
        assert "Write compilers lab report" in result.output

    def test_missing_board_file(self, tmp_path):
        result = runner.invoke(app, ["--board", str(tmp_path / "nope.json"), "analyze"])

        assert result.exit_code == 1
        assert "Board file not found" in result.output

    def test_invalid_board_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{")
        result = runner.invoke(app, ["--board", str(path), "insights"])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_board_path_from_config_dir(self, tmp_path, board_file):
        (tmp_path / "settings.json").write_text(json.dumps({
            "board_path": "board.json",
            "log_level": "WARNING",
        }))
        result = runner.invoke(app, ["--config-dir", str(tmp_path), "--now", NOW, "insights"])

        assert result.exit_code == 0
        assert "50.0%" in result.output
        assert (tmp_path / "analysis.json").exists()

    def test_config_dir_overrides_top_n(self, tmp_path):
        (tmp_path / "analysis.json").write_text(json.dumps({"top_n": 1}))
        result = runner.invoke(app, ["--config-dir", str(tmp_path), "--now", NOW, "next"])

        assert result.exit_code == 0
        assert "Database systems problem set 3" in result.output
        assert "Alternatives" not in result.output


class TestLookups:
    """Name lookups for categories and tasks."""

    def test_next_with_unknown_label(self):
        result = runner.invoke(app, ["--now", NOW, "next", "--category", "Gardening"])

        assert result.exit_code == 1
        assert 'No label named "Gardening"' in result.output

    def test_score_breakdown(self):
        result = runner.invoke(app, ["--now", NOW, "score", "database systems problem set 3"])

        assert result.exit_code == 0
        assert "Database systems problem set 3" in result.output
        assert "Urgent label" in result.output
        assert "205" in result.output

    def test_score_completed_task(self):
        result = runner.invoke(app, ["--now", NOW, "score", "Train CNN on CIFAR-10"])

        assert result.exit_code == 0
        assert "completed, not ranked" in result.output

    def test_score_unknown_task(self):
        result = runner.invoke(app, ["--now", NOW, "score", "Write a novel"])

        assert result.exit_code == 1
        assert 'No task named "Write a novel"' in result.output


class TestBoardText:
    """Board text containing markup-like brackets."""

    def test_bracketed_card_name(self, tmp_path):
        board = json.loads(json.dumps(BOARD))
        board["cards"][0]["name"] = "fix [/b] parser"
        path = tmp_path / "board.json"
        path.write_text(json.dumps(board))

        for command in (["analyze"], ["next"], ["tasks"], ["score", "fix [/b] parser"]):
            result = runner.invoke(app, ["--board", str(path), "--now", NOW] + command)
            assert result.exit_code == 0
            assert "fix [/b] parser" in result.output
