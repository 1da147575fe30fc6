#!/usr/bin/env python3
"""
Task Flow Analyzer - Command Line Interface
Analyze a task board, show productivity insights and recommend what to do next
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape

from taskflow.analysis import (
    AnalysisFormatter,
    BoardAnalyzer,
    build_overview,
    recommend_next,
    resolve_context,
    score_task,
    summarize,
)
from taskflow.core import (
    AnalyzerConfig,
    Board,
    BoardLoadError,
    Config,
    StatusClassifier,
    build_sample_board,
    load_board_file,
)
from taskflow.core.models import parse_datetime
from taskflow.core.status import is_completed

app = typer.Typer(help="Task Flow Analyzer - learn from your board and pick the next task")

console = Console()

# Populated by the global options callback
_state: Dict[str, Any] = {}


@app.callback()
def main(
    board_path: Optional[Path] = typer.Option(
        None, "--board", "-b", help="Board JSON export (uses the sample board if omitted)"
    ),
    now_str: Optional[str] = typer.Option(
        None, "--now", help="Analyze as of this ISO timestamp instead of the current time"
    ),
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir", help="Directory with settings.json and analysis.json"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Global options shared by every command."""
    config = Config(config_dir) if config_dir else None

    level = "DEBUG" if verbose else (config.get("log_level", default="WARNING") if config else "WARNING")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    now: Optional[datetime] = None
    if now_str:
        now = parse_datetime(now_str)
        if now is None:
            console.print(f"[red]Error: invalid --now timestamp: {escape(now_str)}[/red]")
            raise typer.Exit(1)

    _state["board_path"] = board_path or (config.get_board_path() if config else None)
    _state["now"] = now or datetime.now().astimezone()
    _state["analyzer_config"] = config.get_analyzer_config() if config else AnalyzerConfig()


def _load_board() -> Board:
    """Load the configured board file, or fall back to the sample board."""
    board_path = _state.get("board_path")
    if board_path is None:
        return build_sample_board(_state["now"])
    try:
        return load_board_file(board_path)
    except BoardLoadError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def analyze():
    """
    Analyze the board

    Shows the ranked "do next" list, per-category patterns and board stats.
    """
    board = _load_board()
    analyzer = BoardAnalyzer(_state["analyzer_config"])
    analysis = analyzer.analyze(board, _state["now"])

    formatter = AnalysisFormatter(console)
    formatter.render_analysis(analysis, board)


@app.command("next")
def next_task(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only consider this category"),
):
    """
    Recommend the next task

    Example:
      taskflow next --category Study
    """
    board = _load_board()
    if category and board.find_label_by_name(category) is None:
        console.print(f"[red]No label named \"{escape(category)}\"[/red]")
        raise typer.Exit(1)

    analyzer = BoardAnalyzer(_state["analyzer_config"])
    analysis = analyzer.analyze(board, _state["now"])

    recommendation = recommend_next(analysis, board, category)
    if recommendation is None:
        console.print("[yellow]No matching active tasks found.[/yellow]")
        raise typer.Exit(1)

    AnalysisFormatter(console).render_recommendation(recommendation)


@app.command()
def score(
    name: str = typer.Argument(..., help="Task name (case-insensitive)"),
):
    """
    Explain how a task is scored right now

    Example:
      taskflow score "Read transformer paper"
    """
    board = _load_board()
    task = board.find_task_by_name(name)
    if task is None:
        console.print(f"[red]No task named \"{escape(name)}\"[/red]")
        raise typer.Exit(1)

    analyzer = BoardAnalyzer(_state["analyzer_config"])
    status_of = analyzer.status_classifier_for(board)
    context = resolve_context(_state["now"])
    scored = score_task(task, context, status_of, analyzer.config)

    task_list = board.get_list(task.list_id)
    AnalysisFormatter(console).render_task_score(
        scored,
        _state["now"],
        list_name=task_list.name if task_list else None,
        completed=is_completed(task, status_of),
    )


@app.command()
def insights():
    """Show productivity insights"""
    board = _load_board()
    summary = summarize(board, config=_state["analyzer_config"])
    AnalysisFormatter(console).render_insights(summary)


@app.command()
def tasks(
    list_name: Optional[str] = typer.Option(None, "--list", "-l", help="Only show this list"),
):
    """List active tasks grouped by list"""
    board = _load_board()
    if list_name and board.find_list_by_name(list_name) is None:
        console.print(f"[red]No list named \"{escape(list_name)}\"[/red]")
        raise typer.Exit(1)

    status_of = StatusClassifier.from_board(board, _state["analyzer_config"])
    overview = build_overview(board, status_of, list_name)
    AnalysisFormatter(console).render_overview(overview, _state["now"])


if __name__ == "__main__":
    app()
