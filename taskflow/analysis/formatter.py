"""
Rich formatter module for Task Flow Analyzer.

Renders board analyses, next-task recommendations and board overviews as
terminal panels and tables.
"""

from datetime import datetime
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskflow.analysis.analyzer import BoardAnalysis
from taskflow.analysis.overview import BoardOverview
from taskflow.analysis.prioritizer import days_until_due
from taskflow.analysis.recommender import Recommendation
from taskflow.core.models import Board, ProductivityInsights, ScoredTask, Task, TaskPattern


# Difficulty colors
DIFFICULTY_COLORS = {
    "easy": "green",
    "medium": "yellow",
    "hard": "red",
}

# Time of day icons
TIME_OF_DAY_ICONS = {
    "morning": "☀",
    "afternoon": "◑",
    "evening": "☾",
    "night": "★",
}

SCORE_TERM_NAMES = {
    "urgency": "Due date",
    "urgent_label": "Urgent label",
    "time_affinity": "Time of day",
    "in_progress": "In progress",
    "focus": "Focus match",
}


class AnalysisFormatter:
    """
    Rich-based formatter for analysis results.
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize formatter.

        Args:
            console: Rich Console instance (creates default if not provided)
        """
        self.console = console or Console()

    def _format_time_duration(self, minutes: int) -> str:
        """Format duration in human-readable format."""
        if minutes < 60:
            return f"{minutes}m"
        hours = minutes // 60
        mins = minutes % 60
        if mins == 0:
            return f"{hours}h"
        return f"{hours}h {mins}m"

    def _format_difficulty(self, difficulty: str) -> str:
        """Format difficulty as colored word."""
        value = getattr(difficulty, "value", difficulty)
        color = DIFFICULTY_COLORS.get(value, "white")
        return f"[{color}]{value}[/{color}]"

    def _format_due(self, task: Task, now: datetime) -> str:
        """Format due date with color based on urgency."""
        days = days_until_due(task, now)
        if days is None:
            return "[dim]---[/dim]"
        if days < 0:
            abs_days = abs(days)
            return f"[red bold]{abs_days} day{'s' if abs_days != 1 else ''} ago[/red bold]"
        elif days == 0:
            return "[yellow bold]Due today[/yellow bold]"
        elif days == 1:
            return "[yellow]Due tmrw[/yellow]"
        elif days <= 7:
            return f"[white]In {days} days[/white]"
        return f"[dim]{task.due_at.strftime('%b %d')}[/dim]"

    def _truncate(self, text: str, width: int) -> str:
        return text[:width] + "..." if len(text) > width else text

    def format_header(self, analysis: BoardAnalysis, board: Board) -> Panel:
        """Header panel with board name and current context."""
        context = analysis.context
        icon = TIME_OF_DAY_ICONS.get(context.time_of_day.value, "")
        content = Text()
        content.append(f"{board.name or board.id}\n", style="bold")
        content.append(
            f"{icon} {context.time_of_day.value.capitalize()} • "
            f"focus {context.focus_level.value} • "
            f"{context.now.strftime('%A, %B %d %H:%M')}",
            style="dim",
        )
        return Panel(
            content,
            title="[bold]Task Flow[/bold]",
            title_align="center",
            border_style="blue",
            padding=(0, 2),
        )

    def format_top_tasks(self, top_tasks: List[ScoredTask], now: datetime) -> Panel:
        """
        Create panel showing ranked tasks.

        Args:
            top_tasks: Ranked tasks, highest score first
            now: Reference instant for due dates

        Returns:
            Rich Panel with ranked list
        """
        if not top_tasks:
            return Panel(
                Text("No active tasks", style="dim", justify="center"),
                title="[bold]Do Next[/bold]",
                border_style="green",
                padding=(0, 1),
            )

        table = Table(show_header=False, box=None, padding=(0, 1), expand=True)
        table.add_column("#", width=3)
        table.add_column("Title", ratio=1)
        table.add_column("Labels", width=20)
        table.add_column("Due", width=12, justify="right")
        table.add_column("Score", width=5, justify="right")

        for i, scored in enumerate(top_tasks, 1):
            task = scored.task
            table.add_row(
                f"[bold]{i}.[/bold]",
                escape(self._truncate(task.name, 35)),
                f"[dim]{escape(', '.join(task.label_names))}[/dim]",
                self._format_due(task, now),
                f"[bold]{scored.score:g}[/bold]",
            )

        return Panel(table, title="[bold]Do Next[/bold]", border_style="green", padding=(0, 1))

    def format_patterns(self, patterns: List[TaskPattern]) -> Panel:
        """Create table of category patterns."""
        table = Table(expand=True, box=None, padding=(0, 1))
        table.add_column("Category", style="cyan")
        table.add_column("Tasks", justify="right")
        table.add_column("Avg time", justify="right")
        table.add_column("Difficulty")
        table.add_column("Success", justify="right")
        table.add_column("Best time", style="dim")

        for pattern in patterns:
            avg = (
                self._format_time_duration(pattern.avg_completion_minutes)
                if pattern.avg_completion_minutes
                else "[dim]---[/dim]"
            )
            table.add_row(
                escape(pattern.category),
                str(pattern.task_count),
                avg,
                self._format_difficulty(pattern.difficulty),
                f"{pattern.success_rate_pct}%",
                escape(pattern.best_time_of_day),
            )

        return Panel(table, title="[bold]Patterns[/bold]", border_style="magenta", padding=(0, 1))

    def format_stats_bar(self, insights: ProductivityInsights) -> str:
        """
        Create bottom stats bar.

        Args:
            insights: Board insights

        Returns:
            Formatted stats string
        """
        parts = [
            f"[white]{insights.total_tasks} tasks[/white]",
            f"[green]✓ {insights.completed_tasks} done[/green]",
            f"[dim]{insights.completion_rate_pct:.1f}% complete[/dim]",
        ]
        if insights.avg_completion_minutes:
            parts.append(
                f"[dim]~{self._format_time_duration(insights.avg_completion_minutes)} per task[/dim]"
            )
        parts.append(f"[cyan]peak: {escape(insights.most_productive_time)}[/cyan]")
        return " │ ".join(parts)

    def render_analysis(self, analysis: BoardAnalysis, board: Board) -> None:
        """
        Render a complete analysis to console.

        Args:
            analysis: Board analysis
            board: Analyzed board
        """
        self.console.print(self.format_header(analysis, board))
        self.console.print()
        self.console.print(self.format_top_tasks(analysis.top_tasks, analysis.context.now))
        self.console.print()
        self.console.print(self.format_patterns(analysis.patterns))
        self.console.print()
        self.console.print("─" * 60)
        self.console.print(self.format_stats_bar(analysis.insights), justify="center")
        self.console.print("─" * 60)

    def render_insights(self, insights: ProductivityInsights) -> None:
        """Render insights with category breakdown."""
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Metric", style="dim")
        table.add_column("Value")
        table.add_row("Total tasks", str(insights.total_tasks))
        table.add_row("Completed", str(insights.completed_tasks))
        table.add_row("Completion rate", f"{insights.completion_rate_pct:.1f}%")
        table.add_row("Avg task time", f"{insights.avg_completion_minutes} minutes")
        table.add_row("Most productive", escape(insights.most_productive_time))
        for category, count in insights.category_breakdown.items():
            table.add_row(f"  {escape(category)}", str(count))

        self.console.print(
            Panel(table, title="[bold]Productivity Insights[/bold]", border_style="cyan")
        )
        if insights.patterns:
            self.console.print(self.format_patterns(insights.patterns))

    def render_recommendation(self, recommendation: Recommendation) -> None:
        """Render a next-task recommendation."""
        task = recommendation.task
        content = Text()
        content.append(f"{task.name}\n", style="bold")
        if task.description:
            content.append(f"{self._truncate(task.description, 120)}\n", style="dim")
        if recommendation.list_name:
            content.append(f"List: {recommendation.list_name}\n")
        content.append(
            f"Estimated: ~{self._format_time_duration(recommendation.estimated_minutes)}"
            f" • confidence {recommendation.confidence:.0%}\n"
        )
        if recommendation.reasons:
            content.append("Why: " + ". ".join(recommendation.reasons), style="green")

        self.console.print(
            Panel(content, title="[bold]Next Task[/bold]", border_style="green", padding=(0, 2))
        )

        if recommendation.alternatives:
            self.console.print(self._format_alternatives(recommendation.alternatives))

    def render_task_score(
        self,
        scored: ScoredTask,
        now: datetime,
        list_name: Optional[str] = None,
        completed: bool = False
    ) -> None:
        """Render one task's score with its per-term breakdown."""
        task = scored.task
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Term", style="dim")
        table.add_column("Points", justify="right")
        for term, points in scored.breakdown.items():
            table.add_row(SCORE_TERM_NAMES.get(term, term), f"{points:g}")
        table.add_row("[bold]Total[/bold]", f"[bold]{scored.score:g}[/bold]")

        subtitle = self._format_due(task, now)
        if list_name:
            subtitle = f"{escape(list_name)} • {subtitle}"
        if completed:
            subtitle += " • [green]completed, not ranked[/green]"

        self.console.print(
            Panel(
                table,
                title=f"[bold]{escape(task.name)}[/bold]",
                subtitle=subtitle,
                border_style="blue",
                padding=(0, 2),
            )
        )

    def _format_alternatives(self, alternatives: List[ScoredTask]) -> Panel:
        table = Table(show_header=False, box=None, padding=(0, 1), expand=True)
        table.add_column("Title", ratio=1)
        table.add_column("Score", width=5, justify="right")
        for scored in alternatives:
            table.add_row(escape(self._truncate(scored.task.name, 45)), f"{scored.score:g}")
        return Panel(table, title="[bold]Alternatives[/bold]", border_style="white", padding=(0, 1))

    def render_overview(self, overview: BoardOverview, now: datetime) -> None:
        """Render active tasks grouped by list."""
        if not overview.tasks_by_list:
            self.console.print("[dim]No active tasks[/dim]")
        for list_name, tasks in overview.tasks_by_list.items():
            table = Table(show_header=False, box=None, padding=(0, 1), expand=True)
            table.add_column("Title", ratio=1)
            table.add_column("Labels", width=20)
            table.add_column("Due", width=12, justify="right")
            for task in tasks:
                urgent = "[red]![/red] " if task.has_label("Urgent") else ""
                table.add_row(
                    urgent + escape(self._truncate(task.name, 40)),
                    f"[dim]{escape(', '.join(task.label_names))}[/dim]",
                    self._format_due(task, now),
                )
            self.console.print(
                Panel(table, title=f"[bold]{escape(list_name)} ({len(tasks)})[/bold]", padding=(0, 1))
            )
        self.console.print(
            f"[white]{overview.total_active} active[/white] │ "
            f"[green]✓ {overview.total_completed} completed[/green]"
        )
