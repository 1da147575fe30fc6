"""
Board analysis entry point.

Composes categorization, pattern building, context resolution, ranking and
insight aggregation into a single call.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from taskflow.analysis.context import resolve_context
from taskflow.analysis.insights import summarize
from taskflow.analysis.patterns import build_patterns
from taskflow.analysis.prioritizer import Prioritizer
from taskflow.core.config import AnalyzerConfig
from taskflow.core.models import (
    Board,
    ProductivityInsights,
    ScoredTask,
    TaskPattern,
    UserContext,
)
from taskflow.core.status import StatusClassifier, StatusOf

logger = logging.getLogger(__name__)


@dataclass
class BoardAnalysis:
    """Complete analysis result"""
    insights: ProductivityInsights
    patterns: List[TaskPattern]
    top_tasks: List[ScoredTask]
    context: UserContext


class BoardAnalyzer:
    """
    Central analysis for a board snapshot.

    Each call recomputes everything from the board; nothing is cached
    between calls.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        status_of: Optional[StatusOf] = None
    ):
        """
        Initialize analyzer.

        Args:
            config: Lookup tables (creates default if not provided)
            status_of: List status classifier; when omitted, one is built per
                board by matching list names
        """
        self.config = config if config else AnalyzerConfig()
        self.status_of = status_of

    def status_classifier_for(self, board: Board) -> StatusOf:
        """Injected classifier, or name matching over the board's lists"""
        if self.status_of is not None:
            return self.status_of
        return StatusClassifier.from_board(board, self.config)

    def analyze(self, board: Board, now: Optional[datetime] = None) -> BoardAnalysis:
        """
        Analyze a board.

        Args:
            board: Board snapshot
            now: Current instant (reads the local clock if not provided)

        Returns:
            BoardAnalysis with insights, patterns, top tasks and context
        """
        if now is None:
            now = datetime.now().astimezone()

        status_of = self.status_classifier_for(board)
        patterns = build_patterns(board.tasks, self.config)
        insights = summarize(board, status_of, self.config, patterns)
        context = resolve_context(now)

        prioritizer = Prioritizer(self.config, status_of)
        top_tasks = prioritizer.get_top_priorities(board.tasks, context)

        logger.debug(
            "Analyzed %d tasks across %d categories (%s, focus %s)",
            insights.total_tasks, len(patterns),
            context.time_of_day.value, context.focus_level.value
        )

        return BoardAnalysis(
            insights=insights,
            patterns=patterns,
            top_tasks=top_tasks,
            context=context,
        )


def analyze_board(
    board: Board,
    now: Optional[datetime] = None,
    config: Optional[AnalyzerConfig] = None,
    status_of: Optional[StatusOf] = None
) -> BoardAnalysis:
    """Analyze a board with a one-off BoardAnalyzer"""
    return BoardAnalyzer(config, status_of).analyze(board, now)
