"""
Analysis module for Task Flow Analyzer.

Provides categorization, difficulty assessment, pattern building, context
resolution, recommendation scoring, insights and CLI formatting.
"""

from .categorizer import categorize
from .difficulty import assess_difficulty
from .patterns import build_patterns
from .context import resolve_context
from .prioritizer import (
    Prioritizer,
    score_task,
    calculate_urgency_points,
    calculate_urgent_label_points,
    calculate_time_affinity_points,
    calculate_status_points,
    calculate_focus_points,
)
from .insights import summarize
from .analyzer import BoardAnalyzer, BoardAnalysis, analyze_board
from .recommender import Recommendation, recommend_next
from .overview import BoardOverview, build_overview
from .formatter import AnalysisFormatter

__all__ = [
    # Building blocks
    'categorize',
    'assess_difficulty',
    'build_patterns',
    'resolve_context',
    # Prioritizer
    'Prioritizer',
    'score_task',
    'calculate_urgency_points',
    'calculate_urgent_label_points',
    'calculate_time_affinity_points',
    'calculate_status_points',
    'calculate_focus_points',
    # Insights / facade
    'summarize',
    'BoardAnalyzer',
    'BoardAnalysis',
    'analyze_board',
    # Consumers
    'Recommendation',
    'recommend_next',
    'BoardOverview',
    'build_overview',
    'AnalysisFormatter',
]
