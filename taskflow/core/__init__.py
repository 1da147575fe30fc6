"""
Core module for Task Flow Analyzer
Contains configuration, board models, status classification and loading
"""

from .config import Config, AnalyzerConfig
from .models import (
    Board,
    Label,
    Task,
    TaskList,
    TaskPattern,
    UserContext,
    ScoredTask,
    ProductivityInsights,
    Difficulty,
    TimeOfDay,
    FocusLevel,
    TaskStatus,
)
from .status import StatusClassifier
from .loader import BoardLoadError, board_from_dict, load_board_file
from .sample_board import build_sample_board

__all__ = [
    'Config', 'AnalyzerConfig',
    'Board', 'Label', 'Task', 'TaskList',
    'TaskPattern', 'UserContext', 'ScoredTask', 'ProductivityInsights',
    'Difficulty', 'TimeOfDay', 'FocusLevel', 'TaskStatus',
    'StatusClassifier',
    'BoardLoadError', 'board_from_dict', 'load_board_file',
    'build_sample_board',
]
