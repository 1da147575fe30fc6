"""
Board loading from JSON records.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from taskflow.core.models import Board

logger = logging.getLogger(__name__)


class BoardLoadError(Exception):
    """Raised when a board file cannot be read or parsed"""

    def __init__(self, message: str, path: Union[str, Path, None] = None):
        super().__init__(message)
        self.path = path


def board_from_dict(data: Dict[str, Any]) -> Board:
    """
    Build a Board from a record dictionary.

    Dangling label references are dropped; unknown list ids are kept and
    classified as todo later on.
    """
    board = Board.from_dict(data)
    known_lists = {task_list.id for task_list in board.lists}
    dangling = [task.id for task in board.tasks if task.list_id not in known_lists]
    if dangling:
        logger.warning(
            "Board %s has %d task(s) in unknown lists: %s",
            board.id, len(dangling), ", ".join(dangling)
        )
    logger.debug(
        "Loaded board %s: %d lists, %d labels, %d tasks",
        board.id, len(board.lists), len(board.labels), len(board.tasks)
    )
    return board


def load_board_file(path: Union[str, Path]) -> Board:
    """
    Load a board from a JSON file.

    Args:
        path: Path to a JSON board export

    Returns:
        Parsed Board

    Raises:
        BoardLoadError: If the file is missing or not a JSON object
    """
    path = Path(path)
    if not path.exists():
        raise BoardLoadError(f"Board file not found: {path}", path)

    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise BoardLoadError(f"Invalid JSON in board file {path}: {e}", path) from e

    if not isinstance(data, dict):
        raise BoardLoadError(f"Board file {path} must contain a JSON object", path)

    return board_from_dict(data)
