"""
Configuration management for Task Flow Analyzer
Handles analysis lookup tables and user settings stored as JSON
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional


DEFAULT_BEST_TIME_BY_CATEGORY: Dict[str, str] = {
    "Study": "morning (9-11am)",
    "AI/ML": "morning (10am-12pm)",
    "Practice": "afternoon (2-4pm)",
    "Project": "evening (7-9pm)",
    "Research": "morning (9-11am)",
    "Work": "afternoon (1-5pm)",
    "Urgent": "immediate",
}

DEFAULT_TIME_AFFINITY: Dict[str, List[str]] = {
    "morning": ["Study", "AI/ML", "Research"],
    "afternoon": ["Practice", "Work"],
    "evening": ["Project"],
    "night": [],
}

DEFAULT_DONE_KEYWORDS: List[str] = ["done", "complete"]
DEFAULT_IN_PROGRESS_KEYWORDS: List[str] = ["in progress", "in-progress", "doing"]


@dataclass
class AnalyzerConfig:
    """Swappable lookup tables and constants used by the analysis engine"""
    best_time_by_category: Dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_BEST_TIME_BY_CATEGORY)
    )
    default_best_time: str = "flexible"
    time_affinity: Dict[str, List[str]] = field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_TIME_AFFINITY.items()}
    )
    done_keywords: List[str] = field(default_factory=lambda: list(DEFAULT_DONE_KEYWORDS))
    in_progress_keywords: List[str] = field(
        default_factory=lambda: list(DEFAULT_IN_PROGRESS_KEYWORDS)
    )
    default_productive_time: str = "morning (9-11am)"
    top_n: int = 5

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'AnalyzerConfig':
        """
        Build config from overrides, falling back to defaults per key.

        Lookup tables are merged over the defaults, so an override file only
        needs the entries it changes.
        """
        config = cls()
        if not data:
            return config

        config.best_time_by_category.update(data.get("best_time_by_category", {}))
        for time_of_day, categories in data.get("time_affinity", {}).items():
            config.time_affinity[time_of_day] = list(categories)
        if "done_keywords" in data:
            config.done_keywords = list(data["done_keywords"])
        if "in_progress_keywords" in data:
            config.in_progress_keywords = list(data["in_progress_keywords"])
        config.default_best_time = data.get("default_best_time", config.default_best_time)
        config.default_productive_time = data.get(
            "default_productive_time", config.default_productive_time
        )
        config.top_n = int(data.get("top_n", config.top_n))
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dictionary"""
        return {
            "best_time_by_category": dict(self.best_time_by_category),
            "default_best_time": self.default_best_time,
            "time_affinity": {k: list(v) for k, v in self.time_affinity.items()},
            "done_keywords": list(self.done_keywords),
            "in_progress_keywords": list(self.in_progress_keywords),
            "default_productive_time": self.default_productive_time,
            "top_n": self.top_n,
        }


class Config:
    """Configuration manager for the analyzer CLI"""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize configuration manager

        Args:
            config_dir: Path to configuration directory (defaults to ./config)
        """
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.settings_file = self.config_dir / "settings.json"
        self.analysis_file = self.config_dir / "analysis.json"

        # Load configurations
        self.settings = self._load_json(self.settings_file, self._default_settings())
        self.analysis = self._load_json(self.analysis_file, AnalyzerConfig().to_dict())

    def _load_json(self, file_path: Path, default: Dict[str, Any]) -> Dict[str, Any]:
        """Load JSON file or return default if file doesn't exist"""
        if file_path.exists():
            with open(file_path, 'r') as f:
                return json.load(f)
        else:
            # Create file with defaults
            self._save_json(file_path, default)
            return default

    def _save_json(self, file_path: Path, data: Dict[str, Any]) -> None:
        """Save data to JSON file"""
        with open(file_path, 'w') as f:
            json.dump(data, f, indent=2)

    def _default_settings(self) -> Dict[str, Any]:
        """Default CLI settings"""
        return {
            "board_path": None,
            "log_level": "WARNING",
        }

    def get(self, key: str, section: str = "settings", default: Any = None) -> Any:
        """
        Get configuration value

        Args:
            key: Configuration key
            section: Configuration section ('settings', 'analysis')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        section_map = {
            "settings": self.settings,
            "analysis": self.analysis,
        }

        return section_map.get(section, {}).get(key, default)

    def get_analyzer_config(self) -> AnalyzerConfig:
        """Build the engine configuration from the analysis section"""
        return AnalyzerConfig.from_dict(self.analysis)

    def get_board_path(self) -> Optional[Path]:
        """Get configured default board file, if any"""
        board_path = self.settings.get("board_path")
        if not board_path:
            return None
        path = Path(board_path)
        if not path.is_absolute():
            path = self.config_dir / path
        return path
