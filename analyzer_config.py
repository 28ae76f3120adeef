"""
Configuration for the resume analyzer
Loads settings from .env and provides typed access to configuration values
"""

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_file_types(value: str) -> List[str]:
    types = []
    for part in value.split(","):
        ext = part.strip().lstrip(".").lower()
        if ext and ext not in types:
            types.append(ext)
    return types


class Config:
    """Configuration manager for the analyzer page"""

    def __init__(self):
        self.app_title = os.getenv("APP_TITLE", "Resume Analyzer")
        self.accepted_file_types = _parse_file_types(
            os.getenv("ACCEPTED_FILE_TYPES", "pdf,doc,docx")
        )
        self.show_score_chart = _parse_bool(os.getenv("SHOW_SCORE_CHART", "true"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    def validate(self) -> List[str]:
        """Return a list of configuration problems (empty when valid)"""
        errors = []
        if self.log_level not in LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )
        if not self.accepted_file_types:
            errors.append("ACCEPTED_FILE_TYPES must list at least one extension")
        return errors


_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance"""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config() -> Config:
    """Rebuild the global configuration from the current environment"""
    global _config
    _config = Config()
    return _config
