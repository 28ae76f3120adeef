"""
Test fixtures for the resume analyzer tests
"""

import pytest

import analyzer_config

ENV_VARS = ("APP_TITLE", "ACCEPTED_FILE_TYPES", "SHOW_SCORE_CHART", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove analyzer settings from the environment and reset the global config"""
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(analyzer_config, "_config", None)
    return monkeypatch


@pytest.fixture
def mock_env(clean_env):
    """Set non-default analyzer settings"""
    env_vars = {
        "APP_TITLE": "Test Analyzer",
        "ACCEPTED_FILE_TYPES": ".PDF, txt,pdf",
        "SHOW_SCORE_CHART": "false",
        "LOG_LEVEL": "debug",
    }
    for key, value in env_vars.items():
        clean_env.setenv(key, value)
    return env_vars
