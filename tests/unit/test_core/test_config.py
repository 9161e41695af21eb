"""
Unit tests for the settings module.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings


class TestSettingsDefaults:
    def test_defaults(self, monkeypatch) -> None:
        for name in (
            "STRUCTURES_SERVICE_NAME",
            "STRUCTURES_LOG_LEVEL",
            "STRUCTURES_LOG_FILE_PATH",
            "STRUCTURES_DIJKSTRA_SELECTION",
            "STRUCTURES_LOG_EDGE_INSERTIONS",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.service_name == "structures-toolkit"
        assert settings.log_level == "INFO"
        assert settings.log_file_path is None
        assert settings.dijkstra_selection == "scan"
        assert settings.log_edge_insertions is True


class TestSettingsFromEnvironment:
    def test_env_prefix(self, monkeypatch) -> None:
        monkeypatch.setenv("STRUCTURES_DIJKSTRA_SELECTION", "heap")
        monkeypatch.setenv("STRUCTURES_LOG_EDGE_INSERTIONS", "false")
        monkeypatch.setenv("STRUCTURES_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.dijkstra_selection == "heap"
        assert settings.log_edge_insertions is False
        assert settings.log_level == "DEBUG"

    def test_env_is_case_insensitive(self, monkeypatch) -> None:
        monkeypatch.setenv("structures_service_name", "graphs")

        assert Settings(_env_file=None).service_name == "graphs"

    def test_invalid_selection_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("STRUCTURES_DIJKSTRA_SELECTION", "bellman-ford")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_env_file(self, tmp_path, monkeypatch) -> None:
        monkeypatch.delenv("STRUCTURES_DIJKSTRA_SELECTION", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("STRUCTURES_DIJKSTRA_SELECTION=heap\n", encoding="utf-8")

        assert Settings(_env_file=env_file).dijkstra_selection == "heap"


class TestGetSettings:
    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("STRUCTURES_SERVICE_NAME", "first")
        first = get_settings()
        monkeypatch.setenv("STRUCTURES_SERVICE_NAME", "second")
        get_settings.cache_clear()

        assert first.service_name == "first"
        assert get_settings().service_name == "second"
