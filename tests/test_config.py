"""Tests for PipelineConfig."""

from __future__ import annotations

from pathlib import Path

import pytest

from exo_explorer.config import DAY_SECONDS, HOUR_SECONDS, PipelineConfig, default_cache_dir


class TestPipelineConfig:
    def test_defaults(self) -> None:
        config = PipelineConfig()
        assert config.tap_endpoint.endswith("/TAP/sync")
        assert config.timeout_seconds == 30.0
        assert config.fresh_max_age_seconds == DAY_SECONDS
        assert config.usable_max_age_seconds == 7 * DAY_SECONDS
        assert config.cache_truncate_fraction == 0.8

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError, match="timeout_seconds"):
            PipelineConfig(timeout_seconds=0)

    def test_rejects_fresh_window_wider_than_usable(self) -> None:
        with pytest.raises(ValueError):
            PipelineConfig(fresh_max_age_seconds=8 * DAY_SECONDS)

    def test_with_overrides_returns_new_instance(self) -> None:
        config = PipelineConfig()
        other = config.with_overrides(timeout_seconds=5.0)
        assert other.timeout_seconds == 5.0
        assert config.timeout_seconds == 30.0


class TestFromEnv:
    def test_reads_variables(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv("EXO_EXPLORER_TAP_ENDPOINT", " https://example.test/TAP/sync ")
        monkeypatch.setenv("EXO_EXPLORER_TIMEOUT", "12.5")
        monkeypatch.setenv("EXO_EXPLORER_FRESH_HOURS", "6")
        monkeypatch.setenv("EXO_EXPLORER_USABLE_DAYS", "2")
        monkeypatch.setenv("EXO_EXPLORER_CACHE_DIR", str(tmp_path))

        config = PipelineConfig.from_env()

        assert config.tap_endpoint == "https://example.test/TAP/sync"
        assert config.timeout_seconds == 12.5
        assert config.fresh_max_age_seconds == 6 * HOUR_SECONDS
        assert config.usable_max_age_seconds == 2 * DAY_SECONDS
        assert config.resolved_cache_dir() == tmp_path

    def test_invalid_number_names_variable(self, monkeypatch) -> None:
        monkeypatch.setenv("EXO_EXPLORER_TIMEOUT", "soon")
        with pytest.raises(ValueError, match="EXO_EXPLORER_TIMEOUT"):
            PipelineConfig.from_env()

    def test_default_cache_dir_override(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv("EXO_EXPLORER_CACHE_DIR", str(tmp_path / "c"))
        assert default_cache_dir() == tmp_path / "c"

    def test_default_cache_dir_uses_platformdirs(self, monkeypatch) -> None:
        monkeypatch.delenv("EXO_EXPLORER_CACHE_DIR", raising=False)
        assert "exo-explorer" in str(default_cache_dir())
