"""Tests for seedling.core.settings – defaults and environment overrides."""

from __future__ import annotations

from fractions import Fraction
from pathlib import Path

import pytest

from seedling.core.settings import POINTS_PER_ITEM, POINTS_PER_LEVEL, Settings


class TestDefaults:
    def test_values(self):
        s = Settings()
        assert s.points_per_level == POINTS_PER_LEVEL == 50
        assert s.points_per_item == POINTS_PER_ITEM == 10
        assert s.catalog_path is None
        assert s.log_level == "INFO"

    def test_progress_per_point(self):
        assert Settings().progress_per_point == Fraction(1, 50)
        assert Settings(points_per_level=8).progress_per_point == Fraction(1, 8)


class TestFromEnv:
    def test_empty_env_gives_defaults(self):
        assert Settings.from_env({}) == Settings()

    def test_overrides(self):
        s = Settings.from_env(
            {
                "SEEDLING_POINTS_PER_LEVEL": "20",
                "SEEDLING_POINTS_PER_ITEM": "5",
                "SEEDLING_CATALOG": "/tmp/catalog.yaml",
                "SEEDLING_LOG_LEVEL": "debug",
            }
        )
        assert s.points_per_level == 20
        assert s.points_per_item == 5
        assert s.catalog_path == Path("/tmp/catalog.yaml")
        assert s.log_level == "DEBUG"

    def test_blank_values_fall_back(self):
        s = Settings.from_env({"SEEDLING_POINTS_PER_LEVEL": "  ", "SEEDLING_CATALOG": ""})
        assert s.points_per_level == 50
        assert s.catalog_path is None

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SEEDLING_POINTS_PER_ITEM", "7")
        assert Settings.from_env().points_per_item == 7

    def test_non_integer(self):
        with pytest.raises(ValueError, match="SEEDLING_POINTS_PER_LEVEL must be an integer"):
            Settings.from_env({"SEEDLING_POINTS_PER_LEVEL": "lots"})

    @pytest.mark.parametrize("raw", ["0", "-4"])
    def test_non_positive(self, raw: str):
        with pytest.raises(ValueError, match="must be positive"):
            Settings.from_env({"SEEDLING_POINTS_PER_ITEM": raw})
