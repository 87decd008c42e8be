"""Tests for configuration helpers and static table loading."""

from __future__ import annotations

import json

import pytest

from exposure_src import config
from exposure_src.core.errors import ConfigurationError
from exposure_src.data import DEFAULT_SECTOR_MAP, build_sector_map, load_canonical_map, load_sector_map


class TestEnvHelpers:
    def test_float_default_when_unset(self, monkeypatch) -> None:
        monkeypatch.delenv("EXPOSURE_TEST_FLOAT", raising=False)
        assert config._env_float("EXPOSURE_TEST_FLOAT", 10.0) == 10.0

    def test_float_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("EXPOSURE_TEST_FLOAT", "7.5")
        assert config._env_float("EXPOSURE_TEST_FLOAT", 10.0) == 7.5

    def test_float_invalid(self, monkeypatch) -> None:
        monkeypatch.setenv("EXPOSURE_TEST_FLOAT", "ten")
        with pytest.raises(ValueError, match="EXPOSURE_TEST_FLOAT"):
            config._env_float("EXPOSURE_TEST_FLOAT", 10.0)

    def test_int_blank_is_default(self, monkeypatch) -> None:
        monkeypatch.setenv("EXPOSURE_TEST_INT", "  ")
        assert config._env_int("EXPOSURE_TEST_INT", 20) == 20

    def test_int_invalid(self, monkeypatch) -> None:
        monkeypatch.setenv("EXPOSURE_TEST_INT", "2.5")
        with pytest.raises(ValueError):
            config._env_int("EXPOSURE_TEST_INT", 20)

    def test_relative_path_resolved_from_project_root(self, monkeypatch) -> None:
        monkeypatch.setenv("EXPOSURE_TEST_PATH", "tables/sectors.json")
        assert config._env_path("EXPOSURE_TEST_PATH") == config.PROJECT_ROOT / "tables/sectors.json"

    def test_unset_path(self, monkeypatch) -> None:
        monkeypatch.delenv("EXPOSURE_TEST_PATH", raising=False)
        assert config._env_path("EXPOSURE_TEST_PATH") is None


class TestSectorTable:
    def test_builtin_table(self) -> None:
        table = load_sector_map()
        assert table["AAPL"] == "Tech"
        assert table["JPM"] == "Finance"
        assert "GOOG" not in table
        with pytest.raises(TypeError):
            table["AAPL"] = "Other"  # type: ignore[index]

    def test_first_sector_wins(self) -> None:
        assert build_sector_map({"A": ["x"], "B": ["X", "y"]}) == {"X": "A", "Y": "B"}

    def test_builtin_table_has_no_blank_keys(self) -> None:
        assert all(k and k == k.strip().upper() for k in DEFAULT_SECTOR_MAP)

    def test_load_from_file(self, tmp_path) -> None:
        path = tmp_path / "sectors.json"
        path.write_text(json.dumps({"Semis": ["nvda", "AMD"]}))
        assert dict(load_sector_map(path)) == {"NVDA": "Semis", "AMD": "Semis"}

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_sector_map(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "sectors.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_sector_map(path)

    def test_wrong_shape(self, tmp_path) -> None:
        path = tmp_path / "sectors.json"
        path.write_text(json.dumps({"AAPL": "Tech"}))
        with pytest.raises(ConfigurationError):
            load_sector_map(path)


class TestCanonicalTable:
    def test_builtin_table(self) -> None:
        assert dict(load_canonical_map()) == {"GOOG": "GOOGL", "BRK.A": "BRK.B"}

    def test_load_from_file(self, tmp_path) -> None:
        path = tmp_path / "aliases.json"
        path.write_text(json.dumps({"fox": "foxa"}))
        assert dict(load_canonical_map(path)) == {"FOX": "FOXA"}

    def test_wrong_shape(self, tmp_path) -> None:
        path = tmp_path / "aliases.json"
        path.write_text(json.dumps(["GOOG", "GOOGL"]))
        with pytest.raises(ConfigurationError):
            load_canonical_map(path)
