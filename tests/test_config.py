"""Tests for the config module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import config
from frogger_models import FroggerID

ADA = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "phone_number": "412-555-0100",
    "zip_code": "15213",
    "state": "PA",
    "gender": "F",
}


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestLoadConfig:
    def test_defaults_when_no_file(self) -> None:
        app_config, resolved_path = config.load_config()
        assert resolved_path is None
        assert app_config.road.pattern == "....."
        assert app_config.records.initial == []

    def test_default_candidate_is_used(self, isolated_config: Path) -> None:
        _write(isolated_config, {"road": {"pattern": ".X."}})
        app_config, resolved_path = config.load_config()
        assert resolved_path == isolated_config
        assert app_config.road.pattern == ".X."

    def test_env_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _write(tmp_path / "custom.json", {"road": {"pattern": "XX"}})
        monkeypatch.setenv("FROGGER_CONFIG_PATH", str(path))
        app_config, resolved_path = config.load_config()
        assert resolved_path == path
        assert app_config.road.pattern == "XX"

    def test_env_pattern_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _write(tmp_path / "custom.json", {"road": {"pattern": "XX"}})
        monkeypatch.setenv("FROGGER_ROAD_PATTERN", " .X.X ")
        app_config, _resolved_path = config.load_config(path)
        assert app_config.road.pattern == ".X.X"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="not valid JSON"):
            config.load_config(path)

    def test_non_object_root(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "list.json", [1, 2])
        with pytest.raises(ValueError, match="JSON object"):
            config.load_config(path)

    @pytest.mark.parametrize("pattern", ["", "   ", ".?X"])
    def test_bad_pattern_rejected(self, tmp_path: Path, pattern: str) -> None:
        path = _write(tmp_path / "bad.json", {"road": {"pattern": pattern}})
        with pytest.raises(ValueError, match="validation failed"):
            config.load_config(path)

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            config.load_config(tmp_path / "missing.json")


class TestBuilders:
    def test_build_road(self, tmp_path: Path) -> None:
        app_config, _ = config.load_config(_write(tmp_path / "c.json", {"road": {"pattern": ".X."}}))
        road = config.build_road(app_config)
        assert road.occupied() == (False, True, False)

    def test_build_records_drops_duplicates(self, tmp_path: Path) -> None:
        payload = {"records": {"initial": [ADA, ADA, {**ADA, "first_name": "Bea"}]}}
        app_config, _ = config.load_config(_write(tmp_path / "c.json", payload))
        records = config.build_records(app_config)
        assert records.records() == [
            FroggerID(**ADA),
            FroggerID(**{**ADA, "first_name": "Bea"}),
        ]

    def test_to_json_round_trips_through_model(self) -> None:
        app_config, _ = config.load_config()
        assert json.loads(config.to_json(app_config)) == app_config.model_dump()


class TestMain:
    def test_main_ok(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert config.main() == 0
        output = json.loads(capsys.readouterr().out)
        assert output["ok"] is True
        assert output["config_path"] is None

    def test_main_error(self, isolated_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
        isolated_config.write_text("[]", encoding="utf-8")
        assert config.main() == 2
        assert json.loads(capsys.readouterr().out)["ok"] is False


class TestGetConfig:
    def test_cached(self, isolated_config: Path) -> None:
        config.get_config.cache_clear()
        try:
            first = config.get_config()
            _write(isolated_config, {"road": {"pattern": "X"}})
            assert config.get_config() is first
        finally:
            config.get_config.cache_clear()
