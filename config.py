"""
config.py

Typed configuration loading and validation for Frogger.

Design goals
- Load at most one UTF-8 JSON config file
- Validate with pydantic (defaults included)
- Support environment variable overrides
- No other I/O beyond reading the config file

Config file location
- If FROGGER_CONFIG_PATH is set, that file is used.
- Otherwise Frogger searches these paths in order and uses the first one that exists:
  1) ./frogger_config.json (current working directory)
  2) <user config dir>/Frogger/Frogger/frogger_config.json
  3) <user config dir>/Frogger/Frogger/config.json
- If none exists, built-in defaults are used.

Example config file (frogger_config.json)
{
  "road": {
    "pattern": "..X..X."
  },
  "records": {
    "initial": [
      {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "phone_number": "412-555-0100",
        "zip_code": "15213",
        "state": "PA",
        "gender": "F"
      }
    ]
  }
}
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError, field_validator

from frogger_models import FroggerID
from records import Records
from road import Road


class RoadConfig(BaseModel):
    pattern: str = Field(default=".....", description="Lane pattern. X marks an occupied position, . a free one.")

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, value: str) -> str:
        trimmed = (value or "").strip()
        if not trimmed:
            raise ValueError("pattern must contain at least one position")
        Road.from_pattern(trimmed)
        return trimmed


class FroggerIDConfig(BaseModel):
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    zip_code: str = ""
    state: str = Field(default="", description="Two-letter state code. Example: PA")
    gender: str = ""

    def to_frogger_id(self) -> FroggerID:
        return FroggerID.from_mapping(self.model_dump())


class RecordsConfig(BaseModel):
    initial: List[FroggerIDConfig] = Field(default_factory=list, description="Records stored before any game input.")


class AppConfig(BaseModel):
    road: RoadConfig = Field(default_factory=RoadConfig)
    records: RecordsConfig = Field(default_factory=RecordsConfig)


def _default_config_candidates() -> List[Path]:
    config_directory = Path(user_config_dir("Frogger", "Frogger"))
    return [
        Path.cwd() / "frogger_config.json",
        config_directory / "frogger_config.json",
        config_directory / "config.json",
    ]


def _resolve_config_path() -> Optional[Path]:
    explicit_path_text = os.environ.get("FROGGER_CONFIG_PATH", "").strip()
    if explicit_path_text:
        return Path(explicit_path_text)

    for candidate_path in _default_config_candidates():
        if candidate_path.exists():
            return candidate_path

    return None


def _read_json_file_utf8(config_path: Path) -> Dict[str, Any]:
    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except OSError as exception:
        raise OSError(f"Failed to read config file: {config_path}. Error: {exception}") from exception

    try:
        parsed = json.loads(raw_text)
    except json.JSONDecodeError as exception:
        raise ValueError(f"Config file is not valid JSON: {config_path}. Error: {exception}") from exception

    if not isinstance(parsed, dict):
        raise ValueError(f"Config file root must be a JSON object: {config_path}")

    return parsed


def _apply_environment_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Environment overrides are optional. The config file is the primary source of truth.

    Override variables:
    - FROGGER_ROAD_PATTERN
    """
    updated_config = dict(config_dict)

    road_section = updated_config.get("road")
    if not isinstance(road_section, dict):
        road_section = {}
    road_section = dict(road_section)

    pattern_text = os.environ.get("FROGGER_ROAD_PATTERN", "").strip()
    if pattern_text:
        road_section["pattern"] = pattern_text

    if road_section:
        updated_config["road"] = road_section
    return updated_config


def load_config(config_path: Optional[Path] = None) -> Tuple[AppConfig, Optional[Path]]:
    resolved_path = config_path if config_path is not None else _resolve_config_path()
    json_dict = _read_json_file_utf8(resolved_path) if resolved_path is not None else {}
    json_dict = _apply_environment_overrides(json_dict)

    try:
        config = AppConfig.model_validate(json_dict)
    except ValidationError as exception:
        source_text = str(resolved_path) if resolved_path is not None else "defaults"
        raise ValueError(f"Config validation failed for {source_text}:\n{exception}") from exception

    return config, resolved_path


@lru_cache(maxsize=1)
def get_config() -> Tuple[AppConfig, Optional[Path]]:
    return load_config()


def build_road(config: AppConfig) -> Road:
    return Road.from_pattern(config.road.pattern)


def build_records(config: AppConfig) -> Records:
    return Records.from_iterable(entry.to_frogger_id() for entry in config.records.initial)


def to_json(config: AppConfig) -> str:
    return json.dumps(config.model_dump(), ensure_ascii=False, indent=2)


def main() -> int:
    try:
        config, resolved_path = load_config()
    except Exception as exception:
        error_payload = {"ok": False, "error": str(exception)}
        print(json.dumps(error_payload, ensure_ascii=False, indent=2))
        return 2

    output_payload = {
        "ok": True,
        "config_path": str(resolved_path) if resolved_path is not None else None,
        "config": json.loads(to_json(config)),
    }
    print(json.dumps(output_payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
