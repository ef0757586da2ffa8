from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.delenv("FROGGER_CONFIG_PATH", raising=False)
    monkeypatch.delenv("FROGGER_ROAD_PATTERN", raising=False)
    candidate_path = tmp_path / "frogger_config.json"
    monkeypatch.setattr(config, "_default_config_candidates", lambda: [candidate_path])
    config.get_config.cache_clear()
    yield candidate_path
    config.get_config.cache_clear()
