from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from disksort.config import DEFAULTS, load_config, load_settings


def test_load_config_defaults_are_copied() -> None:
    cfg = load_config(None)
    assert cfg == DEFAULTS
    cfg["benchmark"]["sizes"].append(99)
    assert 99 not in DEFAULTS["benchmark"]["sizes"]


def test_load_config_merges_file_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "bench.yaml"
    path.write_text("benchmark:\n  sizes: [3, 5]\n  repeats: 7\n", encoding="utf-8")

    cfg = load_config(str(path), overrides={"benchmark": {"repeats": 2}})

    assert cfg["benchmark"]["sizes"] == [3, 5]
    assert cfg["benchmark"]["repeats"] == 2
    assert cfg["benchmark"]["algorithms"] == ["sequential", "lawnmower"]
    assert cfg["viz"]["out"] == DEFAULTS["viz"]["out"]


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("DISKSORT_LIGHT_COUNT", "7")
    monkeypatch.setenv("DISKSORT_ALGORITHM", "sequential")

    settings = load_settings()

    assert settings.light_count == 7
    assert settings.algorithm == "sequential"
    assert settings.log_level == "INFO"


def test_settings_reject_non_positive_light_count(monkeypatch) -> None:
    monkeypatch.setenv("DISKSORT_LIGHT_COUNT", "0")
    with pytest.raises(ValidationError):
        load_settings()
