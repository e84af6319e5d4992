"""Configuration helpers for environment settings and YAML run configs."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULTS: dict[str, Any] = {
    "benchmark": {
        "sizes": [1, 2, 4, 8, 16, 32],
        "algorithms": ["sequential", "lawnmower"],
        "repeats": 3,
    },
    "viz": {"out": "artifacts/swaps.png"},
}


def _merge_dict(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path | None, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    config = copy.deepcopy(DEFAULTS)
    if path:
        with Path(path).open("r", encoding="utf-8") as fh:
            file_cfg = yaml.safe_load(fh) or {}
        if not isinstance(file_cfg, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")
        config = _merge_dict(config, file_cfg)
    if overrides:
        config = _merge_dict(config, overrides)
    return config


class DiskSortSettings(BaseSettings):
    """Environment driven defaults for the command line driver."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    light_count: int = Field(default=4, ge=1, alias="DISKSORT_LIGHT_COUNT")
    algorithm: str = Field(default="lawnmower", alias="DISKSORT_ALGORITHM")
    log_level: str = Field(default="INFO", alias="DISKSORT_LOG_LEVEL")


def load_settings() -> DiskSortSettings:
    """Return settings initialised from environment."""

    return DiskSortSettings()
