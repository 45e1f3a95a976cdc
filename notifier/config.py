"""Settings: YAML file with environment overrides."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_CONFIG = "config/config.yaml"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class Settings:
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    console_level: str | None = None


def _level(value: object, key: str) -> str:
    level = str(value).strip().upper()
    if level not in _LEVELS:
        raise ValueError(f"config: {key} must be one of {', '.join(_LEVELS)}, got {value!r}")
    return level


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from YAML; NOTIFIER_LOG_LEVEL / NOTIFIER_LOG_DIR override.

    With path=None the default file is optional; an explicit path must exist.
    """
    if path is None:
        cfg_path = Path(DEFAULT_CONFIG)
        data = _read_yaml(cfg_path) if cfg_path.exists() else {}
    else:
        cfg_path = Path(path)
        if not cfg_path.exists():
            raise FileNotFoundError(f"config not found: {cfg_path}")
        data = _read_yaml(cfg_path)

    log_cfg = data.get("logging") or {}
    if not isinstance(log_cfg, dict):
        raise ValueError("config: logging must be a dict")

    settings = Settings()
    level = os.environ.get("NOTIFIER_LOG_LEVEL") or log_cfg.get("level")
    if level:
        settings.log_level = _level(level, "logging.level")
    log_dir = os.environ.get("NOTIFIER_LOG_DIR") or log_cfg.get("dir")
    if log_dir:
        settings.log_dir = Path(log_dir)
    if log_cfg.get("console_level"):
        settings.console_level = _level(log_cfg["console_level"], "logging.console_level")
    logging.getLogger(__name__).debug("settings loaded from %s: %s", cfg_path, settings)
    return settings


def _read_yaml(path: Path) -> dict:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config: {path} must contain a mapping")
    return data
