"""Configuration loading for codextract (.codextract.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".codextract.yml"
DEFAULT_OUTPUT_DIR = "./extracted"
DEFAULT_WATCH_INTERVAL = 1.0


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class WatchConfig:
    """Polling settings for watch mode."""

    interval: float = DEFAULT_WATCH_INTERVAL


@dataclass
class ExtractConfig:
    """Represents the settings defined in .codextract.yml."""

    root: Path
    output_dir: str = DEFAULT_OUTPUT_DIR
    overwrite: bool = False
    prompt: bool = True
    watch: WatchConfig = field(default_factory=WatchConfig)
    log_file: Optional[Path] = None


def load_config(config_path: Path) -> ExtractConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ExtractConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = ExtractConfig(root=root)

    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config.output_dir = output_dir

    overwrite = _as_bool(data.get("overwrite"))
    if overwrite is not None:
        config.overwrite = overwrite

    prompt = _as_bool(data.get("prompt"))
    if prompt is not None:
        config.prompt = prompt

    watch_data = _as_dict(data.get("watch"))
    interval = _as_float(watch_data.get("interval"))
    if interval is not None and interval > 0:
        config.watch.interval = interval

    log_file = _as_str(data.get("log_file"))
    if log_file:
        config.log_file = root / log_file

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "ExtractConfig", "WatchConfig", "load_config"]
