from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .paths import config_path
from .shell_command import ShellKind

CONFIG_VERSION = 1

_SHELL_NAMES = {kind.value for kind in ShellKind}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class AppConfig:
    version: int = CONFIG_VERSION
    shell: str | None = None
    notify_missing: bool | None = None
    log_level: str | None = None

    @property
    def shell_kind(self) -> ShellKind | None:
        if self.shell is None:
            return None
        return ShellKind(self.shell)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level or "WARNING")


def load_config(path: Path | None = None) -> tuple[AppConfig, str | None]:
    path = path or config_path()
    if not path.exists():
        return AppConfig(), None
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        return AppConfig(), f"Failed to read config: {path} ({exc})"
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return AppConfig(), f"Config file is not valid JSON: {path}"
    if not isinstance(data, dict):
        return AppConfig(), f"Config file must be a JSON object: {path}"
    return _parse_config_data(data), None


def save_config(config: AppConfig, path: Path | None = None) -> str | None:
    path = path or config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return f"Failed to create config directory: {path.parent} ({exc})"
    payload = _config_to_dict(config)
    try:
        path.write_text(
            json.dumps(payload, ensure_ascii=True, indent=2),
            encoding="utf-8",
        )
    except OSError as exc:
        return f"Failed to write config: {path} ({exc})"
    return None


def _parse_config_data(data: dict[str, Any]) -> AppConfig:
    return AppConfig(
        version=_as_int(data.get("version")) or CONFIG_VERSION,
        shell=_as_choice(data.get("shell"), _SHELL_NAMES),
        notify_missing=_as_bool(data.get("notify_missing")),
        log_level=_as_choice(_upper(data.get("log_level")), _LOG_LEVELS),
    )


def _config_to_dict(config: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {"version": config.version}
    _set_if(data, "shell", config.shell)
    _set_if(data, "notify_missing", config.notify_missing)
    _set_if(data, "log_level", config.log_level)
    return data


def _set_if(data: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        data[key] = value


def _as_str(value: Any) -> str | None:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return None


def _upper(value: Any) -> Any:
    return value.upper() if isinstance(value, str) else value


def _as_choice(value: Any, choices: set[str]) -> str | None:
    text = _as_str(value)
    if text is None or text not in choices:
        return None
    return text


def _as_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    return None


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None
