from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path

_REGISTRY_KEY = "Environment"
_REGISTRY_VALUE = "Path"


def split_path_value(value: str, separator: str = os.pathsep) -> list[str]:
    return [part for part in value.split(separator) if part]


def read_path_entries(
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> list[str]:
    platform = platform or sys.platform
    if platform == "win32":
        return split_path_value(_read_windows_user_path(), ";")
    environ = os.environ if environ is None else environ
    return split_path_value(environ.get("PATH", ""))


def _read_windows_user_path() -> str:
    import winreg

    try:
        with winreg.OpenKey(winreg.HKEY_CURRENT_USER, _REGISTRY_KEY) as key:
            value, _ = winreg.QueryValueEx(key, _REGISTRY_VALUE)
    except OSError:
        return ""
    return value if isinstance(value, str) else ""


def detect_shell(environ: Mapping[str, str] | None = None) -> str | None:
    environ = os.environ if environ is None else environ
    shell = environ.get("SHELL", "").strip()
    if not shell:
        return None
    return Path(shell).name or None


def path_exists(text: str) -> bool:
    try:
        return Path(text).exists()
    except (OSError, ValueError):
        return False
